"""
Nathkrupa Quotations — Branded quotation PDF service

Packages:
    api/        Flask routes (render / health)
    forms/      Quotation PDF layout, page decorations, amount in words
    core/       Shared paths and settings
"""
