"""Quotation PDF generation.

Key exports:
    generate_quotation_pdf()  — Render a quotation to Quotation_<number>.pdf
    render_quotation_bytes()  — Same document, in memory
    number_to_words()         — Indian-style amount in words (lakh / crore)
    PageDecorator             — Watermark + border page renderer
"""
