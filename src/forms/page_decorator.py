"""
Per-page decorations for quotation PDFs: watermark, border, bottom contact bar.

The composer and the table pagination code only ever talk to a renderer
through three hooks:

    renderer.begin_document()             — a new document is about to start
    renderer.on_page_start(canvas, geo)   — a fresh page has begun
    renderer.on_page_end(canvas, geo)     — the page is about to be closed

PageRenderer does nothing (plain pages, handy in tests). PageDecorator stamps
the watermark and border. Both hooks may fire more than once for a page; the
watermark is only stamped once per page, the border is always redrawn.
"""

import logging

from reportlab.lib.units import mm

from src.forms.assets import place_image
from src.forms.branding import BLACK, WHITE, THEME_BLUE, THEME_ORANGE
from src.forms.layout import FOOTER_BAR_H

log = logging.getLogger("quotation.decorator")

WATERMARK_W = 140 * mm
WATERMARK_H = 60 * mm
BORDER_WIDTH = 1            # points
PAGE_NUM_BLOCK_W = 30 * mm
ICON_SIZE = 4 * mm


class PageRenderer:
    """No-op renderer: pages get no border and no watermark."""

    def begin_document(self):
        pass

    def on_page_start(self, c, geo):
        pass

    def on_page_end(self, c, geo):
        pass


class PageDecorator(PageRenderer):
    """Watermark + border on every page the hooks are fired for."""

    def __init__(self, watermark: dict = None, opacity: float = 0.1):
        self.watermark = watermark or {"ok": False, "asset": "watermark_source",
                                       "error": "no watermark"}
        self.opacity = opacity
        self.begin_document()

    def begin_document(self):
        # page numbers restart at 1, so per-page bookkeeping must too
        self.placements = []
        self._stamped = set()

    def on_page_end(self, c, geo):
        self.decorate(c, geo)

    def decorate(self, c, geo):
        page = c.getPageNumber()
        if page not in self._stamped:
            self._stamped.add(page)
            self.placements.append(self._draw_watermark(c, geo))
        draw_border(c, geo)

    def _draw_watermark(self, c, geo) -> dict:
        set_alpha = getattr(c, "setFillAlpha", None)
        if set_alpha is None:
            return {"ok": False, "asset": self.watermark.get("asset", "watermark_source"),
                    "error": "canvas has no alpha support"}
        x = (geo.width - WATERMARK_W) / 2
        y = (geo.height - WATERMARK_H) / 2
        c.saveState()
        set_alpha(self.opacity)
        try:
            result = place_image(c, self.watermark, x, y, WATERMARK_W, WATERMARK_H)
        finally:
            set_alpha(1.0)
            c.restoreState()
        return result


def draw_border(c, geo):
    """Black rectangle inset by the page margin. Always drawn."""
    c.saveState()
    c.setStrokeColor(BLACK)
    c.setLineWidth(BORDER_WIDTH)
    c.rect(geo.margin, geo.margin, geo.content_width, geo.height - 2 * geo.margin,
           fill=0, stroke=1)
    c.restoreState()


def draw_contact_bar(c, geo, page: int, page_count: int, company: dict, icons: dict) -> list:
    """Orange contact bar + blue "page/count" block along the bottom border.

    icons: {"email": asset, "phone": asset, "web": asset} load results.
    Returns the icon placement results.
    """
    placements = []
    bar_top = geo.footer_bar_top
    bar_h = FOOTER_BAR_H
    rl_bottom = geo.y(bar_top) - bar_h
    baseline = geo.y(bar_top + 5.5 * mm)

    c.saveState()

    # Orange bar
    c.setFillColor(THEME_ORANGE)
    c.rect(geo.margin, rl_bottom, geo.content_width - PAGE_NUM_BLOCK_W, bar_h, fill=1, stroke=0)

    # Blue page-number block
    block_x = geo.width - geo.margin - PAGE_NUM_BLOCK_W
    c.setFillColor(THEME_BLUE)
    c.rect(block_x, rl_bottom, PAGE_NUM_BLOCK_W, bar_h, fill=1, stroke=0)
    c.setFillColor(WHITE)
    c.setFont("Helvetica", 9)
    c.drawCentredString(block_x + PAGE_NUM_BLOCK_W / 2, baseline, f"{page}/{page_count}")

    # Contact items: icon, text, "|" between items
    items = [
        ("email", company.get("email", "")),
        ("phone", company.get("whatsapp", "") or company.get("phone", "")),
        ("web", company.get("website", "")),
    ]
    items = [(key, txt) for key, txt in items if txt]
    icon_y = geo.y(bar_top + 2 * mm) - ICON_SIZE
    next_x = geo.margin + 5 * mm
    for i, (key, txt) in enumerate(items):
        asset = icons.get(key) or {"ok": False, "asset": key, "error": "no icon"}
        placements.append(place_image(c, asset, next_x, icon_y, ICON_SIZE, ICON_SIZE))
        c.setFillColor(WHITE)
        c.setFont("Helvetica", 9)
        c.drawString(next_x + ICON_SIZE + 2 * mm, baseline, txt)
        next_x += ICON_SIZE + 2 * mm + c.stringWidth(txt, "Helvetica", 9) + 8 * mm
        if i < len(items) - 1:
            c.drawString(next_x - 4 * mm, baseline, "|")

    c.restoreState()
    return placements
