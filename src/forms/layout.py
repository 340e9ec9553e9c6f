"""
Page geometry, the two-pass numbered canvas, and table pagination glue.

Positions are tracked top-down (a "cursor" in points from the top edge, the
way the layout reads); geo.y() converts to reportlab's bottom-up y at the
moment something is drawn.
"""

import logging

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus.doctemplate import LayoutError

log = logging.getLogger("quotation.layout")

MARGIN = 10 * mm
FOOTER_BAR_H = 8 * mm      # bottom contact bar
FOOTER_BAR_GAP = 1 * mm    # bar sits this far above the bottom border
CONTENT_GAP = 2 * mm       # clearance between content and bar / top border


class PageGeometry:
    """Fixed page metrics for one document. Nothing here changes per page."""

    def __init__(self, pagesize=A4, margin=MARGIN):
        self.width, self.height = pagesize
        self.margin = margin
        self.content_width = self.width - 2 * margin
        # top-origin limits for flowing content
        self.content_top = margin + CONTENT_GAP
        self.footer_bar_top = self.height - margin - FOOTER_BAR_GAP - FOOTER_BAR_H
        self.content_bottom = self.footer_bar_top - CONTENT_GAP

    def y(self, top: float) -> float:
        """Top-origin offset → reportlab y."""
        return self.height - top


class NumberedCanvas(canvas.Canvas):
    """Canvas that holds every page until save().

    Page count is unknown while content flows, so finalize_page(c, page, count)
    runs for each page in save(), once the total is known.
    """

    def __init__(self, *args, finalize_page=None, **kwargs):
        canvas.Canvas.__init__(self, *args, **kwargs)
        self._saved_page_states = []
        self._finalize_page = finalize_page

    @property
    def page_count(self) -> int:
        return len(self._saved_page_states)

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        page_count = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            if self._finalize_page:
                self._finalize_page(self, self.getPageNumber(), page_count)
            canvas.Canvas.showPage(self)
        canvas.Canvas.save(self)


def new_page(c, geo: PageGeometry, renderer) -> float:
    """Close the current page (firing the renderer hooks) and return the fresh cursor."""
    renderer.on_page_end(c, geo)
    c.showPage()
    renderer.on_page_start(c, geo)
    return geo.content_top


def draw_flowable(c, flowable, cursor: float, geo: PageGeometry, renderer,
                  allow_split: bool = True) -> float:
    """Draw a platypus Table (or any flowable) at the cursor, full content width.

    Splits across pages when allowed; otherwise moves the whole block to a new
    page if it doesn't fit. Returns the cursor just below the last part drawn.
    Raises LayoutError when a part can't fit even on an empty page.
    """
    width = geo.content_width
    pending = [flowable]
    while pending:
        part = pending.pop(0)
        avail = geo.content_bottom - cursor
        _, h = part.wrapOn(c, width, avail)
        if h <= avail:
            part.drawOn(c, geo.margin, geo.y(cursor) - h)
            cursor += h
            continue

        pieces = part.split(width, avail) if allow_split and avail > 0 else []
        if len(pieces) >= 2:
            first = pieces[0]
            _, fh = first.wrapOn(c, width, avail)
            first.drawOn(c, geo.margin, geo.y(cursor) - fh)
            pending = list(pieces[1:]) + pending
        elif cursor <= geo.content_top:
            raise LayoutError(
                f"{part.__class__.__name__} needs {h:.1f}pt but a page only has {avail:.1f}pt")
        else:
            pending.insert(0, part)
        cursor = new_page(c, geo, renderer)
        log.debug("Page break → page %d", c.getPageNumber())
    return cursor
