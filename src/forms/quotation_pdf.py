"""
Nathkrupa Quotation PDF Generator
==================================
Branded A4 quotation PDFs from the backend's quotation record.

Layout, top to bottom:
  - Header: logo, three-color title, subtitle, tagline pill, contact lines
  - QUOTATION INFO: customer column (65%) | quotation/vehicle column (35%)
  - Items table, padded to 10 rows, header repeated on continuation pages
  - Totals: amount in words | Total Amount / Discount / G. TOTAL
  - Footer: bank details | received sign | authorised signatory
  - Every page: watermark, border, orange contact bar with "page/total"

Usage:
    from src.forms.quotation_pdf import generate_quotation_pdf
    result = generate_quotation_pdf(quotation)   # → output/Quotation_<no>.pdf
    result = render_quotation(quotation)         # in memory, bytes under "pdf"

Each layout block takes the cursor (points from the top edge) and returns the
cursor below what it drew. Output is byte-for-byte repeatable for the same
input and the same image availability.
"""

import io
import math
import os
import logging
import tempfile
from datetime import date, datetime
from decimal import Decimal
from xml.sax.saxutils import escape

from dateutil import parser as date_parser
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.platypus import Paragraph, Table, TableStyle

from logging_config import timed
from src.core.settings import asset_sources, get_setting
from src.forms.assets import load_assets, place_image
from src.forms.branding import (load_branding, BLACK, WHITE, THEME_BLUE,
                                THEME_ORANGE, THEME_GREY)
from src.forms.layout import NumberedCanvas, PageGeometry, draw_flowable, new_page
from src.forms.number_words import amount_in_words
from src.forms.page_decorator import PageDecorator, draw_contact_bar

log = logging.getLogger("quotation_pdf")

try:
    from src.core.paths import OUTPUT_DIR
except ImportError:
    OUTPUT_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "output")

# ═══════════════════════════════════════════════════════════════════════════════
# TABLE LAYOUT
# ═══════════════════════════════════════════════════════════════════════════════
ITEM_HEADERS = ["Sr.No", "Particulars", "HSN Code", "Qty.", "Rate", "Amount"]
ITEM_FIXED_WIDTHS = [15 * mm, None, 20 * mm, 15 * mm, 25 * mm, 25 * mm]   # None = takes the rest
ITEM_ALIGN = ["CENTER", "LEFT", "CENTER", "CENTER", "RIGHT", "RIGHT"]
TOTALS_WIDTHS = [None, 40 * mm, 30 * mm]
FOOTER_WIDTHS = [80 * mm, 50 * mm, None]
GRID_WIDTH = 0.1 * mm
RULE_WIDTH = 0.5 * mm
LABEL_OFFSET = 35 * mm
LINE_H = 5 * mm

CELL_STYLE = ParagraphStyle("cell", fontName="Helvetica", fontSize=9, leading=11)
WORDS_STYLE = ParagraphStyle("words", fontName="Helvetica-Bold", fontSize=10, leading=12)
FOOTER_STYLE = ParagraphStyle("footer", fontName="Helvetica", fontSize=8, leading=10)
FOOTER_CENTER = ParagraphStyle("footer_c", parent=FOOTER_STYLE, alignment=TA_CENTER)


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS: input coercion
# ═══════════════════════════════════════════════════════════════════════════════

def _num(value):
    """Float, or None for absent / empty / zero / non-numeric / non-finite values."""
    if value is None or value == "":
        return None
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(n):
        return None
    return n or None


def _fmt2(value) -> str:
    n = _num(value)
    return f"{n:.2f}" if n is not None else ""


def _fmt_qty(value) -> str:
    n = _num(value)
    if n is None:
        return ""
    if n.is_integer():
        return str(int(n))
    # shortest round-trip digits, never in exponent form
    return format(Decimal(repr(n)), "f")


def _name_of(obj) -> str:
    return str((obj or {}).get("name") or "") if isinstance(obj, dict) else ""


def _format_date(value) -> str:
    """DD/MM/YYYY; unparseable strings are shown as given."""
    if not value:
        return ""
    if isinstance(value, (datetime, date)):
        return value.strftime("%d/%m/%Y")
    try:
        return date_parser.parse(str(value)).strftime("%d/%m/%Y")
    except (ValueError, OverflowError):
        log.warning("Unparseable quotation date %r", value)
        return str(value)


def item_description(feature: dict) -> str:
    """custom_name → feature type → feature category → "Feature"."""
    return (feature.get("custom_name")
            or _name_of(feature.get("feature_type"))
            or _name_of(feature.get("feature_category"))
            or "Feature")


def normalize_quotation(data: dict) -> dict:
    """Flatten the backend record into what the layout draws. Input is not modified."""
    customer = data.get("customer") or {}
    vehicle = " ".join(p for p in (_name_of(data.get("vehicle_maker")),
                                   _name_of(data.get("vehicle_model"))) if p)
    items = []
    for f in data.get("features") or []:
        items.append({
            "description": item_description(f),
            "hsn_code": str((f.get("feature_type") or {}).get("hsn_code") or ""),
            "quantity": f.get("quantity"),
            "unit_price": f.get("unit_price"),
            "total_price": f.get("total_price"),
        })
    return {
        "quotation_number": str(data.get("quotation_number") or ""),
        "date": _format_date(data.get("quotation_date") or data.get("created_at")),
        "customer_name": str(customer.get("name") or data.get("customer_name") or ""),
        "address": str(customer.get("address") or ""),
        "gstin": str(customer.get("gstin") or ""),
        "place_of_supply": str(data.get("place_of_supply") or ""),
        "vehicle": vehicle,
        "vehicle_number": str(data.get("vehicle_number") or ""),
        "items": items,
        "final_total": data.get("final_total"),
        "discounts": data.get("discounts") or [],
    }


def build_item_rows(items: list, min_rows: int = 10) -> list:
    """Table body as strings: one row per item in input order, blank rows up to min_rows."""
    rows = [[
        str(idx + 1),
        it["description"],
        it["hsn_code"],
        _fmt_qty(it["quantity"]),
        _fmt2(it["unit_price"]),
        _fmt2(it["total_price"]),
    ] for idx, it in enumerate(items)]
    while len(rows) < min_rows:
        rows.append([""] * len(ITEM_HEADERS))
    return rows


def _discount_total(discounts) -> float:
    total = 0.0
    for d in discounts or []:
        if isinstance(d, dict):
            d = d.get("amount", d.get("discount_amount", d.get("value")))
        total += _num(d) or 0.0
    return total


def compute_totals(quote: dict) -> dict:
    """Item sum, discount and grand total for a normalized quotation.

    An explicit non-zero final_total wins; otherwise the grand total is the
    item sum less any discounts. The grand total never drops below zero: a
    derived total caps the discount at the item sum, and a negative explicit
    total reads as zero. Total Amount is always grand + discount so the three
    figures add up on the page.
    """
    item_sum = sum(_num(it["total_price"]) or 0.0 for it in quote["items"])
    discount = _discount_total(quote["discounts"])
    grand = _num(quote["final_total"])
    if grand is None:
        if discount > item_sum:
            log.warning("Discount %.2f exceeds item total %.2f, capped", discount, item_sum)
            discount = max(item_sum, 0.0)
        grand = item_sum - discount
    elif grand < 0:
        log.warning("Negative final_total %.2f shown as zero", grand)
        grand = 0.0
    grand = round(max(grand, 0.0), 2)
    return {
        "item_sum": round(item_sum, 2),
        "subtotal": round(grand + discount, 2),
        "discount": round(discount, 2),
        "grand_total": grand,
        "amount_in_words": amount_in_words(grand),
    }


def quotation_filename(quotation_number: str) -> str:
    """Quotation_<number>.pdf with path separators made safe."""
    safe = (quotation_number or "DRAFT").strip()
    for sep in ("/", "\\"):
        safe = safe.replace(sep, "-")
    return f"Quotation_{safe or 'DRAFT'}.pdf"


def _col_widths(fixed: list, total: float) -> list:
    rest = total - sum(w for w in fixed if w)
    return [w if w else rest for w in fixed]


def _para(text: str, style) -> Paragraph:
    return Paragraph(escape(text).replace("\n", "<br/>"), style)


# ═══════════════════════════════════════════════════════════════════════════════
# LAYOUT BLOCKS: each (c, cursor, geo, ctx) → new cursor
# ═══════════════════════════════════════════════════════════════════════════════

def draw_header(c, cursor, geo, ctx) -> float:
    """Logo, centred three-color title, subtitle, tagline pill, contact lines."""
    company = ctx["brand"]["company"]
    center_x = geo.width / 2
    y = cursor + 5 * mm

    ctx["placements"].append(place_image(
        c, ctx["assets"]["logo_source"], geo.margin + 2 * mm, geo.y(y) - 22 * mm, 35 * mm, 22 * mm))

    # Title: segments measured separately so the whole line centres
    segments = company["title"]
    colors = [THEME_BLUE, THEME_ORANGE, THEME_BLUE]
    c.setFont("Helvetica-Bold", 22)
    space_w = c.stringWidth(" ", "Helvetica-Bold", 22)
    widths = [c.stringWidth(s, "Helvetica-Bold", 22) for s in segments]
    x = (geo.width - (sum(widths) + space_w * (len(segments) - 1))) / 2
    for i, (seg, w) in enumerate(zip(segments, widths)):
        c.setFillColor(colors[i % len(colors)])
        c.drawString(x, geo.y(y + 8 * mm), seg)
        x += w + space_w

    y += 16 * mm
    c.setFont("Helvetica-Bold", 14)
    c.setFillColor(THEME_GREY)
    c.drawCentredString(center_x, geo.y(y), company["subtitle"])

    # Tagline pill
    y += 10 * mm
    c.setFont("Helvetica-Bold", 9)
    pill_w = max(110 * mm, c.stringWidth(company["tagline"], "Helvetica-Bold", 9) + 6 * mm)
    pill_h = 7 * mm
    c.setStrokeColor(THEME_BLUE)
    c.setLineWidth(0.2 * mm)
    c.roundRect((geo.width - pill_w) / 2, geo.y(y - 5 * mm) - pill_h, pill_w, pill_h,
                3 * mm, stroke=1, fill=0)
    c.setFillColor(THEME_BLUE)
    c.drawCentredString(center_x, geo.y(y - 0.5 * mm), company["tagline"])

    y += 8 * mm
    c.setFillColor(BLACK)
    c.setFont("Helvetica", 9)
    c.drawCentredString(center_x, geo.y(y), company["address"])
    y += 5 * mm
    c.setFont("Helvetica-Bold", 9)
    c.drawCentredString(center_x, geo.y(y),
                        f"Mob: {company['phone']} | GSTIN: {company['gstin']} | Email: {company['email']}")
    return y + 8 * mm


def draw_label_value(c, geo, label: str, value: str, x: float, top: float, max_w: float) -> float:
    """Bold label, wrapped value beside it. Returns the height used (at least one line)."""
    c.setFont("Helvetica-Bold", 10)
    c.drawString(x, geo.y(top), label)
    c.setFont("Helvetica", 10)
    lines = simpleSplit(value or "", "Helvetica", 10, max_w)
    for i, line in enumerate(lines):
        c.drawString(x + LABEL_OFFSET, geo.y(top + i * LINE_H), line)
    return max(LINE_H, len(lines) * LINE_H)


def draw_info_block(c, cursor, geo, ctx) -> float:
    """QUOTATION INFO bar, then customer | quotation columns split by a divider."""
    quote = ctx["quote"]
    bar_h = 8 * mm

    c.setFillColor(THEME_BLUE)
    c.rect(geo.margin, geo.y(cursor) - bar_h, geo.content_width, bar_h, fill=1, stroke=0)
    c.setStrokeColor(BLACK)
    c.setLineWidth(RULE_WIDTH)
    c.line(geo.margin, geo.y(cursor), geo.width - geo.margin, geo.y(cursor))
    c.line(geo.margin, geo.y(cursor + bar_h), geo.width - geo.margin, geo.y(cursor + bar_h))
    c.setFillColor(WHITE)
    c.setFont("Helvetica-Bold", 12)
    # vertically centred: baseline sits half a cap-height below the bar's middle
    c.drawCentredString(geo.width / 2, geo.y(cursor + bar_h / 2 + 0.35 * 12), "QUOTATION INFO")
    cursor += bar_h

    col1_x = geo.margin + 2 * mm
    divider_x = geo.margin + geo.content_width * ctx["info_split"]
    col2_x = divider_x + 5 * mm
    left_max_w = (divider_x - col1_x) - 38 * mm
    right_max_w = (geo.width - geo.margin) - col2_x - LABEL_OFFSET - 2 * mm

    c.setFillColor(BLACK)
    start = cursor + 5 * mm
    left = right = start
    for label, value in (("M/s. :", quote["customer_name"]),
                         ("Address :", quote["address"]),
                         ("Place of Supply :", quote["place_of_supply"]),
                         ("GSTIN No. :", quote["gstin"])):
        left += draw_label_value(c, geo, label, value, col1_x, left, left_max_w)
    for label, value in (("Quotation No. :", quote["quotation_number"]),
                         ("Date :", quote["date"]),
                         ("Vehicle :", quote["vehicle"]),
                         ("Vehicle No. :", quote["vehicle_number"])):
        right += draw_label_value(c, geo, label, value, col2_x, right, right_max_w)

    end = max(left, right) + 2 * mm
    c.setStrokeColor(BLACK)
    c.setLineWidth(RULE_WIDTH)
    c.line(divider_x, geo.y(cursor), divider_x, geo.y(end))
    c.line(geo.margin, geo.y(end), geo.width - geo.margin, geo.y(end))
    return end + 2 * mm


def build_items_table(rows: list, width: float) -> Table:
    # Particulars is the only column that wraps
    body = [[r[0], _para(r[1], CELL_STYLE) if r[1] else ""] + r[2:] for r in rows]
    table = Table([ITEM_HEADERS] + body, colWidths=_col_widths(ITEM_FIXED_WIDTHS, width),
                  repeatRows=1)
    style = [
        ("FONT", (0, 0), (-1, -1), "Helvetica", 9),
        ("FONT", (0, 0), (-1, 0), "Helvetica-Bold", 9),
        ("TEXTCOLOR", (0, 0), (-1, -1), BLACK),
        ("BACKGROUND", (0, 0), (-1, 0), WHITE),
        ("ALIGN", (0, 0), (-1, 0), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("GRID", (0, 0), (-1, -1), GRID_WIDTH, BLACK),
    ]
    for col, align in enumerate(ITEM_ALIGN):
        style.append(("ALIGN", (col, 1), (col, -1), align))
    table.setStyle(TableStyle(style))
    return table


def draw_items_table(c, cursor, geo, ctx) -> float:
    """Items grid; breaks across pages, decorating each page it leaves."""
    table = build_items_table(ctx["rows"], geo.content_width)
    return draw_flowable(c, table, cursor, geo, ctx["renderer"], allow_split=True)


def build_totals_table(totals: dict, currency: str, width: float) -> Table:
    data = [
        [_para(f"{currency} in Words : {totals['amount_in_words']}", WORDS_STYLE),
         "Total Amount:", f"{currency} {totals['subtotal']:.2f}"],
        ["", "Discount", f"{currency} {totals['discount']:.2f}"],
        ["", "G. TOTAL", f"{currency} {totals['grand_total']:.2f}"],
    ]
    table = Table(data, colWidths=_col_widths(TOTALS_WIDTHS, width))
    table.setStyle(TableStyle([
        ("FONT", (0, 0), (-1, -1), "Helvetica", 10),
        ("FONT", (1, 2), (2, 2), "Helvetica-Bold", 10),
        ("TEXTCOLOR", (0, 0), (-1, -1), BLACK),
        ("SPAN", (0, 0), (0, 2)),
        ("VALIGN", (0, 0), (0, 2), "MIDDLE"),
        ("ALIGN", (1, 0), (1, -1), "LEFT"),
        ("ALIGN", (2, 0), (2, -1), "RIGHT"),
        ("GRID", (0, 0), (-1, -1), GRID_WIDTH, BLACK),
    ]))
    return table


def draw_totals(c, cursor, geo, ctx) -> float:
    """Words | totals grid, attached to the table above; never split."""
    table = build_totals_table(ctx["totals"], ctx["brand"]["currency"], geo.content_width)
    return draw_flowable(c, table, cursor, geo, ctx["renderer"], allow_split=False)


def build_footer_table(brand: dict, width: float) -> Table:
    bank, company = brand["bank"], brand["company"]
    bold = ParagraphStyle("footer_b", parent=FOOTER_STYLE, fontName="Helvetica-Bold")
    bold_c = ParagraphStyle("footer_bc", parent=FOOTER_CENTER, fontName="Helvetica-Bold")
    data = [
        [_para("Bank Details :", bold), _para("Received Sign.", bold_c),
         _para(company["signatory"], bold_c)],
        [_para(f"Bank & Branch : {bank['bank_branch']}", FOOTER_STYLE), "", ""],
        [_para(f"Account No.: {bank['account_no']}", FOOTER_STYLE), "",
         _para("Authorised Signatory", FOOTER_CENTER)],
        [_para(f"IFSC Code : {bank['ifsc']}", FOOTER_STYLE), "", ""],
    ]
    table = Table(data, colWidths=_col_widths(FOOTER_WIDTHS, width))
    pad = 1 * mm
    table.setStyle(TableStyle([
        ("FONT", (0, 0), (-1, -1), "Helvetica", 8),
        ("SPAN", (2, 2), (2, 3)),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("VALIGN", (2, 2), (2, 3), "BOTTOM"),
        ("LEFTPADDING", (0, 0), (-1, -1), pad),
        ("RIGHTPADDING", (0, 0), (-1, -1), pad),
        ("TOPPADDING", (0, 0), (-1, -1), pad),
        ("BOTTOMPADDING", (0, 0), (-1, -1), pad),
    ]))
    return table


def draw_footer(c, cursor, geo, ctx) -> float:
    """Borderless bank | sign | signatory grid, then its rules drawn by hand."""
    cursor += 5 * mm
    table = build_footer_table(ctx["brand"], geo.content_width)
    _, h = table.wrapOn(c, geo.content_width, geo.content_bottom - cursor)
    if h > geo.content_bottom - cursor:
        cursor = new_page(c, geo, ctx["renderer"])
    start = cursor
    end = draw_flowable(c, table, cursor, geo, ctx["renderer"], allow_split=False)

    c.setStrokeColor(BLACK)
    c.setLineWidth(GRID_WIDTH)
    c.line(geo.margin, geo.y(start), geo.width - geo.margin, geo.y(start))
    c.line(geo.margin, geo.y(end), geo.width - geo.margin, geo.y(end))
    x1 = geo.margin + FOOTER_WIDTHS[0]
    x2 = x1 + FOOTER_WIDTHS[1]
    for x in (x1, x2):
        c.line(x, geo.y(start), x, geo.y(end))
    return end


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN PDF GENERATOR
# ═══════════════════════════════════════════════════════════════════════════════

def _compose(data: dict, out, branding: dict = None, renderer=None) -> dict:
    """Lay out one quotation onto `out` (path or file object). Returns the summary."""
    geo = PageGeometry(A4)
    brand = branding or load_branding()
    quote = normalize_quotation(data)
    totals = compute_totals(quote)
    rows = build_item_rows(quote["items"], get_setting("min_table_rows"))
    assets = load_assets(asset_sources(), timeout=get_setting("asset_timeout"))
    if renderer is None:
        renderer = PageDecorator(assets["watermark_source"], get_setting("watermark_opacity"))
    renderer.begin_document()

    ctx = {
        "quote": quote,
        "brand": brand,
        "totals": totals,
        "rows": rows,
        "assets": assets,
        "renderer": renderer,
        "info_split": get_setting("info_split"),
        "placements": [],
    }
    icons = {"email": assets["icon_email"], "phone": assets["icon_phone"],
             "web": assets["icon_web"]}

    def finalize_page(c, page, page_count):
        ctx["placements"].extend(
            draw_contact_bar(c, geo, page, page_count, brand["company"], icons))
        renderer.on_page_end(c, geo)

    c = NumberedCanvas(out, pagesize=A4, invariant=1, finalize_page=finalize_page)
    c.setTitle(f"Quotation {quote['quotation_number']}")
    c.setAuthor(" ".join(brand["company"]["title"]))
    c.setSubject(quote["customer_name"])

    renderer.on_page_start(c, geo)
    cursor = geo.margin
    for block in (draw_header, draw_info_block, draw_items_table, draw_totals, draw_footer):
        cursor = block(c, cursor, geo, ctx)
    renderer.on_page_end(c, geo)
    c.showPage()
    c.save()

    placements = ctx["placements"] + list(getattr(renderer, "placements", []))
    return {
        "ok": True,
        "quotation_number": quote["quotation_number"],
        "pages": c.page_count,
        "items_count": len(quote["items"]),
        "table_rows": len(rows),
        "subtotal": totals["subtotal"],
        "discount": totals["discount"],
        "grand_total": totals["grand_total"],
        "amount_in_words": totals["amount_in_words"],
        "skipped_assets": sorted({p["asset"] for p in placements if not p["ok"]}),
    }


def render_quotation(data: dict, branding: dict = None, renderer=None) -> dict:
    """Render a quotation in memory. Nothing touches the disk.

    Returns the summary plus "filename" (Quotation_<number>.pdf) and "pdf"
    (the document bytes).
    """
    number = str(data.get("quotation_number") or "")
    buf = io.BytesIO()
    with timed(log, f"Quotation {number or 'DRAFT'} rendered",
               quotation_number=number, items=len(data.get("features") or [])) as fields:
        result = _compose(data, buf, branding=branding, renderer=renderer)
        fields.update(pages=result["pages"], grand_total=result["grand_total"])

    if result["skipped_assets"]:
        log.warning("Quotation %s rendered without: %s", result["quotation_number"],
                    ", ".join(result["skipped_assets"]))
    result["filename"] = quotation_filename(number)
    result["pdf"] = buf.getvalue()
    return result


def _write_atomic(path: str, payload: bytes):
    """Write via a private temp file + os.replace; readers never see a partial PDF."""
    fd, tmp = tempfile.mkstemp(dir=os.path.dirname(path), suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        os.replace(tmp, path)
    except OSError:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


def generate_quotation_pdf(data: dict, output_dir: str = "", branding: dict = None,
                           renderer=None) -> dict:
    """Render a quotation to <output_dir>/Quotation_<number>.pdf.

    Args:
        data: quotation record (quotation_number, customer, features, final_total, ...)
        output_dir: where to write (default: OUTPUT_DIR)
        branding: company/bank overrides (default: load_branding())
        renderer: page renderer (default: PageDecorator with the watermark)

    Returns:
        {"ok", "path", "filename", "pages", "grand_total", "amount_in_words",
         "skipped_assets", ...}
    """
    output_dir = output_dir or OUTPUT_DIR
    os.makedirs(output_dir, exist_ok=True)

    result = render_quotation(data, branding=branding, renderer=renderer)
    output_path = os.path.join(output_dir, result["filename"])
    _write_atomic(output_path, result.pop("pdf"))
    result["path"] = output_path

    log.info("Quotation %s saved: Rs. %.2f, %d pages → %s",
             result["quotation_number"], result["grand_total"], result["pages"], output_path,
             extra={"quotation_number": result["quotation_number"],
                    "pages": result["pages"], "grand_total": result["grand_total"]})
    return result


def render_quotation_bytes(data: dict, branding: dict = None, renderer=None) -> bytes:
    """Same document as generate_quotation_pdf, bytes only."""
    return render_quotation(data, branding=branding, renderer=renderer)["pdf"]


# ═══════════════════════════════════════════════════════════════════════════════
# SELF-TEST
# ═══════════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sample = {
        "quotation_number": "QT-2024-0042",
        "quotation_date": "2024-05-14",
        "customer": {"name": "Shree Ganesh Transport",
                     "address": "Plot 12, MIDC Ranjangaon, Tal. Shirur, Dist. Pune 412220",
                     "gstin": "27ABCDE1234F1Z5"},
        "place_of_supply": "Maharashtra (27)",
        "vehicle_maker": {"name": "Tata"},
        "vehicle_model": {"name": "LPT 1613"},
        "vehicle_number": "MH 16 AY 4521",
        "features": [
            {"custom_name": "Full steel body, 17 ft, with side hinged doors",
             "feature_type": {"name": "Body", "hsn_code": "8707"},
             "quantity": 1, "unit_price": "185000", "total_price": "185000"},
            {"feature_type": {"name": "Rear bumper", "hsn_code": "8708"},
             "quantity": 1, "unit_price": 6500, "total_price": 6500},
            {"feature_category": {"id": 3, "name": "Paint & lettering"},
             "quantity": 1, "unit_price": 12000, "total_price": 12000},
        ],
    }
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(message)s")
    r = generate_quotation_pdf(sample)
    print(f"{r['filename']}: Rs. {r['grand_total']:,.2f} ({r['amount_in_words']}), "
          f"{r['pages']} page(s) → {r['path']}")
    if r["skipped_assets"]:
        print(f"Skipped images: {', '.join(r['skipped_assets'])}")
