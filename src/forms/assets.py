"""
Best-effort image loading for quotation PDFs.

Every image (logo, watermark, contact icons) is resolved once per document,
before layout starts. A load or draw never raises: callers get a result dict

    {"ok": True,  "asset": "logo_source", ...}
    {"ok": False, "asset": "logo_source", "error": "..."}

and the layout carries on with that element simply absent.
"""

import io
import logging

import requests
from reportlab.lib.utils import ImageReader

log = logging.getLogger("quotation.assets")


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def load_image(name: str, source: str, timeout: float = 5.0) -> dict:
    """Fetch (URL) or open (local path) one image and decode it."""
    if not source:
        return {"ok": False, "asset": name, "source": source, "error": "no source configured"}
    try:
        if _is_url(source):
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
            img = ImageReader(io.BytesIO(resp.content))
        else:
            img = ImageReader(source)
        img.getSize()  # forces a decode so corrupt files fail here, not mid-page
    except Exception as e:
        log.warning("Image %s unavailable (%s): %s", name, source, e, extra={"asset": name})
        return {"ok": False, "asset": name, "source": source, "error": str(e)}
    return {"ok": True, "asset": name, "source": source, "image": img}


def load_assets(sources: dict, timeout: float = 5.0) -> dict:
    """{name: source} → {name: load result}."""
    return {name: load_image(name, src, timeout=timeout) for name, src in sources.items()}


def place_image(c, asset: dict, x: float, y: float, w: float, h: float) -> dict:
    """Draw a loaded image at (x, y) bottom-left, stretched to w × h.

    Returns the placement result; a missing or undrawable image is skipped.
    """
    name = asset.get("asset", "?")
    if not asset.get("ok"):
        return {"ok": False, "asset": name, "error": asset.get("error", "not loaded")}
    try:
        c.drawImage(asset["image"], x, y, width=w, height=h, mask="auto")
    except Exception as e:
        log.warning("Image %s could not be drawn: %s", name, e, extra={"asset": name})
        return {"ok": False, "asset": name, "error": str(e)}
    return {"ok": True, "asset": name}
