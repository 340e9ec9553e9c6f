"""
settings.py — Centralized Settings for the Quotation PDF Service

Single source of truth for every tunable the renderer reads.
Values come from environment variables and are read at call time,
so a test (or an operator) can change them without re-importing.

Env vars:
  QUOTE_LOGO_URL          — Company logo (URL or local path)
  QUOTE_WATERMARK_URL     — Watermark stamped on every page
  QUOTE_ICON_EMAIL_URL    — Contact bar e-mail icon
  QUOTE_ICON_PHONE_URL    — Contact bar phone icon
  QUOTE_ICON_WEB_URL      — Contact bar website icon
  QUOTE_ASSET_TIMEOUT     — Seconds to wait for a remote image
  QUOTE_MIN_TABLE_ROWS    — Minimum rows in the items table (blank padding)
  QUOTE_INFO_SPLIT        — Left column share of the info block (0..1)
  QUOTE_WATERMARK_OPACITY — Watermark alpha (0..1)
"""

import os
import logging

log = logging.getLogger("settings")

_S3 = "https://nathkrupa-unified-storage.s3.ap-south-1.amazonaws.com"
_ICONS = "https://cdn-icons-png.flaticon.com/128"

# ─── Setting Definitions ────────────────────────────────────────────────────

_REGISTRY = {
    # Brand images
    "logo_source": {
        "env": "QUOTE_LOGO_URL",
        "default": f"{_S3}/favicon.ico",
        "type": str,
        "desc": "Company logo drawn top-left of page 1",
    },
    "watermark_source": {
        "env": "QUOTE_WATERMARK_URL",
        "default": f"{_S3}/Nathkrupa+Body+Builder.png",
        "type": str,
        "desc": "Low-opacity watermark stamped on every page",
    },
    "icon_email": {
        "env": "QUOTE_ICON_EMAIL_URL",
        "default": f"{_ICONS}/732/732200.png",
        "type": str,
        "desc": "Contact bar e-mail icon",
    },
    "icon_phone": {
        "env": "QUOTE_ICON_PHONE_URL",
        "default": f"{_ICONS}/15713/15713434.png",
        "type": str,
        "desc": "Contact bar phone / WhatsApp icon",
    },
    "icon_web": {
        "env": "QUOTE_ICON_WEB_URL",
        "default": f"{_ICONS}/10453/10453141.png",
        "type": str,
        "desc": "Contact bar website icon",
    },
    "asset_timeout": {
        "env": "QUOTE_ASSET_TIMEOUT",
        "default": 5.0,
        "type": float,
        "desc": "Timeout (s) for fetching remote images",
    },
    # Layout constants
    "min_table_rows": {
        "env": "QUOTE_MIN_TABLE_ROWS",
        "default": 10,
        "type": int,
        "desc": "Items table is padded with blank rows up to this count",
    },
    "info_split": {
        "env": "QUOTE_INFO_SPLIT",
        "default": 0.65,
        "type": float,
        "desc": "Share of content width given to the customer column",
        "range": (0.2, 0.8),
    },
    "watermark_opacity": {
        "env": "QUOTE_WATERMARK_OPACITY",
        "default": 0.1,
        "type": float,
        "desc": "Watermark alpha",
        "range": (0.0, 1.0),
    },
}

ASSET_SETTINGS = ("logo_source", "watermark_source", "icon_email", "icon_phone", "icon_web")


# ─── Public API ──────────────────────────────────────────────────────────────

def _coerce(name: str, entry: dict, raw: str):
    try:
        val = entry["type"](raw)
    except (TypeError, ValueError):
        log.warning("Invalid %s=%r, using default %r", entry["env"], raw, entry["default"])
        return entry["default"]
    lo_hi = entry.get("range")
    if lo_hi and not (lo_hi[0] <= val <= lo_hi[1]):
        log.warning("%s=%r outside %s, using default %r",
                    entry["env"], raw, lo_hi, entry["default"])
        return entry["default"]
    if entry["type"] is int and val < 0:
        log.warning("%s must not be negative, using default %r", entry["env"], entry["default"])
        return entry["default"]
    return val


def get_setting(name: str):
    """Get a setting by registry name. Env var wins, then the registry default."""
    entry = _REGISTRY.get(name)
    if not entry:
        raise KeyError(f"Unknown setting: {name}")
    raw = os.environ.get(entry["env"], "")
    if raw == "":
        return entry["default"]
    return _coerce(name, entry, raw)


def asset_sources() -> dict:
    """{setting_name: source} for every image the renderer may draw."""
    return {name: get_setting(name) for name in ASSET_SETTINGS}


def validate_all() -> dict:
    """Settings report for the health endpoint."""
    results = {}
    for name, entry in _REGISTRY.items():
        overridden = bool(os.environ.get(entry["env"]))
        results[name] = {
            "env": entry["env"],
            "desc": entry["desc"],
            "value": get_setting(name),
            "overridden": overridden,
        }
    return {
        "settings": results,
        "total": len(results),
        "overridden": sum(1 for r in results.values() if r["overridden"]),
    }
