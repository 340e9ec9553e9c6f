"""
Company branding for quotation PDFs — name, contact lines, bank details, colors.

Built-in defaults below; any key can be overridden from data/branding.json:

    {"company": {"phone": "+91 9999999999"}, "bank": {"account_no": "..."}}

Nested dicts are merged, so an override only has to name what changes.
"""

import copy
import json
import logging
import os

from reportlab.lib.colors import HexColor

log = logging.getLogger("branding")

try:
    from src.core.paths import BRANDING_PATH
except ImportError:
    BRANDING_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "data", "branding.json")

# ═══════════════════════════════════════════════════════════════════════════════
# THEME COLORS
# ═══════════════════════════════════════════════════════════════════════════════
THEME_BLUE   = HexColor("#0F3D66")   # title, info bar, page-number block
THEME_ORANGE = HexColor("#F28C00")   # title accent, contact bar
THEME_GREY   = HexColor("#6B6F73")   # subtitle
BLACK        = HexColor("#000000")
WHITE        = HexColor("#FFFFFF")

# ═══════════════════════════════════════════════════════════════════════════════
# COMPANY INFO
# ═══════════════════════════════════════════════════════════════════════════════
DEFAULT_BRANDING = {
    "company": {
        # Title is drawn as three segments: blue / orange / blue
        "title": ["NATHKRUPA", "BODY", "BUILDER"],
        "subtitle": "AND AUTO ACCESSORIES",
        "tagline": "All Kind of Accessories and Body Parts Original Body Dealers",
        "address": "Gat No. 379, Gavhanewadi, Pune-Nagar Road, Tal. Shrigonda, Dist. Ahmednagar",
        "phone": "9850523224",
        "gstin": "27AHXPT3625N1ZB",
        "email": "contact@nathkrupabody.com",
        "whatsapp": "+91 9850523224",
        "website": "www.nathkrupa.com",
        "signatory": "NATHKRUPA BODY BUILDER\nAND AUTO ACCESSORIES",
    },
    "bank": {
        "bank_branch": "Bank of Maharashtra, Shirur",
        "account_no": "60271451322",
        "ifsc": "MAHB0000254",
    },
    "currency": "Rs.",
}


def _merge(base: dict, override: dict) -> dict:
    out = copy.deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], val)
        else:
            out[key] = val
    return out


def load_branding(path: str = None) -> dict:
    """Defaults deep-merged with the JSON override file, if there is one.

    A missing file is normal. An unreadable or malformed one is logged and
    ignored so a bad edit never stops quotations going out.
    """
    path = path or BRANDING_PATH
    try:
        with open(path) as f:
            override = json.load(f)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_BRANDING)
    except (OSError, json.JSONDecodeError) as e:
        log.warning("Branding file %s unreadable, using defaults: %s", path, e)
        return copy.deepcopy(DEFAULT_BRANDING)
    if not isinstance(override, dict):
        log.warning("Branding file %s is not a JSON object, using defaults", path)
        return copy.deepcopy(DEFAULT_BRANDING)
    return _merge(DEFAULT_BRANDING, override)
