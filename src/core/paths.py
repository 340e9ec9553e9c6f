"""
src/core/paths.py — Centralized Path Configuration

Single source of truth for all directory paths used by the quotation service.
Every module imports from here instead of computing its own DATA_DIR.

Set QUOTE_DATA_DIR / QUOTE_OUTPUT_DIR to move data and rendered PDFs onto a
persistent volume; otherwise the repo-local data/ and output/ folders are used.
"""

import os
import logging

log = logging.getLogger("quotation.paths")

# ── Project Root ──────────────────────────────────────────────────────────────
_THIS_FILE = os.path.abspath(__file__)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(_THIS_FILE)))

_LOCAL_DATA_DIR = os.path.join(PROJECT_ROOT, "data")


def _resolve_dir(env_name: str, fallback: str) -> str:
    """Env override if it points at a directory (or can be created), else fallback."""
    env_dir = os.environ.get(env_name, "")
    if env_dir:
        try:
            os.makedirs(env_dir, exist_ok=True)
            return env_dir
        except OSError as e:
            log.warning("%s=%s not usable (%s), falling back to %s",
                        env_name, env_dir, e, fallback)
    return fallback


DATA_DIR = _resolve_dir("QUOTE_DATA_DIR", _LOCAL_DATA_DIR)
OUTPUT_DIR = _resolve_dir("QUOTE_OUTPUT_DIR", os.path.join(PROJECT_ROOT, "output"))
LOG_DIR = os.path.join(DATA_DIR, "logs")

# ── Key File Paths ───────────────────────────────────────────────────────────
BRANDING_PATH = os.path.join(DATA_DIR, "branding.json")


def validate_paths() -> dict:
    """Runtime validation — call at app startup to catch path issues early.

    Returns:
        {"ok": bool, "errors": [str], "warnings": [str], "resolved": {name: path}}
    """
    result = {"ok": True, "errors": [], "warnings": [], "resolved": {}}

    checks = {
        "PROJECT_ROOT": (PROJECT_ROOT, True),
        "DATA_DIR": (DATA_DIR, False),
        "OUTPUT_DIR": (OUTPUT_DIR, False),
        "BRANDING_PATH": (BRANDING_PATH, False),
    }

    for name, (path, required) in checks.items():
        result["resolved"][name] = path
        if not os.path.exists(path):
            if required:
                result["errors"].append(f"{name} not found: {path}")
                result["ok"] = False
            else:
                result["warnings"].append(f"{name} not found: {path}")

    # Rendered PDFs land here, so it has to be writable
    try:
        os.makedirs(OUTPUT_DIR, exist_ok=True)
        test_file = os.path.join(OUTPUT_DIR, ".write_test")
        with open(test_file, "w") as f:
            f.write("ok")
        os.remove(test_file)
    except OSError as e:
        result["errors"].append(f"OUTPUT_DIR not writable: {e}")
        result["ok"] = False

    return result
