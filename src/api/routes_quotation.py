# routes_quotation.py
"""
Quotation PDF routes: render and health.

    POST /api/quotations/pdf   JSON quotation → PDF attachment
    GET  /api/health           paths + settings report

Each request renders its own document in memory and streams those bytes
back. Nothing is written to disk, so requests for the same quotation
number never share a file.
"""
import io
import time as _time
import logging

from flask import Blueprint, request, jsonify, send_file

from src.core import paths
from src.core.settings import validate_all
from src.forms.quotation_pdf import render_quotation

log = logging.getLogger("routes.quotation")

bp = Blueprint("quotation", __name__)


# ── Request-level structured logging ────────────────────────────────────────
@bp.before_app_request
def _log_request_start():
    request._start_time = _time.time()


@bp.after_app_request
def _log_request_end(response):
    if hasattr(request, "_start_time"):
        duration_ms = round((_time.time() - request._start_time) * 1000, 1)
        # Skip health spam
        if request.path != "/api/health":
            log.info("%s %s → %d (%.0fms)",
                     request.method, request.path, response.status_code, duration_ms,
                     extra={"route": request.path, "method": request.method,
                            "duration_ms": duration_ms})
    return response


# ═══════════════════════════════════════════════════════════════════════════════
# QUOTATION PDF
# ═══════════════════════════════════════════════════════════════════════════════

@bp.route("/api/quotations/pdf", methods=["POST"])
def api_quotation_pdf():
    """Render the posted quotation and return it as a download."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"ok": False, "error": "Send the quotation as a JSON object"}), 400
    if not data.get("quotation_number"):
        return jsonify({"ok": False, "error": "quotation_number is required"}), 400

    try:
        result = render_quotation(data)
    except Exception as e:
        log.exception("Quotation %s failed to render", data.get("quotation_number"))
        return jsonify({"ok": False, "error": str(e)}), 500

    response = send_file(io.BytesIO(result["pdf"]), mimetype="application/pdf",
                         as_attachment=True, download_name=result["filename"])
    response.headers["X-Quotation-Pages"] = str(result["pages"])
    if result["skipped_assets"]:
        response.headers["X-Skipped-Assets"] = ",".join(result["skipped_assets"])
    return response


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════

@bp.route("/api/health")
def api_health():
    """Path and settings check."""
    path_report = paths.validate_paths()
    return jsonify({
        "ok": path_report["ok"],
        "paths": path_report,
        "settings": validate_all(),
    })
