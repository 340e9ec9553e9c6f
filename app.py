#!/usr/bin/env python3
"""
Nathkrupa Quotations — Application Entry Point
Creates Flask app and registers the quotation PDF Blueprint.
"""

import os
import logging
from flask import Flask

from logging_config import setup_logging


def create_app(configure_logging=True):
    """Application factory."""
    if configure_logging:
        setup_logging()

    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY", "nathkrupa-quotations")

    from src.api.routes_quotation import bp
    app.register_blueprint(bp)

    # ── Runtime self-test: catches path bugs at boot ───────────────────────
    from src.core.paths import validate_paths
    checks = validate_paths()
    for err in checks["errors"]:
        logging.getLogger("quotation").error("STARTUP: %s", err)
    for warn in checks["warnings"]:
        logging.getLogger("quotation").info("STARTUP: %s", warn)

    return app


if __name__ == "__main__":
    app = create_app()
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=False)
