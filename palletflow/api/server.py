"""
HTTP API for the pallet planner.

Exposes `POST /api/pallet`, which fetches one pallet listing and returns
its extracted manifest as `{labels, keys, rows}`.  Fetch failures and
invalid ids come back as `400 {message}`; a page without a manifest
table is not an error and returns empty lists.  The built front end is
served from `Settings.static_dir`.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS

from ..collect.fetcher import fetch_pallet, validate_pallet_id
from ..config import Settings, load_settings
from ..errors import PalletflowError

logger = logging.getLogger(__name__)


def _pallet_id_from_request() -> object:
    body = request.get_json(silent=True)
    if isinstance(body, dict) and "palletId" in body:
        return body["palletId"]
    return request.form.get("palletId")


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask application.

    Args:
        settings: Settings for the fetcher and static files.  Loaded from
            the environment when omitted.
    """
    settings = settings or load_settings()
    static_dir = os.path.abspath(settings.static_dir)
    app = Flask(__name__, static_folder=static_dir, static_url_path="")
    app.config["PALLETFLOW_SETTINGS"] = settings
    # rows must keep column order on the wire
    app.json.sort_keys = False
    CORS(app)

    @app.errorhandler(PalletflowError)
    def handle_palletflow_error(exc: PalletflowError):
        logger.error("Pallet %s failed: %s", exc.pallet_id or "?", exc.message)
        return jsonify({"message": exc.message}), 400

    @app.route("/api/pallet", methods=["POST"])
    def pallet():
        pallet_id = validate_pallet_id(_pallet_id_from_request())
        result = fetch_pallet(pallet_id, app.config["PALLETFLOW_SETTINGS"])
        return jsonify(result.to_dict())

    @app.route("/")
    def index():
        return send_from_directory(static_dir, "index.html")

    return app


def run(settings: Optional[Settings] = None) -> None:
    """Serve the API with the Flask development server."""
    settings = settings or load_settings()
    app = create_app(settings)
    logger.info("Server listening on http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, threaded=True)
