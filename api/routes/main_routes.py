# imports
from __future__ import annotations
import logging

# third party
from flask import Blueprint, current_app, jsonify, request

from core.constants import APP_NAME, VERSION

# blueprint
logger = logging.getLogger(__name__)
main_bp = Blueprint("main", __name__, url_prefix="")

# api routes
@main_bp.route("/api/ping")
def api_ping():
    return jsonify({"status": "ok", "message": "API Connected"})

@main_bp.route("/api/status")
def api_status():
    catalog = current_app.extensions.get("plan_catalog")
    return jsonify(
        {
            "system": APP_NAME,
            "version": VERSION,
            "status": "online",
            "plans_loaded": len(catalog) if catalog is not None else 0,
        }
    )

# error handlers
@main_bp.app_errorhandler(404)
def handle_404(err):
    logger.warning("404: %s %s", request.path, err)
    return jsonify({"success": False, "message": "Not Found"}), 404

@main_bp.app_errorhandler(405)
def handle_405(err):
    return jsonify({"success": False, "message": "Method Not Allowed"}), 405

@main_bp.app_errorhandler(429)
def handle_429(err):
    return jsonify({"success": False, "message": "Rate limit exceeded"}), 429

@main_bp.app_errorhandler(500)
def handle_500(err):
    logger.exception("500 error: %s", err)
    return jsonify({"success": False, "message": "Internal Server Error"}), 500
