import logging

from flask import Blueprint, jsonify, request

from backend.controllers.risk_controller import compute_lifestyle_payload, compute_risk_payload
from backend.core.risk_service import IncompleteProfile

logger = logging.getLogger(__name__)

bp = Blueprint("risk_routes", __name__)


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    return data


def _incomplete(exc):
    return jsonify({"success": False, "message": exc.message, "missing": list(exc.missing)}), 422


@bp.route("/assess", methods=["POST"])
def assess():
    try:
        data = compute_risk_payload(_json_body())
        return jsonify({"success": True, "data": data}), 200
    except IncompleteProfile as e:
        return _incomplete(e)
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400
    except Exception:
        logger.exception("Risk assessment failed")
        return jsonify({"success": False, "message": "Failed to calculate risk assessment"}), 500


@bp.route("/lifestyle", methods=["POST"])
def lifestyle():
    try:
        data = compute_lifestyle_payload(_json_body())
        return jsonify({"success": True, "data": data}), 200
    except IncompleteProfile as e:
        return _incomplete(e)
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400
    except Exception:
        logger.exception("Lifestyle assessment failed")
        return jsonify({"success": False, "message": "Failed to calculate lifestyle assessment"}), 500
