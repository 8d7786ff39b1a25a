import io
import logging

from flask import Blueprint, current_app, jsonify, request, send_file

from api.schemas.base_schema import DiscountRecordSchema
from backend.controllers.insurance_controller import (
    calculate_discount_payload,
    discount_history_payload,
    recommend_plans_payload,
)
from backend.config.settings import DEFAULT_HISTORY_LIMIT, LEDGER_EXPORT_FILENAME, MAX_HISTORY_LIMIT
from backend.core.export_service import ledger_to_csv_bytes
from backend.core.risk_service import IncompleteProfile
from backend.utils.formatter import format_plan

logger = logging.getLogger(__name__)

bp = Blueprint("insurance_routes", __name__)


def _catalog():
    return current_app.extensions["plan_catalog"]


def _ledger():
    return current_app.extensions["discount_ledger"]


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    return data


@bp.route("/plans", methods=["GET"])
def list_plans():
    plans = [format_plan(p) for p in _catalog().snapshot()]
    return jsonify({"success": True, "data": {"plans": plans}}), 200


@bp.route("/plans/<plan_id>", methods=["GET"])
def get_plan(plan_id):
    try:
        plan = _catalog().get(plan_id)
    except KeyError:
        return jsonify({"success": False, "message": "Insurance plan not found"}), 404
    return jsonify({"success": True, "data": {"plan": format_plan(plan)}}), 200


@bp.route("/stats", methods=["GET"])
def plan_stats():
    return jsonify({"success": True, "data": _catalog().stats()}), 200


@bp.route("/recommendations", methods=["POST"])
def recommendations():
    try:
        limit = current_app.config.get("RECOMMENDATION_LIMIT", 5)
        data = recommend_plans_payload(_json_body(), _catalog(), limit=limit)
        return jsonify({"success": True, "data": data}), 200
    except IncompleteProfile as e:
        return jsonify({"success": False, "message": e.message, "missing": list(e.missing)}), 422
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400
    except Exception:
        logger.exception("Plan recommendation failed")
        return jsonify({"success": False, "message": "Failed to generate recommendations"}), 500


@bp.route("/discount", methods=["POST"])
def calculate_discount():
    try:
        payload = _json_body()
        if payload.get("record"):
            schema = DiscountRecordSchema()
            check = schema.validate(payload)
            if not check["valid"]:
                return jsonify({"success": False, "message": "Missing fields", "missing": check["missing"]}), 400
            try:
                _catalog().get(schema.value(payload, schema.PLAN_ID))
            except KeyError:
                return jsonify({"success": False, "message": "Insurance plan not found"}), 404
        data = calculate_discount_payload(payload, _ledger())
        return jsonify({"success": True, "data": data}), 201 if "event" in data else 200
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400
    except Exception:
        logger.exception("Discount calculation failed")
        return jsonify({"success": False, "message": "Failed to calculate discount"}), 500


@bp.route("/discount/history/<user_id>", methods=["GET"])
def discount_history(user_id):
    limit = request.args.get("limit", default=DEFAULT_HISTORY_LIMIT, type=int)
    limit = max(0, min(limit, MAX_HISTORY_LIMIT))
    events = discount_history_payload(_ledger(), user_id, limit)
    return jsonify({"success": True, "data": {"history": events}}), 200


@bp.route("/discount/export", methods=["GET"])
def export_discounts():
    user_id = request.args.get("userId")
    try:
        payload = ledger_to_csv_bytes(_ledger(), user_id=user_id)
    except ValueError:
        logger.exception("Ledger export failed")
        return jsonify({"success": False, "message": "Failed to export discount history"}), 500
    return send_file(io.BytesIO(payload), mimetype="text/csv", as_attachment=True, download_name=LEDGER_EXPORT_FILENAME)
