from backend.core.discount_service import build_discount_event, calculate_activity_discount
from backend.core.plan_service import match_plans
from backend.core.risk_service import compute_risk
from backend.utils.formatter import format_percentage, format_recommendations, format_risk_result
from backend.utils.validator import build_health_profile, parse_optional_number


def _int_field(payload, *keys, default=0):
    value = parse_optional_number(payload, *keys)
    return default if value is None else int(value)


def recommend_plans_payload(payload, catalog, limit=None):
    profile = build_health_profile(payload)
    user_level = _int_field(payload, "userLevel", "user_level", default=1)

    result = compute_risk(profile)
    recommendations = match_plans(result, user_level, catalog, profile=profile, limit=limit)

    return {
        "riskAssessment": format_risk_result(result),
        "recommendations": format_recommendations(recommendations),
    }


def calculate_discount_payload(payload, ledger=None):
    user_level = _int_field(payload, "userLevel", "user_level", default=1)
    exercise_days = _int_field(payload, "exerciseDaysLast180", "exercise_days_last_180")
    checkups = _int_field(payload, "checkupsLast365", "checkups_last_365")

    discount = calculate_activity_discount(user_level, exercise_days, checkups)
    response = {
        "discount": discount,
        "discountPercentage": format_percentage(discount),
    }

    if payload.get("record"):
        if ledger is None:
            raise ValueError("No discount ledger configured.")
        event = build_discount_event(
            payload.get("userId") or payload.get("user_id"),
            payload.get("planId") or payload.get("plan_id"),
            discount,
            payload.get("reason") or "Activity-based discount",
        )
        response["event"] = ledger.record(event).to_dict()

    return response


def discount_history_payload(ledger, user_id, limit):
    return [event.to_dict() for event in ledger.history(user_id, limit=limit)]
