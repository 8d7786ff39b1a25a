from backend.core.lifestyle_service import assess_lifestyle_risk
from backend.core.risk_service import compute_risk, format_risk_display, get_improvement_recommendations
from backend.utils.formatter import format_risk_result
from backend.utils.validator import build_health_profile, parse_optional_number


def compute_risk_payload(payload):
    profile = build_health_profile(payload)
    base_premium = parse_optional_number(payload, "basePremium", "base_premium")

    result = compute_risk(profile, base_premium)

    return format_risk_result(
        result,
        recommendations=get_improvement_recommendations(result),
        display=format_risk_display(result),
    )


def compute_lifestyle_payload(payload):
    profile = build_health_profile(payload)
    assessment = assess_lifestyle_risk(profile)

    return {
        "riskScore": assessment.score,
        "riskCategory": assessment.category,
        "bmiCategory": assessment.bmi_category,
        "exerciseFrequency": assessment.exercise_frequency,
        "riskFactors": list(assessment.risk_factors),
    }
