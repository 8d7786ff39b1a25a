from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from backend.models import HealthProfile, RiskResult
from core.constants import (
    AGE_FACTOR_STEP,
    AGE_FACTOR_STEP_YEARS,
    AGE_FACTOR_THRESHOLD,
    BMI_CATEGORIES,
    DISCOUNT_BY_LEVEL,
    INCOMPLETE_PROFILE_MESSAGE,
    MAX_BMI_DEVIATION,
    MAX_EXERCISE_DAYS,
    OPTIMAL_BMI,
    RISK_DISPLAY_COLORS,
    RISK_TIERS,
    WEIGHT_BMI,
    WEIGHT_EXERCISE,
)

logger = logging.getLogger(__name__)

if not math.isclose(WEIGHT_BMI + WEIGHT_EXERCISE, 1.0):
    raise RuntimeError("Risk weights must sum to 1.0")


class IncompleteProfile(ValueError):
    """Raised when age, height or weight is missing or non-positive."""

    def __init__(self, missing: Tuple[str, ...]):
        self.missing = tuple(missing)
        self.message = INCOMPLETE_PROFILE_MESSAGE
        super().__init__(f"{self.message} Missing: {', '.join(self.missing)}")


@dataclass(frozen=True)
class RiskTier:
    level: int
    surcharge: float
    description: str


# =============================================================
# 1. FACTORS
# =============================================================

def _is_positive(value: Optional[float]) -> bool:
    if value is None:
        return False
    try:
        v = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(v) and v > 0


def require_complete(profile: HealthProfile) -> None:
    missing = tuple(
        name
        for name, value in (
            ("age", profile.age),
            ("height_cm", profile.height_cm),
            ("weight_kg", profile.weight_kg),
        )
        if not _is_positive(value)
    )
    if missing:
        logger.info("Risk assessment rejected, incomplete profile: %s", missing)
        raise IncompleteProfile(missing)


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    return weight_kg / (height_cm / 100) ** 2


def bmi_category(bmi: float) -> str:
    for upper, name in BMI_CATEGORIES:
        if bmi < upper:
            return name
    return "obese"


def bmi_deviation_factor(bmi: float) -> float:
    return min(1.0, abs(bmi - OPTIMAL_BMI) / MAX_BMI_DEVIATION)


def exercise_factor(exercise_days_per_week: float) -> float:
    days = float(exercise_days_per_week)
    if math.isnan(days):
        days = 0.0
    days = min(max(days, 0.0), float(MAX_EXERCISE_DAYS))
    return days / MAX_EXERCISE_DAYS


def age_factor(age: int) -> float:
    """Step multiplier: +2% for every full decade past 35."""
    if age <= AGE_FACTOR_THRESHOLD:
        return 1.0
    decades = math.floor((age - AGE_FACTOR_THRESHOLD) / AGE_FACTOR_STEP_YEARS)
    return 1.0 + AGE_FACTOR_STEP * decades


def classify_risk(adjusted_score: float) -> RiskTier:
    for upper, level, surcharge, description in RISK_TIERS:
        if adjusted_score <= upper:
            return RiskTier(level, surcharge, description)
    # scores are clamped to 1.0 upstream; anything above still lands in the top tier
    _, level, surcharge, description = RISK_TIERS[-1]
    return RiskTier(level, surcharge, description)


def discount_for_level(level: int) -> float:
    return DISCOUNT_BY_LEVEL[level]


# =============================================================
# 2. MAIN ENTRY: COMPUTE RISK
# =============================================================

def compute_risk(profile: HealthProfile, base_premium: Optional[float] = None) -> RiskResult:
    """
    Score a health profile.

    Example:
        >>> p = HealthProfile(age=30, height_cm=170, weight_kg=65, exercise_days_per_week=4)
        >>> compute_risk(p).risk_level
        1

    Raises IncompleteProfile when age, height or weight is unusable.
    """
    require_complete(profile)

    age = int(profile.age)
    bmi = calculate_bmi(float(profile.height_cm), float(profile.weight_kg))
    bmi_factor = bmi_deviation_factor(bmi)
    ex_factor = exercise_factor(profile.exercise_days_per_week)

    base_risk = WEIGHT_BMI * bmi_factor + WEIGHT_EXERCISE * (1 - ex_factor)
    a_factor = age_factor(age)
    adjusted = min(1.0, base_risk * a_factor)

    tier = classify_risk(adjusted)
    final_premium = None
    if base_premium is not None:
        final_premium = float(base_premium) * (1 + tier.surcharge)

    logger.debug(
        "Risk computed: bmi=%.2f base=%.4f age_factor=%.2f adjusted=%.4f level=%d",
        bmi, base_risk, a_factor, adjusted, tier.level,
    )

    return RiskResult(
        age=age,
        bmi=bmi,
        bmi_deviation=abs(bmi - OPTIMAL_BMI),
        bmi_deviation_factor=bmi_factor,
        exercise_factor=ex_factor,
        base_risk_score=base_risk,
        age_factor=a_factor,
        adjusted_risk_score=adjusted,
        risk_level=tier.level,
        risk_description=tier.description,
        premium_surcharge_percentage=tier.surcharge,
        discount_percentage=discount_for_level(tier.level),
        final_premium=final_premium,
    )


# =============================================================
# 3. PRESENTATION HELPERS
# =============================================================

def get_improvement_recommendations(result: RiskResult) -> List[str]:
    recommendations: List[str] = []

    if result.bmi < 18.5:
        recommendations.append("Consider healthy weight gain strategies")
    elif result.bmi > 25:
        recommendations.append("Consider healthy weight management")

    # under 3.5 days a week
    if result.exercise_factor < 0.5:
        recommendations.append("Increase exercise frequency to 4-5 days per week")

    if result.age > AGE_FACTOR_THRESHOLD:
        recommendations.append("Consider age-appropriate fitness programs")
        recommendations.append("Regular health check-ups recommended")

    if result.risk_level >= 4:
        recommendations.append("Consult with healthcare professionals")
        recommendations.append("Consider comprehensive health assessment")

    return recommendations


def format_risk_display(result: RiskResult) -> Dict[str, str]:
    return {
        "title": f"Risk Level {result.risk_level}",
        "subtitle": result.risk_description,
        "color": RISK_DISPLAY_COLORS[result.risk_level],
        "percentage": f"+{result.premium_surcharge_percentage * 100:.0f}%",
    }
