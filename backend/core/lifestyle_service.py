"""Secondary risk variant that also weighs smoking, chronic conditions and occupation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from backend.core.risk_service import bmi_category, require_complete
from backend.models import HealthProfile

logger = logging.getLogger(__name__)

# exercise days -> qualitative frequency used by this variant
_FREQUENCY_BANDS = ((5, "heavy"), (3, "moderate"), (1, "light"))


@dataclass(frozen=True)
class LifestyleAssessment:
    score: int
    category: str
    bmi_category: str
    exercise_frequency: str
    risk_factors: Tuple[str, ...]


def exercise_frequency(days: float) -> str:
    for lower, name in _FREQUENCY_BANDS:
        if days >= lower:
            return name
    return "none"


def _points_score(profile: HealthProfile, bmi_cat: str, frequency: str) -> int:
    score = 0
    age = profile.age

    if age > 65:
        score += 30
    elif age > 50:
        score += 20
    elif age > 35:
        score += 10

    score += {"obese": 25, "overweight": 15, "underweight": 10}.get(bmi_cat, 0)
    score += {"current": 20, "former": 5}.get(profile.smoking_status or "", 0)
    score += min(15, len(profile.chronic_conditions) * 5)
    score += {"heavy": -10, "moderate": -5, "light": 5, "none": 10}[frequency]
    score += {"hazardous": 15, "physical": 5}.get(profile.occupation or "", 0)

    return max(0, min(100, score))


def _category(profile: HealthProfile, bmi_cat: str, frequency: str) -> str:
    tally = 0
    age = profile.age

    if age > 50:
        tally += 2
    elif age > 35:
        tally += 1

    tally += {"obese": 3, "overweight": 1, "underweight": 1}.get(bmi_cat, 0)
    tally += len(profile.chronic_conditions) * 2
    tally += {"current": 3, "former": 1}.get(profile.smoking_status or "", 0)
    tally += {"heavy": -2, "moderate": -1, "light": 1, "none": 2}[frequency]
    if len(profile.family_history) > 2:
        tally += 1
    tally += {"hazardous": 2, "physical": 1, "healthcare": 1}.get(profile.occupation or "", 0)

    if tally <= 1:
        return "low"
    if tally <= 4:
        return "moderate"
    return "high"


def _risk_factors(profile: HealthProfile, bmi_cat: str, frequency: str) -> Tuple[str, ...]:
    factors = []
    if profile.age > 50:
        factors.append("Age over 50")
    if bmi_cat == "obese":
        factors.append("BMI indicates obesity")
    if profile.smoking_status == "current":
        factors.append("Current smoker")
    if profile.chronic_conditions:
        factors.append(f"Has {len(profile.chronic_conditions)} chronic condition(s)")
    if frequency in ("none", "light"):
        factors.append("Limited physical activity")
    if len(profile.family_history) > 2:
        factors.append("Significant family medical history")
    if profile.occupation == "hazardous":
        factors.append("High-risk occupation")
    return tuple(factors)


def assess_lifestyle_risk(profile: HealthProfile) -> LifestyleAssessment:
    require_complete(profile)

    bmi_cat = bmi_category(profile.bmi)
    frequency = exercise_frequency(profile.exercise_days_per_week)
    assessment = LifestyleAssessment(
        score=_points_score(profile, bmi_cat, frequency),
        category=_category(profile, bmi_cat, frequency),
        bmi_category=bmi_cat,
        exercise_frequency=frequency,
        risk_factors=_risk_factors(profile, bmi_cat, frequency),
    )
    logger.debug("Lifestyle assessment: score=%d category=%s", assessment.score, assessment.category)
    return assessment
