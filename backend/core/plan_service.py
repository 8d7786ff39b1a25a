from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from backend.data.insurance_plans import DEFAULT_PLANS
from backend.models import HealthProfile, InsurancePlan, PlanRecommendation, RiskResult
from core.constants import (
    ACTIVE_EXERCISE_DAYS,
    AGE_GROUPS,
    CHRONIC_FEATURE_KEYWORDS,
    FITNESS_FEATURE_KEYWORDS,
    MATCH_AGE_GROUP_BONUS,
    MATCH_BASE_SCORE,
    MATCH_CHRONIC_FEATURE_BONUS,
    MATCH_FITNESS_FEATURE_BONUS,
    MATCH_LEVEL_BONUS,
    MATCH_MAX_SCORE,
    MATCH_POPULAR_BONUS,
    MATCH_RISK_CATEGORY_BONUS,
    MAX_EXERCISE_DAYS,
    RECOMMENDED_SCORE,
    RISK_MULTIPLIERS,
    SENIOR_AGE_GROUP,
)

logger = logging.getLogger(__name__)


# =============================================================
# 1. PLAN CATALOG
# =============================================================

class PlanCatalog:
    """
    Read-only set of insurance plans.

    The plans live in a single tuple reference. Updates build a new tuple and
    swap the reference, so a reader holding `snapshot()` never sees a partial
    catalog.
    """

    def __init__(self, plans: Iterable[InsurancePlan] = ()):
        self._plans: Tuple[InsurancePlan, ...] = tuple(plans)

    @classmethod
    def default(cls) -> "PlanCatalog":
        return cls.from_dicts(DEFAULT_PLANS)

    @classmethod
    def from_dicts(cls, rows: Iterable[Dict[str, Any]]) -> "PlanCatalog":
        return cls(InsurancePlan.from_dict(row) for row in rows)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "PlanCatalog":
        catalog = cls()
        catalog.load_json(path)
        return catalog

    def snapshot(self) -> Tuple[InsurancePlan, ...]:
        return self._plans

    def replace(self, plans: Iterable[InsurancePlan]) -> None:
        new_plans = tuple(plans)
        ids = [p.id for p in new_plans]
        if len(ids) != len(set(ids)):
            raise ValueError("Plan catalog contains duplicate plan ids.")
        self._plans = new_plans
        logger.info("Plan catalog replaced (%d plans)", len(new_plans))

    def load_json(self, path: Union[str, Path]) -> None:
        with open(path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(f"Plan catalog at {path} must be a JSON list.")
        self.replace(InsurancePlan.from_dict(row) for row in rows)

    def __len__(self) -> int:
        return len(self._plans)

    def __iter__(self):
        return iter(self._plans)

    def get(self, plan_id: str) -> InsurancePlan:
        for plan in self._plans:
            if plan.id == plan_id:
                return plan
        raise KeyError(plan_id)

    def by_level(self, level: int) -> List[InsurancePlan]:
        return [p for p in self._plans if p.min_level <= level]

    def by_age_group(self, age_group: str) -> List[InsurancePlan]:
        return [p for p in self._plans if age_group in p.age_groups]

    def by_risk_category(self, risk_category: str) -> List[InsurancePlan]:
        return [p for p in self._plans if risk_category in p.risk_categories]

    def stats(self) -> Dict[str, Any]:
        plans = self._plans
        by_category: Dict[str, int] = {}
        for p in plans:
            by_category[p.category] = by_category.get(p.category, 0) + 1
        avg_coverage = round(sum(p.coverage.hospital_care for p in plans) / len(plans)) if plans else 0
        return {
            "totalPlans": len(plans),
            "plansByCategory": by_category,
            "avgHospitalCoverage": avg_coverage,
        }


# =============================================================
# 2. MATCHING
# =============================================================

def age_group(age: int) -> str:
    for upper, label in AGE_GROUPS:
        if age <= upper:
            return label
    return SENIOR_AGE_GROUP


def _has_feature(plan: InsurancePlan, keywords: Sequence[str]) -> bool:
    return any(k in feature.lower() for feature in plan.features for k in keywords)


def _eligible(
    plans: Sequence[InsurancePlan],
    user_level: int,
    group: str,
    categories: Sequence[str],
) -> List[InsurancePlan]:
    return [
        p
        for p in plans
        if p.min_level <= user_level
        and group in p.age_groups
        and any(c in p.risk_categories for c in categories)
    ]


def _score_plan(
    plan: InsurancePlan,
    risk: RiskResult,
    user_level: int,
    group: str,
    profile: Optional[HealthProfile],
) -> PlanRecommendation:
    category = risk.risk_category
    score = MATCH_BASE_SCORE
    reasoning: List[str] = []
    pros: List[str] = []
    cons: List[str] = []

    if group in plan.age_groups:
        score += MATCH_AGE_GROUP_BONUS
        reasoning.append(f"Designed for your age group ({group})")
        pros.append("Age-appropriate coverage")

    if category in plan.risk_categories:
        score += MATCH_RISK_CATEGORY_BONUS
        reasoning.append("Suitable for your health risk profile")
        pros.append("Matches your health risk category")

    if plan.min_level == user_level:
        score += MATCH_LEVEL_BONUS
        reasoning.append("Perfect match for your fitness level")
        pros.append("Optimized for your fitness level")

    if plan.is_popular:
        score += MATCH_POPULAR_BONUS
        reasoning.append("Popular choice among similar users")
        pros.append("Highly rated by other users")

    elevated = category == "high" or bool(profile and profile.chronic_conditions)
    if elevated and _has_feature(plan, CHRONIC_FEATURE_KEYWORDS):
        score += MATCH_CHRONIC_FEATURE_BONUS
        reasoning.append("Includes specialized chronic condition support")
        pros.append("Comprehensive chronic care coverage")

    active = risk.exercise_factor >= ACTIVE_EXERCISE_DAYS / MAX_EXERCISE_DAYS
    if active and _has_feature(plan, FITNESS_FEATURE_KEYWORDS):
        score += MATCH_FITNESS_FEATURE_BONUS
        reasoning.append("Includes fitness and wellness benefits")
        pros.append("Wellness and fitness program coverage")

    if plan.deductible > 1000:
        cons.append(f"High deductible: ${plan.deductible:,.0f}")
    if category == "high" and "high" not in plan.risk_categories:
        cons.append("May have coverage limitations for high-risk individuals")

    multiplier = RISK_MULTIPLIERS[category]
    monthly = plan.base_price * multiplier * (1 - risk.discount_percentage)
    score = min(MATCH_MAX_SCORE, score)

    return PlanRecommendation(
        plan=plan,
        score=score,
        monthly_premium=round(monthly, 2),
        discount_percentage=risk.discount_percentage,
        risk_adjustment=multiplier,
        is_recommended=score >= RECOMMENDED_SCORE,
        reasoning=tuple(reasoning),
        pros=tuple(pros),
        cons=tuple(cons),
    )


def match_plans(
    risk: RiskResult,
    user_level: int,
    catalog: Union[PlanCatalog, Iterable[InsurancePlan]],
    *,
    profile: Optional[HealthProfile] = None,
    limit: Optional[int] = None,
) -> List[PlanRecommendation]:
    """
    Rank the plans a user is eligible for.

    Eligibility requires min_level <= user_level plus a matching age group and
    risk category. High-risk users with no exact match fall back to plans
    covering moderate or high risk. Ordering: score desc, hospital coverage
    desc, plan id.
    """
    plans = catalog.snapshot() if isinstance(catalog, PlanCatalog) else tuple(catalog)
    group = age_group(risk.age)
    category = risk.risk_category

    eligible = _eligible(plans, user_level, group, [category])
    if not eligible and category == "high":
        logger.info("No exact plan match for high-risk user; widening to moderate/high plans")
        eligible = _eligible(plans, user_level, group, ["moderate", "high"])

    ranked = sorted(
        (_score_plan(p, risk, user_level, group, profile) for p in eligible),
        key=lambda r: (-r.score, -r.plan.coverage.hospital_care, r.plan.id),
    )
    if limit is not None:
        ranked = ranked[:limit]

    logger.debug("Matched %d/%d plans (age_group=%s, category=%s)", len(ranked), len(plans), group, category)
    return ranked
