from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional

from backend.models import DiscountEvent, RiskResult
from core.constants import (
    EXERCISE_DAY_DISCOUNTS,
    HEALTH_SCORE_DISCOUNTS,
    MAX_ACTIVITY_DISCOUNT,
    PREVENTIVE_CHECKUP_DISCOUNT,
)

logger = logging.getLogger(__name__)

DISCOUNT_TYPE_RISK = "risk_level"
DISCOUNT_TYPE_ACTIVITY = "activity"


# =============================================================
# 1. ACTIVITY DISCOUNT (percentage points)
# =============================================================

def health_score_discount(gamification_level: int) -> int:
    # level 5 saturates the health score at 100
    health_score = min(max(gamification_level, 0) * 20, 100)
    for threshold, discount in HEALTH_SCORE_DISCOUNTS:
        if health_score >= threshold:
            return discount
    return 0


def activity_discount(exercise_days_last_180: int) -> int:
    for threshold, discount in EXERCISE_DAY_DISCOUNTS:
        if exercise_days_last_180 >= threshold:
            return discount
    return 0


def preventive_discount(checkups_last_365: int) -> int:
    return PREVENTIVE_CHECKUP_DISCOUNT if checkups_last_365 > 0 else 0


def calculate_activity_discount(
    gamification_level: int,
    exercise_days_last_180: int = 0,
    checkups_last_365: int = 0,
) -> float:
    """Accumulated healthy-behaviour discount as a fraction, capped at 30%."""
    total = (
        health_score_discount(gamification_level)
        + activity_discount(exercise_days_last_180)
        + preventive_discount(checkups_last_365)
    )
    return min(total, MAX_ACTIVITY_DISCOUNT) / 100


# =============================================================
# 2. LEDGER EVENTS
# =============================================================

def build_discount_event(
    user_id: str,
    plan_id: str,
    amount: float,
    reason: str,
    *,
    discount_type: str = DISCOUNT_TYPE_ACTIVITY,
    timestamp: Optional[datetime] = None,
) -> DiscountEvent:
    if not user_id or not plan_id:
        raise ValueError("user_id and plan_id are required for a discount event.")
    if not 0 <= amount <= 1:
        raise ValueError(f"Discount amount must be a fraction in [0, 1], got {amount}.")
    return DiscountEvent(
        id=str(uuid.uuid4()),
        user_id=str(user_id),
        plan_id=str(plan_id),
        discount_type=discount_type,
        amount=float(amount),
        reason=reason,
        timestamp=timestamp or datetime.now(),
    )


def risk_discount_event(user_id: str, plan_id: str, result: RiskResult) -> DiscountEvent:
    return build_discount_event(
        user_id,
        plan_id,
        result.discount_percentage,
        f"Risk level {result.risk_level}: {result.risk_description}",
        discount_type=DISCOUNT_TYPE_RISK,
    )
