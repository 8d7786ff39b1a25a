from __future__ import annotations

import dataclasses
import json
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from backend.models import InsurancePlan, PlanRecommendation, RiskResult

logger = logging.getLogger(__name__)

__all__ = [
    "to_json_serializable",
    "format_risk_result",
    "format_plan",
    "format_recommendations",
    "format_percentage",
]


def to_json_serializable(value: Any) -> Any:
    """Convert numpy/pandas/dataclass/datetime/decimal values to native JSON types."""
    # pandas NA
    if value is pd.NA:
        return None

    # numpy scalar
    if isinstance(value, np.generic):
        return value.item()

    # numpy array / pandas Series
    if isinstance(value, (np.ndarray, pd.Series)):
        return [to_json_serializable(v) for v in value.tolist()]

    # pandas Timestamp / datetime / date
    if isinstance(value, (pd.Timestamp, datetime, date)):
        return value.isoformat()

    if isinstance(value, Decimal):
        return float(value)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        to_dict = getattr(value, "to_dict", None)
        data = to_dict() if callable(to_dict) else dataclasses.asdict(value)
        return to_json_serializable(data)

    # Containers
    if isinstance(value, dict):
        return {str(k): to_json_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json_serializable(v) for v in value]

    if value is None:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None

    try:
        json.dumps(value)
        return value
    except TypeError:
        logger.debug("falling back to str() for %r", value)
        return str(value)


def _round(v: Optional[float], digits: int) -> Optional[float]:
    if v is None:
        return None
    return round(float(v), digits)


def format_percentage(fraction: float) -> float:
    """0.15 -> 15.0"""
    return round(fraction * 100, 2)


def format_risk_result(
    result: RiskResult,
    *,
    round_digits: int = 4,
    recommendations: Optional[Iterable[str]] = None,
    display: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Shape a RiskResult for HTTP callers (camelCase, percentages as 0..100)."""
    record: Dict[str, Any] = {
        "riskScore": _round(result.adjusted_risk_score, round_digits),
        "baseRiskScore": _round(result.base_risk_score, round_digits),
        "level": result.risk_level,
        "riskCategory": result.risk_category,
        "riskDescription": result.risk_description,
        "premiumSurchargePercentage": format_percentage(result.premium_surcharge_percentage),
        "discountPercentage": format_percentage(result.discount_percentage),
        "finalPremium": _round(result.final_premium, 2),
        "factors": {
            "bmi": _round(result.bmi, 2),
            "bmiRisk": _round(result.bmi_deviation_factor, round_digits),
            "fitnessRisk": _round(1 - result.exercise_factor, round_digits),
            "ageRisk": _round(result.age_factor, round_digits),
        },
    }
    if recommendations is not None:
        record["recommendations"] = list(recommendations)
    if display is not None:
        record["display"] = dict(display)
    return record


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def format_plan(plan: InsurancePlan) -> Dict[str, Any]:
    """Plan as camelCase JSON, coverage keys included."""
    data = to_json_serializable(plan)
    data["coverage"] = {_camel(k): v for k, v in data["coverage"].items()}
    return {_camel(k): v for k, v in data.items()}


def format_recommendations(recommendations: Iterable[PlanRecommendation]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for rec in recommendations:
        out.append(
            {
                "plan": format_plan(rec.plan),
                "recommendationScore": rec.score,
                "monthlyPremium": rec.monthly_premium,
                "levelDiscount": format_percentage(rec.discount_percentage),
                "riskAdjustment": rec.risk_adjustment,
                "isRecommended": rec.is_recommended,
                "reasoning": list(rec.reasoning),
                "pros": list(rec.pros),
                "cons": list(rec.cons),
            }
        )
    return out
