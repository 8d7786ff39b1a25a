import math
from datetime import date
from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from backend.core.plan_service import match_plans
from backend.core.risk_service import compute_risk
from backend.utils.formatter import (
    format_percentage,
    format_plan,
    format_recommendations,
    format_risk_result,
    to_json_serializable,
)


def test_numpy_and_pandas_values():
    assert to_json_serializable(np.int64(3)) == 3
    assert to_json_serializable(np.array([1.5, 2.5])) == [1.5, 2.5]
    assert to_json_serializable(pd.Series([1, 2])) == [1, 2]
    assert to_json_serializable(pd.NA) is None


def test_scalar_conversions():
    assert to_json_serializable(Decimal("1.25")) == 1.25
    assert to_json_serializable(date(2024, 5, 1)) == "2024-05-01"
    assert to_json_serializable(float("nan")) is None
    assert to_json_serializable({"a": (1, 2)}) == {"a": [1, 2]}


def test_dataclass_goes_through_to_dict(make_profile):
    data = to_json_serializable(compute_risk(make_profile()))
    assert data["risk_category"] == "low"
    assert data["risk_level"] == 1


@pytest.mark.parametrize("fraction,expected", [(0.05, 5.0), (0.25, 25.0), (0.26, 26.0), (0.0, 0.0)])
def test_format_percentage(fraction, expected):
    assert format_percentage(fraction) == expected


def test_format_risk_result(make_profile):
    result = compute_risk(make_profile(), base_premium=200)
    payload = format_risk_result(result, recommendations=["x"])

    assert payload["level"] == 1
    assert payload["premiumSurchargePercentage"] == 5.0
    assert payload["discountPercentage"] == 25.0
    assert payload["finalPremium"] == 210.0
    assert payload["recommendations"] == ["x"]
    assert "display" not in payload
    assert set(payload["factors"]) == {"bmi", "bmiRisk", "fitnessRisk", "ageRisk"}
    assert math.isclose(payload["factors"]["fitnessRisk"], round(3 / 7, 4))


def test_format_recommendations(make_profile, catalog):
    recs = match_plans(compute_risk(make_profile()), 2, catalog, limit=2)
    rows = format_recommendations(recs)

    assert len(rows) == 2
    assert rows[0]["plan"]["id"] == "standard-family"
    assert rows[0]["levelDiscount"] == 25.0
    assert isinstance(rows[0]["plan"]["features"], list)


def test_format_plan_uses_camel_case(catalog):
    data = format_plan(catalog.get("standard-family"))

    assert data["id"] == "standard-family"
    assert {"basePrice", "ageGroups", "riskCategories", "minLevel", "isPopular", "outOfPocketMax"} <= set(data)
    assert "base_price" not in data
    assert "hospitalCare" in data["coverage"]
    assert isinstance(data["ageGroups"], list)
