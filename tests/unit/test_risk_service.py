import itertools

import pytest

from backend.core.risk_service import (
    IncompleteProfile,
    age_factor,
    bmi_category,
    classify_risk,
    compute_risk,
    exercise_factor,
    format_risk_display,
    get_improvement_recommendations,
)
from backend.models import HealthProfile
from core.constants import INCOMPLETE_PROFILE_MESSAGE


def test_healthy_adult_lands_in_lowest_tier(make_profile):
    result = compute_risk(make_profile(age=30, height_cm=170, weight_kg=65, exercise_days_per_week=4))

    assert result.bmi == pytest.approx(22.49, abs=0.01)
    assert result.bmi_deviation_factor == pytest.approx(0.001, abs=0.001)
    assert result.exercise_factor == pytest.approx(4 / 7)
    assert result.base_risk_score == pytest.approx(0.172, abs=0.001)
    assert result.age_factor == 1.0
    assert result.adjusted_risk_score == pytest.approx(0.172, abs=0.001)
    assert result.risk_level == 1
    assert result.premium_surcharge_percentage == 0.05
    assert result.discount_percentage == 0.25
    assert result.risk_category == "low"
    assert result.final_premium is None


def test_sedentary_obese_fifty_year_old_is_clamped_to_top_tier(make_profile):
    result = compute_risk(make_profile(age=50, height_cm=170, weight_kg=95, exercise_days_per_week=0))

    assert result.bmi == pytest.approx(32.87, abs=0.01)
    assert result.bmi_deviation == pytest.approx(10.37, abs=0.01)
    assert result.bmi_deviation_factor == 1.0
    assert result.exercise_factor == 0.0
    assert result.base_risk_score == pytest.approx(1.0)
    assert result.age_factor == pytest.approx(1.02)
    assert result.adjusted_risk_score == 1.0
    assert result.risk_level == 5
    assert result.premium_surcharge_percentage == 0.25
    assert result.discount_percentage == 0.05
    assert result.risk_category == "high"


def test_age_factor_uses_full_decades_past_35(make_profile):
    result = compute_risk(make_profile(age=36, height_cm=180, weight_kg=75, exercise_days_per_week=5))

    assert result.bmi == pytest.approx(23.15, abs=0.01)
    assert result.age_factor == 1.0


@pytest.mark.parametrize(
    "age,expected",
    [(1, 1.0), (35, 1.0), (44, 1.0), (45, 1.02), (54, 1.02), (55, 1.04), (120, 1.16)],
)
def test_age_factor_steps(age, expected):
    assert age_factor(age) == pytest.approx(expected)


def test_age_factor_is_monotonic():
    factors = [age_factor(a) for a in range(1, 121)]
    assert all(a <= b for a, b in zip(factors, factors[1:]))


def test_final_premium_applies_surcharge(make_profile):
    result = compute_risk(make_profile(), base_premium=200)
    assert result.final_premium == pytest.approx(210.0)


def test_exercise_days_are_clamped():
    assert exercise_factor(-3) == 0.0
    assert exercise_factor(12) == 1.0
    assert exercise_factor(3.5) == 0.5


@pytest.mark.parametrize(
    "field,value",
    list(itertools.product(["age", "height_cm", "weight_kg"], [None, 0, -5, float("nan"), float("inf")])),
)
def test_missing_or_non_positive_measurements_are_rejected(make_profile, field, value):
    with pytest.raises(IncompleteProfile) as exc_info:
        compute_risk(make_profile(**{field: value}))

    assert exc_info.value.missing == (field,)
    assert exc_info.value.message == INCOMPLETE_PROFILE_MESSAGE


def test_incomplete_profile_lists_every_missing_field():
    with pytest.raises(IncompleteProfile) as exc_info:
        compute_risk(HealthProfile(age=None, height_cm=None, weight_kg=70))
    assert exc_info.value.missing == ("age", "height_cm")
    assert isinstance(exc_info.value, ValueError)


def test_compute_risk_is_deterministic(make_profile):
    profile = make_profile(age=47, height_cm=163.5, weight_kg=71.2, exercise_days_per_week=2.5)
    assert compute_risk(profile, 150) == compute_risk(profile, 150)


def test_scores_stay_bounded_for_extreme_inputs(make_profile):
    ages = [1, 30, 36, 64, 120]
    heights = [5, 120, 170, 250]
    weights = [1, 40, 70, 300]
    for age, height, weight, days in itertools.product(ages, heights, weights, range(0, 8)):
        result = compute_risk(make_profile(age=age, height_cm=height, weight_kg=weight, exercise_days_per_week=days))
        assert result.bmi > 0
        for value in (
            result.bmi_deviation_factor,
            result.exercise_factor,
            result.base_risk_score,
            result.adjusted_risk_score,
        ):
            assert 0.0 <= value <= 1.0
        assert result.age_factor >= 1.0
        assert 1 <= result.risk_level <= 5


@pytest.mark.parametrize("age,height,weight", [(28, 170, 65), (45, 160, 80), (70, 185, 60)])
def test_more_exercise_never_increases_risk(make_profile, age, height, weight):
    scores = [
        compute_risk(make_profile(age=age, height_cm=height, weight_kg=weight, exercise_days_per_week=d)).adjusted_risk_score
        for d in range(0, 8)
    ]
    assert all(a >= b for a, b in zip(scores, scores[1:]))


@pytest.mark.parametrize(
    "score,level",
    [
        (0.0, 1),
        (0.2, 1),
        (0.2000001, 2),
        (0.4, 2),
        (0.41, 3),
        (0.6, 3),
        (0.61, 4),
        (0.8, 4),
        (0.8000001, 5),
        (1.0, 5),
    ],
)
def test_tier_boundaries(score, level):
    assert classify_risk(score).level == level


def test_tiers_partition_unit_interval():
    levels = [classify_risk(i / 1000).level for i in range(0, 1001)]
    assert levels == sorted(levels)
    assert set(levels) == {1, 2, 3, 4, 5}


@pytest.mark.parametrize("bmi,category", [(17.0, "underweight"), (22.0, "normal"), (27.5, "overweight"), (31, "obese")])
def test_bmi_category(bmi, category):
    assert bmi_category(bmi) == category


def test_recommendations_for_high_risk_older_user(make_profile):
    result = compute_risk(make_profile(age=50, height_cm=170, weight_kg=95, exercise_days_per_week=0))
    recs = get_improvement_recommendations(result)

    assert recs == [
        "Consider healthy weight management",
        "Increase exercise frequency to 4-5 days per week",
        "Consider age-appropriate fitness programs",
        "Regular health check-ups recommended",
        "Consult with healthcare professionals",
        "Consider comprehensive health assessment",
    ]


def test_no_recommendations_for_fit_young_user(make_profile):
    result = compute_risk(make_profile(age=25, exercise_days_per_week=5))
    assert get_improvement_recommendations(result) == []


def test_format_risk_display(make_profile):
    display = format_risk_display(compute_risk(make_profile()))
    assert display == {
        "title": "Risk Level 1",
        "subtitle": "Lowest risk - Excellent health profile",
        "color": "bg-green-100 text-green-800",
        "percentage": "+5%",
    }


def test_nan_exercise_counts_as_no_exercise(make_profile):
    assert exercise_factor(float("nan")) == 0.0

    result = compute_risk(make_profile(exercise_days_per_week=float("nan")))
    assert result == compute_risk(make_profile(exercise_days_per_week=0))
    assert 0.0 <= result.base_risk_score <= 1.0
