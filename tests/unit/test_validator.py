from datetime import date

import pytest

from backend.core.risk_service import IncompleteProfile, compute_risk
from backend.utils.validator import (
    build_health_profile,
    normalize_exercise_days,
    parse_optional_number,
    sanitize_text,
    validate_profile_payload,
)


def test_camel_case_payload():
    profile = build_health_profile(
        {"age": 30, "heightCm": 170, "weightKg": 65, "exerciseDaysPerWeek": 4}
    )
    assert (profile.age, profile.height_cm, profile.weight_kg) == (30, 170.0, 65.0)
    assert profile.exercise_days_per_week == 4.0


def test_persisted_row_and_fitness_goal_shapes():
    profile = build_health_profile(
        {"age": "42", "height": "165.5", "currentWeight": "70", "workoutDaysPerWeek": "3"}
    )
    assert profile.age == 42
    assert profile.height_cm == 165.5
    assert profile.weight_kg == 70.0
    assert profile.exercise_days_per_week == 3.0


def test_height_in_meters_is_converted():
    profile = build_health_profile({"age": 30, "height_m": 1.7, "weight_kg": 65})
    assert profile.height_cm == pytest.approx(170.0)


@pytest.mark.parametrize("today,expected", [(date(2024, 6, 14), 33), (date(2024, 6, 15), 34)])
def test_age_derived_from_date_of_birth(today, expected):
    profile = build_health_profile(
        {"date_of_birth": "1990-06-15", "height_cm": 170, "weight_kg": 65}, today=today
    )
    assert profile.age == expected


def test_explicit_age_wins_over_date_of_birth():
    profile = build_health_profile({"age": 50, "dateOfBirth": "2000-01-01", "height": 170, "weight": 70})
    assert profile.age == 50


@pytest.mark.parametrize(
    "payload,days",
    [
        ({"exerciseFrequency": "none"}, 0),
        ({"exerciseFrequency": "light"}, 2),
        ({"exerciseFrequency": "Moderate"}, 4),
        ({"exerciseFrequency": "heavy"}, 6),
        ({"exerciseFrequency": "daily"}, 7),
        ({"exerciseFrequency": "3 times per week"}, 3),
        ({"exerciseFrequency": "1 time per week"}, 1),
        ({"exerciseFrequency": "9 times per week"}, 7),
        ({"exerciseFrequency": "rarely"}, 1),
        ({"exerciseFrequency": "never"}, 0),
        ({"challengesCompleted": 3}, 3),
        ({"challengesCompleted": 8, "windowDays": 14}, 4),
        ({"challengesCompleted": 30}, 7),
        ({"exercise_days": 12}, 7),
        ({"exercise_days": -1}, 0),
        ({}, 0),
    ],
)
def test_exercise_representations_normalize_to_days(payload, days):
    assert normalize_exercise_days(payload) == pytest.approx(days)


def test_explicit_days_take_precedence_over_frequency():
    assert normalize_exercise_days({"exerciseDaysPerWeek": 5, "exerciseFrequency": "none"}) == 5


def test_unknown_frequency_is_a_validation_error():
    result = validate_profile_payload({"age": 30, "height": 170, "weight": 65, "exerciseFrequency": "sometimes"})
    assert not result.is_valid()
    assert "exercise" in result.errors
    with pytest.raises(ValueError):
        build_health_profile({"age": 30, "height": 170, "weight": 65, "exerciseFrequency": "sometimes"})


def test_invalid_enum_fields_are_reported():
    result = validate_profile_payload({"smokingStatus": "sometimes", "occupation": "astronaut", "gender": "male"})
    assert set(result.errors) == {"smoking_status", "occupation"}
    assert result.cleaned["gender"] == "male"


def test_optional_lifestyle_fields():
    profile = build_health_profile(
        {
            "age": 40,
            "height": 175,
            "weight": 80,
            "smokingStatus": "Former",
            "occupation": "physical",
            "chronicConditions": ["diabetes", "<b>asthma</b>", ""],
            "familyHistory": "heart disease, stroke",
        }
    )
    assert profile.smoking_status == "former"
    assert profile.occupation == "physical"
    assert profile.chronic_conditions == ("diabetes", "asthma")
    assert profile.family_history == ("heart disease", "stroke")


def test_missing_weight_is_left_for_the_scorer_to_reject():
    profile = build_health_profile({"age": 30, "heightCm": 170, "exerciseDaysPerWeek": 4})
    assert profile.weight_kg is None
    with pytest.raises(IncompleteProfile) as exc_info:
        compute_risk(profile)
    assert exc_info.value.missing == ("weight_kg",)


def test_unparseable_measurement_counts_as_missing():
    profile = build_health_profile({"age": "thirty", "height": "tall", "weight": 65})
    assert profile.age is None
    assert profile.height_cm is None


def test_parse_optional_number():
    assert parse_optional_number({}, "basePremium") is None
    assert parse_optional_number({"basePremium": "120.5"}, "basePremium") == 120.5
    with pytest.raises(ValueError):
        parse_optional_number({"basePremium": "lots"}, "basePremium")
    with pytest.raises(ValueError):
        parse_optional_number({"basePremium": -1}, "basePremium")


def test_sanitize_text():
    assert sanitize_text("<script>x</script> hello!") == "x hello"
    assert sanitize_text(None) == ""


@pytest.mark.parametrize("window", [0, -7, "abc"])
def test_bad_challenge_window_is_rejected(window):
    with pytest.raises(ValueError, match="Challenge window"):
        normalize_exercise_days({"challengesCompleted": 3, "windowDays": window})


def test_infinite_age_counts_as_missing():
    profile = build_health_profile({"age": float("inf"), "height": 170, "weight": 65})

    assert profile.age is None
    with pytest.raises(IncompleteProfile) as exc:
        compute_risk(profile)
    assert exc.value.missing == ("age",)


def test_infinite_exercise_days_is_a_validation_error():
    result = validate_profile_payload({"age": 30, "height": 170, "weight": 65, "exercise_days": float("inf")})
    assert "exercise" in result.errors
