from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Mapping, MutableMapping, Optional, Tuple

from core.constants import (
    DEFAULT_CHALLENGE_WINDOW_DAYS,
    EXERCISE_FREQUENCY_DAYS,
    EXERCISE_PHRASE_DAYS,
    GENDER_OPTIONS,
    MAX_EXERCISE_DAYS,
    OCCUPATION_OPTIONS,
    SMOKER_OPTIONS,
)
from backend.models import HealthProfile

logger = logging.getLogger(__name__)

__all__ = [
    "ValidationResult",
    "build_health_profile",
    "parse_optional_number",
    "normalize_exercise_days",
    "sanitize_text",
    "validate_profile_payload",
]

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_SAFE_CHARS_RE = re.compile(r"[^\w\s\-\.\@]")
_TIMES_PER_WEEK_RE = re.compile(r"^(\d+)\s+times?\s+(?:per|a)\s+week$")

_SMOKER_SET = {s.lower() for s in SMOKER_OPTIONS}
_OCCUPATION_SET = {o.lower() for o in OCCUPATION_OPTIONS}
_GENDER_SET = {g.lower() for g in GENDER_OPTIONS}

# first present key wins
_AGE_KEYS = ("age",)
_DOB_KEYS = ("date_of_birth", "dateOfBirth")
_HEIGHT_CM_KEYS = ("heightCm", "height_cm", "height")
_HEIGHT_M_KEYS = ("heightM", "height_m")
_WEIGHT_KEYS = ("weightKg", "weight_kg", "weight", "currentWeight")
_EXERCISE_DAYS_KEYS = (
    "exerciseDaysPerWeek",
    "exercise_days_per_week",
    "exercise_days",
    "workoutDaysPerWeek",
    "workout_days_per_week",
)
_EXERCISE_FREQUENCY_KEYS = ("exerciseFrequency", "exercise_frequency")
_CHALLENGE_KEYS = ("challengesCompleted", "challenges_completed")
_WINDOW_KEYS = ("windowDays", "window_days")


@dataclass(frozen=True)
class ValidationResult:
    errors: Dict[str, str]
    cleaned: Dict[str, Any]

    def is_valid(self) -> bool:
        return not bool(self.errors)


def sanitize_text(value: Any) -> str:
    if value is None:
        return ""
    text = str(value)
    text = _HTML_TAG_RE.sub("", text)
    text = _SAFE_CHARS_RE.sub("", text)
    return text.strip()


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        v = float(value)
        if not math.isfinite(v):
            return None
        return v
    except (TypeError, ValueError):
        logger.debug("safe float conversion failed for %r", value)
        return None


def _to_int(value: Any) -> Optional[int]:
    v = _to_float(value)
    return None if v is None else int(v)


def _first(raw: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return None


def _age_from_birth_date(value: Any, today: date) -> Optional[int]:
    try:
        born = value if isinstance(value, date) else date.fromisoformat(str(value)[:10])
    except ValueError:
        logger.debug("unparseable date of birth %r", value)
        return None
    had_birthday = (today.month, today.day) >= (born.month, born.day)
    return today.year - born.year - (0 if had_birthday else 1)


def _clamp_days(days: float) -> float:
    return min(max(days, 0.0), float(MAX_EXERCISE_DAYS))


def _days_from_frequency(value: Any) -> float:
    text = str(value).strip().lower()
    if text in EXERCISE_FREQUENCY_DAYS:
        return float(EXERCISE_FREQUENCY_DAYS[text])
    if text in EXERCISE_PHRASE_DAYS:
        return float(EXERCISE_PHRASE_DAYS[text])
    match = _TIMES_PER_WEEK_RE.match(text)
    if match:
        return _clamp_days(float(match.group(1)))
    raise ValueError(f"Unrecognised exercise frequency: {value!r}")


def normalize_exercise_days(raw: Mapping[str, Any]) -> float:
    """
    Reduce any supported exercise representation to days per week (0..7).

    Checked in order: explicit days, frequency enum or phrase, then a
    challenge-completion count over `windowDays` (default 7). No exercise
    data at all means 0 days.
    """
    days_raw = _first(raw, _EXERCISE_DAYS_KEYS)
    if days_raw is not None:
        days = _to_float(days_raw)
        if days is None:
            raise ValueError(f"Exercise days must be a number, got {days_raw!r}")
        return _clamp_days(days)

    frequency = _first(raw, _EXERCISE_FREQUENCY_KEYS)
    if frequency is not None:
        return _days_from_frequency(frequency)

    completed_raw = _first(raw, _CHALLENGE_KEYS)
    if completed_raw is not None:
        completed = _to_float(completed_raw)
        if completed is None:
            raise ValueError(f"Challenge count must be a number, got {completed_raw!r}")
        window_raw = _first(raw, _WINDOW_KEYS)
        window = DEFAULT_CHALLENGE_WINDOW_DAYS if window_raw is None else _to_float(window_raw)
        if window is None or window <= 0:
            raise ValueError(f"Challenge window must be a positive number of days, got {window_raw!r}")
        return _clamp_days(completed * 7.0 / window)

    return 0.0


def _string_tuple(value: Any) -> Tuple[str, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        value = value.split(",")
    elif not isinstance(value, (list, tuple, set)):
        value = [value]
    return tuple(t for t in (sanitize_text(v) for v in value) if t)


def _choice(
    raw: Mapping[str, Any],
    keys: Tuple[str, ...],
    allowed: set,
    field: str,
    errors: MutableMapping[str, str],
) -> Optional[str]:
    value = _first(raw, keys)
    if value is None:
        return None
    text = str(value).strip().lower()
    if text not in allowed:
        errors[field] = f"Invalid {field.replace('_', ' ')}: {value!r}."
        logger.warning("Validation failed for %s: %s", field, value)
        return None
    return text


def validate_profile_payload(raw: Mapping[str, Any], *, today: Optional[date] = None) -> ValidationResult:
    """
    Normalize a profile payload from any of the known upstream shapes.

    Required measurements that are absent or unparseable are left as None;
    rejecting them is the scorer's job. Only values that are present but
    malformed (exercise data, enum fields) are reported as errors.
    """
    today = today or date.today()
    errors: MutableMapping[str, str] = {}
    cleaned: MutableMapping[str, Any] = {}

    age = _to_int(_first(raw, _AGE_KEYS))
    if age is None:
        dob = _first(raw, _DOB_KEYS)
        if dob is not None:
            age = _age_from_birth_date(dob, today)
    cleaned["age"] = age

    height_cm = _to_float(_first(raw, _HEIGHT_CM_KEYS))
    if height_cm is None:
        height_m = _to_float(_first(raw, _HEIGHT_M_KEYS))
        height_cm = None if height_m is None else height_m * 100
    cleaned["height_cm"] = height_cm
    cleaned["weight_kg"] = _to_float(_first(raw, _WEIGHT_KEYS))

    try:
        cleaned["exercise_days_per_week"] = normalize_exercise_days(raw)
    except ValueError as exc:
        errors["exercise"] = str(exc)
        logger.warning("Validation failed for exercise: %s", exc)

    cleaned["smoking_status"] = _choice(
        raw, ("smokingStatus", "smoking_status"), _SMOKER_SET, "smoking_status", errors
    )
    cleaned["occupation"] = _choice(raw, ("occupation",), _OCCUPATION_SET, "occupation", errors)
    cleaned["gender"] = _choice(raw, ("gender", "sex"), _GENDER_SET, "gender", errors)
    cleaned["chronic_conditions"] = _string_tuple(
        _first(raw, ("chronicConditions", "chronic_conditions"))
    )
    cleaned["family_history"] = _string_tuple(_first(raw, ("familyHistory", "family_history")))

    return ValidationResult(errors=dict(errors), cleaned=dict(cleaned))


def build_health_profile(raw: Mapping[str, Any], *, today: Optional[date] = None) -> HealthProfile:
    result = validate_profile_payload(raw, today=today)
    if not result.is_valid():
        raise ValueError("; ".join(f"{k}: {v}" for k, v in sorted(result.errors.items())))
    return HealthProfile(**result.cleaned)


def parse_optional_number(raw: Mapping[str, Any], *keys: str, minimum: float = 0.0) -> Optional[float]:
    """Optional numeric field: absent -> None, present but malformed -> ValueError."""
    value = _first(raw, keys)
    if value is None:
        return None
    number = _to_float(value)
    if number is None or number < minimum:
        raise ValueError(f"{keys[0]} must be a number >= {minimum:g}, got {value!r}")
    return number
