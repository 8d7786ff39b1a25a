from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from core.constants import RISK_CATEGORY_BY_LEVEL


@dataclass(frozen=True)
class HealthProfile:
    """Physical and activity attributes used as scoring input.

    age, height_cm and weight_kg stay optional here so that an incomplete
    record can still be represented; the scorer rejects it.
    """

    age: Optional[int]
    height_cm: Optional[float]
    weight_kg: Optional[float]
    exercise_days_per_week: float = 0.0
    gender: Optional[str] = None
    smoking_status: Optional[str] = None
    occupation: Optional[str] = None
    chronic_conditions: Tuple[str, ...] = ()
    family_history: Tuple[str, ...] = ()

    @property
    def bmi(self) -> Optional[float]:
        if not self.height_cm or not self.weight_kg:
            return None
        return self.weight_kg / (self.height_cm / 100) ** 2


@dataclass(frozen=True)
class RiskResult:
    age: int
    bmi: float
    bmi_deviation: float
    bmi_deviation_factor: float
    exercise_factor: float
    base_risk_score: float
    age_factor: float
    adjusted_risk_score: float
    risk_level: int
    risk_description: str
    premium_surcharge_percentage: float
    discount_percentage: float
    final_premium: Optional[float] = None

    @property
    def risk_category(self) -> str:
        return RISK_CATEGORY_BY_LEVEL[self.risk_level]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["risk_category"] = self.risk_category
        return data


@dataclass(frozen=True)
class Coverage:
    hospital_care: float = 0.0
    outpatient_care: float = 0.0
    emergency_care: float = 0.0
    prescription_drugs: float = 0.0
    preventive_care: float = 0.0
    mental_health: float = 0.0
    dental_care: float = 0.0
    vision_care: float = 0.0


@dataclass(frozen=True)
class InsurancePlan:
    id: str
    name: str
    category: str
    base_price: float
    coverage: Coverage
    deductible: float
    out_of_pocket_max: float
    age_groups: Tuple[str, ...]
    risk_categories: Tuple[str, ...]
    features: Tuple[str, ...]
    description: str
    min_level: int
    is_popular: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InsurancePlan":
        coverage = data.get("coverage") or {}
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            category=str(data["category"]),
            base_price=float(data["base_price"]),
            coverage=Coverage(**{k: float(v) for k, v in coverage.items()}),
            deductible=float(data.get("deductible", 0)),
            out_of_pocket_max=float(data.get("out_of_pocket_max", 0)),
            age_groups=tuple(data.get("age_groups", ())),
            risk_categories=tuple(data.get("risk_categories", ())),
            features=tuple(data.get("features", ())),
            description=str(data.get("description", "")),
            min_level=int(data.get("min_level", 1)),
            is_popular=bool(data.get("is_popular", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PlanRecommendation:
    plan: InsurancePlan
    score: int
    monthly_premium: float
    discount_percentage: float
    risk_adjustment: float
    is_recommended: bool
    reasoning: Tuple[str, ...] = ()
    pros: Tuple[str, ...] = ()
    cons: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DiscountEvent:
    id: str
    user_id: str
    plan_id: str
    discount_type: str
    amount: float
    reason: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat(timespec="seconds")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiscountEvent":
        return cls(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            plan_id=str(data["plan_id"]),
            discount_type=str(data["discount_type"]),
            amount=float(data["amount"]),
            reason=str(data["reason"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )
