import pytest

from app import create_app
from backend.core.ledger_service import DiscountLedger
from backend.core.plan_service import PlanCatalog
from backend.models import HealthProfile
from core.config import TestingConfig


@pytest.fixture
def make_profile():
    def _make(**overrides):
        values = dict(age=30, height_cm=170.0, weight_kg=65.0, exercise_days_per_week=4)
        values.update(overrides)
        return HealthProfile(**values)

    return _make


@pytest.fixture
def catalog():
    return PlanCatalog.default()


@pytest.fixture
def ledger(tmp_path):
    return DiscountLedger(tmp_path / "ledger" / "discount_history.json")


@pytest.fixture
def app(tmp_path):
    class Config(TestingConfig):
        LEDGER_PATH = tmp_path / "ledger.json"
        LOG_DIR = None

    return create_app(Config)


@pytest.fixture
def client(app):
    return app.test_client()
