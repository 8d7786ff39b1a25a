from datetime import datetime, timedelta

import pandas as pd

from backend.core.discount_service import build_discount_event
from backend.core.export_service import LEDGER_COLUMNS, export_ledger_to_csv, ledger_to_frame


def _event(user_id, plan_id="basic-starter", amount=0.1, minutes=0):
    when = datetime(2024, 1, 1, 9, 0, 0) + timedelta(minutes=minutes)
    return build_discount_event(user_id, plan_id, amount, "test", timestamp=when)


def test_empty_ledger(ledger):
    assert ledger.all() == []
    assert ledger.history("nobody") == []


def test_record_appends_and_persists(ledger):
    first = ledger.record(_event("u1"))
    ledger.record(_event("u2", minutes=1))

    rows = ledger.all()
    assert [e.user_id for e in rows] == ["u1", "u2"]
    assert rows[0] == first


def test_history_is_newest_first_and_limited(ledger):
    for minutes in (5, 1, 3):
        ledger.record(_event("u1", minutes=minutes))
    ledger.record(_event("u2", minutes=10))

    history = ledger.history("u1")
    assert [e.timestamp.minute for e in history] == [5, 3, 1]
    assert len(ledger.history("u1", limit=2)) == 2
    assert ledger.history("u1", limit=0) == []


def test_ledger_frame_filters_by_user(ledger):
    ledger.record(_event("u1"))
    ledger.record(_event("u2", amount=0.2))

    df = ledger_to_frame(ledger, user_id="u2")
    assert list(df.columns) == LEDGER_COLUMNS
    assert len(df) == 1
    assert df.loc[0, "amount"] == 0.2


def test_export_ledger_to_csv(ledger, tmp_path):
    ledger.record(_event("u1", plan_id="standard-family", amount=0.15))

    path = export_ledger_to_csv(ledger, str(tmp_path / "exports" / "ledger.csv"))
    df = pd.read_csv(path)

    assert df.loc[0, "plan_id"] == "standard-family"
    assert df.loc[0, "amount"] == 0.15
    assert df.loc[0, "timestamp"] == "2024-01-01T09:00:00"
