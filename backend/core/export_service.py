import os

import pandas as pd

from backend.core.ledger_service import DiscountLedger

LEDGER_COLUMNS = ["id", "user_id", "plan_id", "discount_type", "amount", "reason", "timestamp"]


def ledger_to_frame(ledger: DiscountLedger, user_id=None) -> pd.DataFrame:
    """Ledger rows as a DataFrame, optionally filtered to one user."""
    rows = [e.to_dict() for e in ledger.all()]
    df = pd.DataFrame(rows, columns=LEDGER_COLUMNS)
    if user_id is not None:
        df = df[df["user_id"] == user_id]
    return df.reset_index(drop=True)


def export_to_csv(df: pd.DataFrame, output_path: str):
    """Export DataFrame to a CSV file."""
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    df.to_csv(output_path, index=False)
    return output_path


def export_ledger_to_csv(ledger: DiscountLedger, output_path: str, user_id=None):
    return export_to_csv(ledger_to_frame(ledger, user_id=user_id), output_path)


def ledger_to_csv_bytes(ledger: DiscountLedger, user_id=None) -> bytes:
    """CSV export held in memory, for streaming straight to a client."""
    return ledger_to_frame(ledger, user_id=user_id).to_csv(index=False).encode("utf-8")
