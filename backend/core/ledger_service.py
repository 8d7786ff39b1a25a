from __future__ import annotations

import logging
import threading
from typing import List

from backend.config.db import read_json, write_json
from backend.config.settings import DEFAULT_HISTORY_LIMIT
from backend.models import DiscountEvent

logger = logging.getLogger(__name__)


class DiscountLedger:
    """
    Append-only discount history kept in a JSON file.

    Rows are never updated or removed; the scoring services only build
    DiscountEvent values and the caller decides whether to record them.
    """

    def __init__(self, filepath: str):
        self.filepath = str(filepath)
        self._lock = threading.Lock()

    def record(self, event: DiscountEvent) -> DiscountEvent:
        with self._lock:
            rows = read_json(self.filepath, default=[])
            if not isinstance(rows, list):
                raise ValueError(f"Ledger file {self.filepath} is not a JSON list.")
            rows.append(event.to_dict())
            write_json(self.filepath, rows)
        logger.info(
            "Discount recorded: user=%s plan=%s type=%s amount=%.4f",
            event.user_id, event.plan_id, event.discount_type, event.amount,
        )
        return event

    def all(self) -> List[DiscountEvent]:
        with self._lock:
            rows = read_json(self.filepath, default=[])
        return [DiscountEvent.from_dict(row) for row in rows]

    def history(self, user_id: str, limit: int = DEFAULT_HISTORY_LIMIT) -> List[DiscountEvent]:
        """Newest first."""
        events = [e for e in self.all() if e.user_id == user_id]
        events.sort(key=lambda e: e.timestamp, reverse=True)
        return events[: max(0, limit)]
