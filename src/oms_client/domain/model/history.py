"""Inventory history: the back end's audit log of stock changes.

Every product create, update and delete, and every placed order, leaves
one entry. The client only reads the log.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

ADD = "ADD"
UPDATE = "UPDATE"
DELETE = "DELETE"
ORDER = "ORDER"

HISTORY_ACTIONS = (ADD, UPDATE, DELETE, ORDER)


@dataclass(frozen=True)
class HistoryEntry:

    id: int | str
    action: str
    previous_quantity: int | None = None
    new_quantity: int | None = None
    description: str | None = None
    created_at: datetime | None = None

    @property
    def quantity_change(self) -> int | None:
        """Signed stock movement, when both sides are known."""
        if self.previous_quantity is None or self.new_quantity is None:
            return None
        return self.new_quantity - self.previous_quantity
