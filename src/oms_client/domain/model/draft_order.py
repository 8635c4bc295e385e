"""DraftOrder: the user's in-progress, unsubmitted order composition.

The draft is an ordered list of line items addressed by position. It
accepts whatever the user types: nothing is validated until the draft is
turned into a submission (see ``domain.service.submission_preparation``).

Invariants:
- there is always at least one line item
- removing the last remaining line item is a no-op
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from oms_client.domain.exceptions import ItemIndexError, ValidationError

DEFAULT_QUANTITY = 1

EDITABLE_FIELDS = ("product_ref", "requested_quantity")


@dataclass(frozen=True)
class LineItem:
    """One row of a draft: a product reference and a requested quantity.

    Both fields hold raw user input. ``product_ref`` is None (or blank)
    while the user is still choosing.
    """

    product_ref: str | None = None
    requested_quantity: object = DEFAULT_QUANTITY

    @property
    def has_product(self) -> bool:
        return self.product_ref is not None and str(self.product_ref).strip() != ""


class DraftOrder:

    def __init__(self, items: list[LineItem] | None = None) -> None:
        self._items: list[LineItem] = list(items) if items else [LineItem()]

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # --- Edits ----------------------------------------------------------------

    def add_item(self) -> None:
        """Append an empty row (no product, quantity 1)."""
        self._items.append(LineItem())

    def remove_item(self, index: int) -> None:
        """Remove the row at *index*; a no-op when only one row remains."""
        if len(self._items) <= 1:
            return
        self._check_index(index)
        del self._items[index]

    def update_item(self, index: int, field: str, value: object) -> None:
        """Replace one field of the row at *index*, leaving everything else.

        *value* is stored as given, however malformed.
        """
        if field not in EDITABLE_FIELDS:
            raise ValidationError(f"Unknown line item field '{field}'")
        self._check_index(index)
        self._items[index] = replace(self._items[index], **{field: value})

    def reset(self) -> None:
        """Back to the initial state: a single empty row."""
        self._items = [LineItem()]

    # --- Internal helpers -----------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise ItemIndexError(
                f"No line item at position {index} (draft has {len(self._items)})"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DraftOrder):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"DraftOrder(items={self._items!r})"
