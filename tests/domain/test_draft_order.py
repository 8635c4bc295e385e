"""Unit tests for the DraftOrder state and its edit operations."""

import pytest

from oms_client.domain.exceptions import ItemIndexError, ValidationError
from oms_client.domain.model.draft_order import DraftOrder, LineItem


def _draft(*rows: tuple) -> DraftOrder:
    """Build a draft from (product_ref, quantity) rows."""
    return DraftOrder([LineItem(ref, qty) for ref, qty in rows])


class TestDraftCreation:

    def test_starts_with_one_empty_item(self):
        draft = DraftOrder()
        assert draft.items == (LineItem(),)
        assert draft.items[0].product_ref is None
        assert draft.items[0].requested_quantity == 1

    def test_empty_list_still_gives_one_item(self):
        assert len(DraftOrder([])) == 1


class TestAddItem:

    def test_appends_empty_row(self):
        draft = _draft(("1", 2))
        draft.add_item()
        assert draft.items == (LineItem("1", 2), LineItem(None, 1))

    def test_no_cap_on_length(self):
        draft = DraftOrder()
        for _ in range(200):
            draft.add_item()
        assert len(draft) == 201


class TestRemoveItem:

    def test_removes_by_position(self):
        draft = _draft(("1", 1), ("2", 2), ("3", 3))
        draft.remove_item(1)
        assert draft.items == (LineItem("1", 1), LineItem("3", 3))

    def test_last_item_cannot_be_removed(self):
        draft = _draft(("1", 5))
        draft.remove_item(0)
        assert draft.items == (LineItem("1", 5),)

    def test_last_item_guard_ignores_bad_index(self):
        draft = DraftOrder()
        draft.remove_item(7)  # must not raise
        assert len(draft) == 1

    def test_out_of_range_raises(self):
        draft = _draft(("1", 1), ("2", 2))
        with pytest.raises(ItemIndexError):
            draft.remove_item(2)

    def test_negative_index_is_out_of_range(self):
        draft = _draft(("1", 1), ("2", 2))
        with pytest.raises(IndexError):
            draft.remove_item(-1)

    def test_never_drops_below_one(self):
        draft = _draft(("1", 1), ("2", 2), ("3", 3))
        for _ in range(5):
            draft.remove_item(0)
        assert len(draft) == 1
        assert draft.items == (LineItem("3", 3),)


class TestUpdateItem:

    def test_updates_only_named_field(self):
        draft = _draft(("1", 1), ("2", 2))
        draft.update_item(1, "requested_quantity", "7")
        assert draft.items == (LineItem("1", 1), LineItem("2", "7"))

    def test_sets_product(self):
        draft = DraftOrder()
        draft.update_item(0, "product_ref", "3")
        assert draft.items[0] == LineItem("3", 1)

    @pytest.mark.parametrize("value", ["abc", "-4", "", None, 0, 2.5, object()])
    def test_accepts_malformed_values(self, value):
        draft = DraftOrder()
        draft.update_item(0, "requested_quantity", value)
        assert draft.items[0].requested_quantity is value

    def test_idempotent(self):
        once = _draft(("1", 1), ("2", 2))
        twice = _draft(("1", 1), ("2", 2))
        once.update_item(1, "product_ref", "9")
        twice.update_item(1, "product_ref", "9")
        twice.update_item(1, "product_ref", "9")
        assert once == twice

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="Unknown line item field"):
            DraftOrder().update_item(0, "price", "1.00")

    def test_out_of_range_raises(self):
        with pytest.raises(ItemIndexError):
            DraftOrder().update_item(1, "product_ref", "1")


class TestReset:

    def test_back_to_single_empty_item(self):
        draft = _draft(("1", 1), ("2", 2))
        draft.reset()
        assert draft.items == (LineItem(),)


class TestItemsSnapshot:

    def test_items_is_a_copy(self):
        draft = _draft(("1", 1))
        snapshot = draft.items
        draft.update_item(0, "requested_quantity", 4)
        assert snapshot == (LineItem("1", 1),)

    def test_has_product(self):
        assert not LineItem().has_product
        assert not LineItem("  ").has_product
        assert LineItem("0").has_product
