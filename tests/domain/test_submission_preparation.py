"""Unit tests for turning a draft into a submission request."""

from decimal import Decimal

import pytest

from oms_client.domain.exceptions import EmptyOrderError, UnknownProductError
from oms_client.domain.model.catalog import ProductCatalog
from oms_client.domain.model.draft_order import DraftOrder, LineItem
from oms_client.domain.model.value_objects import Money, Quantity
from oms_client.domain.service.submission_preparation import (
    prepare_submission,
    select_candidates,
)
from tests.fakes import make_product


def _catalog() -> ProductCatalog:
    return ProductCatalog([
        make_product("P1", "Widget", "9.99"),
        make_product("P2", "Gadget", "25.00"),
    ])


def _draft(*rows: tuple) -> DraftOrder:
    return DraftOrder([LineItem(ref, qty) for ref, qty in rows])


class TestHappyPath:

    def test_single_line(self):
        request = prepare_submission(_draft(("P1", 2)), _catalog())
        assert request.to_wire() == {
            "orderItems": [
                {"product": {"id": "P1"}, "quantity": 2, "unitPrice": 9.99},
            ]
        }

    def test_line_carries_parsed_quantity_and_price_snapshot(self):
        request = prepare_submission(_draft(("P1", "3")), _catalog())
        line = request.lines[0]
        assert line.product_id == "P1"
        assert line.quantity == Quantity(3)
        assert line.unit_price == Money(Decimal("9.99"))

    def test_keeps_draft_order(self):
        request = prepare_submission(_draft(("P2", 1), ("P1", 4)), _catalog())
        assert [line.product_id for line in request.lines] == ["P2", "P1"]

    def test_uses_catalog_id_value(self):
        catalog = ProductCatalog([make_product(5, "Numbered", "1.00")])
        request = prepare_submission(_draft(("5", 1)), catalog)
        assert request.to_wire()["orderItems"][0]["product"] == {"id": 5}

    def test_does_not_check_stock(self):
        catalog = ProductCatalog([make_product("P1", "Widget", "9.99", quantity=1)])
        request = prepare_submission(_draft(("P1", 50)), catalog)
        assert request.lines[0].quantity.value == 50

    def test_draft_left_untouched(self):
        draft = _draft(("P1", 2), ("", 1))
        before = draft.items
        prepare_submission(draft, _catalog())
        assert draft.items == before


class TestSelectionFilter:

    def test_invalid_quantity_rows_dropped_others_kept(self):
        request = prepare_submission(_draft(("P1", 2), ("P2", 0)), _catalog())
        assert [line.product_id for line in request.lines] == ["P1"]

    @pytest.mark.parametrize("qty", [0, -1, "abc", "", "2.5", None])
    def test_bad_quantity_excluded(self, qty):
        request = prepare_submission(_draft(("P1", 1), ("P2", qty)), _catalog())
        assert len(request.lines) == 1

    def test_rows_without_product_dropped(self):
        request = prepare_submission(_draft((None, 3), ("P2", 1), ("  ", 2)), _catalog())
        assert [line.product_id for line in request.lines] == ["P2"]

    def test_oversized_quantity_row_dropped(self):
        request = prepare_submission(_draft(("P1", "2"), ("P1", "9" * 5000)), _catalog())
        assert len(request.lines) == 1
        assert request.lines[0].quantity == Quantity(2)

    def test_select_candidates_pairs_rows_with_quantity(self):
        candidates = select_candidates(_draft(("P1", "2"), ("P2", "x")))
        assert candidates == [(LineItem("P1", "2"), Quantity(2))]


class TestEmptyOrder:

    def test_fresh_draft(self):
        with pytest.raises(EmptyOrderError, match="at least one product"):
            prepare_submission(DraftOrder(), _catalog())

    def test_blank_product(self):
        with pytest.raises(EmptyOrderError):
            prepare_submission(_draft(("", 1)), _catalog())

    def test_all_rows_filtered(self):
        with pytest.raises(EmptyOrderError):
            prepare_submission(_draft(("P1", 0), ("P2", "x"), (None, 1)), _catalog())

    def test_checked_before_catalog(self):
        with pytest.raises(EmptyOrderError):
            prepare_submission(_draft(("", 1)), ProductCatalog())


class TestUnknownProduct:

    def test_unknown_ref_aborts(self):
        with pytest.raises(UnknownProductError) as excinfo:
            prepare_submission(_draft(("P1", 1), ("P9", 1)), _catalog())
        assert excinfo.value.product_ref == "P9"
        assert "P9" in str(excinfo.value)

    def test_unknown_ref_in_filtered_row_is_ignored(self):
        request = prepare_submission(_draft(("P1", 1), ("P9", 0)), _catalog())
        assert len(request.lines) == 1

    def test_empty_catalog(self):
        with pytest.raises(UnknownProductError):
            prepare_submission(_draft(("P1", 1)), ProductCatalog())
