"""Unit tests for inventory history entries."""

from oms_client.domain.model.history import ORDER, UPDATE, HistoryEntry


class TestHistoryEntry:

    def test_quantity_change(self):
        assert HistoryEntry(1, ORDER, previous_quantity=40, new_quantity=38).quantity_change == -2

    def test_quantity_change_unknown(self):
        assert HistoryEntry(2, UPDATE, previous_quantity=None, new_quantity=5).quantity_change is None
