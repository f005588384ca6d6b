"""Tests for the static spending breakdown."""

import pytest

from taxvoice.spending import (
    REFERENCE_TOTAL_TAX,
    SPENDING_CATEGORIES,
    dollars_for,
    find_item,
    get_tax_spending,
)


class TestGetTaxSpending:
    def test_sorted_by_percentage(self):
        categories = get_tax_spending()
        percentages = [c.percentage for c in categories]
        assert percentages == sorted(percentages, reverse=True)
        assert len(categories) == 14

    def test_location_and_amount_do_not_change_data(self):
        assert get_tax_spending("Ohio", 12000) == get_tax_spending()

    def test_item_ids_unique(self):
        ids = [item.id for category in SPENDING_CATEGORIES for item in category.items]
        assert len(ids) == len(set(ids)) == 62

    def test_interest_has_no_items(self):
        interest = next(c for c in SPENDING_CATEGORIES if c.id == "interest_debt")
        assert interest.items == []

    def test_to_dict(self):
        data = get_tax_spending()[0].to_dict()
        assert set(data) == {"id", "category", "percentage", "tooltip", "items"}
        assert "amount_per_dollar" in data["items"][0]


class TestFindItem:
    def test_found(self):
        category, item = find_item("medicaid")
        assert category.id == "health"
        assert item.description == "Medicaid"

    def test_missing(self):
        assert find_item("moon_base") is None

    def test_dollars_for(self):
        _, item = find_item("medicaid")
        assert dollars_for(item, REFERENCE_TOTAL_TAX) == pytest.approx(item.amount, abs=0.01)
        assert dollars_for(item, 0) == 0
