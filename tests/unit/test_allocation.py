"""
Unit tests for the allocation consistency checks.

Run: pytest tests/unit/test_allocation.py -v
"""

from decimal import Decimal

import pytest

from validation.allocation import (
    check_add_color,
    check_color_quantity,
    check_fabric_quantity,
    check_total_order_quantity,
    color_headroom,
    fabric_quantity_headroom,
)
from tests.factories import FabricFactory, PlanFactory


def _plan_with_others():
    """Fabric 0 at 100, others summing to 80, order total 150."""
    return PlanFactory.create(
        total_order_quantity="150",
        fabrics=[
            FabricFactory.create(name="Cotton", quantity="100"),
            FabricFactory.create(name="Silk", quantity="50"),
            FabricFactory.create(name="Linen", quantity="30"),
        ],
    )


class TestCheckFabricQuantity:
    """Tests for check_fabric_quantity()"""

    def test_over_remaining_order_rejected(self):
        """80 elsewhere + 71 = 151 > 150."""
        result = check_fabric_quantity(_plan_with_others(), 0, "71")

        assert result.is_valid is False
        assert result.errors == [
            "Sum of all fabric quantities cannot exceed total order quantity (150); "
            "70 available for this fabric"
        ]

    def test_exactly_remaining_order_accepted(self):
        """80 elsewhere + 70 = 150."""
        assert check_fabric_quantity(_plan_with_others(), 0, "70").is_valid is True

    def test_non_positive_rejected(self):
        for value in ("0", "-3", "", "abc"):
            result = check_fabric_quantity(_plan_with_others(), 0, value)
            assert result.errors == ["Quantity must be greater than 0"]

    def test_unusable_order_total_rejected(self):
        plan = PlanFactory.create(
            total_order_quantity="",
            fabrics=[FabricFactory.create(quantity="")],
        )

        result = check_fabric_quantity(plan, 0, "10")

        assert result.errors == [
            "Enter a valid total order quantity before allocating fabric quantities"
        ]

    def test_below_color_allocation_rejected(self):
        """A fabric cannot shrink below what its colors already take."""
        plan = PlanFactory.create(
            total_order_quantity="100",
            fabrics=[FabricFactory.create(quantity="50", colors=[("Red", "30")])],
        )

        result = check_fabric_quantity(plan, 0, "29")

        assert result.errors == ["Quantity cannot be less than the 30 already allocated to colors"]

    def test_headroom(self):
        assert fabric_quantity_headroom(_plan_with_others(), 0) == Decimal("70")
        assert fabric_quantity_headroom(_plan_with_others(), 1) == Decimal("20")


class TestCheckColorQuantity:
    """Tests for check_color_quantity()"""

    def _fabric(self):
        """Fabric of 50 with red at 30 and a new, empty row."""
        return FabricFactory.create(quantity="50", colors=[("Red", "30"), ("Blue", "")])

    def test_over_fabric_quantity_rejected(self):
        """30 + 21 = 51 > 50."""
        result = check_color_quantity(self._fabric(), 1, "21")

        assert result.errors == [
            "Color quantities cannot exceed fabric quantity (50); 20 available for this color"
        ]

    def test_exactly_remaining_accepted(self):
        """30 + 20 = 50."""
        assert check_color_quantity(self._fabric(), 1, "20").is_valid is True

    def test_editing_existing_color_excludes_its_own_value(self):
        """Red may go up to 50 since Blue takes nothing."""
        assert check_color_quantity(self._fabric(), 0, "50").is_valid is True

    def test_blank_clears(self):
        assert check_color_quantity(self._fabric(), 0, "").is_valid is True

    def test_negative_rejected(self):
        result = check_color_quantity(self._fabric(), 1, "-1")

        assert result.errors == ["Color quantity must be 0 or more"]

    def test_fabric_without_quantity_rejected(self):
        fabric = FabricFactory.create(quantity="", colors=[("Red", "")])

        result = check_color_quantity(fabric, 0, "5")

        assert result.errors == ["Set the fabric quantity before allocating colors"]

    def test_headroom(self):
        assert color_headroom(self._fabric(), 1) == Decimal("20")
        assert color_headroom(self._fabric()) == Decimal("20")


class TestCheckAddColor:
    """Tests for check_add_color()"""

    def test_headroom_left_accepts(self):
        fabric = FabricFactory.create(quantity="50", colors=[("Red", "30")])

        assert check_add_color(fabric).is_valid is True

    def test_fully_allocated_rejects(self):
        """No headroom, no new color."""
        fabric = FabricFactory.create(quantity="50", colors=[("Red", "30"), ("Blue", "20")])

        result = check_add_color(fabric)

        assert result.errors == ["All of the fabric quantity (50) is already allocated to colors"]

    def test_fabric_without_quantity_rejects(self):
        fabric = FabricFactory.create(quantity="")

        result = check_add_color(fabric)

        assert result.errors == ["Set the fabric quantity before adding colors"]


class TestCheckTotalOrderQuantity:
    """Tests for check_total_order_quantity()"""

    def test_below_fabric_allocation_rejected(self):
        result = check_total_order_quantity(_plan_with_others(), "179")

        assert result.errors == [
            "Total order quantity cannot be less than the 180 already allocated to fabrics"
        ]

    def test_at_or_above_allocation_accepted(self):
        assert check_total_order_quantity(_plan_with_others(), "180").is_valid is True

    @pytest.mark.parametrize("value", ["", "abc", "NaN", "0", "-5"])
    def test_unusable_total_rejected_while_allocated(self, value):
        result = check_total_order_quantity(_plan_with_others(), value)

        assert result.errors == [
            "Total order quantity must be greater than 0 while fabrics are allocated"
        ]

    def test_blank_accepted_without_allocation(self):
        """Blank totals are left for step 1 validation to report."""
        plan = PlanFactory.create(fabrics=[FabricFactory.create(quantity="")])

        assert check_total_order_quantity(plan, "").is_valid is True

    def test_no_fabrics_any_total(self):
        assert check_total_order_quantity(PlanFactory.create(), "0").is_valid is True
