"""
Allocation consistency checks.

Run before a quantity edit is committed. Fabric quantities are an allocation
of the order total and color quantities an allocation of their fabric's
quantity; neither may ever exceed its parent. A rejected edit leaves the
draft untouched.
"""

from decimal import Decimal
from typing import Optional

from models.plan import FabricDetails, ProductionPlan
from models.validation import ValidationResult
from utils.parsing import format_quantity, is_blank, parse_quantity, sum_quantities


def allocated_to_fabrics(plan: ProductionPlan, exclude_index: Optional[int] = None) -> Decimal:
    """Sum of fabric quantities, optionally leaving one fabric out."""
    return sum_quantities(
        fabric.quantity
        for index, fabric in enumerate(plan.fabrics)
        if index != exclude_index
    )


def allocated_to_colors(fabric: FabricDetails, exclude_index: Optional[int] = None) -> Decimal:
    """Sum of a fabric's color quantities, optionally leaving one color out."""
    return sum_quantities(
        color.quantity
        for index, color in enumerate(fabric.colors)
        if index != exclude_index
    )


def fabric_quantity_headroom(plan: ProductionPlan, index: int) -> Optional[Decimal]:
    """
    Largest quantity fabric `index` may take.

    Returns:
        Order total minus all other fabrics, or None if the total is unusable
    """
    order_total = parse_quantity(plan.total_order_quantity)
    if order_total is None or order_total <= 0:
        return None
    return order_total - allocated_to_fabrics(plan, exclude_index=index)


def color_headroom(fabric: FabricDetails, color_index: Optional[int] = None) -> Optional[Decimal]:
    """
    Largest quantity color `color_index` may take.

    With color_index None, the headroom left for a new color row.

    Returns:
        Fabric quantity minus all other colors, or None if the fabric
        quantity is unusable
    """
    fabric_qty = parse_quantity(fabric.quantity)
    if fabric_qty is None or fabric_qty <= 0:
        return None
    return fabric_qty - allocated_to_colors(fabric, exclude_index=color_index)


def check_fabric_quantity(plan: ProductionPlan, index: int, proposed: str) -> ValidationResult:
    """
    Check a new quantity for fabric `index` before it is applied.

    Rejects non-positive values, values that push the fabric total over the
    order total, and values below what the fabric's colors already take.
    """
    value = parse_quantity(proposed)
    if value is None or value <= 0:
        return ValidationResult.from_errors(["Quantity must be greater than 0"])

    headroom = fabric_quantity_headroom(plan, index)
    if headroom is None:
        return ValidationResult.from_errors(
            ["Enter a valid total order quantity before allocating fabric quantities"]
        )

    if value > headroom:
        return ValidationResult.from_errors([
            f"Sum of all fabric quantities cannot exceed total order quantity "
            f"({plan.total_order_quantity}); {format_quantity(max(headroom, Decimal('0')))} "
            f"available for this fabric"
        ])

    colors_total = allocated_to_colors(plan.fabrics[index])
    if value < colors_total:
        return ValidationResult.from_errors([
            f"Quantity cannot be less than the {format_quantity(colors_total)} "
            f"already allocated to colors"
        ])

    return ValidationResult.ok()


def check_color_quantity(fabric: FabricDetails, color_index: int, proposed: str) -> ValidationResult:
    """
    Check a new quantity for one color row before it is applied.

    A blank value clears the row's quantity and counts as 0.
    """
    if is_blank(proposed):
        return ValidationResult.ok()

    value = parse_quantity(proposed)
    if value is None or value < 0:
        return ValidationResult.from_errors(["Color quantity must be 0 or more"])

    headroom = color_headroom(fabric, color_index)
    if headroom is None:
        return ValidationResult.from_errors(["Set the fabric quantity before allocating colors"])

    if value > headroom:
        return ValidationResult.from_errors([
            f"Color quantities cannot exceed fabric quantity ({fabric.quantity}); "
            f"{format_quantity(max(headroom, Decimal('0')))} available for this color"
        ])

    return ValidationResult.ok()


def check_add_color(fabric: FabricDetails) -> ValidationResult:
    """A new color row needs some unallocated fabric quantity."""
    headroom = color_headroom(fabric)
    if headroom is None:
        return ValidationResult.from_errors(["Set the fabric quantity before adding colors"])
    if headroom <= 0:
        return ValidationResult.from_errors([
            f"All of the fabric quantity ({fabric.quantity}) is already allocated to colors"
        ])
    return ValidationResult.ok()


def check_total_order_quantity(plan: ProductionPlan, proposed: str) -> ValidationResult:
    """
    Check a new order total against what fabrics already take.

    While no fabric quantity is allocated, blank or non-numeric totals are
    let through; basic info validation reports them when the user tries to
    leave step 1.
    """
    allocated = allocated_to_fabrics(plan)
    if allocated <= 0:
        return ValidationResult.ok()

    value = parse_quantity(proposed)
    if value is None or value <= 0:
        return ValidationResult.from_errors(
            ["Total order quantity must be greater than 0 while fabrics are allocated"]
        )

    if value < allocated:
        return ValidationResult.from_errors([
            f"Total order quantity cannot be less than the {format_quantity(allocated)} "
            f"already allocated to fabrics"
        ])

    return ValidationResult.ok()
