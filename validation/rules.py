"""
Field validators for production plans.

Each rule is a pure function returning a ValidationResult. Rules never raise
and never log; services decide what to do with the outcome.
"""

from enum import Enum
from typing import Iterable, Optional

from config.catalogs import FABRICS, NO_MAJOR_FABRIC, PROCESSES, STAGES
from config.settings import get_settings
from models.plan import FabricDetails, ProductionPlan
from models.validation import ValidationResult
from utils.parsing import (
    format_quantity,
    is_blank,
    parse_iso_date,
    parse_quantity,
    sum_quantities,
)


class QuantityPolicy(str, Enum):
    """How fabric quantities must relate to the order total."""
    LENIENT = "lenient"  # sum <= total
    STRICT = "strict"    # sum == total


def default_quantity_policy() -> QuantityPolicy:
    """Policy configured through FABRIC_QUANTITY_POLICY."""
    return QuantityPolicy(get_settings().fabric_quantity_policy)


# ===================
# STEP 1: BASIC INFO
# ===================

def _check_date(value: str, label: str, errors: list[str]):
    if is_blank(value):
        errors.append(f"{label} is required")
        return None
    parsed = parse_iso_date(value)
    if parsed is None:
        errors.append(f"{label} must be a valid date (YYYY-MM-DD)")
    return parsed


def _check_positive(value: str, required_msg: str, positive_msg: str, errors: list[str]) -> None:
    if is_blank(value):
        errors.append(required_msg)
        return
    parsed = parse_quantity(value)
    if parsed is None or parsed <= 0:
        errors.append(positive_msg)


def validate_basic_info(plan: ProductionPlan) -> ValidationResult:
    """
    Validate dates and order-level quantities.

    Rules:
    - start and end date are required valid dates, start <= end
    - production per day and total order quantity are required and > 0
    """
    errors: list[str] = []

    start = _check_date(plan.start_date, "Start date", errors)
    end = _check_date(plan.end_date, "End date", errors)
    if start is not None and end is not None and start > end:
        errors.append("End date must be on or after start date")

    _check_positive(
        plan.production_per_day,
        "Production per day per machine is required",
        "Production per day must be greater than 0",
        errors,
    )
    _check_positive(
        plan.total_order_quantity,
        "Total order quantity is required",
        "Total order quantity must be greater than 0",
        errors,
    )

    return ValidationResult.from_errors(errors)


# ===================
# STEP 2: FABRICS
# ===================

DUPLICATE_FABRIC_MESSAGE = "This fabric has already been selected"


def validate_fabric_selection(name: str, existing: Iterable[str]) -> ValidationResult:
    """Check a fabric name against the catalog and the names already chosen."""
    errors: list[str] = []

    if name not in FABRICS:
        errors.append(f"'{name}' is not an available fabric")
    elif name in set(existing):
        errors.append(DUPLICATE_FABRIC_MESSAGE)

    return ValidationResult.from_errors(errors)


def validate_fabric_details(fabric: FabricDetails) -> ValidationResult:
    """
    Validate one fabric line item.

    Blocking: name, per piece requirement, unit, processes and quantity,
    catalog membership of processes and skipped stages, and color quantities
    that are negative, non-numeric or over-allocate the fabric.

    Advisory (warnings): missing color rows, blank color names or
    quantities, and fabric quantity not fully split across colors.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if is_blank(fabric.name):
        errors.append("Fabric name is required")
    elif fabric.name not in FABRICS:
        errors.append(f"'{fabric.name}' is not an available fabric")

    _check_positive(
        fabric.per_piece_requirement,
        "Per piece requirement is required",
        "Per piece requirement must be greater than 0",
        errors,
    )

    if fabric.unit is None:
        errors.append("Unit selection (metre/kg) is required")

    if len(fabric.processes) == 0:
        errors.append("At least one process must be selected")
    for process in fabric.processes:
        if process not in PROCESSES:
            errors.append(f"Unknown process: {process}")

    # Skipping stages is optional, but only known stages can be skipped
    for stage in fabric.skipped_stages:
        if stage not in STAGES:
            errors.append(f"Unknown stage to skip: {stage}")

    _check_positive(
        fabric.quantity,
        "Quantity is required",
        "Quantity must be greater than 0",
        errors,
    )

    # Colors
    if not fabric.colors:
        warnings.append("No colors specified")
    for position, color in enumerate(fabric.colors, start=1):
        if is_blank(color.color):
            warnings.append(f"Color {position}: color name is missing")
        if is_blank(color.quantity):
            warnings.append(f"Color {position}: quantity is missing")
            continue
        parsed = parse_quantity(color.quantity)
        if parsed is None or parsed < 0:
            errors.append(f"Color {position}: quantity must be 0 or more")

    fabric_qty = parse_quantity(fabric.quantity)
    if fabric_qty is not None and fabric_qty > 0 and fabric.colors:
        allocated = sum_quantities(c.quantity for c in fabric.colors)
        if allocated > fabric_qty:
            errors.append(
                f"Color quantities ({format_quantity(allocated)}) cannot exceed "
                f"fabric quantity ({format_quantity(fabric_qty)})"
            )
        elif allocated < fabric_qty:
            warnings.append(
                f"Colors allocate {format_quantity(allocated)} of "
                f"{format_quantity(fabric_qty)}"
            )

    return ValidationResult.from_errors(errors, warnings)


def validate_fabrics_quantity(
    fabrics: list[FabricDetails],
    total_order_quantity: str,
    policy: Optional[QuantityPolicy] = None
) -> ValidationResult:
    """
    Compare the sum of fabric quantities with the order total.

    LENIENT fails only when the sum exceeds the total (a shortfall is a
    warning). STRICT also fails when the sum falls short.
    """
    policy = policy or default_quantity_policy()
    errors: list[str] = []
    warnings: list[str] = []

    total = sum_quantities(f.quantity for f in fabrics)
    order_total = parse_quantity(total_order_quantity)

    if order_total is None or order_total <= 0:
        errors.append("Total order quantity must be greater than 0 to allocate fabrics")
    elif total > order_total:
        errors.append("Sum of all fabric quantities cannot exceed total order quantity")
    elif total < order_total:
        shortfall = format_quantity(order_total - total)
        if policy == QuantityPolicy.STRICT:
            errors.append(
                f"Sum of all fabric quantities ({format_quantity(total)}) must equal "
                f"total order quantity ({format_quantity(order_total)})"
            )
        else:
            warnings.append(f"{shortfall} of the order quantity is not allocated to any fabric")

    return ValidationResult.from_errors(errors, warnings)


# ===================
# STEP 3: INTERNATIONAL FABRICS
# ===================

def validate_major_fabric(plan: ProductionPlan) -> ValidationResult:
    """Major fabric must be chosen and be 'none' or a current fabric name."""
    errors: list[str] = []

    if is_blank(plan.major_fabric):
        errors.append("Please select a major fabric ('None' or one of your selected fabrics)")
    elif plan.major_fabric != NO_MAJOR_FABRIC and plan.major_fabric not in plan.fabric_names:
        errors.append("Major fabric must be one of your selected fabrics or 'None'")

    return ValidationResult.from_errors(errors)


def validate_international_fabrics(plan: ProductionPlan) -> ValidationResult:
    """
    Validate the international sourcing declaration.

    Rules:
    - the yes/no answer is required
    - yes requires at least one China fabric, all of them current fabrics
    - no must not carry a China fabric selection over
    - major fabric rules from validate_major_fabric
    """
    errors: list[str] = []

    if plan.has_international_fabric is None:
        errors.append("Please specify if international fabric is present")

    if plan.has_international_fabric is True:
        if len(plan.china_fabrics) == 0:
            errors.append("Please select at least one China fabric from your selected fabrics")
        names = plan.fabric_names
        for name in plan.china_fabrics:
            if name not in names:
                errors.append(f"China fabric '{name}' is not one of your selected fabrics")

    if plan.has_international_fabric is False and len(plan.china_fabrics) > 0:
        errors.append("China fabrics should not be selected when international fabric is No")

    return ValidationResult.combine(
        ValidationResult.from_errors(errors),
        validate_major_fabric(plan),
    )
