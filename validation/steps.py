"""
Step validation.

Maps a wizard step to the rules that gate leaving it. The plan is only
read, never modified.
"""

from typing import Optional

from models.plan import ProductionPlan
from models.validation import ValidationResult
from validation.rules import (
    DUPLICATE_FABRIC_MESSAGE,
    QuantityPolicy,
    validate_basic_info,
    validate_fabric_details,
    validate_fabrics_quantity,
    validate_international_fabrics,
)

BASIC_INFO_STEP = 1
FABRIC_DETAILS_STEP = 2
INTERNATIONAL_FABRICS_STEP = 3


def _validate_fabrics_step(
    plan: ProductionPlan,
    policy: Optional[QuantityPolicy]
) -> ValidationResult:
    if len(plan.fabrics) == 0:
        return ValidationResult.from_errors(["At least one fabric must be added"])

    errors: list[str] = []
    warnings: list[str] = []
    seen: list[str] = []

    for position, fabric in enumerate(plan.fabrics, start=1):
        result = validate_fabric_details(fabric)
        fabric_errors = list(result.errors)
        if fabric.name and fabric.name in seen:
            fabric_errors.append(DUPLICATE_FABRIC_MESSAGE)
        seen.append(fabric.name)

        errors.extend(f"Fabric {position}: {error}" for error in fabric_errors)
        warnings.extend(f"Fabric {position}: {warning}" for warning in result.warnings)

    quantity = validate_fabrics_quantity(plan.fabrics, plan.total_order_quantity, policy)

    return ValidationResult.combine(
        ValidationResult.from_errors(errors, warnings),
        quantity,
    )


def validate_step(
    step: int,
    plan: ProductionPlan,
    policy: Optional[QuantityPolicy] = None
) -> ValidationResult:
    """
    Validate everything required to move past `step`.

    Step 1: basic info. Step 2: fabrics, each error prefixed with the
    1-based fabric number, then the quantity total. Step 3: international
    sourcing and major fabric. Any other step is valid.

    Args:
        step: 1-based step number
        plan: Draft to check
        policy: Fabric quantity policy, defaults to the configured one

    Returns:
        ValidationResult with all messages in display order
    """
    if step == BASIC_INFO_STEP:
        return validate_basic_info(plan)
    if step == FABRIC_DETAILS_STEP:
        return _validate_fabrics_step(plan, policy)
    if step == INTERNATIONAL_FABRICS_STEP:
        return validate_international_fabrics(plan)
    return ValidationResult.ok()
