"""
Production plan validation.

Pure rules, the step orchestrator, and the pre-commit allocation checks.
"""

from validation.rules import (
    QuantityPolicy,
    default_quantity_policy,
    validate_basic_info,
    validate_fabric_details,
    validate_fabric_selection,
    validate_fabrics_quantity,
    validate_international_fabrics,
    validate_major_fabric,
)
from validation.steps import (
    BASIC_INFO_STEP,
    FABRIC_DETAILS_STEP,
    INTERNATIONAL_FABRICS_STEP,
    validate_step,
)
from validation.allocation import (
    allocated_to_fabrics,
    allocated_to_colors,
    fabric_quantity_headroom,
    color_headroom,
    check_fabric_quantity,
    check_color_quantity,
    check_add_color,
    check_total_order_quantity,
)

__all__ = [
    # Rules
    "QuantityPolicy",
    "default_quantity_policy",
    "validate_basic_info",
    "validate_fabric_details",
    "validate_fabric_selection",
    "validate_fabrics_quantity",
    "validate_international_fabrics",
    "validate_major_fabric",

    # Steps
    "BASIC_INFO_STEP",
    "FABRIC_DETAILS_STEP",
    "INTERNATIONAL_FABRICS_STEP",
    "validate_step",

    # Allocation
    "allocated_to_fabrics",
    "allocated_to_colors",
    "fabric_quantity_headroom",
    "color_headroom",
    "check_fabric_quantity",
    "check_color_quantity",
    "check_add_color",
    "check_total_order_quantity",
]
