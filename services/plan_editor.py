"""
Plan editor.

Applies one PlanEdit to a draft and returns the new draft. Allocation and
catalog checks run before anything changes, so a rejected edit leaves the
caller with the plan it passed in.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

import structlog

from config.catalogs import FABRICS, NO_MAJOR_FABRIC, PROCESSES, STAGES
from exceptions import ColorNotFoundError, FabricNotFoundError, UnknownEditError
from models.edits import (
    AddColor,
    AddFabric,
    PlanEdit,
    RemoveColor,
    RemoveFabric,
    SetColorName,
    SetColorQuantity,
    SetEndDate,
    SetFabricName,
    SetFabricPerPieceRequirement,
    SetFabricQuantity,
    SetFabricUnit,
    SetHasInternationalFabric,
    SetMajorFabric,
    SetProductionPerDay,
    SetStartDate,
    SetTotalOrderQuantity,
    ToggleChinaFabric,
    ToggleFabricProcess,
    ToggleSkippedStage,
)
from models.plan import ColorQuantity, FabricDetails, ProductionPlan
from models.validation import ValidationResult
from validation.allocation import (
    check_add_color,
    check_color_quantity,
    check_fabric_quantity,
    check_total_order_quantity,
)
from validation.rules import validate_fabric_selection

logger = structlog.get_logger(__name__)


@dataclass
class EditOutcome:
    """Result of applying one edit."""
    plan: ProductionPlan
    result: ValidationResult = field(default_factory=ValidationResult.ok)

    @property
    def applied(self) -> bool:
        return self.result.is_valid


# ===================
# HELPERS
# ===================

def available_fabrics(plan: ProductionPlan, index: Optional[int] = None) -> list[str]:
    """
    Catalog fabrics not yet used by the plan, in catalog order.

    Args:
        plan: Draft plan
        index: Fabric being edited; its own current name stays available

    Returns:
        Selectable fabric names
    """
    used = {
        fabric.name
        for position, fabric in enumerate(plan.fabrics)
        if fabric.name and position != index
    }
    return [name for name in FABRICS if name not in used]


def _fabric(plan: ProductionPlan, index: int) -> FabricDetails:
    if index < 0 or index >= len(plan.fabrics):
        raise FabricNotFoundError(index)
    return plan.fabrics[index]


def _color(plan: ProductionPlan, fabric_index: int, color_index: int) -> ColorQuantity:
    fabric = _fabric(plan, fabric_index)
    if color_index < 0 or color_index >= len(fabric.colors):
        raise ColorNotFoundError(fabric_index, color_index)
    return fabric.colors[color_index]


def _forget_fabric_name(plan: ProductionPlan, name: str) -> None:
    """Drop references to a fabric name that no longer exists."""
    if not name:
        return
    if name in plan.china_fabrics:
        plan.china_fabrics = [n for n in plan.china_fabrics if n != name]
    if plan.major_fabric == name:
        plan.major_fabric = ""


def _toggle(values: list[str], value: str) -> list[str]:
    if value in values:
        return [v for v in values if v != value]
    return [*values, value]


# ===================
# HANDLERS
# ===================
# Each handler mutates the working copy and returns the list of errors.
# A non-empty list means the copy is discarded.

def _set_start_date(plan: ProductionPlan, edit: SetStartDate) -> list[str]:
    plan.start_date = edit.value
    return []


def _set_end_date(plan: ProductionPlan, edit: SetEndDate) -> list[str]:
    plan.end_date = edit.value
    return []


def _set_production_per_day(plan: ProductionPlan, edit: SetProductionPerDay) -> list[str]:
    plan.production_per_day = edit.value
    return []


def _set_total_order_quantity(plan: ProductionPlan, edit: SetTotalOrderQuantity) -> list[str]:
    check = check_total_order_quantity(plan, edit.value)
    if not check.is_valid:
        return check.errors
    plan.total_order_quantity = edit.value
    return []


def _add_fabric(plan: ProductionPlan, edit: AddFabric) -> list[str]:
    if len(plan.fabrics) >= len(FABRICS):
        return ["Maximum fabric limit reached"]
    plan.fabrics.append(FabricDetails())
    return []


def _remove_fabric(plan: ProductionPlan, edit: RemoveFabric) -> list[str]:
    removed = _fabric(plan, edit.index)
    plan.fabrics.pop(edit.index)
    _forget_fabric_name(plan, removed.name)
    return []


def _set_fabric_name(plan: ProductionPlan, edit: SetFabricName) -> list[str]:
    fabric = _fabric(plan, edit.index)
    if edit.value == fabric.name:
        return []

    others = [f.name for i, f in enumerate(plan.fabrics) if i != edit.index and f.name]
    check = validate_fabric_selection(edit.value, others)
    if not check.is_valid:
        return check.errors

    old_name = fabric.name
    fabric.name = edit.value
    _forget_fabric_name(plan, old_name)
    return []


def _set_fabric_per_piece_requirement(
    plan: ProductionPlan,
    edit: SetFabricPerPieceRequirement
) -> list[str]:
    _fabric(plan, edit.index).per_piece_requirement = edit.value
    return []


def _set_fabric_unit(plan: ProductionPlan, edit: SetFabricUnit) -> list[str]:
    _fabric(plan, edit.index).unit = edit.value
    return []


def _toggle_fabric_process(plan: ProductionPlan, edit: ToggleFabricProcess) -> list[str]:
    fabric = _fabric(plan, edit.index)
    if edit.process not in PROCESSES:
        return [f"Unknown process: {edit.process}"]
    fabric.processes = _toggle(fabric.processes, edit.process)
    return []


def _toggle_skipped_stage(plan: ProductionPlan, edit: ToggleSkippedStage) -> list[str]:
    fabric = _fabric(plan, edit.index)
    if edit.stage not in STAGES:
        return [f"Unknown stage to skip: {edit.stage}"]
    fabric.skipped_stages = _toggle(fabric.skipped_stages, edit.stage)
    return []


def _set_fabric_quantity(plan: ProductionPlan, edit: SetFabricQuantity) -> list[str]:
    fabric = _fabric(plan, edit.index)
    check = check_fabric_quantity(plan, edit.index, edit.value)
    if not check.is_valid:
        return check.errors
    fabric.quantity = edit.value
    return []


def _add_color(plan: ProductionPlan, edit: AddColor) -> list[str]:
    fabric = _fabric(plan, edit.fabric_index)
    check = check_add_color(fabric)
    if not check.is_valid:
        return check.errors
    fabric.colors.append(ColorQuantity())
    return []


def _remove_color(plan: ProductionPlan, edit: RemoveColor) -> list[str]:
    _color(plan, edit.fabric_index, edit.color_index)
    plan.fabrics[edit.fabric_index].colors.pop(edit.color_index)
    return []


def _set_color_name(plan: ProductionPlan, edit: SetColorName) -> list[str]:
    _color(plan, edit.fabric_index, edit.color_index).color = edit.value
    return []


def _set_color_quantity(plan: ProductionPlan, edit: SetColorQuantity) -> list[str]:
    color = _color(plan, edit.fabric_index, edit.color_index)
    check = check_color_quantity(plan.fabrics[edit.fabric_index], edit.color_index, edit.value)
    if not check.is_valid:
        return check.errors
    color.quantity = edit.value
    return []


def _set_has_international_fabric(
    plan: ProductionPlan,
    edit: SetHasInternationalFabric
) -> list[str]:
    # China selection is kept on "No" so switching back restores it;
    # step 3 validation blocks submitting it.
    plan.has_international_fabric = edit.value
    return []


def _toggle_china_fabric(plan: ProductionPlan, edit: ToggleChinaFabric) -> list[str]:
    if edit.name not in plan.china_fabrics and edit.name not in plan.fabric_names:
        return [f"China fabric '{edit.name}' is not one of your selected fabrics"]
    plan.china_fabrics = _toggle(plan.china_fabrics, edit.name)
    return []


def _set_major_fabric(plan: ProductionPlan, edit: SetMajorFabric) -> list[str]:
    if edit.value != NO_MAJOR_FABRIC and edit.value not in plan.fabric_names:
        return ["Major fabric must be one of your selected fabrics or 'None'"]
    plan.major_fabric = edit.value
    return []


_HANDLERS: dict[str, Callable[[ProductionPlan, PlanEdit], list[str]]] = {
    "set_start_date": _set_start_date,
    "set_end_date": _set_end_date,
    "set_production_per_day": _set_production_per_day,
    "set_total_order_quantity": _set_total_order_quantity,
    "add_fabric": _add_fabric,
    "remove_fabric": _remove_fabric,
    "set_fabric_name": _set_fabric_name,
    "set_fabric_per_piece_requirement": _set_fabric_per_piece_requirement,
    "set_fabric_unit": _set_fabric_unit,
    "toggle_fabric_process": _toggle_fabric_process,
    "toggle_skipped_stage": _toggle_skipped_stage,
    "set_fabric_quantity": _set_fabric_quantity,
    "add_color": _add_color,
    "remove_color": _remove_color,
    "set_color_name": _set_color_name,
    "set_color_quantity": _set_color_quantity,
    "set_has_international_fabric": _set_has_international_fabric,
    "toggle_china_fabric": _toggle_china_fabric,
    "set_major_fabric": _set_major_fabric,
}


def apply_edit(plan: ProductionPlan, edit: PlanEdit) -> EditOutcome:
    """
    Apply one edit to a draft.

    The input plan is never modified. On success the outcome carries a new
    plan; on rejection it carries the original plan and the reasons.

    Args:
        plan: Current draft
        edit: Edit variant to apply

    Returns:
        EditOutcome with the resulting plan and a ValidationResult

    Raises:
        FabricNotFoundError: If the edit addresses a missing fabric
        ColorNotFoundError: If the edit addresses a missing color
        UnknownEditError: If the edit kind has no handler
    """
    kind = getattr(edit, "kind", type(edit).__name__)
    handler = _HANDLERS.get(kind)
    if handler is None:
        raise UnknownEditError(kind)

    draft = plan.model_copy(deep=True)
    errors = handler(draft, edit)

    if errors:
        logger.info(
            "plan_edit_rejected",
            kind=kind,
            errors=errors,
        )
        return EditOutcome(plan=plan, result=ValidationResult.from_errors(errors))

    logger.debug("plan_edit_applied", kind=kind)
    return EditOutcome(plan=draft)
