"""
Plan edit schemas.

Each user edit is one explicit variant, tagged by `kind`, and applied by
services.plan_editor.apply_edit. Edits arriving as plain dicts are parsed
with parse_edit().
"""

from pydantic import Field, TypeAdapter
from typing import Annotated, Literal, Union

from models.base import BaseSchema
from models.plan import Unit


# ===================
# BASIC INFO
# ===================

class SetStartDate(BaseSchema):
    kind: Literal["set_start_date"] = "set_start_date"
    value: str


class SetEndDate(BaseSchema):
    kind: Literal["set_end_date"] = "set_end_date"
    value: str


class SetProductionPerDay(BaseSchema):
    kind: Literal["set_production_per_day"] = "set_production_per_day"
    value: str


class SetTotalOrderQuantity(BaseSchema):
    kind: Literal["set_total_order_quantity"] = "set_total_order_quantity"
    value: str


# ===================
# FABRICS
# ===================

class AddFabric(BaseSchema):
    kind: Literal["add_fabric"] = "add_fabric"


class RemoveFabric(BaseSchema):
    kind: Literal["remove_fabric"] = "remove_fabric"
    index: int = Field(..., ge=0)


class SetFabricName(BaseSchema):
    kind: Literal["set_fabric_name"] = "set_fabric_name"
    index: int = Field(..., ge=0)
    value: str


class SetFabricPerPieceRequirement(BaseSchema):
    kind: Literal["set_fabric_per_piece_requirement"] = "set_fabric_per_piece_requirement"
    index: int = Field(..., ge=0)
    value: str


class SetFabricUnit(BaseSchema):
    kind: Literal["set_fabric_unit"] = "set_fabric_unit"
    index: int = Field(..., ge=0)
    value: Unit


class ToggleFabricProcess(BaseSchema):
    """Select the process if absent, deselect it if present."""
    kind: Literal["toggle_fabric_process"] = "toggle_fabric_process"
    index: int = Field(..., ge=0)
    process: str


class ToggleSkippedStage(BaseSchema):
    kind: Literal["toggle_skipped_stage"] = "toggle_skipped_stage"
    index: int = Field(..., ge=0)
    stage: str


class SetFabricQuantity(BaseSchema):
    kind: Literal["set_fabric_quantity"] = "set_fabric_quantity"
    index: int = Field(..., ge=0)
    value: str


# ===================
# COLORS
# ===================

class AddColor(BaseSchema):
    kind: Literal["add_color"] = "add_color"
    fabric_index: int = Field(..., ge=0)


class RemoveColor(BaseSchema):
    kind: Literal["remove_color"] = "remove_color"
    fabric_index: int = Field(..., ge=0)
    color_index: int = Field(..., ge=0)


class SetColorName(BaseSchema):
    kind: Literal["set_color_name"] = "set_color_name"
    fabric_index: int = Field(..., ge=0)
    color_index: int = Field(..., ge=0)
    value: str


class SetColorQuantity(BaseSchema):
    kind: Literal["set_color_quantity"] = "set_color_quantity"
    fabric_index: int = Field(..., ge=0)
    color_index: int = Field(..., ge=0)
    value: str


# ===================
# INTERNATIONAL FABRICS
# ===================

class SetHasInternationalFabric(BaseSchema):
    kind: Literal["set_has_international_fabric"] = "set_has_international_fabric"
    value: bool


class ToggleChinaFabric(BaseSchema):
    kind: Literal["toggle_china_fabric"] = "toggle_china_fabric"
    name: str


class SetMajorFabric(BaseSchema):
    kind: Literal["set_major_fabric"] = "set_major_fabric"
    value: str


PlanEdit = Annotated[
    Union[
        SetStartDate,
        SetEndDate,
        SetProductionPerDay,
        SetTotalOrderQuantity,
        AddFabric,
        RemoveFabric,
        SetFabricName,
        SetFabricPerPieceRequirement,
        SetFabricUnit,
        ToggleFabricProcess,
        ToggleSkippedStage,
        SetFabricQuantity,
        AddColor,
        RemoveColor,
        SetColorName,
        SetColorQuantity,
        SetHasInternationalFabric,
        ToggleChinaFabric,
        SetMajorFabric,
    ],
    Field(discriminator="kind"),
]

_edit_adapter = TypeAdapter(PlanEdit)


def parse_edit(data: dict) -> PlanEdit:
    """
    Parse a dict into the matching edit variant.

    Raises:
        pydantic.ValidationError: If `kind` is unknown or fields are invalid
    """
    return _edit_adapter.validate_python(data)
