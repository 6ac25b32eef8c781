"""
Production plan schemas.

A plan is edited field by field while the wizard runs, so every field has an
empty default and numeric inputs are kept as the strings the user typed.
Validators decide what is acceptable; these models only fix the shape.
"""

from pydantic import Field
from typing import Optional
from enum import Enum
from datetime import datetime

from models.base import BaseSchema


class Unit(str, Enum):
    """Measurement unit for a fabric's per-piece requirement."""
    METRE = "metre"
    KG = "kg"


# ===================
# FABRIC SCHEMAS
# ===================

class ColorQuantity(BaseSchema):
    """One color of a fabric and how much of the fabric quantity it takes."""

    color: str = Field("", description="Color name")
    quantity: str = Field("", description="Numeric string, >= 0")


class FabricDetails(BaseSchema):
    """
    One fabric line item.

    Colors are an allocation of `quantity`: their quantities may never sum
    to more than the fabric's own quantity.
    """

    name: str = Field("", description="Fabric name from the catalog, unique per plan")
    per_piece_requirement: str = Field("", description="Numeric string, > 0")
    unit: Optional[Unit] = Field(Unit.METRE, description="metre or kg")
    processes: list[str] = Field(default_factory=list, description="Selected processes")
    colors: list[ColorQuantity] = Field(default_factory=list, description="Color breakdown")
    quantity: str = Field("", description="Numeric string, > 0")
    skipped_stages: list[str] = Field(default_factory=list, description="Stages to skip")


# ===================
# PLAN SCHEMAS
# ===================

class ProductionPlan(BaseSchema):
    """
    The wizard draft (FormData).

    has_international_fabric is tri-state: None until the user answers.
    """

    start_date: str = Field("", description="YYYY-MM-DD")
    end_date: str = Field("", description="YYYY-MM-DD")
    production_per_day: str = Field("", description="Production per day per machine")
    total_order_quantity: str = Field("", description="Order total all fabrics allocate")
    fabrics: list[FabricDetails] = Field(default_factory=list)
    has_international_fabric: Optional[bool] = Field(None)
    china_fabrics: list[str] = Field(default_factory=list, description="Subset of fabric names")
    major_fabric: str = Field("", description="'none' or one of the fabric names")

    @property
    def fabric_names(self) -> list[str]:
        """Names chosen so far, in fabric order, blanks skipped."""
        return [f.name for f in self.fabrics if f.name]


class Submission(ProductionPlan):
    """A plan frozen at submit time. Append-only."""

    id: str = Field(..., min_length=1, description="Unique submission id")
    submitted_at: datetime = Field(..., description="UTC submission time")

    @classmethod
    def from_plan(cls, plan: ProductionPlan, id: str, submitted_at: datetime) -> "Submission":
        """Freeze a draft into a submission record."""
        return cls(
            **plan.model_dump(),
            id=id,
            submitted_at=submitted_at,
        )
