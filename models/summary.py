"""
Read-only summaries derived from plans and submissions.
"""

from pydantic import Field
from typing import Optional
from decimal import Decimal
from datetime import datetime

from models.base import BaseSchema
from models.plan import Unit


class FabricSummary(BaseSchema):
    """Totals shown under a fabric once it has a name."""

    name: str
    total_required: Decimal = Field(..., description="per_piece_requirement x quantity")
    unit: Optional[Unit] = None
    process_count: int = Field(..., ge=0)
    order_share_percent: Optional[Decimal] = Field(
        None,
        description="Fabric quantity as a percentage of the order total"
    )
    colors_allocated: Decimal = Field(..., description="Sum of color quantities")


class AllocationSummary(BaseSchema):
    """How much of the order total the fabrics take up."""

    allocated: Decimal
    total: Optional[Decimal] = None
    remaining: Optional[Decimal] = None
    percent: Optional[Decimal] = None


class SubmittedFabric(BaseSchema):
    name: str
    per_piece_requirement: str
    unit: Optional[Unit] = None
    quantity: str
    processes: list[str] = Field(default_factory=list)


class SubmissionSummary(BaseSchema):
    """One row of the submissions listing."""

    id: str
    title: str = Field(..., description="e.g. 'Production Plan #1'")
    sourcing: str = Field(..., description="International or Domestic")
    submitted_at: datetime
    start_date: str
    end_date: str
    production_per_day: str
    total_order_quantity: str
    fabrics: list[SubmittedFabric] = Field(default_factory=list)
    china_fabrics: list[str] = Field(default_factory=list)
    major_fabric: Optional[str] = None
