"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema
from models.plan import (
    Unit,
    ColorQuantity,
    FabricDetails,
    ProductionPlan,
    Submission,
)
from models.validation import ValidationResult
from models.edits import (
    PlanEdit,
    parse_edit,
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
)
from models.summary import (
    FabricSummary,
    AllocationSummary,
    SubmittedFabric,
    SubmissionSummary,
)

__all__ = [
    # Base
    "BaseSchema",

    # Plan
    "Unit",
    "ColorQuantity",
    "FabricDetails",
    "ProductionPlan",
    "Submission",

    # Validation
    "ValidationResult",

    # Edits
    "PlanEdit",
    "parse_edit",
    "SetStartDate",
    "SetEndDate",
    "SetProductionPerDay",
    "SetTotalOrderQuantity",
    "AddFabric",
    "RemoveFabric",
    "SetFabricName",
    "SetFabricPerPieceRequirement",
    "SetFabricUnit",
    "ToggleFabricProcess",
    "ToggleSkippedStage",
    "SetFabricQuantity",
    "AddColor",
    "RemoveColor",
    "SetColorName",
    "SetColorQuantity",
    "SetHasInternationalFabric",
    "ToggleChinaFabric",
    "SetMajorFabric",

    # Summaries
    "FabricSummary",
    "AllocationSummary",
    "SubmittedFabric",
    "SubmissionSummary",
]
