"""
Plan summaries.

Derived figures for display: what each fabric needs in total, how much of
the order the fabrics take up, and the rows of the submissions listing.
Nothing here is stored.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

import structlog

from models.plan import FabricDetails, ProductionPlan, Submission
from models.summary import (
    AllocationSummary,
    FabricSummary,
    SubmissionSummary,
    SubmittedFabric,
)
from services.submission_repository import SubmissionRepository, get_submission_repository
from validation.allocation import allocated_to_colors, allocated_to_fabrics
from utils.parsing import parse_quantity

logger = structlog.get_logger(__name__)

TWO_PLACES = Decimal("0.01")
ONE_PLACE = Decimal("0.1")


def _percent(part: Decimal, whole: Optional[Decimal]) -> Optional[Decimal]:
    if whole is None or whole <= 0:
        return None
    return (part / whole * 100).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


def fabric_total_required(fabric: FabricDetails) -> Decimal:
    """
    Material needed for a fabric: per piece requirement x quantity.

    Unparseable inputs count as 0.

    Example:
        per_piece_requirement "1.5", quantity "40" → Decimal("60.00")
    """
    per_piece = parse_quantity(fabric.per_piece_requirement) or Decimal("0")
    quantity = parse_quantity(fabric.quantity) or Decimal("0")
    return (per_piece * quantity).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def fabric_order_share(fabric: FabricDetails, total_order_quantity: str) -> Optional[Decimal]:
    """Fabric quantity as a percentage of the order total, one decimal."""
    quantity = parse_quantity(fabric.quantity)
    if quantity is None or quantity <= 0:
        return None
    return _percent(quantity, parse_quantity(total_order_quantity))


def summarize_fabric(fabric: FabricDetails, total_order_quantity: str) -> FabricSummary:
    return FabricSummary(
        name=fabric.name,
        total_required=fabric_total_required(fabric),
        unit=fabric.unit,
        process_count=len(fabric.processes),
        order_share_percent=fabric_order_share(fabric, total_order_quantity),
        colors_allocated=allocated_to_colors(fabric),
    )


def allocation_summary(plan: ProductionPlan) -> AllocationSummary:
    """
    Order total versus what the fabrics take.

    total, remaining and percent are None while the order total is unusable.
    """
    allocated = allocated_to_fabrics(plan)
    total = parse_quantity(plan.total_order_quantity)
    if total is None or total <= 0:
        return AllocationSummary(allocated=allocated)

    return AllocationSummary(
        allocated=allocated,
        total=total,
        remaining=total - allocated,
        percent=_percent(allocated, total),
    )


def summarize_submission(submission: Submission, ordinal: int) -> SubmissionSummary:
    """
    Build one listing row.

    Args:
        submission: Stored submission
        ordinal: 1-based position in the listing

    Returns:
        SubmissionSummary; China fabrics and major fabric are only filled in
        for international plans
    """
    international = bool(submission.has_international_fabric)

    return SubmissionSummary(
        id=submission.id,
        title=f"Production Plan #{ordinal}",
        sourcing="International" if international else "Domestic",
        submitted_at=submission.submitted_at,
        start_date=submission.start_date,
        end_date=submission.end_date,
        production_per_day=submission.production_per_day,
        total_order_quantity=submission.total_order_quantity,
        fabrics=[
            SubmittedFabric(
                name=fabric.name,
                per_piece_requirement=fabric.per_piece_requirement,
                unit=fabric.unit,
                quantity=fabric.quantity,
                processes=list(fabric.processes),
            )
            for fabric in submission.fabrics
        ],
        china_fabrics=list(submission.china_fabrics) if international else [],
        major_fabric=submission.major_fabric if international else None,
    )


def list_submission_summaries(
    repository: Optional[SubmissionRepository] = None
) -> list[SubmissionSummary]:
    """Listing rows for every stored submission, oldest first."""
    repository = repository or get_submission_repository()
    submissions = repository.list_all()

    logger.info("submission_summaries_built", count=len(submissions))

    return [
        summarize_submission(submission, ordinal)
        for ordinal, submission in enumerate(submissions, start=1)
    ]
