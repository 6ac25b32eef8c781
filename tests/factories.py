"""
Test data factories.

Uses factory pattern to generate consistent test data.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from models.plan import ColorQuantity, FabricDetails, ProductionPlan, Submission


class FabricFactory:
    """
    Factory for creating test FabricDetails.
    
    Usage:
        # Create with defaults (complete, valid fabric)
        fabric = FabricFactory.create()
        
        # Create with overrides
        fabric = FabricFactory.create(name="Silk", quantity="40")
        
        # Create with colors
        fabric = FabricFactory.create(quantity="50", colors=[("Red", "30")])
    """

    @classmethod
    def create(
        cls,
        name: str = "Cotton",
        per_piece_requirement: str = "1",
        unit: Optional[str] = "metre",
        processes: Optional[list] = None,
        colors: Optional[list] = None,
        quantity: str = "100",
        skipped_stages: Optional[list] = None,
    ) -> FabricDetails:
        """
        Create a single fabric.

        Args:
            colors: list of (color, quantity) tuples
        """
        return FabricDetails(
            name=name,
            per_piece_requirement=per_piece_requirement,
            unit=unit,
            processes=processes if processes is not None else ["Dyeing"],
            colors=[ColorQuantity(color=c, quantity=q) for c, q in (colors or [])],
            quantity=quantity,
            skipped_stages=skipped_stages or [],
        )


class PlanFactory:
    """
    Factory for creating test ProductionPlans.

    Usage:
        plan = PlanFactory.create_valid()
        plan = PlanFactory.create(total_order_quantity="150", fabrics=[...])
    """

    @classmethod
    def create(
        cls,
        start_date: str = "2025-01-06",
        end_date: str = "2025-02-28",
        production_per_day: str = "50",
        total_order_quantity: str = "100",
        fabrics: Optional[list] = None,
        has_international_fabric: Optional[bool] = None,
        china_fabrics: Optional[list] = None,
        major_fabric: str = "",
    ) -> ProductionPlan:
        return ProductionPlan(
            start_date=start_date,
            end_date=end_date,
            production_per_day=production_per_day,
            total_order_quantity=total_order_quantity,
            fabrics=fabrics or [],
            has_international_fabric=has_international_fabric,
            china_fabrics=china_fabrics or [],
            major_fabric=major_fabric,
        )

    @classmethod
    def create_valid(cls, **overrides) -> ProductionPlan:
        """Plan that passes every step: one Cotton fabric, domestic, major 'none'."""
        values = {
            "total_order_quantity": "100",
            "fabrics": [FabricFactory.create(name="Cotton", quantity="100")],
            "has_international_fabric": False,
            "china_fabrics": [],
            "major_fabric": "none",
        }
        values.update(overrides)
        return cls.create(**values)


class SubmissionFactory:
    """Factory for stored Submission records."""

    @classmethod
    def create(
        cls,
        plan: Optional[ProductionPlan] = None,
        id: Optional[str] = None,
        submitted_at: Optional[datetime] = None,
    ) -> Submission:
        return Submission.from_plan(
            plan or PlanFactory.create_valid(),
            id=id or str(uuid4()),
            submitted_at=submitted_at or datetime.now(timezone.utc),
        )
