"""
Unit tests for plan summaries.

Run: pytest tests/unit/test_plan_summary_service.py -v
"""

from decimal import Decimal

from services.plan_summary_service import (
    allocation_summary,
    fabric_order_share,
    fabric_total_required,
    list_submission_summaries,
    summarize_fabric,
    summarize_submission,
)
from tests.factories import FabricFactory, PlanFactory, SubmissionFactory


class TestFabricTotals:
    """Tests for per-fabric figures."""

    def test_total_required(self):
        fabric = FabricFactory.create(per_piece_requirement="1.5", quantity="40")

        assert fabric_total_required(fabric) == Decimal("60.00")

    def test_total_required_unparseable_is_zero(self):
        fabric = FabricFactory.create(per_piece_requirement="", quantity="40")

        assert fabric_total_required(fabric) == Decimal("0.00")

    def test_order_share(self):
        fabric = FabricFactory.create(quantity="1")

        assert fabric_order_share(fabric, "3") == Decimal("33.3")

    def test_order_share_without_total(self):
        fabric = FabricFactory.create(quantity="50")

        assert fabric_order_share(fabric, "") is None

    def test_summarize_fabric(self):
        fabric = FabricFactory.create(
            name="Silk",
            per_piece_requirement="2",
            unit="kg",
            processes=["Dyeing", "Printing"],
            colors=[("Red", "10"), ("Blue", "")],
            quantity="25",
        )

        summary = summarize_fabric(fabric, "100")

        assert summary.name == "Silk"
        assert summary.total_required == Decimal("50.00")
        assert summary.unit.value == "kg"
        assert summary.process_count == 2
        assert summary.order_share_percent == Decimal("25.0")
        assert summary.colors_allocated == Decimal("10")


class TestAllocationSummary:

    def test_partial_allocation(self):
        plan = PlanFactory.create(
            total_order_quantity="200",
            fabrics=[
                FabricFactory.create(name="Cotton", quantity="100"),
                FabricFactory.create(name="Silk", quantity="50"),
            ],
        )

        summary = allocation_summary(plan)

        assert summary.allocated == Decimal("150")
        assert summary.total == Decimal("200")
        assert summary.remaining == Decimal("50")
        assert summary.percent == Decimal("75.0")

    def test_unusable_total(self):
        plan = PlanFactory.create(
            total_order_quantity="abc",
            fabrics=[FabricFactory.create(quantity="10")],
        )

        summary = allocation_summary(plan)

        assert summary.allocated == Decimal("10")
        assert summary.total is None
        assert summary.remaining is None
        assert summary.percent is None


class TestSubmissionSummaries:
    """Tests for the submissions listing rows."""

    def test_domestic_hides_international_fields(self):
        plan = PlanFactory.create_valid(china_fabrics=["Cotton"], major_fabric="Cotton")
        submission = SubmissionFactory.create(plan=plan, id="sub-1")

        summary = summarize_submission(submission, 1)

        assert summary.title == "Production Plan #1"
        assert summary.sourcing == "Domestic"
        assert summary.china_fabrics == []
        assert summary.major_fabric is None

    def test_international_shows_china_and_major(self):
        plan = PlanFactory.create_valid(
            has_international_fabric=True,
            china_fabrics=["Cotton"],
            major_fabric="Cotton",
        )
        submission = SubmissionFactory.create(plan=plan)

        summary = summarize_submission(submission, 3)

        assert summary.title == "Production Plan #3"
        assert summary.sourcing == "International"
        assert summary.china_fabrics == ["Cotton"]
        assert summary.major_fabric == "Cotton"

    def test_fabric_rows(self):
        submission = SubmissionFactory.create()

        summary = summarize_submission(submission, 1)

        assert len(summary.fabrics) == 1
        assert summary.fabrics[0].name == "Cotton"
        assert summary.fabrics[0].quantity == "100"
        assert summary.fabrics[0].processes == ["Dyeing"]

    def test_listing_numbers_in_append_order(self, memory_repository):
        memory_repository.append(SubmissionFactory.create(id="first"))
        memory_repository.append(SubmissionFactory.create(id="second"))

        rows = list_submission_summaries(memory_repository)

        assert [(r.id, r.title) for r in rows] == [
            ("first", "Production Plan #1"),
            ("second", "Production Plan #2"),
        ]

    def test_listing_empty(self, memory_repository):
        assert list_submission_summaries(memory_repository) == []
