"""
Business logic services.

Each service handles one concern of the planning wizard.
"""

from services.plan_editor import EditOutcome, apply_edit, available_fabrics
from services.notification_service import Notification, Notifier, LoggingNotifier
from services.submission_repository import (
    SubmissionRepository,
    InMemorySubmissionRepository,
    JsonFileSubmissionRepository,
    SupabaseSubmissionRepository,
    build_submission_repository,
    get_submission_repository,
)
from services.plan_summary_service import (
    fabric_total_required,
    fabric_order_share,
    summarize_fabric,
    allocation_summary,
    summarize_submission,
    list_submission_summaries,
)
from services.wizard_service import PlanWizard, SubmitOutcome

__all__ = [
    "EditOutcome",
    "apply_edit",
    "available_fabrics",
    "Notification",
    "Notifier",
    "LoggingNotifier",
    "SubmissionRepository",
    "InMemorySubmissionRepository",
    "JsonFileSubmissionRepository",
    "SupabaseSubmissionRepository",
    "build_submission_repository",
    "get_submission_repository",
    "fabric_total_required",
    "fabric_order_share",
    "summarize_fabric",
    "allocation_summary",
    "summarize_submission",
    "list_submission_summaries",
    "PlanWizard",
    "SubmitOutcome",
]
