"""
Production planning wizard.

Owns the draft plan and the current step for one editing session. Edits go
through the plan editor, forward navigation and submit go through step
validation, and accepted submissions are appended to the submission log.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import structlog

from config.catalogs import STEP_DESCRIPTIONS, STEP_TITLES, TOTAL_STEPS
from exceptions import DatabaseError
from models.edits import PlanEdit, parse_edit
from models.plan import ProductionPlan, Submission
from models.validation import ValidationResult
from services.notification_service import LoggingNotifier, Notifier
from services.plan_editor import apply_edit, available_fabrics
from services.submission_repository import SubmissionRepository, get_submission_repository
from validation.rules import QuantityPolicy
from validation.steps import validate_step

logger = structlog.get_logger(__name__)

SUBMIT_FAILED_MESSAGE = "Error submitting form. Please try again."


@dataclass
class SubmitOutcome:
    """Result of a submit attempt."""
    result: ValidationResult
    submission: Optional[Submission] = None

    @property
    def submitted(self) -> bool:
        return self.submission is not None


class PlanWizard:
    """
    One wizard session.

    Steps run 1..TOTAL_STEPS. Moving forward requires the current step to
    validate; moving back never does. Every rejected action sends each of
    its messages to the notifier.
    """

    def __init__(
        self,
        repository: Optional[SubmissionRepository] = None,
        notifier: Optional[Notifier] = None,
        policy: Optional[QuantityPolicy] = None,
    ):
        self.repository = repository or get_submission_repository()
        self.notifier = notifier or LoggingNotifier()
        self.policy = policy
        self.step = 1
        self.plan = ProductionPlan()

    # ===================
    # STATE
    # ===================

    @property
    def is_last_step(self) -> bool:
        return self.step == TOTAL_STEPS

    @property
    def step_title(self) -> str:
        return STEP_TITLES[self.step]

    @property
    def step_description(self) -> str:
        return STEP_DESCRIPTIONS[self.step]

    def available_fabrics(self, index: Optional[int] = None) -> list[str]:
        """Fabric names still selectable (for fabric `index`, if given)."""
        return available_fabrics(self.plan, index)

    def reset(self) -> None:
        """Start over with an empty draft on step 1."""
        self.plan = ProductionPlan()
        self.step = 1
        logger.info("plan_wizard_reset")

    def _report(self, result: ValidationResult) -> None:
        for error in result.errors:
            self.notifier.error(error)

    # ===================
    # EDITING
    # ===================

    def apply(self, edit: PlanEdit) -> ValidationResult:
        """
        Apply one edit to the draft.

        Returns:
            ValidationResult of the edit; when invalid the draft is unchanged
        """
        outcome = apply_edit(self.plan, edit)
        if outcome.applied:
            self.plan = outcome.plan
        else:
            self._report(outcome.result)
        return outcome.result

    def update(self, data: dict) -> ValidationResult:
        """Apply an edit given as a dict, e.g. {"kind": "set_start_date", "value": "2025-01-06"}."""
        return self.apply(parse_edit(data))

    # ===================
    # NAVIGATION
    # ===================

    def validate_current_step(self) -> ValidationResult:
        return validate_step(self.step, self.plan, self.policy)

    def validate_all_steps(self) -> ValidationResult:
        """Every step's rules over the whole draft, in step order."""
        return ValidationResult.combine(*(
            validate_step(step, self.plan, self.policy)
            for step in range(1, TOTAL_STEPS + 1)
        ))

    def next_step(self) -> ValidationResult:
        """
        Advance one step if the current step validates.

        On the last step there is nothing to advance to; use submit().
        """
        if self.is_last_step:
            return ValidationResult.from_errors(["Already on the last step"])

        result = self.validate_current_step()
        if not result.is_valid:
            logger.info(
                "plan_step_blocked",
                step=self.step,
                error_count=len(result.errors),
            )
            self._report(result)
            return result

        self.step += 1
        logger.info("plan_step_advanced", step=self.step)
        return result

    def previous_step(self) -> None:
        """Go back one step. Never validated, never below step 1."""
        self.step = max(1, self.step - 1)
        logger.debug("plan_step_back", step=self.step)

    # ===================
    # SUBMIT
    # ===================

    def submit(self) -> SubmitOutcome:
        """
        Validate every step and append the draft to the submission log.

        On success the draft is replaced by an empty one and the wizard goes
        back to step 1. A storage failure is reported to the notifier and
        leaves the draft in place so the user can retry.

        Returns:
            SubmitOutcome with the stored Submission when it was accepted
        """
        if not self.is_last_step:
            result = ValidationResult.from_errors(["Complete all steps before submitting"])
            self._report(result)
            return SubmitOutcome(result=result)

        # Earlier steps are checked again; their fields stay editable
        result = self.validate_all_steps()
        if not result.is_valid:
            logger.info("plan_submit_blocked", error_count=len(result.errors))
            self._report(result)
            return SubmitOutcome(result=result)

        submission = Submission.from_plan(
            self.plan,
            id=str(uuid4()),
            submitted_at=datetime.now(timezone.utc),
        )

        try:
            self.repository.append(submission)
        except DatabaseError as e:
            logger.error(
                "plan_submit_failed",
                submission_id=submission.id,
                error=e.to_dict()["error"],
            )
            self.notifier.error(SUBMIT_FAILED_MESSAGE)
            return SubmitOutcome(result=ValidationResult.from_errors([SUBMIT_FAILED_MESSAGE]))

        logger.info(
            "plan_submitted",
            submission_id=submission.id,
            fabric_count=len(submission.fabrics),
        )
        self.notifier.success(
            "Form submitted successfully",
            description="Redirecting to submissions page...",
        )
        self.reset()
        return SubmitOutcome(result=result, submission=submission)
