"""
Production planning: application wiring.

Configures logging and builds a wizard session on the configured
submission store. The presentation layer drives the returned PlanWizard.
"""

import logging

import structlog

from config import settings
from services import PlanWizard, get_submission_repository, list_submission_summaries


def configure_logging() -> None:
    """Configure structured logging for the process."""
    logging.basicConfig(format="%(message)s", level=settings.log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if settings.is_production
                else structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger(__name__)


def create_wizard() -> PlanWizard:
    """
    Start a new planning session.

    Returns:
        PlanWizard bound to the configured submission repository
    """
    repository = get_submission_repository()
    logger.info(
        "plan_wizard_created",
        environment=settings.environment,
        backend=settings.submissions_backend,
        quantity_policy=settings.fabric_quantity_policy,
    )
    return PlanWizard(repository=repository)


def list_submissions():
    """Rows for the submissions screen, oldest first."""
    return list_submission_summaries(get_submission_repository())
