"""
Notification surface for the planning wizard.

Receives individual messages for transient display (toasts). The default
implementation logs each message and keeps it for whoever renders them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class Notification:
    level: str  # "error" or "success"
    message: str
    description: Optional[str] = None


class Notifier(ABC):
    """Port for showing messages to the user."""

    @abstractmethod
    def error(self, message: str) -> None:
        pass

    @abstractmethod
    def success(self, message: str, description: Optional[str] = None) -> None:
        pass


class LoggingNotifier(Notifier):
    """
    Notifier that logs and records messages.

    `notifications` holds everything sent since the last drain().
    """

    def __init__(self):
        self.notifications: list[Notification] = []

    def error(self, message: str) -> None:
        logger.info("notify_error", message=message)
        self.notifications.append(Notification(level="error", message=message))

    def success(self, message: str, description: Optional[str] = None) -> None:
        logger.info("notify_success", message=message, description=description)
        self.notifications.append(
            Notification(level="success", message=message, description=description)
        )

    def drain(self) -> list[Notification]:
        """Return pending notifications and clear them."""
        pending, self.notifications = self.notifications, []
        return pending
