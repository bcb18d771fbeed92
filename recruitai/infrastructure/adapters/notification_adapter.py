"""Development notification channel: candidate e-mails and recruiter pushes go to the log."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional

import structlog

from recruitai.domain.interfaces import INotificationService

logger = structlog.get_logger(__name__)

RECENT_MESSAGE_LIMIT = 50


@dataclass(frozen=True)
class DispatchedMessage:
    channel: str
    recipient: str
    subject: str
    sent_at: datetime


class LocalNotificationService(INotificationService):
    """Logs every message and keeps the most recent ones for inspection."""

    def __init__(self, recent_limit: int = RECENT_MESSAGE_LIMIT):
        self._recent: Deque[DispatchedMessage] = deque(maxlen=recent_limit)
        self._counts = {"email": 0, "push": 0}

    def _record(self, channel: str, recipient: str, subject: str) -> None:
        self._counts[channel] += 1
        self._recent.append(
            DispatchedMessage(
                channel=channel,
                recipient=recipient,
                subject=subject,
                sent_at=datetime.now(timezone.utc),
            )
        )

    @property
    def recent_messages(self) -> List[DispatchedMessage]:
        return list(self._recent)

    async def check_health(self) -> Dict[str, Any]:
        return {
            "status": "healthy",
            "service": type(self).__name__,
            "emails_sent": self._counts["email"],
            "push_sent": self._counts["push"],
        }

    async def send_email(self, to: str, subject: str, body: str, is_html: bool = False) -> bool:
        self._record("email", to, subject)
        logger.info("Candidate e-mail logged", recipient=to, subject=subject, body_length=len(body))
        logger.debug("Candidate e-mail body", recipient=to, body=body, is_html=is_html)
        return True

    async def send_push_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> bool:
        self._record("push", user_id, title)
        logger.info("Recruiter push logged", user_id=user_id, title=title, message=message, data=data)
        return True


__all__ = ["DispatchedMessage", "LocalNotificationService"]
