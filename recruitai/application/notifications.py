"""Fire-and-forget notification dispatch used by application services."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

import structlog

from recruitai.domain.interfaces import INotificationService

logger = structlog.get_logger(__name__)


async def notify_safely(
    notification_service: Optional[INotificationService],
    send: Callable[[INotificationService], Awaitable[Any]],
    *,
    event: str,
    **context: Any,
) -> bool:
    """Run ``send`` and log instead of raising; the caller's workflow never fails on a notification."""
    if notification_service is None:
        return False
    try:
        await send(notification_service)
        return True
    except Exception as exc:
        logger.error("Notification failed", notification_event=event, error=str(exc), **context)
        return False
