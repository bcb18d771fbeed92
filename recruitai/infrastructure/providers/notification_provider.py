"""Notification service provider."""

from __future__ import annotations

import asyncio
from typing import Optional

from recruitai.domain.interfaces import INotificationService
from recruitai.infrastructure.adapters.notification_adapter import LocalNotificationService

_notification_service: Optional[INotificationService] = None
_lock = asyncio.Lock()


async def get_notification_service() -> INotificationService:
    global _notification_service

    if _notification_service is not None:
        return _notification_service

    async with _lock:
        if _notification_service is None:
            _notification_service = LocalNotificationService()
        return _notification_service


async def reset_notification_service() -> None:
    global _notification_service
    async with _lock:
        _notification_service = None


__all__ = ["get_notification_service", "reset_notification_service"]
