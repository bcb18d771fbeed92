"""Concrete adapters for outbound domain ports."""

from recruitai.infrastructure.adapters.notification_adapter import LocalNotificationService

__all__ = ["LocalNotificationService"]
