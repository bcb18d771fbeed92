"""Helpers for storing datetimes inside JSONB documents."""

from datetime import datetime
from typing import Optional


def dt_to_json(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def dt_from_json(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None
