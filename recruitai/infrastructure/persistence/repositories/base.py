"""Shared session access for the PostgreSQL repositories."""

from __future__ import annotations

from typing import Optional

from recruitai.database.sqlmodel_engine import SQLModelDatabaseManager, get_sqlmodel_db_manager


class SQLModelRepository:
    """Resolves the global database manager lazily so repositories can be built at import time."""

    def __init__(self, db_manager: Optional[SQLModelDatabaseManager] = None):
        self._db_manager = db_manager

    @property
    def db_manager(self) -> SQLModelDatabaseManager:
        if self._db_manager is None:
            self._db_manager = get_sqlmodel_db_manager()
        return self._db_manager
