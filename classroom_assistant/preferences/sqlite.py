"""SQLite-based preference storage implementation."""

from datetime import datetime, timezone
from typing import Optional

import aiosqlite

from ..config.settings import Settings
from ..core.exceptions import DatabaseError
from .base import PreferenceStorage


class SQLitePreferenceStorage(PreferenceStorage):
    """SQLite-based preference storage implementation."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.db_path = settings.PREFERENCES_DATABASE_PATH
        self._connection: Optional[aiosqlite.Connection] = None

    async def initialize(self) -> None:
        """Initialize SQLite database."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self._connection = await aiosqlite.connect(self.db_path)
            await self._create_tables()

            self.logger.info("SQLite preference storage initialized", db_path=str(self.db_path))

        except Exception as e:
            raise DatabaseError(f"Failed to initialize SQLite preferences: {e}", "initialize") from e

    async def close(self) -> None:
        """Close SQLite connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
            self.logger.info("SQLite preference storage closed")

    async def _create_tables(self) -> None:
        """Create the preferences table."""
        create_table_sql = """
        CREATE TABLE IF NOT EXISTS preferences (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """

        if self._connection:
            await self._connection.execute(create_table_sql)
            await self._connection.commit()

    def _require_connection(self) -> aiosqlite.Connection:
        if not self._connection:
            raise DatabaseError("Storage not initialized")
        return self._connection

    async def get(self, key: str) -> Optional[str]:
        """Read a preference value from SQLite."""
        connection = self._require_connection()

        try:
            cursor = await connection.execute("SELECT value FROM preferences WHERE key = ?", (key,))
            row = await cursor.fetchone()
            return row[0] if row else None

        except Exception as e:
            raise DatabaseError(f"Failed to read preference: {e}", "get") from e

    async def set(self, key: str, value: str) -> None:
        """Store a preference value in SQLite."""
        connection = self._require_connection()

        try:
            sql = """
            INSERT OR REPLACE INTO preferences (key, value, updated_at)
            VALUES (?, ?, ?)
            """
            await connection.execute(sql, (key, value, datetime.now(timezone.utc).isoformat()))
            await connection.commit()

        except Exception as e:
            raise DatabaseError(f"Failed to store preference: {e}", "set") from e

    async def delete(self, key: str) -> bool:
        """Delete a preference from SQLite."""
        connection = self._require_connection()

        try:
            cursor = await connection.execute("DELETE FROM preferences WHERE key = ?", (key,))
            await connection.commit()

            return cursor.rowcount > 0

        except Exception as e:
            raise DatabaseError(f"Failed to delete preference: {e}", "delete") from e
