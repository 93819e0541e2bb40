import aiosqlite
import asyncio
import sqlite3
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, AsyncIterator, Union

from taskday.database.helpers import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseCore:
    """Async SQLite database with persistent connection and async lock.

    Uses a single persistent connection with an async lock to serialize
    access (SQLite limitation). The connection is lazily opened on first
    use and reused until explicitly closed.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._initialized = False
        self._conn: Optional[aiosqlite.Connection] = None
        self._conn_lock = asyncio.Lock()
        self._init_lock = asyncio.Lock()

    async def _ensure_connection(self) -> aiosqlite.Connection:
        """Ensure we have an open connection, creating one if needed."""
        if self._conn is None:
            try:
                self._conn = await aiosqlite.connect(self.path)
                self._conn.row_factory = aiosqlite.Row
                await self._conn.execute("PRAGMA journal_mode=WAL")
                await self._conn.execute("PRAGMA busy_timeout=5000")
            except (sqlite3.Error, OSError) as e:
                self._conn = None
                raise DatabaseError(f"Cannot open database at {self.path}: {e}") from e
        return self._conn

    @asynccontextmanager
    async def _get_connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Get a database connection with serialized access."""
        async with self._conn_lock:
            conn = await self._ensure_connection()
            yield conn

    async def close(self) -> None:
        """Close the persistent connection."""
        if self._conn is not None:
            try:
                await self._conn.close()
            except (sqlite3.Error, OSError) as e:
                logger.warning(f"Error closing database connection: {e}")
            finally:
                self._conn = None
                self._initialized = False

    async def init_db(self) -> None:
        """Initialize the database schema if needed."""
        async with self._init_lock:
            if self._initialized:
                return
            async with self._get_connection() as conn:
                await self._init_schema(conn)
                await conn.commit()
            self._initialized = True
            logger.info(f"Database initialized at {self.path}")

    async def _init_schema(self, conn: aiosqlite.Connection) -> None:
        try:
            await conn.executescript("""
                CREATE TABLE IF NOT EXISTS scheduler (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    date TEXT NOT NULL,
                    title TEXT NOT NULL,
                    comment TEXT,
                    repeat TEXT
                );
                CREATE INDEX IF NOT EXISTS idx_date ON scheduler(date);
            """)
        except sqlite3.Error as e:
            logger.error(f"Error initializing database schema: {e}")
            raise DatabaseError(f"Failed to initialize schema: {e}") from e
