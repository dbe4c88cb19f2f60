# src/gantt_planner/storage/local_storage.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from ..errors import StorageError

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    SQLite key/value store with string values (like the browser's localStorage).

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "planner.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("LocalStorage ready db=%s", self._db_path)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except sqlite3.Error as e:
            raise StorageError(f"cannot open {self._db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"cannot initialize {self._db_path}: {e}") from e
        finally:
            conn.close()

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"read failed key={key}: {e}") from e
        finally:
            conn.close()
        return None if row is None else str(row["value"])

    def set_item(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, value, time.time()),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"write failed key={key}: {e}") from e
        finally:
            conn.close()

    def remove_item(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"delete failed key={key}: {e}") from e
        finally:
            conn.close()

    def keys(self) -> list[str]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT key FROM kv ORDER BY key").fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"listing keys failed: {e}") from e
        finally:
            conn.close()
        return [str(r["key"]) for r in rows]
