"""Persistence layer for players' saved opportunities."""

from __future__ import annotations

import os
import sqlite3
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import List


_DB_PATH_ENV = "CLUBFIT_DB_PATH"


class SavedOpportunityStore:
    """Simple SQLite-backed set of saved opportunities per player."""

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        env_db = os.getenv(_DB_PATH_ENV)
        if env_db:
            if env_db.startswith("file:"):
                self.db_path: Path | str = env_db
                self._use_uri = True
            else:
                self.db_path = Path(env_db)
        elif os.getenv("PYTEST_CURRENT_TEST"):
            test_dir = Path(tempfile.gettempdir()) / "clubfit-test"
            test_dir.mkdir(parents=True, exist_ok=True)
            self.db_path = test_dir / "clubfit.sqlite"
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        else:
            conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS saved_opportunities (
                    player_key TEXT NOT NULL,
                    need_id INTEGER NOT NULL,
                    saved_at TEXT NOT NULL,
                    PRIMARY KEY (player_key, need_id)
                )
                """
            )
            conn.commit()

    def save(self, player_key: str, need_id: int) -> None:
        saved_at = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR IGNORE INTO saved_opportunities (player_key, need_id, saved_at)
                VALUES (?, ?, ?)
                """,
                (player_key, need_id, saved_at),
            )
            conn.commit()

    def remove(self, player_key: str, need_id: int) -> None:
        with self._connect() as conn:
            conn.execute(
                "DELETE FROM saved_opportunities WHERE player_key = ? AND need_id = ?",
                (player_key, need_id),
            )
            conn.commit()

    def is_saved(self, player_key: str, need_id: int) -> bool:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT 1 FROM saved_opportunities WHERE player_key = ? AND need_id = ?",
                (player_key, need_id),
            ).fetchone()
        return row is not None

    def toggle(self, player_key: str, need_id: int) -> bool:
        """Flip the saved flag and return the new state."""

        if self.is_saved(player_key, need_id):
            self.remove(player_key, need_id)
            return False
        self.save(player_key, need_id)
        return True

    def list_saved(self, player_key: str) -> List[int]:
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT need_id FROM saved_opportunities
                WHERE player_key = ?
                ORDER BY saved_at DESC, rowid DESC
                """,
                (player_key,),
            ).fetchall()
        return [int(row["need_id"]) for row in rows]


__all__ = ["SavedOpportunityStore"]
