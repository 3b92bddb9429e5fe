"""
score_db.py: Key-value persistence for the per-mode high scores.
"""

import logging
import sqlite3
from typing import Dict, Optional, Protocol

from .constants import DB_FILE, HIGH_SCORE_KEY_CLASSIC, HIGH_SCORE_KEY_SHOOTING
from .data_models import GameMode

logger = logging.getLogger(__name__)

HIGH_SCORE_KEYS = {
    GameMode.CLASSIC: HIGH_SCORE_KEY_CLASSIC,
    GameMode.SHOOTING: HIGH_SCORE_KEY_SHOOTING,
}


class HighScoreStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryHighScoreStore:
    """Dict-backed store for tests and headless runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SqliteHighScoreStore:
    """High scores kept as key/value rows in a single sqlite table."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def get(self, key: str) -> Optional[str]:
        self.cur.execute("SELECT value FROM Settings WHERE key=?", (key,))
        row = self.cur.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self.cur.execute(
            "INSERT INTO Settings (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value", (key, value))
        self.conn.commit()

    def close(self):
        self.conn.close()


def parse_score(raw: Optional[str]) -> int:
    """Decodes a stored score; anything missing, malformed or negative is 0."""
    if raw is None:
        return 0
    try:
        value = int(str(raw).strip())
    except ValueError:
        logger.warning("Ignoring malformed stored high score %r", raw)
        return 0
    return max(value, 0)


def load_high_score(store: HighScoreStore, mode: GameMode) -> int:
    return parse_score(store.get(HIGH_SCORE_KEYS[mode]))


def load_high_scores(store: HighScoreStore) -> Dict[GameMode, int]:
    return {mode: load_high_score(store, mode) for mode in GameMode}


def save_high_score(store: HighScoreStore, mode: GameMode, value: int):
    store.set(HIGH_SCORE_KEYS[mode], str(int(value)))
