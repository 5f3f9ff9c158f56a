"""
score_db.py: SQLite persistence for the best score.
"""

import logging
import sqlite3

from .constants import DB_FILE

logger = logging.getLogger(__name__)


class HighScoreDatabase:
    """Single-row table holding the best score ever recorded."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        try:
            self.setup()
        except sqlite3.Error:
            self.conn.close()
            raise

    def setup(self):
        """Creates the table and its single row if they don't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS HighScore (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.cur.execute("INSERT OR IGNORE INTO HighScore (id, best) VALUES (1, 0)")
        self.conn.commit()

    def get_high_score(self) -> int:
        """Fetches the stored best score, 0 when nothing was recorded."""
        self.cur.execute("SELECT best FROM HighScore WHERE id = 1")
        row = self.cur.fetchone()
        return row[0] if row else 0

    def set_high_score(self, score: int) -> None:
        """Stores a new best; a lower score never overwrites a higher one."""
        self.cur.execute(
            "UPDATE HighScore SET best = MAX(best, ?) WHERE id = 1", (score,))
        self.conn.commit()
        logger.info("High score saved: %d", score)

    def close(self):
        self.conn.close()
