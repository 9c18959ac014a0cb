import logging
import os
import sqlite3
from utils.constants import DB_FILE

logger = logging.getLogger(__name__)


class DatabaseManager:
    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or DB_FILE
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            if self.db_path != ":memory:":
                self._conn.execute("PRAGMA journal_mode = WAL")
        return self._conn

    def initialize(self):
        """Create schema and seed defaults."""
        conn = self.get_connection()
        self._create_schema(conn)
        self._seed_defaults(conn)
        conn.commit()

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS bills (
                id              TEXT PRIMARY KEY,
                name            TEXT NOT NULL,
                amount          REAL NOT NULL CHECK(amount >= 0),
                currency        TEXT NOT NULL CHECK(currency IN ('CAD','USD','EUR')),
                first_due_date  TEXT NOT NULL,
                recurrence_type TEXT NOT NULL,
                interval_days   INTEGER,
                active          INTEGER NOT NULL DEFAULT 1,
                notes           TEXT,
                category        TEXT
            );

            CREATE TABLE IF NOT EXISTS incomes (
                id          TEXT PRIMARY KEY,
                name        TEXT NOT NULL,
                amount      REAL NOT NULL CHECK(amount >= 0),
                currency    TEXT NOT NULL CHECK(currency IN ('CAD','USD','EUR')),
                date        TEXT NOT NULL,
                recurrence  TEXT NOT NULL DEFAULT 'ONE_TIME',
                notes       TEXT,
                category    TEXT,
                source      TEXT
            );

            CREATE TABLE IF NOT EXISTS app_settings (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)

    def _seed_defaults(self, conn: sqlite3.Connection):
        defaults = [
            ("demo_seeded", ""),
            ("default_currency", "CAD"),
        ]
        for key, value in defaults:
            conn.execute(
                "INSERT OR IGNORE INTO app_settings(key, value) VALUES (?, ?)",
                (key, value),
            )

    def get_setting(self, key: str, default: str = "") -> str:
        conn = self.get_connection()
        row = conn.execute(
            "SELECT value FROM app_settings WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else default

    def set_setting(self, key: str, value: str):
        conn = self.get_connection()
        conn.execute(
            "INSERT OR REPLACE INTO app_settings(key, value) VALUES (?, ?)",
            (key, value),
        )
        conn.commit()

    @staticmethod
    def open(data_folder: str | None = None) -> "DatabaseManager":
        """Startup factory: opens (creating if needed) the DB in data_folder or the CWD."""
        if data_folder:
            os.makedirs(data_folder, exist_ok=True)
            db_path = os.path.join(data_folder, DB_FILE)
        else:
            db_path = DB_FILE
        logger.info(f"Opening database {db_path}")
        db = DatabaseManager(db_path)
        db.initialize()
        return db

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
