"""
SQLite connection management + schema

The local database used by SqliteStore. WAL mode lets several browser
sessions read while one writes.
"""
import shutil
import sqlite3
from pathlib import Path
from typing import Optional

from config.settings import DEFAULT_DB_PATH, SHADOW_DB_PATH, get_db_path

# ═══════════════════════════════════════════════════════
#  Schema — 4 tables (CHECK constraints + indexes)
# ═══════════════════════════════════════════════════════

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    matricula       TEXT NOT NULL UNIQUE,
    name            TEXT NOT NULL,
    email           TEXT NOT NULL,
    phone           TEXT,
    active_plan     INTEGER DEFAULT 0,
    plan_expires_at DATE,
    created_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS transactions (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id     INTEGER NOT NULL REFERENCES users(id),
    amount      NUMERIC NOT NULL CHECK(amount >= 0),
    type        TEXT NOT NULL,
    category    TEXT,
    description TEXT,
    created_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_tx_user    ON transactions(user_id);
CREATE INDEX IF NOT EXISTS idx_tx_created ON transactions(created_at);

CREATE TABLE IF NOT EXISTS credit_cards (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id      INTEGER NOT NULL REFERENCES users(id),
    card_name    TEXT NOT NULL,
    limit_amount NUMERIC NOT NULL CHECK(limit_amount >= 0),
    used_amount  NUMERIC DEFAULT 0 CHECK(used_amount >= 0),
    closing_day  INTEGER CHECK(closing_day BETWEEN 1 AND 31),
    due_day      INTEGER CHECK(due_day BETWEEN 1 AND 31),
    created_at   TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_card_user ON credit_cards(user_id);

CREATE TABLE IF NOT EXISTS reminders (
    id         INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id    INTEGER NOT NULL REFERENCES users(id),
    title      TEXT NOT NULL,
    due_date   DATE NOT NULL,
    amount     NUMERIC CHECK(amount IS NULL OR amount >= 0),
    status     TEXT DEFAULT 'pending',
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_rem_user ON reminders(user_id);
CREATE INDEX IF NOT EXISTS idx_rem_due  ON reminders(due_date);
"""


def get_connection(db_path: Optional[Path] = None) -> sqlite3.Connection:
    """
    Open a database connection (single use)

    Enables:
    - WAL mode: concurrent readers + one writer
    - foreign_keys: user_id references are enforced
    - Row factory: rows readable by column name

    The connection is not cached; callers close it.
    """
    path = Path(db_path) if db_path else get_db_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_database(db_path: Optional[Path] = None) -> None:
    """
    Create the schema

    Idempotent: every CREATE has IF NOT EXISTS. Called once at app start.
    """
    conn = get_connection(db_path)
    try:
        conn.executescript(_SCHEMA)
    finally:
        conn.close()


def sync_shadow_from_prod(
    prod_path: Optional[Path] = None,
    shadow_path: Optional[Path] = None,
    *,
    overwrite: bool = True,
) -> Path:
    """Copy the prod database over the shadow one."""
    prod = Path(prod_path) if prod_path else DEFAULT_DB_PATH
    shadow = Path(shadow_path) if shadow_path else SHADOW_DB_PATH
    if not prod.exists():
        raise FileNotFoundError(f"prod database not found: {prod}")
    shadow.parent.mkdir(parents=True, exist_ok=True)
    if shadow.exists() and not overwrite:
        return shadow
    shutil.copy2(prod, shadow)
    return shadow
