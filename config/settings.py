"""
Runtime settings — environment variables

Everything configurable lives behind a PAINEL_* variable. Values are read on
each call so tests can switch them with monkeypatch.setenv.
"""
import os
from pathlib import Path
from typing import Optional

_ROOT = Path(__file__).resolve().parent.parent

# SQLite paths (prod + shadow)
DEFAULT_DB_PATH = _ROOT / "data" / "painel.db"
SHADOW_DB_PATH = _ROOT / "data" / "painel_test.db"


def get_db_path() -> Path:
    """SQLite database path (prod/shadow role or explicit path)."""
    env_path = os.getenv("PAINEL_DB_PATH")
    if env_path:
        return Path(env_path)
    role = os.getenv("PAINEL_DB_ROLE", "prod").lower()
    return SHADOW_DB_PATH if role == "shadow" else DEFAULT_DB_PATH


def get_store_kind() -> str:
    """`sqlite` (default) or `rest`."""
    return os.getenv("PAINEL_STORE", "sqlite").strip().lower()


def get_rest_url() -> Optional[str]:
    url = os.getenv("PAINEL_REST_URL", "").strip()
    return url.rstrip("/") or None


def get_rest_key() -> Optional[str]:
    return os.getenv("PAINEL_REST_KEY", "").strip() or None


def get_rest_timeout() -> float:
    raw = os.getenv("PAINEL_REST_TIMEOUT", "8")
    try:
        return float(raw)
    except ValueError:
        return 8.0


def get_log_level() -> str:
    return os.getenv("PAINEL_LOG_LEVEL", "INFO").upper()


def get_subscribe_url() -> str:
    return os.getenv("PAINEL_SUBSCRIBE_URL", "https://stripe.com")
