"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import os

DEFAULT_API_BASE_URL = "http://localhost:5219"


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Existing environment variables win over values in .env.
    """
    root = _project_root()
    env_path = root / ".env"
    load_dotenv(env_path, override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_float(key: str) -> Optional[float]:
    """Get optional env var as float; return None if missing, invalid or not positive."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return None
    try:
        val = float(raw)
    except ValueError:
        return None
    return val if val > 0 else None


# --- Public config accessors ---

def api_base_url() -> str:
    """
    Optional: base URL of the business API. Default http://localhost:5219.
    Checks BUSINESS_API_BASE_URL first, then NEXT_PUBLIC_API_BASE_URL.
    """
    val = get_optional("BUSINESS_API_BASE_URL", "")
    if val:
        return val
    return get_optional("NEXT_PUBLIC_API_BASE_URL", DEFAULT_API_BASE_URL)


def api_timeout() -> float | None:
    """Optional: request timeout in seconds. Unset means no client-side timeout."""
    return get_optional_float("BUSINESS_API_TIMEOUT")


def log_level() -> str:
    """Optional: log level name. Default INFO."""
    return get_optional("LOG_LEVEL", "INFO").upper()
