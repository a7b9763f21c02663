"""
Utility helpers shared across routers/services.
"""

from datetime import datetime, timezone
from typing import Any


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string (the format stored in documents)."""
    return datetime.now(timezone.utc).isoformat()


def parse_bool(value: Any) -> bool:
    """Accept JSON booleans as well as the "true"/"false" strings sent by forms."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def pick(value: Any, fallback: Any) -> Any:
    """Keep ``fallback`` when ``value`` is missing or an empty string."""
    if value is None or value == "":
        return fallback
    return value
