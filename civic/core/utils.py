"""
Utility helpers shared across repositories/services.
"""

import uuid
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware current time; every server-assigned timestamp uses it."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def blank_to_none(value: str | None) -> str | None:
    """Collapse absent or empty strings to an explicit None."""
    if value is None:
        return None
    return value if value != "" else None
