"""
Request echo utilities
"""

from datetime import datetime, timezone
from typing import Mapping, Optional


def current_timestamp() -> str:
    """Current UTC instant as ISO-8601 with a trailing Z"""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def format_params(params: Mapping[str, str]) -> str:
    """Render a mapping as {k1=v1, k2=v2}"""
    return "{" + ", ".join(f"{key}={value}" for key, value in params.items()) + "}"


def body_text(raw: bytes) -> Optional[str]:
    if not raw:
        return None
    return raw.decode("utf-8", errors="replace")
