"""Timestamps as the back end serialises its ``LocalDateTime`` fields."""

from __future__ import annotations

import re
from datetime import datetime

_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(raw: object) -> datetime | None:
    """Accept ISO text or the ``[y, m, d, h, min, s, ...]`` array form.

    LocalDateTime text can carry up to nine fractional digits; they are
    cut or padded to the six ``fromisoformat`` reads on every version.
    """
    if isinstance(raw, str) and raw:
        text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), raw, count=1)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    if isinstance(raw, list) and len(raw) >= 3:
        return datetime(*(int(part) for part in raw[:6]))
    return None
