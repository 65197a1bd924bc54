from __future__ import annotations

import re
from datetime import date, datetime

from dateutil import tz

# Characters not allowed in folder names on Windows/macOS/Linux.
RESERVED_CHARS = ["/", "\\", ":", "*", "?", '"', "<", ">", "|"]

_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"--+")

def prompt_slug(prompt: str) -> str:
    """Turn free text into a folder-safe slug.

    "Seoul trip: day 1!" -> "Seoul-trip-day-1!"
    """
    v = _WHITESPACE_RUN.sub("-", prompt)
    for ch in RESERVED_CHARS:
        v = v.replace(ch, "-")
    return _HYPHEN_RUN.sub("-", v)

def today_local() -> date:
    return datetime.now(tz.tzlocal()).date()

def output_folder_name(prompt: str, today: date | None = None) -> str:
    day = today or today_local()
    return f"{day.strftime('%Y-%m-%d')}_{prompt_slug(prompt)}"
