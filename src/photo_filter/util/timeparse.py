from __future__ import annotations

import re
from dataclasses import dataclass

# EXIF DateTimeOriginal as written by cameras:
# - 2024:01:15 10:00:00
# - 2024:01:15T10:00
# Anything else (offsets, sub-seconds, dashes) is rejected.
EXIF_TS_REGEX = re.compile(
    r"(?P<y>\d{4}):(?P<m>\d{2}):(?P<d>\d{2})[ T]"
    r"(?P<h>\d{2}):(?P<mi>\d{2})(?::(?P<s>\d{2}))?",
    re.ASCII,
)

@dataclass(frozen=True)
class CaptureTime:
    date_str: str  # YYYY-MM-DD
    hhmm: str  # HH:MM

def parse_capture_timestamp(value: str | None) -> CaptureTime | None:
    """Split an EXIF capture timestamp into local date and time-of-day strings.

    This must not guess timezone. The recorded components are returned verbatim;
    they are not validated as a calendar date either.
    Returns None when the value does not match the EXIF layout exactly.
    """
    if not value:
        return None
    m = EXIF_TS_REGEX.fullmatch(value)
    if not m:
        return None
    gd = m.groupdict()
    return CaptureTime(
        date_str=f"{gd['y']}-{gd['m']}-{gd['d']}",
        hhmm=f"{gd['h']}:{gd['mi']}",
    )
