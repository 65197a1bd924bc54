from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

@dataclass(frozen=True)
class MetadataRecord:
    """Capture metadata for one file, as reported by the extraction tool.

    - source_path: absolute path of the discovered file (ExifTool SourceFile)
    - datetime_original: raw DateTimeOriginal string, may be missing or malformed
    - gps_altitude_ref: 0 above sea level, 1 below (sign is NOT applied here)
    """
    source_path: str
    datetime_original: str | None = None
    iso: float | None = None

    # Creator identity candidates, checked in this order.
    artist: str | None = None
    creator: str | None = None
    by_line: str | None = None

    make: str | None = None
    model: str | None = None

    gps_latitude: float | None = None
    gps_longitude: float | None = None
    gps_altitude: float | None = None
    gps_altitude_ref: int | None = None

    @property
    def has_gps(self) -> bool:
        return self.gps_latitude is not None and self.gps_longitude is not None

    @classmethod
    def from_exiftool(cls, item: Mapping[str, Any]) -> "MetadataRecord":
        """Build a record from one `exiftool -json -n` entry."""
        ref = _as_number(item.get("GPSAltitudeRef"))
        return cls(
            source_path=_as_text(item.get("SourceFile")) or "",
            datetime_original=_as_text(item.get("DateTimeOriginal")),
            iso=_as_number(item.get("ISO")),
            artist=_as_text(item.get("Artist")),
            creator=_as_text(item.get("Creator")),
            by_line=_as_text(item.get("By-line")),
            make=_as_text(item.get("Make")),
            model=_as_text(item.get("Model")),
            gps_latitude=_as_number(item.get("GPSLatitude")),
            gps_longitude=_as_number(item.get("GPSLongitude")),
            gps_altitude=_as_number(item.get("GPSAltitude")),
            gps_altitude_ref=int(ref) if ref is not None else None,
        )


def _as_number(v: Any) -> float | None:
    # bool is an int subclass; ExifTool never emits booleans for numeric tags.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    return v


def _as_text(v: Any) -> str | None:
    if v is None:
        return None
    if isinstance(v, str):
        return v
    if isinstance(v, list):
        # IPTC list tags such as By-line may hold several values.
        return ", ".join(str(x) for x in v)
    return str(v)
