from __future__ import annotations

from dataclasses import dataclass

from photo_filter.core.filters import BoundPair, FilterSpec, NumericRange
from photo_filter.core.metadata_record import MetadataRecord
from photo_filter.util.geo import haversine_meters, in_bbox
from photo_filter.util.timeparse import parse_capture_timestamp

@dataclass(frozen=True)
class MatchOutcome:
    included: bool
    reason: str = ""
    missing_meta: bool = False  # excluded only because the timestamp is unusable

    @classmethod
    def include(cls) -> "MatchOutcome":
        return cls(included=True)

    @classmethod
    def exclude(cls, reason: str, missing_meta: bool = False) -> "MatchOutcome":
        return cls(included=False, reason=reason, missing_meta=missing_meta)


def match_record(record: MetadataRecord, spec: FilterSpec) -> MatchOutcome:
    """Evaluate one record against every filter dimension (boolean AND).

    The timestamp check always runs first, even when no time filter is set.
    Each later check short-circuits on the first failing dimension; the reason
    string is meant for the run log only.
    """
    src = record.source_path
    if not record.datetime_original:
        return MatchOutcome.exclude(f"skip missing time: file={src}", missing_meta=True)
    captured = parse_capture_timestamp(record.datetime_original)
    if captured is None:
        return MatchOutcome.exclude(
            f'skip parse time: file={src} dto="{record.datetime_original}"', missing_meta=True
        )

    if spec.date_range and not in_bounds(captured.date_str, spec.date_range):
        return MatchOutcome.exclude(
            f"skip date range: file={src} date={captured.date_str} "
            f"from={spec.date_range.start or ''} to={spec.date_range.end or ''}"
        )
    if spec.time_of_day and not in_bounds(captured.hhmm, spec.time_of_day):
        return MatchOutcome.exclude(f"skip time window: file={src} time={captured.hhmm}")

    reason = (
        _check_iso(record, spec.iso)
        or _check_artist(record, spec.artist)
        or _check_camera(record, spec)
        or _check_location(record, spec)
        or _check_altitude(record, spec.altitude)
    )
    if reason:
        return MatchOutcome.exclude(reason)
    return MatchOutcome.include()


def in_bounds(value: str, bounds: BoundPair) -> bool:
    """Inclusive lexicographic range test; fixed-width zero-padded values only.

    A window whose start sorts after its end matches nothing (no wrap at midnight).
    """
    if bounds.start and value < bounds.start:
        return False
    if bounds.end and value > bounds.end:
        return False
    return True


def _norm(v: str | None) -> str:
    return (v or "").strip().lower()


def _first_non_empty(*values: str | None) -> str:
    for v in values:
        if v and v.strip():
            return v
    return ""


def _check_iso(record: MetadataRecord, iso: NumericRange | None) -> str:
    # A record without ISO passes any ISO filter.
    if iso is None or record.iso is None:
        return ""
    if iso.minimum is not None and record.iso < iso.minimum:
        return f"skip iso min: file={record.source_path} iso={record.iso:g} min={iso.minimum:g}"
    if iso.maximum is not None and record.iso > iso.maximum:
        return f"skip iso max: file={record.source_path} iso={record.iso:g} max={iso.maximum:g}"
    return ""


def _check_artist(record: MetadataRecord, artist: str | None) -> str:
    if not artist or not artist.strip():
        return ""
    needle = _norm(artist)
    found = _norm(_first_non_empty(record.artist, record.creator, record.by_line))
    if not found or needle not in found:
        return f'skip artist: file={record.source_path} artist="{found}" needle="{needle}"'
    return ""


def _check_camera(record: MetadataRecord, spec: FilterSpec) -> str:
    camera = spec.camera
    if camera is None:
        return ""
    if camera.make:
        needle = _norm(camera.make)
        if needle not in _norm(record.make):
            return f'skip camera make: file={record.source_path} make="{record.make or ""}" needle="{needle}"'
    if camera.model:
        needle = _norm(camera.model)
        if needle not in _norm(record.model):
            return f'skip camera model: file={record.source_path} model="{record.model or ""}" needle="{needle}"'
    return ""


def _check_location(record: MetadataRecord, spec: FilterSpec) -> str:
    loc = spec.location
    if loc is None or not (loc.has_center_radius or loc.has_bbox):
        return ""
    if not record.has_gps:
        return f"skip gps missing: file={record.source_path}"
    lat, lon = record.gps_latitude, record.gps_longitude

    # center+radius wins when both shapes are given
    if loc.has_center_radius:
        c_lat, c_lon = loc.center
        dist = haversine_meters(c_lat, c_lon, lat, lon)
        if dist > loc.radius_m:
            return (
                f"skip gps outside radius: file={record.source_path} lon={lon} lat={lat} "
                f"center=({c_lon},{c_lat}) r={loc.radius_m:g}m d={dist:.1f}m"
            )
        return ""

    if not in_bbox(lat, lon, loc.bbox):
        min_lon, min_lat, max_lon, max_lat = loc.bbox
        return (
            f"skip gps outside bbox: file={record.source_path} lon={lon} lat={lat} "
            f"bbox=[{min_lon} {min_lat} {max_lon} {max_lat}]"
        )
    return ""


def effective_altitude(record: MetadataRecord) -> float | None:
    """Altitude in meters, negative below sea level (GPSAltitudeRef == 1)."""
    if record.gps_altitude is None:
        return None
    if record.gps_altitude_ref == 1:
        return -record.gps_altitude
    return record.gps_altitude


def _check_altitude(record: MetadataRecord, altitude: NumericRange | None) -> str:
    if altitude is None or altitude.is_open:
        return ""
    alt = effective_altitude(record)
    if alt is None:
        return f"skip altitude missing: file={record.source_path}"
    if altitude.minimum is not None and alt < altitude.minimum:
        return f"skip altitude min: file={record.source_path} alt={alt:g} min={altitude.minimum:g}"
    if altitude.maximum is not None and alt > altitude.maximum:
        return f"skip altitude max: file={record.source_path} alt={alt:g} max={altitude.maximum:g}"
    return ""
