from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from photo_filter.util.errors import ValidationError

BBox = tuple[float, float, float, float]  # min_lon, min_lat, max_lon, max_lat

@dataclass(frozen=True)
class BoundPair:
    """Inclusive string bounds (YYYY-MM-DD dates or HH:MM times).

    Empty strings are stored as None so that "" never constrains anything.
    """
    start: str | None = None
    end: str | None = None

    @property
    def is_open(self) -> bool:
        return not self.start and not self.end

@dataclass(frozen=True)
class NumericRange:
    minimum: float | None = None
    maximum: float | None = None

    @property
    def is_open(self) -> bool:
        return self.minimum is None and self.maximum is None

@dataclass(frozen=True)
class CameraFilter:
    make: str | None = None
    model: str | None = None

@dataclass(frozen=True)
class LocationFilter:
    bbox: BBox | None = None
    center: tuple[float, float] | None = None  # lat, lon
    radius_m: float | None = None

    @property
    def has_center_radius(self) -> bool:
        return self.center is not None and bool(self.radius_m)

    @property
    def has_bbox(self) -> bool:
        return self.bbox is not None

@dataclass(frozen=True)
class FilterSpec:
    """Compound predicate. Every dimension is optional; None never excludes."""
    date_range: BoundPair | None = None
    time_of_day: BoundPair | None = None
    iso: NumericRange | None = None
    artist: str | None = None
    camera: CameraFilter | None = None
    location: LocationFilter | None = None
    altitude: NumericRange | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FilterSpec":
        """Parse the filter fields of a request payload.

        Keys that are not filter fields are ignored here; the request parser owns
        strictness for the top-level object.
        """
        return cls(
            date_range=_bound_pair(data.get("date_range"), "date_range"),
            time_of_day=_bound_pair(data.get("time_of_day"), "time_of_day"),
            iso=_numeric_range(data.get("iso"), "iso"),
            artist=optional_str(data, "artist", "artist"),
            camera=_camera(data.get("camera")),
            location=_location(data.get("location")),
            altitude=_numeric_range(data.get("altitude"), "altitude"),
        )


def require_mapping(value: Any, field_id: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(field_id, f"{field_id} must be an object")
    return value


def reject_unknown_keys(data: Mapping[str, Any], allowed: set[str], field_id: str) -> None:
    unknown = sorted(k for k in data if k not in allowed)
    if unknown:
        raise ValidationError(field_id, f"{field_id}: unrecognized key(s): {', '.join(unknown)}")


def optional_str(data: Mapping[str, Any], key: str, field_id: str) -> str | None:
    v = data.get(key)
    if v is None:
        return None
    if not isinstance(v, str):
        raise ValidationError(field_id, f"{field_id} must be a string")
    return v


def optional_number(data: Mapping[str, Any], key: str, field_id: str) -> float | None:
    v = data.get(key)
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValidationError(field_id, f"{field_id} must be a number")
    return v


def _bound_pair(value: Any, field_id: str) -> BoundPair | None:
    if value is None:
        return None
    data = require_mapping(value, field_id)
    reject_unknown_keys(data, {"from", "to"}, field_id)
    start = optional_str(data, "from", f"{field_id}.from")
    end = optional_str(data, "to", f"{field_id}.to")
    return BoundPair(start=start or None, end=end or None)


def _numeric_range(value: Any, field_id: str) -> NumericRange | None:
    if value is None:
        return None
    data = require_mapping(value, field_id)
    reject_unknown_keys(data, {"min", "max"}, field_id)
    return NumericRange(
        minimum=optional_number(data, "min", f"{field_id}.min"),
        maximum=optional_number(data, "max", f"{field_id}.max"),
    )


def _camera(value: Any) -> CameraFilter | None:
    if value is None:
        return None
    data = require_mapping(value, "camera")
    reject_unknown_keys(data, {"make", "model"}, "camera")
    return CameraFilter(
        make=optional_str(data, "make", "camera.make"),
        model=optional_str(data, "model", "camera.model"),
    )


def _location(value: Any) -> LocationFilter | None:
    if value is None:
        return None
    data = require_mapping(value, "location")
    reject_unknown_keys(data, {"bbox", "center", "radius_m"}, "location")

    bbox: BBox | None = None
    raw_bbox = data.get("bbox")
    if raw_bbox is not None:
        if not isinstance(raw_bbox, (list, tuple)) or len(raw_bbox) != 4:
            raise ValidationError("location.bbox", "location.bbox must be [minLon, minLat, maxLon, maxLat]")
        for v in raw_bbox:
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ValidationError("location.bbox", "location.bbox values must be numbers")
        bbox = (raw_bbox[0], raw_bbox[1], raw_bbox[2], raw_bbox[3])

    center: tuple[float, float] | None = None
    raw_center = data.get("center")
    if raw_center is not None:
        c = require_mapping(raw_center, "location.center")
        reject_unknown_keys(c, {"lat", "lon"}, "location.center")
        lat = optional_number(c, "lat", "location.center.lat")
        lon = optional_number(c, "lon", "location.center.lon")
        if lat is None or lon is None:
            raise ValidationError("location.center", "location.center requires lat and lon")
        center = (lat, lon)

    radius = optional_number(data, "radius_m", "location.radius_m")
    if radius is not None and radius <= 0:
        raise ValidationError("location.radius_m", "location.radius_m must be greater than 0")

    return LocationFilter(bbox=bbox, center=center, radius_m=radius)
