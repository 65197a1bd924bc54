from __future__ import annotations

import pytest

from photo_filter.core.filters import BoundPair, FilterSpec, NumericRange
from photo_filter.core.request import FilterAndCopyRequest
from photo_filter.util.errors import ValidationError


def _request(**extra) -> dict:
    return {"original_prompt": "trip", **extra}


def test_minimal_request_has_no_filters() -> None:
    req = FilterAndCopyRequest.from_dict(_request())
    assert req.original_prompt == "trip"
    assert req.base_dir == ""
    assert req.copy_mode == "copy"
    assert req.filters == FilterSpec()


def test_full_request_parses_every_dimension() -> None:
    req = FilterAndCopyRequest.from_dict(_request(
        base_dir="/photos",
        output_root="/out",
        copy_mode="copy",
        date_range={"from": "2024-01-01", "to": "2024-01-31"},
        time_of_day={"from": "09:00"},
        iso={"max": 800},
        artist="kim",
        camera={"make": "fuji", "model": "x-t5"},
        location={"bbox": [126.76, 37.4, 127.18, 37.7], "center": {"lat": 37.5, "lon": 127.0}, "radius_m": 500},
        altitude={"min": -10, "max": 100.5},
    ))
    f = req.filters
    assert f.date_range == BoundPair("2024-01-01", "2024-01-31")
    assert f.time_of_day == BoundPair("09:00", None)
    assert f.iso == NumericRange(None, 800)
    assert f.artist == "kim"
    assert f.camera.make == "fuji" and f.camera.model == "x-t5"
    assert f.location.bbox == (126.76, 37.4, 127.18, 37.7)
    assert f.location.center == (37.5, 127.0)
    assert f.location.has_center_radius and f.location.has_bbox
    assert f.altitude == NumericRange(-10, 100.5)


def test_empty_bounds_become_open() -> None:
    req = FilterAndCopyRequest.from_dict(_request(date_range={"from": "", "to": ""}))
    assert req.filters.date_range.is_open


def test_center_without_radius_is_not_a_constraint() -> None:
    req = FilterAndCopyRequest.from_dict(_request(location={"center": {"lat": 1.0, "lon": 2.0}}))
    assert not req.filters.location.has_center_radius
    assert not req.filters.location.has_bbox


@pytest.mark.parametrize(
    "payload, field_id",
    [
        ({}, "original_prompt"),
        (_request(base_dir=""), "base_dir"),
        (_request(copy_mode="link"), "copy_mode"),
        (_request(unknown=1), "request"),
        (_request(date_range={"from": "2024-01-01", "until": "x"}), "date_range"),
        (_request(iso={"min": "100"}), "iso.min"),
        (_request(iso={"min": True}), "iso.min"),
        (_request(artist=5), "artist"),
        (_request(camera="fuji"), "camera"),
        (_request(location={"bbox": [1, 2, 3]}), "location.bbox"),
        (_request(location={"bbox": [1, 2, 3, "4"]}), "location.bbox"),
        (_request(location={"center": {"lat": 1.0}}), "location.center"),
        (_request(location={"center": {"lat": 1, "lon": 2}, "radius_m": 0}), "location.radius_m"),
        (_request(location={"radius_m": -5}), "location.radius_m"),
    ],
)
def test_invalid_requests_raise(payload: dict, field_id: str) -> None:
    with pytest.raises(ValidationError) as exc:
        FilterAndCopyRequest.from_dict(payload)
    assert exc.value.field_id == field_id


def test_non_object_request_rejected() -> None:
    with pytest.raises(ValidationError):
        FilterAndCopyRequest.from_dict(["original_prompt"])


def test_with_dirs_keeps_filters() -> None:
    req = FilterAndCopyRequest.from_dict(_request(artist="kim"))
    resolved = req.with_dirs("/photos", "/out")
    assert resolved.base_dir == "/photos" and resolved.output_root == "/out"
    assert resolved.filters is req.filters
