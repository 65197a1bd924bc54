from __future__ import annotations

import io
from pathlib import Path

import pytest

from photo_filter.core.metadata_record import MetadataRecord
from photo_filter.core.run_logger import RunLogger


class FakeSource:
    """MetadataSource returning canned records."""

    def __init__(self, records: list[MetadataRecord]) -> None:
        self.records = records
        self.calls: list[Path] = []

    def list_records(self, base_dir: Path) -> list[MetadataRecord]:
        self.calls.append(base_dir)
        return list(self.records)


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(log_stream: io.StringIO) -> RunLogger:
    return RunLogger(stream=log_stream)


@pytest.fixture
def photo_dir(tmp_path: Path) -> Path:
    base = tmp_path / "photos"
    (base / "day1").mkdir(parents=True)
    (base / "day2").mkdir()
    for rel in ("day1/IMG_0001.JPG", "day1/IMG_0002.JPG", "day2/IMG_0003.JPG", "day2/IMG_0004.JPG"):
        (base / rel).write_bytes(rel.encode("utf-8"))
    return base


@pytest.fixture
def make_source():
    return FakeSource
