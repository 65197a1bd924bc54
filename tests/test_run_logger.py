from __future__ import annotations

import io
import re
from pathlib import Path

from photo_filter.core.run_logger import RunLogger


def test_log_writes_stream_and_file(tmp_path: Path) -> None:
    stream = io.StringIO()
    path = tmp_path / "logs" / "run_log.txt"
    logger = RunLogger(path=path, stream=stream)

    logger.log("filter start")
    logger.log("filter done")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[photo-filter\] filter start", lines[0])
    assert path.read_text(encoding="utf-8").splitlines() == lines


def test_log_without_stream(tmp_path: Path) -> None:
    path = tmp_path / "run_log.txt"
    RunLogger(path=path, stream=None).log("quiet")
    assert "quiet" in path.read_text(encoding="utf-8")
