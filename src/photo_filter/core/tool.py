from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from photo_filter.core.pipeline import run_filter_and_copy
from photo_filter.core.request import FilterAndCopyRequest
from photo_filter.core.run_logger import RunLogger
from photo_filter.core.run_summary import MatchReport
from photo_filter.core.settings import AppSettings, resolve_base_dir, resolve_output_root
from photo_filter.exif.exiftool_reader import ExifToolSource, MetadataSource
from photo_filter.util.errors import PhotoFilterError

TOOL_DESCRIPTION = "Filter photos by EXIF and copy them into a dated prompt folder"

@dataclass(frozen=True)
class ToolResult:
    is_error: bool
    text: str
    report: MatchReport | None = None

    @property
    def structured(self) -> dict[str, Any] | None:
        return self.report.to_dict() if self.report is not None else None


def filter_and_copy(
    args: Mapping[str, Any],
    settings: AppSettings | None = None,
    source: MetadataSource | None = None,
    logger: RunLogger | None = None,
) -> ToolResult:
    """Validate a raw request, resolve directories, run the pass and report.

    Any failure comes back as ToolResult(is_error=True) with a readable message;
    a partial report is never returned.
    """
    settings = settings or AppSettings()
    logger = logger or RunLogger()

    try:
        request = FilterAndCopyRequest.from_dict(args)
        base_dir = resolve_base_dir(request.base_dir, settings)
        output_root = resolve_output_root(request.output_root, settings, base_dir)
        request = request.with_dirs(base_dir, output_root)
        if source is None:
            source = ExifToolSource(logger, exiftool_path=settings.exiftool_path or None)
        report = run_filter_and_copy(request, source, Path(output_root), logger)
    except (PhotoFilterError, OSError) as e:
        logger.log(f"tool error: {e}")
        return ToolResult(is_error=True, text=f"error: {e}")

    return ToolResult(is_error=False, text=report.summary_line(), report=report)
