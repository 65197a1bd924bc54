from __future__ import annotations

from pathlib import Path

from photo_filter.core.matcher import match_record
from photo_filter.core.request import FilterAndCopyRequest
from photo_filter.core.run_logger import RunLogger
from photo_filter.core.run_summary import MatchReport
from photo_filter.core.settings import AppSettings
from photo_filter.exif.exiftool_reader import MetadataSource
from photo_filter.ops.copier import copy_into
from photo_filter.util.errors import ValidationError
from photo_filter.util.paths import ensure_dir

def run_filter_and_copy(
    request: FilterAndCopyRequest,
    source: MetadataSource,
    output_root: Path,
    logger: RunLogger,
) -> MatchReport:
    """Filter the records under request.base_dir and copy the matches.

    Single sequential pass in the order the source returns records:
      - scanned counts every record seen
      - skipped_missing_meta counts records with no usable DateTimeOriginal
      - files lists destinations actually written; matched == len(files)

    A copy failure (FilesystemError) propagates and no report is produced.
    Files copied before the failure stay on disk.
    """
    if not request.base_dir.strip():
        raise ValidationError("base_dir", "base_dir required")

    out_dir = ensure_dir(AppSettings.new_run_folder(output_root, request.original_prompt))
    logger.log(
        f'filter start base_dir={request.base_dir} prompt="{request.original_prompt}" out_dir={out_dir}'
    )

    records = source.list_records(Path(request.base_dir))
    logger.log(f"exif items={len(records)}")

    scanned = 0
    skipped = 0
    files: list[str] = []

    for record in records:
        scanned += 1
        outcome = match_record(record, request.filters)
        if not outcome.included:
            if outcome.missing_meta:
                skipped += 1
            logger.log(outcome.reason)
            continue

        if not record.source_path:
            logger.log("skip empty src: item has no SourceFile")
            continue
        src = Path(record.source_path)
        try:
            src.stat()
        except OSError as e:
            logger.log(f"skip stat error: file={src} error={e}")
            continue

        dst = copy_into(src, out_dir)
        files.append(str(dst))

    logger.log(f"filter done scanned={scanned} matched={len(files)} skipped={skipped}")
    return MatchReport(
        scanned=scanned,
        matched=len(files),
        skipped_missing_meta=skipped,
        output_dir=str(out_dir),
        files=tuple(files),
    )
