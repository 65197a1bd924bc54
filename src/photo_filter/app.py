"""Application entrypoint.

Run in development:
    python -m photo_filter.app --prompt "Seoul trip" --date-from 2024-01-01

The structured report is printed to stdout as JSON; the run log goes to stderr.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

from photo_filter.core.run_logger import RunLogger
from photo_filter.core.run_summary import write_run_summary
from photo_filter.core.settings import AppSettings
from photo_filter.core.tool import TOOL_DESCRIPTION, filter_and_copy
from photo_filter.util.paths import expand_user_path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="photo-filter", description=TOOL_DESCRIPTION)

    p.add_argument("--request", type=Path, default=None,
                   help="JSON file with a full filter_and_copy request (flags below override it)")
    p.add_argument("--prompt", dest="original_prompt", default=None,
                   help="Prompt text used to name the output folder")
    p.add_argument("--base-dir", default=None, help="Base directory for photos")
    p.add_argument("--output-root", default=None, help="Root folder to place output directory")

    p.add_argument("--date-from", default=None, help="YYYY-MM-DD (inclusive)")
    p.add_argument("--date-to", default=None, help="YYYY-MM-DD (inclusive)")
    p.add_argument("--time-from", default=None, help="HH:MM (inclusive)")
    p.add_argument("--time-to", default=None, help="HH:MM (inclusive)")
    p.add_argument("--iso-min", type=float, default=None)
    p.add_argument("--iso-max", type=float, default=None)
    p.add_argument("--artist", default=None, help="Substring of Artist/Creator/By-line")
    p.add_argument("--make", default=None, help="Substring of camera make")
    p.add_argument("--model", default=None, help="Substring of camera model")
    p.add_argument("--bbox", type=float, nargs=4, default=None,
                   metavar=("MIN_LON", "MIN_LAT", "MAX_LON", "MAX_LAT"))
    p.add_argument("--center", type=float, nargs=2, default=None, metavar=("LAT", "LON"))
    p.add_argument("--radius-m", type=float, default=None, help="Radius around --center in meters")
    p.add_argument("--alt-min", type=float, default=None, help="Meters; negative is below sea level")
    p.add_argument("--alt-max", type=float, default=None, help="Meters; negative is below sea level")

    p.add_argument("--summary", type=Path, default=None, help="Also write the report JSON to this path")
    p.add_argument("--log-file", type=Path, default=None, help="Append the run log to this file")
    p.add_argument("--exiftool-path", default=None, help="ExifTool executable to use")
    return p.parse_args(argv)


def build_request(args: argparse.Namespace) -> dict[str, Any]:
    req: dict[str, Any] = {}
    if args.request:
        req = json.loads(args.request.read_text(encoding="utf-8"))
        if not isinstance(req, dict):
            raise ValueError(f"{args.request} must contain a JSON object")

    for key in ("original_prompt", "base_dir", "output_root", "artist"):
        value = getattr(args, key)
        if value is not None:
            req[key] = value

    _merge(req, "date_range", {"from": args.date_from, "to": args.date_to})
    _merge(req, "time_of_day", {"from": args.time_from, "to": args.time_to})
    _merge(req, "iso", {"min": args.iso_min, "max": args.iso_max})
    _merge(req, "camera", {"make": args.make, "model": args.model})
    _merge(req, "altitude", {"min": args.alt_min, "max": args.alt_max})

    location: dict[str, Any] = {
        "bbox": args.bbox,
        "center": {"lat": args.center[0], "lon": args.center[1]} if args.center else None,
        "radius_m": args.radius_m,
    }
    _merge(req, "location", location)
    return req


def _merge(req: dict[str, Any], key: str, values: dict[str, Any]) -> None:
    given = {k: v for k, v in values.items() if v is not None}
    if not given:
        return
    current = req.get(key)
    req[key] = {**current, **given} if isinstance(current, dict) else given


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    settings = AppSettings.load()
    if args.exiftool_path:
        settings.exiftool_path = args.exiftool_path
    if settings.exiftool_path:
        os.environ["PHOTO_FILTER_EXIFTOOL_PATH"] = settings.exiftool_path

    log_file = args.log_file or (Path(expand_user_path(settings.log_file)) if settings.log_file else None)
    logger = RunLogger(path=log_file)

    try:
        request = build_request(args)
    except (OSError, ValueError) as e:
        logger.log(f"request file error: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    result = filter_and_copy(request, settings=settings, logger=logger)
    if result.is_error:
        print(result.text, file=sys.stderr)
        return 1

    if args.summary and result.report is not None:
        write_run_summary(args.summary, result.report)

    print(json.dumps(result.structured, indent=2, ensure_ascii=False))
    logger.log(result.text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
