from __future__ import annotations

from pathlib import Path
import json
import os
import shutil
import subprocess
from typing import Any, Protocol

from photo_filter.core.metadata_record import MetadataRecord
from photo_filter.core.run_logger import RunLogger
from photo_filter.util.errors import ExifToolError

EXIFTOOL_PATH_ENVS = ("PHOTO_FILTER_EXIFTOOL_PATH", "EXIFTOOL_PATH")

# -n keeps GPS/altitude numeric and leaves DateTimeOriginal as the raw EXIF string.
EXIFTOOL_ARGS = [
    "-json", "-n", "-r",
    "-q", "-q",
    "-m",
    "-charset", "System=UTF8",
    "-charset", "filename=UTF8",
    "-charset", "exif=UTF8",
    "-charset", "iptc=UTF8",
]

class MetadataSource(Protocol):
    def list_records(self, base_dir: Path) -> list[MetadataRecord]:
        """Return one record per file under base_dir (recursive), in tool order.

        Raises ExtractionError when the listing cannot be produced.
        """
        ...

class ExifToolSource:
    """MetadataSource backed by one recursive `exiftool -json` call."""

    def __init__(self, logger: RunLogger, exiftool_path: str | None = None) -> None:
        self.logger = logger
        self.exiftool_path = exiftool_path or resolve_exiftool_path()

    def list_records(self, base_dir: Path) -> list[MetadataRecord]:
        items = self.read_items(base_dir)
        return [MetadataRecord.from_exiftool(it) for it in items]

    def read_items(self, base_dir: Path) -> list[dict[str, Any]]:
        cmd = [self.exiftool_path, *EXIFTOOL_ARGS, str(base_dir)]
        env = {
            **os.environ,
            "LANG": "en_US.UTF-8",
            "LC_ALL": "en_US.UTF-8",
            "PERL_UNICODE": "SDL",
        }
        self.logger.log(f"exiftool exec: {' '.join(cmd)}")

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=env,
            )
        except FileNotFoundError as e:
            raise ExifToolError(_exiftool_missing_message()) from e
        except OSError as e:
            raise ExifToolError(f"exiftool error: {e}") from e

        stderr = (proc.stderr or "").strip()
        # With -m, minor problems still exit non-zero while printing valid JSON,
        # so the output decides success rather than the return code.
        items = parse_exiftool_json(proc.stdout or "", stderr)
        if proc.returncode != 0:
            self.logger.log(f"exiftool exit={proc.returncode} stderr: {stderr}")
        self.logger.log(f"exiftool parsed items={len(items)}")
        return items


def parse_exiftool_json(stdout: str, stderr: str = "") -> list[dict[str, Any]]:
    trimmed = stdout.lstrip("\ufeff \t\r\n")
    if not trimmed or trimmed[0] not in "[{":
        raise ExifToolError(
            f"exiftool JSON parse failed: out(head): {trimmed[:200]} stderr: {stderr}"
        )
    try:
        parsed = json.loads(trimmed)
    except json.JSONDecodeError as e:
        raise ExifToolError(f"exiftool JSON parse failed: {e} stderr: {stderr}") from e

    items = parsed if isinstance(parsed, list) else [parsed]
    if not all(isinstance(it, dict) for it in items):
        raise ExifToolError("exiftool JSON parse failed: expected a list of objects")
    return items


def resolve_exiftool_path() -> str:
    """Resolve an ExifTool executable path.

    Resolution order:
    1) PHOTO_FILTER_EXIFTOOL_PATH, then EXIFTOOL_PATH env vars (explicit override)
    2) PATH lookup
    3) Common install locations
    4) Fallback: "exiftool" (may still fail at runtime with a friendly error)
    """
    for name in EXIFTOOL_PATH_ENVS:
        env_path = os.environ.get(name, "").strip()
        if env_path and Path(env_path).exists():
            return env_path

    which = shutil.which("exiftool")
    if which:
        return which

    for cand in ("/opt/homebrew/bin/exiftool", "/usr/local/bin/exiftool", "/usr/bin/exiftool"):
        if Path(cand).exists():
            return cand

    return "exiftool"


def _exiftool_missing_message() -> str:
    return (
        "ExifTool not found. Install ExifTool or set PHOTO_FILTER_EXIFTOOL_PATH "
        "(or EXIFTOOL_PATH) to the executable."
    )

