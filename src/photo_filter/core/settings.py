from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import json
import os
from appdirs import user_config_dir

from photo_filter.util.errors import ValidationError
from photo_filter.util.naming import output_folder_name
from photo_filter.util.paths import expand_user_path

BASE_DIR_ENV = "PHOTO_FILTER_BASE_DIR"

def _config_path() -> Path:
    cfg_dir = Path(user_config_dir(appname="PhotoFilter", appauthor=False))
    cfg_dir.mkdir(parents=True, exist_ok=True)
    return cfg_dir / "settings.json"

def default_pictures_dir() -> Path:
    return Path.home() / "Pictures"

def default_desktop_dir() -> Path:
    return Path.home() / "Desktop"

@dataclass
class AppSettings:
    """User-persistent settings.

    Stored in: ~/Library/Application Support/PhotoFilter/settings.json (macOS),
    ~/.config/PhotoFilter/settings.json (Linux).
    """
    base_dir: str = ""
    output_root: str = ""
    exiftool_path: str = ""
    log_file: str = ""

    @classmethod
    def load(cls) -> "AppSettings":
        p = _config_path()
        if not p.exists():
            return cls()
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
            return cls(**data)
        except Exception:
            # Unreadable or stale settings must not block a run.
            return cls()

    def save(self) -> None:
        p = _config_path()
        p.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

    @staticmethod
    def new_run_folder(output_root: Path, prompt: str) -> Path:
        return output_root / output_folder_name(prompt)


def resolve_base_dir(requested: str, settings: AppSettings) -> str:
    """Request value, then $PHOTO_FILTER_BASE_DIR, then settings, then ~/Pictures."""
    base = (
        expand_user_path(requested)
        or expand_user_path(os.environ.get(BASE_DIR_ENV))
        or expand_user_path(settings.base_dir)
        or _fallback_pictures_dir()
    )
    if not base:
        raise ValidationError("base_dir", "base_dir required")
    return base


def _fallback_pictures_dir() -> str:
    try:
        return str(default_pictures_dir())
    except RuntimeError:
        # Path.home() fails when no home directory can be determined.
        return ""


def resolve_output_root(requested: str, settings: AppSettings, base_dir: str) -> str:
    """Request value, then settings, then ~/Desktop if present, else the base dir."""
    root = expand_user_path(requested) or expand_user_path(settings.output_root)
    if root:
        return root
    try:
        desktop = default_desktop_dir()
    except RuntimeError:
        return base_dir
    if desktop.is_dir():
        return str(desktop)
    return base_dir
