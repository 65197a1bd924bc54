from __future__ import annotations

from pathlib import Path
import shutil

from photo_filter.util.errors import FilesystemError

def copy_into(src: Path, dest_dir: Path) -> Path:
    """Copy `src` into `dest_dir` under its original file name.

    An existing file with the same name is overwritten. Failures are raised as
    FilesystemError; there is no retry and nothing already copied is undone.
    """
    dst = dest_dir / src.name
    try:
        shutil.copy2(src, dst)
    except OSError as e:
        raise FilesystemError(f"copy failed: {src} -> {dst}: {e}") from e
    return dst
