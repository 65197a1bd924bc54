from __future__ import annotations

from pathlib import Path

def ensure_dir(p: Path) -> Path:
    p.mkdir(parents=True, exist_ok=True)
    return p

def expand_user_path(value: str | None) -> str:
    """Expand a leading "~" the way a shell would; blank input returns ""."""
    v = (value or "").strip()
    if not v:
        return ""
    if v == "~":
        return str(Path.home())
    if v.startswith("~/"):
        return str(Path.home() / v[2:])
    return v
