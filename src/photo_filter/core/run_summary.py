from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import json
from typing import Any


@dataclass(frozen=True)
class MatchReport:
    scanned: int
    matched: int
    skipped_missing_meta: int
    output_dir: str
    files: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return _jsonify(asdict(self))

    def summary_line(self) -> str:
        return (
            f"scanned={self.scanned} matched={self.matched} "
            f"skipped={self.skipped_missing_meta} output_dir={self.output_dir}"
        )


def write_run_summary(path: Path, report: MatchReport) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")


def _jsonify(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _jsonify(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonify(v) for v in obj]
    if isinstance(obj, Path):
        return str(obj)
    return obj
