from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
import sys
from typing import TextIO

@dataclass
class RunLogger:
    """Timestamped run log, passed explicitly to whatever needs to report progress.

    Lines go to `stream` (stderr by default, never stdout) and, when `path` is
    set, are appended to that file too.
    """
    path: Path | None = None
    stream: TextIO | None = field(default_factory=lambda: sys.stderr)
    prefix: str = "[photo-filter]"

    def log(self, message: str) -> None:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {self.prefix} {message}\n"
        if self.stream is not None:
            self.stream.write(line)
            self.stream.flush()
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line)
