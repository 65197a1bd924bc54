from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from photo_filter.core.filters import (
    FilterSpec,
    optional_str,
    reject_unknown_keys,
    require_mapping,
)
from photo_filter.util.errors import ValidationError

COPY_MODE = "copy"

FILTER_KEYS = {"date_range", "time_of_day", "iso", "artist", "camera", "location", "altitude"}
REQUEST_KEYS = {"base_dir", "output_root", "original_prompt", "copy_mode"} | FILTER_KEYS

@dataclass(frozen=True)
class FilterAndCopyRequest:
    """One filter-and-copy invocation.

    base_dir/output_root are kept as given (possibly blank); resolving defaults
    is the caller's job, see photo_filter.core.settings.
    """
    original_prompt: str
    base_dir: str = ""
    output_root: str = ""
    copy_mode: str = COPY_MODE
    filters: FilterSpec = field(default_factory=FilterSpec)

    @classmethod
    def from_dict(cls, payload: Any) -> "FilterAndCopyRequest":
        data: Mapping[str, Any] = require_mapping(payload, "request")
        reject_unknown_keys(data, REQUEST_KEYS, "request")

        prompt = optional_str(data, "original_prompt", "original_prompt")
        if prompt is None:
            raise ValidationError("original_prompt", "original_prompt required")

        base_dir = optional_str(data, "base_dir", "base_dir")
        if base_dir is not None and not base_dir:
            raise ValidationError("base_dir", "base_dir must not be empty")

        copy_mode = optional_str(data, "copy_mode", "copy_mode") or COPY_MODE
        if copy_mode != COPY_MODE:
            raise ValidationError("copy_mode", f'copy_mode must be "{COPY_MODE}"; hard links are not supported')

        return cls(
            original_prompt=prompt,
            base_dir=base_dir or "",
            output_root=optional_str(data, "output_root", "output_root") or "",
            copy_mode=copy_mode,
            filters=FilterSpec.from_dict(data),
        )

    def with_dirs(self, base_dir: str, output_root: str) -> "FilterAndCopyRequest":
        return FilterAndCopyRequest(
            original_prompt=self.original_prompt,
            base_dir=base_dir,
            output_root=output_root,
            copy_mode=self.copy_mode,
            filters=self.filters,
        )
