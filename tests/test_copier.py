from __future__ import annotations

from pathlib import Path

import pytest

from photo_filter.ops.copier import copy_into
from photo_filter.util.errors import FilesystemError


def test_copy_keeps_name_and_bytes(tmp_path: Path) -> None:
    src = tmp_path / "in" / "IMG_0001.JPG"
    src.parent.mkdir()
    src.write_bytes(b"\xff\xd8\xff\x00jpeg")
    out = tmp_path / "out"
    out.mkdir()

    dst = copy_into(src, out)

    assert dst == out / "IMG_0001.JPG"
    assert dst.read_bytes() == src.read_bytes()
    assert src.exists()


def test_copy_overwrites_same_name(tmp_path: Path) -> None:
    a = tmp_path / "a" / "IMG.jpg"
    b = tmp_path / "b" / "IMG.jpg"
    for p, data in ((a, b"first"), (b, b"second")):
        p.parent.mkdir()
        p.write_bytes(data)
    out = tmp_path / "out"
    out.mkdir()

    copy_into(a, out)
    dst = copy_into(b, out)

    assert dst.read_bytes() == b"second"


def test_copy_failure_raises_filesystem_error(tmp_path: Path) -> None:
    src = tmp_path / "IMG.jpg"
    src.write_bytes(b"x")
    with pytest.raises(FilesystemError) as exc:
        copy_into(src, tmp_path / "does-not-exist")
    assert isinstance(exc.value.__cause__, OSError)
