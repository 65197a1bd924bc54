from __future__ import annotations

import re
from datetime import date
from pathlib import Path

import pytest

from photo_filter.util.naming import RESERVED_CHARS, output_folder_name, prompt_slug


def test_prompt_slug_colon_and_spaces_collapse() -> None:
    assert prompt_slug("Seoul trip: day 1!") == "Seoul-trip-day-1!"


def test_prompt_slug_strips_reserved_characters() -> None:
    slug = prompt_slug('a/b\\c:d*e?f"g<h>i|j')
    assert slug == "a-b-c-d-e-f-g-h-i-j"
    assert not any(ch in slug for ch in RESERVED_CHARS)


def test_prompt_slug_collapses_repeated_separators() -> None:
    assert prompt_slug("x  \t y // z") == "x-y-z"
    assert prompt_slug("a---b") == "a-b"
    assert "--" not in prompt_slug("pics: <best> | 2024")


def test_prompt_slug_idempotent_on_clean_input() -> None:
    clean = "Seoul-trip-day-1"
    assert prompt_slug(clean) == clean
    assert prompt_slug(prompt_slug("Jeju  / sunset?")) == prompt_slug("Jeju  / sunset?")


def test_prompt_slug_keeps_unicode() -> None:
    assert prompt_slug("서울 여행") == "서울-여행"


def test_output_folder_name_uses_given_date() -> None:
    assert output_folder_name("Seoul trip: day 1!", date(2024, 3, 5)) == "2024-03-05_Seoul-trip-day-1!"


def test_output_folder_name_defaults_to_today() -> None:
    name = output_folder_name("beach")
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}_beach", name)


def test_run_folder_naming(tmp_path: Path) -> None:
    pytest.importorskip("appdirs")
    from photo_filter.core.settings import AppSettings

    run_folder = AppSettings.new_run_folder(tmp_path, "Seoul trip")
    assert run_folder.parent == tmp_path
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}_Seoul-trip", run_folder.name)
