# tests/test_naming.py

from __future__ import annotations

import pytest

from data_export.core.exceptions import InvalidSegmentIndexError
from data_export.naming import (
    FILE_NUMBER_PLACEHOLDER,
    INVALID_FILE_NAME_CHARS,
    format_file_number,
    resolve_file_name,
    sanitize_file_name,
    truncate,
)


def test_resolve_file_name_pads_segment_index() -> None:
    name = resolve_file_name("export-%Misc.FileNumber%", 3, ".csv", 20)
    assert name == "export-00003.csv"


def test_resolve_file_name_truncates_base_but_keeps_extension() -> None:
    name = resolve_file_name("export-%Misc.FileNumber%", 3, ".csv", 10)
    assert name == "export-00.csv"


@pytest.mark.parametrize("index", [0, 1, 42, 9999, 99999])
def test_placeholder_replaced_by_five_digit_index(index: int) -> None:
    name = resolve_file_name(f"a{FILE_NUMBER_PLACEHOLDER}b", index, "", 100)
    assert name == f"a{index:05d}b"
    assert name.count(f"{index:05d}") == 1


def test_pattern_without_placeholder_passes_through() -> None:
    assert resolve_file_name("products", 7, ".xml", 50) == "products.xml"


def test_unknown_tokens_are_kept() -> None:
    assert resolve_file_name("%Store.Name%-%Misc.FileNumber%", 0, "", 50) == "%Store.Name%-00000"


def test_illegal_characters_removed_from_resolved_name() -> None:
    name = resolve_file_name('a/b\\c:d*e?f"g<h>i|j-%Misc.FileNumber%', 1, ".txt", 100)
    assert name == "abcdefghij-00001.txt"


def test_base_length_never_exceeds_limit() -> None:
    for limit in range(1, 30):
        name = resolve_file_name("long-export-name-%Misc.FileNumber%", 12, ".json", limit)
        assert name.endswith(".json")
        assert len(name) - len(".json") <= limit


def test_name_that_fits_is_not_truncated() -> None:
    assert truncate("export", 6) == "export"
    assert truncate("export", 0) == "export"


def test_sanitize_removes_every_illegal_character() -> None:
    dirty = "x" + INVALID_FILE_NAME_CHARS + "y"
    clean = sanitize_file_name(dirty)
    assert clean == "xy"
    assert sanitize_file_name(clean) == clean


def test_sanitize_with_replacement_is_idempotent() -> None:
    once = sanitize_file_name("a:b/c", replacement="_")
    assert once == "a_b_c"
    assert sanitize_file_name(once, replacement="_") == once


def test_sanitize_rejects_illegal_replacement() -> None:
    with pytest.raises(ValueError):
        sanitize_file_name("a:b", replacement="/")


def test_format_file_number_rejects_negative_index() -> None:
    with pytest.raises(InvalidSegmentIndexError):
        format_file_number(-1)


def test_format_file_number_rejects_non_integer() -> None:
    with pytest.raises(InvalidSegmentIndexError):
        format_file_number("3")  # type: ignore[arg-type]
