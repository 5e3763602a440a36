from __future__ import annotations

import pytest

from audiocatalog.normalizer import normalize_name, strip_extension, strip_ordinal_prefix


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("03 Opening.m4a", "Opening"),
        ("Intro.m4a", "Intro"),
        ("NoExtension", "NoExtension"),
        ("1-02_Finale.m4a", "Finale"),
        ("01 - Prologue.m4a", "Prologue"),
        ("2019 Live Set", "Live Set"),
        ("12Track.m4a", "12Track"),
        ("", ""),
    ],
)
def test_normalize_name(raw: str, expected: str) -> None:
    assert normalize_name(raw) == expected


def test_extension_is_only_removed_as_suffix() -> None:
    assert normalize_name("Mix.m4a Edition") == "Mix.m4a Edition"
    assert strip_extension("song.m4a.m4a") == "song"


def test_prefix_requires_separator() -> None:
    assert strip_ordinal_prefix("7Seas") == "7Seas"
    assert strip_ordinal_prefix("7 Seas") == "Seas"


def test_extension_match_is_case_sensitive() -> None:
    assert normalize_name("Loud.M4A") == "Loud.M4A"
