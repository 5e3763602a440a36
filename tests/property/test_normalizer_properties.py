from __future__ import annotations

from hypothesis import assume, given, strategies as st

from audiocatalog.normalizer import AUDIO_EXTENSION, normalize_name

name_parts = st.sampled_from(["0", "1", "12", "-", " ", "_", "\t", ".m4a", ".m4", "a", "Track", "m4a", "."])
names = st.one_of(st.text(max_size=40), st.lists(name_parts, max_size=12).map("".join))


@given(names)
def test_normalize_is_idempotent(name: str) -> None:
    once = normalize_name(name)
    assert normalize_name(once) == once


@given(names)
def test_normalized_name_has_no_trailing_extension(name: str) -> None:
    assert not normalize_name(name).endswith(AUDIO_EXTENSION)


@given(st.text(alphabet=st.characters(exclude_categories=("Nd", "Zs", "Zl", "Zp", "Cc")), min_size=1, max_size=20))
def test_plain_titles_are_left_alone(title: str) -> None:
    assume(not title.startswith(("-", "_")) and not title.endswith(AUDIO_EXTENSION))
    assert normalize_name(title) == title
