"""Display-name normalisation for catalogued audio files."""
from __future__ import annotations

import re

AUDIO_EXTENSION = ".m4a"

# one or more "<digits/hyphens><separator>" runs, e.g. "03 ", "1-2_", "01 - "
_ORDINAL_PREFIX = re.compile(r"^(?:[0-9-]*[\s_])+")


def strip_ordinal_prefix(name: str) -> str:
    return _ORDINAL_PREFIX.sub("", name, count=1)


def strip_extension(name: str) -> str:
    while name.endswith(AUDIO_EXTENSION):
        name = name[: -len(AUDIO_EXTENSION)]
    return name


def normalize_name(name: str) -> str:
    """Return ``name`` without its track-number prefix and audio extension.

    ``"03 Opening.m4a"`` becomes ``"Opening"``. The extension is only removed
    as a suffix, so a name such as ``"a.m4a remix"`` is left intact. The
    result is stable under repeated application.
    """

    return strip_extension(strip_ordinal_prefix(name))
