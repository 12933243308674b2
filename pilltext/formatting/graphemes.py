"""
Grapheme cluster helpers.

Pill text is measured in user-perceived characters (extended grapheme
clusters), so flags, emoji with skin tones and ZWJ sequences are never cut
in half when a title is truncated or scrolled.
"""

from typing import List

import regex

_GRAPHEME = regex.compile(r'\X')


def split_graphemes(text: str) -> List[str]:
    """Split text into extended grapheme clusters, in order."""
    return _GRAPHEME.findall(text)


def grapheme_count(text: str) -> int:
    return len(split_graphemes(text))


def take_graphemes(text: str, count: int) -> str:
    """Return the first ``count`` grapheme clusters of text (all of it if shorter)."""
    return ''.join(split_graphemes(text)[:max(0, count)])
