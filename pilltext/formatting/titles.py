"""
Subtitle lines for the now-playing pill: artist/album and provider/progress.
"""

import logging
from typing import List, Optional

from pilltext.config import display
from pilltext.media.music_state import EMPTY_ALBUM, EMPTY_ARTIST
from .time_format import format_music_progress

logger = logging.getLogger(__name__)


def _is_valid(value: str, empty_value: str) -> bool:
    return bool(value) and value.strip() != '' and value != empty_value


def build_artist_album_title(show_artist: bool, show_album: bool,
                             artist: str, album: str,
                             empty_artist: str = EMPTY_ARTIST,
                             empty_album: str = EMPTY_ALBUM) -> str:
    """
    Join artist and album into one subtitle.
    
    A part is shown only when requested and when it is neither blank nor the
    media session's "no metadata" placeholder. The result is cut to
    MAX_TITLE_LENGTH characters plus an ellipsis.
    
    Note: the cut counts code points, not grapheme clusters, so a multi
    code point character sitting on the limit can be split.
    
    Returns:
        The subtitle, or "" when neither part is shown
    """
    parts: List[str] = []

    if show_artist and _is_valid(artist, empty_artist):
        parts.append(artist)

    if show_album and _is_valid(album, empty_album):
        parts.append(album)

    result = display.ARTIST_ALBUM_SEPARATOR.join(parts)

    if len(result) > display.MAX_TITLE_LENGTH:
        logger.debug(f"Truncating subtitle of {len(result)} characters to {display.MAX_TITLE_LENGTH}")
        return result[:display.MAX_TITLE_LENGTH] + display.ELLIPSIS
    return result


def combine_provider_and_timestamp(provider: str, show_provider: bool, show_timestamp: bool,
                                   position: int, duration: int) -> Optional[str]:
    """
    Build the "provider • position / duration" line.
    
    Returns:
        The joined line, or None when it would be empty or whitespace only
    """
    parts: List[str] = []

    if show_provider:
        parts.append(provider)
    if show_timestamp:
        parts.append(format_music_progress(position, duration))

    result = display.PROVIDER_SEPARATOR.join(parts)
    if not result.strip():
        return None
    return result
