"""
pilltext - text formatting for a media "now playing" pill

Clock strings, artist/album subtitles and a time-driven marquee for titles
that do not fit the pill.
"""

from pilltext.formatting import (
    PillDisplay,
    PillFormatter,
    ScrollSettings,
    build_artist_album_title,
    combine_provider_and_timestamp,
    format_music_progress,
    format_time,
    provide_pill_text,
    provide_scrollable_text,
)
from pilltext.media import EMPTY_ALBUM, EMPTY_ARTIST, MusicState, PillContent

__version__ = "1.0.0"

__all__ = [
    'EMPTY_ALBUM',
    'EMPTY_ARTIST',
    'MusicState',
    'PillContent',
    'PillDisplay',
    'PillFormatter',
    'ScrollSettings',
    'build_artist_album_title',
    'combine_provider_and_timestamp',
    'format_music_progress',
    'format_time',
    'provide_pill_text',
    'provide_scrollable_text',
]
