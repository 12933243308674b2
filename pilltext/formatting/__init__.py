"""
Text formatting for the now-playing pill
"""

from .graphemes import grapheme_count, split_graphemes, take_graphemes
from .pill_formatter import PillDisplay, PillFormatter
from .pill_text import provide_pill_text
from .scroll_window import (
    DEFAULT_SCROLL_SETTINGS,
    ScrollSettings,
    cycle_duration_ms,
    provide_scrollable_text,
    scroll_offset,
)
from .time_format import format_music_progress, format_time
from .titles import build_artist_album_title, combine_provider_and_timestamp

__all__ = [
    'DEFAULT_SCROLL_SETTINGS',
    'PillDisplay',
    'PillFormatter',
    'ScrollSettings',
    'build_artist_album_title',
    'combine_provider_and_timestamp',
    'cycle_duration_ms',
    'format_music_progress',
    'format_time',
    'grapheme_count',
    'provide_pill_text',
    'provide_scrollable_text',
    'scroll_offset',
    'split_graphemes',
    'take_graphemes',
]
