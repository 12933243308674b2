"""
Pill Formatter for the now-playing pill

Turns a MusicState snapshot into every string the pill needs in one call.
The formatter only holds display preferences; all per-frame input
(state and elapsed time) is passed to format().
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Any

from pilltext.config import display
from pilltext.media.music_state import EMPTY_ALBUM, EMPTY_ARTIST, MusicState, PillContent
from .pill_text import provide_pill_text
from .scroll_window import DEFAULT_SCROLL_SETTINGS, ScrollSettings
from .titles import build_artist_album_title, combine_provider_and_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PillDisplay:
    """Strings for one frame of the pill."""
    title: str
    subtitle: str
    provider_line: Optional[str]
    pill_text: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'title': self.title,
            'subtitle': self.subtitle,
            'provider_line': self.provider_line,
            'pill_text': self.pill_text
        }


class PillFormatter:
    """
    Formats music state for the now-playing pill.
    
    Defaults come from pilltext.config.display; pass arguments to override.
    """

    def __init__(self,
                 pill_content: Optional[PillContent] = None,
                 scroll_enabled: bool = display.SCROLL_ENABLED,
                 show_artist: bool = display.SHOW_ARTIST,
                 show_album: bool = display.SHOW_ALBUM,
                 show_provider: bool = display.SHOW_PROVIDER,
                 show_timestamp: bool = display.SHOW_TIMESTAMP,
                 scroll_settings: ScrollSettings = DEFAULT_SCROLL_SETTINGS,
                 empty_artist: str = EMPTY_ARTIST,
                 empty_album: str = EMPTY_ALBUM):
        if pill_content is None:
            pill_content = PillContent.from_value(display.DEFAULT_PILL_CONTENT)

        self.pill_content = pill_content
        self.scroll_enabled = scroll_enabled
        self.show_artist = show_artist
        self.show_album = show_album
        self.show_provider = show_provider
        self.show_timestamp = show_timestamp
        self.scroll_settings = scroll_settings
        self.empty_artist = empty_artist
        self.empty_album = empty_album

        logger.info(f"PillFormatter initialized: content={pill_content.value}, "
                    f"scroll={'on' if scroll_enabled else 'off'}, "
                    f"window={scroll_settings.visible_clusters} clusters")

    def format_subtitle(self, state: MusicState) -> str:
        return build_artist_album_title(self.show_artist, self.show_album,
                                        state.artist, state.album_name,
                                        self.empty_artist, self.empty_album)

    def format_provider_line(self, state: MusicState) -> Optional[str]:
        return combine_provider_and_timestamp(state.music_provider, self.show_provider,
                                              self.show_timestamp, state.position, state.duration)

    def format_pill_text(self, state: MusicState, elapsed_ms: int) -> str:
        return provide_pill_text(state.title, state.position, state.duration, state.is_playing,
                                 self.pill_content, self.scroll_enabled, elapsed_ms,
                                 self.scroll_settings)

    def format(self, state: MusicState, elapsed_ms: int = 0) -> PillDisplay:
        """
        Format all pill strings for one frame.
        
        Args:
            state: Current media session snapshot
            elapsed_ms: Milliseconds since the scroll animation reference instant
            
        Returns:
            PillDisplay with title, subtitle, provider line and pill text
        """
        result = PillDisplay(
            title=state.title.strip(),
            subtitle=self.format_subtitle(state),
            provider_line=self.format_provider_line(state),
            pill_text=self.format_pill_text(state, elapsed_ms)
        )
        logger.debug(f"Formatted pill at {elapsed_ms}ms: {result.pill_text!r}")
        return result
