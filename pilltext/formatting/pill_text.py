"""
Pill text selection: elapsed time, remaining time, or (scrolling) title.
"""

from pilltext.media.music_state import PillContent
from .graphemes import split_graphemes
from .scroll_window import DEFAULT_SCROLL_SETTINGS, ScrollSettings, provide_scrollable_text
from .time_format import format_time


def provide_pill_text(title: str, position: int, duration: int, is_playing: bool,
                      pill_content: PillContent, scroll_enabled: bool, elapsed_ms: int,
                      scroll_settings: ScrollSettings = DEFAULT_SCROLL_SETTINGS) -> str:
    """
    Pick the text shown in the pill.
    
    Times are only shown while playing a track with a known duration; in
    every other case (TITLE mode, paused, no duration) the title is shown,
    cut to the pill width or scrolled when scrolling is enabled.
    
    Args:
        title: Track title
        position: Playback position in milliseconds
        duration: Track duration in milliseconds
        is_playing: Whether playback is running
        pill_content: What the pill should show
        scroll_enabled: Scroll long titles instead of cutting them
        elapsed_ms: Milliseconds since the scroll animation reference instant
        scroll_settings: Marquee timing and width
    """
    show_time = is_playing and duration > 0

    if pill_content is PillContent.ELAPSED and show_time:
        return format_time(position)
    if pill_content is PillContent.REMAINING and show_time:
        return format_time(duration - position)

    # TITLE mode, or no time to show
    trimmed_title = title.strip()
    clusters = split_graphemes(trimmed_title)
    visible = scroll_settings.visible_clusters
    if not scroll_enabled or len(clusters) <= visible:
        return ''.join(clusters[:visible])

    return provide_scrollable_text(trimmed_title, elapsed_ms, scroll_settings)
