"""
Pill Display Configuration
"""

# =============================================================================
# Pill Content
# =============================================================================
DEFAULT_PILL_CONTENT = 'title'  # What the pill shows: 'elapsed', 'remaining' or 'title'
SCROLL_ENABLED = True  # Scroll titles that do not fit in the pill
SHOW_ARTIST = True  # Include the artist name in the subtitle
SHOW_ALBUM = True  # Include the album name in the subtitle
SHOW_PROVIDER = True  # Include the music provider (app name) in the provider line
SHOW_TIMESTAMP = True  # Include "position / duration" in the provider line

# =============================================================================
# Text Limits
# =============================================================================
MAX_TITLE_LENGTH = 70  # characters - artist/album subtitle is cut after this
ELLIPSIS = "..."
ARTIST_ALBUM_SEPARATOR = " - "
PROVIDER_SEPARATOR = " • "

# =============================================================================
# Scrolling Configuration
# =============================================================================
SCROLL_STEP_DURATION_MS = 200  # ms - the marquee moves one character per step
SCROLL_START_PAUSE_STEPS = 5  # steps held at the start (1s at 200ms)
SCROLL_END_PAUSE_STEPS = 5  # steps held at the end before looping (1s at 200ms)
VISIBLE_CLUSTERS = 7  # characters visible in the pill at once
