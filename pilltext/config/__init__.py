"""
pilltext Configuration Package

Modular configuration split by component:
- display: pill content, text limits and scrolling
- system: logging and other system-wide settings

You can import specific modules:
    from pilltext.config import display
    print(display.VISIBLE_CLUSTERS)

Or use the flat names:
    from pilltext import config
    print(config.SCROLL_STEP_DURATION_MS)
"""

import sys

from . import display
from . import system

# =============================================================================
# Flat Exports
# =============================================================================

# Pill Content
PILL_DEFAULT_CONTENT = display.DEFAULT_PILL_CONTENT
PILL_SCROLL_ENABLED = display.SCROLL_ENABLED
PILL_SHOW_ARTIST = display.SHOW_ARTIST
PILL_SHOW_ALBUM = display.SHOW_ALBUM
PILL_SHOW_PROVIDER = display.SHOW_PROVIDER
PILL_SHOW_TIMESTAMP = display.SHOW_TIMESTAMP
PILL_VISIBLE_CLUSTERS = display.VISIBLE_CLUSTERS

# Text Limits
TEXT_MAX_TITLE_LENGTH = display.MAX_TITLE_LENGTH
TEXT_ELLIPSIS = display.ELLIPSIS
TEXT_ARTIST_ALBUM_SEPARATOR = display.ARTIST_ALBUM_SEPARATOR
TEXT_PROVIDER_SEPARATOR = display.PROVIDER_SEPARATOR

# Scrolling
SCROLL_STEP_DURATION_MS = display.SCROLL_STEP_DURATION_MS
SCROLL_START_PAUSE_STEPS = display.SCROLL_START_PAUSE_STEPS
SCROLL_END_PAUSE_STEPS = display.SCROLL_END_PAUSE_STEPS

# System
LOG_LEVEL = system.LOG_LEVEL
LOG_FORMAT = system.LOG_FORMAT

# =============================================================================
# Helper Functions
# =============================================================================

def get_config_dict() -> dict:
    """
    Get all configuration as a dictionary.
    
    Returns:
        Dictionary of all configuration values
    """
    module = sys.modules[__name__]
    config = {}
    
    for key in dir(module):
        if key.isupper():  # Only include uppercase variables (constants)
            config[key] = getattr(module, key)
    
    return config


def print_config():
    """Print all configuration values."""
    config = get_config_dict()
    
    print("=" * 80)
    print("pilltext Configuration")
    print("=" * 80)
    
    current_section = None
    for key, value in sorted(config.items()):
        # Sections are the name prefix
        section = key.split('_')[0]
        if section != current_section:
            print(f"\n{section} Configuration:")
            print("-" * 40)
            current_section = section
        
        print(f"  {key}: {value!r}")
    
    print("=" * 80)
