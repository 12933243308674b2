"""
Media session data models
"""

from .music_state import EMPTY_ALBUM, EMPTY_ARTIST, MusicState, PillContent

__all__ = ['EMPTY_ALBUM', 'EMPTY_ARTIST', 'MusicState', 'PillContent']
