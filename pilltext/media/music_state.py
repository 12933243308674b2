"""
Music State - data models for the now-playing pill

This module defines the snapshot of a media session that the formatters
consume (title, artist, album, progress, provider) and the selector for
what the pill shows.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any

# Placeholder that media sessions report when a track carries no artist/album
EMPTY_ARTIST = "<unknown>"
EMPTY_ALBUM = "<unknown>"


class PillContent(Enum):
    """What the pill shows while a track is loaded"""
    ELAPSED = "elapsed"
    REMAINING = "remaining"
    TITLE = "title"

    @classmethod
    def from_value(cls, value: str) -> 'PillContent':
        """
        Look up a pill content mode by its value or name (case-insensitive).
        
        Raises:
            ValueError: If the value names no mode
        """
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")


@dataclass
class MusicState:
    """
    Snapshot of the active media session.
    
    Position and duration are in milliseconds.
    """
    title: str = ""
    artist: str = EMPTY_ARTIST
    album_name: str = EMPTY_ALBUM
    position: int = 0
    duration: int = 0
    is_playing: bool = False
    music_provider: str = ""

    @property
    def remaining(self) -> int:
        """Milliseconds left in the track (never negative)"""
        return max(0, self.duration - self.position)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'title': self.title,
            'artist': self.artist,
            'album_name': self.album_name,
            'position': self.position,
            'duration': self.duration,
            'is_playing': self.is_playing,
            'music_provider': self.music_provider
        }
