"""
Clock-style time formatting for playback progress.
"""


def format_time(millis: int) -> str:
    """
    Format a duration in milliseconds as a clock string.
    
    Args:
        millis: Duration in milliseconds; zero or negative gives "0:00"
        
    Returns:
        "H:MM:SS" when the duration has hours, otherwise "M:SS"
    """
    if millis <= 0:
        return "0:00"

    total_seconds = int(millis) // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_music_progress(position: int, duration: int) -> str:
    """Format playback progress as "position / duration", e.g. "1:05 / 2:05"."""
    return f"{format_time(position)} / {format_time(duration)}"
