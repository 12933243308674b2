"""
Marquee scrolling for titles that do not fit in the pill.

The visible window is a pure function of elapsed time: the caller passes
the milliseconds elapsed since some fixed instant and gets back the slice
to show. No offset is stored between calls, so refresh ticks may arrive at
any rate (or be dropped) without the animation drifting.

One animation cycle is::

    start pause  |  scroll one cluster per step  |  end pause
    (offset 0)   |  (offset 0 .. scroll_range-1)  |  (offset scroll_range)
"""

import logging
from dataclasses import dataclass
from typing import List

from pilltext.config import display
from .graphemes import split_graphemes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScrollSettings:
    """Timing and width of the marquee animation."""
    step_duration_ms: int = display.SCROLL_STEP_DURATION_MS
    start_pause_steps: int = display.SCROLL_START_PAUSE_STEPS
    end_pause_steps: int = display.SCROLL_END_PAUSE_STEPS
    visible_clusters: int = display.VISIBLE_CLUSTERS

    def __post_init__(self):
        if self.step_duration_ms < 1:
            raise ValueError(f"step_duration_ms must be at least 1, got {self.step_duration_ms}")
        if self.start_pause_steps < 0 or self.end_pause_steps < 0:
            raise ValueError("pause steps must not be negative")
        if self.visible_clusters < 1:
            raise ValueError(f"visible_clusters must be at least 1, got {self.visible_clusters}")

    def cycle_steps(self, cluster_count: int) -> int:
        """Steps in one full cycle for a text of ``cluster_count`` clusters (0 if it fits)."""
        scroll_range = cluster_count - self.visible_clusters
        if scroll_range <= 0:
            return 0
        return self.start_pause_steps + scroll_range + self.end_pause_steps


DEFAULT_SCROLL_SETTINGS = ScrollSettings()


def scroll_offset(cluster_count: int, elapsed_ms: int,
                  settings: ScrollSettings = DEFAULT_SCROLL_SETTINGS) -> int:
    """
    Cluster index of the window's left edge at ``elapsed_ms``.
    
    Args:
        cluster_count: Number of grapheme clusters in the text
        elapsed_ms: Milliseconds since the animation reference instant
        settings: Animation timing and window width
        
    Returns:
        Offset in [0, cluster_count - visible_clusters]; 0 when the text fits
    """
    scroll_range = cluster_count - settings.visible_clusters
    if scroll_range <= 0:
        return 0

    cycle_steps = settings.cycle_steps(cluster_count)
    total_steps = int(elapsed_ms) // settings.step_duration_ms
    step_in_cycle = total_steps % cycle_steps  # Python modulo is never negative here

    if step_in_cycle < settings.start_pause_steps:
        return 0
    if step_in_cycle < settings.start_pause_steps + scroll_range:
        return step_in_cycle - settings.start_pause_steps
    return scroll_range


def cycle_duration_ms(cluster_count: int,
                      settings: ScrollSettings = DEFAULT_SCROLL_SETTINGS) -> int:
    """Period of the animation in milliseconds (0 when the text fits)."""
    return settings.cycle_steps(cluster_count) * settings.step_duration_ms


def visible_window(clusters: List[str], elapsed_ms: int,
                   settings: ScrollSettings = DEFAULT_SCROLL_SETTINGS) -> List[str]:
    offset = scroll_offset(len(clusters), elapsed_ms, settings)
    return clusters[offset:offset + settings.visible_clusters]


def provide_scrollable_text(title: str, elapsed_ms: int,
                            settings: ScrollSettings = DEFAULT_SCROLL_SETTINGS) -> str:
    """
    Return the part of ``title`` visible in the marquee at ``elapsed_ms``.
    
    Titles that fit in the window are returned unchanged.
    """
    clusters = split_graphemes(title)
    if len(clusters) <= settings.visible_clusters:
        return title

    return ''.join(visible_window(clusters, elapsed_ms, settings))
