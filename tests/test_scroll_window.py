"""
Tests for the time-driven marquee window
"""

import pytest

from pilltext.formatting.graphemes import split_graphemes
from pilltext.formatting.scroll_window import (
    DEFAULT_SCROLL_SETTINGS,
    ScrollSettings,
    cycle_duration_ms,
    provide_scrollable_text,
    scroll_offset,
)

# 10 clusters: scroll range 3, cycle 5 + 3 + 5 = 13 steps = 2600 ms
TITLE = "abcdefghij"
FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
FLAG_NL = "\U0001F1F3\U0001F1F1"


def test_default_settings():
    assert DEFAULT_SCROLL_SETTINGS.step_duration_ms == 200
    assert DEFAULT_SCROLL_SETTINGS.start_pause_steps == 5
    assert DEFAULT_SCROLL_SETTINGS.end_pause_steps == 5
    assert DEFAULT_SCROLL_SETTINGS.visible_clusters == 7


@pytest.mark.parametrize("elapsed_ms, expected", [
    (0, "abcdefg"),
    (199, "abcdefg"),
    (999, "abcdefg"),      # step 4, still paused at start
    (1000, "abcdefg"),     # step 5, first scroll step is offset 0
    (1200, "bcdefgh"),
    (1400, "cdefghi"),
    (1600, "defghij"),     # step 8, end pause begins
    (2599, "defghij"),     # step 12, last step of the cycle
    (2600, "abcdefg"),     # next cycle
    (2600 * 5 + 1200, "bcdefgh"),
])
def test_window_over_one_cycle(elapsed_ms, expected):
    assert provide_scrollable_text(TITLE, elapsed_ms) == expected


def test_short_title_is_returned_unchanged():
    assert provide_scrollable_text("abcdefg", 1200) == "abcdefg"
    assert provide_scrollable_text("abc", 5000) == "abc"
    assert provide_scrollable_text("", 5000) == ""


def test_offset_is_zero_at_start():
    for count in range(8, 40):
        assert scroll_offset(count, 0) == 0


def test_offset_is_zero_when_text_fits():
    assert scroll_offset(7, 1400) == 0
    assert scroll_offset(0, 1400) == 0


def test_cycle_duration():
    assert cycle_duration_ms(10) == 2600
    assert cycle_duration_ms(7) == 0
    assert cycle_duration_ms(8) == (5 + 1 + 5) * 200


@pytest.mark.parametrize("count", [8, 9, 15, 42])
def test_offsets_are_periodic(count):
    period = cycle_duration_ms(count)
    for elapsed_ms in range(0, period, 50):
        assert scroll_offset(count, elapsed_ms) == scroll_offset(count, elapsed_ms + period)
        assert scroll_offset(count, elapsed_ms) == scroll_offset(count, elapsed_ms + 3 * period)


@pytest.mark.parametrize("count", [8, 9, 15, 42])
def test_offsets_never_decrease_within_a_cycle(count):
    period = cycle_duration_ms(count)
    offsets = [scroll_offset(count, elapsed_ms) for elapsed_ms in range(0, period, 100)]
    assert offsets == sorted(offsets)
    assert offsets[0] == 0
    assert offsets[-1] == count - 7


def test_every_offset_is_shown():
    count = 12
    offsets = {scroll_offset(count, step * 200) for step in range(cycle_duration_ms(count) // 200)}
    assert offsets == set(range(count - 7 + 1))


def test_window_is_contiguous_and_full_width_with_emoji():
    title = f"{FLAG_NL} Now Playing {FAMILY} on the radio {FLAG_NL}"
    clusters = split_graphemes(title)
    for elapsed_ms in range(0, cycle_duration_ms(len(clusters)), 200):
        window = split_graphemes(provide_scrollable_text(title, elapsed_ms))
        assert len(window) == 7
        offset = scroll_offset(len(clusters), elapsed_ms)
        assert window == clusters[offset:offset + 7]


def test_same_elapsed_time_gives_same_window():
    title = "A title long enough to scroll"
    assert provide_scrollable_text(title, 4321) == provide_scrollable_text(title, 4321)


def test_custom_settings():
    settings = ScrollSettings(step_duration_ms=100, start_pause_steps=0, end_pause_steps=1,
                              visible_clusters=3)
    assert provide_scrollable_text("abcde", 0, settings) == "abc"
    assert provide_scrollable_text("abcde", 100, settings) == "bcd"
    assert provide_scrollable_text("abcde", 200, settings) == "cde"
    assert provide_scrollable_text("abcde", 300, settings) == "abc"


@pytest.mark.parametrize("kwargs", [
    {'step_duration_ms': 0},
    {'start_pause_steps': -1},
    {'end_pause_steps': -1},
    {'visible_clusters': 0},
])
def test_invalid_settings_are_rejected(kwargs):
    with pytest.raises(ValueError):
        ScrollSettings(**kwargs)
