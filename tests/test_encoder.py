from pathlib import Path

import pytest

from conftest import SECOND, seg
from mediaedl.edl.encoder import action_for, edl_path_for, to_edl, to_edl_string
from mediaedl.models.config import EdlConfig
from mediaedl.models.segment import EdlAction, MediaSegmentType, Segment


def test_empty_segments_give_empty_text(config):
    assert to_edl([], config) == ""
    assert to_edl([], EdlConfig()) == ""


def test_none_action_segments_are_dropped():
    config = EdlConfig(intro_edl_action=EdlAction.MUTE, outro_edl_action=EdlAction.NONE)
    segments = [
        Segment(item_id="a", type=MediaSegmentType.INTRO, start_ticks=0, end_ticks=10_000_000),
        Segment(item_id="a", type=MediaSegmentType.OUTRO, start_ticks=200_000_000, end_ticks=210_000_000),
    ]
    assert to_edl(segments, config) == "0 1 1 "


def test_lines_are_newline_separated_without_final_newline(config):
    segments = [
        seg("a", "Intro", 0, 10),
        seg("a", "Outro", 20.5, 30),
    ]
    assert to_edl(segments, config) == "0 10 0 \n20.5 30 3 "


def test_no_kept_segments_give_empty_text():
    segments = [seg("a", "Recap", 1, 2), seg("a", "Preview", 3, 4)]
    assert to_edl(segments, EdlConfig()) == ""


def test_times_round_to_three_decimals():
    line = to_edl_string(12_345_678, 98_765_432, EdlAction.CUT)
    assert line == "1.235 9.877 0 \n"


@pytest.mark.parametrize(
    ("ticks", "expected"),
    [
        (5_000, "0"),
        (25_000, "0.002"),
        (123_455_000, "12.346"),
        (123_465_000, "12.346"),
    ],
)
def test_half_milliseconds_round_to_even(ticks, expected):
    assert to_edl_string(ticks, ticks, EdlAction.CUT) == f"{expected} {expected} 0 \n"


def test_line_format_has_trailing_space():
    assert to_edl_string(0, 15_000_000, EdlAction.COMMERCIAL_BREAK) == "0 1.5 3 \n"
    assert to_edl_string(36_000 * SECOND, 36_001 * SECOND, EdlAction.SCENE_MARKER) == "36000 36001 2 \n"


def test_decimal_point_is_locale_independent():
    import locale

    original = locale.setlocale(locale.LC_NUMERIC)
    for name in ("de_DE.UTF-8", "de_DE.utf8", "fr_FR.UTF-8", "fr_FR.utf8", "nl_NL.UTF-8"):
        try:
            locale.setlocale(locale.LC_NUMERIC, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("no comma-decimal locale installed")
    try:
        assert locale.localeconv()["decimal_point"] == ","
        assert to_edl_string(12_345_678, 20_000_000, EdlAction.MUTE) == "1.235 2 1 \n"
    finally:
        locale.setlocale(locale.LC_NUMERIC, original)


@pytest.mark.parametrize(
    ("segment_type", "field"),
    [
        (MediaSegmentType.UNKNOWN, "unknown_edl_action"),
        (MediaSegmentType.INTRO, "intro_edl_action"),
        (MediaSegmentType.OUTRO, "outro_edl_action"),
        (MediaSegmentType.RECAP, "recap_edl_action"),
        (MediaSegmentType.PREVIEW, "preview_edl_action"),
        (MediaSegmentType.COMMERCIAL, "commercial_edl_action"),
    ],
)
def test_action_for_reads_matching_setting(segment_type, field):
    config = EdlConfig(**{field: EdlAction.SCENE_MARKER})
    assert action_for(segment_type, config) == EdlAction.SCENE_MARKER
    others = [t for t in MediaSegmentType if t != segment_type]
    assert all(action_for(t, config) == EdlAction.NONE for t in others)


@pytest.mark.parametrize("value", ["Intro", "bogus", None, 7, ["Intro"]])
def test_action_for_unknown_types_is_none(value):
    config = EdlConfig(intro_edl_action=EdlAction.CUT, unknown_edl_action=EdlAction.CUT)
    assert action_for(value, config) == EdlAction.NONE


def test_encoding_keeps_given_order(config):
    segments = [seg("a", "Outro", 50, 60), seg("a", "Intro", 0, 10)]
    assert to_edl(segments, config) == "50 60 3 \n0 10 0 "


def test_edl_path_swaps_extension():
    assert edl_path_for("/media/show/s01e01.mkv") == Path("/media/show/s01e01.edl")
    assert edl_path_for(Path("/media/movie.2024.mp4")) == Path("/media/movie.2024.edl")
    assert edl_path_for("/media/noext") == Path("/media/noext.edl")


def test_edl_path_replaces_dot_file_name():
    assert edl_path_for("/media/.mkv") == Path("/media/.edl")
    assert edl_path_for("/media/trailing.") == Path("/media/trailing.edl")
