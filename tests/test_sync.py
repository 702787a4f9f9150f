"""Test playback time synchronization and derived queries"""

import pytest

from core.lyric import (
    TrackType,
    get_current_line_index,
    get_current_lyrics,
    get_highlight_progress,
    get_highlighted_word_indices,
    get_karaoke_progress,
    get_line_word_timings,
    get_next_line_info,
    get_previous_line_info,
    parse,
    seek_to_line,
    seek_to_time,
    sync_by_time,
    toggle_track,
)
from core.lyric.assembler import empty_lyric_state


@pytest.fixture
def lrc_state():
    return parse({'lrc': {'lyric': "[00:24.00]a\n[00:29.00]b", 'version': 1}}).state


@pytest.fixture
def yrc_state(simple_yrc):
    return parse({'yrc': {'lyric': simple_yrc, 'version': 1}}).state


@pytest.fixture
def multi_track_state(sample_lrc, sample_translation, sample_romaji):
    return parse({
        'lrc': {'lyric': sample_lrc, 'version': 1},
        'tlyric': {'lyric': sample_translation, 'version': 1},
        'romalrc': {'lyric': sample_romaji, 'version': 1},
    }).state


class TestSyncByTime:
    """焦點行計算"""

    def test_line_timed_scenario(self, lrc_state):
        assert sync_by_time(lrc_state, 26000).current_line_index == 0
        assert sync_by_time(lrc_state, 29500).current_line_index == 1
        assert sync_by_time(lrc_state, 10000).current_line_index == -1

    def test_line_boundaries(self, lrc_state):
        assert sync_by_time(lrc_state, 24000).current_line_index == 0
        assert sync_by_time(lrc_state, 28999).current_line_index == 0
        assert sync_by_time(lrc_state, 29000).current_line_index == 1
        # 最後一行 duration 未知時無限延伸
        assert sync_by_time(lrc_state, 10_000_000).current_line_index == 1

    def test_line_timed_word_index(self, lrc_state):
        state = sync_by_time(lrc_state, 26000)
        assert state.current_word_index == 0

    def test_word_index(self, yrc_state):
        assert sync_by_time(yrc_state, 1100).current_word_index == 0
        assert sync_by_time(yrc_state, 1200).current_word_index == 1
        assert sync_by_time(yrc_state, 3600).current_word_index == 1
        assert sync_by_time(yrc_state, 3600).current_line_index == 1

    def test_extended_duration_covers_last_word(self, yrc_state):
        # 標頭時長 500，但 1550 仍在最後一個字內
        state = sync_by_time(yrc_state, 1550)
        assert state.current_line_index == 0
        assert state.current_word_index == 1

    def test_trailing_gap_hold(self, yrc_state):
        focused = sync_by_time(yrc_state, 1300)
        held = sync_by_time(focused, 2000)

        assert held.current_line_index == 0
        assert held.current_word_index == 1

    def test_gap_without_previous_focus(self, yrc_state):
        state = sync_by_time(yrc_state, 2000)
        assert state.current_line_index == -1
        assert state.current_word_index == -1

    def test_hold_after_last_line(self, yrc_state):
        focused = sync_by_time(yrc_state, 3600)
        held = sync_by_time(focused, 4500)
        assert held.current_line_index == 1
        assert held.current_word_index == 1
        assert sync_by_time(yrc_state, 4500).current_line_index == -1

    def test_seek_back_before_focused_line(self, yrc_state):
        focused = sync_by_time(yrc_state, 3600)
        assert sync_by_time(focused, 2000).current_line_index == -1
        assert sync_by_time(focused, 500).current_line_index == -1

    def test_before_first_line(self, yrc_state):
        state = sync_by_time(yrc_state, 999)
        assert (state.current_line_index, state.current_word_index) == (-1, -1)

    def test_empty_state(self):
        state = sync_by_time(empty_lyric_state(), 1000)
        assert state.current_time == 1000
        assert (state.current_line_index, state.current_word_index) == (-1, -1)

    def test_idempotent(self, yrc_state):
        for t in (0, 1100, 1700, 3600, 4500):
            once = sync_by_time(yrc_state, t)
            assert sync_by_time(once, t) == once
        held = sync_by_time(sync_by_time(yrc_state, 1300), 2000)
        assert sync_by_time(held, 2000) == held

    def test_input_not_modified(self, yrc_state):
        result = sync_by_time(yrc_state, 1300)
        assert yrc_state.current_time == 0
        assert yrc_state.current_line_index == -1
        assert result.tracks is yrc_state.tracks
        assert result.is_playing == yrc_state.is_playing

    def test_get_current_line_index(self, lrc_state):
        assert get_current_line_index(lrc_state, 30000) == 1

    def test_seek_to_time(self, lrc_state):
        assert seek_to_time(lrc_state, 26000) == sync_by_time(lrc_state, 26000)


class TestQueries:
    """衍生查詢"""

    def test_current_lyrics_original_only(self, multi_track_state):
        state = sync_by_time(multi_track_state, 24500)
        assert get_current_lyrics(state) == {'original': "なぜか悲しい"}

    def test_current_lyrics_enabled_tracks(self, multi_track_state):
        state = toggle_track(multi_track_state, TrackType.TRANSLATION, True)
        state = toggle_track(state, TrackType.ROMAJI, True)
        state = sync_by_time(state, 30000)
        assert get_current_lyrics(state) == {
            'original': "ことがあっても",
            'translation': "即使你在感到",
            'romaji': "koto ga atte mo",
        }

    def test_current_lyrics_track_shorter_than_original(self, multi_track_state):
        state = toggle_track(multi_track_state, TrackType.ROMAJI, True)
        state = sync_by_time(state, 35000)
        assert 'romaji' not in get_current_lyrics(state)

    def test_current_lyrics_no_line(self, multi_track_state):
        assert get_current_lyrics(multi_track_state) == {}

    def test_highlight_progress_word_timed(self, yrc_state):
        state = sync_by_time(yrc_state, 1300)
        assert get_highlight_progress(state) == pytest.approx(0.5)
        assert get_highlight_progress(state, 5000) == 1.0

    def test_highlight_progress_line_timed(self, lrc_state):
        state = sync_by_time(lrc_state, 26500)
        assert get_highlight_progress(state) == pytest.approx(0.5)
        last = sync_by_time(lrc_state, 30000)
        assert get_highlight_progress(last) == 1.0

    def test_highlight_progress_no_line(self, lrc_state):
        assert get_highlight_progress(lrc_state) == 0.0

    def test_karaoke_progress(self, yrc_state):
        progress = get_karaoke_progress(sync_by_time(yrc_state, 1300))
        assert progress.highlighted == "a"
        assert progress.remaining == "b"
        assert progress.highlighted_count == 1
        assert progress.total_count == 2

    def test_karaoke_progress_no_line(self, yrc_state):
        progress = get_karaoke_progress(yrc_state)
        assert (progress.highlighted, progress.remaining, progress.total_count) == ('', '', 0)

    def test_highlighted_word_indices(self, yrc_state):
        assert get_highlighted_word_indices(sync_by_time(yrc_state, 1300)) == [0]
        assert get_highlighted_word_indices(sync_by_time(yrc_state, 1100)) == []
        held = sync_by_time(sync_by_time(yrc_state, 1300), 2000)
        assert get_highlighted_word_indices(held) == [0, 1]
        assert get_highlighted_word_indices(yrc_state) == []

    def test_line_word_timings(self, yrc_state):
        assert [item.text for item in get_line_word_timings(yrc_state, 1)] == ["c", "d"]
        assert get_line_word_timings(yrc_state, 5) == []

    def test_neighbor_lines(self, yrc_state):
        state = sync_by_time(yrc_state, 1300)
        next_line = get_next_line_info(state)
        assert next_line.start_time == 3000
        assert next_line.text == "cd"
        assert get_previous_line_info(state) is None

        state = sync_by_time(yrc_state, 3600)
        previous_line = get_previous_line_info(state)
        assert previous_line.end_time == 1600
        assert previous_line.text == "ab"
        assert get_next_line_info(state) is None

    def test_next_line_before_start(self, yrc_state):
        assert get_next_line_info(yrc_state).index == 0


class TestTransitions:
    """跳轉與軌道切換"""

    def test_seek_to_line(self, lrc_state):
        state = seek_to_line(lrc_state, 1)
        assert state.current_time == 29000
        assert state.current_line_index == 1
        assert state.current_word_index == -1
        assert lrc_state.current_line_index == -1

    def test_seek_to_line_out_of_range(self, lrc_state):
        assert seek_to_line(lrc_state, 2) is lrc_state
        assert seek_to_line(lrc_state, -1) is lrc_state

    def test_toggle_track(self, multi_track_state):
        toggled = toggle_track(multi_track_state, TrackType.TRANSLATION, True)

        assert toggled.get_track(TrackType.TRANSLATION).enabled is True
        assert multi_track_state.get_track(TrackType.TRANSLATION).enabled is False
        assert toggled.get_track(TrackType.ROMAJI).enabled is False

    def test_toggle_missing_track(self, lrc_state):
        assert toggle_track(lrc_state, TrackType.ROMAJI, True) is lrc_state
