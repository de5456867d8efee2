"""Tests for typr.core.session – the keystroke state machine."""

from __future__ import annotations

import itertools

import pytest

from typr.core.session import Outcome, TypingSession


def _clock(*times: float):
    """Clock returning the given timestamps, then repeating the last one."""
    values = itertools.chain(times, itertools.repeat(times[-1]))
    return lambda: next(values)


def _type(session: TypingSession, text: str) -> list[Outcome]:
    return [session.feed(char) for char in text]


# ---------------------------------------------------------------------------
# TypingSession – initial state
# ---------------------------------------------------------------------------

class TestInitialState:
    def test_starts_at_first_word(self):
        s = TypingSession(["cat", "dog"])
        assert s.current_word_index == 0
        assert s.current_word == "cat"
        assert s.typed_chars == ""
        assert s.cursor == 0

    def test_counters_zero(self):
        s = TypingSession(["cat"])
        assert s.correct_chars == 0
        assert s.total_chars == 0

    def test_no_timestamps(self):
        s = TypingSession(["cat"])
        assert s.start_time is None
        assert s.end_time is None

    def test_words_are_immutable_copy(self):
        words = ["cat", "dog"]
        s = TypingSession(words)
        words.append("fox")
        assert s.words == ("cat", "dog")

    def test_empty_word_list_rejected(self):
        with pytest.raises(ValueError):
            TypingSession([])

    def test_not_complete(self):
        assert not TypingSession(["cat"]).is_complete()


# ---------------------------------------------------------------------------
# TypingSession – accept_character
# ---------------------------------------------------------------------------

class TestAcceptCharacter:
    def test_correct_character(self):
        s = TypingSession(["cat", "dog"])
        s.accept_character("c")
        assert s.typed_chars == "c"
        assert s.cursor == 1
        assert s.correct_chars == 1
        assert s.total_chars == 1

    def test_incorrect_character(self):
        s = TypingSession(["cat", "dog"])
        s.accept_character("x")
        assert s.correct_chars == 0
        assert s.total_chars == 1

    def test_comparison_is_positional(self):
        s = TypingSession(["cat", "dog"])
        s.accept_character("a")  # 'a' is in the word, but not at position 0
        assert s.correct_chars == 0

    def test_extra_characters_never_correct(self):
        s = TypingSession(["cat", "dog"])
        for char in "catt":
            s.accept_character(char)
        assert s.typed_chars == "catt"
        assert s.correct_chars == 3
        assert s.total_chars == 4

    def test_starts_timer(self):
        s = TypingSession(["cat"], clock=_clock(5.0))
        s.accept_character("c")
        assert s.start_time == 5.0

    def test_timer_not_reset(self):
        s = TypingSession(["cat", "dog"], clock=_clock(5.0, 9.0))
        s.accept_character("c")
        s.accept_character("a")
        assert s.start_time == 5.0

    def test_exact_word_all_correct(self):
        s = TypingSession(["quick", "fox"])
        for char in "quick":
            s.accept_character(char)
        assert s.correct_chars == s.total_chars == 5

    def test_noop_after_completion(self):
        s = TypingSession(["cat"])
        _type(s, "cat")
        assert s.is_complete()
        s.accept_character("x")
        assert s.total_chars == 3
        assert s.typed_chars == ""


# ---------------------------------------------------------------------------
# TypingSession – backspace
# ---------------------------------------------------------------------------

class TestBackspace:
    def test_removes_last_character(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cx")
        s.backspace()
        assert s.typed_chars == "c"
        assert s.cursor == 1
        assert s.total_chars == 1

    def test_does_not_take_back_correct_count(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "ca")
        s.backspace()
        assert s.total_chars == 1
        assert s.correct_chars == 2

    def test_retyping_counts_again(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "c\x7fc")
        assert s.total_chars == 1
        assert s.correct_chars == 2

    def test_noop_at_very_start(self):
        s = TypingSession(["cat", "dog"])
        s.backspace()
        assert s.current_word_index == 0
        assert s.total_chars == 0

    def test_total_never_negative(self):
        s = TypingSession(["cat", "dog"])
        for _ in range(5):
            s.backspace()
        assert s.total_chars == 0

    def test_total_matches_accepts_minus_backspaces(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cxz\x7f\x7fat\x7f")
        # 5 characters accepted, 3 effective backspaces
        assert s.total_chars == 2
        assert s.typed_chars == "ca"

    def test_cannot_reenter_correct_word(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cat ")
        s.backspace()
        assert s.current_word_index == 1
        assert s.typed_chars == ""
        assert s.completed_words == {0: "cat"}

    def test_moves_back_into_incorrect_word(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cot ")
        s.backspace()
        assert s.current_word_index == 0
        assert s.typed_chars == "cot"
        assert s.cursor == 3
        assert s.completed_words == {}

    def test_move_back_keeps_counters(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cot ")
        s.backspace()
        assert s.total_chars == 3
        assert s.correct_chars == 2

    def test_edit_after_moving_back(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cot ")
        _type(s, "\x7f\x7f\x7fat")
        assert s.typed_chars == "cat"
        assert s.current_word_index == 0

    def test_blocked_if_any_earlier_word_correct(self):
        s = TypingSession(["cat", "dog", "fox"])
        _type(s, "cat dig ")
        s.backspace()
        assert s.current_word_index == 2
        assert not s.can_move_back()

    def test_back_over_several_incorrect_words(self):
        s = TypingSession(["cat", "dog", "fox"])
        _type(s, "cot dig ")
        s.backspace()
        assert s.current_word_index == 1
        assert s.typed_chars == "dig"
        _type(s, "\x7f\x7f\x7f\x7f")
        assert s.current_word_index == 0
        assert s.typed_chars == "cot"

    def test_empty_committed_word_counts_as_incorrect(self):
        s = TypingSession(["cat", "dog"])
        s.press_space()
        assert s.can_move_back()
        s.backspace()
        assert s.current_word_index == 0
        assert s.typed_chars == ""


# ---------------------------------------------------------------------------
# TypingSession – space and tab
# ---------------------------------------------------------------------------

class TestSpaceAndTab:
    def test_space_commits_word(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cot")
        assert s.press_space() is False
        assert s.completed_words == {0: "cot"}
        assert s.current_word_index == 1
        assert s.typed_chars == ""
        assert s.cursor == 0

    def test_error_word_counters(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cot ")
        assert s.correct_chars == 2
        assert s.total_chars == 3

    def test_space_does_not_count_as_character(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cat ")
        assert s.total_chars == 3

    def test_tab_sets_pending(self):
        s = TypingSession(["cat", "dog"])
        s.press_tab()
        assert s.tab_pending
        assert s.current_word_index == 0

    def test_tab_then_space_requests_restart(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "ca")
        assert s.feed("\t") is Outcome.CONTINUE
        assert s.feed(" ") is Outcome.RESTART
        assert s.current_word_index == 0
        assert s.typed_chars == "ca"

    def test_character_clears_pending(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "\tc")
        assert not s.tab_pending
        assert s.feed(" ") is Outcome.CONTINUE
        assert s.current_word_index == 1

    def test_backspace_clears_pending(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "\t\x7f")
        assert not s.tab_pending

    def test_enter_clears_pending(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "\t\r")
        assert not s.tab_pending
        assert s.typed_chars == ""


# ---------------------------------------------------------------------------
# TypingSession – feed
# ---------------------------------------------------------------------------

class TestFeed:
    def test_interrupt_cancels(self):
        s = TypingSession(["cat"])
        assert s.feed("\x03") is Outcome.CANCEL
        assert s.start_time is None

    def test_any_key_starts_timer(self):
        s = TypingSession(["cat"], clock=_clock(3.0))
        s.feed("\t")
        assert s.start_time == 3.0

    def test_control_characters_ignored(self):
        s = TypingSession(["cat"])
        _type(s, "\x1b")
        assert s.typed_chars == ""
        assert s.total_chars == 0

    def test_arrow_key_tail_is_typed(self):
        # Only the ESC byte of an escape sequence is a control character.
        s = TypingSession(["cat"])
        _type(s, "\x1b[A")
        assert s.typed_chars == "[A"

    def test_both_backspace_codes(self):
        s = TypingSession(["cat"])
        _type(s, "ca\x08")
        assert s.typed_chars == "c"
        _type(s, "\x7f")
        assert s.typed_chars == ""


# ---------------------------------------------------------------------------
# TypingSession – completion
# ---------------------------------------------------------------------------

class TestCompletion:
    def test_complete_after_last_space(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cat dig ")
        assert s.is_complete()
        assert s.current_word_index == 2

    def test_auto_complete_on_last_word(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cat ")
        for char in "dog":
            s.accept_character(char)
        assert s.is_complete()
        assert s.current_word_index == 2
        assert s.completed_words[1] == "dog"

    def test_wrong_last_word_not_complete(self):
        s = TypingSession(["cat", "dog"])
        _type(s, "cat dig")
        assert not s.is_complete()

    def test_records_end_time_once(self):
        s = TypingSession(["cat"], clock=_clock(1.0, 4.0, 9.0))
        _type(s, "cat")
        assert s.end_time == 4.0
        assert s.is_complete()
        assert s.end_time == 4.0

    def test_inputs_ignored_after_completion(self):
        s = TypingSession(["cat"])
        _type(s, "cat")
        _type(s, "x\x7f ")
        assert s.total_chars == 3
        assert s.current_word_index == 1
        assert s.completed_words == {0: "cat"}

    def test_restart_still_possible_after_completion(self):
        s = TypingSession(["cat"])
        _type(s, "cat\t")
        assert s.feed(" ") is Outcome.RESTART


# ---------------------------------------------------------------------------
# TypingSession – statistics
# ---------------------------------------------------------------------------

class TestSessionStatistics:
    def test_end_to_end(self):
        s = TypingSession(["cat", "dog"], clock=_clock(100.0, 101.0))
        _type(s, "cat dog")
        assert s.is_complete()
        stats = s.statistics()
        assert stats.words_typed == 2
        assert stats.correct_chars == 6
        assert stats.total_chars == 6
        assert stats.accuracy == 100.0
        assert stats.duration == 1.0
        assert stats.wpm == 120.0

    def test_with_errors(self):
        s = TypingSession(["cat", "dog"], clock=_clock(0.0, 30.0))
        _type(s, "cot dog")
        stats = s.statistics()
        assert stats.correct_chars == 5
        assert stats.total_chars == 6
        assert stats.accuracy == 83.33
        assert stats.wpm == 4.0

    def test_nothing_typed(self):
        s = TypingSession(["cat"])
        stats = s.statistics()
        assert stats.accuracy == 0.0
        assert stats.wpm == 0.0
