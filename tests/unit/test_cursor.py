"""Tests for the forward-only cursor."""

import pytest

from sclogparser.core.errors import DelimiterNotFound
from sclogparser.parser.cursor import Cursor


class TestTakeBetween:
    """Tests for take_between."""

    def test_returns_text_between_markers(self):
        cursor = Cursor("Vehicle 'Gladius' [123]")
        assert cursor.take_between("Vehicle '", "'") == "Gladius"

    def test_advances_past_right_marker(self):
        cursor = Cursor("a[one]b[two]")
        cursor.take_between("[", "]")
        assert cursor.position == 6
        assert cursor.remaining == "b[two]"

    def test_sequential_calls_thread_the_cursor(self):
        cursor = Cursor("[one] [two] [three]")
        assert cursor.take_between("[", "]") == "one"
        assert cursor.take_between("[", "]") == "two"
        assert cursor.take_between("[", "]") == "three"

    def test_position_never_decreases(self):
        cursor = Cursor("killed by 'A' [1] using 'B' [Class x] with 'C' [2][3]")
        positions = [cursor.position]
        for left, right in [("'", "'"), ("[", "]"), ("'", "'"), ("[", "]"), ("'", "'")]:
            cursor.take_between(left, right)
            positions.append(cursor.position)
        assert positions == sorted(positions)

    def test_never_searches_backward(self):
        cursor = Cursor("[first] tail")
        cursor.take_between("[", "]")
        with pytest.raises(DelimiterNotFound):
            cursor.take_between("[", "]")

    def test_empty_value(self):
        cursor = Cursor("in zone '' next")
        assert cursor.take_between("in zone '", "'") == ""
        assert cursor.remaining == " next"

    def test_missing_left_marker(self):
        cursor = Cursor("no markers here")
        with pytest.raises(DelimiterNotFound) as exc_info:
            cursor.take_between("driven by '", "'")
        assert exc_info.value.token == "driven by '"

    def test_missing_right_marker(self):
        cursor = Cursor("[unterminated")
        with pytest.raises(DelimiterNotFound) as exc_info:
            cursor.take_between("[", "]")
        assert exc_info.value.token == "]"

    def test_matching_is_case_sensitive(self):
        cursor = Cursor("KILLED BY 'X'")
        with pytest.raises(DelimiterNotFound):
            cursor.take_between("killed by '", "'")

    def test_failed_lookup_keeps_position(self):
        cursor = Cursor("[a] rest")
        cursor.take_between("[", "]")
        with pytest.raises(DelimiterNotFound):
            cursor.take_between("<", ">")
        assert cursor.position == 3


class TestPeekBetween:
    """Tests for peek_between."""

    def test_stops_on_right_marker(self):
        cursor = Cursor("direction x: 1, y: 2, z: 3 [Team][Actor]")
        text = cursor.peek_between("direction ", "[")
        assert text == "x: 1, y: 2, z: 3 "
        assert cursor.remaining.startswith("[Team]")

    def test_next_take_reuses_right_marker(self):
        cursor = Cursor("direction x: 0 [Team_ActorTech][Actor]")
        cursor.peek_between("direction ", "[")
        assert cursor.take_between("[", "]") == "Team_ActorTech"
        assert cursor.take_between("[", "]") == "Actor"

    def test_peek_then_take_same_separator(self):
        cursor = Cursor("advanced from destroy level 1 to 2 caused")
        assert cursor.peek_between("advanced from destroy level ", " to ") == "1"
        assert cursor.take_between(" to ", " ") == "2"


class TestSkipPast:
    """Tests for skip_past."""

    def test_moves_after_token(self):
        cursor = Cursor(" [Class behr_lmg] with damage type 'Bullet'")
        cursor.skip_past("]")
        assert cursor.remaining == " with damage type 'Bullet'"

    def test_missing_token(self):
        cursor = Cursor(" [Class behr_lmg")
        with pytest.raises(DelimiterNotFound):
            cursor.skip_past("]")
