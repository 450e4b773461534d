"""
Tests for the Message variants.

These tests verify:
    - Every payload shape (unit, named, single, tuple)
    - Methods on the enumeration
    - Exhaustive dispatch
"""

import pytest
from enumatch.message import ChangeColor, Message, Move, Quit, Write, describe
from enumatch.variants import PayloadError, tags


class TestConstruction:
    """Test construction of each tag."""

    def test_quit_has_no_payload(self):
        assert Quit() == Quit()

    def test_move_named_fields(self):
        """Move is built with named fields."""
        msg = Move(x=3, y=-4)
        assert msg.x == 3
        assert msg.y == -4

    def test_write_single_value(self):
        assert Write("hi").text == "hi"

    def test_change_color_three_values(self):
        msg = ChangeColor(1, 2, 3)
        assert (msg.r, msg.g, msg.b) == (1, 2, 3)

    def test_i32_bounds(self):
        """Coordinates and colour components are i32."""
        with pytest.raises(PayloadError):
            Move(x=2 ** 31, y=0)
        with pytest.raises(PayloadError):
            ChangeColor(0, 0, -(2 ** 31) - 1)

    def test_payload_for_unit_tag(self):
        """Quit takes no payload."""
        with pytest.raises(TypeError):
            Quit("bye")


class TestDispatch:
    """Test describe and the call method."""

    def test_describe_each_tag(self):
        assert describe(Quit()) == "quit"
        assert describe(Move(x=1, y=2)) == "move to (1, 2)"
        assert describe(Write("hello")) == "write 'hello'"
        assert describe(ChangeColor(0, 160, 255)) == "change color to rgb(0, 160, 255)"

    def test_call_method(self):
        """Every tag answers call() with the same dispatch."""
        for msg in (Quit(), Move(x=0, y=0), Write("x"), ChangeColor(1, 1, 1)):
            assert msg.call() == describe(msg)

    def test_all_tags_listed(self):
        assert tags(Message) == (Quit, Move, Write, ChangeColor)
