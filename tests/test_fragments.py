"""Tests for the fragment buffer."""

from fluent_text.fragments import FragmentBuffer, coerce
from fluent_text.text import Text


class TestCoerce:
    def test_string_is_kept(self):
        assert coerce("abc") == "abc"

    def test_numbers_are_stringified(self):
        assert coerce(42) == "42"
        assert coerce(1.5) == "1.5"

    def test_builder_is_flattened(self):
        assert coerce(Text("a", "b")) == "ab"


class TestFragmentBuffer:
    def test_empty(self):
        buffer = FragmentBuffer()
        assert buffer.join() == ""
        assert len(buffer) == 0
        assert not buffer

    def test_append_keeps_argument_order(self):
        buffer = FragmentBuffer("a")
        buffer.append("b", "c")
        buffer.append(1)
        assert buffer.fragments == ("a", "b", "c", "1")
        assert str(buffer) == "abc1"

    def test_append_stores_empty_strings(self):
        buffer = FragmentBuffer()
        buffer.append("")
        assert buffer.fragments == ("",)
        assert not buffer

    def test_prepend_keeps_argument_order(self):
        buffer = FragmentBuffer("c")
        buffer.prepend("a", "b")
        assert buffer.join() == "abc"

    def test_successive_prepends(self):
        buffer = FragmentBuffer("x")
        buffer.prepend("a")
        buffer.prepend("b")
        assert buffer.join() == "bax"

    def test_times(self):
        buffer = FragmentBuffer()
        buffer.times("ab", 3)
        assert buffer.join() == "ababab"

    def test_times_floor_is_one(self):
        for count in (0, -5):
            buffer = FragmentBuffer()
            buffer.times("x", count)
            assert buffer.join() == "x"

    def test_times_rounds_up(self):
        buffer = FragmentBuffer()
        buffer.times("ab", 1.2)
        assert buffer.join() == "abab"

    def test_join_with_separator(self):
        buffer = FragmentBuffer("a", "b", "c")
        assert buffer.join(", ") == "a, b, c"

    def test_join_is_idempotent(self):
        buffer = FragmentBuffer("a", 2, "c")
        assert buffer.join() == buffer.join()

    def test_len_counts_characters(self):
        assert len(FragmentBuffer("ab", "cde")) == 5

    def test_clear(self):
        buffer = FragmentBuffer("a", "b")
        buffer.clear()
        assert buffer.fragments == ()

    def test_copy_is_independent(self):
        buffer = FragmentBuffer("a")
        other = buffer.copy()
        other.append("b")
        assert buffer.join() == "a"
        assert other.join() == "ab"

    def test_bytes(self):
        assert FragmentBuffer("caf", "é").bytes() == b"caf\xc3\xa9"

    def test_repr(self):
        assert "2 fragments, 3 chars" in repr(FragmentBuffer("a", "bc"))
