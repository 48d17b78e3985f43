"""Tests for tablekit.filters."""

import pytest

from tablekit import (
    InvalidArgument,
    OutOfRange,
    Table,
    except_,
    filter_,
    first,
    last,
    only,
    slice_,
)


class TestFilter:
    def test_keys_not_renumbered(self):
        result = filter_(Table.of(1, 2, 3, 4), lambda v, k: v % 2 == 0)
        assert result == Table({2: 2, 4: 4})

    def test_callback_receives_key(self):
        result = filter_(Table.of(a=1, b=2), lambda v, k: k == "b")
        assert result == Table.of(b=2)

    def test_input_unchanged(self):
        t = Table.of(1, 2, 3)
        filter_(t, lambda v, k: v > 1)
        assert t == Table.of(1, 2, 3)


class TestExcept:
    def test_removes_blacklisted(self):
        t = Table.of(species="Mammal", animal="Dog", name="Spot")
        assert except_(t, Table.of("name")) == Table.of(species="Mammal", animal="Dog")

    def test_input_unchanged_and_deep_copied(self):
        inner = Table.of(1)
        t = Table.of(keep=inner, drop=2)
        result = except_(t, ["drop"])
        assert t["drop"] == 2
        assert result["keep"] is not inner

    def test_missing_keys_ignored(self):
        assert except_(Table.of(1), ["nope"]) == Table.of(1)


class TestOnly:
    def test_whitelist(self):
        t = Table.of(species="Mammal", animal="Dog", name="Spot")
        result = only(t, Table.of("species", "animal"))
        assert result == Table.of(species="Mammal", animal="Dog")

    def test_drops_falsy_values(self):
        # Present-but-void values are not copied; empty tables are kept.
        empty = Table()
        t = Table.of(flag=False, count=0, ratio=0.0, label="", kept="yes", nested=empty)
        result = only(t, ["flag", "count", "ratio", "label", "kept", "nested"])
        assert result == Table.of(kept="yes", nested=empty)
        assert result["nested"] is empty

    def test_input_unchanged(self):
        t = Table.of(a=1, b=2)
        only(t, ["a"])
        assert t == Table.of(a=1, b=2)

    def test_absent_keys_skipped(self):
        assert only(Table.of(a=1), ["a", "b"]) == Table.of(a=1)


class TestFirstLast:
    def test_first(self):
        assert first(Table.of(1, 2, 3, 4), lambda v: v > 1) == 2

    def test_first_scans_by_position(self):
        t = Table.of("a", None, "c")
        t[2] = "b"
        assert first(t, lambda v: v != "a") == "b"
        assert last(t, lambda v: v != "c") == "b"

    def test_first_no_match(self):
        assert first(Table.of(1, 2), lambda v: v > 5) is None

    def test_last(self):
        assert last(Table.of(1, 2, 3, 4), lambda v: v < 4) == 3

    def test_last_no_match(self):
        assert last(Table.of(1, 2), lambda v: v > 5) is None

    def test_last_empty(self):
        assert last(Table(), lambda v: True) is None

    def test_last_rejects_dictionary(self):
        with pytest.raises(InvalidArgument):
            last(Table.of(1, name="x"), lambda v: True)


class TestSlice:
    COLORS = ("red", "green", "blue", "yellow", "purple", "orange")

    def test_end_is_inclusive_position(self):
        assert slice_(Table.of(*self.COLORS), 1, 3) == Table.of("red", "green", "blue")

    def test_offset_past_one(self):
        assert slice_(Table.of(*self.COLORS), 3, 4) == Table.of("blue", "yellow")

    def test_defaults(self):
        t = Table.of(*self.COLORS)
        assert slice_(t) == t
        assert slice_(t, 5) == Table.of("purple", "orange")

    def test_holes_are_compacted(self):
        assert slice_(Table.of("a", None, "c"), 1, 3) == Table.of("a", "c")

    def test_input_unchanged(self):
        t = Table.of("a", None, "c")
        slice_(t, 1, 3)
        assert t == Table({1: "a", 3: "c"})

    def test_end_before_offset(self):
        assert slice_(Table.of(1, 2, 3), 3, 1) == Table()

    def test_end_past_border(self):
        assert slice_(Table.of(1, 2), 1, 10) == Table.of(1, 2)

    def test_offset_below_one(self):
        with pytest.raises(OutOfRange):
            slice_(Table.of(1, 2), 0, 2)

    def test_non_integer_offset(self):
        with pytest.raises(InvalidArgument):
            slice_(Table.of(1, 2), "1")
