"""Tests for targeted lookup."""

import pytest

from kv_core import (
    KeyNotFound,
    KVParseError,
    MalformedKey,
    UnterminatedQuotedValue,
    VBorrowed,
    VOwned,
    build,
    lookup_one,
    lookup_value,
)

DATA = (
    'one=1 two=2 three=three quoted="this is a quoted value" '
    'escaped="this is a value with \\"escaped\\" quotes"'
)


# ---------------------------------------------------------------------------
# Hits
# ---------------------------------------------------------------------------

def test_lookup_middle_key():
    assert lookup_one("one=1 two=2 three=three", "two") == "2"

@pytest.mark.parametrize("key", ["one", "two", "three", "quoted", "escaped"])
def test_lookup_matches_table(key):
    assert lookup_one(DATA, key) == build(DATA).get(key)

def test_lookup_value_ownership():
    assert isinstance(lookup_value(DATA, "quoted"), VBorrowed)
    assert isinstance(lookup_value(DATA, "escaped"), VOwned)

def test_lookup_with_padding():
    assert lookup_one("   key   =   value   ", "key") == "value"

def test_lookup_empty_value():
    assert lookup_one("a=1 b=", "b") == ""


# ---------------------------------------------------------------------------
# Skipping non-matching values
# ---------------------------------------------------------------------------

def test_skip_escaped_quote_keeps_position():
    data = 'a="x\\" b=fake" b=real'
    assert lookup_one(data, "b") == "real"

def test_skip_quoted_with_spaces():
    data = 'a="b=1 c=2" b=3'
    assert lookup_one(data, "b") == "3"

def test_skip_escaped_backslash_before_quote():
    data = 'a="x\\\\" b=2'
    assert lookup_one(data, "b") == "2"


# ---------------------------------------------------------------------------
# Early exit
# ---------------------------------------------------------------------------

def test_first_match_returned():
    assert lookup_one("k=first k=second", "k") == "first"

def test_malformed_tail_not_inspected():
    assert lookup_one('a=1 b=2 ;;; c="open', "b") == "2"


# ---------------------------------------------------------------------------
# Misses / errors
# ---------------------------------------------------------------------------

def test_absent_key():
    with pytest.raises(KeyNotFound) as exc:
        lookup_one(DATA, "four")
    assert exc.value.key == "four"

def test_absent_key_empty_input():
    with pytest.raises(KeyNotFound):
        lookup_one("", "x")
    with pytest.raises(KeyNotFound):
        lookup_one("   ", "x")

@pytest.mark.parametrize("data", [" foo ", "bar", ";foo=bar", 'quoted="foo'])
def test_bad_input_fails(data):
    with pytest.raises(KVParseError):
        lookup_one(data, "foo")

def test_unterminated_target():
    with pytest.raises(UnterminatedQuotedValue):
        lookup_one('quoted="foo', "quoted")

def test_malformed_before_match_fails():
    with pytest.raises(MalformedKey):
        lookup_one("a=1 ;x b=2", "b")

def test_unterminated_before_match_fails():
    with pytest.raises(UnterminatedQuotedValue):
        lookup_one('a="open b=2', "b")

def test_not_found_is_not_parse_error():
    with pytest.raises(KeyNotFound):
        try:
            lookup_one("a=1", "b")
        except KVParseError:
            pytest.fail("KeyNotFound must not be a parse error")
