import pytest

from carebook.errors import ParseError
from carebook.tokenizer import parse_index, tokenize


def test_preamble_and_values():
    m = tokenize("1 n/Alice Tan p/9123 ", "n/", "p/", "t/")
    assert m.preamble == "1"
    assert m.value("n/") == "Alice Tan"
    assert m.value("p/") == "9123"
    assert m.value("t/") is None
    assert "t/" not in m


def test_repeated_prefix_keeps_all_values():
    m = tokenize("t/a t/b t/c", "t/")
    assert m.all_values("t/") == ["a", "b", "c"]
    assert m.value("t/") == "c"


def test_empty_value_is_kept():
    m = tokenize("1 t/", "t/")
    assert m.all_values("t/") == [""]
    assert "t/" not in tokenize("1", "t/")


def test_prefix_needs_leading_whitespace():
    """A prefix glued to a previous word is part of the value."""
    m = tokenize("n/Ann/Bob a/Blk 5a/6", "n/", "a/")
    assert m.value("n/") == "Ann/Bob"
    assert m.value("a/") == "Blk 5a/6"


def test_no_prefixes_gives_only_preamble():
    m = tokenize("  some text ")
    assert m.preamble == "some text"


def test_duplicate_single_prefix_rejected():
    m = tokenize("n/a n/b t/x t/y", "n/", "t/")
    with pytest.raises(ParseError):
        m.verify_no_duplicate_prefixes("n/")


def test_repeated_tags_allowed_when_not_checked():
    m = tokenize("n/a t/x t/y", "n/", "t/")
    m.verify_no_duplicate_prefixes("n/")


@pytest.mark.parametrize("raw", ["0", "-1", "a", "1 2", "", "+1"])
def test_parse_index_rejects(raw):
    with pytest.raises(ParseError):
        parse_index(raw)


def test_parse_index():
    assert parse_index(" 3 ") == 3
