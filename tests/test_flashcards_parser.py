"""Tests for flashcards/parser.py -- delimited text to cards."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from flashcards.errors import EmptySetError, MalformedRecordError
from flashcards.models import CurrentSide, Flashcard, FlashcardSet
from flashcards.parser import parse_cards, parse_set
import pytest


def test_parse_simple_set():
    """Indented records with surrounding blank lines parse in order."""
    text = """
    foo,bar
    baz,thenextone
    """
    flashcard_set = parse_set(text, "test")
    assert flashcard_set == FlashcardSet(
        name="test",
        cards=[
            Flashcard(front="foo", back="bar", current_side=CurrentSide.FRONT),
            Flashcard(front="baz", back="thenextone", current_side=CurrentSide.FRONT),
        ],
        current_index=0,
    )


def test_record_count_and_order():
    """N records give N cards in source order."""
    text = "\n".join(f"q{i},a{i}" for i in range(7))
    cards = parse_cards(text)
    assert len(cards) == 7
    assert [c.front for c in cards] == [f"q{i}" for i in range(7)]
    assert [c.back for c in cards] == [f"a{i}" for i in range(7)]
    assert all(c.current_side == CurrentSide.FRONT for c in cards)


def test_parse_newline_literals():
    """A quoted field spanning two physical lines keeps its newline."""
    cards = parse_cards('"line1\nline2",baz')
    assert len(cards) == 1
    assert cards[0].front == "line1\nline2"
    assert cards[0].back == "baz"


def test_quoted_comma_and_escaped_quote():
    cards = parse_cards('"a, b","say ""hi"""')
    assert cards[0].front == "a, b"
    assert cards[0].back == 'say "hi"'


def test_fields_are_trimmed():
    cards = parse_cards("  foo  ,   bar   \n\tbaz\t,\tqux")
    assert (cards[0].front, cards[0].back) == ("foo", "bar")
    assert (cards[1].front, cards[1].back) == ("baz", "qux")


def test_quoted_field_after_space():
    """Whitespace before an opening quote does not stop it being a quote."""
    cards = parse_cards('front, "x, y"')
    assert cards[0].back == "x, y"


def test_capitalize():
    cards = parse_cards("foo,bar", capitalize=True)
    assert cards[0].front == "FOO"
    assert cards[0].back == "BAR"


def test_capitalize_unicode():
    cards = parse_cards("straße,café", capitalize=True)
    assert cards[0].front == "STRASSE"
    assert cards[0].back == "CAFÉ"


def test_reverse_initial_side():
    cards = parse_cards("foo,bar\nbaz,qux", reverse=True)
    assert all(c.current_side == CurrentSide.BACK for c in cards)
    assert cards[0].current_side_text() == "bar"


def test_single_field_is_malformed():
    """A record without a separator fails the whole parse."""
    with pytest.raises(MalformedRecordError) as exc:
        parse_cards("onlyonefield")
    assert exc.value.record == 1


def test_malformed_record_names_position():
    with pytest.raises(MalformedRecordError) as exc:
        parse_cards("a,b\nc,d\nbroken\ne,f")
    assert exc.value.record == 3
    assert exc.value.line == 3
    assert "record 3" in str(exc.value)


def test_unterminated_quote_is_malformed():
    with pytest.raises(MalformedRecordError):
        parse_cards('foo,bar\n"never closed,baz')


def test_bad_record_is_not_skipped():
    """Good records around a bad one do not rescue the parse."""
    with pytest.raises(MalformedRecordError):
        parse_cards("a,b\nnope\nc,d")


def test_blank_lines_between_records_skipped():
    cards = parse_cards("a,b\n\n\nc,d\n")
    assert [c.front for c in cards] == ["a", "c"]


def test_extra_columns_ignored():
    cards = parse_cards("a,b,c,d")
    assert (cards[0].front, cards[0].back) == ("a", "b")


def test_crlf_line_endings():
    cards = parse_cards("a,b\r\nc,d\r\n")
    assert [(c.front, c.back) for c in cards] == [("a", "b"), ("c", "d")]


def test_empty_text_gives_no_cards():
    assert parse_cards("   \n  ") == []


def test_parse_set_rejects_empty():
    with pytest.raises(EmptySetError):
        parse_set("\n\n", "nothing")


def test_parse_set_cursor_starts_at_zero():
    flashcard_set = parse_set("a,b\nc,d", "s")
    assert flashcard_set.current_index == 0
    assert flashcard_set.name == "s"


def test_empty_fields_still_make_a_card():
    """A lone separator is a record with two empty sides, not a blank line."""
    cards = parse_cards("a,b\n,\nc,d")
    assert len(cards) == 3
    assert (cards[1].front, cards[1].back) == ("", "")


def test_quoted_empty_fields_make_a_card():
    cards = parse_cards('"",""')
    assert len(cards) == 1
    assert (cards[0].front, cards[0].back) == ("", "")


def test_whitespace_only_fields_make_a_card():
    cards = parse_cards("a,b\n   ,   \nc,d")
    assert [c.front for c in cards] == ["a", "", "c"]


def test_set_of_only_empty_records_is_not_empty():
    assert len(parse_set(",", "blanks")) == 1


def test_unterminated_quote_reports_position():
    with pytest.raises(MalformedRecordError) as exc:
        parse_cards('foo,bar\n"never closed,baz')
    assert exc.value.record == 2
    assert exc.value.line == 2
    assert "unterminated" in str(exc.value)


def test_line_numbers_count_leading_blank_lines():
    with pytest.raises(MalformedRecordError) as exc:
        parse_cards("\n\n\na,b\nbroken")
    assert exc.value.record == 2
    assert exc.value.line == 5


def test_whitespace_after_closing_quote():
    cards = parse_cards('"a" ,b\n"x, y"  ,  "z"')
    assert (cards[0].front, cards[0].back) == ("a", "b")
    assert (cards[1].front, cards[1].back) == ("x, y", "z")
