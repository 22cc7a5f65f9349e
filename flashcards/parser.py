"""
Parse two-column comma-delimited text into flashcards.

Format: one record per row, front then back, no header row. Fields may be
double-quoted to hold commas or line breaks, with "" standing for a literal
quote inside a quoted field. Every field is trimmed of surrounding whitespace.
"""

import csv
import io
import logging
from typing import Iterator, List, Tuple

from flashcards.errors import EmptySetError, MalformedRecordError
from flashcards.models import CurrentSide, Flashcard, FlashcardSet

logger = logging.getLogger("flashcards.parser")


class _LineSource:
    """Line iterator over text that remembers whether it ran dry."""

    def __init__(self, text: str):
        self._lines = iter(io.StringIO(text, newline=''))
        self.exhausted = False

    def __iter__(self):
        return self

    def __next__(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            self.exhausted = True
            raise


def _iter_records(text: str, line_offset: int = 0) -> Iterator[Tuple[int, int, List[str]]]:
    """
    Yield (record_number, line_number, fields) for every non-blank record.

    The reader only pulls past the last line while it is still inside a
    quoted field, so a record that arrives after the source ran dry was
    closed by end of input: an unterminated quote. Non-strict mode lets
    whitespace follow a closing quote.
    """
    source = _LineSource(text)
    reader = csv.reader(
        source,
        delimiter=',',
        quotechar='"',
        doublequote=True,
        skipinitialspace=True,
        strict=False,
    )
    record_no = 0
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            raise MalformedRecordError(
                record_no + 1, reader.line_num + line_offset, str(e)) from e

        line_no = reader.line_num + line_offset
        if source.exhausted:
            raise MalformedRecordError(record_no + 1, line_no, "unterminated quoted field")
        if not row or (len(row) == 1 and not row[0].strip()):
            continue
        record_no += 1
        yield record_no, line_no, [f.strip() for f in row]


def parse_cards(
    text: str,
    capitalize: bool = False,
    reverse: bool = False,
) -> List[Flashcard]:
    """
    Parse delimited text into cards, preserving record order.

    Args:
        text:       Raw source text
        capitalize: Uppercase both sides of every card
        reverse:    Start every card on its back side

    Returns:
        List of Flashcard, possibly empty.

    Raises:
        MalformedRecordError: a record has fewer than two fields, or a
            quoted field is never closed.
    """
    side = CurrentSide.BACK if reverse else CurrentSide.FRONT
    cards: List[Flashcard] = []

    body = text.strip()
    # Line numbers count from the top of the source, not the stripped body
    leading = text[:len(text) - len(text.lstrip())].count('\n')

    for record_no, line_no, fields in _iter_records(body, leading):
        if len(fields) < 2:
            raise MalformedRecordError(
                record_no, line_no,
                f"expected 2 fields, found {len(fields)}",
            )
        if len(fields) > 2:
            logger.debug("Record %d: ignoring %d extra field(s)",
                         record_no, len(fields) - 2)

        front, back = fields[0], fields[1]
        if capitalize:
            front = front.upper()
            back = back.upper()
        cards.append(Flashcard(front=front, back=back, current_side=side))

    return cards


def parse_set(
    text: str,
    name: str,
    capitalize: bool = False,
    reverse: bool = False,
) -> FlashcardSet:
    """Parse text into a named FlashcardSet with its cursor on the first card."""
    cards = parse_cards(text, capitalize=capitalize, reverse=reverse)
    if not cards:
        raise EmptySetError(name)
    logger.debug("Parsed %d card(s) for set '%s'", len(cards), name)
    return FlashcardSet(name=name, cards=cards)
