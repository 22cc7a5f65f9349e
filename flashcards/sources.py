"""Locate, read and load flashcard set files from a directory."""

import logging
import random
from pathlib import Path
from typing import List, Optional, Tuple

from flashcards.errors import SourceNotFoundError, SourceUnreadableError
from flashcards.models import FlashcardSet
from flashcards.parser import parse_set

logger = logging.getLogger("flashcards.sources")


def find_all_sets(directory, extension: str = ".csv") -> List[Tuple[str, Path]]:
    """
    Return (name, path) for every file in directory with the given extension.

    name is the file stem. Results are sorted by name so lookups are stable.

    Raises:
        SourceNotFoundError: directory does not exist or cannot be listed.
    """
    root = Path(directory)
    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise SourceNotFoundError('', str(root)) from e

    found = [
        (p.stem, p) for p in entries
        if p.is_file() and p.suffix.lower() == extension.lower()
    ]
    found.sort(key=lambda item: item[0].lower())
    return found


def find_set(directory, name: str, extension: str = ".csv") -> Tuple[str, Path]:
    """Case-insensitive lookup of a set by name. First match wins."""
    try:
        candidates = find_all_sets(directory, extension)
    except SourceNotFoundError as e:
        raise SourceNotFoundError(name, str(directory)) from e

    wanted = name.lower()
    for set_name, path in candidates:
        if set_name.lower() == wanted:
            return set_name, path
    raise SourceNotFoundError(name, str(directory))


def read_source(path) -> str:
    """Read a set file as UTF-8 text."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise SourceUnreadableError(path, "not valid UTF-8") from e
    except OSError as e:
        raise SourceUnreadableError(path, e.strerror or str(e)) from e


def load_set(
    directory,
    name: str,
    capitalize: bool = False,
    reverse: bool = False,
    shuffle: bool = False,
    extension: str = ".csv",
    rng: Optional[random.Random] = None,
) -> FlashcardSet:
    """
    Resolve, read and parse one set.

    Shuffling is a one-time permutation of the parsed cards, applied before
    the cursor is placed on the first card.

    Raises:
        SourceNotFoundError, SourceUnreadableError, MalformedRecordError,
        EmptySetError
    """
    set_name, path = find_set(directory, name, extension)
    logger.info("Loading set '%s' from %s", set_name, path)

    flashcard_set = parse_set(
        read_source(path), set_name,
        capitalize=capitalize, reverse=reverse,
    )

    if shuffle:
        (rng or random.Random()).shuffle(flashcard_set.cards)
        flashcard_set.current_index = 0

    logger.info("Loaded %d card(s) from '%s'", len(flashcard_set), set_name)
    return flashcard_set
