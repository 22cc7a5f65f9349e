"""Error taxonomy for loading flashcard sets.

Every error here is raised at startup, before the terminal is taken over.
Once a set is loaded the state machine itself never fails.
"""

from typing import Optional


class FlashcardsError(Exception):
    """Base class for all load-time failures."""


class SourceNotFoundError(FlashcardsError, LookupError):
    """Raised when no source file matches the requested set name."""
    def __init__(self, set_name: str, directory: Optional[str] = None):
        if set_name:
            msg = f"No flashcard set named '{set_name}'"
            if directory:
                msg += f" in {directory}"
        else:
            msg = f"Set directory not found or unreadable: {directory}"
        super().__init__(msg)
        self.set_name = set_name
        self.directory = directory


class SourceUnreadableError(FlashcardsError):
    """Raised when the matched source file cannot be read as UTF-8 text."""
    def __init__(self, path, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedRecordError(FlashcardsError, ValueError):
    """
    Raised when a record has fewer than two fields or an unterminated quote.

    record is the 1-based record number, line the physical line the
    reader had reached when the problem surfaced.
    """
    def __init__(self, record: int, line: int, reason: str):
        super().__init__(f"Malformed record {record} (line {line}): {reason}")
        self.record = record
        self.line = line
        self.reason = reason


class EmptySetError(FlashcardsError, ValueError):
    """Raised when a source parses to zero cards."""
    def __init__(self, set_name: str = ''):
        label = f"'{set_name}'" if set_name else 'Flashcard set'
        super().__init__(f"{label} contains no cards")
        self.set_name = set_name
