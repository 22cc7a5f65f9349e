"""Data models for a study session: Flashcard and FlashcardSet dataclasses."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

from flashcards.errors import EmptySetError

# Layout floor for the card panel, in terminal rows
MIN_DISPLAY_HEIGHT = 11
# Rows taken up by border, padding and title around the text
DISPLAY_CHROME_ROWS = 10


class CurrentSide(str, Enum):
    """Which face of a card is showing."""
    FRONT = "front"
    BACK = "back"


@dataclass
class Flashcard:
    """A front/back text pair plus the side currently on display."""
    front: str
    back: str
    current_side: CurrentSide = CurrentSide.FRONT

    def current_side_text(self) -> str:
        if self.current_side == CurrentSide.FRONT:
            return self.front
        return self.back

    def flip(self) -> None:
        if self.current_side == CurrentSide.FRONT:
            self.current_side = CurrentSide.BACK
        else:
            self.current_side = CurrentSide.FRONT

    def preferred_display_height(self) -> int:
        """
        Rows the renderer should give this card.

        Measures the longer side by character count (front wins ties),
        so flipping never changes the panel size.
        """
        longest = self.front if len(self.front) >= len(self.back) else self.back
        return max(MIN_DISPLAY_HEIGHT, DISPLAY_CHROME_ROWS + len(longest.splitlines()))

    def copy(self) -> 'Flashcard':
        return replace(self)


@dataclass
class FlashcardSet:
    """
    A named, ordered, non-empty run of cards with a cursor.

    The set owns its cards. Navigation hands back the stored card at the
    new cursor; callers that keep it around should take a copy.
    """
    name: str
    cards: List[Flashcard] = field(default_factory=list)
    current_index: int = 0

    def __post_init__(self):
        if not self.cards:
            raise EmptySetError(self.name)
        if not (0 <= self.current_index < len(self.cards)):
            raise IndexError(
                f"current_index {self.current_index} out of range for "
                f"{len(self.cards)} card(s)"
            )

    def __len__(self) -> int:
        return len(self.cards)

    def current_card(self) -> Flashcard:
        return self.cards[self.current_index]

    def advance(self) -> Optional[Flashcard]:
        """Move to the next card. Returns None (and stays put) at the last card."""
        if self.current_index >= len(self.cards) - 1:
            return None
        self.current_index += 1
        return self.cards[self.current_index]

    def retreat(self) -> Optional[Flashcard]:
        """Move to the previous card. At the first card, stays put and returns it."""
        if self.current_index > 0:
            self.current_index -= 1
        return self.cards[self.current_index]

    def flip_current(self) -> Flashcard:
        """Flip the stored card under the cursor in place and return it."""
        card = self.cards[self.current_index]
        card.flip()
        return card
