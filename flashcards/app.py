"""Application state machine: one loaded set, one card on display, an exit flag."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from flashcards.models import CurrentSide, Flashcard, FlashcardSet

logger = logging.getLogger("flashcards.app")


class Message(str, Enum):
    """Abstract commands, already decoded from raw input."""
    NEXT = "next"
    PREVIOUS = "previous"
    FLIP = "flip"
    QUIT = "quit"


@dataclass(frozen=True)
class CardView:
    """Everything the renderer gets to see of the current state."""
    text: str
    side: CurrentSide
    set_name: str
    height: int


class App:
    """
    Owns the active FlashcardSet and interprets messages against it.

    current_card is a detached snapshot of the stored card under the
    cursor. Flips go to the stored card so they persist when the user
    navigates away and back.
    """

    def __init__(self, flashcard_set: FlashcardSet):
        self.current_set = flashcard_set
        self.current_set.current_index = 0
        self.current_card: Flashcard = flashcard_set.current_card().copy()
        self.exit = False

    def update(self, msg: Message) -> Optional[Message]:
        """
        Apply one message. Returns a follow-up message to apply next, or None.

        Nothing in this state machine chains follow-ups yet, so the return
        value is always None.
        """
        logger.debug("update: %s (index=%d)", msg.value, self.current_set.current_index)

        if msg == Message.NEXT:
            card = self.current_set.advance()
            if card is not None:
                self.current_card = card.copy()
        elif msg == Message.PREVIOUS:
            card = self.current_set.retreat()
            if card is not None:
                self.current_card = card.copy()
        elif msg == Message.FLIP:
            self.current_card = self.current_set.flip_current().copy()
        elif msg == Message.QUIT:
            self.exit = True
        return None

    def view(self) -> CardView:
        card = self.current_card
        return CardView(
            text=card.current_side_text(),
            side=card.current_side,
            set_name=self.current_set.name,
            height=card.preferred_display_height(),
        )
