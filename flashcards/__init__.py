"""Terminal flashcards: set loading, card models and the study state machine."""

from flashcards.app import App, CardView, Message
from flashcards.models import CurrentSide, Flashcard, FlashcardSet
from flashcards.parser import parse_cards, parse_set

__all__ = [
    "App",
    "CardView",
    "Message",
    "CurrentSide",
    "Flashcard",
    "FlashcardSet",
    "parse_cards",
    "parse_set",
]
