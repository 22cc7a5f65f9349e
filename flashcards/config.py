"""Configuration for the flashcards CLI."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """
    Runtime knobs for loading and showing a set.

    Every field is overridable at construction for testing; unset fields
    fall back to environment variables, then to defaults.
    """
    sets_dir: Optional[Path] = None
    extension: str = ".csv"
    poll_interval_ms: Optional[int] = None
    panel_width: int = 45

    def __post_init__(self):
        if self.sets_dir is None:
            env_dir = os.environ.get("FLASHCARDS_SETS_DIR")
            self.sets_dir = Path(env_dir) if env_dir else Path.cwd() / "sets"
        self.sets_dir = Path(self.sets_dir)

        if self.poll_interval_ms is None:
            env_poll = os.environ.get("FLASHCARDS_POLL_MS")
            self.poll_interval_ms = int(env_poll) if env_poll else 250

        if not self.extension.startswith("."):
            self.extension = "." + self.extension
