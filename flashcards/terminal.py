"""
Curses render/input shell.

Terminal is a context manager: entering it takes over the screen, leaving
it (normally, on error, or on Ctrl-C) puts the terminal back the way it was.
The layout helpers below it are plain functions so they can be tested
without a screen.
"""

import curses
import locale
import logging
import textwrap
from typing import Dict, List, Optional, Tuple

from flashcards.app import CardView, Message
from flashcards.config import Settings
from flashcards.models import CurrentSide

logger = logging.getLogger("flashcards.terminal")

KEY_BINDINGS: Dict[int, Message] = {
    ord('n'): Message.NEXT,
    curses.KEY_RIGHT: Message.NEXT,
    ord('p'): Message.PREVIOUS,
    curses.KEY_LEFT: Message.PREVIOUS,
    ord(' '): Message.FLIP,
    ord('q'): Message.QUIT,
}

HINT = "n next  p previous  space flip  q quit"

# Double-line border: corners then edges
BORDER = {
    'tl': '╔', 'tr': '╗', 'bl': '╚', 'br': '╝',
    'h': '═', 'v': '║',
}

PADDING_X = 4

_PAIR_FRONT = 1
_PAIR_BACK = 2


def map_key(key: int) -> Optional[Message]:
    """Translate a curses key code into a Message. Unbound keys map to None."""
    return KEY_BINDINGS.get(key)


def panel_rect(
    screen_height: int,
    screen_width: int,
    width: int,
    height: int,
) -> Tuple[int, int, int, int]:
    """Centre a width x height panel on the screen, clamped to fit. Returns (y, x, h, w)."""
    h = max(3, min(height, screen_height - 1))
    w = max(4, min(width, screen_width))
    y = max(0, (screen_height - 1 - h) // 2)
    x = max(0, (screen_width - w) // 2)
    return y, x, h, w


def layout_text(text: str, inner_width: int, inner_height: int) -> List[str]:
    """
    Wrap and centre text into at most inner_height rows of inner_width.

    Existing line breaks are kept; long lines are word-wrapped. Rows past
    the bottom are cut.
    """
    if inner_width <= 0 or inner_height <= 0:
        return []
    rows: List[str] = []
    for line in text.splitlines() or ['']:
        wrapped = textwrap.wrap(line, inner_width) or ['']
        rows.extend(r.center(inner_width) for r in wrapped)
    return rows[:inner_height]


def side_label(side: CurrentSide) -> str:
    return "Front" if side == CurrentSide.FRONT else "Back"


class Terminal:
    """Scoped ownership of the curses screen."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.stdscr = None
        self._colors = False

    def __enter__(self) -> 'Terminal':
        locale.setlocale(locale.LC_ALL, '')
        self.stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                pass  # terminal cannot hide the cursor
            self._init_colors()
            self.stdscr.timeout(self.settings.poll_interval_ms)
        except Exception:
            self._restore()
            raise
        logger.debug("Terminal acquired")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._restore()
        logger.debug("Terminal restored")
        return False

    def _init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(_PAIR_FRONT, curses.COLOR_BLUE, -1)
        curses.init_pair(_PAIR_BACK, curses.COLOR_MAGENTA, -1)
        self._colors = True

    def _restore(self) -> None:
        if self.stdscr is None:
            return
        try:
            self.stdscr.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            curses.endwin()
            self.stdscr = None

    def _accent(self, side: CurrentSide) -> int:
        if not self._colors:
            return curses.A_BOLD
        pair = _PAIR_FRONT if side == CurrentSide.FRONT else _PAIR_BACK
        return curses.color_pair(pair) | curses.A_BOLD

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        # Writing into the bottom-right cell raises even though it draws
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass

    def draw(self, view: CardView) -> None:
        """Render one card panel plus the key hint under it."""
        scr = self.stdscr
        scr.erase()
        screen_h, screen_w = scr.getmaxyx()
        y, x, h, w = panel_rect(screen_h, screen_w, self.settings.panel_width, view.height)
        accent = self._accent(view.side)

        self._put(y, x, BORDER['tl'] + BORDER['h'] * (w - 2) + BORDER['tr'], accent)
        for row in range(1, h - 1):
            self._put(y + row, x, BORDER['v'], accent)
            self._put(y + row, x + w - 1, BORDER['v'], accent)
        self._put(y + h - 1, x, BORDER['bl'] + BORDER['h'] * (w - 2) + BORDER['br'], accent)

        title = f" {view.set_name.upper()} "[:max(0, w - 2)]
        self._put(y, x + (w - len(title)) // 2, title,
                  accent | curses.A_UNDERLINE | curses.A_ITALIC)

        inner_w = w - 2 - 2 * PADDING_X
        if inner_w < 1:
            inner_w = w - 2
        pad_x = (w - 2 - inner_w) // 2
        rows = layout_text(view.text, inner_w, h - 2)
        top = y + 1 + max(0, (h - 2 - len(rows)) // 2)
        for i, row in enumerate(rows):
            self._put(top + i, x + 1 + pad_x, row, accent)

        footer = f"{side_label(view.side)}  |  {HINT}"
        if y + h < screen_h:
            self._put(y + h, max(0, (screen_w - len(footer)) // 2), footer[:screen_w],
                      curses.A_DIM)
        scr.refresh()

    def poll(self) -> Optional[Message]:
        """Wait up to the poll interval for a key press. None on timeout or unbound key."""
        key = self.stdscr.getch()
        if key == -1:
            return None
        if key == curses.KEY_RESIZE:
            return None
        return map_key(key)
