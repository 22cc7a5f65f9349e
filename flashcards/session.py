"""Interactive study loop with injectable draw and poll functions."""

import logging
from typing import Callable, Dict, Optional

from flashcards.app import App, CardView, Message

logger = logging.getLogger("flashcards.session")


def run_session(
    app: App,
    draw_fn: Callable[[CardView], None],
    poll_fn: Callable[[], Optional[Message]],
) -> Dict:
    """
    Alternate draw and poll until the app asks to exit.

    IO is injectable for testability.

    Flow per iteration:
        1. Draw the current view (no mutation)
        2. Wait for at most one message; poll_fn returns None on timeout
        3. Apply it, then any follow-ups it chains

    Args:
        app:     App to drive
        draw_fn: Renders a CardView
        poll_fn: Blocks up to the poll interval, returns a Message or None

    Returns:
        Summary dict: {frames, messages, final_index}
    """
    frames = 0
    messages = 0

    while not app.exit:
        draw_fn(app.view())
        frames += 1

        msg = poll_fn()
        while msg is not None:
            messages += 1
            msg = app.update(msg)

    summary = {
        'frames': frames,
        'messages': messages,
        'final_index': app.current_set.current_index,
    }
    logger.debug("Session ended: %s", summary)
    return summary
