from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List

from .colors import Color, WHITE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Message:
    """A single human-readable event line and its display color."""

    text: str
    color: Color = WHITE


class MessageLog:
    """Append-only, ordered record of game messages.

    The log grows without bound; presentation layers read it newest-first and
    decide how many lines fit on screen.
    """

    def __init__(self) -> None:
        self._messages: List[Message] = []

    def add(self, text: str, color: Color = WHITE) -> Message:
        msg = Message(text=text, color=color)
        self._messages.append(msg)
        # Forward to standard logging for visibility if configured.
        logger.debug("message: %s", text)
        return msg

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def newest_first(self) -> Iterator[Message]:
        return reversed(self._messages)

    def recent(self, n: int) -> List[Message]:
        """Return up to n of the latest messages, newest first."""
        if n <= 0:
            return []
        return list(reversed(self._messages[-n:]))

    def texts(self) -> List[str]:
        return [m.text for m in self._messages]

    def clear(self) -> None:
        logger.debug("Clearing message log (count=%d)", len(self._messages))
        self._messages.clear()
