"""A list of short-lived tooltip messages."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator

__all__ = ["ListType", "ToolTipRole", "Message", "ToolTipListModel"]


class ListType(enum.Enum):
    """How repeated messages are treated."""

    ALL = 0
    LATTER_DO_NOT_REPEAT = 1
    NO_REPEATS = 2


class ToolTipRole(enum.IntEnum):
    """Data roles exposed by :class:`ToolTipListModel`."""

    DISPLAY = 0
    BACKGROUND = 8
    FOREGROUND = 9


@dataclass
class Message:
    """A message, its colours and the clock reading when it was added."""

    text: str
    background: str = "white"
    foreground: str = "black"
    created: float = field(default=0.0)


class ToolTipListModel:
    """Holds messages that expire after ``timeout`` milliseconds.

    Expiry happens when :meth:`check_list` is called; ``timer_interval`` says
    how often a caller should do so while ``timer_active`` is set.
    """

    def __init__(
        self,
        timeout: int = 1000,
        list_type: ListType = ListType.ALL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeout = timeout
        self.list_type = list_type
        self._clock = clock
        self._messages: list[Message] = []
        self.timer_active = False

    @property
    def timer_interval(self) -> float:
        """Milliseconds between expiry checks."""
        return min(float(self.timeout), self.timeout / 5.0, 100.0)

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def role_names(self) -> dict[int, str]:
        return {
            ToolTipRole.DISPLAY: "display",
            ToolTipRole.BACKGROUND: "backgroundColor",
            ToolTipRole.FOREGROUND: "foregroundColor",
        }

    def data(self, row: int, role: int) -> str | None:
        if not 0 <= row < len(self._messages):
            return None
        message = self._messages[row]
        if role == ToolTipRole.DISPLAY:
            return message.text
        if role == ToolTipRole.BACKGROUND:
            return message.background
        if role == ToolTipRole.FOREGROUND:
            return message.foreground
        return None

    def append(self, text: str, background: str = "white", foreground: str = "black") -> bool:
        """Add a message unless the list type forbids the repeat; return whether it was added."""
        if self.list_type is ListType.LATTER_DO_NOT_REPEAT:
            if self._messages and self._messages[-1].text == text:
                return False
        elif self.list_type is ListType.NO_REPEATS:
            if any(m.text == text for m in self._messages):
                return False
        self._messages.append(Message(text, background, foreground, self._clock()))
        self.timer_active = True
        return True

    def remove_at(self, i: int) -> None:
        """Remove the message at ``i``; out-of-range indexes are ignored."""
        if not 0 <= i < len(self._messages):
            return
        del self._messages[i]
        if not self._messages:
            self.timer_active = False

    def clear(self) -> None:
        self._messages.clear()

    def check_list(self) -> None:
        """Remove every message older than the timeout."""
        now = self._clock()
        expired = [
            i for i, m in enumerate(self._messages) if (now - m.created) * 1000.0 > self.timeout
        ]
        for i in reversed(expired):
            self.remove_at(i)