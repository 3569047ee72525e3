"""List of completion suggestions matching a typed text."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = ["Role", "Suggestion", "SuggestionsList"]

_USER_ROLE = 256


class Role(enum.IntEnum):
    """Data roles exposed by :class:`SuggestionsList`."""

    SUGGESTION = _USER_ROLE + 1
    MODEL_DATA = _USER_ROLE + 2
    INDEX = _USER_ROLE + 3


@dataclass(frozen=True)
class Suggestion:
    """One match: the original text, the text with the match in bold, and its model index."""

    model_data: str
    suggestion: str
    index: int


def _fold(text: str) -> str:
    return "".join(low if len(low := ch.lower()) == 1 else ch for ch in text)


class SuggestionsList:
    """Keeps the model entries that contain the current text."""

    def __init__(
        self,
        model: Iterable[str] = (),
        text: str = "",
        maximum_number_of_suggestions: int = 100,
        case_sensitive: bool = False,
    ) -> None:
        self._case_sensitive = case_sensitive
        self._maximum = maximum_number_of_suggestions if maximum_number_of_suggestions > 0 else 100
        self._text = text
        values = list(model)
        self._model = list(dict.fromkeys(values))
        self._suggestions = self._search(text, values)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if value != self._text:
            self._text = value
            self._suggestions = self._search(value, self._model)

    @property
    def model(self) -> list[str]:
        return list(self._model)

    @model.setter
    def model(self, value: Iterable[str]) -> None:
        values = list(value)
        if values != self._model:
            self._model = list(dict.fromkeys(values))
            self._suggestions = self._search(self._text, values)

    @property
    def maximum_number_of_suggestions(self) -> int:
        return self._maximum

    @maximum_number_of_suggestions.setter
    def maximum_number_of_suggestions(self, value: int) -> None:
        if value != self._maximum and value > 0:
            self._maximum = value
            self._suggestions = self._search(self._text, self._model)

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @case_sensitive.setter
    def case_sensitive(self, value: bool) -> None:
        if value != self._case_sensitive:
            self._case_sensitive = value
            self._suggestions = self._search(self._text, self._model)

    @property
    def suggestions(self) -> tuple[Suggestion, ...]:
        return tuple(self._suggestions)

    def __len__(self) -> int:
        return len(self._suggestions)

    def __iter__(self) -> Iterator[Suggestion]:
        return iter(self._suggestions)

    def data(self, row: int, role: int) -> str | int | None:
        """Return the value of ``role`` for the suggestion at ``row``, or None."""
        if not 0 <= row < len(self._suggestions):
            return None
        item = self._suggestions[row]
        if role == Role.MODEL_DATA:
            return item.model_data
        if role == Role.SUGGESTION:
            return item.suggestion
        if role == Role.INDEX:
            return item.index
        return None

    def role_names(self) -> dict[int, str]:
        return {
            Role.SUGGESTION: "suggestion",
            Role.INDEX: "suggestionIndex",
            Role.MODEL_DATA: "suggestionModelData",
        }

    def clear(self) -> None:
        """Drop the text, the model and all suggestions."""
        self._text = ""
        self._model = []
        self._suggestions = []

    def _search(self, text: str, model: list[str]) -> list[Suggestion]:
        if not text:
            return []
        needle = text if self._case_sensitive else _fold(text)
        found: list[Suggestion] = []
        for index, item in enumerate(model):
            if len(found) >= self._maximum:
                break
            haystack = item if self._case_sensitive else _fold(item)
            pos = haystack.find(needle)
            if pos < 0 or len(item) == len(text):
                continue
            end = pos + len(text)
            marked = f"{item[:pos]}<b>{item[pos:end]}</b>{item[end:]}"
            found.append(Suggestion(item, marked, index))
        return found