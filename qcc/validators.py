"""Text validators for date/time fields and hexadecimal numbers."""

from __future__ import annotations

import calendar
import datetime as _dt
import enum
import re
from dataclasses import dataclass

__all__ = ["State", "DateValidator", "HexValidator"]


class State(enum.Enum):
    """Outcome of validating a piece of input."""

    INVALID = 0
    INTERMEDIATE = 1
    ACCEPTABLE = 2


_FIELD_RE = re.compile(r"[dMyhHmsz]")
_TOKEN_RE = re.compile(r"yyyy|yy|zzz|dd|MM|hh|HH|mm|ss|d|M|h|H|m|s|z|.", re.S)

_TOKEN_PATTERNS = {
    "yyyy": r"(\d{4})",
    "yy": r"(\d{2})",
    "zzz": r"(\d{3})",
    "z": r"(\d{1,3})",
    "dd": r"(\d{2})",
    "MM": r"(\d{2})",
    "hh": r"(\d{2})",
    "HH": r"(\d{2})",
    "mm": r"(\d{2})",
    "ss": r"(\d{2})",
    "d": r"(\d{1,2})",
    "M": r"(\d{1,2})",
    "h": r"(\d{1,2})",
    "H": r"(\d{1,2})",
    "m": r"(\d{1,2})",
    "s": r"(\d{1,2})",
}

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class _DateFormat:
    """A parsed date/time format string of the dd.MM.yyyy kind."""

    tokens: tuple[str, ...]

    @classmethod
    def of(cls, fmt: str) -> "_DateFormat":
        return cls(tuple(_TOKEN_RE.findall(fmt)))

    def parse(self, text: str) -> _dt.datetime | None:
        pattern = "".join(_TOKEN_PATTERNS.get(tok, re.escape(tok)) for tok in self.tokens)
        match = re.fullmatch(pattern, text)
        if match is None:
            return None
        fields = {"year": 1900, "month": 1, "day": 1, "hour": 0,
                  "minute": 0, "second": 0, "microsecond": 0}
        values = iter(match.groups())
        for tok in self.tokens:
            if tok not in _TOKEN_PATTERNS:
                continue
            value = int(next(values))
            kind = tok[0]
            if kind == "y":
                fields["year"] = 1900 + value if tok == "yy" else value
            elif kind == "M":
                fields["month"] = value
            elif kind == "d":
                fields["day"] = value
            elif kind in "hH":
                fields["hour"] = value
            elif kind == "m":
                fields["minute"] = value
            elif kind == "s":
                fields["second"] = value
            else:
                fields["microsecond"] = value * 1000
        try:
            return _dt.datetime(**fields)
        except ValueError:
            return None

    def format(self, moment: _dt.datetime) -> str:
        parts = []
        for tok in self.tokens:
            if tok not in _TOKEN_PATTERNS:
                parts.append(tok)
                continue
            kind = tok[0]
            if kind == "y":
                parts.append(f"{moment.year % 100:02d}" if tok == "yy" else f"{moment.year:04d}")
                continue
            if kind == "z":
                ms = moment.microsecond // 1000
                parts.append(f"{ms:03d}" if tok == "zzz" else str(ms))
                continue
            value = {
                "M": moment.month,
                "d": moment.day,
                "h": moment.hour,
                "H": moment.hour,
                "m": moment.minute,
                "s": moment.second,
            }[kind]
            parts.append(f"{value:02d}" if len(tok) == 2 else str(value))
        return "".join(parts)


def _add_months(moment: _dt.datetime, count: int) -> _dt.datetime:
    total = moment.year * 12 + (moment.month - 1) + count
    year, month = divmod(total, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _add_years(moment: _dt.datetime, count: int) -> _dt.datetime:
    year = moment.year + count
    day = min(moment.day, calendar.monthrange(year, moment.month)[1])
    return moment.replace(year=year, day=day)


class DateValidator:
    """Validates and steps date/time text written in a fixed format."""

    DEFAULT_FORMAT = "dd.MM.yyyy hh:mm:ss"

    def __init__(self, fmt: str = DEFAULT_FORMAT) -> None:
        self._format = ""
        self._apply_format(fmt)

    @property
    def format(self) -> str:
        return self._format

    @format.setter
    def format(self, value: str) -> None:
        if value != self._format:
            self._apply_format(value)

    @property
    def input_mask(self) -> str:
        return self._input_mask

    def _apply_format(self, value: str) -> None:
        try:
            self._regex: re.Pattern[str] | None = re.compile(_FIELD_RE.sub(r"\\d", value))
        except re.error:
            self._regex = None
        self._input_mask = _FIELD_RE.sub("N", value) + ";_"
        self._format = value
        self._parsed = _DateFormat.of(value)

    def validate(self, text: str) -> tuple[State, str]:
        """Return the state of ``text`` and the text with misplaced separators fixed."""
        if self._regex is not None and self._regex.search(text):
            moment = self._parsed.parse(text)
            return (State.ACCEPTABLE if moment is not None else State.INTERMEDIATE), text
        if len(self._format) != len(text):
            return State.INTERMEDIATE, text
        fixed = "".join(
            ch if ch.isdecimal() or ch == expected else expected
            for ch, expected in zip(text, self._format)
        )
        return State.INTERMEDIATE, fixed

    def up(self, text: str, pos: int) -> str:
        """Step the field under ``pos`` one unit forward."""
        return self._add(text, pos, 1)

    def down(self, text: str, pos: int) -> str:
        """Step the field under ``pos`` one unit back."""
        return self._add(text, pos, -1)

    def _add(self, text: str, pos: int, count: int) -> str:
        if pos > len(self._format) or pos < 0 or not self._format:
            return text
        moment = self._parsed.parse(text)
        if moment is None:
            return text
        if pos == len(self._format):
            pos -= 1
        symbol = self._format[pos]
        try:
            if symbol == "d":
                moment += _dt.timedelta(days=count)
            elif symbol == "M":
                moment = _add_months(moment, count)
            elif symbol == "y":
                moment = _add_years(moment, count)
            elif symbol in "hH":
                moment += _dt.timedelta(hours=count)
            elif symbol == "m":
                moment += _dt.timedelta(minutes=count)
            elif symbol == "s":
                moment += _dt.timedelta(seconds=count)
        except (OverflowError, ValueError):
            return text
        return self._parsed.format(moment)


def _parse_hex_int32(text: str) -> int | None:
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return None
    try:
        value = int(stripped, 16)
    except ValueError:
        return None
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


@dataclass
class HexValidator:
    """Validates hexadecimal integers, optionally within a range (-1 means unbounded)."""

    bottom: int = -1
    top: int = -1

    def validate(self, text: str) -> State:
        if not text:
            return State.INTERMEDIATE
        if text.lower() == "0x":
            return State.INTERMEDIATE
        value = _parse_hex_int32(text)
        if value is None:
            return State.INVALID
        if self.bottom != -1 and value < self.bottom:
            return State.INTERMEDIATE
        if self.top != -1 and value > self.top:
            return State.INVALID
        return State.ACCEPTABLE