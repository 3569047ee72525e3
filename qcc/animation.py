"""State and geometry of the animated waiting bar and the clock icon."""

from __future__ import annotations

import datetime as _dt
import enum
import math
from typing import Callable, NamedTuple

__all__ = [
    "out_in_sine",
    "WaitingBar",
    "TimeSpec",
    "HandAngles",
    "VchIcon",
    "octagon",
]

Point = tuple[float, float]

_BAR_WIDTH_RATIO = 0.2
_BAR_TIMER_INTERVAL = 25


def _ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def _ease_in_sine(t: float) -> float:
    return 1.0 if t == 1.0 else 1.0 - math.cos(t * math.pi / 2)


def out_in_sine(t: float) -> float:
    """Sine easing that decelerates to the midpoint, then accelerates."""
    if t < 0.5:
        return _ease_out_sine(2 * t) / 2
    return _ease_in_sine(2 * t - 1) / 2 + 0.5


class WaitingBar:
    """An indeterminate progress bar: a gradient slides across the bar.

    A caller drives the animation by calling :meth:`tick` every
    ``timer_interval`` milliseconds while :attr:`running` is set.
    """

    timer_interval = _BAR_TIMER_INTERVAL

    def __init__(
        self,
        width: float = 0.0,
        height: float = 5.0,
        duration: int = 1000,
        color: str = "white",
        progress_color: str = "blue",
    ) -> None:
        self.height = height
        self.color = color
        self.progress_color = progress_color
        self.width = width
        self.progress_bar_width = width * _BAR_WIDTH_RATIO
        self._duration = duration
        self._interval = self.timer_interval / duration
        self.progress = 0.0
        self._running = False
        self._visible = True

    @property
    def duration(self) -> int:
        """Milliseconds for one sweep of the gradient."""
        return self._duration

    @duration.setter
    def duration(self, value: int) -> None:
        if value != self._duration:
            self._duration = value
            self._interval = self.timer_interval / value

    @property
    def interval(self) -> float:
        """Fraction of a sweep that one tick advances."""
        return self._interval

    @property
    def running(self) -> bool:
        return self._running

    @running.setter
    def running(self, value: bool) -> None:
        if value == self._running:
            return
        self.progress = 0.0
        self._running = value

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        if not value:
            self.running = False
        self._visible = value

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def tick(self) -> float:
        """Advance the animation one step if running; return the progress."""
        if self._running:
            self.progress += self._interval
            if self.progress > 1:
                self.progress = 0.0
        return self.progress

    def resize(self, width: float) -> None:
        """Change the bar width; the gradient keeps a fixed share of it."""
        self.width = width
        self.progress_bar_width = width * _BAR_WIDTH_RATIO

    def progress_x(self) -> float:
        """Left edge of the gradient for the current progress."""
        span = self.width + self.progress_bar_width
        return out_in_sine(self.progress) * span - self.progress_bar_width


class TimeSpec(enum.Enum):
    """Time zone in which the clock shows its time."""

    LOCAL = 0
    UTC = 1


class HandAngles(NamedTuple):
    """Rotation of each clock hand in degrees."""

    hour: float
    minute: float
    second: float


def _now() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class VchIcon:
    """A clock icon whose hands follow a date/time.

    While :attr:`running`, a caller calls :meth:`tick` every ``interval``
    milliseconds to move the clock to the current time.
    """

    def __init__(
        self,
        time_spec: TimeSpec = TimeSpec.LOCAL,
        interval: int = 100,
        clock: Callable[[], _dt.datetime] = _now,
    ) -> None:
        self._time_spec = time_spec
        self._clock = clock
        self.interval = interval
        self.running = False
        self._datetime = self._convert(clock())

    def _convert(self, value: _dt.datetime) -> _dt.datetime:
        if self._time_spec is TimeSpec.UTC:
            return value.astimezone(_dt.timezone.utc)
        return value.astimezone()

    @property
    def date_time(self) -> _dt.datetime:
        return self._datetime

    @date_time.setter
    def date_time(self, value: _dt.datetime) -> None:
        if value != self._datetime or value.tzinfo != self._datetime.tzinfo:
            self._datetime = self._convert(value)

    @property
    def time_spec(self) -> TimeSpec:
        return self._time_spec

    @time_spec.setter
    def time_spec(self, value: TimeSpec) -> None:
        if value is not self._time_spec:
            self._time_spec = value
            self._datetime = self._convert(self._datetime)

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def tick(self) -> _dt.datetime:
        """Move the clock to the current time and return it."""
        self.date_time = self._clock()
        return self._datetime

    def hand_angles(self) -> HandAngles:
        """Angles of the hour, minute and second hands in degrees."""
        t = self._datetime
        minute = t.minute * 6 + (3 if t.second >= 30 else 0)
        return HandAngles(float(t.hour * 30), float(minute), float(t.second * 6))


def octagon(x: float, y: float, width: float, height: float, k: float = 0.1235) -> list[Point]:
    """Corners of a rectangle cut at ``k`` of its size, clockwise from the top right."""
    right = x + width
    bottom = y + height
    return [
        (x + width * (1 - k), y),
        (right, y + height * k),
        (right, y + height * (1 - k)),
        (x + width * (1 - k), bottom),
        (x + width * k, bottom),
        (x, y + height * (1 - k)),
        (x, y + height * k),
        (x + width * k, y),
    ]