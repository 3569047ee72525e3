"""Vertex geometry for straight, dashed and arrow-tipped line items."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

__all__ = ["Orientation", "IndicatorForm", "Line", "ArrowItem"]

Point = tuple[float, float]

_ARROW_ANGLE_DEGREES = 30.0


class Orientation(enum.Enum):
    """Direction in which a line runs."""

    HORIZONTAL = 1
    VERTICAL = 2


class IndicatorForm(enum.Enum):
    """Shape drawn at the end of an :class:`ArrowItem`."""

    ARROW = 0
    CROSS = 1


@dataclass
class Line:
    """A solid or dashed line centred in its bounding box.

    The line is dashed when both ``spacing`` and ``dash_size`` are positive.
    """

    width: float = 0.0
    height: float = 1.0
    color: str = "black"
    spacing: float = 0.0
    dash_size: float = -1.0
    orientation: Orientation = Orientation.HORIZONTAL
    line_width: float = 1.0

    def real_line_width(self) -> float:
        """Line width limited by the extent across the line."""
        across = self.height if self.orientation is Orientation.HORIZONTAL else self.width
        return min(self.line_width, across)

    def _dash_count(self) -> int:
        if self.spacing > 0 and self.dash_size > 0:
            length = self.width if self.orientation is Orientation.HORIZONTAL else self.height
            return max(1, math.ceil(abs(length / (self.spacing + self.dash_size))))
        return 1

    def vertices(self) -> list[Point]:
        """Return point pairs, one pair per drawn segment."""
        horizontal = self.orientation is Orientation.HORIZONTAL
        length = self.width if horizontal else self.height
        centre = (self.height if horizontal else self.width) * 0.5

        def point(along: float) -> Point:
            return (along, centre) if horizontal else (centre, along)

        count = self._dash_count()
        if count == 1:
            return [point(0.0), point(length)]

        points: list[Point] = []
        pos = 0.0
        for _ in range(count):
            points.append(point(pos))
            pos = min(pos + self.dash_size, length)
            points.append(point(pos))
            pos += self.spacing
        return points


@dataclass
class ArrowItem:
    """A horizontal line ending in an arrow head or a cross."""

    width: float = 0.0
    height: float = 0.0
    line_color: str = "black"
    arrow_color: str = "green"
    line_width: float = 1.0
    indicator_form: IndicatorForm = IndicatorForm.ARROW

    def real_line_width(self) -> float:
        """Line width limited by the item's height."""
        return min(self.line_width, self.height)

    def vertices(self) -> list[Point]:
        """Return three point pairs: the shaft and the two strokes of the indicator."""
        w, h = self.width, self.height
        if self.indicator_form is IndicatorForm.ARROW:
            stroke = h * 0.5 / math.sin(math.radians(_ARROW_ANGLE_DEGREES))
            arrow_x = math.sqrt(max(0.0, stroke * stroke - (h * 0.5) ** 2))
            arrow_y = 0.0
            return [
                (0.0, h * 0.5),
                (w, h * 0.5),
                (w, h * 0.5),
                (w - arrow_x, max(0.0, arrow_y)),
                (w, h * 0.5),
                (w - arrow_x, min(h, h - arrow_y)),
            ]
        shaft_y = h * 0.5 - self.real_line_width() * 0.5
        return [
            (0.0, shaft_y),
            (w - h * 0.5, shaft_y),
            (w - h, 0.0),
            (w, h),
            (w - h, h),
            (w, 0.0),
        ]