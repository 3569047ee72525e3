"""Sample data sources: a large synthetic table and sample point series."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass

from qcc.geometry import Orientation

__all__ = [
    "TableModel",
    "adev_samples",
    "big_data_samples",
    "small_data_samples",
]

Point = tuple[float, float]


@dataclass
class TableModel:
    """A read-only table whose cells are labelled by their position."""

    rows: int = 10000
    columns: int = 200

    def header_data(self, section: int, orientation: Orientation) -> str:
        if orientation is Orientation.HORIZONTAL:
            return f"hor-{section}"
        return f"vertical header - {section}"

    def row_count(self) -> int:
        return self.rows

    def column_count(self) -> int:
        return self.columns

    def data(self, row: int, column: int) -> str | None:
        """Return the cell label, or None outside the table."""
        if 0 <= row < self.rows and 0 <= column < self.columns:
            return f"data {row}-{column}"
        return None


def adev_samples() -> list[Point]:
    """Allan deviation samples as (averaging time, deviation) pairs."""
    return [
        (1.0, 4.9e-13),
        (10.0, 1.01e-13),
        (100.0, 4.07e-14),
        (1000.0, 1.45e-14),
        (3600.0, 7.62e-15),
        (10000.0, 4.69e-15),
        (86400.0, 4.01e-13),
        (100000.0, 3.88e-13),
    ]


def big_data_samples(count: int = 1_000_000, rng: random.Random | None = None) -> list[Point]:
    """Return ``count`` points (t, U) with U uniform in [0, 5]."""
    rng = rng or random.Random()
    return [(float(t), rng.random() * 5.0) for t in range(count)]


def small_data_samples(
    start: int | None = None, count: int = 200, rng: random.Random | None = None
) -> list[Point]:
    """Return ``count`` points at consecutive seconds from ``start`` with values in [0, 1e6]."""
    rng = rng or random.Random()
    if start is None:
        start = int(time.time())
    low, high = 0.0, 1_000_000.0
    return [(float(i), rng.random() * (high - low) + low) for i in range(start, start + count)]