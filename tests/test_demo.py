import random

from qcc.demo import TableModel, adev_samples, big_data_samples, small_data_samples
from qcc.geometry import Orientation


def test_header_labels():
    model = TableModel()
    assert model.header_data(3, Orientation.HORIZONTAL) == "hor-3"
    assert model.header_data(7, Orientation.VERTICAL) == "vertical header - 7"


def test_default_table_size():
    model = TableModel()
    assert model.row_count() == 10000
    assert model.column_count() == 200


def test_cell_data_inside_and_outside():
    model = TableModel()
    assert model.data(2, 5) == "data 2-5"
    assert model.data(-1, 0) is None
    assert model.data(0, 200) is None
    assert model.data(10000, 0) is None
    assert model.data(9999, 199) == "data 9999-199"


def test_adev_samples_are_fixed():
    samples = adev_samples()
    assert len(samples) == 8
    assert samples[0] == (1.0, 4.9e-13)
    assert samples[-1] == (100000.0, 3.88e-13)
    xs = [x for x, _ in samples]
    assert xs == sorted(xs)


def test_big_data_samples_range_and_determinism():
    first = big_data_samples(500, random.Random(1))
    second = big_data_samples(500, random.Random(1))
    assert first == second
    assert [x for x, _ in first] == [float(t) for t in range(500)]
    assert all(0.0 <= y <= 5.0 for _, y in first)


def test_small_data_samples_range():
    start = 1594196524
    samples = small_data_samples(start, 200, random.Random(7))
    assert len(samples) == 200
    assert samples[0][0] == float(start)
    assert samples[-1][0] == float(start + 199)
    assert all(0.0 <= y <= 1_000_000.0 for _, y in samples)


def test_small_data_samples_default_start_is_now():
    import time

    before = int(time.time())
    samples = small_data_samples(count=3, rng=random.Random(0))
    after = int(time.time())
    assert before <= samples[0][0] <= after
    assert samples[2][0] - samples[0][0] == 2.0