import pytest
from hypothesis import given
from hypothesis import strategies as st

from chromakit.filters import (
    ReflectIterator,
    box_filter,
    gaussian_filter,
    gradient,
)

floats = st.floats(min_value=-1000, max_value=1000, allow_nan=False)


@given(st.integers(min_value=1, max_value=20), st.lists(st.booleans(), max_size=60))
def test_reflect_iterator_stays_in_range(size, steps):
    it = ReflectIterator(size)
    for step in steps:
        if step:
            it.move_forward()
        else:
            it.move_back()
        assert 0 <= it.pos < size


@given(st.integers(min_value=1, max_value=20), st.integers(min_value=0, max_value=50))
def test_reflect_iterator_back_undoes_forward(size, steps):
    it = ReflectIterator(size)
    for _ in range(steps):
        it.move_forward()
    before = (it.pos, it.forward)
    it.move_forward()
    it.move_back()
    assert (it.pos, it.forward) == before


def test_reflect_iterator_safe_forward_distance():
    it = ReflectIterator(4)
    assert it.safe_forward_distance() == 3
    it.move_back()
    assert it.forward is False
    assert it.safe_forward_distance() == 0


def test_reflect_iterator_repeats_edge_when_turning():
    it = ReflectIterator(3)
    seen = []
    for _ in range(3):
        seen.append(it.pos)
        it.move_forward()
    seen.append(it.pos)
    assert seen[2] == seen[3] == 2


def test_box_filter_spike():
    assert box_filter([0, 0, 3, 0, 0], 3) == pytest.approx([0, 1, 1, 1, 0])


def test_box_filter_zero_width_and_empty():
    assert box_filter([1.0, 2.0, 3.0], 0) == [0.0, 0.0, 0.0]
    assert box_filter([], 5) == []


@given(st.lists(floats, min_size=1, max_size=30))
def test_box_filter_width_one_is_identity(values):
    assert box_filter(values, 1) == pytest.approx(values)


@given(floats, st.integers(min_value=1, max_value=30), st.integers(min_value=1, max_value=10))
def test_box_filter_constant_is_preserved(value, size, width):
    result = box_filter([value] * size, width)
    assert result == pytest.approx([value] * size, abs=1e-6)


@given(st.lists(floats, min_size=1, max_size=30), st.integers(min_value=1, max_value=40))
def test_box_filter_bounded_by_input(values, width):
    result = box_filter(values, width)
    assert len(result) == len(values)
    low, high = min(values), max(values)
    for item in result:
        assert low - 1e-6 <= item <= high + 1e-6


@given(st.lists(floats, min_size=1, max_size=30))
def test_gaussian_filter_bounded_and_length(values):
    original = list(values)
    result = gaussian_filter(values, 1.6, 3)
    assert values == original
    assert len(result) == len(values)
    low, high = min(values), max(values)
    for item in result:
        assert low - 1e-6 <= item <= high + 1e-6


def test_gaussian_filter_matches_three_box_passes():
    values = [0.0, 1.0, 5.0, 2.0, 8.0, 3.0, 3.0, 0.0, 4.0, 9.0]
    expected = box_filter(box_filter(box_filter(values, 3), 3), 3)
    assert gaussian_filter(values, 1.6, 3) == pytest.approx(expected)


def test_gaussian_filter_constant_is_preserved():
    assert gaussian_filter([2.5] * 12, 2.0, 4) == pytest.approx([2.5] * 12)


def test_gradient_short_inputs():
    assert gradient([]) == []
    assert gradient([5]) == [0]
    assert gradient([2, 7]) == [5, 5]


@given(floats, st.floats(min_value=-10, max_value=10), st.integers(min_value=2, max_value=30))
def test_gradient_of_line_is_constant(start, step, size):
    line = [start + k * step for k in range(size)]
    assert gradient(line) == pytest.approx([step] * size, abs=1e-6)


@given(st.lists(floats, min_size=3, max_size=30))
def test_gradient_ends_are_one_sided(values):
    result = gradient(values)
    assert len(result) == len(values)
    assert result[0] == values[1] - values[0]
    assert result[-1] == values[-1] - values[-2]