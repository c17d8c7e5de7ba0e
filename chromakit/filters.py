"""Smoothing and differencing of one-dimensional sequences.

Box and approximate Gaussian filters treat the edges by reflection: the
window runs past an end and comes back, repeating the edge sample.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


class ReflectIterator:
    """Index that walks over ``range(size)`` and bounces at both ends."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.pos = 0
        self.forward = True

    def __repr__(self) -> str:
        return f"ReflectIterator(size={self.size}, pos={self.pos}, forward={self.forward})"

    def move_forward(self) -> None:
        """Step one place in the current direction, turning at an edge."""
        if self.forward:
            if self.pos + 1 == self.size:
                self.forward = False
            else:
                self.pos += 1
        elif self.pos == 0:
            self.forward = True
        else:
            self.pos -= 1

    def move_back(self) -> None:
        """Undo one forward step."""
        if self.forward:
            if self.pos == 0:
                self.forward = False
            else:
                self.pos -= 1
        elif self.pos + 1 == self.size:
            self.forward = True
        else:
            self.pos += 1

    def safe_forward_distance(self) -> int:
        """Return how many forward steps can be taken before the next turn."""
        if self.forward:
            return self.size - self.pos - 1
        return 0


def box_filter(values: Iterable[float], width: int) -> list[float]:
    """Return the moving average of ``values`` over a window of ``width``.

    A width of zero yields a sequence of zeros of the same length.
    """
    data = list(values)
    size = len(data)
    if width == 0 or size == 0:
        return [0.0] * size

    left = width // 2
    right = width - left

    it1 = ReflectIterator(size)
    it2 = ReflectIterator(size)
    for _ in range(left):
        it1.move_back()
        it2.move_back()

    total = 0.0
    for _ in range(width):
        total += data[it2.pos]
        it2.move_forward()

    out: list[float] = []

    def reflected_steps(count: int) -> None:
        nonlocal total
        for _ in range(count):
            out.append(total / width)
            total += data[it2.pos] - data[it1.pos]
            it1.move_forward()
            it2.move_forward()

    if size > width:
        reflected_steps(left)
        for _ in range(size - width - 1):
            out.append(total / width)
            total += data[it2.pos] - data[it1.pos]
            it1.pos += 1
            it2.pos += 1
        reflected_steps(right + 1)
    else:
        reflected_steps(size)
    return out


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def gaussian_filter(values: Iterable[float], sigma: float, n: int) -> list[float]:
    """Approximate a Gaussian blur of ``sigma`` by ``n`` passes of box filters."""
    w = math.floor(math.sqrt(12 * sigma * sigma / n + 1))
    wl = w - (1 if w % 2 == 0 else 0)
    wu = wl + 2
    m = _round_half_away(
        (12 * sigma * sigma - n * wl * wl - 4 * n * wl - 3 * n) / (-4 * wl - 4)
    )

    result = list(values)
    passes = 0
    while passes < m:
        result = box_filter(result, wl)
        passes += 1
    while passes < n:
        result = box_filter(result, wu)
        passes += 1
    return result


def gradient(values: Sequence[float] | Iterable[float]) -> list[float]:
    """Return central differences, with one-sided differences at the ends."""
    data = list(values)
    if not data:
        return []
    if len(data) == 1:
        return [0]
    out: list[float] = [data[1] - data[0]]
    out.extend((after - before) / 2 for before, after in zip(data, data[2:]))
    out.append(data[-1] - data[-2])
    return out