"""Puzzles over lists of integers and strings."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

_OPPOSITES = {
    "NORTH": "SOUTH",
    "SOUTH": "NORTH",
    "WEST": "EAST",
    "EAST": "WEST",
}


def choose_best_sum(t: int, k: int, ls: Sequence[int]) -> int:
    """Largest sum of ``k`` distances not above ``t``, or -1 if there is none."""
    if k < 0:
        raise ValueError(f"k must not be negative: {k}")
    if k > len(ls):
        return -1
    best = -1
    for combination in itertools.combinations(ls, k):
        total = sum(combination)
        if best < total <= t:
            best = total
    return best


def dir_reduc(directions: Iterable[str]) -> list[str]:
    """Remove adjacent opposite directions until none remain."""
    stack: list[str] = []
    for direction in directions:
        if stack and _OPPOSITES.get(stack[-1]) == direction:
            stack.pop()
        else:
            stack.append(direction)
    return stack


def josephus(items: Iterable[int], k: int) -> list[int]:
    """Order in which items are removed when every ``k``-th one is taken out."""
    if k < 1:
        raise ValueError(f"k must be positive: {k}")
    remaining = list(items)
    result = []
    selector = k - 1
    while remaining:
        selector %= len(remaining)
        result.append(remaining.pop(selector))
        selector += k - 1
    return result


def josephus_survivor(n: int, k: int) -> int:
    """Last of ``1..n`` left standing by simulating the circle."""
    if n < 1:
        raise ValueError(f"n must be positive: {n}")
    return josephus(range(1, n + 1), k)[-1]


def josephus_survivor_recursive(n: int, k: int) -> int:
    """Last of ``1..n`` left standing, by the Josephus recurrence."""
    if n < 1:
        raise ValueError(f"n must be positive: {n}")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor


def _john_ann(n: int) -> tuple[list[int], list[int]]:
    john_list = [0, 0]
    ann_list = [1, 1]
    for i in range(2, n):
        john_list.append(i - ann_list[john_list[i - 1]])
        ann_list.append(i - john_list[ann_list[i - 1]])
    return john_list, ann_list


def john(n: int) -> list[int]:
    """Katas done by John on each of the first ``n`` days."""
    return _john_ann(n)[0]


def ann(n: int) -> list[int]:
    """Katas done by Ann on each of the first ``n`` days."""
    return _john_ann(n)[1]


def sum_john(n: int) -> int:
    """Total katas done by John over ``n`` days."""
    return sum(john(n))


def sum_ann(n: int) -> int:
    """Total katas done by Ann over ``n`` days."""
    return sum(ann(n))


@dataclass
class PosPeaks:
    """Positions and values of the peaks of a sequence."""

    pos: list[int] = field(default_factory=list)
    peaks: list[int] = field(default_factory=list)


def pick_peaks(array: Sequence[int]) -> PosPeaks:
    """Find local maxima, reporting plateaus by their first position."""
    result = PosPeaks()
    peak_index: int | None = None
    for i, (prev, curr) in enumerate(itertools.pairwise(array), start=1):
        if curr > prev:
            peak_index = i
        elif curr < prev and peak_index is not None:
            result.pos.append(peak_index)
            result.peaks.append(array[peak_index])
            peak_index = None
    return result


def _format_run(first: int, last: int) -> list[str]:
    if last - first >= 2:
        return [f"{first}-{last}"]
    if first == last:
        return [str(first)]
    return [str(first), str(last)]


def range_extraction(numbers: Sequence[int]) -> str:
    """Format sorted integers, collapsing runs of three or more into ranges."""
    if not numbers:
        raise ValueError("numbers must not be empty")
    runs = []
    first = last = numbers[0]
    for value in numbers[1:]:
        if value == last + 1:
            last = value
            continue
        runs.append((first, last))
        first = last = value
    runs.append((first, last))
    return ",".join(part for run in runs for part in _format_run(*run))