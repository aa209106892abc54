"""Solutions to a collection of short programming-contest problems."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence

_NO_JOY = -1000000000


def can_split_watermelon(weight: int) -> bool:
    """Whether ``weight`` splits into two positive even parts."""
    return weight % 2 == 0 and weight != 2


def _digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(number))


def digit_sum_steps(number: str) -> int:
    """How many digit-sum replacements turn ``number`` into a single digit."""
    if len(number) == 1:
        return 0
    total = sum(int(digit) for digit in number)
    steps = 1
    while len(str(total)) > 1:
        total = _digit_sum(total)
        steps += 1
    return steps


def format_tags(text: str) -> list[str]:
    """Lay out single-letter tags one per line, indented two spaces per level."""
    lines: list[str] = []
    depth = 0
    open_tags = [" "]
    current = ""
    for char in text:
        if char != ">":
            current += char
            continue
        if open_tags[-1] == current[-1:] and current[-2:-1] == "/":
            depth -= 1
            lines.append("  " * depth + current + ">")
            open_tags.pop()
        else:
            lines.append("  " * depth + current + ">")
            depth += 1
            open_tags.append(current[-1:])
        current = ""
    return lines


def beautiful_matrix_moves(grid: Sequence[Sequence[int]]) -> int:
    """Moves needed to bring the single 1 of a 5x5 grid to its centre."""
    ones = [
        (row, col)
        for row, line in enumerate(grid)
        for col, cell in enumerate(line)
        if cell == 1
    ]
    if len(ones) != 1:
        raise ValueError("grid must contain exactly one 1")
    row, col = ones[0]
    return abs(row - 2) + abs(col - 2)


def next_distinct_year(year: int) -> int:
    """The first year after ``year`` whose four digits are all different."""
    candidate = year + 1
    while True:
        units = candidate % 10
        tens = (candidate % 100 - units) // 10
        hundreds = (candidate % 1000 - candidate % 100) // 100
        thousands = candidate // 1000
        if len({units, tens, hundreds, thousands}) == 4:
            return candidate
        candidate += 1


def max_lunch_joy(time_limit: int, restaurants: Iterable[tuple[int, int]]) -> int:
    """Best joy over ``(joy, time)`` pairs, losing the time spent over the limit."""
    return max(
        (joy - time + time_limit if time > time_limit else joy for joy, time in restaurants),
        default=_NO_JOY,
    )


def min_elephant_steps(distance: int) -> int:
    """Fewest steps of length at most 5 to cover ``distance``."""
    return math.ceil(distance / 5)


def min_watering_hours(length: int, buckets: Iterable[int]) -> int:
    """Hours to water ``length`` with the widest bucket that divides it."""
    widest = max((bucket for bucket in buckets if length % bucket == 0), default=0)
    if widest == 0:
        raise ValueError("no bucket divides the garden length")
    return length // widest


def remove_duplicates_keep_last(numbers: Iterable[int]) -> list[int]:
    """Keep only the last occurrence of each number, preserving order."""
    seen: set[int] = set()
    kept: list[int] = []
    for number in reversed(list(numbers)):
        if number not in seen:
            seen.add(number)
            kept.append(number)
    kept.reverse()
    return kept


def min_x_removals(text: str) -> int:
    """Fewest characters to delete so ``text`` has no ``xxx``."""
    removed = 0
    while (position := text.find("xxx")) != -1:
        text = text[:position] + text[position + 1 :]
        removed += 1
    return removed


def minimize_number(length: int, changes: int, digits: str) -> str:
    """Smallest number without leading zeros using at most ``changes`` edits."""
    if len(digits) == 1 and changes > 0:
        return "0"
    result: list[str] = []
    for position in range(length):
        digit = digits[position]
        if position < changes:
            best = "1" if position == 0 else "0"
            if digit == best:
                changes += 1
            result.append(best)
        else:
            result.append(digit)
    return "".join(result)


def round_summands(number: int) -> list[int]:
    """Split ``number`` into round numbers, largest first."""
    text = str(number)
    return [
        int(digit) * 10 ** (len(text) - position - 1)
        for position, digit in enumerate(text)
        if digit != "0"
    ]


def bishop_position(board: Sequence[str]) -> list[tuple[int, int]]:
    """1-based cells of the bishop attacking the ``#`` cells of an 8x8 board."""
    if len(board) != 8:
        raise ValueError("board must have 8 rows")
    marks = [row.count("#") for row in board]
    return [
        (row + 1, col + 1)
        for row in range(1, 7)
        if marks[row - 1] == 2 and marks[row + 1] == 2 and marks[row] == 1
        for col, cell in enumerate(board[row][:8])
        if cell == "#"
    ]


def max_product_after_increment(numbers: Sequence[int]) -> int:
    """Largest product after adding one to exactly one of ``numbers``."""
    if not numbers:
        raise ValueError("numbers must not be empty")
    smallest = min(numbers)
    zeros = sum(1 for number in numbers if number == 0)
    product = math.prod(number for number in numbers if number != 0)
    if zeros == 0:
        return (product // smallest) * (smallest + 1)
    if zeros == 1:
        return product
    return 0


def min_pour_moves(a: int, b: int, c: int) -> int:
    """Moves of at most ``c`` units to equalise vessels holding ``a`` and ``b``."""
    return math.ceil(abs(a - b) / 2.0 / c)


def alternating_sum(numbers: Iterable[int]) -> int:
    """Sum of ``numbers`` with signs alternating from plus."""
    return sum(number if position % 2 == 0 else -number for position, number in enumerate(numbers))


def max_digit_string(digits: str) -> str:
    """Lexicographically largest string reachable by moving digits left,
    each move to the left decreasing the moved digit by one."""
    values = [int(char) for char in digits]
    start = 0
    while start < len(values):
        best = values[start]
        best_at = start
        for shift, candidate in enumerate(values[start + 1 : start + 9], start=1):
            if candidate - shift > best:
                best = candidate - shift
                best_at = start + shift
        if best_at != start:
            del values[best_at]
            values.insert(start, best)
        start += 1
    return "".join(str(value) for value in values)


def exam_pass_flags(n: int, lists: Sequence[int], known: Sequence[int]) -> str:
    """For each list missing question ``lists[i]``, ``1`` if every question on it is known."""
    if len(known) < n - 1:
        return "0" * len(lists)
    if len(known) == n:
        return "1" * len(lists)
    known_set = set(known)
    return "".join("0" if missing in known_set else "1" for missing in lists)


def count_interesting_pairs(x: int, y: int, numbers: Iterable[int]) -> int:
    """Count of pairs between the bounds ``x`` and ``y`` on the remaining sum."""
    values = sorted(numbers)
    total = sum(values)
    count = 0
    for position in range(len(values) - 1, -1, -1):
        upper = bisect_left(values, total - values[position] - x, 0, position + 1)
        lower = bisect_left(values, total - values[position] - y, 0, position + 1)
        count += abs(lower - upper)
    return count