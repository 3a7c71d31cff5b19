"""Small grid utilities."""

from __future__ import annotations


def is_adjacent(a: tuple[int, int], b: tuple[int, int], diagonal: bool) -> bool:
    """Whether two cells touch; diagonal neighbours count only when asked."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    if (dx, dy) in ((0, 1), (1, 0)):
        return True
    return diagonal and (dx, dy) == (1, 1)