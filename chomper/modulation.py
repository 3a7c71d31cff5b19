"""Integer-friendly slowing of movement by skipping ticks.

Rather than moving entities by fractional amounts, a modulator skips a
movement tick every so often. At 60 ticks per second the skips are not
visible, and positions stay integral and deterministic.
"""

from __future__ import annotations

import math

_U32_MAX = 2**32 - 1


def _ticks_required(percent: float) -> int:
    denominator = 1.0 - percent
    if denominator == 0:
        return _U32_MAX
    value = 1.0 / denominator
    if math.isnan(value) or value <= 0:
        return 0
    return min(_U32_MAX, math.floor(value + 0.5))


class SimpleTickModulator:
    """Skips one tick in every round(1 / (1 - percent)) ticks."""

    def __init__(self, percent: float) -> None:
        ticks = _ticks_required(percent)
        if ticks == 0:
            raise ValueError(f"percent {percent!r} gives no tick period")
        self._tick_count = ticks
        self._ticks_left = ticks

    def next(self) -> bool:
        """Advance one tick; True if the tick should be acted on, False to skip it."""
        self._ticks_left -= 1
        if self._ticks_left == 0:
            self._ticks_left = self._tick_count
            return False
        return True