"""Mark/space decision threshold that follows the received levels."""

from __future__ import annotations

from enum import Enum

from .biquad import Biquad, FilterType


class _Tone(Enum):
    MARK = "mark"
    SPACE = "space"


class DynamicThreshold:
    """Tracks the peaks of mark and space levels and filters their midpoint."""

    def __init__(self, cutoff=50.0, sample_rate=8000.0):
        self._lpf = Biquad(FilterType.LPF, 0.0, cutoff, sample_rate, 0.707)
        self._peak = 0.0
        self._mark_max = 0.0
        self._space_max = 0.0
        self._previous = _Tone.MARK
        self.threshold = 0.0

    def update(self, mark_level, space_level):
        """Feed one pair of levels and return the filtered threshold."""
        if mark_level - space_level > 0.0:
            if self._previous is _Tone.SPACE:
                self._space_max = self._peak
                self._peak = 0.0
                self._previous = _Tone.MARK
            self._peak = max(self._peak, mark_level)
        else:
            if self._previous is _Tone.MARK:
                self._mark_max = self._peak
                self._peak = 0.0
                self._previous = _Tone.SPACE
            self._peak = max(self._peak, space_level)
        self.threshold = self._lpf.process((self._mark_max - self._space_max) / 2.0)
        return self.threshold