"""Automatic gain control normalising a sample stream to a target level."""

from __future__ import annotations

from .biquad import Biquad, FilterType


class Agc:
    """Scales samples so their averaged rectified level tracks ``target_level``."""

    def __init__(self, target_level=0.5, max_gain=200.0, cutoff=1.0, sample_rate=8000.0):
        self.target_level = target_level
        self.max_gain = max_gain
        self.gain = 1.0
        self._lpf = Biquad(FilterType.LPF, 0.0, cutoff, sample_rate, 0.707)

    def process(self, sample):
        """Return ``sample`` multiplied by the current gain."""
        level = self._lpf.process(abs(sample))
        if level == 0.0:
            level = self.target_level
        self.gain = min(self.target_level / level, self.max_gain)
        return sample * self.gain