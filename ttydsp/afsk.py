"""Audio FSK keying driven by the current loop state."""

from __future__ import annotations

from typing import Callable


class AfskGenerator:
    """Sets an oscillator to the mark or space tone from loop samples.

    ``set_frequency`` is called with the chosen frequency in hertz; the
    generator starts on the mark tone.
    """

    def __init__(self, set_frequency: Callable[[float], None], mark_freq, space_freq):
        self.set_frequency = set_frequency
        self.mark_freq = mark_freq
        self.space_freq = space_freq
        self.set_frequency(mark_freq)

    def update(self, loop_open):
        """Select space when the loop is open, mark otherwise; return the tone."""
        freq = self.space_freq if loop_open else self.mark_freq
        self.set_frequency(freq)
        return freq