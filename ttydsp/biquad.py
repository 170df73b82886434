"""Biquad IIR filters built from the audio EQ cookbook formulae."""

from __future__ import annotations

import math
from enum import IntEnum


class FilterType(IntEnum):
    """Kinds of biquad response."""

    LPF = 0
    HPF = 1
    BPF = 2
    NOTCH = 3
    PEQ = 4
    LSH = 5
    HSH = 6


class Biquad:
    """A second-order IIR filter section with its own delay line.

    ``db_gain`` is used only by the peaking and shelving types.
    """

    def __init__(self, filter_type, db_gain, freq, srate, q):
        try:
            kind = FilterType(filter_type)
        except ValueError:
            raise ValueError(f"unknown filter type: {filter_type!r}") from None
        self.filter_type = kind

        a = 10.0 ** (db_gain / 40.0)
        omega = 2.0 * math.pi * freq / srate
        sn = math.sin(omega)
        cs = math.cos(omega)
        alpha = sn / (2.0 * q)
        beta = math.sqrt(a + a)

        if kind is FilterType.LPF:
            b0, b1, b2 = (1 - cs) / 2, 1 - cs, (1 - cs) / 2
            a0, a1, a2 = 1 + alpha, -2 * cs, 1 - alpha
        elif kind is FilterType.HPF:
            b0, b1, b2 = (1 + cs) / 2, -(1 + cs), (1 + cs) / 2
            a0, a1, a2 = 1 + alpha, -2 * cs, 1 - alpha
        elif kind is FilterType.BPF:
            b0, b1, b2 = alpha, 0.0, -alpha
            a0, a1, a2 = 1 + alpha, -2 * cs, 1 - alpha
        elif kind is FilterType.NOTCH:
            b0, b1, b2 = 1.0, -2 * cs, 1.0
            a0, a1, a2 = 1 + alpha, -2 * cs, 1 - alpha
        elif kind is FilterType.PEQ:
            b0, b1, b2 = 1 + alpha * a, -2 * cs, 1 - alpha * a
            a0, a1, a2 = 1 + alpha / a, -2 * cs, 1 - alpha / a
        elif kind is FilterType.LSH:
            b0 = a * ((a + 1) - (a - 1) * cs + beta * sn)
            b1 = 2 * a * ((a - 1) - (a + 1) * cs)
            b2 = a * ((a + 1) - (a - 1) * cs - beta * sn)
            a0 = (a + 1) + (a - 1) * cs + beta * sn
            a1 = -2 * ((a - 1) + (a + 1) * cs)
            a2 = (a + 1) + (a - 1) * cs - beta * sn
        else:  # HSH
            b0 = a * ((a + 1) + (a - 1) * cs + beta * sn)
            b1 = -2 * a * ((a - 1) + (a + 1) * cs)
            b2 = a * ((a + 1) + (a - 1) * cs - beta * sn)
            a0 = (a + 1) - (a - 1) * cs + beta * sn
            a1 = 2 * ((a - 1) - (a + 1) * cs)
            a2 = (a + 1) - (a - 1) * cs - beta * sn

        self.b = (b0 / a0, b1 / a0, b2 / a0)
        self.a = (a1 / a0, a2 / a0)
        self.reset()

    def reset(self):
        """Clear the delay line."""
        self._x1 = self._x2 = 0.0
        self._y1 = self._y2 = 0.0

    def process(self, sample):
        """Filter one sample and return the output."""
        b0, b1, b2 = self.b
        a1, a2 = self.a
        result = (
            b0 * sample + b1 * self._x1 + b2 * self._x2
            - a1 * self._y1 - a2 * self._y2
        )
        self._x2, self._x1 = self._x1, sample
        self._y2, self._y1 = self._y1, result
        return result