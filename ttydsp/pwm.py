"""Mapping of audio samples onto PWM compare counts."""

from __future__ import annotations


def duty_cycle_count(sample, period):
    """Return the compare value for a sample in -1..+1 (0 % to 100 % duty)."""
    return int(((1.0 + sample) / 2.0) * float(period))