"""Signal-processing blocks and peripheral models for an RTTY terminal unit."""

__version__ = "0.1.0"
__all__ = [
    "adchs",
    "afsk",
    "agc",
    "baudot",
    "biquad",
    "clock",
    "exceptions",
    "initialization",
    "interrupts",
    "pwm",
    "threshold",
]