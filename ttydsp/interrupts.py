"""Interrupt vector table mapping device vectors to peripheral handlers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict

# All vectors in use run at priority level 1 with the shadow register set.
PRIORITY = 1


class Vector(Enum):
    """Interrupt vectors used by the configuration."""

    TIMER_2 = "TIMER_2"
    UART2_FAULT = "UART2_FAULT"
    UART2_RX = "UART2_RX"
    UART2_TX = "UART2_TX"


class InterruptTable:
    """Holds one handler per vector and forwards interrupts to it."""

    def __init__(self):
        self._handlers: Dict[Vector, Callable[[], Any]] = {}

    def register(self, vector, handler):
        """Attach ``handler`` to ``vector``, replacing any earlier handler."""
        if not callable(handler):
            raise TypeError(f"handler for {vector!r} is not callable")
        self._handlers[Vector(vector)] = handler

    def dispatch(self, vector):
        """Run the handler of ``vector`` and return what it returns.

        Raises LookupError when no handler is attached to the vector.
        """
        vec = Vector(vector)
        try:
            handler = self._handlers[vec]
        except KeyError:
            raise LookupError(f"no handler registered for {vec.name}") from None
        return handler()