"""Software receiver for 5-bit Baudot current-loop signalling at 8 kHz."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

LETTERS = "~E\nA SIU\rDRJNFCKTZLWHYPQOBG~MXV~"
FIGURES = "~3\n- \a87\r$4',!:(5\")2#6019?&~./;~"

FIGS_SHIFT = 27
LTRS_SHIFT = 31
BLANK = 0
SPACE = 4

_HALF_BIT_WAIT = 88
_BIT_WAIT = 176


class BaudotReceiver:
    """Samples the loop once per call and decodes Baudot frames.

    ``feed`` takes ``True`` when the loop is open (space) and ``False`` when
    current flows (mark). ``on_char``, if given, is called once per completed
    frame with the decoded character, or ``None`` for shift and blank codes.
    """

    def __init__(self, on_char: Optional[Callable[[Optional[str]], None]] = None):
        self.on_char = on_char
        self.char_count = 0
        self.bad_stop_bit_count = 0
        self.figures = False
        self._state = 0
        self._wait = 0
        self._code = 0

    def feed(self, loop_open):
        """Process one sample; return a decoded character or ``None``."""
        if self._wait:
            self._wait -= 1
            return None

        space = bool(loop_open)
        state = self._state
        if state == 0:
            if space:
                self._state = 1
                self._wait = _HALF_BIT_WAIT
        elif state == 1:
            if space:
                self._code = 0
                self.char_count += 1
                self._state = 2
                self._wait = _BIT_WAIT
            else:
                self._state = 0
        elif 2 <= state <= 6:
            if not space:
                self._code |= 1 << (state - 2)
            self._state += 1
            self._wait = _BIT_WAIT
        else:
            return self._finish_frame(space)
        return None

    def _finish_frame(self, space):
        if space:
            self.bad_stop_bit_count += 1
        code = self._code & 31
        result = None
        if code == FIGS_SHIFT:
            self.figures = True
        elif code == LTRS_SHIFT:
            self.figures = False
        elif code != BLANK:
            if code == SPACE:
                self.figures = False
            result = (FIGURES if self.figures else LETTERS)[code]
        if self.on_char is not None:
            self.on_char(result)
        self._state = 0
        return result


def decode_samples(samples: Iterable[bool]) -> str:
    """Decode a whole stream of loop samples into text."""
    receiver = BaudotReceiver()
    return "".join(ch for ch in map(receiver.feed, samples) if ch is not None)