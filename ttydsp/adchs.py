"""Register-level model of the high-speed ADC peripheral.

The model keeps the peripheral's registers as plain integers so that the
configuration written by :meth:`Adchs.initialize` and the effect of each
operation can be inspected. :meth:`Adchs.complete_conversion` stands in for
the converter finishing a conversion.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag

_MASK32 = 0xFFFFFFFF
_CHANNELS_PER_WORD = 32

# ADCCON1
_ON = 1 << 15
# ADCCON2
_BGVRRDY = 1 << 31
_REFFLT = 1 << 30
_EOSRDY = 1 << 29
# ADCCON3
_ADINSEL_MASK = 0x3F
_GLSWTRG = 1 << 6
_GSWTRG = 1 << 7
_RQCNVRT = 1 << 8
_DIGEN_SHIFT = 16
# ADCANCON
_ANEN4 = 1 << 4
_WKRDY4 = 1 << 12

_ADC4TIME = 0x3010001
_ADCCON1_INIT = 0x600000
_ADCCON3_INIT = 0x1000000


class ModuleMask(IntFlag):
    """Bits selecting the converter modules."""

    MODULE0 = 1 << 0
    MODULE1 = 1 << 1
    MODULE2 = 1 << 2
    MODULE3 = 1 << 3
    MODULE4 = 1 << 4
    MODULE7 = 1 << 7


Channel = IntEnum(
    "Channel",
    {f"CH{n}": n for n in (*range(35), 43, 44)},
    module=__name__,
)
Channel.__doc__ = "Analog input channels available on the device."


def _split(channel):
    """Return the register word index and bit mask for a channel."""
    ch = Channel(channel)
    return divmod(int(ch), _CHANNELS_PER_WORD)[0], 1 << (ch % _CHANNELS_PER_WORD)


class Adchs:
    """The ADC peripheral: control registers, channel flags and results."""

    def __init__(self):
        self.adc4_calibration = 0
        self.reference_fault = False
        self.adccon1 = 0
        self.adccon2 = 0
        self.adccon3 = 0
        self.adc4cfg = 0
        self.adc4time = 0
        self.adctrgmode = 0
        self.adctrg = [0, 0, 0]
        self.adctrgsns = 0
        self.adcimcon = [0, 0, 0]
        self.adccss = [0, 0]
        self.adcancon = 0
        self.adcgirqen = [0, 0]
        self.adceien = [0, 0]
        self.adcdstat = [0, 0]
        self.data = {}

    def initialize(self):
        """Configure the converter and bring module 4 on line.

        Raises RuntimeError if the reference voltage reports a fault.
        """
        self.adccon1 &= ~_ON & _MASK32
        self.adc4cfg = self.adc4_calibration
        self.adc4time = _ADC4TIME

        self.adccon1 = _ADCCON1_INIT
        self.adccon2 = 0
        self.adccon3 = _ADCCON3_INIT
        self.adctrgmode = 0
        self.adctrg = [0, 0, 0]
        self.adctrgsns = 0
        self.adcimcon = [0, 0, 0]
        self.adccss = [0, 0]

        self.adccon1 |= _ON
        if self.reference_fault:
            self.adccon2 |= _REFFLT
        else:
            self.adccon2 |= _BGVRRDY
        if self.adccon2 & _REFFLT or not self.adccon2 & _BGVRRDY:
            raise RuntimeError("ADC reference voltage fault")

        self.adcancon |= _ANEN4
        self.adcancon |= _WKRDY4
        self.adccon3 |= ModuleMask.MODULE4 << _DIGEN_SHIFT

    def modules_enable(self, module_mask):
        """Enable the digital part of the given modules."""
        self.adccon3 = (self.adccon3 | (int(module_mask) << _DIGEN_SHIFT)) & _MASK32

    def modules_disable(self, module_mask):
        """Disable the digital part of the given modules."""
        self.adccon3 &= ~(int(module_mask) << _DIGEN_SHIFT) & _MASK32

    @staticmethod
    def _set_flag(words, channel, on):
        index, bit = _split(channel)
        if on:
            words[index] |= bit
        else:
            words[index] &= ~bit & _MASK32

    def result_interrupt_enable(self, channel):
        """Enable the result-ready interrupt of a channel."""
        self._set_flag(self.adcgirqen, channel, True)

    def result_interrupt_disable(self, channel):
        """Disable the result-ready interrupt of a channel."""
        self._set_flag(self.adcgirqen, channel, False)

    def early_interrupt_enable(self, channel):
        """Enable the early interrupt of a channel."""
        self._set_flag(self.adceien, channel, True)

    def early_interrupt_disable(self, channel):
        """Disable the early interrupt of a channel."""
        self._set_flag(self.adceien, channel, False)

    def global_edge_conversion_start(self):
        """Trigger a global software edge conversion."""
        self.adccon3 |= _GSWTRG

    def global_level_conversion_start(self):
        """Start global software level-triggered conversions."""
        self.adccon3 |= _GLSWTRG

    def global_level_conversion_stop(self):
        """Stop global software level-triggered conversions."""
        self.adccon3 &= ~_GLSWTRG & _MASK32

    def channel_conversion_start(self, channel):
        """Select a channel and request a conversion of it."""
        ch = Channel(channel)
        self.adccon3 = (self.adccon3 & ~_ADINSEL_MASK & _MASK32) | int(ch)
        self.adccon3 |= _RQCNVRT

    def complete_conversion(self, channel, value):
        """Store a conversion result for a channel and flag it as ready."""
        ch = Channel(channel)
        self.data[ch] = int(value) & _MASK32
        index, bit = _split(ch)
        self.adcdstat[index] |= bit
        if self.adccon3 & _ADINSEL_MASK == ch:
            self.adccon3 &= ~_RQCNVRT & _MASK32
        scan = self.adccss[0] | (self.adccss[1] << _CHANNELS_PER_WORD)
        if scan and ch == scan.bit_length() - 1:
            self.adccon2 |= _EOSRDY

    def result_is_ready(self, channel):
        """Return whether a channel has an unread result."""
        index, bit = _split(channel)
        return bool(self.adcdstat[index] & bit)

    def result_get(self, channel):
        """Return a channel's result as 16 bits; reading clears its ready flag."""
        ch = Channel(channel)
        index, bit = _split(ch)
        self.adcdstat[index] &= ~bit & _MASK32
        return self.data.get(ch, 0) & 0xFFFF

    def eos_status(self):
        """Return whether the end of the scan sequence has been reached."""
        return bool(self.adccon2 & _EOSRDY)