"""Model of the system clock controller and its peripheral-disable registers."""

from __future__ import annotations

UNLOCK_KEY_1 = 0xAA996655
UNLOCK_KEY_2 = 0x556699AA
LOCK_KEY = 0x33333333

_MASK32 = 0xFFFFFFFF

# Peripheral module disable settings, PMD1 to PMD7.
PMD_DEFAULTS = {
    1: 0x1000,
    2: 0x3,
    3: 0x1FE01FF,
    4: 0x1FD,
    5: 0x301F3E3D,
    6: 0x10830001,
    7: 0x500000,
}


class SystemLockedError(RuntimeError):
    """A protected register was written while its lock was engaged."""


class ClockController:
    """Clock configuration with the system unlock sequence and PMD registers.

    Writing the two unlock keys to SYSKEY in order unlocks the system; any
    other write locks it again. PMD registers can be written only while the
    system is unlocked and ``pmd_lock`` is clear.
    """

    def __init__(self):
        self.unlocked = False
        self.pmd_lock = False
        self.pmd = {index: 0 for index in PMD_DEFAULTS}
        self._first_key_seen = False

    def write_syskey(self, value):
        """Write a value to SYSKEY, advancing or resetting the unlock sequence."""
        value &= _MASK32
        if value == UNLOCK_KEY_1:
            self.unlocked = False
            self._first_key_seen = True
        elif value == UNLOCK_KEY_2 and self._first_key_seen:
            self.unlocked = True
            self._first_key_seen = False
        else:
            self.unlocked = False
            self._first_key_seen = False

    def _set_pmd_lock(self, locked):
        if not self.unlocked:
            raise SystemLockedError("system is locked; cannot change PMDLOCK")
        self.pmd_lock = locked

    def set_pmd(self, index, value):
        """Write PMD register ``index`` (1 to 7)."""
        if index not in self.pmd:
            raise IndexError(f"no PMD register {index!r}")
        if not self.unlocked:
            raise SystemLockedError("system is locked; cannot write PMD registers")
        if self.pmd_lock:
            raise SystemLockedError("PMD registers are locked")
        self.pmd[index] = value & _MASK32

    def initialize(self):
        """Unlock, apply the peripheral-disable configuration and lock again."""
        self.write_syskey(0)
        self.write_syskey(UNLOCK_KEY_1)
        self.write_syskey(UNLOCK_KEY_2)

        self._set_pmd_lock(False)
        for index, value in PMD_DEFAULTS.items():
            self.set_pmd(index, value)
        self._set_pmd_lock(True)

        self.write_syskey(LOCK_KEY)