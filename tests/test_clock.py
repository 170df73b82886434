import pytest

from ttydsp.clock import (
    LOCK_KEY,
    PMD_DEFAULTS,
    UNLOCK_KEY_1,
    UNLOCK_KEY_2,
    ClockController,
    SystemLockedError,
)


def _unlocked():
    clk = ClockController()
    clk.write_syskey(0)
    clk.write_syskey(UNLOCK_KEY_1)
    clk.write_syskey(UNLOCK_KEY_2)
    return clk


def test_initialize_applies_pmd_configuration():
    clk = ClockController()
    clk.initialize()
    assert clk.pmd == PMD_DEFAULTS


def test_initialize_leaves_system_locked():
    clk = ClockController()
    clk.initialize()
    assert clk.unlocked is False
    assert clk.pmd_lock is True


def test_initialize_writes_configured_pmd_values():
    clk = ClockController()
    clk.initialize()
    assert clk.pmd[1] == 0x1000
    assert clk.pmd[5] == 0x301F3E3D


def test_starts_locked_and_rejects_pmd_write():
    clk = ClockController()
    with pytest.raises(SystemLockedError):
        clk.set_pmd(1, 5)
    assert clk.pmd[1] == 0


def test_unlock_sequence_allows_pmd_write():
    clk = _unlocked()
    assert clk.unlocked is True
    clk.set_pmd(3, 42)
    assert clk.pmd[3] == 42


def test_keys_in_wrong_order_do_not_unlock():
    clk = ClockController()
    clk.write_syskey(UNLOCK_KEY_2)
    clk.write_syskey(UNLOCK_KEY_1)
    assert clk.unlocked is False


def test_interrupted_sequence_does_not_unlock():
    clk = ClockController()
    clk.write_syskey(UNLOCK_KEY_1)
    clk.write_syskey(0)
    clk.write_syskey(UNLOCK_KEY_2)
    assert clk.unlocked is False


def test_lock_key_relocks():
    clk = _unlocked()
    clk.write_syskey(LOCK_KEY)
    assert clk.unlocked is False
    with pytest.raises(SystemLockedError):
        clk.set_pmd(2, 1)


def test_pmd_lock_blocks_writes_even_when_unlocked():
    clk = ClockController()
    clk.initialize()
    clk.write_syskey(UNLOCK_KEY_1)
    clk.write_syskey(UNLOCK_KEY_2)
    with pytest.raises(SystemLockedError):
        clk.set_pmd(1, 0)
    assert clk.pmd[1] == PMD_DEFAULTS[1]


@pytest.mark.parametrize("index", [0, 8, -1])
def test_unknown_pmd_index(index):
    clk = _unlocked()
    with pytest.raises(IndexError):
        clk.set_pmd(index, 1)


def test_pmd_write_is_truncated_to_32_bits():
    clk = _unlocked()
    clk.set_pmd(7, (1 << 32) | 9)
    assert clk.pmd[7] == 9