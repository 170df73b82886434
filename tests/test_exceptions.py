import pytest

from ttydsp.exceptions import (
    CpuException,
    ExceptionCode,
    ExceptionKind,
    decode_cause,
    handle_exception,
)


@pytest.mark.parametrize("code", list(ExceptionCode))
def test_decode_round_trip(code):
    assert decode_cause(code << 2) is code


def test_decode_ignores_bits_outside_field():
    cause = 0xFFFFFF00 | (ExceptionCode.Trap << 2) | 0x3
    assert decode_cause(cause) is ExceptionCode.Trap


def test_decode_unknown_code_is_plain_int():
    result = decode_cause(3 << 2)
    assert result == 3
    assert not isinstance(result, ExceptionCode)


def test_decode_architectural_code_values():
    assert decode_cause(4 << 2) is ExceptionCode.AdEL
    assert decode_cause(18 << 2) is ExceptionCode.C2E


@pytest.mark.parametrize("kind", list(ExceptionKind))
def test_handle_exception_raises_with_details(kind):
    with pytest.raises(CpuException) as info:
        handle_exception(kind, ExceptionCode.DBE << 2, 0x9D001234)
    assert info.value.kind is kind
    assert info.value.code is ExceptionCode.DBE
    assert info.value.address == 0x9D001234


def test_handle_exception_masks_address():
    with pytest.raises(CpuException) as info:
        handle_exception(ExceptionKind.GENERAL, 0, (1 << 32) | 0x10)
    assert info.value.address == 0x10
    assert info.value.code is ExceptionCode.IRQ


def test_handle_exception_accepts_kind_value():
    with pytest.raises(CpuException) as info:
        handle_exception("bootstrap", ExceptionCode.Bp << 2, 0)
    assert info.value.kind is ExceptionKind.BOOTSTRAP


def test_message_names_code():
    with pytest.raises(CpuException, match="Overflow"):
        handle_exception(ExceptionKind.GENERAL, ExceptionCode.Overflow << 2, 0)


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        handle_exception("nonsense", 0, 0)