"""Decoding of CPU exception causes and the handlers that report them."""

from __future__ import annotations

from enum import Enum, IntEnum

_EXC_CODE_MASK = 0x0000007C
_EXC_CODE_SHIFT = 2
_MASK32 = 0xFFFFFFFF


class ExceptionCode(IntEnum):
    """Cause codes found in the ExcCode field of the Cause register."""

    IRQ = 0
    AdEL = 4
    AdES = 5
    IBE = 6
    DBE = 7
    Sys = 8
    Bp = 9
    RI = 10
    CpU = 11
    Overflow = 12
    Trap = 13
    IS1 = 16
    CEU = 17
    C2E = 18


class ExceptionKind(Enum):
    """Which exception vector was taken."""

    GENERAL = "general"
    BOOTSTRAP = "bootstrap"
    CACHE_ERROR = "cache_err"
    SIMPLE_TLB_REFILL = "simple_tlb_refill"


class CpuException(Exception):
    """An unrecoverable CPU exception with its cause code and faulting address."""

    def __init__(self, kind, code, address):
        self.kind = ExceptionKind(kind)
        self.code = code
        self.address = address
        name = code.name if isinstance(code, ExceptionCode) else str(code)
        super().__init__(f"{self.kind.value} exception {name} at 0x{address:08x}")


def decode_cause(cause):
    """Extract the exception code from a Cause register value.

    Known codes come back as :class:`ExceptionCode`; others as a plain int.
    """
    code = (int(cause) & _EXC_CODE_MASK) >> _EXC_CODE_SHIFT
    try:
        return ExceptionCode(code)
    except ValueError:
        return code


def handle_exception(kind, cause, epc):
    """Record the cause and address of an exception and raise it; never returns."""
    raise CpuException(kind, decode_cause(cause), int(epc) & _MASK32)