"""Register files of the SM83 CPU, the interrupt controller and the timer."""

from dataclasses import dataclass
from enum import IntFlag


class Flag(IntFlag):
    """Bits of the F register."""

    ZERO = 1 << 7
    SUBTRACT = 1 << 6
    HALF_CARRY = 1 << 5
    CARRY = 1 << 4


_BYTE_PAIRS = {
    "AF": ("a", "f"),
    "BC": ("b", "c"),
    "DE": ("d", "e"),
    "HL": ("h", "l"),
}
_WORD_REGISTERS = {"SP": "sp", "PC": "pc"}


@dataclass
class CPURegisters:
    """The SM83 register file plus CPU state flags."""

    a: int = 0
    f: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    h: int = 0
    l: int = 0  # noqa: E741
    sp: int = 0
    pc: int = 0
    is_halted: bool = False
    ime: bool = False
    ime_pending: bool = False
    halt_bug: bool = False
    double_speed: bool = False

    def set_flag(self, flag):
        """Set the given flag bits in F."""
        self.f = (self.f | int(flag)) & 0xFF

    def clear_flag(self, flag):
        """Clear the given flag bits in F."""
        self.f = self.f & ~int(flag) & 0xFF

    def check_flag(self, flag):
        """Return True if any of the given flag bits is set in F."""
        return (self.f & int(flag)) != 0

    def get_pair(self, name):
        """Return the 16-bit value of AF, BC, DE, HL, SP or PC."""
        key = name.upper()
        if key in _BYTE_PAIRS:
            high, low = _BYTE_PAIRS[key]
            return (getattr(self, high) << 8) | getattr(self, low)
        if key in _WORD_REGISTERS:
            return getattr(self, _WORD_REGISTERS[key])
        raise ValueError(f"unknown register pair: {name!r}")

    def set_pair(self, name, value):
        """Store a 16-bit value (wrapped to 16 bits) in AF, BC, DE, HL, SP or PC."""
        key = name.upper()
        value &= 0xFFFF
        if key in _BYTE_PAIRS:
            high, low = _BYTE_PAIRS[key]
            setattr(self, high, value >> 8)
            setattr(self, low, value & 0xFF)
        elif key in _WORD_REGISTERS:
            setattr(self, _WORD_REGISTERS[key], value)
        else:
            raise ValueError(f"unknown register pair: {name!r}")


@dataclass
class InterruptRegisters:
    """Interrupt flag (IF) and interrupt enable (IE) registers."""

    if_: int = 0
    ie: int = 0


@dataclass
class TimerRegisters:
    """Timer modulo, control, counter registers."""

    tma: int = 0
    tac: int = 0
    tmc: int = 0
    tima: int = 0