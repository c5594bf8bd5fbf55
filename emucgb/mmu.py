"""Memory management unit: maps the 16-bit address space onto the hardware."""

import logging

from .constants import IE
from .interrupts import Interrupts

_log = logging.getLogger(__name__)

_ROM_END = 0x7FFF
_BIOS_END = 0x0100
_UNMAPPED = 0xFF


def _check_address(address):
    if not 0 <= address <= 0xFFFF:
        raise ValueError(f"address out of range: {address:#x}")


class MMU:
    """Routes CPU reads and writes to the boot ROM, cartridge and registers."""

    def __init__(self, bios, rom, interrupts=None):
        self.bios = bios
        self.rom = rom
        self.interrupts = interrupts if interrupts is not None else Interrupts()
        _log.debug("MMU initialized")

    def read_byte(self, address):
        """Return the byte visible at ``address``; unmapped areas read as 0xFF."""
        _check_address(address)
        if address <= _ROM_END:
            if address < _BIOS_END and self.bios.loaded:
                return self.bios.read(address)
            return self.rom.read(address)
        if address == IE:
            return self.interrupts.registers.ie
        return _UNMAPPED

    def write_byte(self, address, value):
        """Store ``value`` at ``address`` where something is mapped to accept it."""
        _check_address(address)
        if address == IE:
            self.interrupts.registers.ie = value & 0xFF

    def read_word(self, address):
        """Return the little-endian 16-bit word at ``address``."""
        low = self.read_byte(address)
        high = self.read_byte((address + 1) & 0xFFFF)
        return (high << 8) | low

    def write_word(self, address, value):
        """Store ``value`` as a little-endian 16-bit word at ``address``."""
        self.write_byte(address, value & 0xFF)
        self.write_byte((address + 1) & 0xFFFF, (value >> 8) & 0xFF)