"""Game Boy and Game Boy Color emulator core: cartridge, boot ROM, memory map, registers, ALU and CPU."""

__version__ = "0.1.0"