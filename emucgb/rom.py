"""Cartridge ROM image and header."""

import logging
from dataclasses import dataclass
from pathlib import Path

_log = logging.getLogger(__name__)

ROM_SIZES = (
    32 * 1024,
    64 * 1024,
    128 * 1024,
    256 * 1024,
    512 * 1024,
    1 * 1024 * 1024,
    2 * 1024 * 1024,
    4 * 1024 * 1024,
    8 * 1024 * 1024,
)

RAM_SIZES = (
    0,
    0,
    8 * 1024,
    32 * 1024,
    128 * 1024,
    64 * 1024,
)

_TITLE = slice(0x0134, 0x0143)
_CGB_FLAG = 0x0143
_SGB_FLAG = 0x0146
_CARTRIDGE_TYPE = 0x0147
_ROM_SIZE_CODE = 0x0148
_RAM_SIZE_CODE = 0x0149

ROM_ONLY = 0x00
_ROM_ONLY_READ_LIMIT = 0xF777
_ROM_ONLY_WRITE_LIMIT = 0x7FFF


@dataclass(frozen=True)
class CartridgeHeader:
    """Fields decoded from the cartridge header."""

    title: str
    cgb: bool
    sgb: bool
    cartridge_type: int
    rom_size: int
    ram_size: int


def _lookup(table, code, what):
    if code >= len(table):
        raise ValueError(f"unknown {what} size code: {code:#04x}")
    return table[code]


def _parse_header(data):
    if len(data) <= _RAM_SIZE_CODE:
        raise ValueError("ROM image is too small to hold a cartridge header")
    title = bytes(data[_TITLE]).split(b"\x00", 1)[0].decode("latin-1")
    return CartridgeHeader(
        title=title,
        cgb=data[_CGB_FLAG] == 0x80,
        sgb=data[_SGB_FLAG] == 0x03,
        cartridge_type=data[_CARTRIDGE_TYPE],
        rom_size=_lookup(ROM_SIZES, data[_ROM_SIZE_CODE], "ROM"),
        ram_size=_lookup(RAM_SIZES, data[_RAM_SIZE_CODE], "RAM"),
    )


class ROM:
    """A cartridge: its ROM image, external RAM and decoded mode flags."""

    def __init__(self):
        self._data = bytearray()
        self.ram = bytearray()
        self.cgb_mode = False
        self.sgb_mode = False
        self.cartridge_type = ROM_ONLY
        _log.debug("ROM initialized")

    def __len__(self):
        return len(self._data)

    def load(self, path):
        """Read the ROM image from ``path``; on failure the image is emptied."""
        _log.info("loading ROM from %s", path)
        try:
            data = Path(path).read_bytes()
        except OSError:
            self._data = bytearray()
            _log.error("ROM file not found: %s", path)
            raise
        self.load_bytes(data)

    def load_bytes(self, data):
        """Use ``data`` as the ROM image."""
        self._data = bytearray(data)
        _log.info("ROM loaded, %d bytes", len(self._data))

    def info(self):
        """Decode the header, set the mode flags, allocate RAM and return the header."""
        header = _parse_header(self._data)
        self.cgb_mode = header.cgb
        self.sgb_mode = header.sgb
        self.cartridge_type = header.cartridge_type
        _log.info(
            "title=%r cgb=%s sgb=%s rom=%d ram=%d",
            header.title,
            header.cgb,
            header.sgb,
            header.rom_size,
            header.ram_size,
        )
        if header.ram_size > 0:
            missing = header.ram_size - len(self.ram)
            if missing > 0:
                self.ram.extend(bytes(missing))
            else:
                del self.ram[header.ram_size:]
        return header

    def read(self, address):
        """Return the byte the cartridge presents at ``address``."""
        if self.cartridge_type == ROM_ONLY and address <= _ROM_ONLY_READ_LIMIT:
            if not 0 <= address < len(self._data):
                raise IndexError(f"ROM address out of range: {address:#06x}")
            return self._data[address]
        return 0x00

    def write(self, address, value):
        """Store ``value`` at ``address`` where the cartridge type allows it."""
        if self.cartridge_type == ROM_ONLY and address <= _ROM_ONLY_WRITE_LIMIT:
            if not 0 <= address < len(self._data):
                raise IndexError(f"ROM address out of range: {address:#06x}")
            self._data[address] = value & 0xFF