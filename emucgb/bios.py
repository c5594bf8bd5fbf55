"""Boot ROM image."""

import logging
from pathlib import Path

_log = logging.getLogger(__name__)


class BIOS:
    """A boot ROM loaded from a file."""

    def __init__(self):
        self.data = b""
        self.loaded = False
        _log.debug("BIOS initialized")

    def __len__(self):
        return len(self.data)

    def load(self, path):
        """Read the boot ROM from ``path``; on failure the BIOS is left unloaded."""
        _log.info("loading BIOS from %s", path)
        try:
            data = Path(path).read_bytes()
        except OSError:
            self.data = b""
            self.loaded = False
            _log.error("BIOS file not found: %s", path)
            raise
        self.data = data
        self.loaded = True
        _log.info("BIOS loaded, %d bytes", len(data))

    def read(self, address):
        """Return the byte at ``address`` of the boot ROM."""
        if not 0 <= address < len(self.data):
            raise IndexError(f"BIOS address out of range: {address:#06x}")
        return self.data[address]