"""Interrupt controller state."""

import logging
from dataclasses import dataclass, field

from .registers import InterruptRegisters

_log = logging.getLogger(__name__)


@dataclass
class Interrupts:
    """Holds the IF and IE registers, both cleared at power-on."""

    registers: InterruptRegisters = field(default_factory=InterruptRegisters)

    def __post_init__(self):
        _log.debug("interrupt controller initialized")