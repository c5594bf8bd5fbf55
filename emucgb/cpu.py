"""The SM83 processor core: instruction fetch, cycle accounting and load/control operations."""

from . import alu
from .constants import IE, IF, KEY1
from .registers import CPURegisters


def _pad(rows):
    flat = tuple(value for row in rows for value in row)
    return flat + (0,) * (256 - len(flat))


# Machine cycles per opcode, laid out exactly as the hardware table is stored.
INSTRUCTION_CYCLES = _pad(
    (
        (4, 12, 8, 8, 4, 4, 8, 4, 20, 8, 8, 8, 4, 4, 8, 4),
        (4, 12, 8, 8, 4, 4, 8, 4, 12, 8, 8, 8, 4, 4, 8, 4),
        (12, 8, 12, 8, 4, 4, 8, 4, 12, 8, 8, 8, 4, 4, 8, 4),
        (12, 8, 8, 12, 12, 12, 4, 12, 8, 8, 8, 4, 4, 8, 4),
        (4, 4, 4, 4, 4, 4, 8, 4, 4, 4, 4, 4, 4, 4, 8, 4),
        (4, 4, 4, 4, 4, 4, 8, 4, 4, 4, 4, 4, 4, 4, 8, 4),
        (4, 4, 4, 4, 4, 4, 8, 4, 4, 4, 4, 4, 4, 4, 8, 4),
        (8, 8, 8, 8, 8, 8, 4, 8, 4, 4, 4, 4, 4, 4, 8, 4),
        (4, 4, 4, 4, 4, 4, 8, 4, 4, 4, 4, 4, 8, 4, 4, 4),
        (4, 8, 4, 20, 12, 16, 16, 24, 16, 8, 16, 20, 16, 16, 4),
        (24, 24, 8, 16, 20, 12, 16, 4, 24, 16, 8, 16, 20, 16, 16, 4),
        (24, 4, 8, 16, 12, 12, 8, 4, 4, 16, 8, 16, 16, 4, 16, 4),
        (12, 8, 4, 4, 16, 8, 16, 16, 4, 16, 4, 4, 4, 8, 16, 12),
        (12, 8, 4, 4, 16, 8, 16, 12, 8, 16, 4, 4, 4, 8, 16, 12),
        (8, 16, 4, 4, 16, 8, 16, 12, 8, 16, 4, 4, 4, 8, 16, 12),
        (8, 16, 4, 4, 16, 8, 16, 12, 8, 16, 4, 4, 4, 8, 16, 12),
    )
)

_PREFIXED_SHIFT_ROW = (8, 8, 8, 8, 8, 8, 16, 8, 8, 8, 8, 8, 8, 8, 16, 8)
_PREFIXED_BIT_ROW = (8, 8, 8, 8, 8, 8, 12, 8, 8, 8, 8, 8, 8, 8, 12, 8)

PREFIXED_INSTRUCTION_CYCLES = _pad(
    (_PREFIXED_SHIFT_ROW,) * 4 + (_PREFIXED_BIT_ROW,) * 4 + (_PREFIXED_SHIFT_ROW,) * 8
)

# Register encoding used in opcode bit fields; index 6 means (HL).
_REGISTER_NAMES = {0: "b", 1: "c", 2: "d", 3: "e", 4: "h", 5: "l", 7: "a"}
_HL_INDIRECT = 6

_LD_NN_N_TARGETS = {0x06: "b", 0x0E: "c", 0x16: "d", 0x1E: "e", 0x26: "h", 0x2E: "l"}
_LD_A_N_SOURCES = {0x7F: "a", 0x78: "b", 0x79: "c", 0x7A: "d", 0x7B: "e", 0x7C: "h", 0x7D: "l"}
_LD_A_N_INDIRECT = {0x0A: "BC", 0x1A: "DE", 0x7E: "HL"}
_LD_N_A_TARGETS = {0x7F: "a", 0x47: "b", 0x4F: "c", 0x57: "d", 0x5F: "e", 0x67: "h", 0x6F: "l"}
_LD_N_A_INDIRECT = {0x02: "BC", 0x12: "DE", 0x77: "HL"}


class SM83:
    """The CPU core, reading and writing memory through an MMU."""

    def __init__(self, mmu):
        self.mmu = mmu
        self.registers = CPURegisters()
        self.cycle_count = 0

    # Execution

    def run(self):
        """Execute instructions, yielding the cycle count of each, while not halted."""
        while not self.registers.is_halted:
            yield self.step()

    def step(self):
        """Execute one instruction and return the cycles it took."""
        self.execute_instruction()
        return self.cycle_count

    def execute_instruction(self):
        """Fetch an opcode and account for its cycles."""
        opcode = self.n8()
        self.cycle_count = INSTRUCTION_CYCLES[opcode]
        return opcode

    def execute_prefixed_instruction(self):
        """Fetch a CB-prefixed opcode and account for its cycles."""
        opcode = self.n8()
        self.cycle_count = PREFIXED_INSTRUCTION_CYCLES[opcode]
        return opcode

    # Operand fetch

    def n8(self):
        """Read the byte at PC and advance PC."""
        regs = self.registers
        value = self.mmu.read_byte(regs.pc)
        regs.pc = (regs.pc + 1) & 0xFFFF
        return value

    def n16(self):
        """Read a little-endian word at PC and advance PC by two."""
        low = self.n8()
        high = self.n8()
        return (high << 8) | low

    def a8(self):
        """Read a byte at PC and return it as an offset into the 0xFF00 page."""
        return 0xFF00 + self.n8()

    # Register access by opcode encoding

    def get_register(self, index):
        """Return the 8-bit register encoded as ``index`` (B, C, D, E, H, L, -, A)."""
        return getattr(self.registers, self._register_name(index))

    def set_register(self, index, value):
        """Store ``value`` in the 8-bit register encoded as ``index``."""
        setattr(self.registers, self._register_name(index), value & 0xFF)

    @staticmethod
    def _register_name(index):
        try:
            return _REGISTER_NAMES[index]
        except KeyError:
            raise ValueError(f"no 8-bit register with index {index}") from None

    def _step_hl(self, delta):
        regs = self.registers
        hl = regs.get_pair("HL")
        regs.set_pair("HL", hl + delta)
        return hl

    # 8-bit loads

    def ld_nn_n(self, opcode):
        """LD r,n / LD (HL),n: load an immediate byte."""
        data = self.n8()
        if opcode in _LD_NN_N_TARGETS:
            setattr(self.registers, _LD_NN_N_TARGETS[opcode], data)
        elif opcode == 0x36:
            self.mmu.write_byte(self.registers.get_pair("HL"), data)

    def ld_r1_r2(self, opcode):
        """LD r1,r2 with either operand possibly (HL)."""
        r1 = (opcode >> 3) & 0x07
        r2 = opcode & 0x07
        hl = self.registers.get_pair("HL")
        if r2 == _HL_INDIRECT:
            data = self.mmu.read_byte(hl)
            if r1 == _HL_INDIRECT:
                return
            self.set_register(r1, data)
        else:
            data = self.get_register(r2)
            if r1 == _HL_INDIRECT:
                self.mmu.write_byte(hl, data)
            else:
                self.set_register(r1, data)

    def ld_a_n(self, opcode):
        """LD A,n from a register, (BC), (DE), (HL), an immediate or (nn)."""
        regs = self.registers
        if opcode in _LD_A_N_SOURCES:
            regs.a = getattr(regs, _LD_A_N_SOURCES[opcode])
        elif opcode in _LD_A_N_INDIRECT:
            regs.a = self.mmu.read_byte(regs.get_pair(_LD_A_N_INDIRECT[opcode]))
        elif opcode == 0x3E:
            regs.a = self.n8()
        elif opcode == 0xFA:
            regs.a = self.mmu.read_byte(self.n16())

    def ld_n_a(self, opcode):
        """LD n,A into a register, (BC), (DE), (HL) or (nn)."""
        regs = self.registers
        if opcode in _LD_N_A_TARGETS:
            setattr(regs, _LD_N_A_TARGETS[opcode], regs.a)
        elif opcode in _LD_N_A_INDIRECT:
            self.mmu.write_byte(regs.get_pair(_LD_N_A_INDIRECT[opcode]), regs.a)
        elif opcode == 0xEA:
            self.mmu.write_byte(self.n16(), regs.a)

    def ld_a_c(self):
        """LD A,(0xFF00+C)."""
        self.registers.a = self.mmu.read_byte(0xFF00 + self.registers.c)

    def ld_c_a(self):
        """LD (0xFF00+C),A."""
        self.mmu.write_byte(0xFF00 + self.registers.c, self.registers.a)

    def ldd_a_hl(self):
        """LD A,(HL-)."""
        self.registers.a = self.mmu.read_byte(self._step_hl(-1))

    def ldd_hl_a(self):
        """LD (HL-),A."""
        self.mmu.write_byte(self._step_hl(-1), self.registers.a)

    def ldi_a_hl(self):
        """LD A,(HL+)."""
        self.registers.a = self.mmu.read_byte(self._step_hl(1))

    def ldi_hl_a(self):
        """LD (HL+),A."""
        self.mmu.write_byte(self._step_hl(1), self.registers.a)

    def ldh_n_a(self):
        """LDH (0xFF00+n),A."""
        self.mmu.write_byte(self.a8(), self.registers.a)

    def ldh_a_n(self):
        """LDH A,(0xFF00+n)."""
        self.registers.a = self.mmu.read_byte(self.a8())

    # 16-bit loads

    def ld_rr_nn(self, name):
        """LD rr,nn: load an immediate word into BC, DE, HL or SP."""
        self.registers.set_pair(name, self.n16())

    def ld_sp_hl(self):
        """LD SP,HL."""
        self.registers.sp = self.registers.get_pair("HL")

    def ld_hl_sp_n(self):
        """LD HL,SP+n with a signed immediate offset."""
        alu.ld_hl_sp(self.registers, self.n8())

    def ld_nn_sp(self):
        """LD (nn),SP."""
        self.mmu.write_word(self.n16(), self.registers.sp)

    def push(self, value):
        """Push a 16-bit value onto the stack."""
        regs = self.registers
        regs.sp = (regs.sp - 2) & 0xFFFF
        self.mmu.write_word(regs.sp, value & 0xFFFF)

    def pop(self):
        """Pop and return a 16-bit value from the stack."""
        regs = self.registers
        value = self.mmu.read_word(regs.sp)
        regs.sp = (regs.sp + 2) & 0xFFFF
        return value

    # 16-bit arithmetic

    def add_sp_n(self):
        """ADD SP,n with a signed immediate offset."""
        alu.add_sp(self.registers, self.n8())

    def inc_rr(self, name):
        """INC rr."""
        regs = self.registers
        regs.set_pair(name, regs.get_pair(name) + 1)

    def dec_rr(self, name):
        """DEC rr."""
        regs = self.registers
        regs.set_pair(name, regs.get_pair(name) - 1)

    # Control

    def nop(self):
        """Do nothing."""

    def halt(self):
        """Halt until an interrupt; resume at once if one is pending with IME off."""
        regs = self.registers
        regs.is_halted = True
        pending = (self.mmu.read_byte(IF) & self.mmu.read_byte(IE)) != 0
        if not regs.ime and pending:
            regs.is_halted = False

    def stop(self):
        """Perform a speed switch if one was prepared in KEY1."""
        regs = self.registers
        key1 = self.mmu.read_byte(KEY1)
        if key1 & 0x1:
            regs.double_speed = not regs.double_speed
        self.mmu.write_byte(KEY1, (key1 & 0x7E) | (int(regs.double_speed) << 7))

    def di(self):
        """Disable interrupts."""
        self.registers.ime = False

    def ei(self):
        """Enable interrupts."""
        regs = self.registers
        regs.ime_pending = True
        if regs.ime_pending:
            regs.ime = True
            regs.ime_pending = False