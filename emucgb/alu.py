"""Arithmetic and logic operations of the SM83, acting on a register file."""

from .registers import Flag


def _signed8(value):
    return ((value & 0xFF) ^ 0x80) - 0x80


def add_a(regs, n):
    """A = A + n."""
    a = regs.a
    result = a + n
    regs.clear_flag(Flag.SUBTRACT)
    if result & 0xFF == 0:
        regs.set_flag(Flag.ZERO)
    if (a & 0xF) + (n & 0xF) > 0xF:
        regs.set_flag(Flag.HALF_CARRY)
    if result > 0xFF:
        regs.set_flag(Flag.CARRY)
    regs.a = result & 0xFF


def adc_a(regs, n):
    """A = A + n + carry."""
    carry = 1 if regs.check_flag(Flag.CARRY) else 0
    a = regs.a
    result = a + n + carry
    regs.clear_flag(Flag.SUBTRACT)
    if result & 0xFF == 0:
        regs.set_flag(Flag.ZERO)
    if (a & 0xF) + (n & 0xF) + carry > 0xF:
        regs.set_flag(Flag.HALF_CARRY)
    if result > 0xFF:
        regs.set_flag(Flag.CARRY)
    regs.a = result & 0xFF


def sub_a(regs, n):
    """A = A - n."""
    a = regs.a
    regs.set_flag(Flag.SUBTRACT)
    if (a - n) & 0xFF == 0:
        regs.set_flag(Flag.ZERO)
    if (a & 0x0F) < (n & 0x0F):
        regs.set_flag(Flag.HALF_CARRY)
    if a < n:
        regs.set_flag(Flag.CARRY)
    regs.a = (a - n) & 0xFF


def sbc_a(regs, n):
    """A = A - n - carry."""
    carry = 1 if regs.check_flag(Flag.CARRY) else 0
    a = regs.a
    result = a - n - carry
    regs.set_flag(Flag.SUBTRACT)
    if result & 0xFF == 0:
        regs.set_flag(Flag.ZERO)
    if (a & 0x0F) < (n & 0x0F) + carry:
        regs.set_flag(Flag.HALF_CARRY)
    if a < n + carry:
        regs.set_flag(Flag.CARRY)
    regs.a = result & 0xFF


def and_a(regs, n):
    """A = A & n."""
    regs.clear_flag(Flag.SUBTRACT)
    regs.set_flag(Flag.HALF_CARRY)
    regs.clear_flag(Flag.CARRY)
    regs.a &= n & 0xFF
    if regs.a == 0:
        regs.set_flag(Flag.ZERO)


def _logic(regs, result):
    regs.clear_flag(Flag.SUBTRACT | Flag.HALF_CARRY | Flag.CARRY)
    regs.a = result & 0xFF
    if regs.a == 0:
        regs.set_flag(Flag.ZERO)


def or_a(regs, n):
    """A = A | n."""
    _logic(regs, regs.a | n)


def xor_a(regs, n):
    """A = A ^ n."""
    _logic(regs, regs.a ^ n)


def cp_a(regs, n):
    """Compare A with n, setting flags as for A - n without storing the result."""
    a = regs.a
    regs.set_flag(Flag.SUBTRACT)
    if a == n:
        regs.set_flag(Flag.ZERO)
    if (a & 0x0F) < (n & 0x0F):
        regs.set_flag(Flag.HALF_CARRY)
    if a < n:
        regs.set_flag(Flag.CARRY)


def inc8(regs, value):
    """Return ``value + 1`` wrapped to a byte, updating flags."""
    result = (value + 1) & 0xFF
    regs.set_flag(Flag.SUBTRACT)
    if result == 0:
        regs.set_flag(Flag.ZERO)
    if value & 0x0F == 0x0F:
        regs.set_flag(Flag.HALF_CARRY)
    return result


def dec8(regs, value):
    """Return ``value - 1`` wrapped to a byte, updating flags."""
    result = (value - 1) & 0xFF
    regs.set_flag(Flag.SUBTRACT)
    if result == 0:
        regs.set_flag(Flag.ZERO)
    if value & 0x0F == 0x00:
        regs.set_flag(Flag.HALF_CARRY)
    return result


def add_hl(regs, nn):
    """HL = HL + nn."""
    hl = regs.get_pair("HL")
    result = hl + nn
    regs.clear_flag(Flag.SUBTRACT)
    if (hl & 0x0FFF) + (nn & 0x0FFF) > 0x0FFF:
        regs.set_flag(Flag.HALF_CARRY)
    if result > 0xFFFF:
        regs.set_flag(Flag.CARRY)
    regs.set_pair("HL", result)


def add_sp(regs, offset):
    """SP = SP + offset, where ``offset`` is a signed byte."""
    imm = _signed8(offset)
    sp = regs.sp
    regs.clear_flag(Flag.SUBTRACT)
    if (sp & 0x0F) + (imm & 0x0F) > 0x0F:
        regs.set_flag(Flag.HALF_CARRY)
    if (sp & 0xFF) + (imm & 0xFF) > 0xFF:
        regs.set_flag(Flag.CARRY)
    regs.sp = (sp + imm) & 0xFFFF


def ld_hl_sp(regs, offset):
    """HL = SP + offset, where ``offset`` is a signed byte; SP is unchanged."""
    imm = _signed8(offset)
    sp = regs.sp
    result = sp + imm
    regs.clear_flag(Flag.ZERO | Flag.SUBTRACT | Flag.HALF_CARRY | Flag.CARRY)
    mixed = sp ^ imm ^ (result & 0xFFFF)
    if mixed & 0x10:
        regs.set_flag(Flag.HALF_CARRY)
    if mixed & 0x100:
        regs.set_flag(Flag.CARRY)
    regs.set_pair("HL", result)


def swap(regs, value):
    """Return ``value`` with its nibbles swapped, updating flags."""
    result = ((value & 0x0F) << 4) | ((value & 0xF0) >> 4)
    if result == 0:
        regs.set_flag(Flag.ZERO)
    regs.clear_flag(Flag.SUBTRACT | Flag.HALF_CARRY | Flag.CARRY)
    return result


def daa(regs):
    """Decimal-adjust A after a BCD addition or subtraction."""
    correction = 0
    carry = regs.check_flag(Flag.CARRY)
    if not regs.check_flag(Flag.SUBTRACT):
        if regs.check_flag(Flag.HALF_CARRY) or (regs.a & 0x0F) > 9:
            correction |= 0x06
        if carry or regs.a > 0x99:
            correction |= 0x60
            carry = True
        regs.a = (regs.a + correction) & 0xFF
    else:
        if regs.check_flag(Flag.HALF_CARRY):
            correction |= 0x06
        if carry:
            correction |= 0x60
        regs.a = (regs.a - correction) & 0xFF
    if regs.a == 0:
        regs.set_flag(Flag.ZERO)
    regs.clear_flag(Flag.HALF_CARRY)
    if carry:
        regs.set_flag(Flag.CARRY)
    else:
        regs.clear_flag(Flag.CARRY)


def cpl(regs):
    """Complement A."""
    regs.a = ~regs.a & 0xFF
    regs.set_flag(Flag.SUBTRACT | Flag.HALF_CARRY)


def ccf(regs):
    """Complement the carry flag."""
    carry = regs.check_flag(Flag.CARRY)
    regs.clear_flag(Flag.SUBTRACT | Flag.HALF_CARRY)
    if carry:
        regs.clear_flag(Flag.CARRY)
    else:
        regs.set_flag(Flag.CARRY)


def scf(regs):
    """Set the carry flag."""
    regs.clear_flag(Flag.SUBTRACT | Flag.HALF_CARRY)
    regs.set_flag(Flag.CARRY)