import pytest

from emucgb import alu
from emucgb.registers import CPURegisters, Flag


def regs_with(**values):
    return CPURegisters(**values)


def test_add_overflow_sets_all_flags():
    regs = regs_with(a=0xFF)
    alu.add_a(regs, 1)
    assert regs.a == 0
    assert regs.check_flag(Flag.ZERO)
    assert regs.check_flag(Flag.HALF_CARRY)
    assert regs.check_flag(Flag.CARRY)
    assert not regs.check_flag(Flag.SUBTRACT)


@pytest.mark.parametrize("a,n", [(0x00, 0x00), (0x12, 0x34), (0xF0, 0x20), (0x7F, 0x81)])
def test_add_then_sub_restores_a(a, n):
    regs = regs_with(a=a)
    alu.add_a(regs, n)
    alu.sub_a(regs, n)
    assert regs.a == a


@pytest.mark.parametrize("a,n", [(0x10, 0x05), (0xFE, 0x01), (0x0F, 0x0F)])
def test_adc_with_carry_matches_add_of_next(a, n):
    with_carry = regs_with(a=a, f=int(Flag.CARRY))
    alu.adc_a(with_carry, n)
    plain = regs_with(a=a)
    alu.add_a(plain, n + 1)
    assert with_carry.a == plain.a


def test_sub_self_is_zero():
    regs = regs_with(a=0x42)
    alu.sub_a(regs, 0x42)
    assert regs.a == 0
    assert regs.check_flag(Flag.ZERO)
    assert regs.check_flag(Flag.SUBTRACT)
    assert not regs.check_flag(Flag.CARRY)


def test_sub_borrow_sets_carry():
    regs = regs_with(a=0x01)
    alu.sub_a(regs, 0x02)
    assert regs.a == 0xFF
    assert regs.check_flag(Flag.CARRY)
    assert regs.check_flag(Flag.HALF_CARRY)


def test_logic_identities():
    regs = regs_with(a=0x5A)
    alu.and_a(regs, 0xFF)
    assert regs.a == 0x5A
    assert regs.check_flag(Flag.HALF_CARRY)
    alu.or_a(regs, 0x00)
    assert regs.a == 0x5A
    assert not regs.check_flag(Flag.HALF_CARRY)
    alu.xor_a(regs, regs.a)
    assert regs.a == 0
    assert regs.check_flag(Flag.ZERO)


def test_cp_leaves_a_and_sets_flags():
    regs = regs_with(a=0x20)
    alu.cp_a(regs, 0x20)
    assert regs.a == 0x20
    assert regs.check_flag(Flag.ZERO)
    lower = regs_with(a=0x10)
    alu.cp_a(lower, 0x20)
    assert lower.a == 0x10
    assert lower.check_flag(Flag.CARRY)


@pytest.mark.parametrize("value", [0x00, 0x0F, 0x7F, 0xFE, 0xFF])
def test_inc_dec_round_trip(value):
    regs = CPURegisters()
    assert alu.dec8(regs, alu.inc8(regs, value)) == value


def test_inc_wraps_to_zero():
    regs = CPURegisters()
    assert alu.inc8(regs, 0xFF) == 0
    assert regs.check_flag(Flag.ZERO)
    assert regs.check_flag(Flag.HALF_CARRY)


def test_dec_wraps_to_ff():
    regs = CPURegisters()
    assert alu.dec8(regs, 0x00) == 0xFF
    assert regs.check_flag(Flag.HALF_CARRY)
    assert not regs.check_flag(Flag.ZERO)


def test_add_hl_overflow():
    regs = CPURegisters()
    regs.set_pair("HL", 0xFFFF)
    alu.add_hl(regs, 1)
    assert regs.get_pair("HL") == 0
    assert regs.check_flag(Flag.CARRY)
    assert regs.check_flag(Flag.HALF_CARRY)


@pytest.mark.parametrize("offset", [1, 5, 0x7F, -1, -0x80])
def test_add_sp_round_trip(offset):
    regs = regs_with(sp=0xC000)
    alu.add_sp(regs, offset)
    alu.add_sp(regs, -offset if offset != -0x80 else 0x7F)
    if offset == -0x80:
        alu.add_sp(regs, 1)
    assert regs.sp == 0xC000


def test_add_sp_byte_form_is_signed():
    unsigned = regs_with(sp=0xD000)
    alu.add_sp(unsigned, 0xFF)
    signed = regs_with(sp=0xD000)
    alu.add_sp(signed, -1)
    assert unsigned.sp == signed.sp
    assert unsigned.sp < 0xD000


def test_ld_hl_sp_keeps_sp_and_clears_zero():
    regs = regs_with(sp=0xC000, f=int(Flag.ZERO | Flag.SUBTRACT))
    alu.ld_hl_sp(regs, 2)
    assert regs.sp == 0xC000
    assert regs.get_pair("HL") == 0xC002
    assert not regs.check_flag(Flag.ZERO)
    assert not regs.check_flag(Flag.SUBTRACT)


@pytest.mark.parametrize("value", [0x00, 0x12, 0xF0, 0xAB])
def test_swap_twice_is_identity(value):
    regs = CPURegisters()
    assert alu.swap(regs, alu.swap(regs, value)) == value


def test_swap_zero_sets_zero_flag():
    regs = regs_with(f=int(Flag.CARRY))
    assert alu.swap(regs, 0) == 0
    assert regs.check_flag(Flag.ZERO)
    assert not regs.check_flag(Flag.CARRY)


def test_daa_after_bcd_addition():
    regs = regs_with(a=0x09)
    alu.add_a(regs, 0x01)
    alu.daa(regs)
    assert regs.a == 0x10
    assert not regs.check_flag(Flag.CARRY)


def test_daa_carries_out_of_99():
    regs = regs_with(a=0x99)
    alu.add_a(regs, 0x01)
    alu.daa(regs)
    assert regs.a == 0
    assert regs.check_flag(Flag.CARRY)
    assert not regs.check_flag(Flag.HALF_CARRY)


def test_cpl_twice_restores_a():
    regs = regs_with(a=0x3C)
    alu.cpl(regs)
    assert regs.a == 0x3C ^ 0xFF
    assert regs.check_flag(Flag.SUBTRACT)
    assert regs.check_flag(Flag.HALF_CARRY)
    alu.cpl(regs)
    assert regs.a == 0x3C


def test_ccf_toggles_and_scf_sets():
    regs = regs_with(f=int(Flag.SUBTRACT | Flag.HALF_CARRY))
    alu.ccf(regs)
    assert regs.check_flag(Flag.CARRY)
    assert not regs.check_flag(Flag.SUBTRACT | Flag.HALF_CARRY)
    alu.ccf(regs)
    assert not regs.check_flag(Flag.CARRY)
    alu.scf(regs)
    assert regs.check_flag(Flag.CARRY)