from emucgb.interrupts import Interrupts


def test_registers_start_cleared():
    interrupts = Interrupts()
    assert interrupts.registers.if_ == 0
    assert interrupts.registers.ie == 0


def test_instances_do_not_share_registers():
    first = Interrupts()
    second = Interrupts()
    first.registers.ie = 0x1F
    assert second.registers.ie == 0
    assert first.registers.ie == 0x1F