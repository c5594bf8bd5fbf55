# emucgb

The beginnings of a Game Boy / Game Boy Color emulator core in pure Python.
It needs only the standard library.

## What is here

- `emucgb.rom.ROM` holds a cartridge image. `load(path)` reads it from a file
  and `load_bytes(data)` takes it from memory. `info()` decodes the header and
  returns a `CartridgeHeader` with the title, CGB and SGB support, the
  cartridge type and the ROM and RAM sizes. It also sets `cgb_mode`,
  `sgb_mode` and `cartridge_type`, and it sizes the external RAM (`ram`) when
  the header asks for RAM. `info()` raises `ValueError` for an image that is
  too short to hold a header or that has an unknown size code.
- `emucgb.bios.BIOS` holds a boot ROM image. `load(path)` reads it from a
  file and `read(address)` returns one byte of it. If the file cannot be
  read, `load` marks the BIOS as not loaded and re-raises the `OSError`.
- `emucgb.mmu.MMU` provides the CPU's 16-bit address space through
  `read_byte`, `write_byte`, `read_word` and `write_word`. Words are
  little-endian. While a boot ROM is loaded, it covers addresses below
  `0x0100`. The rest of `0x0000`–`0x7FFF` is read from the cartridge. The
  interrupt-enable register sits at `0xFFFF`. Addresses outside `0x0000`–`0xFFFF`
  raise `ValueError`.
- `emucgb.registers` holds the register files:
  - `CPURegisters` is the CPU register file. It uses `Flag`, and `get_pair` and
    `set_pair` give access to AF, BC, DE, HL, SP and PC.
  - `InterruptRegisters` and `TimerRegisters` hold the interrupt and timer
    registers.
- `emucgb.interrupts.Interrupts` holds the IF and IE registers.
- `emucgb.constants` names the hardware register addresses and the flag and
  interrupt bit masks.
- `emucgb.alu` has the SM83 arithmetic and logic operations. These are
  `add_a`, `adc_a`, `sub_a`, `sbc_a`, `and_a`, `or_a`, `xor_a`, `cp_a`,
  `inc8`, `dec8`, `add_hl`, `add_sp`, `ld_hl_sp`, `swap`, `daa`, `cpl`, `ccf`
  and `scf`. Each one works on a `CPURegisters` and sets the flags.
- `emucgb.cpu.SM83` provides the following:
  - operand fetch: `n8`, `n16` and `a8`;
  - the cycle tables: `INSTRUCTION_CYCLES` and `PREFIXED_INSTRUCTION_CYCLES`;
  - the 8-bit and 16-bit loads;
  - `push` and `pop`;
  - `inc_rr`, `dec_rr` and `add_sp_n`;
  - `nop`, `halt`, `stop`, `di` and `ei`.
- `emucgb.colors` has two small colour helpers, `lerp` and `rainbow_color`.

## Example

```python
from emucgb.bios import BIOS
from emucgb.rom import ROM
from emucgb.mmu import MMU
from emucgb.cpu import SM83

rom = ROM()
rom.load("game.gb")
header = rom.info()
print(header.title, header.rom_size, header.ram_size)

bios = BIOS()
bios.load("dmg_boot.bin")

mmu = MMU(bios, rom)
cpu = SM83(mmu)

first_byte = mmu.read_byte(0x0000)   # served by the boot ROM
entry = mmu.read_word(0x0100)        # served by the cartridge
```

The ALU functions can be used on their own:

```python
from emucgb.registers import CPURegisters, Flag
from emucgb import alu

regs = CPURegisters()
regs.a = 0x0F
alu.add_a(regs, 0x01)
assert regs.a == 0x10
assert regs.check_flag(Flag.HALF_CARRY)
```

## What it does not do

- **No instruction decoding.** `SM83.step()` and `execute_instruction()` fetch
  an opcode and record its cycle count, but they do not carry out the
  instruction. `run()` is a generator that keeps yielding those cycle counts
  until the CPU is halted. Rotates, shifts, bit operations, jumps, calls and
  returns are not provided.
- **Only ROM-only cartridges are mapped.** Banked cartridge types read as
  `0x00` and ignore writes.
- **No other memory is mapped.** The MMU maps nothing besides the boot ROM,
  the cartridge and IE:
  - video RAM, work RAM, OAM, high RAM and the I/O registers read as `0xFF`;
  - writes to those areas are ignored.
- **No graphics, sound, timer, joypad or interrupt dispatch.**
- **No window and no command-line program.** The package is a library only.

## Tests

The test suite uses pytest. Install the `test` extra to get it.