"""Hardware register addresses and bit masks of the Game Boy / Game Boy Color."""

# Hardware register addresses
P1_JOY = 0xFF00  # Joypad
SB = 0xFF01  # Serial transfer data
SC = 0xFF02  # Serial transfer control
DIV = 0xFF04  # Divider register
TIMA = 0xFF05  # Timer counter
TMA = 0xFF06  # Timer modulo
TAC = 0xFF07  # Timer control
IF = 0xFF0F  # Interrupt flag
NR10 = 0xFF10  # Sound channel 1 sweep
NR11 = 0xFF11  # Sound channel 1 length timer & duty cycle
NR12 = 0xFF12  # Sound channel 1 volume & envelope
NR13 = 0xFF13  # Sound channel 1 period low
NR14 = 0xFF14  # Sound channel 1 period high & control
NR21 = 0xFF16  # Sound channel 2 length timer & duty cycle
NR22 = 0xFF17  # Sound channel 2 volume & envelope
NR23 = 0xFF18  # Sound channel 2 period low
NR24 = 0xFF19  # Sound channel 2 period high & control
NR30 = 0xFF1A  # Sound channel 3 DAC enable
NR31 = 0xFF1B  # Sound channel 3 length timer
NR32 = 0xFF1C  # Sound channel 3 output level
NR33 = 0xFF1D  # Sound channel 3 period low
NR34 = 0xFF1E  # Sound channel 3 period high & control
NR41 = 0xFF20  # Sound channel 4 length timer
NR42 = 0xFF21  # Sound channel 4 volume & envelope
NR43 = 0xFF22  # Sound channel 4 frequency & randomness
NR44 = 0xFF23  # Sound channel 4 control
NR50 = 0xFF24  # Master volume & VIN panning
NR51 = 0xFF25  # Sound panning
NR52 = 0xFF26  # Sound on/off
WAVE_RAM = 0xFF30  # Waveform storage
LCDC = 0xFF40  # LCD control
STAT = 0xFF41  # LCD status
SCY = 0xFF42  # Viewport Y position
SCX = 0xFF43  # Viewport X position
LY = 0xFF44  # LCD Y coordinate
LYC = 0xFF45  # LY compare
DMA = 0xFF46  # OAM DMA source address & start
BGP = 0xFF47  # BG palette data (DMG)
OBP0 = 0xFF48  # OBJ palette 0 data (DMG)
OBP1 = 0xFF49  # OBJ palette 1 data (DMG)
WY = 0xFF4A  # Window Y position
WX = 0xFF4B  # Window X position plus 7
KEY1 = 0xFF4D  # Prepare speed switch (CGB)
VBK = 0xFF4F  # VRAM bank (CGB)
HDMA1 = 0xFF51  # VRAM DMA source high (CGB)
HDMA2 = 0xFF52  # VRAM DMA source low (CGB)
HDMA3 = 0xFF53  # VRAM DMA destination high (CGB)
HDMA4 = 0xFF54  # VRAM DMA destination low (CGB)
HDMA5 = 0xFF55  # VRAM DMA length/mode/start (CGB)
RP = 0xFF56  # Infrared communication port (CGB)
BGPI = 0xFF68  # BG color palette index (CGB)
BGPD = 0xFF69  # BG color palette data (CGB)
OBPI = 0xFF6A  # OBJ color palette index (CGB)
OBPD = 0xFF6B  # OBJ color palette data (CGB)
SVBK = 0xFF70  # WRAM bank (CGB)
IE = 0xFFFF  # Interrupt enable

# Overflow bits
TIMER_OVERFLOW = 0x4
BUTTON_OVERFLOW = 0x10

# Interrupt bits
LCDC_INTERRUPT = 0x2
VBLANK_INTERRUPT = 0x01
HBLANK_INTERRUPT = 0x08

# PPU mode bits
MODE0 = 0x8
MODE1 = 0x10
MODE2 = 0x20
COINCIDENCE = 0x40

# CPU flag masks
FLAG_Z = 0x80
FLAG_N = 0x40
FLAG_H = 0x20
FLAG_C = 0x10

FLAG_Z_RESET = 0x7F
FLAG_N_RESET = 0xBF
FLAG_H_RESET = 0xDF
FLAG_C_RESET = 0xE0