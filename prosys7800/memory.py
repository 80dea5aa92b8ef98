"""The 64 KiB address space: RAM, ROM flags and memory-mapped registers."""

from __future__ import annotations

from typing import Callable, Optional

MEMORY_SIZE = 65536

INPTCTRL = 1
INPT0 = 8
INPT1 = 9
INPT2 = 10
INPT3 = 11
INPT4 = 12
INPT5 = 13
AUDC0 = 21
AUDC1 = 22
AUDF0 = 23
AUDF1 = 24
AUDV0 = 25
AUDV1 = 26
WSYNC = 36
SWCHA = 640
SWCHB = 642
CTLSWB = 643
INTIM = 644
INTFLG = 645
TIM1T = 660
TIM8T = 661
TIM64T = 662
T1024T = 663

_INPUT_REGISTERS = frozenset({INPT0, INPT1, INPT2, INPT3, INPT4, INPT5})
_TIA_REGISTERS = frozenset({AUDC0, AUDC1, AUDF0, AUDF1, AUDV0, AUDV1})
_TIMER_REGISTERS = {
    address | mirror: address
    for address in (TIM1T, TIM8T, TIM64T, T1024T)
    for mirror in (0, 0x8)
}

INPTCTRL_CARTRIDGE = 22
INPTCTRL_BIOS = 2
WSYNC_DISABLED_FLAG = 128

ByteHook = Callable[[int], None]
RegisterHook = Callable[[int, int], None]


class Memory:
    """RAM with a per-byte ROM flag; writes to registers go to the hooks.

    ``store_cartridge`` is called when the program asks for the cartridge to
    be mapped in (``None`` means no cartridge is loaded); ``store_bios`` likewise
    for the BIOS (``None`` means the BIOS is disabled). ``cartridge_write``
    receives writes that land on ROM.
    """

    def __init__(
        self,
        *,
        store_cartridge: Optional[Callable[[], None]] = None,
        store_bios: Optional[Callable[[], None]] = None,
        tia_register: Optional[RegisterHook] = None,
        riot_dra: Optional[ByteHook] = None,
        riot_drb: Optional[ByteHook] = None,
        riot_timer: Optional[RegisterHook] = None,
        cartridge_write: Optional[RegisterHook] = None,
        cartridge_flags: int = 0,
    ) -> None:
        self.ram = bytearray(MEMORY_SIZE)
        self.rom = bytearray(MEMORY_SIZE)
        self.store_cartridge = store_cartridge
        self.store_bios = store_bios
        self.tia_register = tia_register
        self.riot_dra = riot_dra
        self.riot_drb = riot_drb
        self.riot_timer = riot_timer
        self.cartridge_write = cartridge_write
        self.cartridge_flags = cartridge_flags

    def reset(self) -> None:
        """Zero RAM and mark everything above the first 16 KiB as ROM."""
        self.ram[:] = bytes(MEMORY_SIZE)
        self.rom[:] = b"\x00" * 16384 + b"\x01" * (MEMORY_SIZE - 16384)

    @staticmethod
    def _check_address(address: int) -> None:
        if not 0 <= address < MEMORY_SIZE:
            raise IndexError(f"address out of range: {address:#x}")

    def read(self, address: int) -> int:
        """Read one byte; reading the RIOT timer clears the interrupt flag."""
        self._check_address(address)
        if address in (INTIM, INTIM | 0x2):
            self.ram[INTFLG] &= 0x7F
            return self.ram[INTIM]
        if address in (INTFLG, INTFLG | 0x2):
            value = self.ram[INTFLG]
            self.ram[INTFLG] &= 0x7F
            return value
        return self.ram[address]

    def write(self, address: int, data: int) -> None:
        """Write one byte, dispatching register and ROM writes."""
        self._check_address(address)
        data &= 0xFF
        if self.rom[address]:
            if self.cartridge_write is not None:
                self.cartridge_write(address, data)
            return

        if address == INPTCTRL:
            if data == INPTCTRL_CARTRIDGE and self.store_cartridge is not None:
                self.store_cartridge()
            elif data == INPTCTRL_BIOS and self.store_bios is not None:
                self.store_bios()
        elif address in _INPUT_REGISTERS:
            pass
        elif address in _TIA_REGISTERS:
            if self.tia_register is not None:
                self.tia_register(address, data)
        elif address == WSYNC:
            if not self.cartridge_flags & WSYNC_DISABLED_FLAG:
                self.ram[WSYNC] = 1
        elif address == SWCHB:
            if self.riot_drb is not None:
                self.riot_drb(data)
        elif address == SWCHA:
            if self.riot_dra is not None:
                self.riot_dra(data)
        elif address in _TIMER_REGISTERS:
            if self.riot_timer is not None:
                self.riot_timer(_TIMER_REGISTERS[address], data)
        else:
            self._write_ram(address, data)

    def _write_ram(self, address: int, data: int) -> None:
        self.ram[address] = data
        if 0x2040 <= address <= 0x20FF or 0x2140 <= address <= 0x21FE:
            self.ram[address - 0x2000] = data
        elif 0x40 <= address <= 0xFF or 0x140 <= address <= 0x1FF:
            self.ram[address + 0x2000] = data

    def write_rom(self, address: int, data: bytes | bytearray | memoryview) -> None:
        """Copy ``data`` to ``address`` and mark it ROM; ignored if it does not fit."""
        block = bytes(data)
        end = address + len(block)
        if address < 0 or end > MEMORY_SIZE:
            return
        self.ram[address:end] = block
        self.rom[address:end] = b"\x01" * len(block)

    def clear_rom(self, address: int, size: int) -> None:
        """Zero ``size`` bytes at ``address`` and mark them RAM; ignored if out of range."""
        end = address + size
        if address < 0 or size < 0 or end > MEMORY_SIZE:
            return
        self.ram[address:end] = bytes(size)
        self.rom[address:end] = bytes(size)