import pytest

from prosys7800.memory import (
    AUDC0,
    AUDV1,
    INPT0,
    INPTCTRL,
    INTFLG,
    INTIM,
    MEMORY_SIZE,
    SWCHA,
    SWCHB,
    TIM1T,
    T1024T,
    WSYNC,
    Memory,
)


@pytest.fixture
def memory():
    mem = Memory()
    mem.reset()
    return mem


def test_reset_marks_upper_memory_as_rom(memory):
    assert memory.rom[:16384] == bytes(16384)
    assert set(memory.rom[16384:]) == {1}
    assert memory.ram == bytearray(MEMORY_SIZE)


def test_plain_write_and_read(memory):
    memory.write(0x1800, 0x5A)
    assert memory.read(0x1800) == 0x5A


@pytest.mark.parametrize(
    "address, mirror",
    [(0x40, 0x2040), (0xFF, 0x20FF), (0x150, 0x2150), (0x2050, 0x50), (0x2150, 0x150)],
)
def test_zero_page_and_stack_mirrors(address, mirror):
    memory = Memory()
    memory.write(address, 0x33)
    assert memory.ram[address] == 0x33
    assert memory.ram[mirror] == 0x33


def test_no_mirror_outside_ranges(memory):
    memory.write(0x300, 0x44)
    assert memory.ram[0x2300] == 0


def test_intflg_read_clears_high_bit(memory):
    memory.ram[INTFLG] = 0x81
    assert memory.read(INTFLG) == 0x81
    assert memory.ram[INTFLG] == 0x01


def test_intim_read_clears_interrupt_flag(memory):
    memory.ram[INTIM] = 0x12
    memory.ram[INTFLG] = 0x80
    assert memory.read(INTIM | 0x2) == 0x12
    assert memory.ram[INTFLG] == 0


def test_wsync_write_sets_flag(memory):
    memory.write(WSYNC, 0)
    assert memory.ram[WSYNC] == 1


def test_wsync_ignored_when_disabled_by_flags(memory):
    memory.cartridge_flags = 128
    memory.write(WSYNC, 0)
    assert memory.ram[WSYNC] == 0


def test_tia_registers_go_to_hook():
    calls = []
    memory = Memory(tia_register=lambda address, data: calls.append((address, data)))
    memory.write(AUDC0, 7)
    memory.write(AUDV1, 0x1FF)
    assert calls == [(AUDC0, 7), (AUDV1, 0xFF)]
    assert memory.ram[AUDC0] == 0


def test_riot_ports_and_timer_mirrors():
    dra, drb, timers = [], [], []
    memory = Memory(
        riot_dra=dra.append,
        riot_drb=drb.append,
        riot_timer=lambda address, data: timers.append((address, data)),
    )
    memory.write(SWCHA, 1)
    memory.write(SWCHB, 2)
    memory.write(TIM1T | 0x8, 3)
    memory.write(T1024T, 4)
    assert dra == [1]
    assert drb == [2]
    assert timers == [(TIM1T, 3), (T1024T, 4)]


def test_input_registers_are_read_only(memory):
    memory.write(INPT0, 0xFF)
    assert memory.ram[INPT0] == 0


def test_inptctrl_maps_cartridge_or_bios():
    events = []
    memory = Memory(
        store_cartridge=lambda: events.append("cartridge"),
        store_bios=lambda: events.append("bios"),
    )
    memory.write(INPTCTRL, 22)
    memory.write(INPTCTRL, 2)
    memory.write(INPTCTRL, 5)
    assert events == ["cartridge", "bios"]
    assert memory.ram[INPTCTRL] == 0


def test_inptctrl_without_hooks_does_nothing():
    memory = Memory()
    memory.write(INPTCTRL, 22)
    assert memory.ram[INPTCTRL] == 0


def test_rom_writes_go_to_cartridge():
    writes = []
    memory = Memory(cartridge_write=lambda address, data: writes.append((address, data)))
    memory.reset()
    memory.write(0x8000, 3)
    assert writes == [(0x8000, 3)]
    assert memory.ram[0x8000] == 0


def test_write_rom_then_read(memory):
    memory.write_rom(0x1000, b"\x01\x02\x03")
    assert [memory.read(0x1000 + i) for i in range(3)] == [1, 2, 3]
    assert memory.rom[0x1000:0x1003] == b"\x01\x01\x01"


def test_write_rom_out_of_range_is_ignored(memory):
    memory.write_rom(MEMORY_SIZE - 1, b"\xAA\xBB")
    assert memory.ram[MEMORY_SIZE - 1] == 0


def test_write_rom_at_top_fits(memory):
    memory.write_rom(MEMORY_SIZE - 2, b"\xAA\xBB")
    assert memory.ram[MEMORY_SIZE - 2:] == b"\xAA\xBB"


def test_clear_rom_turns_region_into_ram(memory):
    memory.write_rom(0x4000, b"\xFF" * 16)
    memory.clear_rom(0x4000, 16)
    assert memory.ram[0x4000:0x4010] == bytes(16)
    assert memory.rom[0x4000:0x4010] == bytes(16)
    memory.write(0x4000, 9)
    assert memory.read(0x4000) == 9


def test_clear_rom_out_of_range_is_ignored(memory):
    memory.clear_rom(MEMORY_SIZE - 1, 2)
    assert memory.rom[MEMORY_SIZE - 1] == 1


@pytest.mark.parametrize("address", [-1, MEMORY_SIZE])
def test_bad_address_raises(memory, address):
    with pytest.raises(IndexError):
        memory.read(address)
    with pytest.raises(IndexError):
        memory.write(address, 0)