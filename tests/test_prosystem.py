import pytest

from prosys7800.cartridge import CartridgeType
from prosys7800.prosystem import (
    STATE_HEADER,
    STATE_SIZE,
    STATE_SIZE_WITH_RAM,
    CpuRegisters,
    ProSystem,
    StateError,
)


def _plain_rom(fill: int = 0x11, size: int = 1024) -> bytes:
    return bytes([fill]) * size


def _header_rom(kind: int, options: int, region: int, banks: int) -> bytes:
    body_size = banks * 16384
    header = bytearray(128)
    header[1:10] = b"ATARI7800"
    header[17:21] = b"TEST"
    header[49:53] = body_size.to_bytes(4, "big")
    header[53] = kind
    header[54] = options
    header[55] = 1
    header[56] = 1
    header[57] = region
    body = bytes(i % 251 for i in range(body_size))
    return bytes(header) + body


@pytest.fixture
def system():
    machine = ProSystem(seed=1)
    machine.cartridge.load_buffer(_plain_rom())
    return machine


def test_save_writes_fixed_layout(system, tmp_path):
    system.cpu = CpuRegisters(a=1, x=2, y=3, p=4, s=5, pc=0x1234)
    path = tmp_path / "state.sav"
    system.save(path)
    data = path.read_bytes()
    assert len(data) == STATE_SIZE
    assert data[:16] == STATE_HEADER
    assert data[16] == 1
    assert data[17:21] == bytes(4)
    assert data[21:53] == system.cartridge.digest.encode("ascii")
    assert list(data[53:61]) == [1, 2, 3, 4, 5, 0x34, 0x12, 0]


def test_save_and_load_round_trip(system, tmp_path):
    system.cpu = CpuRegisters(a=9, x=8, y=7, p=6, s=5, pc=0xABCD)
    system.memory.ram[100:104] = b"\x01\x02\x03\x04"
    path = tmp_path / "state.sav"
    system.save(path)

    system.cpu = CpuRegisters()
    system.memory.ram[100:104] = bytes(4)
    system.load(path)

    assert system.cpu == CpuRegisters(a=9, x=8, y=7, p=6, s=5, pc=0xABCD)
    assert bytes(system.memory.ram[100:104]) == b"\x01\x02\x03\x04"
    assert system.active


def test_load_maps_cartridge(system, tmp_path):
    path = tmp_path / "state.sav"
    system.save(path)
    system.load(path)
    assert system.memory.ram[65535] == 0x11
    assert system.memory.rom[65535] == 1


def test_empty_filename_rejected(system):
    with pytest.raises(StateError):
        system.save("")
    with pytest.raises(StateError):
        system.load("")


def test_missing_file_rejected(system, tmp_path):
    with pytest.raises(StateError):
        system.load(tmp_path / "absent.sav")


def test_wrong_size_rejected(system, tmp_path):
    path = tmp_path / "short.sav"
    path.write_bytes(STATE_HEADER + bytes(100))
    with pytest.raises(StateError):
        system.load(path)


def test_bad_header_rejected(system, tmp_path):
    path = tmp_path / "bad.sav"
    path.write_bytes(bytes(STATE_SIZE))
    with pytest.raises(StateError):
        system.load(path)


def test_digest_mismatch_rejected(system, tmp_path):
    path = tmp_path / "state.sav"
    system.save(path)
    other = ProSystem(seed=1)
    other.cartridge.load_buffer(_plain_rom(fill=0x22))
    with pytest.raises(StateError):
        other.load(path)


def test_supercart_ram_state_includes_second_block(tmp_path):
    machine = ProSystem(seed=2)
    machine.cartridge.load_buffer(_header_rom(kind=0, options=4, region=0, banks=8))
    assert machine.cartridge.type == CartridgeType.SUPERCART_RAM
    path = tmp_path / "state.sav"
    machine.save(path)
    machine.load(path)
    machine.memory.ram[20000] = 0x5A
    machine.save(path)
    data = path.read_bytes()
    assert len(data) == STATE_SIZE_WITH_RAM

    machine.memory.ram[20000] = 0
    machine.load(path)
    assert machine.memory.ram[20000] == 0x5A


def test_supercart_ram_rejects_short_state(tmp_path):
    machine = ProSystem(seed=2)
    machine.cartridge.load_buffer(_header_rom(kind=0, options=4, region=0, banks=8))
    full = tmp_path / "full.sav"
    machine.save(full)
    short = tmp_path / "short.sav"
    short.write_bytes(full.read_bytes()[:STATE_SIZE])
    with pytest.raises(StateError):
        machine.load(short)


def test_pal_cartridge_selects_pal_timing(tmp_path):
    machine = ProSystem(seed=3)
    machine.cartridge.load_buffer(_header_rom(kind=0, options=0, region=1, banks=1))
    path = tmp_path / "state.sav"
    machine.save(path)
    machine.load(path)
    assert machine.frequency == 50
    assert machine.scanlines == 312
    assert machine.pokey.size == 624


def test_pause_only_when_active(system, tmp_path):
    system.pause(True)
    assert system.paused is False
    path = tmp_path / "state.sav"
    system.save(path)
    system.load(path)
    system.pause(True)
    assert system.paused is True
    system.pause(False)
    assert system.paused is False


def test_close_releases_cartridge(system, tmp_path):
    path = tmp_path / "state.sav"
    system.save(path)
    system.load(path)
    system.pause(True)
    system.close()
    assert system.active is False
    assert system.paused is False
    assert system.cartridge.is_loaded is False
    assert system.memory.ram[65535] == 0