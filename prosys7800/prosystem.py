"""The console as a whole: reset, pause, close and save-state files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .bios import Bios
from .cartridge import Cartridge, CartridgeType
from .memory import Memory
from .palette import Palette
from .pokey import Pokey
from .region import Region, Rect, region_settings, resolve_region

CYCLES_PER_SCANLINE = 454

STATE_HEADER = b"PRO-SYSTEM STATE"
STATE_VERSION = 1
STATE_SIZE = 16445
STATE_SIZE_WITH_RAM = 32829

_DIGEST_FIELD = 32
_RAM_BLOCK = 16384


class StateError(Exception):
    """Raised when a save state cannot be written, read or applied."""


@dataclass
class CpuRegisters:
    """The CPU registers kept in a save state."""

    a: int = 0
    x: int = 0
    y: int = 0
    p: int = 0
    s: int = 0
    pc: int = 0


class ProSystem:
    """Ties memory, cartridge, BIOS, sound and region settings together."""

    def __init__(
        self,
        *,
        bios_enabled: bool = False,
        region_type: int = Region.AUTO,
        seed: Optional[int] = None,
    ) -> None:
        self.memory = Memory(
            store_cartridge=self._store_cartridge,
            store_bios=self._store_bios,
            cartridge_write=self._cartridge_write,
        )
        self.pokey = Pokey(seed)
        self.cartridge = Cartridge(self.memory, self.pokey)
        self.bios = Bios(self.memory, enabled=bios_enabled)
        self.palette = Palette()
        self.region_type = region_type
        self.cpu = CpuRegisters()
        self.active = False
        self.paused = False
        self.frequency = 60
        self.scanlines = 262
        self.cycles = 0
        self.display_area = Rect(0, 16, 319, 258)
        self.visible_area = Rect(0, 26, 319, 248)
        self.sound_length = 44100 // self.frequency
        self.video_height = self.visible_area.bottom - self.display_area.top

    # Memory hooks -----------------------------------------------------------

    def _store_cartridge(self) -> None:
        if self.cartridge.is_loaded:
            self.cartridge.store()

    def _store_bios(self) -> None:
        if self.bios.enabled:
            self.bios.store()

    def _cartridge_write(self, address: int, data: int) -> None:
        self.cartridge.write(address, data)

    # Reset ------------------------------------------------------------------

    def _apply_region(self) -> None:
        region = resolve_region(self.region_type, self.cartridge.region)
        settings = region_settings(region)
        self.display_area = settings.display_area
        self.visible_area = settings.visible_area
        if self.palette.default:
            self.palette.load(settings.palette)
        self.frequency = settings.frequency
        self.scanlines = settings.scanlines
        self.pokey.size = settings.sound_size
        self.sound_length = settings.sound_length
        self.video_height = settings.video_height

    def _reset(self) -> None:
        if not self.cartridge.is_loaded:
            return
        self.paused = False
        self.cpu = CpuRegisters()
        self._apply_region()
        self.pokey.clear()
        self.pokey.reset()
        self.memory.reset()
        self.memory.cartridge_flags = self.cartridge.flags
        if self.bios.enabled:
            self.bios.store()
        else:
            self.cartridge.store()
        self.cycles = 0
        self.active = True

    # Save states ------------------------------------------------------------

    def _state_bytes(self) -> bytes:
        digest = self.cartridge.digest.encode("latin-1")[:_DIGEST_FIELD]
        cpu = self.cpu
        parts = [
            STATE_HEADER,
            bytes((STATE_VERSION,)),
            bytes(4),
            digest.ljust(_DIGEST_FIELD, b"\x00"),
            bytes((
                cpu.a & 0xFF,
                cpu.x & 0xFF,
                cpu.y & 0xFF,
                cpu.p & 0xFF,
                cpu.s & 0xFF,
                cpu.pc & 0xFF,
                (cpu.pc >> 8) & 0xFF,
                self.cartridge.bank & 0xFF,
            )),
            bytes(self.memory.ram[:_RAM_BLOCK]),
        ]
        if self.cartridge.type == CartridgeType.SUPERCART_RAM:
            parts.append(bytes(self.memory.ram[_RAM_BLOCK:2 * _RAM_BLOCK]))
        return b"".join(parts)

    def save(self, filename: str | Path) -> None:
        """Write the machine state to ``filename``."""
        name = str(filename)
        if not name:
            raise StateError("Filename is invalid.")
        try:
            Path(name).write_bytes(self._state_bytes())
        except OSError as error:
            raise StateError(f"Failed to open the file {name} for writing.") from error

    def load(self, filename: str | Path) -> None:
        """Restore the machine state from ``filename``."""
        name = str(filename)
        if not name:
            raise StateError("Filename is invalid.")
        try:
            data = Path(name).read_bytes()
        except OSError as error:
            raise StateError(f"Failed to open the file {name} for reading.") from error
        size = len(data)
        if size not in (STATE_SIZE, STATE_SIZE_WITH_RAM):
            raise StateError("Save state file has an invalid size.")
        if data[:len(STATE_HEADER)] != STATE_HEADER:
            raise StateError("File is not a valid save state.")
        offset = len(STATE_HEADER) + 1 + 4

        self._reset()

        raw_digest = data[offset:offset + _DIGEST_FIELD]
        offset += _DIGEST_FIELD
        digest = raw_digest.split(b"\x00", 1)[0].decode("latin-1")
        if digest != self.cartridge.digest:
            raise StateError(
                f"Load state digest [{digest}] does not match loaded cartridge "
                f"digest [{self.cartridge.digest}]."
            )

        a, x, y, p, s, pc_low, pc_high, bank = data[offset:offset + 8]
        offset += 8
        self.cpu = CpuRegisters(a=a, x=x, y=y, p=p, s=s, pc=pc_low | (pc_high << 8))
        self.cartridge.store_bank(bank)

        self.memory.ram[:_RAM_BLOCK] = data[offset:offset + _RAM_BLOCK]
        offset += _RAM_BLOCK

        if self.cartridge.type == CartridgeType.SUPERCART_RAM:
            if size != STATE_SIZE_WITH_RAM:
                raise StateError("Save state file has an invalid size.")
            self.memory.ram[_RAM_BLOCK:2 * _RAM_BLOCK] = data[offset:offset + _RAM_BLOCK]

    # Run control ------------------------------------------------------------

    def pause(self, pause: bool) -> None:
        """Pause or resume; has no effect unless the machine is active."""
        if self.active:
            self.paused = bool(pause)

    def close(self) -> None:
        """Stop the machine and drop the cartridge."""
        self.active = False
        self.paused = False
        self.cartridge.release()
        self.memory.reset()