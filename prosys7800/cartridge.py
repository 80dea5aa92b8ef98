"""Cartridge images: header parsing, bank switching and mapping into memory."""

from __future__ import annotations

import zlib
from enum import IntEnum
from pathlib import Path
from typing import Optional

from .hash import compute_digest
from .memory import MEMORY_SIZE, Memory
from .pokey import POKEY_AUDCTL, POKEY_AUDF1, Pokey

HEADER_SIZE = 128
HEADER_ID = b"ATARI7800"
BANK_SIZE = 16384

WSYNC_MASK = 2
CYCLE_STEALING_MASK = 1

_TITLE_START = 17
_TITLE_LENGTH = 32
_LARGE_SUPERCART_SIZE = 131072


class CartridgeType(IntEnum):
    """Bank-switching scheme of a cartridge."""

    NORMAL = 0
    SUPERCART = 1
    SUPERCART_LARGE = 2
    SUPERCART_RAM = 3
    SUPERCART_ROM = 4
    ABSOLUTE = 5
    ACTIVISION = 6


class Controller(IntEnum):
    """Controller a cartridge expects in a port."""

    NONE = 0
    JOYSTICK = 1
    LIGHTGUN = 2


class CartridgeError(Exception):
    """Raised when a cartridge image cannot be read or is invalid."""


_SUPERCART_TYPES = (
    CartridgeType.SUPERCART,
    CartridgeType.SUPERCART_RAM,
    CartridgeType.SUPERCART_ROM,
)


def _bank_offset(bank: int) -> int:
    return bank * BANK_SIZE


class Cartridge:
    """A loaded cartridge image and the mapper state that goes with it."""

    def __init__(self, memory: Memory, pokey_device: Optional[Pokey] = None) -> None:
        self.memory = memory
        self.pokey_device = pokey_device
        self.title = ""
        self.description = ""
        self.year = ""
        self.maker = ""
        self.digest = ""
        self.filename = ""
        self.type: int = CartridgeType.NORMAL
        self.region = 0
        self.pokey = False
        self.controller = [0, 0]
        self.bank = 0
        self.flags = 0
        self.crc = 0
        self.buffer: Optional[bytes] = None
        self.size = 0

    @property
    def is_loaded(self) -> bool:
        """Whether an image is held."""
        return self.buffer is not None

    def _read_header(self, header: bytes) -> None:
        title = header[_TITLE_START:_TITLE_START + _TITLE_LENGTH]
        self.title = title.split(b"\x00", 1)[0].decode("latin-1")
        self.size = int.from_bytes(header[49:53], "big")

        kind, options = header[53], header[54]
        if kind == 0:
            if self.size > _LARGE_SUPERCART_SIZE:
                self.type = CartridgeType.SUPERCART_LARGE
            elif options in (2, 3):
                self.type = CartridgeType.SUPERCART
            elif options in (4, 5, 6, 7):
                self.type = CartridgeType.SUPERCART_RAM
            elif options in (8, 9, 10, 11):
                self.type = CartridgeType.SUPERCART_ROM
            else:
                self.type = CartridgeType.NORMAL
        elif kind == 1:
            self.type = CartridgeType.ABSOLUTE
        elif kind == 2:
            self.type = CartridgeType.ACTIVISION
        else:
            self.type = CartridgeType.NORMAL

        self.pokey = bool(options & 1)
        self.controller = [header[55], header[56]]
        self.region = header[57]
        self.flags = 0

    def _load_data(self, data: bytes) -> None:
        if len(data) <= HEADER_SIZE:
            raise CartridgeError("Cartridge data is invalid.")
        self.release()

        header = data[:HEADER_SIZE]
        if header[1:1 + len(HEADER_ID)] == HEADER_ID:
            self._read_header(header)
            body = data[HEADER_SIZE:HEADER_SIZE + self.size]
            if len(body) < self.size:
                self.size = 0
                raise CartridgeError(
                    f"header declares {self.size} bytes but only "
                    f"{len(data) - HEADER_SIZE} follow it"
                )
        else:
            self.size = len(data)
            body = data

        self.buffer = bytes(body)
        self.digest = compute_digest(self.buffer)

    def load(self, filename: str | Path) -> None:
        """Load a cartridge image from ``filename``."""
        name = str(filename)
        if not name:
            raise CartridgeError("Cartridge filename is invalid.")
        self.release()
        try:
            data = Path(name).read_bytes()
        except OSError as error:
            raise CartridgeError(
                f"Failed to open the cartridge file {name} for reading"
            ) from error
        try:
            self._load_data(data)
        except CartridgeError as error:
            raise CartridgeError("Failed to load the cartridge data into memory.") from error
        self.crc = zlib.crc32(data)
        self.filename = name

    def load_buffer(self, data: bytes | bytearray | memoryview) -> None:
        """Load a cartridge image held in memory."""
        self.release()
        self._load_data(bytes(data))
        self.filename = ""

    def _bank(self, bank: int, length: int = BANK_SIZE) -> bytes:
        assert self.buffer is not None
        offset = _bank_offset(bank)
        return self.buffer[offset:offset + length]

    def _write_bank(self, address: int, bank: int) -> None:
        if _bank_offset(bank) < self.size:
            self.memory.write_rom(address, self._bank(bank))
            self.bank = bank

    def store(self) -> None:
        """Map the cartridge's initial banks into memory."""
        if self.buffer is None:
            return
        buffer, size, write = self.buffer, self.size, self.memory.write_rom
        kind = self.type
        if kind == CartridgeType.NORMAL:
            write(MEMORY_SIZE - size, buffer[:size])
        elif kind == CartridgeType.SUPERCART:
            if _bank_offset(7) < size:
                write(49152, self._bank(7))
        elif kind == CartridgeType.SUPERCART_LARGE:
            if _bank_offset(8) < size:
                write(49152, self._bank(8))
                write(16384, self._bank(0))
        elif kind == CartridgeType.SUPERCART_RAM:
            if _bank_offset(7) < size:
                write(49152, self._bank(7))
                self.memory.clear_rom(16384, 16384)
        elif kind == CartridgeType.SUPERCART_ROM:
            if _bank_offset(7) < size and _bank_offset(6) < size:
                write(49152, self._bank(7))
                write(16384, self._bank(6))
        elif kind == CartridgeType.ABSOLUTE:
            write(16384, buffer[:16384])
            write(32768, self._bank(2, 32768))
        elif kind == CartridgeType.ACTIVISION:
            if 122880 < size:
                write(40960, buffer[:16384])
                write(16384, buffer[106496:106496 + 8192])
                write(24576, buffer[98304:98304 + 8192])
                write(32768, buffer[122880:122880 + 8192])
                write(57344, buffer[114688:114688 + 8192])

    def store_bank(self, bank: int) -> None:
        """Switch ``bank`` into the cartridge's switchable window."""
        if self.buffer is None:
            return
        kind = self.type
        if kind in _SUPERCART_TYPES or kind == CartridgeType.SUPERCART_LARGE:
            self._write_bank(32768, bank)
        elif kind == CartridgeType.ABSOLUTE:
            self._write_bank(16384, bank)
        elif kind == CartridgeType.ACTIVISION:
            self._write_bank(40960, bank)

    def write(self, address: int, data: int) -> None:
        """Handle a write to cartridge space: bank switching and POKEY registers."""
        data &= 0xFF
        kind = self.type
        if kind in _SUPERCART_TYPES:
            if 32768 <= address < 49152 and data < 9:
                self.store_bank(data)
        elif kind == CartridgeType.SUPERCART_LARGE:
            if 32768 <= address < 49152 and data < 9:
                self.store_bank(data + 1)
        elif kind == CartridgeType.ABSOLUTE:
            if address == 32768 and data in (1, 2):
                self.store_bank(data - 1)
        elif kind == CartridgeType.ACTIVISION:
            if address >= 65408:
                self.store_bank(address & 7)

        if self.pokey and POKEY_AUDF1 <= address <= POKEY_AUDCTL:
            if self.pokey_device is not None:
                self.pokey_device.set_register(address, data)

    def release(self) -> None:
        """Drop the image and reset the mapper state."""
        if self.buffer is None:
            return
        self.buffer = None
        self.size = 0
        self.type = CartridgeType.NORMAL
        self.region = 0
        self.pokey = False
        self.controller = [0, 0]
        self.bank = 0
        self.flags = 0