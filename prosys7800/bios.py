"""The console BIOS image and mapping it to the top of memory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .memory import MEMORY_SIZE, Memory


class BiosError(Exception):
    """Raised when a BIOS image cannot be read."""


class Bios:
    """A BIOS image that is mapped to the end of the address space when enabled."""

    def __init__(self, memory: Memory, enabled: bool = False) -> None:
        self.memory = memory
        self.enabled = enabled
        self.filename = ""
        self.data: Optional[bytes] = None

    @property
    def is_loaded(self) -> bool:
        """Whether an image is held."""
        return self.data is not None

    @property
    def size(self) -> int:
        """Length of the held image in bytes."""
        return 0 if self.data is None else len(self.data)

    def load(self, filename: str | Path) -> None:
        """Read the BIOS image from ``filename``."""
        name = str(filename)
        if not name:
            raise BiosError("Bios filename is invalid.")
        self.release()
        try:
            self.data = Path(name).read_bytes()
        except OSError as error:
            raise BiosError(
                f"Failed to open the bios file {name} for reading."
            ) from error
        self.filename = name

    def release(self) -> None:
        """Drop the held image."""
        self.data = None

    def store(self) -> None:
        """Map the image to the top of memory if loaded and enabled."""
        if self.data is not None and self.enabled:
            self.memory.write_rom(MEMORY_SIZE - len(self.data), self.data)