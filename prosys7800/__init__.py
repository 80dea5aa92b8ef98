"""Atari 7800 console components: cartridges, BIOS, memory map, POKEY sound, palette, game database, regions and save states."""

__version__ = "0.1.0"
__all__ = [
    "bios",
    "cartridge",
    "database",
    "hash",
    "memory",
    "palette",
    "pokey",
    "prosystem",
    "region",
]