# prosys7800

Building blocks of an Atari 7800 console in pure Python. The package uses only the
standard library.

## Modules

- `prosys7800.hash`: `compute_digest(data)` returns the 32-character lowercase hex
  MD5 of a ROM image. The game database uses this digest as its key.
- `prosys7800.palette`: `Palette` holds a 768-byte table of 256 RGB entries. It starts
  out as the built-in NTSC palette. `load(data)` replaces the table and raises
  `ValueError` if `data` has fewer than 768 bytes. `color(index)` returns an
  `(r, g, b)` tuple and raises `IndexError` for an index outside 0 to 255.
- `prosys7800.memory`: `Memory` is the 64 KiB address space. It keeps a RAM byte array
  and a per-byte ROM flag. `reset()` zeroes RAM and marks everything above the first
  16 KiB as ROM.
  - `read(address)` clears the interrupt flag when the timer registers are read.
  - `write(address, data)` passes writes to ROM, to the INPTCTRL register, to the
    TIA audio registers, to SWCHA/SWCHB and to the timer registers on to optional
    callbacks given to the constructor. It handles WSYNC itself and writes the
    mirrored RAM ranges (0x40 to 0xFF and 0x2040 to 0x20FF, 0x140 to 0x1FF and 0x2140
    to 0x21FE).
  - `write_rom(address, data)` and `clear_rom(address, size)` map blocks in and out.
    They do nothing if the block does not fit.
- `prosys7800.pokey`: `Pokey` generates 8-bit unsigned samples into a 624-byte ring
  buffer (`buffer`) using polynomial counters.
  - `set_register(address, value)` takes the POKEY register addresses 0x4000 to 0x4008.
  - `process(length)` writes `length` samples.
  - `reset()` and `clear()` restore the initial state.
  - Pass `seed` to make the 17-bit noise table repeatable.
- `prosys7800.cartridge`: `Cartridge` reads images with or without the 128-byte
  `ATARI7800` header. It holds the title, size, type (`CartridgeType`), POKEY flag,
  controllers, region and digest.
  - `load(filename)` and `load_buffer(data)` read an image. `load` also records a
    CRC-32 of the file.
  - `store()` maps the initial banks into `Memory`.
  - `store_bank(bank)` and `write(address, data)` perform bank switching for the
    SuperCart, Absolute and Activision schemes. `write` also forwards POKEY register
    writes when the cartridge has a POKEY.
  - `release()` drops the image.
  - Bad input raises `CartridgeError`.
- `prosys7800.bios`: `Bios` loads an image with `load(filename)`. `store()` maps it to
  the top of memory when it is `enabled`. A missing file raises `BiosError`.
- `prosys7800.database`: a built-in table of known cartridges.
  `find_entry(digest)` returns a `DatabaseEntry` or `None`.
  `load_into(cartridge, enabled)` copies the known type, POKEY flag, controllers,
  region and flags onto a `Cartridge`.
- `prosys7800.region`: `Region` (NTSC, PAL, AUTO), `Rect` and `RegionSettings`.
  `RegionSettings` holds the display and visible areas, palette, frame rate, scanline
  count and sound buffer size. `resolve_region(region_type, cartridge_region)` turns
  AUTO into NTSC or PAL. `region_settings(region)` returns the settings for NTSC or
  PAL and raises `ValueError` for anything else.
- `prosys7800.prosystem`: `ProSystem` wires `Memory`, `Cartridge`, `Bios`, `Pokey` and
  `Palette` together.
  - `save(filename)` writes a save state of 16445 bytes, or 32829 bytes for
    SuperCart RAM cartridges. The state holds the header, version, cartridge digest,
    `CpuRegisters`, current bank and RAM.
  - `load(filename)` checks the size, the header and the digest of the loaded
    cartridge, then restores the state.
  - `pause(pause)` only takes effect while the machine is active. `close()` stops the
    machine and drops the cartridge.
  - Failures raise `StateError`.

## Examples

Identify a cartridge and apply the database settings:

```python
from prosys7800.memory import Memory
from prosys7800.cartridge import Cartridge
from prosys7800.database import load_into

cart = Cartridge(Memory())
cart.load("game.a78")
entry = load_into(cart, True)
print(cart.digest, cart.type, entry.title if entry else "unknown")
```

Look up the settings for a region:

```python
from prosys7800.region import Region, region_settings, resolve_region

settings = region_settings(resolve_region(Region.AUTO, 1))
print(settings.frequency, settings.scanlines, settings.sound_length)
```

## What it does not do

There is no 6502 CPU, no graphics chip, no TIA sound and no RIOT timer or input
handling. As a result, the package cannot execute frames, draw a picture or play a
game. `Memory` only hands TIA and RIOT register writes to callbacks that you supply.
The CPU registers in `ProSystem` are plain values that are stored in and restored from
save states. Images are read as plain files; zip archives are not opened. There is no
command-line program and no display window.

## Tests

```
pip install .[test]
pytest
```