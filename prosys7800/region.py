"""Television regions: display geometry, timing and palette for NTSC and PAL."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .palette import DEFAULT_PALETTE, PALETTE_SIZE

SOUND_SAMPLE_RATE = 44100


class Region(IntEnum):
    """Television standard a cartridge or the console runs under."""

    NTSC = 0
    PAL = 1
    AUTO = 2


@dataclass(frozen=True)
class Rect:
    """An inclusive rectangle of scanlines and pixel columns."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def length(self) -> int:
        """Width in pixels, both edges included."""
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        """Height in scanlines, both edges included."""
        return self.bottom - self.top + 1

    @property
    def area(self) -> int:
        """Number of pixels covered."""
        return self.length * self.height


@dataclass(frozen=True)
class RegionSettings:
    """Everything that changes between NTSC and PAL machines."""

    region: Region
    display_area: Rect
    visible_area: Rect
    palette: bytes
    frequency: int
    scanlines: int
    sound_size: int

    @property
    def sound_length(self) -> int:
        """Audio samples per frame at 44.1 kHz."""
        return SOUND_SAMPLE_RATE // self.frequency

    @property
    def video_height(self) -> int:
        """Rows of the output image, from the top of the display to the visible bottom."""
        return self.visible_area.bottom - self.display_area.top


PAL_PALETTE = bytes.fromhex(
    "000000 1c1c1c 393939 595959"
    "797979 929292 ababab bcbcbc"
    "cdcdcd d9d9d9 e6e6e6 ececec"
    "f2f2f2 f8f8f8 ffffff ffffff"
    "263001 243803 234005 51541b"
    "806931 978135 af993a c2a73e"
    "d5b543 dbc03d e1cb38 e2d836"
    "e3e534 eff258 fbff7d fbff7d"
    "391701 5e2304 833008 a54716"
    "c85f24 e37820 ff911d ffab1d"
    "ffc51d ffce34 ffd84c ffe651"
    "fff456 fff977 ffff98 ffff98"
    "451904 721e11 9f241e b33a20"
    "c85122 e36920 ff811e ff8c25"
    "ff982c ffae38 ffc545 ffc559"
    "ffc66d ffd587 ffe4a1 ffe4a1"
    "4a1704 7e1a0d b21d17 c82119"
    "df251c ec3b38 fa5255 fc6161"
    "ff706e ff7f7e ff8f8f ff9d9e"
    "ffabad ffb9bd ffc7ce ffc7ce"
    "050568 3b136d 712272 8b2a8c"
    "a532a6 b938ba cd3ecf db47dd"
    "ea51eb f45ff5 fe6dff fe7afd"
    "ff87fb ff95fd ffa4ff ffa4ff"
    "280479 400984 590f90 70249d"
    "8839aa a441c3 c04adc d054ed"
    "e05eff e96dff f27cff f88aff"
    "ff98ff fea1ff feabff feabff"
    "35088a 420aad 500cd0 6428d0"
    "7945d0 8d4bd4 a251d9 b058ec"
    "be60ff c56bff cc77ff d183ff"
    "d790ff db9dff dfaaff dfaaff"
    "051e81 0626a5 082fca 263dd4"
    "444cde 4f5aee 5a68ff 6575ff"
    "7183ff 8091ff 90a0ff 97a9ff"
    "9fb2ff afbeff c0cbff c0cbff"
    "051e81 0626a5 082fca 263dd4"
    "444cde 4f5aee 5a68ff 6575ff"
    "7183ff 8091ff 90a0ff 97a9ff"
    "9fb2ff afbeff c0cbff c0cbff"
    "0c048b 2218a0 382db5 483ec7"
    "584fda 6159ec 6b64ff 7a74ff"
    "8a84ff 918eff 9998ff a5a3ff"
    "b1aeff b8b8ff c0c2ff c0c2ff"
    "1d295a 1d3876 1d4892 1c5cac"
    "1c71c6 3286cf 489bd9 4ea8ec"
    "55b6ff 70c7ff 8cd8ff 93dbff"
    "9bdfff afe4ff c3e9ff c3e9ff"
    "2f4302 395202 446103 417a12"
    "3e9421 4a9f2e 57ab3b 5cbd55"
    "61d070 69e27a 72f584 7cfa8d"
    "87ff97 9affa6 adffb6 adffb6"
    "0a4108 0d540a 10680d 137d0f"
    "169212 19a514 1cb917 1ec919"
    "21d91b 47e42d 6ef040 78f74d"
    "83ff5b 9aff7a b2ff9a b2ff9a"
    "04410b 05530e 066611 077714"
    "088817 099b1a 0baf1d 48c41f"
    "86d922 8fe924 99f927 a8fc41"
    "b7ff5b c9ff6e dcff81 dcff81"
    "02350f 073f15 0c4a1c 2d5f1e"
    "4f7420 598324 649228 82a12e"
    "a1b034 a9c13a b2d241 c4d945"
    "d6e149 e4f04e f2ff53 f2ff53"
)

NTSC_PALETTE = bytes(DEFAULT_PALETTE)

assert len(PAL_PALETTE) == PALETTE_SIZE
assert len(NTSC_PALETTE) == PALETTE_SIZE

_SETTINGS = {
    Region.NTSC: RegionSettings(
        region=Region.NTSC,
        display_area=Rect(0, 16, 319, 258),
        visible_area=Rect(0, 26, 319, 250),
        palette=NTSC_PALETTE,
        frequency=60,
        scanlines=262,
        sound_size=524,
    ),
    Region.PAL: RegionSettings(
        region=Region.PAL,
        display_area=Rect(0, 16, 319, 308),
        visible_area=Rect(0, 26, 319, 297),
        palette=PAL_PALETTE,
        frequency=50,
        scanlines=312,
        sound_size=624,
    ),
}


def resolve_region(region_type: int, cartridge_region: int) -> Region:
    """Pick the concrete region: PAL if forced, or if automatic and the cartridge is PAL.

    Every other combination runs as NTSC.
    """
    if region_type == Region.PAL or (
        region_type == Region.AUTO and cartridge_region == Region.PAL
    ):
        return Region.PAL
    return Region.NTSC


def region_settings(region: int) -> RegionSettings:
    """Return the settings for NTSC or PAL; AUTO must be resolved first."""
    try:
        return _SETTINGS[Region(region)]
    except (KeyError, ValueError):
        raise ValueError(f"no settings for region {region!r}; resolve it first") from None