"""The 256-colour RGB palette used to turn colour indices into pixels."""

from __future__ import annotations

PALETTE_SIZE = 768

DEFAULT_PALETTE = bytes.fromhex(
    "000000 252525 343434 4F4F4F"
    "5B5B5B 696969 7B7B7B 8A8A8A"
    "A7A7A7 B9B9B9 C5C5C5 D0D0D0"
    "D7D7D7 E1E1E1 F4F4F4 FFFFFF"
    "4C3200 623A00 7B4A00 9A6000"
    "B57400 CC8500 E79E08 F7AF10"
    "FFC318 FFD020 FFD828 FFDF30"
    "FFE63B FFF440 FFFA4B FFFF50"
    "992500 AA2500 B42500 D33000"
    "DD4802 E25009 F46700 F47510"
    "FF9E10 FFAC20 FFBA3A FFBF50"
    "FFC66D FFD580 FFE490 FFE699"
    "980C0C 990C0C C21300 D31300"
    "E23500 E34000 E44020 E55230"
    "FD7854 FF8A6A FF987C FFA48B"
    "FFB39E FFC2B2 FFD0BA FFD7C0"
    "990000 A90000 C20400 D30400"
    "DA0400 DB0800 E42020 F64040"
    "FB7070 FB7E7E FB8F8F FF9F9F"
    "FFABAB FFB9B9 FFC9C9 FFCFCF"
    "7E0050 800050 80005F 950B74"
    "AA2288 BB2F9A CE3FAD D75AB6"
    "E467C3 EF72CE FB7EDA FF8DE1"
    "FF9DE5 FFA5E7 FFAFEA FFB8EC"
    "48006C 5C0488 650D90 7B23A7"
    "933BBF 9D45C9 A74FD3 B25ADE"
    "BD65E9 C56DF1 CE76FA D583FF"
    "DA90FF DE9CFF E2A9FF E6B6FF"
    "1B0070 221B8D 3730A2 4841B3"
    "5952C4 635CCE 6F68DA 7D76E8"
    "8780F8 938CFF 9D97FF A8A3FF"
    "B3AFFF BCB8FF C4C1FF DAD1FF"
    "000D7F 0012A7 0018C0 0A2BD1"
    "1B4AE3 2F58F0 3768FF 4979FF"
    "5B85FF 6D96FF 7FA3FF 8CADFF"
    "96B4FF A8C0FF B7CBFF C6D6FF"
    "00295A 003876 004892 005CAC"
    "0071C6 0086D0 0A9BDF 1AA8EC"
    "2BB6FF 3FC2FF 45CBFF 59D3FF"
    "7FDAFF 8FDEFF A0E2FF B0EBFF"
    "004A00 004C00 006A20 508E79"
    "409999 009CAA 00A1BB 01A4CC"
    "03A5D7 05DAE2 18E5FF 34EAFF"
    "49EFFF 66F2FF 84F4FF 9EF9FF"
    "004A00 005D00 007000 008300"
    "009500 00AB00 07BD07 0AD00A"
    "1AD540 5AF177 82EFA7 84EDD1"
    "89FFED 7DFFFF 93FFFF 9BFFFF"
    "224A03 275304 306405 3C770C"
    "458C11 5AA513 1BD209 1FDD00"
    "3DCD2D 3DCD30 58CC40 60D350"
    "A2EC55 B3F24A BBF65D C4F870"
    "2E3F0C 364A0F 405615 465F17"
    "57771A 65851C 74931D 8FA525"
    "ADB72C BCC730 C9D533 D4E03B"
    "E0EC42 EAF645 F0FD47 F4FF6F"
    "552400 5A2C00 6C3B00 794B00"
    "B97500 BB8500 C1A120 D0B02F"
    "DEBE3F E6C645 EDCD57 F5DB62"
    "FBE569 FCEE6F FDF377 FDF37F"
    "5C2700 5C2F00 713B00 7B4800"
    "B96820 BB7220 C58629 D79633"
    "E6A440 F4B14B FDC158 FFCC55"
    "FFD461 FFDD69 FFE679 FFEA98"
)


class Palette:
    """A 256-entry RGB colour table, 768 bytes laid out as R, G, B triples."""

    def __init__(self, data: bytes | bytearray | None = None) -> None:
        self.data = bytearray(DEFAULT_PALETTE)
        self.default = True
        self.filename: str | None = None
        if data is not None:
            self.load(data)

    def load(self, data: bytes | bytearray | memoryview) -> None:
        """Replace the table with the first 768 bytes of ``data``."""
        raw = bytes(data)
        if len(raw) < PALETTE_SIZE:
            raise ValueError(
                f"palette data must hold at least {PALETTE_SIZE} bytes, got {len(raw)}"
            )
        self.data[:] = raw[:PALETTE_SIZE]

    def color(self, index: int) -> tuple[int, int, int]:
        """Return the (red, green, blue) triple for colour ``index`` (0-255)."""
        if not 0 <= index < PALETTE_SIZE // 3:
            raise IndexError(f"palette index out of range: {index}")
        offset = index * 3
        red, green, blue = self.data[offset:offset + 3]
        return red, green, blue

    def __len__(self) -> int:
        return PALETTE_SIZE // 3