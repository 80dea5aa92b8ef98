"""POKEY sound chip: four channels of polynomial-counter audio."""

from __future__ import annotations

import random

POKEY_BUFFER_SIZE = 624
DEFAULT_SIZE = 524

POKEY_AUDF1 = 0x4000
POKEY_AUDC1 = 0x4001
POKEY_AUDF2 = 0x4002
POKEY_AUDC2 = 0x4003
POKEY_AUDF3 = 0x4004
POKEY_AUDC3 = 0x4005
POKEY_AUDF4 = 0x4006
POKEY_AUDC4 = 0x4007
POKEY_AUDCTL = 0x4008

# AUDC bits
NOTPOLY5 = 0x80
POLY4 = 0x40
PURE = 0x20
VOLUME_ONLY = 0x10
VOLUME_MASK = 0x0F

# AUDCTL bits
POLY9 = 0x80
CH1_179 = 0x40
CH3_179 = 0x20
CH1_CH2 = 0x10
CH3_CH4 = 0x08
CH1_FILTER = 0x04
CH2_FILTER = 0x02
CLOCK_15 = 0x01

DIV_64 = 28
DIV_15 = 114

POLY4_SIZE = 0x000F
POLY5_SIZE = 0x001F
POLY9_SIZE = 0x01FF
POLY17_SIZE = 0x0001FFFF

CHANNEL1, CHANNEL2, CHANNEL3, CHANNEL4 = range(4)
_SAMPLE = 4
_CHANNELS = range(4)

_SILENT = 0x7FFFFFFF
_UINT_MASK = 0xFFFFFFFF

_POLY4 = bytes((1, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 0, 1, 0, 0))
_POLY5 = bytes((
    0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0, 0, 1, 0, 1,
    0, 1, 1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0, 0, 1,
))

_FREQUENCY_REGISTERS = {
    POKEY_AUDF1: CHANNEL1,
    POKEY_AUDF2: CHANNEL2,
    POKEY_AUDF3: CHANNEL3,
    POKEY_AUDF4: CHANNEL4,
}
_CONTROL_REGISTERS = {
    POKEY_AUDC1: CHANNEL1,
    POKEY_AUDC2: CHANNEL2,
    POKEY_AUDC3: CHANNEL3,
    POKEY_AUDC4: CHANNEL4,
}


class Pokey:
    """Sound generator writing 8-bit unsigned samples into a ring buffer."""

    def __init__(self, seed: int | None = None) -> None:
        self.buffer = bytearray(POKEY_BUFFER_SIZE)
        self.size = DEFAULT_SIZE
        self.frequency = 1787520
        self.sample_rate = 31440
        self._rng = random.Random(seed)
        self._sound_counter = 0
        self.reset()

    @property
    def sound_counter(self) -> int:
        """Position in the buffer where the next samples are written."""
        return self._sound_counter

    def reset(self) -> None:
        """Reseed the 17-bit noise table and return every register to zero."""
        self.poly17 = bytes(self._rng.getrandbits(1) for _ in range(POLY17_SIZE))
        self._poly_adjust = 0
        self._poly4_counter = 0
        self._poly5_counter = 0
        self._poly17_counter = 0
        self.sample_max = (self.frequency << 8) // self.sample_rate
        self._sample_count = [0, 0]
        self.poly17_size = POLY17_SIZE
        self.out_vol = [0] * 4
        self.output = [0] * 4
        self.divide_count = [0] * 4
        self.divide_max = [_SILENT] * 4
        self.audc = [0] * 4
        self.audf = [0] * 4
        self.audctl = 0
        self.base_multiplier = DIV_64

    def set_register(self, address: int, value: int) -> None:
        """Write ``value`` to the POKEY register at ``address``."""
        value &= 0xFF
        if address in _FREQUENCY_REGISTERS:
            channel = _FREQUENCY_REGISTERS[address]
            self.audf[channel] = value
            mask = 1 << channel
            if channel == CHANNEL1 and self.audctl & CH1_CH2:
                mask |= 1 << CHANNEL2
            elif channel == CHANNEL3 and self.audctl & CH3_CH4:
                mask |= 1 << CHANNEL4
        elif address in _CONTROL_REGISTERS:
            channel = _CONTROL_REGISTERS[address]
            self.audc[channel] = value
            mask = 1 << channel
        elif address == POKEY_AUDCTL:
            self.audctl = value
            mask = 0x0F
            self.poly17_size = POLY9_SIZE if value & POLY9 else POLY17_SIZE
            self.base_multiplier = DIV_15 if value & CLOCK_15 else DIV_64
        else:
            mask = 0

        audf, base = self.audf, self.base_multiplier
        if mask & (1 << CHANNEL1):
            if self.audctl & CH1_179:
                new_value = audf[CHANNEL1] + 4
            else:
                new_value = (audf[CHANNEL1] + 1) * base
            self._update_divider(CHANNEL1, new_value, reset_to=0)

        if mask & (1 << CHANNEL2):
            if self.audctl & CH1_CH2:
                joined = audf[CHANNEL2] * 256 + audf[CHANNEL1]
                if self.audctl & CH1_179:
                    new_value = joined + 7
                else:
                    new_value = (joined + 1) * base
            else:
                new_value = (audf[CHANNEL2] + 1) * base
            self._update_divider(CHANNEL2, new_value)

        if mask & (1 << CHANNEL3):
            if self.audctl & CH3_179:
                new_value = audf[CHANNEL3] + 4
            else:
                new_value = (audf[CHANNEL3] + 1) * base
            self._update_divider(CHANNEL3, new_value)

        if mask & (1 << CHANNEL4):
            if self.audctl & CH3_CH4:
                joined = audf[CHANNEL4] * 256 + audf[CHANNEL3]
                if self.audctl & CH3_179:
                    new_value = joined + 7
                else:
                    new_value = (joined + 1) * base
            else:
                new_value = (audf[CHANNEL4] + 1) * base
            self._update_divider(CHANNEL4, new_value)

        for channel in _CHANNELS:
            if not mask & (1 << channel):
                continue
            control = self.audc[channel]
            if (
                control & VOLUME_ONLY
                or control & VOLUME_MASK == 0
                or self.divide_max[channel] < (self.sample_max >> 8)
            ):
                self.out_vol[channel] = control & VOLUME_MASK
                self.divide_count[channel] = _SILENT
                self.divide_max[channel] = _SILENT

    def _update_divider(self, channel: int, new_value: int, reset_to: int | None = None) -> None:
        if new_value == self.divide_max[channel]:
            return
        self.divide_max[channel] = new_value
        if self.divide_count[channel] > new_value:
            self.divide_count[channel] = new_value if reset_to is None else reset_to

    def _sample_view(self) -> int:
        low, high = self._sample_count
        return (low >> 8) | ((high & 0xFF) << 24)

    def _set_sample_view(self, value: int) -> None:
        low, high = self._sample_count
        self._sample_count[0] = (low & 0xFF) | ((value & 0xFFFFFF) << 8)
        self._sample_count[1] = (high & ~0xFF) | ((value >> 24) & 0xFF)

    def process(self, length: int) -> None:
        """Generate ``length`` samples at the current buffer position."""
        if length < 0:
            raise ValueError(f"sample count must not be negative: {length}")
        if self._sound_counter + length > len(self.buffer):
            raise ValueError(
                f"{length} samples at position {self._sound_counter} overrun the "
                f"{len(self.buffer)}-byte buffer"
            )
        position = self._sound_counter
        remaining = length
        while remaining:
            event_min = self._sample_view()
            next_event = _SAMPLE
            for channel in _CHANNELS:
                if self.divide_count[channel] <= event_min:
                    event_min = self.divide_count[channel]
                    next_event = channel

            for channel in _CHANNELS:
                self.divide_count[channel] -= event_min
            self._set_sample_view(self._sample_view() - event_min)
            self._poly_adjust = (self._poly_adjust + event_min) & _UINT_MASK

            if next_event != _SAMPLE:
                self._clock_channel(next_event)
            else:
                self._sample_count[0] = (self._sample_count[0] + self.sample_max) & _UINT_MASK
                level = sum(self.out_vol) & 0xFF
                self.buffer[position] = ((level << 2) + 8) & 0xFF
                position += 1
                remaining -= 1

        self._sound_counter += length
        if self._sound_counter >= self.size:
            self._sound_counter = 0

    def _clock_channel(self, channel: int) -> None:
        adjust = self._poly_adjust
        self._poly4_counter = (self._poly4_counter + adjust) % POLY4_SIZE
        self._poly5_counter = (self._poly5_counter + adjust) % POLY5_SIZE
        self._poly17_counter = (self._poly17_counter + adjust) % self.poly17_size
        self._poly_adjust = 0
        self.divide_count[channel] = (
            self.divide_count[channel] + self.divide_max[channel]
        ) & _UINT_MASK

        control = self.audc[channel]
        if control & NOTPOLY5 or _POLY5[self._poly5_counter]:
            if control & PURE:
                self.output[channel] = 0 if self.output[channel] else 1
            elif control & POLY4:
                self.output[channel] = _POLY4[self._poly4_counter]
            else:
                self.output[channel] = self.poly17[self._poly17_counter]

        self.out_vol[channel] = control & VOLUME_MASK if self.output[channel] else 0

    def clear(self) -> None:
        """Fill the sample buffer with zeros."""
        self.buffer[:] = bytes(len(self.buffer))