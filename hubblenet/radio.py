"""Satellite transmitter that keys a continuous-wave RF driver symbol by symbol."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Optional

from .port import SatRadio
from .sat_packet import SatPacket

WAIT_SYMBOL_US = 8000
WAIT_PREAMBLE_US = 1600
WAIT_SYMBOL_GAP_US = 1800
CHANNEL_STEP = 66

# True where the reference tone is sent, False where the carrier stays off.
PREAMBLE = (True, False, True, False, True, False, True, True)

_CHANNEL_RANGE = range(0, 256)
_POWER_RANGE = range(-128, 128)


def busy_wait_us(microseconds: int) -> None:
    """Spin until ``microseconds`` have elapsed."""
    deadline = time.perf_counter_ns() + microseconds * 1000
    while time.perf_counter_ns() < deadline:
        pass


class RadioDriver(ABC):
    """Board support for generating a continuous wave at a frequency step."""

    @abstractmethod
    def init(self) -> None:
        """Initialise the RF module; raise on failure."""

    @abstractmethod
    def cw_start(self) -> None:
        """Start transmitting a continuous wave."""

    @abstractmethod
    def cw_stop(self) -> None:
        """Stop transmitting the continuous wave."""

    @abstractmethod
    def frequency_step_set(self, step: int) -> None:
        """Set the frequency step from the base frequency."""

    @abstractmethod
    def power_set(self, power: int) -> Any:
        """Set the output power in dBm."""


class SymbolTransmitter(SatRadio):
    """Sends satellite packets as timed tones on an RF driver."""

    def __init__(
        self,
        rf: RadioDriver,
        busy_wait: Optional[Callable[[int], None]] = None,
    ) -> None:
        rf.init()
        self._rf = rf
        self._busy_wait = busy_wait if busy_wait is not None else busy_wait_us
        self.channel = 0
        self.enabled = False

    @property
    def channel_offset(self) -> int:
        """Frequency step of the current channel's reference frequency."""
        return self.channel * CHANNEL_STEP

    def _tone(self, step: int) -> None:
        self._rf.frequency_step_set(step)
        self._rf.cw_start()
        self._busy_wait(WAIT_SYMBOL_US)
        self._rf.cw_stop()

    def transmit_packet(self, packet: SatPacket) -> None:
        """Send the preamble followed by every symbol of ``packet``."""
        offset = self.channel_offset
        for tone in PREAMBLE:
            if tone:
                self._tone(offset)
            else:
                self._busy_wait(WAIT_PREAMBLE_US + WAIT_SYMBOL_US)

        for symbol in packet:
            self._tone(symbol + offset)
            self._busy_wait(WAIT_SYMBOL_GAP_US)

    def power_set(self, power: int) -> Any:
        """Set the transmission power in dBm."""
        if power not in _POWER_RANGE:
            raise ValueError(f"power {power} is outside -128..127")
        return self._rf.power_set(power)

    def channel_set(self, channel: int) -> None:
        """Select the channel used by later transmissions."""
        if channel not in _CHANNEL_RANGE:
            raise ValueError(f"channel {channel} is outside 0..255")
        self.channel = channel

    def enable(self) -> None:
        """Mark the transmitter ready; the driver is set up once initialised."""
        self.enabled = True

    def disable(self) -> None:
        """Mark the transmitter as no longer in use."""
        self.enabled = False