"""Platform services: uptime, logging and the radio and crypto interfaces."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .sat_packet import SatPacket

NONCE_BUFFER_LEN = 16
AES_BLOCK_SIZE = 16

_logger = logging.getLogger("hubblenet")
_START = time.monotonic()


class LogLevel(IntEnum):
    """Severity of a log message, lowest first."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERR = 3

    @property
    def logging_level(self) -> int:
        """The matching level of the standard logging module."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERR: logging.ERROR,
}


def uptime_ms() -> int:
    """Milliseconds elapsed since the process loaded this module."""
    return int((time.monotonic() - _START) * 1000)


def log(level: Union[LogLevel, int], fmt: str, *args: object) -> None:
    """Log a printf-style message at ``level``; a trailing newline is dropped."""
    level = LogLevel(level)
    message = fmt % args if args else fmt
    _logger.log(level.logging_level, message.rstrip("\n"))


class SatRadio(ABC):
    """Radio that sends satellite packets as frequency-step symbols."""

    enabled: bool = False

    @abstractmethod
    def transmit_packet(self, packet: SatPacket) -> None:
        """Send ``packet``; raise on failure."""

    @abstractmethod
    def power_set(self, power: int) -> None:
        """Set the transmission power in dBm."""

    @abstractmethod
    def channel_set(self, channel: int) -> None:
        """Set the reference channel used for transmissions."""

    @abstractmethod
    def enable(self) -> None:
        """Prepare the hardware for transmission."""

    def disable(self) -> None:
        """Return the hardware to its earlier state and mark it disabled."""
        self.enabled = False


class BleCrypto(ABC):
    """Cryptographic primitives needed to build BLE advertisements."""

    @abstractmethod
    def zeroize(self, buf: Union[bytearray, memoryview]) -> None:
        """Overwrite ``buf`` with zeros in place."""

    @abstractmethod
    def aes_ctr(self, key: bytes, nonce: bytes, data: bytes) -> bytes:
        """Encrypt ``data`` with AES in counter mode, starting at ``nonce``."""

    @abstractmethod
    def cmac(self, key: bytes, data: bytes) -> bytes:
        """Return the AES-CMAC of ``data`` under ``key``."""