"""Satellite network front end dispatching to a platform radio."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .port import LogLevel, SatRadio, log
from .sat_packet import SatPacket


class SatNetwork:
    """Controls a satellite radio: power, channel, enabling and transmission."""

    def __init__(self, api: Optional[SatRadio]) -> None:
        if api is None or not callable(getattr(api, "transmit_packet", None)):
            raise NotImplementedError("no satellite radio with packet transmission")
        self._api = api
        log(LogLevel.INFO, "Hubble Satellite Network initialized\n")

    def _operation(self, name: str) -> Optional[Callable[..., Any]]:
        operation = getattr(self._api, name, None)
        return operation if callable(operation) else None

    def _require(self, name: str) -> Callable[..., Any]:
        operation = self._operation(name)
        if operation is None:
            raise NotImplementedError(f"radio does not support {name}")
        return operation

    def set_power(self, power: int) -> Any:
        """Set the transmission power in dBm."""
        return self._require("power_set")(power)

    def set_channel(self, channel: int) -> Any:
        """Set the transmission channel."""
        return self._require("channel_set")(channel)

    def enable(self) -> Any:
        """Power on the radio hardware."""
        return self._require("enable")()

    def disable(self) -> None:
        """Power off the radio hardware, if the radio supports it."""
        operation = self._operation("disable")
        if operation is not None:
            operation()

    def transmit(self, packet: SatPacket) -> Any:
        """Send ``packet`` over the radio."""
        return self._require("transmit_packet")(packet)