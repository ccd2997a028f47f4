import pytest

from hubblenet.radio import (
    CHANNEL_STEP,
    PREAMBLE,
    WAIT_PREAMBLE_US,
    WAIT_SYMBOL_GAP_US,
    WAIT_SYMBOL_US,
    RadioDriver,
    SymbolTransmitter,
)
from hubblenet.sat import SatNetwork
from hubblenet.sat_packet import SatPacket


class FakeRf(RadioDriver):
    def __init__(self, events, fail_init=False):
        self.events = events
        self.fail_init = fail_init
        self.power = None

    def init(self):
        if self.fail_init:
            raise OSError("rf init failed")
        self.events.append(("init",))

    def cw_start(self):
        self.events.append(("start",))

    def cw_stop(self):
        self.events.append(("stop",))

    def frequency_step_set(self, step):
        self.events.append(("step", step))

    def power_set(self, power):
        self.power = power
        return 0


@pytest.fixture
def setup():
    events = []
    rf = FakeRf(events)
    tx = SymbolTransmitter(rf, lambda us: events.append(("wait", us)))
    return events, rf, tx


def _tone(step):
    return [("step", step), ("start",), ("wait", WAIT_SYMBOL_US), ("stop",)]


def test_init_called_on_construction(setup):
    events, _, _ = setup
    assert events == [("init",)]


def test_init_failure_propagates():
    with pytest.raises(OSError):
        SymbolTransmitter(FakeRf([], fail_init=True), lambda us: None)


def test_transmit_single_symbol_sequence(setup):
    events, _, tx = setup
    events.clear()
    tx.transmit_packet(SatPacket((5,)))

    expected = []
    for tone in PREAMBLE:
        if tone:
            expected += _tone(0)
        else:
            expected.append(("wait", WAIT_PREAMBLE_US + WAIT_SYMBOL_US))
    expected += _tone(5) + [("wait", WAIT_SYMBOL_GAP_US)]
    assert events == expected


def test_empty_packet_sends_only_preamble(setup):
    events, _, tx = setup
    events.clear()
    tx.transmit_packet(SatPacket(()))
    waits = [e[1] for e in events if e[0] == "wait"]
    assert waits == [
        8000,
        9600,
        8000,
        9600,
        8000,
        9600,
        8000,
        8000,
    ]


def test_channel_offsets_every_step(setup):
    events, _, tx = setup
    tx.channel_set(2)
    events.clear()
    tx.transmit_packet(SatPacket((1, 7, 0)))
    steps = [e[1] for e in events if e[0] == "step"]
    offset = 2 * CHANNEL_STEP
    tones = sum(PREAMBLE)
    assert steps == [offset] * tones + [1 + offset, 7 + offset, offset]
    assert tx.channel_offset == offset


def test_start_stop_balanced(setup):
    events, _, tx = setup
    tx.transmit_packet(SatPacket((3, 4, 5, 6)))
    starts = events.count(("start",))
    stops = events.count(("stop",))
    assert starts == stops == sum(PREAMBLE) + 4


def test_power_set_delegates(setup):
    _, rf, tx = setup
    assert tx.power_set(-5) == 0
    assert rf.power == -5


@pytest.mark.parametrize("power", [-129, 128])
def test_power_out_of_range(setup, power):
    _, _, tx = setup
    with pytest.raises(ValueError):
        tx.power_set(power)


@pytest.mark.parametrize("channel", [-1, 256])
def test_channel_out_of_range(setup, channel):
    _, _, tx = setup
    with pytest.raises(ValueError):
        tx.channel_set(channel)


def test_enable_disable_emit_nothing(setup):
    events, _, tx = setup
    events.clear()
    tx.enable()
    tx.disable()
    assert events == []


def test_works_behind_sat_network(setup):
    events, rf, tx = setup
    network = SatNetwork(tx)
    network.set_channel(1)
    network.set_power(3)
    events.clear()
    network.transmit(SatPacket((9,)))
    steps = [e[1] for e in events if e[0] == "step"]
    assert steps[-1] == 9 + CHANNEL_STEP
    assert rf.power == 3