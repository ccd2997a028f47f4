# hubblenet

Encoding and transmission of Hubble Network satellite packets: device
data packed into 6-bit symbols, protected by Reed-Solomon parity, and
sent as timed tones through a radio you supply.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module                   | Contents                                                              |
|--------------------------|-----------------------------------------------------------------------|
| `hubblenet.bitarray`     | `BitArray`, a bounded LSB-first bit buffer used to build frames       |
| `hubblenet.reed_solomon` | `ReedSolomonEncoder` over GF(2^6) and `generator_polynomial`          |
| `hubblenet.sat_packet`   | `SatPacketEncoder`, `SatPacket` and `max_payload_length`              |
| `hubblenet.port`         | `LogLevel`, `log`, `uptime_ms` and the `SatRadio` / `BleCrypto` interfaces |
| `hubblenet.sat`          | `SatNetwork`, a front end that dispatches to a `SatRadio`             |
| `hubblenet.radio`        | `SymbolTransmitter`, timing symbols out through a `RadioDriver`       |

## Satellite packets

`SatPacketEncoder.encode(device_id, payload)` packs 34 bits of the device
id, a 10-bit sequence number, a 16-bit authentication tag (zero) and the
payload, adds an alignment bit and pads to whole 6-bit symbols. The frame
is then padded to the smallest of the supported sizes (11 to 25 symbols),
Reed-Solomon parity symbols are appended, and the frame-size index is
written at positions 0, 9 and 18. The resulting `SatPacket` holds 24 to 44
symbols. Each call advances the encoder's 16-bit sequence number.

```python
from hubblenet.sat_packet import SatPacketEncoder, max_payload_length

encoder = SatPacketEncoder(0)
packet = encoder.encode(0x123456789, b"hi")
print(len(packet), list(packet))
print(max_payload_length())  # 11 bytes
```

A payload longer than `max_payload_length()` raises `ValueError`.

The building blocks are usable on their own:

```python
from hubblenet.bitarray import BitArray
from hubblenet.reed_solomon import ReedSolomonEncoder

bits = BitArray()
bits.append(0xFF, 8)
bits.set_bit(1, 0)
print(bits.to_bytes())  # b'\xfd'

parity = ReedSolomonEncoder(5).encode([1, 2, 3, 4])  # 10 parity symbols
```

`BitArray.append` raises `ValueError` when the array would reach its
capacity of 616 bits; `get_bit` and `set_bit` raise `IndexError` outside
the bits appended so far.

## Transmitting

`SymbolTransmitter` implements `SatRadio` on top of a `RadioDriver`, a
small abstract class you implement for your hardware (`init`, `cw_start`,
`cw_stop`, `frequency_step_set`, `power_set`). A transmission sends an
8-slot preamble on the channel's reference frequency and then each symbol
as a tone offset from it, with the channel spacing at 66 frequency steps.
The waiting function can be replaced, which is handy for testing:

```python
from hubblenet.radio import SymbolTransmitter
from hubblenet.sat import SatNetwork

radio = SymbolTransmitter(my_driver, busy_wait=lambda us: None)
sat = SatNetwork(radio)
sat.set_channel(3)
sat.enable()
sat.transmit(packet)
sat.disable()
```

`SatNetwork` raises `NotImplementedError` when given no radio, or when the
radio lacks the operation being called (`disable` is silently skipped).

## Logging and uptime

`hubblenet.port.log(level, fmt, *args)` formats printf-style and writes to
the standard `logging` logger named `hubblenet` at the level matching the
`LogLevel`. `uptime_ms()` gives milliseconds since the module was loaded.

## What this package does not do

- It does not build Bluetooth Low Energy advertisements. `hubblenet.port`
  defines the `BleCrypto` interface (`zeroize`, `aes_ctr`, `cmac`), but the
  package ships no implementation of it and nothing that uses it.
- It does not drive any real radio hardware; you provide the `RadioDriver`.
- It has no command-line program.