# slowperipheral

Building blocks for a peripheral of the SLOW transport protocol, which runs on top of UDP.
The package provides three things:

- `slowperipheral.packet` builds SLOW packets and reads them back. A packet is a 32-byte little-endian header followed by data.
- `slowperipheral.fragmenter` splits a payload into data packets of up to 1440 bytes each.
- `slowperipheral.uuid_generator` creates random 16-byte session identifiers.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Packets

```python
from slowperipheral.packet import SlowFlags, SlowPacket, serialize, deserialize

packet = SlowPacket(seqnum=42, flags=SlowFlags.ACK, window=4096, data=b"Hello")
raw = serialize(packet)  # same as packet.to_bytes()
assert len(raw) == 32 + 5
assert deserialize(raw).seqnum == 42
assert SlowPacket.from_bytes(packet.to_bytes()).data == b"Hello"
```

`SlowPacket` has these fields:

- `sid`: 16 bytes.
- `sttl`: 27 bits.
- `flags`: a `SlowFlags` value. The flags are `CONNECT`, `REVIVE`, `ACK`, `ACCEPT` and `MB`.
- `seqnum`, `acknum`: 32 bits each.
- `window`: 16 bits.
- `fid`, `fo`: 8 bits each.
- `data`: bytes.

Numeric fields act like fixed-width integers, so any bits above their width are dropped. A `sid` that is not exactly 16 bytes raises `ValueError`.

On the wire, `sttl` and `flags` share one 32-bit word, with the flags in its top five bits.

If `deserialize` / `SlowPacket.from_bytes` is given a buffer shorter than the 32-byte header, it returns an empty packet (all fields zero) instead of raising an error.

## Fragmenting

```python
from slowperipheral.fragmenter import fragment_payload

fragments = fragment_payload(bytes(16), 30000, 1, 4096, b"X" * 4000)
assert len(fragments) == 3
assert fragments[0].seqnum == 1 and fragments[-1].seqnum == 3
```

`fragment_payload` returns a list of `SlowPacket`:

- Every fragment carries the `ACK` flag.
- Every fragment except the last also carries `MB`.
- Sequence numbers are consecutive, starting at `seq_start`.
- The fragment offsets `fo` count up from 0.
- All fragments share one random fragment id, `fid`, in the range 0–254.

An empty payload gives an empty list.

## Session identifiers

`slowperipheral.uuid_generator.generate()` returns 16 random bytes. The version nibble is set to 8 and the variant bits are set to the RFC 4122 variant.

## What this package does not do

The package has no networking:

- It does not open UDP sockets.
- It does not perform the CONNECT / ACCEPT handshake with a central.
- It does not send fragments.
- It installs no command-line program.

It only encodes, decodes and fragments packets. Sending and receiving them is left to the caller.

## Tests

```
pytest
```