"""Split a payload into SLOW data packets."""

from __future__ import annotations

import random

from .packet import MAX_DATA_SIZE, SlowFlags, SlowPacket


def fragment_payload(
    sid: bytes, sttl: int, seq_start: int, window: int, payload: bytes
) -> list[SlowPacket]:
    """Cut ``payload`` into packets of at most MAX_DATA_SIZE bytes.

    Packets take consecutive sequence numbers from ``seq_start`` and share one
    random fragment id; every packet but the last carries the MB flag.
    """
    payload = bytes(payload)
    chunks = [
        payload[offset : offset + MAX_DATA_SIZE]
        for offset in range(0, len(payload), MAX_DATA_SIZE)
    ]
    fid = random.randrange(255)
    last = len(chunks) - 1
    return [
        SlowPacket(
            sid=sid,
            sttl=sttl,
            flags=SlowFlags.ACK if fo == last else SlowFlags.ACK | SlowFlags.MB,
            seqnum=(seq_start + fo) & 0xFFFFFFFF,
            acknum=0,
            window=window,
            fid=fid,
            fo=fo & 0xFF,
            data=chunk,
        )
        for fo, chunk in enumerate(chunks)
    ]