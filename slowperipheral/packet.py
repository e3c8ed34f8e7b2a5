"""SLOW packet model and its little-endian wire format."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntFlag

MAX_DATA_SIZE = 1440
HEADER_SIZE = 32
SID_SIZE = 16

_STTL_MASK = 0x07FFFFFF
_FLAGS_MASK = 0x1F
_FLAGS_SHIFT = 27
_HEADER = struct.Struct("<16sIIIHBB")


class SlowFlags(IntFlag):
    """Control flags carried in the top five bits of the sttl word."""

    CONNECT = 0x01
    REVIVE = 0x02
    ACK = 0x04
    ACCEPT = 0x08
    MB = 0x10


@dataclass
class SlowPacket:
    """One SLOW datagram: a 32-byte header followed by the data."""

    sid: bytes = bytes(SID_SIZE)
    sttl: int = 0
    flags: SlowFlags = SlowFlags(0)
    seqnum: int = 0
    acknum: int = 0
    window: int = 0
    fid: int = 0
    fo: int = 0
    data: bytes = b""

    def __post_init__(self) -> None:
        self.sid = bytes(self.sid)
        if len(self.sid) != SID_SIZE:
            raise ValueError(f"sid must be {SID_SIZE} bytes, got {len(self.sid)}")
        self.data = bytes(self.data)
        # Fields behave like fixed-width integers: excess bits are dropped.
        self.sttl = int(self.sttl) & _STTL_MASK
        self.flags = SlowFlags(int(self.flags) & _FLAGS_MASK)
        self.seqnum = int(self.seqnum) & 0xFFFFFFFF
        self.acknum = int(self.acknum) & 0xFFFFFFFF
        self.window = int(self.window) & 0xFFFF
        self.fid = int(self.fid) & 0xFF
        self.fo = int(self.fo) & 0xFF

    def to_bytes(self) -> bytes:
        """Encode the packet for sending on the wire."""
        sttl_flags = ((int(self.flags) & _FLAGS_MASK) << _FLAGS_SHIFT) | (
            self.sttl & _STTL_MASK
        )
        header = _HEADER.pack(
            self.sid,
            sttl_flags,
            self.seqnum & 0xFFFFFFFF,
            self.acknum & 0xFFFFFFFF,
            self.window & 0xFFFF,
            self.fid & 0xFF,
            self.fo & 0xFF,
        )
        return header + self.data

    @classmethod
    def from_bytes(cls, buffer: bytes) -> "SlowPacket":
        """Decode a packet; a buffer shorter than a header yields an empty packet."""
        buffer = bytes(buffer)
        if len(buffer) < HEADER_SIZE:
            return cls()
        sid, sttl_flags, seqnum, acknum, window, fid, fo = _HEADER.unpack_from(buffer)
        return cls(
            sid=sid,
            sttl=sttl_flags & _STTL_MASK,
            flags=SlowFlags((sttl_flags >> _FLAGS_SHIFT) & _FLAGS_MASK),
            seqnum=seqnum,
            acknum=acknum,
            window=window,
            fid=fid,
            fo=fo,
            data=buffer[HEADER_SIZE:],
        )


def serialize(packet: SlowPacket) -> bytes:
    """Encode ``packet`` into its wire bytes."""
    return packet.to_bytes()


def deserialize(buffer: bytes) -> SlowPacket:
    """Decode wire bytes into a packet."""
    return SlowPacket.from_bytes(buffer)