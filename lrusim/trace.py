"""Binary address trace records in the BYU trace format."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Iterator

_RECORD = struct.Struct("<IBBBBI")

#: Size in bytes of one record on disk.
RECORD_SIZE = _RECORD.size


class RequestType(IntEnum):
    """Kinds of bus request a trace record may describe."""

    FETCH = 0x00
    MEMREAD = 0x01
    MEMREADINV = 0x02
    MEMWRITE = 0x03
    IOREAD = 0x10
    IOWRITE = 0x11
    DEFERREPLY = 0x20
    INTA = 0x21
    CNTRLAGNTRES = 0x22
    BRTRACEREC = 0x23
    SHUTDOWN = 0x31
    FLUSH = 0x32
    HALT = 0x33
    SYNC = 0x34
    FLUSHACK = 0x35
    STOPCLKACK = 0x36
    SMIACK = 0x37


@dataclass(frozen=True)
class TraceRecord:
    """One memory reference from a trace file."""

    addr: int
    reqtype: int = RequestType.FETCH
    size: int = 0
    attr: int = 0
    proc: int = 0
    time: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "TraceRecord":
        """Decode a record from exactly RECORD_SIZE little-endian bytes."""
        if len(data) != RECORD_SIZE:
            raise ValueError(
                f"trace record must be {RECORD_SIZE} bytes, got {len(data)}"
            )
        return cls(*_RECORD.unpack(data))

    def to_bytes(self) -> bytes:
        """Encode the record in its on-disk form."""
        try:
            return _RECORD.pack(
                self.addr, self.reqtype, self.size, self.attr, self.proc, self.time
            )
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc

    @property
    def request_type(self) -> RequestType:
        """The request kind; raises ValueError for an unknown code."""
        return RequestType(self.reqtype)


def read_trace(stream: BinaryIO) -> Iterator[TraceRecord]:
    """Yield every record of a binary trace stream.

    A trailing fragment shorter than one record raises ValueError.
    """
    while True:
        chunk = stream.read(RECORD_SIZE)
        if not chunk:
            return
        if len(chunk) < RECORD_SIZE:
            raise ValueError(
                f"truncated trace record: {len(chunk)} of {RECORD_SIZE} bytes"
            )
        yield TraceRecord.from_bytes(chunk)