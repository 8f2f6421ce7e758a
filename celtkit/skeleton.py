"""Ogg Skeleton (version 3.0) fishead and fisbone header packets."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

__all__ = [
    "SKELETON_VERSION_MAJOR",
    "SKELETON_VERSION_MINOR",
    "FISHEAD_IDENTIFIER",
    "FISBONE_IDENTIFIER",
    "FISHEAD_SIZE",
    "FISBONE_SIZE",
    "FISBONE_MESSAGE_HEADER_OFFSET",
    "FisheadPacket",
    "FisbonePacket",
    "make_fishead",
    "make_fisbone",
]

SKELETON_VERSION_MAJOR = 3
SKELETON_VERSION_MINOR = 0
FISHEAD_IDENTIFIER = b"fishead\0"
FISBONE_IDENTIFIER = b"fisbone\0"
FISHEAD_SIZE = 64
FISBONE_SIZE = 52
FISBONE_MESSAGE_HEADER_OFFSET = 44

_UTC_SIZE = 20
# identifier, version major/minor, presentation and base time fractions.
_FISHEAD_LAYOUT = struct.Struct("<8sHHqqqq")
# identifier, header offset, serial, header count, granule rate, start
# granule, preroll, granule shift; padded with zeros up to FISBONE_SIZE.
_FISBONE_LAYOUT = struct.Struct("<8sIIIqqqIB")


@dataclass
class FisheadPacket:
    """The skeleton stream's first packet: timing of the whole presentation."""

    ptime_n: int = 0
    ptime_d: int = 1000
    btime_n: int = 0
    btime_d: int = 1000
    utc: bytes = bytes(_UTC_SIZE)
    version_major: int = SKELETON_VERSION_MAJOR
    version_minor: int = SKELETON_VERSION_MINOR

    def to_bytes(self) -> bytes:
        """Serialise to the 64-byte fishead packet."""
        if len(self.utc) > _UTC_SIZE:
            raise ValueError(f"UTC field holds at most {_UTC_SIZE} bytes")
        try:
            head = _FISHEAD_LAYOUT.pack(
                FISHEAD_IDENTIFIER,
                self.version_major,
                self.version_minor,
                self.ptime_n,
                self.ptime_d,
                self.btime_n,
                self.btime_d,
            )
        except struct.error as exc:
            raise ValueError(f"fishead field out of range: {exc}") from exc
        packet = head + self.utc.ljust(_UTC_SIZE, b"\0")
        return packet.ljust(FISHEAD_SIZE, b"\0")


@dataclass
class FisbonePacket:
    """Describes one logical bitstream carried next to the skeleton."""

    serial_no: int = 0
    nr_header_packet: int = 0
    granule_rate_n: int = 0
    granule_rate_d: int = 1
    start_granule: int = 0
    preroll: int = 0
    granule_shift: int = 0
    message_header_fields: list[tuple[str, str]] = field(default_factory=list)

    def add_message_header_field(self, key: str, value: str) -> None:
        """Append a ``key: value`` message header field."""
        self.message_header_fields.append((key, value))

    def _message_headers(self) -> bytes:
        return b"".join(
            f"{key}: {value}\r\n".encode("utf-8")
            for key, value in self.message_header_fields
        )

    def to_bytes(self) -> bytes:
        """Serialise to a fisbone packet followed by its message headers."""
        try:
            head = _FISBONE_LAYOUT.pack(
                FISBONE_IDENTIFIER,
                FISBONE_MESSAGE_HEADER_OFFSET,
                self.serial_no & 0xFFFFFFFF,
                self.nr_header_packet,
                self.granule_rate_n,
                self.granule_rate_d,
                self.start_granule,
                self.preroll,
                self.granule_shift,
            )
        except struct.error as exc:
            raise ValueError(f"fisbone field out of range: {exc}") from exc
        return head.ljust(FISBONE_SIZE, b"\0") + self._message_headers()


def make_fishead() -> FisheadPacket:
    """Build the fishead packet for a new stream: both times zero, in ms."""
    return FisheadPacket(ptime_n=0, ptime_d=1000, btime_n=0, btime_d=1000)


def make_fisbone(serial_no: int, sample_rate: int, extra_headers: int) -> FisbonePacket:
    """Build the fisbone packet describing a CELT stream."""
    bone = FisbonePacket(
        serial_no=serial_no,
        nr_header_packet=2 + extra_headers,
        granule_rate_n=sample_rate,
        granule_rate_d=1,
        start_granule=0,
        preroll=3,
        granule_shift=0,
    )
    bone.add_message_header_field("Content-Type", "audio/x-celt")
    return bone