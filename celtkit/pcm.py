"""Reading raw PCM frames for encoding and packing decoded samples for output."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from typing import BinaryIO

__all__ = ["MAX_FRAME_SIZE", "SampleReader", "samples_to_le_bytes"]

# Largest number of interleaved samples a single frame may hold.
MAX_FRAME_SIZE = 2048


def _read_full(stream: BinaryIO, count: int) -> bytes:
    """Read up to ``count`` bytes, retrying short reads until end of stream."""
    parts: list[bytes] = []
    remaining = count
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


class SampleReader:
    """Reads fixed-size frames of interleaved PCM and converts them to 16-bit.

    ``prefix`` holds bytes already taken from the stream (for instance while
    sniffing for a RIFF header); they are used as the start of the first frame.
    ``size`` limits the data read to a WAVE data chunk: once it has been used
    up no further frames are returned.
    """

    def __init__(
        self,
        stream: BinaryIO,
        frame_size: int,
        bits: int = 16,
        channels: int = 1,
        little_endian: bool = True,
        prefix: bytes = b"",
        size: int | None = None,
    ) -> None:
        if bits not in (8, 16):
            raise ValueError("Only 8/16-bit linear supported")
        if channels < 1:
            raise ValueError("channel count must be positive")
        if frame_size < 1:
            raise ValueError("frame size must be positive")
        if frame_size * channels > MAX_FRAME_SIZE:
            raise ValueError(
                f"frame of {frame_size * channels} samples exceeds {MAX_FRAME_SIZE}"
            )
        self.stream = stream
        self.frame_size = frame_size
        self.bits = bits
        self.channels = channels
        self.little_endian = little_endian
        self.size = size
        self._prefix = bytes(prefix)

    @property
    def _bytes_per_frame(self) -> int:
        return self.bits // 8 * self.channels * self.frame_size

    def read_frame(self) -> tuple[int, list[int]] | None:
        """Return ``(frames_read, samples)`` or None when no audio is left.

        ``samples`` always holds ``frame_size * channels`` values; those past
        the frames actually read are zero.
        """
        if self.size is not None and self.size <= 0:
            return None
        wanted = self._bytes_per_frame
        if self.size is not None:
            self.size -= wanted
        if self._prefix:
            prefix, self._prefix = self._prefix[:wanted], b""
            data = prefix + _read_full(self.stream, wanted - len(prefix))
            if self.size is not None:
                self.size += len(prefix)
        else:
            data = _read_full(self.stream, wanted)

        nb_read = len(data) // (self.bits // 8 * self.channels)
        if nb_read == 0:
            return None

        count = nb_read * self.channels
        if self.bits == 8:
            decoded = [(byte - 128) << 8 for byte in data[:count]]
        else:
            order = "<" if self.little_endian else ">"
            decoded = list(struct.unpack_from(f"{order}{count}h", data))
        total = self.frame_size * self.channels
        return nb_read, decoded + [0] * (total - count)

    def __iter__(self) -> Iterator[tuple[int, list[int]]]:
        while (frame := self.read_frame()) is not None:
            yield frame


def samples_to_le_bytes(samples: Iterable[int]) -> bytes:
    """Pack 16-bit signed samples as little-endian bytes."""
    values = list(samples)
    try:
        return struct.pack(f"<{len(values)}h", *values)
    except struct.error as exc:
        raise ValueError(f"sample out of 16-bit range: {exc}") from exc