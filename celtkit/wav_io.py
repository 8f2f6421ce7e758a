"""Reading and writing the RIFF/WAVE headers used for PCM input and output."""

from __future__ import annotations

import io
import os
import struct
from dataclasses import dataclass
from typing import BinaryIO

__all__ = [
    "WavError",
    "WavFormat",
    "read_wav_header",
    "write_wav_header",
    "patch_wav_sizes",
    "is_wav_name",
]

# Placeholder size written before the real length is known.
_UNKNOWN_SIZE = 0x7FFFFFFF
_SKIP_BLOCK = 65536


class WavError(Exception):
    """Raised when a WAVE header is malformed or cannot be written."""


@dataclass(frozen=True)
class WavFormat:
    """Stream parameters taken from a WAVE header."""

    rate: int
    channels: int
    bits: int
    data_size: int


def _read_exact(stream: BinaryIO, count: int, missing: str) -> bytes:
    data = stream.read(count)
    if data is None or len(data) < count:
        raise WavError(missing)
    return data


def _skip(stream: BinaryIO, count: int) -> None:
    # Read rather than seek so that pipes work as well as files.
    while count > 0:
        chunk = stream.read(min(count, _SKIP_BLOCK))
        if not chunk:
            return
        count -= len(chunk)


def _find_chunk(stream: BinaryIO, chunk_id: bytes, first: bytes, missing: str) -> None:
    current = first
    while current != chunk_id:
        (size,) = struct.unpack("<i", _read_exact(stream, 4, missing))
        _skip(stream, size)
        current = stream.read(4)
        if current is None or len(current) < 4:
            raise WavError(missing)


def read_wav_header(stream: BinaryIO) -> WavFormat:
    """Parse a WAVE header and leave ``stream`` at the start of the samples.

    The stream may be positioned either at the very start of the file or just
    after the 12-byte ``RIFF....WAVE`` descriptor.
    """
    no_fmt = 'Corrupted WAVE file: no "fmt "'
    no_data = 'Corrupted WAVE file: no "data"'
    truncated = "Corrupted WAVE file: truncated format chunk"

    first = _read_exact(stream, 4, no_fmt)
    if first == b"RIFF":
        _read_exact(stream, 8, no_fmt)
        first = _read_exact(stream, 4, no_fmt)
    _find_chunk(stream, b"fmt ", first, no_fmt)

    (fmt_size,) = struct.unpack("<i", _read_exact(stream, 4, truncated))
    skip_bytes = fmt_size - 16

    tag, channels, rate, byte_rate, block_align, bits = struct.unpack(
        "<hhiihh", _read_exact(stream, 16, truncated)
    )
    if tag != 1:
        raise WavError("Only PCM encoding is supported")
    if channels > 2:
        raise WavError("Only mono and (intensity) stereo supported")
    if bits not in (8, 16):
        raise WavError("Only 8/16-bit linear supported")
    if byte_rate != rate * channels * bits // 8:
        raise WavError("Corrupted header: ByteRate mismatch")
    if block_align != channels * bits // 8:
        raise WavError("Corrupted header: BlockAlign mismatch")

    _skip(stream, skip_bytes)

    first = stream.read(4)
    if first is None or len(first) < 4:
        raise WavError(no_data)
    _find_chunk(stream, b"data", first, no_data)

    (data_size,) = struct.unpack("<i", _read_exact(stream, 4, no_data))
    return WavFormat(rate=rate, channels=channels, bits=bits, data_size=data_size)


def write_wav_header(stream: BinaryIO, rate: int, channels: int) -> None:
    """Write a 16-bit PCM WAVE header with placeholder sizes."""
    header = b"".join(
        (
            b"RIFF",
            struct.pack("<I", _UNKNOWN_SIZE),
            b"WAVEfmt ",
            struct.pack("<I", 16),
            struct.pack("<H", 1),
            struct.pack("<H", channels & 0xFFFF),
            struct.pack("<I", rate & 0xFFFFFFFF),
            struct.pack("<I", (rate * channels * 2) & 0xFFFFFFFF),
            struct.pack("<H", (2 * channels) & 0xFFFF),
            struct.pack("<H", 16),
            b"data",
            struct.pack("<I", _UNKNOWN_SIZE),
        )
    )
    stream.write(header)


def patch_wav_sizes(stream: BinaryIO, audio_size: int) -> None:
    """Fill in the RIFF and data chunk sizes once ``audio_size`` bytes are written."""
    try:
        if not stream.seekable():
            raise WavError("Cannot seek on wave file, size will be incorrect")
        stream.seek(4, io.SEEK_SET)
    except (OSError, io.UnsupportedOperation) as exc:
        raise WavError("Cannot seek on wave file, size will be incorrect") from exc
    stream.write(struct.pack("<I", (audio_size + 36) & 0xFFFFFFFF))
    try:
        stream.seek(32, io.SEEK_CUR)
    except (OSError, io.UnsupportedOperation) as exc:
        raise WavError("First seek worked, second didn't") from exc
    stream.write(struct.pack("<I", audio_size & 0xFFFFFFFF))


def is_wav_name(path: str | os.PathLike[str]) -> bool:
    """Return True when ``path`` ends in ``.wav`` or ``.WAV``."""
    name = os.fspath(path)
    return len(name) >= 4 and (name.endswith(".wav") or name.endswith(".WAV"))