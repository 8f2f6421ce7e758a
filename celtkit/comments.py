"""Vorbis-style comment headers carried as the second packet of a stream.

The layout is a little-endian 32-bit vendor length, the vendor string,
a 32-bit count of user comments, then for each comment a 32-bit length
followed by that many bytes of UTF-8 text.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

__all__ = ["CommentError", "CommentHeader"]

_INT = struct.Struct("<i")
_UINT = struct.Struct("<I")
_CORRUPTED = "Invalid/corrupted comments"


class CommentError(ValueError):
    """Raised for malformed comment headers or invalid comment text."""


def _encode(text: str) -> bytes:
    return _UINT.pack(len(text.encode("utf-8"))) + text.encode("utf-8")


@dataclass
class CommentHeader:
    """A vendor string and an ordered list of ``name=value`` comments."""

    vendor: str = ""
    comments: list[str] = field(default_factory=list)

    def add(self, value: str, tag: str | None = None) -> None:
        """Append a comment, prefixed by ``tag`` (such as ``"title="``) if given."""
        self.comments.append((tag or "") + value)

    def add_pair(self, text: str) -> None:
        """Append a user-supplied comment, which must be of the form name=value."""
        if "=" not in text:
            raise CommentError(
                f"Invalid comment: {text}\nComments must be of the form name=value"
            )
        self.add(text)

    def to_bytes(self) -> bytes:
        """Serialise the header to its packet bytes."""
        parts = [_encode(self.vendor), _UINT.pack(len(self.comments))]
        parts.extend(_encode(comment) for comment in self.comments)
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, data: bytes) -> CommentHeader:
        """Parse a comment packet; raise CommentError if it is truncated or corrupt."""
        data = bytes(data)
        if len(data) < 8:
            raise CommentError(_CORRUPTED)
        end = len(data)
        pos = 0

        def read_string() -> str:
            nonlocal pos
            if pos + 4 > end:
                raise CommentError(_CORRUPTED)
            (length,) = _INT.unpack_from(data, pos)
            pos += 4
            if length < 0 or pos + length > end:
                raise CommentError(_CORRUPTED)
            text = data[pos : pos + length].decode("utf-8", errors="replace")
            pos += length
            return text

        vendor = read_string()
        if pos + 4 > end:
            raise CommentError(_CORRUPTED)
        (count,) = _INT.unpack_from(data, pos)
        pos += 4
        comments = [read_string() for _ in range(max(count, 0))]
        return cls(vendor=vendor, comments=comments)

    def lines(self) -> list[str]:
        """Return the vendor string followed by each comment, one per line."""
        return [self.vendor, *self.comments]