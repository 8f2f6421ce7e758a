# celtkit

Pure-Python building blocks for tools that work with CELT audio files:
reading PCM input, writing WAV output and building the metadata packets
that go into an Ogg stream. It has no dependencies outside the standard
library.

## What is inside

- `celtkit.wav_io`: RIFF/WAVE headers.
  - `read_wav_header(stream)` parses a header (from the start of the file
    or just after the 12-byte `RIFF....WAVE` descriptor) and returns a
    `WavFormat` with `rate`, `channels`, `bits` and `data_size`, leaving
    the stream at the first sample. Only 8/16-bit PCM, mono or stereo, is
    accepted; anything else raises `WavError`.
  - `write_wav_header(stream, rate, channels)` writes a 16-bit PCM header
    with placeholder sizes.
  - `patch_wav_sizes(stream, audio_size)` fills in the real RIFF and data
    sizes; it raises `WavError` if the stream cannot seek.
  - `is_wav_name(path)` is true for names ending in `.wav` or `.WAV`.
- `celtkit.skeleton`: Ogg Skeleton 3.0 header packets.
  - `FisheadPacket.to_bytes()` gives the 64-byte fishead packet.
  - `FisbonePacket.add_message_header_field(key, value)` and
    `FisbonePacket.to_bytes()` build a fisbone packet with its
    `key: value\r\n` message headers.
  - `make_fishead()` and `make_fisbone(serial_no, sample_rate, extra_headers)`
    give the packets used for a CELT stream (`Content-Type: audio/x-celt`,
    preroll 3).
- `celtkit.comments`: Vorbis-style comment headers.
  - `CommentHeader(vendor, comments)` with `add(value, tag)`,
    `add_pair(text)` (which requires `name=value` and raises
    `CommentError` otherwise), `to_bytes()`, `CommentHeader.from_bytes(data)`
    and `lines()`.
- `celtkit.pcm`: PCM framing.
  - `SampleReader(stream, frame_size, bits=16, channels=1,
    little_endian=True, prefix=b"", size=None)` reads fixed-size frames,
    converting 8-bit unsigned or 16-bit signed input to 16-bit samples.
    `read_frame()` returns `(frames_read, samples)` with the tail
    zero-padded, or `None` at the end; iterating the reader yields the same
    tuples. `size` limits reading to a WAV data chunk, and `prefix` supplies
    bytes already taken from the stream.
  - `samples_to_le_bytes(samples)` packs 16-bit samples little-endian.

## Install

    pip install .

## Examples

Write a WAV header, patch its sizes, and read it back:

```python
import io
from celtkit.wav_io import write_wav_header, patch_wav_sizes, read_wav_header

buf = io.BytesIO()
write_wav_header(buf, 48000, 2)
buf.write(b"\x00\x00" * 2 * 960)
patch_wav_sizes(buf, 2 * 2 * 960)

buf.seek(0)
fmt = read_wav_header(buf)
print(fmt.rate, fmt.channels, fmt.bits, fmt.data_size)  # 48000 2 16 3840
```

Split the samples into frames:

```python
from celtkit.pcm import SampleReader

reader = SampleReader(buf, frame_size=960, channels=fmt.channels, size=fmt.data_size)
for frames_read, samples in reader:
    print(frames_read, len(samples))
```

Build a comment header:

```python
from celtkit.comments import CommentHeader

header = CommentHeader("Encoded with CELT")
header.add("Some Title", tag="title=")
header.add_pair("genre=ambient")
packet = header.to_bytes()
print(CommentHeader.from_bytes(packet).lines())
```

Build skeleton packets for a stream:

```python
from celtkit.skeleton import make_fishead, make_fisbone

head = make_fishead().to_bytes()
bone = make_fisbone(serial_no=1234, sample_rate=48000, extra_headers=0).to_bytes()
```

## What it does not do

celtkit does not encode or decode CELT audio, does not split packets into
Ogg pages or write Ogg files, does not play or record sound, does not parse
command lines, and ships no command-line programs. It only provides the
header, comment and framing pieces around those tasks.

## Tests

    pip install ".[test]"
    pytest