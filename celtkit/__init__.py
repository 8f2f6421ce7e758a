"""Helpers for CELT audio tools: WAV headers, Ogg Skeleton packets, comment headers and PCM framing."""

__version__ = "0.1.0"

__all__ = ["comments", "pcm", "skeleton", "wav_io"]