"""Wrap raw PCM speech into a WAV container."""

import io
import re
import wave

DEFAULT_SAMPLE_RATE = 24000

_RATE_PATTERN = re.compile(r"rate=(\d+)")


def sample_rate_from_mime(mime_type: str | None, default: int = DEFAULT_SAMPLE_RATE) -> int:
    """
    Read the sample rate from a PCM mime type.

    Examples:
        "audio/L16;codec=pcm;rate=24000" -> 24000
        "audio/L16" -> default
    """
    if not mime_type:
        return default
    match = _RATE_PATTERN.search(mime_type)
    return int(match.group(1)) if match else default


def pcm_to_wav(pcm: bytes, sample_rate: int = DEFAULT_SAMPLE_RATE) -> bytes:
    """16-bit mono little-endian PCM -> WAV file bytes."""
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(pcm)
    return buffer.getvalue()
