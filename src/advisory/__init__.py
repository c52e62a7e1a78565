"""Generated journey advice and speech (external text/speech service)."""

from .audio import pcm_to_wav, sample_rate_from_mime
from .client import AdvisoryResult, GeminiClient
from .service import ADVISORY_KINDS, AdvisoryService, SpeechResult

__all__ = [
    "ADVISORY_KINDS",
    "AdvisoryResult",
    "AdvisoryService",
    "GeminiClient",
    "SpeechResult",
    "pcm_to_wav",
    "sample_rate_from_mime",
]
