"""Journey advisories: fare guide, phrases, route status, alternatives, speech."""

import base64
import binascii
import logging
from dataclasses import dataclass

from src.config import Settings
from src.routing import JourneyOption

from . import prompts
from .audio import pcm_to_wav, sample_rate_from_mime
from .client import AdvisoryResult, GeminiClient, extract_inline_data

logger = logging.getLogger(__name__)

ADVISORY_KINDS = ("fare", "phrases", "status", "alternatives")


@dataclass
class SpeechResult:
    """WAV audio, or an error message."""

    ok: bool
    wav: bytes = b""
    error: str | None = None


class AdvisoryService:
    """
    Generated advice about a computed journey.

    Every call is independent of route finding: it receives an already
    computed JourneyOption and returns a result value, never raising.
    """

    def __init__(self, client: GeminiClient, voice: str = "Kore"):
        self.client = client
        self.voice = voice

    @classmethod
    def from_settings(cls, settings: Settings) -> "AdvisoryService":
        client = GeminiClient(
            api_key=settings.GEMINI_API_KEY,
            base_url=settings.GEMINI_BASE_URL,
            text_model=settings.GEMINI_TEXT_MODEL,
            tts_model=settings.GEMINI_TTS_MODEL,
            max_attempts=settings.ADVISORY_MAX_ATTEMPTS,
            base_delay=settings.ADVISORY_BASE_DELAY,
            timeout=settings.ADVISORY_TIMEOUT,
        )
        return cls(client, voice=settings.GEMINI_TTS_VOICE)

    @property
    def configured(self) -> bool:
        return bool(self.client.api_key)

    async def fare_advice(self, option: JourneyOption, language: str = "en") -> AdvisoryResult:
        return await self.client.generate(prompts.fare_payload(option, language))

    async def phrases(self, option: JourneyOption) -> AdvisoryResult:
        return await self.client.generate(prompts.phrases_payload(option))

    async def route_advisory(self, option: JourneyOption, language: str = "en") -> AdvisoryResult:
        return await self.client.generate(prompts.route_advisory_payload(option, language))

    async def alternative_transport(
        self, option: JourneyOption, language: str = "en"
    ) -> AdvisoryResult:
        return await self.client.generate(prompts.alternative_payload(option, language))

    async def advise(self, kind: str, option: JourneyOption, language: str = "en") -> AdvisoryResult:
        """Dispatch by advisory kind (one of ADVISORY_KINDS)."""
        if kind == "fare":
            return await self.fare_advice(option, language)
        if kind == "phrases":
            return await self.phrases(option)
        if kind == "status":
            return await self.route_advisory(option, language)
        if kind == "alternatives":
            return await self.alternative_transport(option, language)
        return AdvisoryResult.failure(f"Unknown advisory kind: {kind}")

    async def speak(self, text: str) -> SpeechResult:
        """Synthesize speech for a phrase and return it as WAV."""
        result = await self.client.generate(
            prompts.speech_payload(text, self.voice), model=self.client.tts_model
        )
        if not result.ok:
            return SpeechResult(ok=False, error=result.error)

        inline = extract_inline_data(result.data)
        if not inline or not inline.get("data"):
            logger.error("Speech response contained no audio")
            return SpeechResult(ok=False, error="No audio in response")

        try:
            pcm = base64.b64decode(inline["data"])
        except (binascii.Error, ValueError):
            return SpeechResult(ok=False, error="Audio payload is not valid base64")

        rate = sample_rate_from_mime(inline.get("mimeType"))
        return SpeechResult(ok=True, wav=pcm_to_wav(pcm, rate))

    async def aclose(self) -> None:
        await self.client.aclose()
