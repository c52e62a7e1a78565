"""Async client for the Gemini generateContent API with retry on rate limiting."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

import httpx

logger = logging.getLogger(__name__)

RATE_LIMITED = 429


@dataclass
class AdvisoryResult:
    """Outcome of a generation call: either text/data, or an error message."""

    ok: bool
    text: str = ""
    data: dict[str, Any] = field(default_factory=dict)  # Raw JSON response
    error: str | None = None
    attempts: int = 0

    @classmethod
    def failure(cls, error: str, attempts: int = 0) -> "AdvisoryResult":
        return cls(ok=False, error=error, attempts=attempts)


def extract_text(data: dict[str, Any]) -> str:
    """Concatenate the text parts of the first candidate."""
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts)


def extract_inline_data(data: dict[str, Any]) -> dict[str, Any] | None:
    """First inline data part (audio) of the first candidate, if any."""
    candidates = data.get("candidates") or []
    if not candidates:
        return None
    for part in (candidates[0].get("content") or {}).get("parts") or []:
        inline = part.get("inlineData")
        if inline:
            return inline
    return None


class GeminiClient:
    """
    POST JSON payloads to `{base_url}/models/{model}:generateContent`.

    A 429 response is retried after base_delay * 2**attempt seconds while
    attempts remain; transport errors are retried on the same schedule.
    Any other non-2xx status fails immediately. Failures are returned as
    AdvisoryResult values, never raised.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        text_model: str,
        tts_model: str,
        max_attempts: int = 3,
        base_delay: float = 1.0,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.text_model = text_model
        self.tts_model = tts_model
        self.max_attempts = max(1, max_attempts)
        self.base_delay = base_delay
        self._http = http_client or httpx.AsyncClient(timeout=timeout)
        self._sleep = sleep

    def delay_for(self, attempt: int) -> float:
        """Delay before retrying after the given 0-based attempt."""
        return self.base_delay * (2**attempt)

    def url_for(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    async def generate(self, payload: dict[str, Any], model: str | None = None) -> AdvisoryResult:
        """
        Send one generateContent request.

        Args:
            payload: Request body (contents, generationConfig, tools...)
            model: Model name (defaults to the text model)

        Returns:
            AdvisoryResult with the response JSON and its text parts
        """
        if not self.api_key:
            return AdvisoryResult.failure("Advisory service is not configured (missing API key)")

        url = self.url_for(model or self.text_model)
        last_error = "no attempt made"

        for attempt in range(self.max_attempts):
            is_last = attempt == self.max_attempts - 1
            try:
                response = await self._http.post(
                    url,
                    params={"key": self.api_key},
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as e:
                last_error = f"Request failed: {e}"
                logger.warning("Gemini request error (attempt %d/%d): %s", attempt + 1, self.max_attempts, e)
                if is_last:
                    break
                await self._sleep(self.delay_for(attempt))
                continue

            if response.status_code == RATE_LIMITED and not is_last:
                delay = self.delay_for(attempt)
                logger.warning(
                    "Gemini rate limited (attempt %d/%d), retrying in %.1fs",
                    attempt + 1,
                    self.max_attempts,
                    delay,
                )
                await self._sleep(delay)
                continue

            if response.is_error:
                last_error = f"API call failed with status: {response.status_code}"
                logger.error("%s (%s)", last_error, response.text[:200])
                return AdvisoryResult.failure(last_error, attempts=attempt + 1)

            try:
                data = response.json()
            except ValueError:
                return AdvisoryResult.failure("Invalid JSON in API response", attempts=attempt + 1)

            return AdvisoryResult(ok=True, text=extract_text(data), data=data, attempts=attempt + 1)

        logger.error("Gemini request failed after %d attempts: %s", self.max_attempts, last_error)
        return AdvisoryResult.failure(last_error, attempts=self.max_attempts)

    async def aclose(self) -> None:
        await self._http.aclose()
