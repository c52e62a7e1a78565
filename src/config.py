"""Runtime settings read from the environment (and an optional .env file)."""

import os

from dotenv import load_dotenv

load_dotenv()


def _float_env(name: str, default: float) -> float:
    return float(os.getenv(name, default))


class Settings:
    PROJECT_NAME: str = "Addis Taxi Route Finder"
    VERSION: str = "0.1.0"

    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "en")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Text and speech generation (advisories)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_BASE_URL: str = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    GEMINI_TEXT_MODEL: str = os.getenv(
        "GEMINI_TEXT_MODEL", "gemini-2.5-flash-preview-09-2025"
    )
    GEMINI_TTS_MODEL: str = os.getenv("GEMINI_TTS_MODEL", "gemini-2.5-flash-preview-tts")
    GEMINI_TTS_VOICE: str = os.getenv("GEMINI_TTS_VOICE", "Kore")

    # Retry on HTTP 429: delay before retry n (0-based) is base_delay * 2**n
    ADVISORY_MAX_ATTEMPTS: int = int(os.getenv("ADVISORY_MAX_ATTEMPTS", 3))
    ADVISORY_BASE_DELAY: float = _float_env("ADVISORY_BASE_DELAY", 1.0)
    ADVISORY_TIMEOUT: float = _float_env("ADVISORY_TIMEOUT", 30.0)

    # Simulated rider position refresh
    MAP_TICK_SECONDS: float = _float_env("MAP_TICK_SECONDS", 2.0)

    @property
    def advisory_enabled(self) -> bool:
        return bool(self.GEMINI_API_KEY)


settings = Settings()
