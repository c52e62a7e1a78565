"""Prompt templates for journey advisories."""

from src.routing import DirectOption, JourneyOption, TransferOption

LANGUAGE_NAMES = {"en": "English", "am": "Amharic"}

FARE_SYSTEM_PROMPT = """You are a friendly local guide for minibus taxis in Addis Ababa, Ethiopia.
Give practical fare advice for the journey described: a typical fare range in Ethiopian Birr
per leg, how and when to pay the 'weyala' (conductor), and how to avoid being overcharged.
Keep it under 120 words. Answer in {language}."""

PHRASES_PROMPT = """A visitor is taking this minibus taxi journey in Addis Ababa:
{journey}

List 5 short, essential Amharic phrases for this trip (asking the fare, asking to stop at
a named station, confirming the route). For each phrase give one line formatted as:
Amharic script | transliteration | English meaning
Return only the 5 lines."""

ADVISORY_SYSTEM_PROMPT = """You are a traffic advisor for Addis Ababa. Using current information,
summarise road conditions, congestion, closures or events that may affect the journey
described. Be calm and practical; if you have no current information, say so.
Keep it under 100 words. Answer in {language}."""

ALTERNATIVE_SYSTEM_PROMPT = """You are a transport advisor for Addis Ababa. Compare the minibus taxi
journey described with the alternatives (light rail, Anbessa city bus, ride-hailing such as
RIDE or Feres, bajaj, walking) on cost, time and comfort. Recommend one option.
Keep it under 150 words. Answer in {language}."""

SPEECH_PROMPT = "Say clearly and slowly: {text}"


def language_name(language: str) -> str:
    return LANGUAGE_NAMES.get(language, LANGUAGE_NAMES["en"])


def describe_journey(option: JourneyOption) -> str:
    """Plain-text description of a journey option for a prompt."""
    if isinstance(option, DirectOption):
        return (
            f"Direct minibus on route '{option.route_name}', "
            f"stops: {' -> '.join(option.stops)}."
        )
    if isinstance(option, TransferOption):
        return (
            f"First minibus on route '{option.leg1.route_name}' from {option.leg1.from_station} "
            f"to {option.leg1.to_station}, then change at {option.transfer_station_name} to route "
            f"'{option.leg2.route_name}' from {option.leg2.from_station} to {option.leg2.to_station}."
        )
    return "No minibus route was found between the chosen stations."


def text_payload(prompt: str, system_prompt: str | None = None, grounded: bool = False) -> dict:
    """generateContent body for a text request."""
    payload: dict = {"contents": [{"parts": [{"text": prompt}]}]}
    if system_prompt:
        payload["systemInstruction"] = {"parts": [{"text": system_prompt}]}
    if grounded:
        payload["tools"] = [{"google_search": {}}]
    return payload


def speech_payload(text: str, voice: str) -> dict:
    """generateContent body for a text-to-speech request."""
    return {
        "contents": [{"parts": [{"text": SPEECH_PROMPT.format(text=text)}]}],
        "generationConfig": {
            "responseModalities": ["AUDIO"],
            "speechConfig": {
                "voiceConfig": {"prebuiltVoiceConfig": {"voiceName": voice}},
            },
        },
    }


def fare_payload(option: JourneyOption, language: str) -> dict:
    return text_payload(
        f"Journey: {describe_journey(option)}",
        FARE_SYSTEM_PROMPT.format(language=language_name(language)),
    )


def phrases_payload(option: JourneyOption) -> dict:
    return text_payload(PHRASES_PROMPT.format(journey=describe_journey(option)))


def route_advisory_payload(option: JourneyOption, language: str) -> dict:
    return text_payload(
        f"Journey: {describe_journey(option)}",
        ADVISORY_SYSTEM_PROMPT.format(language=language_name(language)),
        grounded=True,
    )


def alternative_payload(option: JourneyOption, language: str) -> dict:
    return text_payload(
        f"Journey: {describe_journey(option)}",
        ALTERNATIVE_SYSTEM_PROMPT.format(language=language_name(language)),
    )
