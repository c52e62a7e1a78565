"""Text preprocessing utilities for station names."""

import re
import unicodedata

from rapidfuzz import fuzz, process


# Common alternative spellings of Addis Ababa place names
SPELLING_VARIANTS = {
    "arba": "arat",
    "michael": "michel",
    "mikael": "michel",
    "mazorya": "mazoria",
    "mexiko": "mexico",
    "kazanches": "kazanchis",
    "megenagna": "megnagna",
}

# Compile regex patterns for word boundaries
VARIANT_PATTERNS = {
    variant: re.compile(rf"\b{variant}\b", re.IGNORECASE)
    for variant in SPELLING_VARIANTS
}


def remove_accents(text: str) -> str:
    """Remove accents from text while preserving case (Ethiopic script is untouched)."""
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(c for c in nfkd if not unicodedata.combining(c))


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace (collapse multiple spaces, strip)."""
    return " ".join(text.split())


def expand_variants(text: str) -> str:
    """
    Replace alternative spellings with the canonical ones.

    Examples:
        "arba kilo" -> "arat kilo"
        "michael" -> "michel"

    Handles word boundaries so "mexikotown" stays as is.
    """
    result = text
    for variant, canonical in SPELLING_VARIANTS.items():
        result = VARIANT_PATTERNS[variant].sub(canonical, result)
    return result


def normalize_station_name(name: str) -> str:
    """
    Normalize a station name or id for matching.

    Converts to lowercase, removes accents, replaces hyphens and
    underscores with spaces, canonicalizes spelling variants and
    normalizes whitespace.

    Examples:
        "Arat-Kilo" -> "arat kilo"
        "arba_kilo" -> "arat kilo"
        "  AYER   tena " -> "ayer tena"
    """
    name = name.lower()
    name = remove_accents(name)
    name = name.replace("-", " ").replace("_", " ")
    name = expand_variants(name)
    name = normalize_whitespace(name)
    return name


def fuzzy_match_station(
    text: str,
    names: list[str],
    threshold: int = 70,
    limit: int = 1,
) -> list[tuple[str, int]]:
    """
    Find the best matching station names using fuzzy matching.

    Useful for correcting typos like "Kazanchiz" -> "Kazanchis".

    Args:
        text: Input text (potential station name with typo)
        names: List of known station names
        threshold: Minimum similarity score (0-100)
        limit: Maximum number of matches to return

    Returns:
        List of tuples (name, score) sorted by score descending
    """
    if not text or not names:
        return []

    text_normalized = normalize_station_name(text)
    if not text_normalized:
        return []

    # Several names may normalize the same way; keep the first
    normalized_to_original: dict[str, str] = {}
    for name in names:
        normalized_to_original.setdefault(normalize_station_name(name), name)

    results = process.extract(
        text_normalized,
        list(normalized_to_original),
        scorer=fuzz.WRatio,
        limit=limit,
        score_cutoff=threshold,
    )

    return [
        (normalized_to_original[match_norm], int(score))
        for match_norm, score, _idx in results
    ]
