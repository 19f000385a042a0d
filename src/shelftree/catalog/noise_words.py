"""Leading noise-word (article/determiner) rules per language."""

from __future__ import annotations

from razdel import tokenize


_NOISE_WORDS: dict[str, frozenset[str]] = {
    "en": frozenset({"THE", "A", "AN"}),
    "fr": frozenset({"LE", "LA", "LES", "L'", "UN", "UNE", "DES"}),
    "de": frozenset({"DER", "DIE", "DAS", "EIN", "EINE"}),
    "es": frozenset({"EL", "LA", "LOS", "LAS", "UN", "UNA"}),
    "it": frozenset({"IL", "LO", "LA", "I", "GLI", "LE", "L'", "UN", "UNA"}),
    "nl": frozenset({"DE", "HET", "EEN"}),
}

# Map Calibre/ISO 639-2 language tags to ISO 639-1 codes
_LANGUAGE_MAP: dict[str, str] = {
    "en": "en", "eng": "en", "english": "en",
    "fr": "fr", "fra": "fr", "fre": "fr", "french": "fr",
    "de": "de", "deu": "de", "ger": "de", "german": "de",
    "es": "es", "spa": "es", "spanish": "es",
    "it": "it", "ita": "it", "italian": "it",
    "nl": "nl", "nld": "nl", "dut": "nl", "dutch": "nl",
    "ru": "ru", "rus": "ru", "russian": "ru",
}

_APOSTROPHES = str.maketrans({"’": "'", "ʼ": "'"})


def normalize_language(raw: str | None) -> str | None:
    """Map a raw language tag (``eng``, ``en_GB``, ``fr``) to ISO 639-1, or None."""
    if not raw:
        return None
    tag = raw.strip().lower().replace("-", "_").split("_", 1)[0]
    return _LANGUAGE_MAP.get(tag)


def noise_words_for(language: str | None) -> frozenset[str]:
    code = normalize_language(language)
    if code is None:
        return frozenset()
    return _NOISE_WORDS.get(code, frozenset())


def strip_leading_noise_words(title: str, language: str | None) -> str:
    """Remove every leading noise word of *language* from an upper-cased *title*.

    A word is only treated as noise when a further word follows it, so a
    title made of a single article is kept as is.  Elided articles such as
    ``L'`` are removed when glued to the next word.
    """
    words = noise_words_for(language)
    remaining = title.strip()
    if not words:
        return remaining

    elided = sorted((word for word in words if word.endswith("'")), key=len, reverse=True)
    while remaining:
        folded = remaining.translate(_APOSTROPHES)
        prefix = next(
            (word for word in elided if folded.startswith(word) and len(folded) > len(word)),
            None,
        )
        if prefix is not None:
            remaining = remaining[len(prefix):].lstrip()
            continue

        tokens = list(tokenize(remaining))
        if len(tokens) < 2 or tokens[0].text not in words:
            break
        gap = remaining[tokens[0].stop : tokens[1].start]
        if not gap or not gap.isspace():
            break
        remaining = remaining[tokens[1].start :]

    return remaining
