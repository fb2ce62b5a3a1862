"""Japanese text normalization filters applied before DAG construction."""

import jaconv

def _normalize_char(ch: str) -> str:
    converted = jaconv.kata2hira(ch)
    converted = jaconv.z2h(converted, kana=False, ascii=True, digit=True)
    if converted.isascii():
        converted = converted.lower()
    # Keep kana indices aligned with the caller's string
    if len(converted) != 1:
        return ch
    return converted

def normalize_kana(text: str) -> str:
    """
    Normalize a kana target string for romaji lookups.

    This function normalizes text by:
    - Converting katakana to hiragana (ヴ→ゔ, ヵ→ゕ, ヶ→ゖ included)
    - Converting full-width letters, digits and ASCII symbols to half-width
    - Lowercasing ASCII letters

    The result always has the same length as *text*: a character that would
    expand or vanish under conversion is kept as it is.

    Args:
        text: Kana (or mixed) target string

    Returns:
        Normalized string, index-aligned with *text*
    """
    return "".join(_normalize_char(ch) for ch in text)

def normalize_romaji(text: str) -> str:
    """Lowercase a live romaji buffer."""
    return text.lower()
