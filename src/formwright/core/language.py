"""Language helpers for describing and matching schema elements.

Provides the default term generator used when a field or value declares no
explicit terms, plus helpers that derive a readable description from an
identifier such as ``departureCity`` or ``seat_class``.
"""

import re

from formwright.core.errors import ConfigError

# Longest phrase generated from an identifier when nothing else is declared
DEFAULT_MAX_PHRASE_LENGTH = 3

_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def split_words(name: str) -> list[str]:
    """Split an identifier or phrase into lower-case words.

    Handles camelCase, PascalCase, snake_case, kebab-case and plain phrases.

    Example:
        >>> split_words("HTTPServerName")
        ['http', 'server', 'name']
    """
    return [word.lower() for word in _WORD_RE.findall(name)]


def camel_case_description(name: str) -> str:
    """Default description of a field or value derived from its identifier."""
    words = split_words(name)
    return " ".join(words) if words else name


def _word_expression(word: str, is_last: bool) -> str:
    escaped = re.escape(word)
    if is_last and not word.isdigit() and not word.endswith("s"):
        return f"{escaped}s?"
    return escaped


def generate_terms(text: str, max_phrase_length: int) -> list[str]:
    """Generate regular expressions matching ``text`` and its sub-phrases.

    One expression is produced for every contiguous run of words whose length
    is between 1 and ``max_phrase_length``. Longer phrases come first so the
    most specific match wins. The last word of each phrase accepts an
    optional plural ``s``.

    Args:
        text: Identifier or phrase to generate terms for
        max_phrase_length: Longest run of words to emit

    Returns:
        Ordered list of regular expressions without duplicates

    Raises:
        ConfigError: If max_phrase_length is not positive
    """
    if max_phrase_length < 1:
        raise ConfigError(f"max_phrase_length must be positive, got {max_phrase_length}")

    words = split_words(text)
    if not words:
        return [re.escape(text.strip().lower())] if text.strip() else []

    terms: list[str] = []
    longest = min(max_phrase_length, len(words))
    for length in range(longest, 0, -1):
        for start in range(len(words) - length + 1):
            phrase = words[start : start + length]
            body = r"\s+".join(
                _word_expression(word, index == length - 1) for index, word in enumerate(phrase)
            )
            term = rf"\b{body}\b"
            if term not in terms:
                terms.append(term)
    return terms
