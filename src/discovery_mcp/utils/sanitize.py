"""Text sanitization for free-text intake fields."""

import re

# Line breaks and tabs separate words; any run of them becomes one space
_WORD_BREAKS = re.compile(r"[\t\n\v\f\r]+")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_text(text: str | None, max_length: int = 500) -> str | None:
    """
    Clean a client-entered string before it reaches rationale text.

    Line breaks and tabs become a single space, remaining control
    characters are dropped, and the result is truncated to max_length
    with a trailing ellipsis. Used for names, occupation, goal labels and
    the purpose statement.

    Args:
        text: Text to sanitize (may be None)
        max_length: Maximum length before truncation

    Returns:
        Sanitized text or None if input was None
    """
    if text is None:
        return None

    text = _WORD_BREAKS.sub(" ", text)
    text = _CONTROL_CHARS.sub("", text)

    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text.strip()
