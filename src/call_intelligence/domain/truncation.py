"""Sentence-aware transcript truncation."""

SENTENCE_BOUNDARY = "."


def truncate_text(text: str, max_length: int) -> str:
    """
    Shortens text to fit a character budget, preferring a sentence boundary.

    If the text is within the budget it is returned unchanged. Otherwise the
    first ``max_length`` characters are kept and cut back to the last period
    in that window, inclusive. Without a period the window is returned as is.

    Args:
        text: The text to shorten.
        max_length: Character budget, must be positive.

    Returns:
        A prefix of ``text``.

    Raises:
        ValueError: If ``max_length`` is not positive.
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")

    if len(text) <= max_length:
        return text

    window = text[:max_length]
    last_dot = window.rfind(SENTENCE_BOUNDARY)
    if last_dot == -1:
        return window
    return window[: last_dot + 1]
