"""Token estimation utilities.

Agents budget their context in tokens; a section read reports an estimate
so the caller can decide whether to read more.
"""

# Rough average for source code and English text
CHARS_PER_TOKEN = 4


def count_tokens(text: str) -> int:
    """Estimate token count for a string.

    Uses a simple heuristic of ~4 characters per token.

    Args:
        text: Text to count tokens for

    Returns:
        Estimated number of tokens (0 for empty text)
    """
    if not text:
        return 0
    return max(1, len(text) // CHARS_PER_TOKEN)
