from __future__ import annotations

import logging
import math

from course_assistant.core.errors import ContextTooLargeError

log = logging.getLogger(__name__)

CHARS_PER_TOKEN = 4
MAX_CONTEXT_TOKENS = 1_000_000


def estimate_tokens(text: str) -> int:
    """Character-count proxy for the model's tokenizer: ceil(len / 4)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def ensure_within_budget(text: str, max_tokens: int = MAX_CONTEXT_TOKENS) -> int:
    """
    Return the token estimate of `text`, or raise ContextTooLargeError.

    The ceiling is exclusive: an estimate equal to `max_tokens` is rejected.
    Oversized contexts are never truncated.
    """
    estimated = estimate_tokens(text)
    if estimated >= max_tokens:
        log.warning("Context too large: %d tokens (limit %d)", estimated, max_tokens)
        raise ContextTooLargeError(estimated, max_tokens)
    return estimated
