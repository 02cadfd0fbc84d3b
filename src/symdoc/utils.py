"""Utility functions for symdoc."""

import logging
import re
from typing import Any
from urllib.parse import urlsplit

from symdoc.exceptions import generate_correlation_id

_WHITESPACE_RE = re.compile(r"\s+")


def log_with_correlation(
    logger: logging.Logger,
    level: int,
    message: str,
    correlation_id: str | None = None,
    **kwargs: Any,
) -> None:
    """
    Log a message with correlation ID and additional context.

    Args:
        logger: Logger instance to use.
        level: Logging level (e.g., logging.INFO, logging.ERROR).
        message: Log message format string.
        correlation_id: Optional correlation ID. If None, generates a new one.
        **kwargs: Additional context to include in log extra fields.
    """
    corr_id = correlation_id or generate_correlation_id()
    extra = {"correlation_id": corr_id, **kwargs}
    logger.log(level, message, extra=extra)


def normalize_whitespace(value: str) -> str:
    """
    Collapse every whitespace run to a single space and trim the result.

    Args:
        value: Raw text, typically the text content of an HTML node.

    Returns:
        Normalised text, possibly empty.
    """
    return _WHITESPACE_RE.sub(" ", value).strip()


def extract_fragment(url: str) -> str | None:
    """
    Return the fragment identifier of a URL.

    Args:
        url: URL string, absolute or relative.

    Returns:
        Text after ``#``, or None when the URL has no (or an empty) fragment.
    """
    return urlsplit(url).fragment or None
