"""
ctxlog.core.random_ids

Purpose:
    Random correlation identifiers for log tags.
    Bytes come from the OS CSPRNG via secrets; ids are URL-safe base64.

Created:
    2026-10-17
"""

from __future__ import annotations

import base64
import logging
import secrets
from typing import Callable

from ctxlog.errors import RandomSourceError

logger = logging.getLogger(__name__)

# 3 triads -> 9 bytes -> 12 base64 chars, no padding.
DEFAULT_ID_TRIADS = 3

RandomSource = Callable[[int], bytes]


def rand_bytes(length: int, *, source: RandomSource = secrets.token_bytes) -> bytes:
    """
    Return `length` cryptographically secure random bytes.

    Raises:
        ValueError: length is negative.
        RandomSourceError: the source failed or returned a short read.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    try:
        buf = source(length)
    except OSError as e:
        raise RandomSourceError(
            f"random source failed: {e}", requested=length
        ) from e

    if len(buf) != length:
        raise RandomSourceError(
            f"random source got too few bytes, {len(buf)} < {length}",
            requested=length,
            received=len(buf),
        )
    return buf


def rand_string_b64(
    num_triads: int = DEFAULT_ID_TRIADS, *, source: RandomSource = secrets.token_bytes
) -> str:
    """
    Random URL-safe base64 string of exactly 4 * num_triads characters.
    Returns "" if the random source fails.
    """
    try:
        buf = rand_bytes(num_triads * 3, source=source)
    except RandomSourceError as e:
        logger.warning("could not generate random id: %s", e)
        return ""
    return base64.urlsafe_b64encode(buf).decode("ascii")
