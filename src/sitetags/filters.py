"""Template filters."""

from __future__ import annotations

import hashlib


def gravatar_hash(value: object) -> str:
    """SHA-256 hex digest of ``value`` trimmed and lower-cased, for Gravatar URLs."""
    normalized = str(value).strip().lower()
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()
