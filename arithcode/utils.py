"""Shared helpers for hashing and filesystem operations."""

from __future__ import annotations

from hashlib import sha256 as _sha256
from pathlib import Path


def sha256_text(text: str) -> str:
    """Return the SHA256 hex digest of ``text`` encoded as UTF-8."""

    return _sha256(text.encode("utf-8")).hexdigest()


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)
