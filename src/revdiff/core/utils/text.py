"""Content hashing and slug helpers for stored revisions"""

import hashlib
import re
from pathlib import Path


def sha256(content: str) -> str:
    """Return hex-encoded SHA-256 of content (64 chars, matches the String(64) hash column)."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated identifier."""
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def slug_for_path(path: Path) -> str:
    """Slug derived from a file name without its extension, e.g. 'Leave Policy.md' -> 'leave-policy'."""
    return slugify(path.stem)
