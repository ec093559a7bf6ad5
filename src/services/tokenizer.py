"""Query normalization shared by the matcher and its callers."""

from typing import List, Optional

MIN_TOKEN_LENGTH = 2


def normalize(text: Optional[str]) -> str:
    """Lower-case and trim; ``None`` and blank input become ``""``."""
    if not text:
        return ""
    return text.lower().strip()


def tokenize(text: Optional[str]) -> List[str]:
    """Split normalized text on whitespace, dropping one-character tokens."""
    return [word for word in normalize(text).split() if len(word) >= MIN_TOKEN_LENGTH]
