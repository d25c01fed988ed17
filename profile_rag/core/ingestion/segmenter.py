"""
Word-window segmenter.

Splits entry text into overlapping fixed-size word windows so that local
context survives split boundaries.

Dependencies: re
System role: First transform of the ingestion pipeline
"""

import re

from .models import Entry, Segment

_WHITESPACE = re.compile(r"\s+")


def segment(text: str, window_size: int = 800, overlap: int = 120) -> list[str]:
    """
    Split text into overlapping word windows.

    Windows start every ``window_size - overlap`` words and stop after the
    window that reaches the last word. Whitespace runs collapse to one space.

    Args:
        text: Text to split
        window_size: Maximum words per window
        overlap: Words shared by consecutive windows

    Returns:
        list[str]: Non-empty windows in order

    Raises:
        ValueError: When window_size < 1, overlap < 0 or overlap >= window_size
    """
    if window_size < 1:
        raise ValueError("window_size must be positive")
    if overlap < 0:
        raise ValueError("overlap must be non-negative")
    if overlap >= window_size:
        raise ValueError("overlap must be less than window_size")

    words = [word for word in _WHITESPACE.split(text) if word]
    stride = window_size - overlap

    windows = []
    for start in range(0, len(words), stride):
        window = " ".join(words[start:start + window_size]).strip()
        if window:
            windows.append(window)
        if start + window_size >= len(words):
            break
    return windows


class Segmenter:
    """Segment entries with a fixed window policy."""

    def __init__(self, window_size: int = 800, overlap: int = 120) -> None:
        """
        Initialize segmenter with window configuration.

        Raises:
            ValueError: When the window policy is invalid
        """
        # Validate eagerly so a bad policy fails at construction
        segment("", window_size, overlap)
        self.window_size = window_size
        self.overlap = overlap

    def split(self, entry: Entry) -> list[Segment]:
        """Split one entry into segments carrying its source_id."""
        return [
            Segment(source_id=entry.source_id, text=window)
            for window in segment(entry.text, self.window_size, self.overlap)
        ]
