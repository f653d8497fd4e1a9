"""
Record builder: runs a lookup and normalizes its output.
"""

from translation_drill.normalizer import normalize_segments, split_segments
from translation_drill.provider import TranslationProvider
from translation_drill.structures import TranslationRecord


class RecordBuilder:
    """Builds a TranslationRecord from a provider lookup."""

    def __init__(self, debug_mode: bool = False):
        self.debug_mode = debug_mode

    def build(self, provider: TranslationProvider, text: str,
              reverse: bool = False) -> TranslationRecord:
        """Look up text and normalize the result. Provider errors propagate."""
        raw_text = provider.fetch_reverse(text) if reverse else provider.fetch(text)

        segments = split_segments(raw_text)
        if self.debug_mode:
            print(f"[debug] Lookup for '{text}' returned {len(segments)} segment(s)")

        return normalize_segments(segments)
