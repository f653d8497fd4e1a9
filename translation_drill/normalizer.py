"""
Segment normalization for lookup results.
Turns the blank-line separated blocks of a lookup into a four-field record.
"""

import re
from typing import List, Sequence

from translation_drill.structures import TranslationRecord


RECORD_FIELD_COUNT = 4
SEGMENT_SEPARATOR = "\n\n"

# A newline, optional horizontal whitespace, then more blank lines
BLANK_LINE_PATTERN = re.compile(r'\n[ \t]*(?:\n[ \t]*)+')


def split_segments(raw_text: str) -> List[str]:
    """Split raw lookup output into segments on blank lines."""
    if not raw_text or not raw_text.strip():
        return []

    text = raw_text.replace('\r\n', '\n').strip()
    return [segment.strip() for segment in BLANK_LINE_PATTERN.split(text)]


def normalize_segments(segments: Sequence[str]) -> TranslationRecord:
    """
    Fit any number of segments into a TranslationRecord.

    Short input is padded with empty strings. Anything past the third
    segment is merged into the alternatives field, one blank line between
    each pair. Segment content is never checked against its position.
    """
    segments = list(segments)

    if len(segments) < RECORD_FIELD_COUNT:
        segments += [""] * (RECORD_FIELD_COUNT - len(segments))
    elif len(segments) > RECORD_FIELD_COUNT:
        head = segments[:RECORD_FIELD_COUNT - 1]
        overflow = SEGMENT_SEPARATOR.join(segments[RECORD_FIELD_COUNT - 1:])
        segments = head + [overflow]

    return TranslationRecord(*segments)


def parse_lookup(raw_text: str) -> TranslationRecord:
    """Parse raw lookup output straight into a record."""
    return normalize_segments(split_segments(raw_text))
