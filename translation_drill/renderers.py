"""
Org-mode renderers for vocabulary entries and drill flashcards.
The flashcard layouts are read back by org-drill, so headings, drawer
keys and blank lines must stay exactly as written here.
"""

from translation_drill.store import heading_level
from translation_drill.structures import FlashcardType, TranslationRecord


DRILL_TAG = ":drill:"
DRILL_CARD_TYPE_TWO_SIDED = "twosided"

# Org's escape for body lines that would otherwise read as headings
PROTECT_PREFIX = ","


def protect_lines(text: str, skip_first: bool = False) -> str:
    """Prefix every heading-like line with a comma so it stays body text."""
    lines = text.split("\n")
    for index, line in enumerate(lines):
        if index == 0 and skip_first:
            continue
        if heading_level(line):
            lines[index] = PROTECT_PREFIX + line
    return "\n".join(lines)


def render_vocab_entry(record: TranslationRecord) -> str:
    """Render the vocabulary log entry: original as heading, translation below."""
    original = protect_lines(record.original_text, skip_first=True)
    translation = protect_lines(record.translation, skip_first=True)
    return f"* {original}\n** {translation}\n\n"


def render_flashcard(record: TranslationRecord, kind: FlashcardType) -> str:
    """Render a flashcard entry in the requested layout."""
    record = TranslationRecord(
        protect_lines(record.languages_involved, skip_first=True),
        protect_lines(record.original_text),
        protect_lines(record.translation),
        protect_lines(record.alternatives),
    )

    if kind is FlashcardType.TWO_SIDED:
        return _render_two_sided(record)
    elif kind is FlashcardType.SIMPLE_TRANSLATION_FIRST:
        return _render_simple(record.languages_involved, record.translation,
                              record.original_text, record.alternatives)
    elif kind is FlashcardType.SIMPLE_ORIGINAL_FIRST:
        return _render_simple(record.languages_involved, record.original_text,
                              record.translation, record.alternatives)
    else:
        raise ValueError(f"Unsupported flashcard type: {kind!r}")


def _render_two_sided(record: TranslationRecord) -> str:
    return (
        f"* {record.languages_involved}  {DRILL_TAG}\n"
        ":PROPERTIES:\n"
        f":DRILL_CARD_TYPE: {DRILL_CARD_TYPE_TWO_SIDED}\n"
        ":END:\n"
        "\n"
        "** Original Text\n"
        f"{record.original_text}\n"
        "\n"
        "** Translation\n"
        f"{record.translation}\n"
        "\n"
        "** Alternatives\n"
        f"{record.alternatives}\n"
        "\n"
    )


def _render_simple(languages: str, prompt: str, answer: str, alternatives: str) -> str:
    return (
        f"* {languages} {DRILL_TAG}\n"
        f"{prompt}\n"
        "\n"
        "** Answer\n"
        f"{answer}\n"
        "\n"
        "** Alternatives\n"
        f"{alternatives}\n"
        "\n"
    )
