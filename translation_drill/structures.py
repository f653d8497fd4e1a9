"""
Data structures and entities for Translation Drill.
This module defines all the core data structures used throughout the application.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from pathlib import Path
from enum import Enum


class FlashcardType(Enum):
    """Enumeration for the supported flashcard layouts."""
    TWO_SIDED = "twosided"
    SIMPLE_TRANSLATION_FIRST = "simple-translation-first"
    SIMPLE_ORIGINAL_FIRST = "simple-original-first"

    @classmethod
    def parse(cls, value) -> "FlashcardType":
        """Parse a flashcard type from its value or member name."""
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower().replace("_", "-")
        for member in cls:
            if key in (member.value, member.name.lower().replace("_", "-")):
                return member

        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown flashcard type '{value}' (expected one of: {choices})")


@dataclass(frozen=True)
class TranslationRecord:
    """Normalized result of a single lookup. Always exactly four fields."""
    languages_involved: str = ""
    original_text: str = ""
    translation: str = ""
    alternatives: str = ""

    def fields(self) -> Tuple[str, str, str, str]:
        """Return the four fields in order."""
        return (self.languages_involved, self.original_text,
                self.translation, self.alternatives)


@dataclass
class SaveResult:
    """Result of saving one lookup to the stores."""
    success: bool
    text: str
    record: Optional[TranslationRecord] = None
    error_message: Optional[str] = None
    reverse: bool = False
    processing_time: float = 0.0


@dataclass
class ProcessingStats:
    """Statistics for a batch save session."""
    total_words: int = 0
    saved_words: int = 0
    failed_words: int = 0
    total_time: float = 0.0
    failed_word_list: List[str] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_words == 0:
            return 0.0
        return (self.saved_words / self.total_words) * 100


DEFAULT_VOCAB_FILE = Path("~/org/vocabulary.org")
DEFAULT_FLASHCARD_FILE = Path("~/org/flashcards.org")
DEFAULT_MODEL = "meta-llama/llama-4-maverick-17b-128e-instruct"


@dataclass
class Configuration:
    """Application configuration."""
    groq_api_key: str = ""
    vocab_file: Path = DEFAULT_VOCAB_FILE
    flashcard_file: Path = DEFAULT_FLASHCARD_FILE
    flashcard_type: FlashcardType = FlashcardType.TWO_SIDED
    source_language: str = "auto"
    target_language: str = "english"
    model: str = DEFAULT_MODEL
    debug_mode: bool = False

    def __post_init__(self):
        # Convert string paths to Path objects
        for field_name in ['vocab_file', 'flashcard_file']:
            value = getattr(self, field_name)
            setattr(self, field_name, Path(value).expanduser())

        self.flashcard_type = FlashcardType.parse(self.flashcard_type)

    def validate(self, require_api_key: bool = True) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if require_api_key and not self.groq_api_key:
            errors.append("Groq API key is required")

        if self.vocab_file.resolve() == self.flashcard_file.resolve():
            errors.append("Vocabulary and flashcard files must be different")

        return errors
