"""
Translation Drill

Saves translation lookups to an org-mode vocabulary log and an org-drill
flashcard deck.

This package provides:
- Normalization of loosely structured lookup output into a fixed record
- Three org-drill flashcard layouts and a vocabulary log entry
- Undo of the last saved entry in both files
- A command line interface backed by the Groq API
"""

__version__ = "1.0.0"
__author__ = "Translation Drill Team"

from translation_drill.structures import (
    FlashcardType, TranslationRecord, SaveResult, ProcessingStats, Configuration
)

from translation_drill.config import ConfigManager, load_config

from translation_drill.normalizer import normalize_segments, split_segments, parse_lookup

from translation_drill.provider import (
    ProviderError, TranslationProvider, GroqTranslationProvider,
    StaticTranslationProvider, create_translation_provider
)

from translation_drill.builder import RecordBuilder

from translation_drill.renderers import render_flashcard, render_vocab_entry

from translation_drill.store import OrgStore

from translation_drill.processor import TranslationSaver, create_saver

__all__ = [
    # Structures
    'FlashcardType', 'TranslationRecord', 'SaveResult', 'ProcessingStats',
    'Configuration',

    # Configuration
    'ConfigManager', 'load_config',

    # Normalization and rendering
    'normalize_segments', 'split_segments', 'parse_lookup',
    'render_flashcard', 'render_vocab_entry',

    # Providers
    'ProviderError', 'TranslationProvider', 'GroqTranslationProvider',
    'StaticTranslationProvider', 'create_translation_provider',

    # Processing
    'RecordBuilder', 'OrgStore', 'TranslationSaver', 'create_saver',
]
