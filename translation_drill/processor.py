"""
Main processor for Translation Drill.
Orchestrates lookups, rendering, and writing to the vocabulary and flashcard stores.
"""

import time
from typing import Dict, Iterable, List, Optional

from translation_drill.builder import RecordBuilder
from translation_drill.provider import (
    ProviderError, RateLimiter, TranslationProvider, create_translation_provider
)
from translation_drill.renderers import render_flashcard, render_vocab_entry
from translation_drill.store import OrgStore
from translation_drill.structures import Configuration, ProcessingStats, SaveResult


class TranslationSaver:
    """Saves lookups to the vocabulary log and the flashcard deck."""

    def __init__(self, config: Configuration, provider: Optional[TranslationProvider],
                 vocab_store: Optional[OrgStore] = None,
                 flashcard_store: Optional[OrgStore] = None,
                 rate_limiter: Optional[RateLimiter] = None):
        self.config = config
        self.provider = provider
        self.builder = RecordBuilder(debug_mode=config.debug_mode)
        self.vocab_store = vocab_store or OrgStore(config.vocab_file, "vocabulary")
        self.flashcard_store = flashcard_store or OrgStore(config.flashcard_file, "flashcards")
        self.rate_limiter = rate_limiter
        self.stats = ProcessingStats()

    def save_translation(self, text: str, reverse: bool = False,
                         dry_run: bool = False) -> SaveResult:
        """Look up a single text and append it to both stores."""
        start_time = time.time()

        try:
            record = self.builder.build(self.provider, text, reverse=reverse)
        except ProviderError as e:
            print(f"Error: {e}")
            return SaveResult(
                success=False,
                text=text,
                error_message=str(e),
                reverse=reverse,
                processing_time=time.time() - start_time
            )

        vocab_entry = render_vocab_entry(record)
        flashcard = render_flashcard(record, self.config.flashcard_type)

        if dry_run:
            print(f"--- {self.vocab_store.path}\n{vocab_entry}")
            print(f"--- {self.flashcard_store.path}\n{flashcard}")
        else:
            try:
                self._write_entries(vocab_entry, flashcard)
            except (OSError, ValueError) as e:
                print(f"Error saving '{text}': {e}")
                return SaveResult(
                    success=False,
                    text=text,
                    record=record,
                    error_message=str(e),
                    reverse=reverse,
                    processing_time=time.time() - start_time
                )

            print(f"Saved '{record.original_text or text}' to "
                  f"{self.vocab_store.path} and {self.flashcard_store.path}")

        return SaveResult(
            success=True,
            text=text,
            record=record,
            reverse=reverse,
            processing_time=time.time() - start_time
        )

    def _write_entries(self, vocab_entry: str, flashcard: str):
        """Append to both stores, or to neither."""
        vocab_existed = self.vocab_store.path.exists()
        vocab_size = self.vocab_store.append(vocab_entry)

        try:
            self.flashcard_store.append(flashcard)
        except (OSError, ValueError):
            if vocab_existed:
                self.vocab_store.truncate(vocab_size)
            else:
                self.vocab_store.path.unlink(missing_ok=True)
            raise

    def save_translations(self, texts: Iterable[str], reverse: bool = False,
                          dry_run: bool = False) -> List[SaveResult]:
        """Save several texts. More than one gets a progress bar and spaced-out lookups."""
        texts = list(texts)
        self.stats = ProcessingStats(total_words=len(texts))
        start_time = time.time()

        iterator = texts
        rate_limiter = None
        if len(texts) > 1:
            from tqdm import tqdm
            iterator = tqdm(texts, desc="Saving translations")
            rate_limiter = self.rate_limiter or RateLimiter()

        results = []
        for text in iterator:
            if rate_limiter is not None:
                waited = rate_limiter.acquire()
                if waited and self.config.debug_mode:
                    print(f"[debug] Waited {waited:.2f}s before looking up '{text}'")

            result = self.save_translation(text, reverse=reverse, dry_run=dry_run)
            results.append(result)

            if result.success:
                self.stats.saved_words += 1
            else:
                self.stats.failed_words += 1
                self.stats.failed_word_list.append(text)

        self.stats.total_time = time.time() - start_time
        return results

    def undo_save_translation(self) -> Dict[str, bool]:
        """Remove the last top-level entry from each store independently."""
        removed = {}

        for store in (self.vocab_store, self.flashcard_store):
            try:
                removed[store.name] = store.remove_last_entry()
            except (OSError, ValueError) as e:
                print(f"Warning: Could not undo last entry in {store.path}: {e}")
                removed[store.name] = False
                continue

            if removed[store.name]:
                print(f"Removed last entry from {store.path}")
            else:
                print(f"Nothing to undo in {store.path}")

        return removed

    def get_stats(self) -> ProcessingStats:
        """Get processing statistics."""
        return self.stats

    def print_summary(self):
        """Print processing summary."""
        print(f"\n--- Processing Summary ---")
        print(f"Total texts: {self.stats.total_words}")
        print(f"Successfully saved: {self.stats.saved_words}")
        print(f"Failed: {self.stats.failed_words}")
        print(f"Success rate: {self.stats.success_rate:.1f}%")
        print(f"Total time: {self.stats.total_time:.2f}s")

        if self.stats.failed_word_list:
            print(f"Failed texts: {', '.join(self.stats.failed_word_list)}")


def create_saver(config: Configuration,
                 provider: Optional[TranslationProvider] = None) -> TranslationSaver:
    """Factory function to create a saver, building the Groq provider if none is given."""
    if provider is None:
        provider = create_translation_provider(
            config.groq_api_key,
            config.source_language,
            config.target_language,
            config.model
        )
    return TranslationSaver(config, provider)
