"""
Translation providers for looking up words and phrases.
Handles the Groq API lookup, rate limiting, and an in-memory provider for tests.
"""

import time
import groq
from typing import Dict, List, Optional, Tuple
from abc import ABC, abstractmethod

from translation_drill.structures import DEFAULT_MODEL


class ProviderError(Exception):
    """Raised when a lookup produced no usable text."""


class RateLimiter:
    """Token bucket that spaces out lookups during batch saves."""

    def __init__(self, capacity: int = 10, refill_rate: float = 0.5):
        self.capacity = capacity
        self.refill_rate = refill_rate
        self._tokens = float(capacity)
        self._updated = time.monotonic()

    def acquire(self) -> float:
        """Take one lookup slot, sleeping until one is free. Returns the seconds waited."""
        self._refill()

        wait_time = 0.0
        if self._tokens < 1:
            wait_time = (1 - self._tokens) / self.refill_rate
            time.sleep(wait_time)
            self._refill()

        self._tokens = max(self._tokens - 1, 0.0)
        return wait_time

    def _refill(self):
        now = time.monotonic()
        self._tokens = min(self.capacity, self._tokens + (now - self._updated) * self.refill_rate)
        self._updated = now


class TranslationProvider(ABC):
    """Abstract base class for translation providers."""

    @abstractmethod
    def fetch(self, text: str) -> str:
        """Look up text from the source to the target language."""
        pass

    @abstractmethod
    def fetch_reverse(self, text: str) -> str:
        """Look up text from the target back to the source language."""
        pass


class GroqTranslationProvider(TranslationProvider):
    """Groq API implementation for translation lookups."""

    def __init__(self, api_key: str, source_language: str = "auto",
                 target_language: str = "english", model: str = DEFAULT_MODEL,
                 client=None):
        self.client = client or groq.Groq(api_key=api_key, max_retries=0)
        self.source_language = source_language
        self.target_language = target_language
        self.model = model

    def fetch(self, text: str) -> str:
        """Look up text using Groq API."""
        return self._lookup(text, self.source_language, self.target_language)

    def fetch_reverse(self, text: str) -> str:
        """Look up text in the reverse direction using Groq API."""
        return self._lookup(text, self.target_language, self.source_language)

    def _lookup(self, text: str, source_language: str, target_language: str) -> str:
        text = text.strip() if text else ""
        if not text:
            raise ProviderError("Nothing to translate")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": self._create_system_prompt(source_language, target_language)},
                    {"role": "user", "content": text}
                ],
                temperature=0.2,
                max_tokens=400,
            )
        except groq.GroqError as e:
            raise ProviderError(f"Lookup failed for '{text}': {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise ProviderError(f"No translation found for '{text}'")

        return content.strip()

    def _create_system_prompt(self, source_language: str, target_language: str) -> str:
        """Create the lookup prompt for a language pair."""
        if source_language.lower() == "auto":
            source_hint = "Detect the source language of the text."
            header = "<detected source language> -> " + target_language
        else:
            source_hint = f"The text is in {source_language}."
            header = f"{source_language} -> {target_language}"

        return f"""You are a dictionary. {source_hint} Translate it to {target_language}.

Answer with exactly these blocks separated by one blank line and nothing else:
{header}
<the text exactly as given>
<the primary {target_language} translation>
<alternative translations, spelling suggestions or short usage notes, separated by semicolons>

Omit the last block if there are no alternatives. Do not use markdown or labels."""


class StaticTranslationProvider(TranslationProvider):
    """In-memory provider returning canned lookup results."""

    def __init__(self, responses: Optional[Dict[str, str]] = None,
                 reverse_responses: Optional[Dict[str, str]] = None):
        self.responses = dict(responses or {})
        self.reverse_responses = dict(reverse_responses or {})
        self.calls: List[Tuple[str, str]] = []

    def fetch(self, text: str) -> str:
        """Return the canned forward lookup."""
        self.calls.append(("fetch", text))
        return self._lookup(self.responses, text)

    def fetch_reverse(self, text: str) -> str:
        """Return the canned reverse lookup."""
        self.calls.append(("fetch_reverse", text))
        return self._lookup(self.reverse_responses, text)

    def _lookup(self, responses: Dict[str, str], text: str) -> str:
        if text not in responses:
            raise ProviderError(f"No translation found for '{text}'")
        return responses[text]


def create_translation_provider(api_key: str, source_language: str = "auto",
                                target_language: str = "english",
                                model: str = DEFAULT_MODEL) -> TranslationProvider:
    """Factory function to create translation provider."""
    return GroqTranslationProvider(api_key, source_language, target_language, model)
