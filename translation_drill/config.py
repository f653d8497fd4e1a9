"""
Configuration management for Translation Drill.
Handles environment variables, configuration validation, and default settings.
"""

import dataclasses
import os
from pathlib import Path
from typing import Optional, List
from dotenv import load_dotenv

from translation_drill.structures import (
    Configuration, DEFAULT_VOCAB_FILE, DEFAULT_FLASHCARD_FILE, DEFAULT_MODEL
)


class ConfigManager:
    """Builds the application configuration from the environment."""

    def __init__(self, load_env_file: bool = True):
        self._config: Optional[Configuration] = None
        if load_env_file:
            self._load_environment()

    def _load_environment(self):
        """Load environment variables from .env file."""
        env_files = [
            Path(".env"),
            Path("../.env"),
            Path("../../.env"),
        ]

        for env_file in env_files:
            if env_file.exists():
                load_dotenv(env_file)
                break

    def get_configuration(self) -> Configuration:
        """Get the application configuration."""
        if self._config is None:
            self._config = self._create_configuration()
        return self._config

    def _create_configuration(self) -> Configuration:
        """Create configuration from environment variables."""
        return Configuration(
            groq_api_key=os.environ.get("GROQ_API_KEY", ""),
            vocab_file=os.environ.get("VOCAB_FILE", str(DEFAULT_VOCAB_FILE)),
            flashcard_file=os.environ.get("FLASHCARD_FILE", str(DEFAULT_FLASHCARD_FILE)),
            flashcard_type=os.environ.get("FLASHCARD_TYPE", "twosided"),
            source_language=os.environ.get("SOURCE_LANGUAGE", "auto"),
            target_language=os.environ.get("TARGET_LANGUAGE", "english"),
            model=os.environ.get("GROQ_MODEL", DEFAULT_MODEL),
            debug_mode=os.environ.get("DEBUG_MODE", "false").lower() == "true"
        )

    def update_configuration(self, **kwargs):
        """Update configuration with new values, skipping unset ones."""
        config = self.get_configuration()
        changes = {key: value for key, value in kwargs.items()
                   if value is not None and hasattr(config, key)}

        # replace() runs __post_init__ again, so paths and types are converted
        self._config = dataclasses.replace(config, **changes)

    def validate_configuration(self, require_api_key: bool = True) -> List[str]:
        """Validate the current configuration."""
        return self.get_configuration().validate(require_api_key)


def load_config(load_env_file: bool = True, **overrides) -> Configuration:
    """Load configuration from the environment and apply overrides."""
    manager = ConfigManager(load_env_file)
    manager.update_configuration(**overrides)
    return manager.get_configuration()
