"""
Command line entry point for Translation Drill.
Provides the save, reverse save, and undo actions.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from translation_drill.config import load_config
from translation_drill.processor import TranslationSaver, create_saver
from translation_drill.provider import TranslationProvider
from translation_drill.structures import Configuration, FlashcardType


SAVE_COMMAND = "save-translation"
SAVE_REVERSE_COMMAND = "save-translation-reverse"
UNDO_COMMAND = "undo-save-translation"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="translation-drill",
        description="Save translations to an org vocabulary log and an org-drill flashcard deck."
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--vocab-file",
        type=Path,
        help="Path to the vocabulary org file"
    )
    common.add_argument(
        "--flashcard-file",
        type=Path,
        help="Path to the flashcard org file"
    )
    common.add_argument(
        "--card-type",
        choices=[kind.value for kind in FlashcardType],
        help="Flashcard layout (default: twosided)"
    )
    common.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode"
    )

    save = argparse.ArgumentParser(add_help=False, parents=[common])
    save.add_argument(
        "texts",
        nargs="*",
        metavar="TEXT",
        help="Words or phrases to look up"
    )
    save.add_argument(
        "-i", "--input",
        type=Path,
        help="Path to input file containing texts to look up (one per line)"
    )
    save.add_argument(
        "--source-language",
        type=str,
        help="Source language of the lookup (default: auto)"
    )
    save.add_argument(
        "--target-language",
        type=str,
        help="Target language of the lookup (default: english)"
    )
    save.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rendered entries without writing any file"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser(
        SAVE_COMMAND,
        parents=[save],
        help="Look up texts and save them to both files"
    )
    subparsers.add_parser(
        SAVE_REVERSE_COMMAND,
        parents=[save],
        help="Look up texts in the reverse direction and save them to both files"
    )
    subparsers.add_parser(
        UNDO_COMMAND,
        parents=[common],
        help="Remove the last entry from both files"
    )

    return parser


def read_texts_from_file(file_path: Path) -> List[str]:
    """Read texts from input file, one per line."""
    with open(file_path, 'r', encoding='utf-8') as f:
        texts = [line.strip() for line in f if line.strip()]

    print(f"Read {len(texts)} texts from {file_path}")
    return texts


def configure(args: argparse.Namespace) -> Configuration:
    """Load configuration and override it with command line arguments."""
    return load_config(
        vocab_file=args.vocab_file,
        flashcard_file=args.flashcard_file,
        flashcard_type=args.card_type,
        source_language=getattr(args, "source_language", None),
        target_language=getattr(args, "target_language", None),
        debug_mode=args.debug or None
    )


def run_save(args: argparse.Namespace, config: Configuration,
             provider: Optional[TranslationProvider] = None) -> int:
    """Run a save or reverse save action."""
    texts = list(args.texts)
    if args.input:
        try:
            texts += read_texts_from_file(args.input)
        except OSError as e:
            print(f"Error reading input file: {e}")
            return 1

    if not texts:
        print("No texts to save.")
        return 1

    errors = config.validate(require_api_key=provider is None)
    if errors:
        print("Configuration errors:")
        for error in errors:
            print(f"  - {error}")
        return 1

    saver = create_saver(config, provider)
    results = saver.save_translations(
        texts,
        reverse=args.command == SAVE_REVERSE_COMMAND,
        dry_run=args.dry_run
    )

    if len(results) > 1:
        saver.print_summary()

    return 0 if all(result.success for result in results) else 1


def run_undo(config: Configuration,
             provider: Optional[TranslationProvider] = None) -> int:
    """Run the undo action."""
    errors = config.validate(require_api_key=False)
    if errors:
        print("Configuration errors:")
        for error in errors:
            print(f"  - {error}")
        return 1

    # Undo never performs a lookup
    saver = TranslationSaver(config, provider)
    saver.undo_save_translation()
    return 0


def run(argv: Optional[List[str]] = None,
        provider: Optional[TranslationProvider] = None) -> int:
    """Parse arguments and run the requested action. Returns the exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = configure(args)
    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1

    if config.debug_mode:
        print(f"[debug] Vocabulary file: {config.vocab_file}")
        print(f"[debug] Flashcard file: {config.flashcard_file}")
        print(f"[debug] Flashcard type: {config.flashcard_type.value}")

    if args.command == UNDO_COMMAND:
        return run_undo(config, provider)

    return run_save(args, config, provider)


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
