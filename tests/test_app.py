"""
Tests for the command line interface.
"""

import pytest

from translation_drill.app import build_parser, run
from translation_drill.provider import StaticTranslationProvider


RESPONSES = {
    "привет": "ru -> en\n\nпривет\n\nhello\n\nhi; hey",
    "пока": "ru -> en\n\nпока\n\nbye",
}


@pytest.fixture
def files(tmp_path):
    vocab = tmp_path / "vocabulary.org"
    flashcards = tmp_path / "flashcards.org"
    return vocab, flashcards, ["--vocab-file", str(vocab), "--flashcard-file", str(flashcards)]


@pytest.fixture
def provider():
    return StaticTranslationProvider(
        responses=RESPONSES,
        reverse_responses={"hello": "en -> ru\n\nhello\n\nпривет"}
    )


class TestParser:
    """Test argument parsing."""

    def test_command_is_required(self):
        """Test that running without an action is a usage error."""
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args([])
        assert excinfo.value.code == 2

    def test_unknown_card_type(self):
        """Test that card types are limited to the three layouts."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["save-translation", "--card-type", "cloze", "привет"])

    def test_undo_takes_no_texts(self):
        """Test that undo rejects positional arguments."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["undo-save-translation", "привет"])


class TestSaveCommands:
    """Test the save actions."""

    def test_save_translation(self, files, provider):
        """Test a forward save writes both files."""
        vocab, flashcards, options = files

        status = run(["save-translation", *options, "привет"], provider=provider)

        assert status == 0
        assert vocab.read_text(encoding="utf-8") == "* привет\n** hello\n\n"
        assert flashcards.read_text(encoding="utf-8").startswith("* ru -> en  :drill:\n")

    def test_save_translation_reverse(self, files, provider):
        """Test a reverse save uses the reverse lookup."""
        vocab, _, options = files

        status = run(["save-translation-reverse", *options, "hello"], provider=provider)

        assert status == 0
        assert vocab.read_text(encoding="utf-8") == "* hello\n** привет\n\n"
        assert provider.calls == [("fetch_reverse", "hello")]

    def test_card_type_option(self, files, provider):
        """Test that --card-type selects the flashcard layout."""
        _, flashcards, options = files

        run(["save-translation", *options, "--card-type", "simple-original-first", "привет"],
            provider=provider)

        assert flashcards.read_text(encoding="utf-8").startswith(
            "* ru -> en :drill:\nпривет\n\n** Answer\nhello\n")

    def test_input_file(self, files, provider, tmp_path, capsys):
        """Test texts read from an input file together with positional texts."""
        vocab, _, options = files
        input_file = tmp_path / "words.txt"
        input_file.write_text("пока\n\n", encoding="utf-8")

        status = run(["save-translation", *options, "-i", str(input_file), "привет"], provider=provider)

        assert status == 0
        assert vocab.read_text(encoding="utf-8") == "* привет\n** hello\n\n* пока\n** bye\n\n"
        assert "Processing Summary" in capsys.readouterr().out

    def test_failed_lookup(self, files, provider):
        """Test that a failed lookup exits with an error and writes nothing."""
        vocab, flashcards, options = files

        status = run(["save-translation", *options, "неизвестно"], provider=provider)

        assert status == 1
        assert not vocab.exists()
        assert not flashcards.exists()

    def test_no_texts(self, files, provider, capsys):
        """Test that a save without texts is an error."""
        _, _, options = files

        assert run(["save-translation", *options], provider=provider) == 1
        assert "No texts to save." in capsys.readouterr().out

    def test_missing_api_key(self, files, capsys):
        """Test that the Groq provider needs an API key."""
        _, _, options = files

        assert run(["save-translation", *options, "привет"]) == 1
        assert "Groq API key is required" in capsys.readouterr().out

    def test_dry_run(self, files, provider, capsys):
        """Test that a dry run prints entries only."""
        vocab, flashcards, options = files

        status = run(["save-translation", *options, "--dry-run", "привет"], provider=provider)

        assert status == 0
        assert not vocab.exists()
        assert not flashcards.exists()
        assert "* привет\n** hello" in capsys.readouterr().out


class TestUndoCommand:
    """Test the undo action."""

    def test_save_then_undo(self, files, provider):
        """Test that undo removes the last save from both files."""
        vocab, flashcards, options = files
        run(["save-translation", *options, "привет"], provider=provider)
        vocab_before = vocab.read_text(encoding="utf-8")
        flashcards_before = flashcards.read_text(encoding="utf-8")
        run(["save-translation", *options, "пока"], provider=provider)

        status = run(["undo-save-translation", *options])

        assert status == 0
        assert vocab.read_text(encoding="utf-8") == vocab_before
        assert flashcards.read_text(encoding="utf-8") == flashcards_before

    def test_undo_without_files(self, files, capsys):
        """Test that undo with nothing saved succeeds quietly."""
        _, _, options = files

        assert run(["undo-save-translation", *options]) == 0
        assert "Nothing to undo" in capsys.readouterr().out

    def test_debug_output(self, files, capsys):
        """Test that --debug prints the resolved configuration."""
        _, _, options = files

        run(["undo-save-translation", *options, "--debug"])

        assert "[debug] Flashcard type: twosided" in capsys.readouterr().out
