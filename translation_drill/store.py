"""
File-backed org-mode stores for the vocabulary log and the flashcard deck.
Handles appending entries and cutting the last top-level entry for undo.
"""

import re
from pathlib import Path
from typing import List, Optional


# Stars followed by whitespace, or a line made only of stars
HEADING_PATTERN = re.compile(r'^(\*+)(?:[ \t]|$)')

# Zero-width split point after each newline
LINE_END_PATTERN = re.compile(r'(?<=\n)')

# Upper bound on how many enclosing headings undo will climb
MAX_HEADING_LEVELS = 100


def heading_level(line: str) -> int:
    """Return the org heading level of a line, or 0 for body text."""
    match = HEADING_PATTERN.match(line.rstrip('\r\n'))
    return len(match.group(1)) if match else 0


def split_lines(content: str) -> List[str]:
    """Split content at newlines only, keeping the line endings."""
    return [line for line in LINE_END_PATTERN.split(content) if line]


class OrgStore:
    """An append-only org outline file."""

    def __init__(self, path, name: Optional[str] = None):
        self.path = Path(path).expanduser()
        self.name = name or self.path.stem

    def __repr__(self):
        return f"OrgStore({self.name!r}, {str(self.path)!r})"

    def read(self) -> str:
        """Return the store content, or an empty string if it does not exist."""
        if not self.path.exists():
            return ""
        with open(self.path, 'r', encoding='utf-8', newline='') as f:
            return f.read()

    def size(self) -> int:
        """Return the store size in bytes."""
        return self.path.stat().st_size if self.path.exists() else 0

    def append(self, text: str) -> int:
        """
        Append text at the end of the store, creating it if absent.

        Returns the size of the store before the append, which can be
        passed to truncate() to take the append back.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        previous_size = self.size()

        if previous_size and not self._ends_with_newline():
            text = '\n' + text

        with open(self.path, 'a', encoding='utf-8', newline='') as f:
            f.write(text)

        return previous_size

    def _ends_with_newline(self) -> bool:
        with open(self.path, 'rb') as f:
            f.seek(-1, 2)
            return f.read(1) == b'\n'

    def truncate(self, size: int):
        """Cut the store back to the given size in bytes."""
        if not self.path.exists():
            return
        with open(self.path, 'r+b') as f:
            f.truncate(size)

    def remove_last_entry(self) -> bool:
        """
        Remove the top-level entry that ends the store.

        Starting from the last heading before the end of content, climbs
        through enclosing headings until a level-1 heading is found, then
        cuts from that heading to the end of the file. Whatever entry ends
        the file is removed, whether or not this program wrote it.

        Returns False and leaves the file alone when there is no enclosing
        top-level entry.
        """
        content = self.read()
        lines = split_lines(content)

        start = self._find_last_top_level_heading(lines)
        if start is None:
            return False

        cut = sum(len(line) for line in lines[:start])
        with open(self.path, 'w', encoding='utf-8', newline='') as f:
            f.write(content[:cut])

        return True

    def _find_last_top_level_heading(self, lines: List[str]) -> Optional[int]:
        end = len(lines) - 1
        while end >= 0 and not lines[end].strip():
            end -= 1

        index = end
        while index >= 0 and heading_level(lines[index]) == 0:
            index -= 1
        if index < 0:
            return None

        level = heading_level(lines[index])
        for _ in range(MAX_HEADING_LEVELS):
            if level == 1:
                return index
            index = self._find_parent_heading(lines, index, level)
            if index is None:
                return None
            level = heading_level(lines[index])

        return index if level == 1 else None

    def _find_parent_heading(self, lines: List[str], index: int, level: int) -> Optional[int]:
        for candidate in range(index - 1, -1, -1):
            candidate_level = heading_level(lines[candidate])
            if 0 < candidate_level < level:
                return candidate
        return None
