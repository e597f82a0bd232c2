"""SPDX tag/value document model.

A document is two append-only sections, document information and package
information. Each section is an ordered list of lines; a line is a blank, a
comment or a ``tag: value`` entry.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

DOCUMENT_HEADER = "##### Document Information"
PACKAGE_HEADER = "##### Package Information"


class MissingEntryError(KeyError):
    """Raised when a tag that an earlier wizard step should have written is absent."""


@dataclass(frozen=True)
class Blank:
    """An empty line."""


@dataclass(frozen=True)
class Comment:
    """A ``# text`` line."""

    text: str


@dataclass(frozen=True)
class Entry:
    """A ``tag: value`` line."""

    tag: str
    value: str


SpdxLine = Blank | Comment | Entry


def render_line(line: SpdxLine) -> str:
    """Render a single line without its line ending."""
    if isinstance(line, Entry):
        return f"{line.tag}: {line.value}"
    if isinstance(line, Comment):
        return f"# {line.text}"
    return ""


@dataclass
class SpdxSection:
    """An ordered, append-only run of lines."""

    lines: list[SpdxLine] = field(default_factory=list)

    def add_entry(self, tag: str, value: str) -> None:
        self.lines.append(Entry(tag, value))

    def add_comment(self, text: str) -> None:
        self.lines.append(Comment(text))

    def add_blank(self) -> None:
        self.lines.append(Blank())

    def find(self, tag: str) -> list[str]:
        """Return every value written for ``tag``, in the order they were added."""
        return [line.value for line in self.lines if isinstance(line, Entry) and line.tag == tag]

    def require(self, tag: str) -> str:
        """Return the first value written for ``tag``.

        Raises:
            MissingEntryError: If no entry with ``tag`` has been added
        """
        values = self.find(tag)
        if not values:
            raise MissingEntryError(tag)
        return values[0]

    def render(self, line_ending: str = os.linesep) -> str:
        return "".join(render_line(line) + line_ending for line in self.lines)


@dataclass
class SpdxDocument:
    """The document assembled by the wizard."""

    document_section: SpdxSection = field(default_factory=SpdxSection)
    package_section: SpdxSection = field(default_factory=SpdxSection)

    def render(self, line_ending: str = os.linesep) -> str:
        """Render both sections, document information first.

        Args:
            line_ending: Terminator for every line, defaults to the platform's

        Returns:
            Document text
        """
        return (
            DOCUMENT_HEADER
            + line_ending
            + self.document_section.render(line_ending)
            + line_ending * 2
            + PACKAGE_HEADER
            + line_ending
            + self.package_section.render(line_ending)
        )

    def __str__(self) -> str:
        return self.render()

    def write(self, path: Path, line_ending: str = os.linesep) -> None:
        """Write the rendered document to ``path``, replacing any existing file."""
        # newline="" keeps the rendered line endings as they are
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(self.render(line_ending))
