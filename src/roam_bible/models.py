"""Data models for OpenSong Bibles and Roam outline blocks."""

import json
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Source Document
# =============================================================================

@dataclass(frozen=True)
class Verse:
    """A single verse with whitespace-normalized text."""

    number: int  # e.g., 3
    text: str  # never empty


@dataclass(frozen=True)
class Chapter:
    """An ordered run of verses. Chapter numbers are implied by position in the book."""

    verses: tuple[Verse, ...] = ()

    @property
    def verse_numbers(self) -> list[int]:
        return [v.number for v in self.verses]


@dataclass(frozen=True)
class Book:
    """A book of the Bible as it appears in the source file."""

    name: str  # canonical name, e.g., "1 John"
    alternate_names: frozenset[str] = frozenset()
    chapters: tuple[Chapter, ...] = ()

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)


@dataclass(frozen=True)
class BibleDocument:
    """A parsed translation file: books in source order."""

    books: tuple[Book, ...]

    @property
    def book_names(self) -> list[str]:
        return [b.name for b in self.books]


# =============================================================================
# Outline Output
# =============================================================================

@dataclass
class OutlineBlock:
    """One block in a Roam import. Verse blocks never carry children or a heading."""

    string: str  # e.g., "3. In the beginning God created..."
    heading: Optional[int] = None  # 1-3 when set
    children: Optional[list["OutlineBlock"]] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting unset fields."""
        data: dict = {"string": self.string}
        if self.heading is not None:
            data["heading"] = self.heading
        if self.children is not None:
            data["children"] = [c.to_dict() for c in self.children]
        return data


@dataclass
class OutlinePage:
    """A titled Roam page holding top-level blocks."""

    title: str  # e.g., "Joshua 11"
    children: list[OutlineBlock] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "children": [c.to_dict() for c in self.children],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
