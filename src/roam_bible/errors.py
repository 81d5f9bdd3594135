"""Failures that end a conversion.

Every failure is a deterministic property of the file/book/chapter triple, so
none of them are retried. ``str(error)`` is the message shown to the user.
"""

from typing import Optional, Sequence


class ConversionError(Exception):
    """Base class for everything the pipeline reports to the user."""

    #: True when the problem lies in the source file rather than the request.
    is_data_error = False

    def hint(self) -> Optional[str]:
        """An optional second line to help the user correct the request."""
        return None


class MalformedInput(ConversionError):
    """The XML is not well-formed or lacks the structure of an OpenSong Bible."""

    is_data_error = True

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed Bible XML: {reason}")


class BookNotFound(ConversionError):
    def __init__(self, name: str, known: Sequence[str] = ()):
        self.name = name
        self.known = list(known)
        super().__init__(f"Unknown book: {name!r}")

    def hint(self) -> Optional[str]:
        if not self.known:
            return None
        return f"Valid books: {', '.join(self.known)}"


class AmbiguousBookName(ConversionError):
    def __init__(self, name: str, candidates: Sequence[str]):
        self.name = name
        self.candidates = list(candidates)
        super().__init__(
            f"Ambiguous book name {name!r} matches: {', '.join(self.candidates)}"
        )


class ChapterOutOfRange(ConversionError):
    def __init__(self, book: str, chapter: int, count: int):
        self.book = book
        self.chapter = chapter
        self.count = count
        super().__init__(f"{book} has no chapter {chapter}")

    @property
    def valid_range(self) -> range:
        return range(1, self.count + 1)

    def hint(self) -> Optional[str]:
        if self.count == 0:
            return f"{self.book} has no chapters in this file"
        return f"Valid chapters: 1-{self.count}"


class EmptyChapter(ConversionError):
    """The chapter exists but every verse in it is blank."""

    is_data_error = True

    def __init__(self, book: str = "", chapter: Optional[int] = None):
        self.book = book
        self.chapter = chapter
        if book and chapter is not None:
            where = f"{book} {chapter}"
        else:
            where = book or "chapter"
        super().__init__(f"{where} has no verse text in the source file")


class SourceUnavailable(ConversionError):
    """The Bible file could not be read or downloaded."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Could not open bible XML file {location}: {reason}")


class InvalidReference(ConversionError):
    """A command-line reference that is not "<book> <chapter>"."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unable to parse chapter {text!r}")

    def hint(self) -> Optional[str]:
        return 'Expected a book followed by a chapter number, e.g. "1 John 3"'
