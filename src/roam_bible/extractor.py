"""Pick one chapter out of a book."""

from .errors import ChapterOutOfRange
from .models import Book, Verse


def extract_chapter(book: Book, chapter: int) -> tuple[Verse, ...]:
    """
    Return the verses of a 1-based chapter number, in source order.

    Raises:
        ChapterOutOfRange: if chapter is not in 1..book.chapter_count
    """
    if not 1 <= chapter <= book.chapter_count:
        raise ChapterOutOfRange(book.name, chapter, book.chapter_count)
    return book.chapters[chapter - 1].verses
