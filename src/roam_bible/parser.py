"""Parse OpenSong XML Bibles into a BibleDocument.

An OpenSong file looks like::

    <bible>
      <b n="Genesis">
        <c n="1">
          <v n="1">In the beginning God created the heaven and the earth.</v>
          ...

Elements and attributes other than ``b``/``c``/``v`` and ``n`` are ignored.
"""

import logging
import re
from typing import Optional

from lxml import etree

from .books import aliases_for
from .errors import MalformedInput
from .models import BibleDocument, Book, Chapter, Verse

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

ROOT_TAG = "bible"
BOOK_TAG = "b"
CHAPTER_TAG = "c"
VERSE_TAG = "v"
NUMBER_ATTR = "n"

WHITESPACE_RE = re.compile(r"\s+")
NUMBER_RE = re.compile(r"\d+", re.ASCII)


# =============================================================================
# Helpers
# =============================================================================

def normalize_text(s: str) -> str:
    """Trim and collapse every whitespace run (line breaks included) to one space."""
    return WHITESPACE_RE.sub(" ", s).strip()


def _local_name(e: etree._Element) -> str:
    # Comments and processing instructions have a non-string tag
    if not isinstance(e.tag, str):
        return ""
    return etree.QName(e).localname.lower()


def _children(e: etree._Element, tag: str) -> list:
    return [child for child in e if _local_name(child) == tag]


def _find_books(root: etree._Element):
    """Yield book elements at any depth in document order, without looking inside a book."""
    stack = list(root)[::-1]
    while stack:
        e = stack.pop()
        name = _local_name(e)
        if name == BOOK_TAG:
            yield e
        elif name:
            stack.extend(list(e)[::-1])


def _number(e: etree._Element, what: str) -> Optional[int]:
    """Read the ``n`` attribute as an integer, or None when it is absent."""
    raw = e.get(NUMBER_ATTR)
    if raw is None or not raw.strip():
        return None
    if not NUMBER_RE.fullmatch(raw.strip()):
        raise MalformedInput(
            f"non-numeric {what} attribute n={raw!r} (line {e.sourceline})"
        )
    return int(raw.strip())


# =============================================================================
# Parsing
# =============================================================================

def _parse_verses(chapter_el: etree._Element, book: str, chapter: int) -> Chapter:
    verses = []
    last = 0

    for verse_el in _children(chapter_el, VERSE_TAG):
        number = _number(verse_el, "verse")
        if number is None:
            number = last + 1
        if number < 1:
            raise MalformedInput(
                f"{book} {chapter}: verse numbers must be positive, got {number} "
                f"(line {verse_el.sourceline})"
            )
        if number <= last:
            raise MalformedInput(
                f"{book} {chapter}: verse {number} follows verse {last} "
                f"(line {verse_el.sourceline})"
            )
        last = number

        text = normalize_text("".join(verse_el.itertext()))
        if not text:
            log.debug("Dropping blank verse %s %d:%d", book, chapter, number)
            continue
        verses.append(Verse(number=number, text=text))

    return Chapter(verses=tuple(verses))


def _parse_book(book_el: etree._Element) -> Book:
    name = normalize_text(book_el.get(NUMBER_ATTR) or "")
    if not name:
        raise MalformedInput(f"book without a name (line {book_el.sourceline})")

    chapters = []
    for position, chapter_el in enumerate(_children(book_el, CHAPTER_TAG), start=1):
        number = _number(chapter_el, "chapter")
        if number is not None and number != position:
            raise MalformedInput(
                f"{name}: found chapter {number} where chapter {position} was "
                f"expected; chapter numbers must run 1..N without gaps"
            )
        chapters.append(_parse_verses(chapter_el, name, position))

    return Book(
        name=name,
        alternate_names=aliases_for(name),
        chapters=tuple(chapters),
    )


def parse_bible(data: bytes) -> BibleDocument:
    """
    Parse the bytes of an OpenSong XML file.

    Args:
        data: Raw file contents; any encoding declared in the XML prolog is honoured

    Returns:
        BibleDocument with books in file order

    Raises:
        MalformedInput: if the XML is not well-formed, the root element is not
            <bible>, a number attribute is not an integer, or there are no books
    """
    parser = etree.XMLParser(resolve_entities="internal", no_network=True, huge_tree=True)
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as e:
        raise MalformedInput(str(e)) from e
    except ValueError as e:
        # lxml refuses str input that carries an encoding declaration
        raise MalformedInput(str(e)) from e

    root_name = _local_name(root)
    if root_name != ROOT_TAG:
        raise MalformedInput(f"unexpected root element <{root_name or root.tag}>")

    books = []
    seen = set()
    for book_el in _find_books(root):
        book = _parse_book(book_el)
        if book.name in seen:
            raise MalformedInput(f"duplicate book {book.name!r}")
        seen.add(book.name)
        books.append(book)
        log.debug("Parsed %s (%d chapters)", book.name, book.chapter_count)

    if not books:
        raise MalformedInput("no books found")

    return BibleDocument(books=tuple(books))
