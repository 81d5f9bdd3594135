"""Parse -> resolve book -> extract chapter -> encode.

Each stage either hands its result to the next or raises a ConversionError,
which ends the run. Nothing is written until every stage has succeeded.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .encoder import dump_outline, encode_page, encode_verses
from .errors import ConversionError
from .extractor import extract_chapter
from .models import BibleDocument
from .parser import parse_bible
from .resolver import resolve_book

log = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of a run: exactly one of output and error is set."""

    output: Optional[bytes] = None
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def convert_document(
    document: BibleDocument,
    book: str,
    chapter: int,
    page: bool = False,
    indent: Optional[int] = None,
) -> bytes:
    """Convert one chapter of an already parsed document."""
    resolved = resolve_book(document, book)
    verses = extract_chapter(resolved, chapter)
    log.debug("Encoding %s %d (%d verses)", resolved.name, chapter, len(verses))

    if page:
        items = [encode_page(resolved.name, chapter, verses)]
    else:
        items = encode_verses(verses, resolved.name, chapter)
    return dump_outline(items, indent=indent)


def convert(
    data: bytes,
    book: str,
    chapter: int,
    page: bool = False,
    indent: Optional[int] = None,
) -> bytes:
    """
    Convert one chapter of an OpenSong XML file to Roam import JSON.

    Args:
        data: Raw XML bytes
        book: Book name as typed by the user (e.g., 'josh', '1 Jn')
        chapter: 1-based chapter number
        page: Wrap the verses in a titled page instead of a flat block list
        indent: Pretty-print with this indent (compact when None)

    Returns:
        UTF-8 JSON bytes

    Raises:
        ConversionError: the first failure of any stage
    """
    document = parse_bible(data)
    log.debug("Parsed %d books", len(document.books))
    return convert_document(document, book, chapter, page=page, indent=indent)


def run(
    data: bytes,
    book: str,
    chapter: int,
    page: bool = False,
    indent: Optional[int] = None,
) -> ConversionResult:
    """Like convert(), but report failure in the result instead of raising."""
    try:
        output = convert(data, book, chapter, page=page, indent=indent)
    except ConversionError as e:
        return ConversionResult(error=e)
    return ConversionResult(output=output)
