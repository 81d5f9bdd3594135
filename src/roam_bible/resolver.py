"""Resolve a user-supplied book name to a book in a parsed Bible."""

import logging

from .books import fold_name
from .errors import AmbiguousBookName, BookNotFound
from .models import BibleDocument, Book

log = logging.getLogger(__name__)


def build_alias_table(document: BibleDocument) -> dict[str, Book]:
    """
    Map each folded alternate name to the one book that accepts it.

    Alternate names that fold to some book's canonical name are left out, so an
    abbreviation can never shadow a real book in the same file. Names claimed by
    more than one book (e.g. "Cant" with both "Song of Solomon" and "Song of
    Songs" present) are left out too, and such queries go on to prefix matching.
    """
    canonical = {fold_name(b.name) for b in document.books}
    claims: dict[str, list[Book]] = {}

    for book in document.books:
        for alias in book.alternate_names:
            key = fold_name(alias)
            if key in canonical:
                continue
            entries = claims.setdefault(key, [])
            if book not in entries:
                entries.append(book)

    return {key: books[0] for key, books in claims.items() if len(books) == 1}


def resolve_book(document: BibleDocument, name: str) -> Book:
    """
    Find the book a user meant.

    Rules, in order:
        1. exact canonical name
        2. exact alternate name / abbreviation
        3. unique prefix of a canonical name

    All comparisons ignore case and surrounding whitespace.

    Raises:
        AmbiguousBookName: if a prefix fits several books
        BookNotFound: if nothing fits
    """
    query = fold_name(name)
    if not query:
        raise BookNotFound(name, document.book_names)

    for book in document.books:
        if fold_name(book.name) == query:
            log.debug("Resolved %r to %s by name", name, book.name)
            return book

    aliased = build_alias_table(document).get(query)
    if aliased is not None:
        log.debug("Resolved %r to %s by alternate name", name, aliased.name)
        return aliased

    matches = [b for b in document.books if fold_name(b.name).startswith(query)]
    if len(matches) == 1:
        log.debug("Resolved %r to %s by prefix", name, matches[0].name)
        return matches[0]
    if matches:
        raise AmbiguousBookName(name, [b.name for b in matches])

    raise BookNotFound(name, document.book_names)
