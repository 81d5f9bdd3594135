"""Encode verses as Roam outline-import JSON."""

import json
from typing import Optional, Sequence, Union

from .errors import EmptyChapter
from .models import OutlineBlock, OutlinePage, Verse


def verse_block(verse: Verse) -> OutlineBlock:
    """A top-level block reading "<number>. <text>"."""
    return OutlineBlock(string=f"{verse.number}. {verse.text}")


def encode_verses(
    verses: Sequence[Verse], book: str = "", chapter: Optional[int] = None
) -> list[OutlineBlock]:
    """
    Build one block per verse, in order.

    Args:
        verses: Verses of a single chapter
        book: Book name, only used to describe an empty chapter
        chapter: Chapter number, only used to describe an empty chapter

    Raises:
        EmptyChapter: if there are no verses
    """
    if not verses:
        raise EmptyChapter(book, chapter)
    return [verse_block(v) for v in verses]


def encode_page(book: str, chapter: int, verses: Sequence[Verse]) -> OutlinePage:
    """
    Build a titled page for one chapter.

    The page links the chapter to its book with a "Bible Book::" attribute and
    nests the verses under a block referencing the chapter page itself.
    """
    title = f"{book} {chapter}"
    return OutlinePage(
        title=title,
        children=[
            OutlineBlock(string=f"Bible Book:: [[{book}]]"),
            OutlineBlock(
                string=f"[[{title}]]",
                children=encode_verses(verses, book, chapter),
            ),
        ],
    )


def dump_outline(
    items: Sequence[Union[OutlineBlock, OutlinePage]], indent: Optional[int] = None
) -> bytes:
    """Serialize blocks or pages as a top-level JSON array, UTF-8 encoded."""
    separators = (",", ":") if indent is None else (",", ": ")
    text = json.dumps(
        [item.to_dict() for item in items],
        indent=indent,
        separators=separators,
        ensure_ascii=False,
    )
    return text.encode("utf-8")
