"""
roam-bible - Converts one chapter of an OpenSong XML Bible into Roam Research import JSON.
"""

from .models import Verse, Chapter, Book, BibleDocument, OutlineBlock, OutlinePage
from .errors import (
    ConversionError,
    MalformedInput,
    BookNotFound,
    AmbiguousBookName,
    ChapterOutOfRange,
    EmptyChapter,
    SourceUnavailable,
    InvalidReference,
)
from .parser import parse_bible, normalize_text
from .resolver import resolve_book, build_alias_table
from .extractor import extract_chapter
from .encoder import encode_verses, encode_page, dump_outline
from .pipeline import convert, convert_document, run, ConversionResult

__all__ = [
    "Verse",
    "Chapter",
    "Book",
    "BibleDocument",
    "OutlineBlock",
    "OutlinePage",
    "ConversionError",
    "MalformedInput",
    "BookNotFound",
    "AmbiguousBookName",
    "ChapterOutOfRange",
    "EmptyChapter",
    "SourceUnavailable",
    "InvalidReference",
    "parse_bible",
    "normalize_text",
    "resolve_book",
    "build_alias_table",
    "extract_chapter",
    "encode_verses",
    "encode_page",
    "dump_outline",
    "convert",
    "convert_document",
    "run",
    "ConversionResult",
]

__version__ = "0.1.0"
