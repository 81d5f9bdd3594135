"""Shared OpenSong fixtures."""

import pytest

from roam_bible import parse_bible


SAMPLE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<bible>
  <b n="Joshua">
    <c n="1">
      <v n="1">Now after the death of Moses the servant of the LORD it came to pass...</v>
    </c>
    <c n="2">
      <v n="1">And Joshua the son of Nun sent out of Shittim two men...</v>
    </c>
  </b>
  <b n="John">
    <c n="1">
      <v n="1">In the beginning was the Word...</v>
      <v n="2">The same was in the beginning with God.</v>
    </c>
  </b>
</bible>
"""


def make_bible(books: dict) -> bytes:
    """Build OpenSong XML from {book: [[verse text, ...], ...]}; verses are numbered from 1."""
    parts = ['<?xml version="1.0" encoding="UTF-8"?>', "<bible>"]
    for name, chapters in books.items():
        parts.append(f'<b n="{name}">')
        for c, verses in enumerate(chapters, start=1):
            parts.append(f'<c n="{c}">')
            for v, text in enumerate(verses, start=1):
                parts.append(f'<v n="{v}">{text}</v>')
            parts.append("</c>")
        parts.append("</b>")
    parts.append("</bible>")
    return "\n".join(parts).encode("utf-8")


@pytest.fixture
def sample_xml() -> bytes:
    return SAMPLE_XML


@pytest.fixture
def sample_bible():
    return parse_bible(SAMPLE_XML)


@pytest.fixture
def joshua_xml() -> bytes:
    """Two books; Joshua has 24 chapters and chapter 11 holds two verses."""
    chapters = [[f"Joshua chapter {c} verse one."] for c in range(1, 25)]
    chapters[10] = ["And it came to pass...", "And to the kings..."]
    return make_bible({
        "Joshua": chapters,
        "Ruth": [["Now it came to pass in the days when the judges ruled..."]],
    })


@pytest.fixture
def bible_factory():
    return make_bible
