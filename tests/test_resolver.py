import pytest

from roam_bible import AmbiguousBookName, BookNotFound, build_alias_table, parse_bible, resolve_book
from roam_bible.books import aliases_for, fold_name


@pytest.fixture
def nt_bible(bible_factory):
    return parse_bible(bible_factory({
        "Job": [["Job verse."]],
        "John": [["John verse."]],
        "Philippians": [["Phil verse."]],
        "Philemon": [["Phlm verse."]],
        "1 John": [["1 John verse."]],
        "Joshua": [["Joshua verse."]],
    }))


@pytest.mark.parametrize("query", ["joshua", "Joshua", "JOSHUA", "  Joshua  "])
def test_case_and_whitespace_insensitive(nt_bible, query):
    assert resolve_book(nt_bible, query).name == "Joshua"


def test_exact_name_beats_prefix(nt_bible):
    assert resolve_book(nt_bible, "job").name == "Job"
    assert resolve_book(nt_bible, "john").name == "John"


def test_alternate_names(nt_bible):
    assert resolve_book(nt_bible, "Jn").name == "John"
    assert resolve_book(nt_bible, "1 Jn").name == "1 John"
    assert resolve_book(nt_bible, "1jn").name == "1 John"
    assert resolve_book(nt_bible, "First John").name == "1 John"
    assert resolve_book(nt_bible, "I John").name == "1 John"


def test_alternate_name_beats_ambiguous_prefix(nt_bible):
    # "Phil" prefixes both Philippians and Philemon but is Philippians' abbreviation
    assert resolve_book(nt_bible, "Phil").name == "Philippians"
    assert resolve_book(nt_bible, "phlm").name == "Philemon"


def test_unique_prefix(nt_bible):
    assert resolve_book(nt_bible, "Josh").name == "Joshua"
    assert resolve_book(nt_bible, "philip").name == "Philippians"


def test_ambiguous_prefix_names_candidates(bible_factory):
    bible = parse_bible(bible_factory({"Job": [["a"]], "John": [["b"]]}))
    with pytest.raises(AmbiguousBookName) as excinfo:
        resolve_book(bible, "Jo")
    assert excinfo.value.candidates == ["Job", "John"]
    assert "Job, John" in str(excinfo.value)


def test_not_found_lists_known_books(nt_bible):
    with pytest.raises(BookNotFound) as excinfo:
        resolve_book(nt_bible, "Judges")
    assert excinfo.value.name == "Judges"
    assert excinfo.value.known == nt_bible.book_names
    assert excinfo.value.hint().startswith("Valid books: Job, John")


def test_blank_name_is_not_found(nt_bible):
    with pytest.raises(BookNotFound):
        resolve_book(nt_bible, "   ")


def test_resolver_returns_the_parsed_book(nt_bible):
    assert resolve_book(nt_bible, "Jn") is nt_bible.books[1]


def test_alias_table_skips_canonical_collisions(bible_factory):
    # "Song" is an alternate for "Song of Solomon" but here it is a book of its own
    bible = parse_bible(bible_factory({"Song of Solomon": [["a"]], "Song": [["b"]]}))
    assert "song" not in build_alias_table(bible)
    assert resolve_book(bible, "Song").name == "Song"
    assert resolve_book(bible, "Canticles").name == "Song of Solomon"


def test_aliases_for():
    assert "Gen" in aliases_for("Genesis")
    assert "II Kings" in aliases_for("2 Kings")
    assert "2nd Kgs" in aliases_for("2 Kings")
    assert aliases_for("Tobit") == frozenset()


def test_fold_name():
    assert fold_name("  1   JOHN ") == "1 john"


def test_shared_alternate_name_falls_through_to_prefix(bible_factory):
    bible = parse_bible(bible_factory({"Song of Solomon": [["a"]], "Song of Songs": [["b"]]}))
    assert "cant" not in build_alias_table(bible)
    with pytest.raises(BookNotFound):
        resolve_book(bible, "Cant")
    with pytest.raises(AmbiguousBookName) as excinfo:
        resolve_book(bible, "Song")
    assert excinfo.value.candidates == ["Song of Solomon", "Song of Songs"]
