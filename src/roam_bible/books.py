"""Standard English abbreviations and alternate names for the books of the Bible."""

import re


# =============================================================================
# Constants
# =============================================================================

BOOK_ALIASES = {
    # Old Testament
    "Genesis": ["Gen", "Ge", "Gn"],
    "Exodus": ["Exod", "Exo", "Ex"],
    "Leviticus": ["Lev", "Le", "Lv"],
    "Numbers": ["Num", "Nu", "Nm", "Nb"],
    "Deuteronomy": ["Deut", "Deu", "Dt"],
    "Joshua": ["Josh", "Jos", "Jsh"],
    "Judges": ["Judg", "Jdg", "Jg", "Jdgs"],
    "Ruth": ["Rth", "Ru"],
    "1 Samuel": ["1 Sam", "1 Sa", "1 Sm"],
    "2 Samuel": ["2 Sam", "2 Sa", "2 Sm"],
    "1 Kings": ["1 Kgs", "1 Ki", "1 Kin"],
    "2 Kings": ["2 Kgs", "2 Ki", "2 Kin"],
    "1 Chronicles": ["1 Chr", "1 Chron", "1 Ch"],
    "2 Chronicles": ["2 Chr", "2 Chron", "2 Ch"],
    "Ezra": ["Ezr", "Ez"],
    "Nehemiah": ["Neh", "Ne"],
    "Esther": ["Esth", "Est", "Es"],
    "Job": ["Jb"],
    "Psalms": ["Psalm", "Ps", "Psa", "Pss", "Psm"],
    "Proverbs": ["Prov", "Pro", "Prv", "Pr"],
    "Ecclesiastes": ["Eccl", "Eccles", "Ecc", "Qoh", "Qoheleth"],
    "Song of Solomon": ["Song", "Song of Songs", "SOS", "So", "Canticles", "Cant"],
    "Song of Songs": ["Song", "Song of Solomon", "SOS", "So", "Canticles", "Cant"],
    "Isaiah": ["Isa", "Is"],
    "Jeremiah": ["Jer", "Je", "Jr"],
    "Lamentations": ["Lam", "La"],
    "Ezekiel": ["Ezek", "Eze", "Ezk"],
    "Daniel": ["Dan", "Da", "Dn"],
    "Hosea": ["Hos", "Ho"],
    "Joel": ["Jl"],
    "Amos": ["Am"],
    "Obadiah": ["Obad", "Ob"],
    "Jonah": ["Jnh", "Jon"],
    "Micah": ["Mic", "Mc"],
    "Nahum": ["Nah", "Na"],
    "Habakkuk": ["Hab", "Hb"],
    "Zephaniah": ["Zeph", "Zep", "Zp"],
    "Haggai": ["Hag", "Hg"],
    "Zechariah": ["Zech", "Zec", "Zc"],
    "Malachi": ["Mal", "Ml"],
    # New Testament
    "Matthew": ["Matt", "Mat", "Mt"],
    "Mark": ["Mrk", "Mar", "Mk", "Mr"],
    "Luke": ["Luk", "Lk"],
    "John": ["Joh", "Jhn", "Jn"],
    "Acts": ["Act", "Ac", "Acts of the Apostles"],
    "Romans": ["Rom", "Ro", "Rm"],
    "1 Corinthians": ["1 Cor", "1 Co"],
    "2 Corinthians": ["2 Cor", "2 Co"],
    "Galatians": ["Gal", "Ga"],
    "Ephesians": ["Eph", "Ephes"],
    "Philippians": ["Phil", "Php", "Pp"],
    "Colossians": ["Col", "Co"],
    "1 Thessalonians": ["1 Thess", "1 Thes", "1 Th"],
    "2 Thessalonians": ["2 Thess", "2 Thes", "2 Th"],
    "1 Timothy": ["1 Tim", "1 Ti"],
    "2 Timothy": ["2 Tim", "2 Ti"],
    "Titus": ["Tit", "Ti"],
    "Philemon": ["Philem", "Phlm", "Phm", "Pm"],
    "Hebrews": ["Heb"],
    "James": ["Jas", "Jm"],
    "1 Peter": ["1 Pet", "1 Pe", "1 Pt"],
    "2 Peter": ["2 Pet", "2 Pe", "2 Pt"],
    "1 John": ["1 Jn", "1 Jhn", "1 Joh"],
    "2 John": ["2 Jn", "2 Jhn", "2 Joh"],
    "3 John": ["3 Jn", "3 Jhn", "3 Joh"],
    "Jude": ["Jud", "Jd"],
    "Revelation": ["Rev", "Re", "Revelations", "Apocalypse", "Revelation of John"],
}

NUMBER_FORMS = {
    "1": ["I", "First", "1st"],
    "2": ["II", "Second", "2nd"],
    "3": ["III", "Third", "3rd"],
}

NUMBERED_RE = re.compile(r"^([123]) (.+)$")


# =============================================================================
# Lookups
# =============================================================================

def fold_name(name: str) -> str:
    """Normalize a book name for comparison: trimmed, single-spaced, casefolded."""
    return " ".join(name.split()).casefold()


def _numbered_variants(name: str) -> list[str]:
    """Roman numeral, ordinal, and space-less forms of a numbered book name."""
    match = NUMBERED_RE.match(name)
    if not match:
        return []

    number, rest = match.groups()
    variants = [f"{form} {rest}" for form in NUMBER_FORMS[number]]
    variants.append(f"{number}{rest}")
    return variants


def aliases_for(canonical: str) -> frozenset[str]:
    """
    Return the alternate names accepted for a canonical book name.

    Args:
        canonical: Book name as spelled in the source file (e.g., '1 John')

    Returns:
        Alternate names, excluding the canonical name itself. Empty if the
        book is not in the table.
    """
    key = fold_name(canonical)
    names: list[str] = []

    for book, abbreviations in BOOK_ALIASES.items():
        if fold_name(book) == key:
            names.extend(abbreviations)
            break

    for name in [canonical] + list(names):
        names.extend(_numbered_variants(" ".join(name.split())))

    return frozenset(n for n in names if fold_name(n) != key)
