"""
Search patterns for the vocabulary tables.

Headwords are stored with macrons (mēnsa, rēx), but users type plain ASCII.
Word search therefore expands every short vowel to a character class covering
both spellings and matches by prefix with SQLite GLOB. Definition search is a
case-insensitive substring LIKE with no vowel expansion.
"""

VOWEL_CLASSES = {
    "a": "[aā]",
    "e": "[eē]",
    "i": "[iī]",
    "o": "[oō]",
    "u": "[uū]",
}

# GLOB metacharacters typed by the user are matched literally via a one-char class.
_GLOB_LITERALS = {
    "*": "[*]",
    "?": "[?]",
    "[": "[[]",
}

LIKE_ESCAPE = "\\"


def word_search_pattern(term: str) -> str:
    """
    Build a GLOB prefix pattern for `term`, e.g. "mensa" -> "m[eē]ns[aā]*".

    The term is lowercased first and matched against lowercased columns, so
    "Mensa" finds mēnsa and "roma" finds Rōma. Each input character is mapped
    exactly once, so the brackets and macron vowels introduced for one vowel
    are never rewritten by another.
    An empty term gives "*", which matches every row.
    """
    out = []
    for ch in (term or "").lower():
        if ch in VOWEL_CLASSES:
            out.append(VOWEL_CLASSES[ch])
        elif ch in _GLOB_LITERALS:
            out.append(_GLOB_LITERALS[ch])
        else:
            out.append(ch)
    out.append("*")
    return "".join(out)


def definition_search_pattern(term: str) -> str:
    """Substring LIKE pattern: "%term%", with LIKE wildcards in `term` escaped."""
    escaped = (
        (term or "")
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
