"""
Row -> display entry transformation, one formatter per category.

Every formatter receives the raw row in the column order declared by the
category registry and returns a DictionaryEntry. Formatters are pure.
"""
from dataclasses import dataclass

from .categories import Category


@dataclass(frozen=True)
class DictionaryEntry:
    words: str
    definition: str

    def to_dict(self) -> dict:
        return {"words": self.words, "definition": self.definition}


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "y")
    return bool(value)


def join_forms(forms) -> str:
    """Comma-and-space join of the non-empty forms, in order."""
    return ", ".join(f for f in (_text(x) for x in forms) if f)


def with_other_information(definition, other_information) -> str:
    definition = _text(definition)
    info = _text(other_information)
    return f"{definition} ({info})" if info else definition


def _with_governance(words, governed) -> str:
    governed = _text(governed)
    if words and governed:
        return f"{words} (+ {governed})"
    return words


def _principal_part(part, alternate) -> str:
    part, alternate = _text(part), _text(alternate)
    if part and alternate:
        return f"{part} or {alternate}"
    return part or alternate


# ----------------------------
# Per-category formatters
# ----------------------------

def format_adjective(row):
    first, second, third, definition, info = row
    return DictionaryEntry(join_forms((first, second, third)), with_other_information(definition, info))


def format_adverb(row):
    word, definition, info = row
    return DictionaryEntry(_text(word), with_other_information(definition, info))


def format_two_form(row):
    """Coordinating and subordinating conjunctions share this layout."""
    first, second, definition, info = row
    return DictionaryEntry(join_forms((first, second)), with_other_information(definition, info))


def format_noun(row):
    nominative, genitive, gender, definition, info, is_i_stem = row
    words = join_forms((nominative, genitive))
    if words and _flag(is_i_stem):
        words = "*" + words
    gendered = " ".join(p for p in (_text(gender), _text(definition)) if p)
    return DictionaryEntry(words, with_other_information(gendered, info))


def format_preposition(row):
    first, second, governed_case, definition = row
    words = _with_governance(join_forms((first, second)), governed_case)
    return DictionaryEntry(words, _text(definition))


def format_pronoun(row):
    first, second, third, definition, info = row
    return DictionaryEntry(join_forms((first, second, third)), with_other_information(definition, info))


def format_verb(row):
    (first, second, third, third_alt, fourth, fourth_alt,
     governance, definition, info) = row
    words = join_forms((
        first,
        second,
        _principal_part(third, third_alt),
        _principal_part(fourth, fourth_alt),
    ))
    return DictionaryEntry(_with_governance(words, governance), with_other_information(definition, info))


FORMATTERS = {
    Category.ADJECTIVE: format_adjective,
    Category.ADVERB: format_adverb,
    Category.COORDINATING_CONJUNCTION: format_two_form,
    Category.NOUN: format_noun,
    Category.PREPOSITION: format_preposition,
    Category.PRONOUN: format_pronoun,
    Category.SUBORDINATING_CONJUNCTION: format_two_form,
    Category.VERB: format_verb,
}


def format_entry(row, category):
    expected = len(category.spec.columns)
    if len(row) != expected:
        raise ValueError(f"{category.label} rows have {expected} fields, got {len(row)}")
    entry = FORMATTERS[category](tuple(row))
    if not entry.words:
        raise ValueError(f"{category.label} row has no headword forms: {tuple(row)!r}")
    return entry
