from dataclasses import dataclass
from enum import Enum

FIRST_CHAPTER = 1
LAST_CHAPTER = 32
CHAPTERS = range(FIRST_CHAPTER, LAST_CHAPTER + 1)

CHAPTER_COLUMN = "chapter"


class Category(Enum):
    """
    Grammatical word classes, declared in display order.
    The value is the stable identifier used in URLs and JSON.
    """
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    COORDINATING_CONJUNCTION = "coordinating_conjunction"
    NOUN = "noun"
    PREPOSITION = "preposition"
    PRONOUN = "pronoun"
    SUBORDINATING_CONJUNCTION = "subordinating_conjunction"
    VERB = "verb"

    @property
    def spec(self) -> "CategorySpec":
        return CATEGORY_SPECS[self]

    @property
    def label(self) -> str:
        return CATEGORY_SPECS[self].label


class SearchMode(Enum):
    BY_WORD = "word"
    BY_DEFINITION = "definition"

    @property
    def label(self) -> str:
        return "By Word" if self is SearchMode.BY_WORD else "By Definition"


@dataclass(frozen=True)
class CategorySpec:
    label: str
    table: str
    columns: tuple
    sort_column: str
    search_columns: tuple
    definition_column: str = "definition"


_FORMS_2 = ("firstForm", "secondForm")
_FORMS_3 = ("firstForm", "secondForm", "thirdForm")
_PRINCIPAL_PARTS = (
    "firstPrincipalPart",
    "secondPrincipalPart",
    "thirdPrincipalPart",
    "thirdPrincipalPartAlt",
    "fourthPrincipalPart",
    "fourthPrincipalPartAlt",
)

# Column order here is the raw row layout the formatter receives.
CATEGORY_SPECS = {
    Category.ADJECTIVE: CategorySpec(
        label="Adjectives",
        table="Adjectives",
        columns=_FORMS_3 + ("definition", "otherInformation"),
        sort_column="firstForm",
        search_columns=_FORMS_3,
    ),
    Category.ADVERB: CategorySpec(
        label="Adverbs",
        table="Adverbs",
        columns=("word", "definition", "otherInformation"),
        sort_column="word",
        search_columns=("word",),
    ),
    Category.COORDINATING_CONJUNCTION: CategorySpec(
        label="Coordinating Conjunctions",
        table="CoordinatingConjunctions",
        columns=_FORMS_2 + ("definition", "otherInformation"),
        sort_column="firstForm",
        search_columns=_FORMS_2,
    ),
    Category.NOUN: CategorySpec(
        label="Nouns",
        table="Nouns",
        columns=("nominative", "genitive", "gender", "definition", "otherInformation", "isIStem"),
        sort_column="nominative",
        search_columns=("nominative", "genitive"),
    ),
    Category.PREPOSITION: CategorySpec(
        label="Prepositions",
        table="Prepositions",
        columns=_FORMS_2 + ("governedCase", "definition"),
        sort_column="firstForm",
        search_columns=_FORMS_2,
    ),
    Category.PRONOUN: CategorySpec(
        label="Pronouns",
        table="Pronouns",
        columns=_FORMS_3 + ("definition", "otherInformation"),
        sort_column="firstForm",
        search_columns=_FORMS_3,
    ),
    Category.SUBORDINATING_CONJUNCTION: CategorySpec(
        label="Subordinating Conjunctions",
        table="SubordinatingConjunctions",
        columns=_FORMS_2 + ("definition", "otherInformation"),
        sort_column="firstForm",
        search_columns=_FORMS_2,
    ),
    Category.VERB: CategorySpec(
        label="Verbs",
        table="Verbs",
        columns=_PRINCIPAL_PARTS + ("governance", "definition", "otherInformation"),
        sort_column="firstPrincipalPart",
        search_columns=_PRINCIPAL_PARTS,
    ),
}


def chapter_label(chapter: int) -> str:
    return f"Chapter {chapter}"


def is_valid_chapter(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and FIRST_CHAPTER <= value <= LAST_CHAPTER


def parse_chapter(raw, default=None):
    """
    Coerce a user-supplied chapter (query arg, session value) to an int in range.
    Returns `default` for anything missing, non-numeric or out of range.
    """
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if is_valid_chapter(value) else default
