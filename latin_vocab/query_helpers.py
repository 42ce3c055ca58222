from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy import text

from .categories import CHAPTER_COLUMN, Category, SearchMode, is_valid_chapter
from .errors import InvalidChapterError
from .search import LIKE_ESCAPE, definition_search_pattern, word_search_pattern


class QueryScope(Enum):
    EXACT = "exact"            # chapter = :chapter
    CUMULATIVE = "cumulative"  # chapter <= :chapter
    SEARCH = "search"          # cumulative + word/definition filter


@dataclass(frozen=True)
class Selection:
    """
    A built, not yet executed, query against one category table.
    `sql` only ever contains registry identifiers; user input lives in `params`.
    """
    category: Category
    sql: str
    params: dict = field(default_factory=dict)

    @property
    def statement(self):
        return text(self.sql)


def require_chapter(chapter) -> int:
    if not is_valid_chapter(chapter):
        raise InvalidChapterError(chapter)
    return chapter


def _add_search_filter(conditions, params, category, term, mode):
    """
    Word mode: any of the category's word columns GLOB the vowel-expanded prefix.
    Definition mode: the definition column LIKE the plain substring pattern.
    """
    spec = category.spec
    if mode is SearchMode.BY_WORD:
        params["word_pattern"] = word_search_pattern(term)
        ors = [f"lower({col}) GLOB :word_pattern" for col in spec.search_columns]
        conditions.append("(" + " OR ".join(ors) + ")")
    elif mode is SearchMode.BY_DEFINITION:
        params["definition_pattern"] = definition_search_pattern(term)
        conditions.append(f"{spec.definition_column} LIKE :definition_pattern ESCAPE '{LIKE_ESCAPE}'")
    else:
        raise ValueError(f"Unknown search mode: {mode!r}")


def build_selection(chapter, category, scope=QueryScope.EXACT, *, term="", search_mode=SearchMode.BY_WORD):
    """
    Build the selection for one category table.

    Columns are listed explicitly in registry order so the row layout seen by
    the formatter never depends on the physical table definition.
    Results are ordered by the category's sort column using stored text order.
    """
    require_chapter(chapter)
    spec = category.spec

    conditions, params = [], {"chapter": chapter}

    if scope is QueryScope.EXACT:
        conditions.append(f"{CHAPTER_COLUMN} = :chapter")
    elif scope in (QueryScope.CUMULATIVE, QueryScope.SEARCH):
        conditions.append(f"{CHAPTER_COLUMN} <= :chapter")
    else:
        raise ValueError(f"Unknown query scope: {scope!r}")

    if scope is QueryScope.SEARCH:
        _add_search_filter(conditions, params, category, term, search_mode)

    sql = (
        f"SELECT {', '.join(spec.columns)} "
        f"FROM {spec.table} "
        f"WHERE {' AND '.join(conditions)} "
        f"ORDER BY {spec.sort_column} ASC"
    )
    return Selection(category=category, sql=sql, params=params)


def build_chapter_selection(chapter, category):
    return build_selection(chapter, category, QueryScope.EXACT)


def build_cumulative_selection(chapter, category):
    return build_selection(chapter, category, QueryScope.CUMULATIVE)


def build_search_selection(chapter, category, term, mode=SearchMode.BY_WORD):
    return build_selection(chapter, category, QueryScope.SEARCH, term=term, search_mode=mode)
