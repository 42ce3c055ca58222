import pytest

from latin_vocab.categories import Category, SearchMode
from latin_vocab.errors import InvalidChapterError
from latin_vocab.query_helpers import (
    QueryScope,
    build_chapter_selection,
    build_cumulative_selection,
    build_search_selection,
    build_selection,
)


class TestChapterScopes:

    def test_exact_chapter(self):
        sel = build_chapter_selection(3, Category.ADVERB)
        assert sel.sql == (
            "SELECT word, definition, otherInformation FROM Adverbs "
            "WHERE chapter = :chapter ORDER BY word ASC"
        )
        assert sel.params == {"chapter": 3}
        assert sel.category is Category.ADVERB

    def test_cumulative(self):
        sel = build_cumulative_selection(10, Category.NOUN)
        assert "WHERE chapter <= :chapter" in sel.sql
        assert sel.sql.endswith("ORDER BY nominative ASC")
        assert sel.params == {"chapter": 10}

    def test_selects_registry_columns_not_star(self):
        sel = build_cumulative_selection(1, Category.VERB)
        assert "*" not in sel.sql
        assert sel.sql.startswith(
            "SELECT firstPrincipalPart, secondPrincipalPart, thirdPrincipalPart, "
            "thirdPrincipalPartAlt, fourthPrincipalPart, fourthPrincipalPartAlt, "
            "governance, definition, otherInformation FROM Verbs"
        )

    @pytest.mark.parametrize("chapter", [0, 33, "5", None])
    def test_rejects_out_of_range_chapter(self, chapter):
        with pytest.raises(InvalidChapterError):
            build_selection(chapter, Category.NOUN, QueryScope.EXACT)


class TestSearchScope:

    def test_word_search_covers_every_word_column(self):
        sel = build_search_selection(5, Category.ADJECTIVE, "bon", SearchMode.BY_WORD)
        assert (
            "WHERE chapter <= :chapter AND (lower(firstForm) GLOB :word_pattern "
            "OR lower(secondForm) GLOB :word_pattern OR lower(thirdForm) GLOB :word_pattern)"
        ) in sel.sql
        assert sel.params == {"chapter": 5, "word_pattern": "b[oō]n*"}

    def test_definition_search(self):
        sel = build_search_selection(5, Category.VERB, "love", SearchMode.BY_DEFINITION)
        assert "definition LIKE :definition_pattern ESCAPE '\\'" in sel.sql
        assert "GLOB" not in sel.sql
        assert sel.params == {"chapter": 5, "definition_pattern": "%love%"}

    def test_user_text_is_never_in_sql(self):
        term = "x' OR 1=1 --"
        for mode in SearchMode:
            sel = build_search_selection(32, Category.NOUN, term, mode)
            assert term not in sel.sql
            assert "1=1" not in sel.sql

    def test_search_is_ordered_by_sort_column(self):
        sel = build_search_selection(4, Category.PREPOSITION, "a")
        assert sel.sql.endswith("ORDER BY firstForm ASC")

    def test_unknown_search_mode(self):
        with pytest.raises(ValueError):
            build_selection(4, Category.NOUN, QueryScope.SEARCH, term="a", search_mode="sideways")


def test_statement_is_a_text_clause():
    sel = build_chapter_selection(1, Category.NOUN)
    assert str(sel.statement) == sel.sql
