import logging
from contextlib import closing
from dataclasses import dataclass

from .categories import Category, SearchMode
from .formatting import format_entry
from .query_helpers import (
    build_chapter_selection,
    build_cumulative_selection,
    build_search_selection,
    require_chapter,
)
from .store import StoreConnection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupResult:
    """
    Grouped lookup output. `entries[i]` holds the entries for `categories[i]`;
    categories without matches are absent from both.
    """
    categories: tuple = ()
    entries: tuple = ()

    def __iter__(self):
        return iter(zip(self.categories, self.entries))

    def __len__(self):
        return len(self.categories)

    @property
    def is_empty(self) -> bool:
        return not self.categories

    def entries_for(self, category):
        for cat, group in self:
            if cat is category:
                return group
        return ()

    def to_dict(self) -> dict:
        return {
            "categories": [c.value for c in self.categories],
            "groups": [
                {
                    "category": c.value,
                    "label": c.label,
                    "entries": [e.to_dict() for e in group],
                }
                for c, group in self
            ],
        }


class VocabularyLookup:
    """
    Runs one query per category against the store and formats the rows.

    Owns its StoreConnection: the connection is opened (or handed in) once
    and released by `close()`.
    """

    def __init__(self, store):
        self.store = store

    @classmethod
    def from_locator(cls, locator):
        return cls(StoreConnection.open(locator))

    def close(self):
        self.store.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _collect(self, build):
        categories, entries = [], []
        for category in Category:
            selection = build(category)
            with closing(self.store.execute(selection)) as rows:
                group = tuple(format_entry(row, category) for row in rows)
            if group:
                categories.append(category)
                entries.append(group)
        return LookupResult(categories=tuple(categories), entries=tuple(entries))

    def entries_for_chapter(self, chapter) -> LookupResult:
        require_chapter(chapter)
        return self._collect(lambda category: build_chapter_selection(chapter, category))

    def entries_up_to_chapter(self, chapter) -> LookupResult:
        require_chapter(chapter)
        return self._collect(lambda category: build_cumulative_selection(chapter, category))

    def search(self, chapter, term, mode=SearchMode.BY_WORD) -> LookupResult:
        """
        Entries introduced up to `chapter` whose words start with `term`
        (vowel length ignored) or whose definition contains it.

        An empty term is not special-cased: a word search then matches
        everything in scope. Callers wanting "no filter" should use
        entries_up_to_chapter instead.
        """
        require_chapter(chapter)
        mode = SearchMode(mode)
        logger.debug("Searching up to chapter %d for %r (%s)", chapter, term, mode.value)
        return self._collect(lambda category: build_search_selection(chapter, category, term, mode))
