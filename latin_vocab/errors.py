from .categories import FIRST_CHAPTER, LAST_CHAPTER


class VocabularyError(Exception):
    """Base class for errors raised by the lookup engine."""


class StoreConnectionError(VocabularyError):
    """The vocabulary store could not be opened."""

    def __init__(self, locator, reason=None):
        self.locator = locator
        message = f"Unable to open vocabulary store at {locator!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class QueryError(VocabularyError):
    """
    A selection failed inside the store.

    The schema ships with the application, so this points at a defect in the
    category metadata or the query builder rather than at user input.
    """

    def __init__(self, category, sql, reason=None):
        self.category = category
        self.sql = sql
        message = f"Query for {category.label} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidChapterError(VocabularyError, ValueError):
    def __init__(self, chapter):
        self.chapter = chapter
        super().__init__(
            f"Chapter must be an integer between {FIRST_CHAPTER} and {LAST_CHAPTER}, got {chapter!r}"
        )
