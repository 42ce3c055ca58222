from .categories import CHAPTERS, Category, SearchMode, chapter_label
from .errors import InvalidChapterError, QueryError, StoreConnectionError, VocabularyError
from .formatting import DictionaryEntry, format_entry
from .lookup import LookupResult, VocabularyLookup
from .store import StoreConnection

__all__ = [
    "CHAPTERS",
    "Category",
    "DictionaryEntry",
    "InvalidChapterError",
    "LookupResult",
    "QueryError",
    "SearchMode",
    "StoreConnection",
    "StoreConnectionError",
    "VocabularyError",
    "VocabularyLookup",
    "chapter_label",
    "format_entry",
]
