import logging
from pathlib import Path
from urllib.parse import quote

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from .errors import QueryError, StoreConnectionError

logger = logging.getLogger(__name__)


def normalize_store_url(locator):
    """
    Turn a store locator into a SQLAlchemy URL.

    Full URLs ("sqlite:///...", "postgresql://...") pass through untouched.
    Anything else is a path to the packaged SQLite file, opened read-only so a
    wrong path fails instead of creating an empty database.
    """
    if not locator:
        raise StoreConnectionError(locator, "store locator is empty or missing")

    raw = str(locator)
    if "://" in raw:
        try:
            return make_url(raw)
        except ArgumentError as exc:
            raise StoreConnectionError(locator, str(exc)) from exc

    path = Path(raw).expanduser().resolve()
    return URL.create(
        "sqlite",
        database="file:" + quote(path.as_posix()),
        query={"mode": "ro", "uri": "true"},
    )


class StoreConnection:
    """
    One long-lived connection to the vocabulary store.

    Not safe for concurrent use; callers sharing an instance across threads
    must serialize access themselves.
    """

    def __init__(self, locator):
        self.locator = locator
        url = normalize_store_url(locator)
        connect_args = {}
        if url.get_backend_name() == "sqlite":
            # Held for the process lifetime; the caller serializes access.
            connect_args["check_same_thread"] = False
        try:
            self._engine = create_engine(url, connect_args=connect_args)
            self._connection = self._engine.connect()
        except SQLAlchemyError as exc:
            raise StoreConnectionError(locator, str(exc)) from exc
        logger.info("Opened vocabulary store %s", url.render_as_string(hide_password=True))

    @classmethod
    def open(cls, locator):
        return cls(locator)

    @property
    def closed(self) -> bool:
        return self._connection is None

    def execute(self, selection):
        """
        Run `selection` and return a lazy, one-shot iterator of row tuples.
        Failures, whether at execution or while fetching, surface as QueryError.
        """
        if self.closed:
            raise QueryError(selection.category, selection.sql, "store connection is closed")
        logger.debug("%s: %s %s", selection.category.label, selection.sql, selection.params)
        try:
            result = self._connection.execute(selection.statement, selection.params)
        except SQLAlchemyError as exc:
            self._connection.rollback()
            raise QueryError(selection.category, selection.sql, str(exc)) from exc
        return self._iter_rows(selection, result)

    def _iter_rows(self, selection, result):
        try:
            for row in result:
                yield tuple(row)
        except SQLAlchemyError as exc:
            raise QueryError(selection.category, selection.sql, str(exc)) from exc
        finally:
            result.close()
            # End the implicit read transaction.
            if self._connection is not None:
                self._connection.rollback()

    def close(self):
        if self._connection is None:
            return
        self._connection.close()
        self._engine.dispose()
        self._connection = None
        logger.info("Closed vocabulary store %s", self.locator)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
