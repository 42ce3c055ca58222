import atexit
import threading

from flask import Flask

from .config import get_database_locator, get_secret_key
from .lookup import VocabularyLookup

EXTENSION_KEY = "latin_vocab"


class SerializedLookup:
    """
    Wraps a VocabularyLookup so request threads take turns on the single
    store connection.
    """

    def __init__(self, lookup):
        self.lookup = lookup
        self._lock = threading.Lock()

    def entries_for_chapter(self, chapter):
        with self._lock:
            return self.lookup.entries_for_chapter(chapter)

    def entries_up_to_chapter(self, chapter):
        with self._lock:
            return self.lookup.entries_up_to_chapter(chapter)

    def search(self, chapter, term, mode):
        with self._lock:
            return self.lookup.search(chapter, term, mode)

    def close(self):
        with self._lock:
            self.lookup.close()


def create_app(test_config=None) -> Flask:
    app = Flask(__name__)

    # ---- Config ----
    app.config["SECRET_KEY"] = get_secret_key()
    app.config["VOCAB_DATABASE"] = get_database_locator()
    if test_config:
        app.config.update(test_config)

    # ---- Store: opened once, held for the process lifetime ----
    lookup = SerializedLookup(VocabularyLookup.from_locator(app.config["VOCAB_DATABASE"]))
    app.extensions[EXTENSION_KEY] = lookup
    atexit.register(lookup.close)

    # ---- Register route modules ----
    from .routes_vocab import bp_vocab

    app.register_blueprint(bp_vocab)

    return app
