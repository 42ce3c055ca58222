"""
Development server entry point.

The vocabulary database is not bundled with the package. Point
LATIN_VOCAB_DATABASE at the SQLite file (or a SQLAlchemy URL) before running:

    LATIN_VOCAB_DATABASE=/path/to/latin_vocabulary.sqlite3 python -m latin_vocab.app

Without it the default latin_vocab/data/latin_vocabulary.sqlite3 is tried,
and startup fails with StoreConnectionError if that file is missing.
"""
from .config import configure_logging
from .init import create_app


def main():
    configure_logging()
    app = create_app()
    app.run(debug=False)


# If you run directly: python -m latin_vocab.app
if __name__ == "__main__":
    main()
