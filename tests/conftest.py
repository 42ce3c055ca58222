"""
Shared fixtures: a small vocabulary database built from the category
registry's column lists, plus lookup/app fixtures opened on top of it.
"""
import pytest
from sqlalchemy import create_engine, text

from latin_vocab.categories import CHAPTER_COLUMN, Category
from latin_vocab.init import create_app
from latin_vocab.lookup import VocabularyLookup

# Rows in registry column order, followed by the chapter.
SAMPLE_ROWS = {
    Category.ADJECTIVE: [
        ("bonus", "bona", "bonum", "good", "", 2),
        ("ācer", "ācris", "ācre", "sharp, keen", "3rd declension", 5),
    ],
    Category.ADVERB: [
        ("nōn", "not", "", 3),
        ("saepe", "often", "", 7),
    ],
    Category.COORDINATING_CONJUNCTION: [
        ("et", "", "and", "", 1),
        ("aut", "", "or", "", 4),
    ],
    Category.NOUN: [
        ("mēnsa", "mēnsae", "f.", "table", "", 0, 1),
        ("puella", "puellae", "f.", "girl", "", 0, 1),
        ("amīcus", "amīcī", "m.", "friend", "", 0, 2),
        ("cīvis", "cīvis", "m./f.", "citizen", "gen. pl. cīvium", 1, 6),
    ],
    Category.PREPOSITION: [
        ("ad", "", "accusative", "to, toward", 1),
        ("in", "", "ablative", "in, on", 3),
    ],
    Category.PRONOUN: [
        ("ille", "illa", "illud", "that", "demonstrative", 8),
    ],
    Category.SUBORDINATING_CONJUNCTION: [
        ("cum", "", "when, since", "", 9),
    ],
    Category.VERB: [
        ("amō", "amāre", "amāvī", "", "amātum", "", "", "love", "", 1),
        ("dūcō", "dūcere", "dūxī", "", "ductum", "", "", "lead", "", 4),
        ("crēdō", "crēdere", "crēdidī", "", "crēditum", "", "dative", "believe, trust", "", 5),
        ("pōnō", "pōnere", "posuī", "posīvī", "positum", "", "", "put, place", "", 5),
    ],
}


def build_database(path, rows_by_category=SAMPLE_ROWS):
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as conn:
        for category in Category:
            spec = category.spec
            columns = spec.columns + (CHAPTER_COLUMN,)
            column_defs = ", ".join(
                f"{c} INTEGER" if c in (CHAPTER_COLUMN, "isIStem") else f"{c} TEXT" for c in columns
            )
            conn.execute(text(f"CREATE TABLE {spec.table} (id INTEGER PRIMARY KEY, {column_defs})"))
            placeholders = ", ".join(f":{c}" for c in columns)
            for row in rows_by_category.get(category, []):
                conn.execute(
                    text(f"INSERT INTO {spec.table} ({', '.join(columns)}) VALUES ({placeholders})"),
                    dict(zip(columns, row)),
                )
    engine.dispose()
    return path


@pytest.fixture
def database_path(tmp_path):
    return build_database(tmp_path / "latin_vocabulary.sqlite3")


@pytest.fixture
def lookup(database_path):
    service = VocabularyLookup.from_locator(database_path)
    yield service
    service.close()


@pytest.fixture
def app(database_path):
    app = create_app({"TESTING": True, "VOCAB_DATABASE": str(database_path), "SECRET_KEY": "test"})
    yield app
    app.extensions["latin_vocab"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def lookup_with_rows(tmp_path):
    """Open a lookup over the sample rows plus `extra` rows per category."""
    opened = []

    def _open(extra):
        rows = {c: list(SAMPLE_ROWS.get(c, [])) + list(extra.get(c, [])) for c in Category}
        path = build_database(tmp_path / f"vocab_{len(opened)}.sqlite3", rows)
        service = VocabularyLookup.from_locator(path)
        opened.append(service)
        return service

    yield _open
    for service in opened:
        service.close()
