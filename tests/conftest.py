from contextlib import contextmanager

import pytest
from sqlalchemy import create_engine, text

from sqlsanitize.core.registry import HandlerRegistry
from sqlsanitize.models.config import DatabaseConfig
from sqlsanitize.models.options import OperationOptions
from sqlsanitize.utils.db_utils import SanitizeDatabase
from sqlsanitize.utils.display_utils import AutoConfirmer

SCHEMA = [
    "CREATE TABLE users_field_data (uid INTEGER PRIMARY KEY, name TEXT, mail TEXT, pass TEXT)",
    "CREATE TABLE sessions (sid TEXT PRIMARY KEY, uid INTEGER)",
    "CREATE TABLE user__field_bio (entity_id INTEGER, field_bio_value TEXT, field_bio_summary TEXT)",
    "CREATE TABLE user__field_age (entity_id INTEGER, field_age_value INTEGER)",
    "CREATE TABLE user__field_phone (entity_id INTEGER, field_phone_value TEXT)",
]

ROWS = [
    "INSERT INTO users_field_data VALUES (0, '', '', '')",
    "INSERT INTO users_field_data VALUES (1, 'Jane Doe', 'jane@example.com', 'secret1')",
    "INSERT INTO users_field_data VALUES (2, 'john', 'john@example.org', 'secret2')",
    "INSERT INTO sessions VALUES ('abc', 1)",
    "INSERT INTO sessions VALUES ('def', 2)",
    "INSERT INTO user__field_bio VALUES (1, 'Born in Springfield', 'Springfield')",
    "INSERT INTO user__field_age VALUES (1, 42)",
    "INSERT INTO user__field_phone VALUES (1, '555-0100')",
]


@pytest.fixture
def registry():
    """Create an empty handler registry."""
    return HandlerRegistry()


@pytest.fixture
def options():
    """Create default operation options."""
    return OperationOptions()


@pytest.fixture
def yes():
    """Confirmer that always accepts, without echoing."""
    return AutoConfirmer(True, echo=None)


@pytest.fixture
def no():
    """Confirmer that always declines, without echoing."""
    return AutoConfirmer(False, echo=None)


@pytest.fixture
def db_url(tmp_path):
    """Create a populated SQLite database and return its URL."""
    url = f"sqlite:///{tmp_path / 'site.db'}"
    engine = create_engine(url)
    with engine.begin() as conn:
        for statement in SCHEMA + ROWS:
            conn.execute(text(statement))
    engine.dispose()
    return url


@pytest.fixture
def query(db_url):
    """Run a SELECT against the test database and return the rows."""

    def run(sql):
        engine = create_engine(db_url)
        try:
            with engine.connect() as conn:
                return [tuple(row) for row in conn.execute(text(sql))]
        finally:
            engine.dispose()

    return run


@pytest.fixture
def database_factory(db_url):
    """Database factory bound to the test database."""

    @contextmanager
    def factory(options):
        database = SanitizeDatabase(DatabaseConfig(url=db_url))
        try:
            yield database
        finally:
            database.dispose()

    return factory
