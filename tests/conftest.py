"""Shared pytest configuration and fixtures for db-bootstrap tests."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from db_bootstrap.resource_loader import ResourceLoader

DEFAULT_RESOURCES = {
    "application.properties": (
        "jdbc.url=sqlite::memory:\n"
        "jdbc.user=sa\n"
        "jdbc.password=s3cret\n"
    ),
    "logging.conf": (
        "[loggers]\nkeys=root\n\n"
        "[handlers]\nkeys=console\n\n"
        "[formatters]\nkeys=plain\n\n"
        "[logger_root]\nlevel=INFO\nhandlers=console\n\n"
        "[handler_console]\nclass=StreamHandler\nlevel=INFO\nformatter=plain\nargs=(sys.stderr,)\n\n"
        "[formatter_plain]\nformat=%(levelname)s %(name)s %(message)s\n"
    ),
    "sql/queries.properties": (
        "Person.selectAll.statement=SELECT id, name FROM Person ORDER BY id\n"
        "Person.selectAll.strategy=INT,STRING\n"
        "Person.selectAll.format=%d %s%n\n"
    ),
    "sql/init.sql": "CREATE TABLE Person(id INT, name VARCHAR(64))\n",
    "sql/load.sql": "INSERT INTO Person VALUES (1,'Ada');INSERT INTO Person VALUES (2,'Lin');\n",
}


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def write_resources(temp_dir):
    """Return a helper that writes resource files below temp_dir."""

    def _write(files=None, skip=()):
        contents = dict(DEFAULT_RESOURCES)
        contents.update(files or {})
        for relative_path, text in contents.items():
            if relative_path in skip:
                continue
            target = temp_dir.joinpath(*relative_path.split("/"))
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        return temp_dir

    return _write


@pytest.fixture
def resources_dir(write_resources):
    """A resource directory holding the default Person fixtures."""
    return write_resources()


@pytest.fixture
def loader(resources_dir):
    """ResourceLoader over the default Person fixtures."""
    return ResourceLoader(resources_dir)


@pytest.fixture
def make_cursor():
    """Build a mock DB-API cursor that yields the given rows."""

    def _make(rows, columns=None):
        if columns is None:
            width = len(rows[0]) if rows else 0
            columns = [f"col{i}" for i in range(1, width + 1)]
        cursor = MagicMock()
        cursor.description = [(name, None, None, None, None, None, None) for name in columns]
        cursor.fetchone.side_effect = list(rows) + [None]
        return cursor

    return _make


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for key in ("DB_BOOTSTRAP_RESOURCES_DIR", "DB_BOOTSTRAP_STATEMENT", "DB_BOOTSTRAP_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    yield


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
