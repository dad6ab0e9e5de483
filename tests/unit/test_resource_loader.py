"""Unit tests for db_bootstrap.resource_loader module."""

import pytest

from db_bootstrap.resource_loader import ResourceLoader
from db_bootstrap.sql_interface.exceptions import ResourceNotFoundError


class TestResourceLoaderInit:
    """Test ResourceLoader initialization."""

    def test_init_with_directory(self, temp_dir):
        loader = ResourceLoader(temp_dir)
        assert loader.base_dir == str(temp_dir)

    def test_init_without_directory_uses_package(self):
        loader = ResourceLoader()
        assert loader.base_dir is None

    def test_init_with_missing_directory(self, temp_dir):
        with pytest.raises(ValueError, match="resources directory does not exist"):
            ResourceLoader(temp_dir / "missing")


class TestLoad:
    """Test load method."""

    def test_load_returns_bytes(self, loader):
        with loader.load("sql/init.sql") as stream:
            data = stream.read()
        assert isinstance(data, bytes)
        assert data.startswith(b"CREATE TABLE Person")

    def test_missing_resource_carries_path(self, loader):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            loader.load("sql/missing.sql")

        assert exc_info.value.path == "sql/missing.sql"
        assert "sql/missing.sql" in str(exc_info.value)

    def test_renamed_ddl_script_is_reported(self, write_resources):
        loader = ResourceLoader(write_resources(skip=("sql/init.sql",)))

        with pytest.raises(ResourceNotFoundError) as exc_info:
            loader.read_as_text("sql/init.sql")

        assert exc_info.value.path == "sql/init.sql"

    def test_directory_is_not_a_resource(self, loader):
        with pytest.raises(ResourceNotFoundError):
            loader.load("sql")

    def test_empty_path(self, loader):
        with pytest.raises(ResourceNotFoundError):
            loader.load("")


class TestReadAsText:
    """Test read_as_text method."""

    def test_lines_joined_without_separators(self, write_resources):
        loader = ResourceLoader(write_resources({"script.sql": "CREATE TABLE t (\n  id INT\n)\n"}))

        assert loader.read_as_text("script.sql") == "CREATE TABLE t (  id INT)"

    def test_windows_line_endings_dropped(self, write_resources):
        directory = write_resources()
        (directory / "crlf.sql").write_bytes(b"SELECT 1\r\nFROM dual\r\n")
        loader = ResourceLoader(directory)

        assert loader.read_as_text("crlf.sql") == "SELECT 1FROM dual"

    def test_utf8_decoding(self, write_resources):
        loader = ResourceLoader(write_resources({"names.sql": "INSERT INTO Person VALUES (3,'Müller');\n"}))

        assert "Müller" in loader.read_as_text("names.sql")

    def test_open_text_keeps_lines(self, loader):
        with loader.open_text("sql/queries.properties") as reader:
            lines = reader.readlines()
        assert len(lines) == 3


class TestPackagedResources:
    """The resources shipped with the package resolve without an override."""

    def test_bundled_files_exist(self):
        loader = ResourceLoader()
        for path in ("application.properties", "logging.conf", "sql/queries.properties",
                     "sql/init.sql", "sql/load.sql"):
            with loader.load(path) as stream:
                assert stream.read()

    def test_bundled_schema_is_one_line(self):
        text = ResourceLoader().read_as_text("sql/init.sql")
        assert "\n" not in text
        assert text.startswith("CREATE TABLE Person")
