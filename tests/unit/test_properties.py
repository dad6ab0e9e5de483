"""Unit tests for db_bootstrap.properties module."""

import pytest

from db_bootstrap.properties import ConnectionParameters, load_properties
from db_bootstrap.resource_loader import ResourceLoader
from db_bootstrap.sql_interface.exceptions import ResourceNotFoundError


class TestLoadProperties:
    """Test load_properties function."""

    def test_load_connection_properties(self, loader):
        properties = load_properties(loader, "application.properties")

        assert properties["jdbc.url"] == "sqlite::memory:"
        assert properties["jdbc.user"] == "sa"
        assert properties["jdbc.password"] == "s3cret"

    def test_comments_and_blank_lines_ignored(self, write_resources):
        loader = ResourceLoader(write_resources({
            "extra.properties": "# a comment\n\nname=value\n",
        }))

        assert load_properties(loader, "extra.properties") == {"name": "value"}

    def test_percent_signs_kept_verbatim(self, loader):
        properties = load_properties(loader, "sql/queries.properties")

        assert properties["Person.selectAll.format"] == "%d %s%n"

    def test_dollar_signs_not_interpolated(self, write_resources):
        loader = ResourceLoader(write_resources({"extra.properties": "jdbc.password=pa${HOME}ss\n"}))

        assert load_properties(loader, "extra.properties")["jdbc.password"] == "pa${HOME}ss"

    def test_hash_inside_value_kept(self, write_resources):
        loader = ResourceLoader(write_resources({
            "extra.properties": "Person.selectAll.format=%d #items%n\n",
        }))

        assert load_properties(loader, "extra.properties")["Person.selectAll.format"] == "%d #items%n"

    def test_colon_separator_and_bang_comment(self, write_resources):
        loader = ResourceLoader(write_resources({
            "extra.properties": "! old style comment\njdbc.user: sa\n",
        }))

        assert load_properties(loader, "extra.properties") == {"jdbc.user": "sa"}

    def test_empty_value(self, write_resources):
        loader = ResourceLoader(write_resources({"extra.properties": "jdbc.password=\n"}))

        assert load_properties(loader, "extra.properties")["jdbc.password"] == ""

    def test_missing_file(self, loader):
        with pytest.raises(ResourceNotFoundError):
            load_properties(loader, "nope.properties")


class TestConnectionParameters:
    """Test ConnectionParameters dataclass."""

    def test_from_properties(self):
        parameters = ConnectionParameters.from_properties({
            "jdbc.url": "sqlite::memory:",
            "jdbc.user": "sa",
            "jdbc.password": "pw",
        })

        assert parameters == ConnectionParameters("sqlite::memory:", "sa", "pw")

    def test_missing_keys_become_none(self):
        parameters = ConnectionParameters.from_properties({})

        assert parameters.url is None
        assert parameters.user is None
        assert parameters.password is None

    def test_immutable(self):
        parameters = ConnectionParameters("sqlite::memory:")
        with pytest.raises(AttributeError):
            parameters.url = "other"

    def test_repr_hides_password(self):
        parameters = ConnectionParameters("sqlite::memory:", "sa", "topsecret")

        assert "topsecret" not in repr(parameters)
        assert "sa" in repr(parameters)
