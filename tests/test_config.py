"""Tests for the Config facade."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
import yaml

from dotparams.config import Config
from dotparams.errors import ErrorCodes, KeyNotFoundError, TypeMismatchError
from dotparams.settings import LoaderSettings


@pytest.fixture
def config(settings_file: Path) -> Config:
    return Config(settings_file)


# === construction ===


class TestConfigConstruction:
    def test_from_file(self, config: Config, settings_file: Path) -> None:
        assert len(config) == 5
        assert config.source == settings_file
        assert config.diagnostics == ()

    def test_from_directory(self, tmp_path: Path) -> None:
        (tmp_path / "a.yaml").write_text(yaml.safe_dump({"a": {"b": 1}}))
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "c.yaml").write_text(yaml.safe_dump({"c": "x"}))
        config = Config(tmp_path)
        assert config.paths() == ["a.b", "c"]

    def test_missing_source_is_empty(self, tmp_path: Path) -> None:
        config = Config(tmp_path / "nope")
        assert len(config) == 0
        assert config.collection == {}
        assert not config.exists("user.name")
        assert not config.exists("")
        assert [d.code for d in config.diagnostics] == [ErrorCodes.SOURCE_NOT_FOUND]

    def test_settings_as_dict(self, tmp_path: Path) -> None:
        (tmp_path / "a.yaml").write_text("a: 1\n")
        (tmp_path / "b.txt").write_text("b: 2\n")
        config = Config(tmp_path, settings={"suffixes": [".yaml"]})
        assert config.paths() == ["a"]

    def test_settings_object(self, tmp_path: Path) -> None:
        (tmp_path / "b.yaml").write_text("x: 2\n")
        (tmp_path / "a.yaml").write_text("x: 1\n")
        config = Config(tmp_path, settings=LoaderSettings(sort_entries=True))
        assert config.get_int("x") == 2

    def test_from_document(self, sample_document: dict[str, Any]) -> None:
        config = Config.from_document(sample_document)
        assert config.source is None
        assert config.get("user.name") == "John"

    def test_from_document_logs_invalid_keys(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="dotparams"):
            config = Config.from_document({"a.b": 1, "c": 2})
        assert config.paths() == ["c"]
        assert [d.code for d in config.diagnostics] == [ErrorCodes.INVALID_KEY]
        assert "a.b" in caplog.text

    def test_repr(self, config: Config) -> None:
        assert "parameters=5" in repr(config)


# === exists() / get() ===


class TestConfigLookup:
    def test_get_string_value(self, config: Config) -> None:
        assert config.get("user.name") == "John"

    def test_get_missing_raises(self, config: Config) -> None:
        with pytest.raises(KeyNotFoundError) as exc_info:
            config.get("user.email")
        assert exc_info.value.path == "user.email"
        assert exc_info.value.code == ErrorCodes.KEY_NOT_FOUND

    def test_key_not_found_is_key_error(self, config: Config) -> None:
        with pytest.raises(KeyError):
            config.get("missing")

    def test_get_missing_not_logged(self, config: Config, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="dotparams"):
            with pytest.raises(KeyNotFoundError):
                config.get("missing")
        assert caplog.records == []

    def test_intermediate_mapping_is_not_a_parameter(self, config: Config) -> None:
        assert not config.exists("user")
        with pytest.raises(KeyNotFoundError):
            config.get("user")

    @pytest.mark.parametrize("path", ["user.name", "user.age", "user.children", "user", "nope", "user.name.x"])
    def test_exists_iff_get_succeeds(self, config: Config, path: str) -> None:
        try:
            config.get(path)
            found = True
        except KeyNotFoundError:
            found = False
        assert config.exists(path) is found
        assert (path in config) is found

    def test_get_returns_copy(self, config: Config) -> None:
        children = config.get("user.children")
        children.append("Scrooge")
        assert config.get("user.children") == ["Huey", "Dewey", "Louie"]

    def test_collection_is_read_only(self, config: Config) -> None:
        with pytest.raises(TypeError):
            config.collection["user.name"] = "Jane"  # type: ignore[index]

    def test_null_leaf_exists(self) -> None:
        config = Config.from_document({"a": None})
        assert config.exists("a")
        assert config.get("a") is None


# === typed getters ===


class TestConfigTypedGetters:
    def test_sample_values(self, config: Config) -> None:
        assert config.get_string("user.name") == "John"
        assert config.get_bool("user.is_real") is False
        assert config.get_number("user.age") == 39
        assert config.get_int("user.age") == 39
        assert config.get_float("user.height") == 1.78
        assert config.get_sequence("user.children") == ["Huey", "Dewey", "Louie"]

    def test_float_widens_int(self, config: Config) -> None:
        value = config.get_float("user.age")
        assert value == 39.0
        assert isinstance(value, float)

    def test_int_rejects_float(self, config: Config) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            config.get_int("user.height")
        assert exc_info.value.path == "user.height"
        assert exc_info.value.expected == "integer"
        assert exc_info.value.actual == "float"
        assert exc_info.value.code == ErrorCodes.TYPE_MISMATCH

    @pytest.mark.parametrize(
        ("getter", "path", "expected"),
        [
            ("get_string", "user.age", "string"),
            ("get_bool", "user.name", "boolean"),
            ("get_int", "user.is_real", "integer"),
            ("get_float", "user.is_real", "float"),
            ("get_float", "user.name", "float"),
            ("get_sequence", "user.name", "sequence"),
        ],
    )
    def test_type_mismatch(self, config: Config, getter: str, path: str, expected: str) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            getattr(config, getter)(path)
        assert exc_info.value.expected == expected

    def test_type_mismatch_is_type_error(self, config: Config) -> None:
        with pytest.raises(TypeError):
            config.get_bool("user.name")

    def test_typed_getter_missing_key(self, config: Config) -> None:
        with pytest.raises(KeyNotFoundError):
            config.get_string("user.email")

    def test_string_getter_does_not_stringify(self) -> None:
        config = Config.from_document({"port": 8080, "empty": None})
        with pytest.raises(TypeMismatchError):
            config.get_string("port")
        with pytest.raises(TypeMismatchError):
            config.get_string("empty")

    def test_sequence_of_mappings(self) -> None:
        config = Config.from_document({"hosts": [{"name": "a"}, {"name": "b"}]})
        assert config.get_sequence("hosts") == [{"name": "a"}, {"name": "b"}]
