"""
Tests for the YAML search attributes source and its settings.
"""
import os

import pytest

from searchattribute.config import SearchAttributeSettings
from searchattribute.dynamic_config import YamlConfigSource
from searchattribute.type_map import build_type_map
from searchattribute.value_types import IndexedValueType


def write_config(path, text, mtime=None):
    path.write_text(text, encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "search_attributes.yaml"
    write_config(
        path,
        "validSearchAttributes:\n  CustomKeywordField: Keyword\n  CustomIntField: 3\n",
        mtime=1_000_000,
    )
    return path


def test_source_reads_mapping(config_file):
    source = YamlConfigSource(config_file)
    assert source() == {"CustomKeywordField": "Keyword", "CustomIntField": 3}


def test_source_reloads_on_change(config_file):
    source = YamlConfigSource(config_file)
    assert build_type_map(source) == {
        "CustomKeywordField": IndexedValueType.KEYWORD,
        "CustomIntField": IndexedValueType.INT,
    }

    write_config(config_file, "validSearchAttributes:\n  CustomBoolField: Bool\n", mtime=2_000_000)

    assert build_type_map(source) == {"CustomBoolField": IndexedValueType.BOOL}


def test_source_keeps_snapshot_when_unchanged(config_file):
    source = YamlConfigSource(config_file)
    first = source()
    first["Injected"] = "Keyword"
    assert "Injected" not in source()


def test_source_custom_key(tmp_path):
    path = tmp_path / "dc.yaml"
    write_config(path, "searchAttributes:\n  CustomDoubleField: Double\n")
    assert YamlConfigSource(path, "searchAttributes")() == {"CustomDoubleField": "Double"}


@pytest.mark.parametrize("text", ["", "other: 1\n", "validSearchAttributes:\n"])
def test_source_without_attributes(tmp_path, text):
    path = tmp_path / "dc.yaml"
    write_config(path, text)
    source = YamlConfigSource(path)
    assert source() == {}
    assert build_type_map(source) is None


@pytest.mark.parametrize("text", ["- a\n- b\n", "validSearchAttributes:\n  - Keyword\n"])
def test_source_rejects_non_mappings(tmp_path, text):
    path = tmp_path / "dc.yaml"
    write_config(path, text)
    with pytest.raises(ValueError, match="must be a mapping"):
        YamlConfigSource(path)()


def test_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        YamlConfigSource(tmp_path / "missing.yaml")()


def test_settings_from_env(monkeypatch, config_file):
    monkeypatch.setenv("SEARCH_ATTRIBUTES_CONFIG", str(config_file))
    monkeypatch.setenv("SEARCH_ATTRIBUTES_KEY", "validSearchAttributes")
    monkeypatch.setenv("DEBUG", "true")

    settings = SearchAttributeSettings()

    assert settings.config_path == str(config_file)
    assert settings.debug is True
    source = YamlConfigSource.from_settings(settings)
    assert source.path == config_file
    assert "CustomKeywordField" in source()


def test_settings_defaults(monkeypatch):
    for name in ("SEARCH_ATTRIBUTES_CONFIG", "SEARCH_ATTRIBUTES_KEY", "DEBUG"):
        monkeypatch.delenv(name, raising=False)

    settings = SearchAttributeSettings()

    assert settings.config_path == "config/search_attributes.yaml"
    assert settings.config_key == "validSearchAttributes"
    assert settings.debug is False


def test_source_malformed_yaml(tmp_path):
    path = tmp_path / "dc.yaml"
    write_config(path, "validSearchAttributes:\n  A: [Keyword\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        YamlConfigSource(path)()
