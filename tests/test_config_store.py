from __future__ import annotations

import pytest

from configtools import ConfigStore, InvalidArgumentError


def test_ensure_exists_creates_empty_settings_file(config_store):
    path = config_store.ensure_exists()
    assert path == config_store.base_dir / "config" / "app.config"
    assert path.is_file()

    text = path.read_text(encoding="utf-8")
    assert "<configuration>" in text
    assert "<appSettings />" in text
    assert "<connectionStrings />" in text


def test_ensure_exists_is_idempotent(config_store):
    path = config_store.ensure_exists()
    first = path.read_bytes()
    config_store.ensure_exists()
    assert path.read_bytes() == first

    config_store.write_setting("Keep", "me")
    written = path.read_bytes()
    config_store.ensure_exists()
    assert path.read_bytes() == written
    assert config_store.read_setting("Keep") == "me"


@pytest.mark.parametrize("value", ["plain", "", "with spaces & <xml> \"quotes\"", "ünïcødé"])
def test_setting_roundtrip(config_store, value):
    config_store.write_setting("Some.Key", value)
    assert config_store.read_setting("Some.Key") == value


def test_write_same_key_twice_keeps_one_entry(config_store):
    config_store.write_setting("Mode", "first")
    config_store.write_setting("Mode", "second")
    assert config_store.read_setting("Mode") == "second"

    text = config_store.path.read_text(encoding="utf-8")
    assert text.count('key="Mode"') == 1


def test_missing_key_reads_empty_string(config_store):
    assert config_store.read_setting("Nope") == ""
    assert config_store.read_connection_string("Nope") == ""
    assert config_store.path.is_file()


def test_blank_key_reads_empty_without_creating_file(config_store):
    assert config_store.read_setting("") == ""
    assert config_store.read_setting("   ") == ""
    assert config_store.read_connection_string("") == ""
    assert not config_store.path.exists()


@pytest.mark.parametrize("key", ["", "  ", "\t"])
def test_write_setting_rejects_blank_key(config_store, key):
    with pytest.raises(InvalidArgumentError):
        config_store.write_setting(key, "x")
    with pytest.raises(ValueError):
        config_store.write_connection_string(key, "x", "prov")


def test_sequential_writes_to_different_keys_both_persist(config_store):
    config_store.write_setting("A", "1")
    config_store.write_setting("B", "2")
    assert config_store.read_setting("A") == "1"
    assert config_store.read_setting("B") == "2"


def test_connection_string_add_then_replace(config_store):
    config_store.write_connection_string("Main", "Server=a", "System.Data.SqlClient")
    assert config_store.read_connection_string("Main") == "Server=a"

    config_store.write_connection_string("Other", "Server=o")
    config_store.write_connection_string("Main", "Server=b", "Npgsql")
    assert config_store.read_connection_string("Main") == "Server=b"
    assert config_store.read_connection_string("Other") == "Server=o"

    text = config_store.path.read_text(encoding="utf-8")
    assert text.count('name="Main"') == 1
    assert 'providerName="Npgsql"' in text
    assert "System.Data.SqlClient" not in text


def test_store_from_settings(tmp_path, monkeypatch):
    from configtools import get_settings

    monkeypatch.setenv("CONFIGTOOLS_BASE_DIR", str(tmp_path))
    monkeypatch.setenv("CONFIGTOOLS_CONFIG_FILE", "service.config")
    store = ConfigStore.from_settings(get_settings())
    assert store.path == tmp_path / "config" / "service.config"
    store.write_setting("k", "v")
    assert store.read_setting("k") == "v"


@pytest.mark.parametrize("value", ["nul\x00", "bell\x07", "x\x01", "vt\x0b", "ff\x0c", "esc\x1b", "lone\ud800"])
def test_values_xml_cannot_hold_leave_file_untouched(config_store, value):
    config_store.write_setting("Good", "1")
    before = config_store.path.read_bytes()

    with pytest.raises(InvalidArgumentError):
        config_store.write_setting("Bad", value)
    with pytest.raises(InvalidArgumentError):
        config_store.write_setting(f"Bad{value}", "ok")
    with pytest.raises(InvalidArgumentError):
        config_store.write_connection_string("Db", value, "Npgsql")
    with pytest.raises(InvalidArgumentError):
        config_store.write_connection_string("Db", "Server=a", value)

    assert config_store.path.read_bytes() == before
    assert config_store.read_setting("Good") == "1"


@pytest.mark.parametrize("value", ["line1\nline2", "tab\there", "cr\r\nlf", "emoji \U0001f600"])
def test_whitespace_and_astral_values_roundtrip(config_store, value):
    config_store.write_setting("Multi", value)
    assert config_store.read_setting("Multi") == value
