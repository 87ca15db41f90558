"""Tests for API key storage."""

import json
import stat

from depict.credentials import (
    DEFAULT_CREDENTIAL_KEY,
    CredentialStore,
    JSONFileStore,
    mask_credential,
)

from tests.conftest import InMemoryStore


class TestCredentialStore:
    def test_set_then_get(self, memory_store):
        store = CredentialStore(memory_store)
        store.set("k1")
        assert store.get() == "k1"

    def test_clear_then_get(self, memory_store):
        store = CredentialStore(memory_store)
        store.set("k1")
        store.clear()
        assert store.get() is None

    def test_get_when_absent(self, memory_store):
        assert CredentialStore(memory_store).get() is None

    def test_clear_when_absent(self, memory_store):
        store = CredentialStore(memory_store)
        store.clear()
        assert store.get() is None

    def test_overwrite(self, memory_store):
        store = CredentialStore(memory_store)
        store.set("old")
        store.set("new")
        assert store.get() == "new"
        assert memory_store.data == {DEFAULT_CREDENTIAL_KEY: "new"}

    def test_empty_value_reads_as_absent(self):
        store = CredentialStore(InMemoryStore({DEFAULT_CREDENTIAL_KEY: ""}))
        assert store.get() is None

    def test_custom_key(self, memory_store):
        store = CredentialStore(memory_store, key="ai_api_key")
        store.set("k1")
        assert memory_store.data == {"ai_api_key": "k1"}
        assert store.key == "ai_api_key"

    def test_reads_through_to_store(self, memory_store):
        store = CredentialStore(memory_store)
        store.set("k1")
        memory_store.data[DEFAULT_CREDENTIAL_KEY] = "changed elsewhere"
        assert store.get() == "changed elsewhere"

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "storage.json"
        CredentialStore(JSONFileStore(path)).set("k1")
        assert CredentialStore(JSONFileStore(path)).get() == "k1"

    def test_defaults_to_depict_home(self, depict_home):
        CredentialStore().set("k1")
        data = json.loads((depict_home / "storage.json").read_text())
        assert data == {DEFAULT_CREDENTIAL_KEY: "k1"}


class TestJSONFileStore:
    def _make_store(self, tmp_path):
        return JSONFileStore(path=tmp_path / "storage.json")

    def test_set_and_get(self, tmp_path):
        store = self._make_store(tmp_path)
        store.set("a", "1")
        assert store.get("a") == "1"

    def test_get_missing_file(self, tmp_path):
        store = self._make_store(tmp_path)
        assert store.get("a") is None
        assert not store.path.exists()

    def test_delete(self, tmp_path):
        store = self._make_store(tmp_path)
        store.set("a", "1")
        assert store.delete("a") is True
        assert store.get("a") is None

    def test_delete_nonexistent(self, tmp_path):
        store = self._make_store(tmp_path)
        assert store.delete("a") is False
        store.set("b", "2")
        assert store.delete("a") is False

    def test_keeps_other_keys(self, tmp_path):
        store = self._make_store(tmp_path)
        store.set("a", "1")
        store.set("b", "2")
        store.delete("a")
        assert json.loads(store.path.read_text()) == {"b": "2"}

    def test_creates_parent_directory(self, tmp_path):
        store = JSONFileStore(path=tmp_path / "nested" / "dir" / "storage.json")
        store.set("a", "1")
        assert store.get("a") == "1"

    def test_file_permissions(self, tmp_path):
        store = self._make_store(tmp_path)
        store.set("a", "1")
        mode = stat.S_IMODE(store.path.stat().st_mode)
        assert mode == 0o600

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        store = self._make_store(tmp_path)
        store.path.write_text("not valid json")
        assert store.get("a") is None

    def test_corrupt_file_is_replaced_on_write(self, tmp_path):
        store = self._make_store(tmp_path)
        store.path.write_text("not valid json")
        store.set("a", "1")
        assert json.loads(store.path.read_text()) == {"a": "1"}

    def test_non_object_file_reads_as_empty(self, tmp_path):
        store = self._make_store(tmp_path)
        store.path.write_text(json.dumps(["a", "b"]))
        assert store.get("a") is None

    def test_ignores_non_string_values(self, tmp_path):
        store = self._make_store(tmp_path)
        store.path.write_text(json.dumps({"a": 1, "b": "2"}))
        assert store.get("a") is None
        assert store.get("b") == "2"


class TestMaskCredential:
    def test_long_key_keeps_ends(self):
        masked = mask_credential("AIzaSyAbcdefghijklmnopqrstuvwxyz1234")
        assert masked == "AIza...1234"

    def test_short_key_fully_masked(self):
        assert mask_credential("k1") == "***"
