"""Tests for the YAML-backed settings store."""

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

import yaml

from obsidian_symlinker.settings_store import InMemorySettingsStore, YamlSettingsStore


class YamlSettingsStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.path = Path(self.tmpdir.name) / "nested" / "settings.yaml"

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_missing_file_reads_as_empty(self) -> None:
        store = YamlSettingsStore(self.path)
        self.assertIsNone(store.get("vault_path"))
        self.assertEqual(store.get("recent_links", []), [])

    def test_values_survive_a_new_instance(self) -> None:
        YamlSettingsStore(self.path).set("vault_path", "/Users/me/Notes")
        YamlSettingsStore(self.path).set("recent_links", [{"file_name": "a.md"}])

        store = YamlSettingsStore(self.path)
        self.assertEqual(store.get("vault_path"), "/Users/me/Notes")
        self.assertEqual(store.get("recent_links"), [{"file_name": "a.md"}])

    def test_writes_yaml_mapping(self) -> None:
        YamlSettingsStore(self.path).set("vault_path", "/Notes Vault")
        data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        self.assertEqual(data, {"vault_path": "/Notes Vault"})

    def test_corrupt_file_reads_as_empty_and_is_replaced(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text("vault_path: [unclosed", encoding="utf-8")

        store = YamlSettingsStore(self.path)
        self.assertIsNone(store.get("vault_path"))

        store.set("vault_path", "/fixed")
        self.assertEqual(YamlSettingsStore(self.path).get("vault_path"), "/fixed")

    def test_non_mapping_file_reads_as_empty(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text("- just\n- a list\n", encoding="utf-8")
        self.assertIsNone(YamlSettingsStore(self.path).get("vault_path"))


class InMemorySettingsStoreTests(unittest.TestCase):
    def test_get_and_set(self) -> None:
        store = InMemorySettingsStore({"a": 1})
        self.assertEqual(store.get("a"), 1)
        self.assertEqual(store.get("b", "default"), "default")
        store.set("b", 2)
        self.assertEqual(store.get("b"), 2)


if __name__ == "__main__":
    unittest.main()
