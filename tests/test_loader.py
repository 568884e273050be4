"""Tests for struct_core.loader."""

import pytest

from struct_core import build
from struct_core.errors import StructureLoadError
from struct_core.loader import load_file, load_text
from struct_core.model import FixedList, Map


class TestLoadText:
    def test_json(self):
        assert load_text('{"a": [1, 2]}') == {"a": [1, 2]}

    def test_yaml(self):
        assert load_text("a:\n  - 1\n  - 2\n", "yaml") == {"a": [1, 2]}

    def test_bad_json(self):
        with pytest.raises(StructureLoadError, match="Cannot parse json"):
            load_text("{oops")

    def test_bad_yaml(self):
        with pytest.raises(StructureLoadError):
            load_text("a: [1, 2", "yaml")

    def test_unknown_format(self):
        with pytest.raises(StructureLoadError, match="Unsupported format"):
            load_text("{}", "toml")


class TestLoadFile:
    def test_json_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text('[{"k": "v"}]', encoding="utf-8")
        assert load_file(path) == [{"k": "v"}]

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "data.yml"
        path.write_text("name: demo\nitems: [1, 2]\n", encoding="utf-8")
        assert load_file(str(path)) == {"name": "demo", "items": [1, 2]}

    def test_missing_file(self, tmp_path):
        with pytest.raises(StructureLoadError, match="File not found"):
            load_file(tmp_path / "nope.json")

    def test_bad_extension(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(StructureLoadError, match="Unsupported extension"):
            load_file(path)

    def test_parse_error_names_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(StructureLoadError, match="broken.json"):
            load_file(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"a": "\xff"}')
        with pytest.raises(StructureLoadError, match="Cannot read") as excinfo:
            load_file(path)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_directory_with_json_suffix(self, tmp_path):
        path = tmp_path / "dir.json"
        path.mkdir()
        with pytest.raises(StructureLoadError, match="Cannot read"):
            load_file(path)

    def test_loaded_yaml_builds(self, tmp_path):
        path = tmp_path / "doc.yaml"
        path.write_text("servers:\n  - host: a\n    ports: [80, 443]\n", encoding="utf-8")
        result = build(load_file(path))
        assert isinstance(result, Map)
        assert isinstance(result["servers"], FixedList)
        assert result["servers"][0]["ports"] == FixedList((80, 443))
