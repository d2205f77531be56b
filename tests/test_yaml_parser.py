"""Tests for loading manifests into node trees."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from pod_manifest_linter.exceptions import ManifestLoadError, PodLinterError
from pod_manifest_linter.parsing import YamlParser
from pod_manifest_linter.parsing.nodes import is_integer, is_string


@pytest.fixture
def parser() -> YamlParser:
    return YamlParser()


class TestLoadDocument:
    def test_loads_mapping(self, parser: YamlParser, write_manifest) -> None:
        path = write_manifest("apiVersion: v1\nkind: Pod\n")
        document = parser.load_document(path)
        assert isinstance(document.root, yaml.MappingNode)
        assert document.file_path == path

    def test_empty_file_has_no_root(self, parser: YamlParser, write_manifest) -> None:
        document = parser.load_document(write_manifest(""))
        assert document.root is None

    def test_comment_only_file_has_no_root(self, parser: YamlParser, write_manifest) -> None:
        document = parser.load_document(write_manifest("# nothing here\n"))
        assert document.root is None

    def test_only_first_document_is_used(self, parser: YamlParser) -> None:
        document = parser.load_document_from_string("a: 1\n---\n- b\n")
        assert isinstance(document.root, yaml.MappingNode)

    def test_missing_file(self, parser: YamlParser, tmp_path: Path) -> None:
        with pytest.raises(ManifestLoadError, match="not found"):
            parser.load_document(tmp_path / "missing.yaml")

    def test_directory(self, parser: YamlParser, tmp_path: Path) -> None:
        with pytest.raises(ManifestLoadError, match="not a file"):
            parser.load_document(tmp_path)

    def test_syntax_error(self, parser: YamlParser, write_manifest) -> None:
        with pytest.raises(ManifestLoadError, match="Failed to parse"):
            parser.load_document(write_manifest("a: [1, 2\n"))

    def test_undecodable_bytes(self, parser: YamlParser, tmp_path: Path) -> None:
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"a: \xc3\x28\n")
        with pytest.raises(PodLinterError):
            parser.load_document(path)

    def test_utf16_with_bom(self, parser: YamlParser, tmp_path: Path) -> None:
        path = tmp_path / "utf16.yaml"
        path.write_bytes("apiVersion: v1\nkind: Pod\n".encode("utf-16"))
        document = parser.load_document(path)
        assert isinstance(document.root, yaml.MappingNode)
        assert [key.value for key, _ in document.root.value] == ["apiVersion", "kind"]


class TestScalarResolution:
    @pytest.mark.parametrize("word", ["on", "off", "yes", "no", "YES", "Off"])
    def test_yaml11_booleans_stay_strings(self, parser: YamlParser, word: str) -> None:
        root = parser.load_document_from_string(f"name: {word}\n").root
        assert is_string(root.value[0][1])

    @pytest.mark.parametrize("word", ["true", "False", "TRUE"])
    def test_true_false_are_booleans(self, parser: YamlParser, word: str) -> None:
        root = parser.load_document_from_string(f"flag: {word}\n").root
        assert root.value[0][1].tag == "tag:yaml.org,2002:bool"

    def test_int_resolution_unchanged(self, parser: YamlParser) -> None:
        root = parser.load_document_from_string("port: 8080\n").root
        assert is_integer(root.value[0][1])


def test_string_syntax_error(parser: YamlParser) -> None:
    with pytest.raises(ManifestLoadError, match="Failed to parse YAML content"):
        parser.load_document_from_string("key: 'unterminated\n")
