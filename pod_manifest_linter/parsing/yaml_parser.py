# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""YAML manifest parser producing a node tree with source positions."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from ..exceptions import ManifestLoadError

logger = logging.getLogger(__name__)

BOOL_TAG = "tag:yaml.org,2002:bool"


class ManifestLoader(yaml.SafeLoader):
    """SafeLoader that resolves booleans by YAML 1.2 core schema rules.

    Only true/false spellings are booleans; yes, no, on and off stay strings.
    """


ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ManifestLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


@dataclass(frozen=True)
class ParsedDocument:
    """A single parsed YAML document.

    ``root`` is the top-level node of the document, or None when the stream
    holds no document at all (empty file, comments only).
    """

    root: Optional[yaml.Node]
    file_path: Optional[Path] = None


class YamlParser:
    """YAML parser built on PyYAML's composer.

    The composed node tree keeps ``start_mark`` positions and resolved tags
    on every node, which is what the validator needs. Data is never
    constructed into Python objects.
    """

    @staticmethod
    def _compose_first(content: Union[str, bytes]) -> Optional[yaml.Node]:
        # Only the first document of a stream is validated; later documents
        # are never composed, so their syntax is not checked either.
        for node in yaml.compose_all(content, Loader=ManifestLoader):
            return node
        return None

    def load_document(self, file_path: Union[str, Path]) -> ParsedDocument:
        """Load a manifest file into a ParsedDocument.

        Raises:
            ManifestLoadError: If the file cannot be read or is not valid YAML
        """
        path = Path(file_path)

        if not path.exists():
            raise ManifestLoadError(f"Manifest file not found: {path}")

        if not path.is_file():
            raise ManifestLoadError(f"Path is not a file: {path}")

        try:
            logger.debug(f"Loading manifest file: {path}")
            # Raw bytes let PyYAML detect UTF-8/UTF-16 from the BOM
            content = path.read_bytes()
        except OSError as exc:
            raise ManifestLoadError(f"Failed to read manifest file {path}: {exc}")

        try:
            root = self._compose_first(content)
        except yaml.YAMLError as exc:
            raise ManifestLoadError(f"Failed to parse YAML file {path}: {exc}")

        return ParsedDocument(root=root, file_path=path)

    def load_document_from_string(self, content: str) -> ParsedDocument:
        """Load a manifest from string content.

        Raises:
            ManifestLoadError: If content is not valid YAML
        """
        try:
            root = self._compose_first(content)
        except yaml.YAMLError as exc:
            raise ManifestLoadError(f"Failed to parse YAML content: {exc}")
        return ParsedDocument(root=root)


# Global parser instance
yaml_parser = YamlParser()
