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

"""Structure and schema linter for Pod manifests.

This linter walks the composed YAML node tree of a manifest against the
fixed Pod schema and reports every violation with its source line.
"""

import logging
from pathlib import Path
from typing import List, Optional

import yaml

from ..models.diagnostic import Diagnostic
from ..models.pod_schema import POD
from ..models.yaml_schema import validate_document
from ..parsing.yaml_parser import ParsedDocument, yaml_parser
from .report import LintResult

logger = logging.getLogger(__name__)


def validate_pod(root: Optional[yaml.Node]) -> List[Diagnostic]:
    """Validate the top-level node of a Pod manifest.

    The node tree is only read, so repeated calls on the same tree return
    equal diagnostics in the same order.
    """
    return validate_document(POD, root)


class StructureLinter:
    """Linter for structure and schema validation."""

    def lint_document(self, document: ParsedDocument, result: LintResult):
        """Validate an already parsed document into ``result``."""
        diagnostics = validate_pod(document.root)
        logger.debug(f"{len(diagnostics)} diagnostic(s) for {document.file_path or '<string>'}")
        result.extend(diagnostics)

    def lint(self, file_path: Path, result: LintResult):
        """Lint structure and schema of the YAML file.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors to

        Raises:
            ManifestLoadError: If the file cannot be read or parsed
        """
        document = yaml_parser.load_document(file_path)
        self.lint_document(document, result)
