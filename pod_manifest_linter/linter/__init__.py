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

"""Linter package for Pod manifest validation."""

from pathlib import Path
from typing import Union

from ..parsing.yaml_parser import yaml_parser
from .report import LintResult
from .structure_linter import StructureLinter, validate_pod

__all__ = ['lint_file', 'lint_string', 'validate_pod', 'LintResult']


def lint_file(file_path: Union[str, Path]) -> LintResult:
    """Lint a single manifest file.

    Args:
        file_path: Path of the manifest

    Returns:
        LintResult holding the diagnostics in validation order

    Raises:
        ManifestLoadError: If the file cannot be read or parsed
    """
    path = Path(file_path)
    result = LintResult(path)
    StructureLinter().lint(path, result)
    return result


def lint_string(content: str) -> LintResult:
    """Lint manifest content held in memory."""
    result = LintResult()
    StructureLinter().lint_document(yaml_parser.load_document_from_string(content), result)
    return result
