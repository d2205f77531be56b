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

"""Source locations of diagnostics and their textual rendering."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..models.diagnostic import Diagnostic


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def location_of(diagnostic: Diagnostic, file_path: Optional[Path] = None) -> SourceLocation:
    return SourceLocation(
        file_path=file_path,
        yaml_path=diagnostic.yaml_path,
        line=diagnostic.line,
        column=diagnostic.column,
    )


def format_source(loc: Optional[SourceLocation]) -> str:
    """Render ``<basename>:<line>`` for a located diagnostic.

    Returns an empty string when there is no line, since a file name alone
    says nothing about where the problem is.
    """
    if not loc or loc.line is None:
        return ""
    name = loc.file_path.name if loc.file_path is not None else "<string>"
    return f"{name}:{loc.line}"


def format_diagnostic(diagnostic: Diagnostic, file_path: Optional[Path] = None) -> str:
    """Render one diagnostic as ``<basename>:<line> <message>`` or ``<message>``."""
    prefix = format_source(location_of(diagnostic, file_path))
    if not prefix:
        return diagnostic.message
    return f"{prefix} {diagnostic.message}"
