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

"""Error reporting for the linter."""

from pathlib import Path
from typing import Iterable, List, Optional

from ..models.diagnostic import Diagnostic


class LintResult:
    """Container for linting results for a single file."""

    def __init__(self, file_path: Optional[Path] = None):
        """Initialize lint result.

        Args:
            file_path: Path to the file being linted
        """
        self.file_path = file_path
        self.errors: List[Diagnostic] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def extend(self, diagnostics: Iterable[Diagnostic]):
        self.errors.extend(diagnostics)
