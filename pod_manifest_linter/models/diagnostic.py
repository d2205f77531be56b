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

"""Diagnostic model shared by the schema walker and the linter."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Diagnostic:
    """One schema violation.

    ``line`` is None when the violation has no location in the source,
    which is the case for fields that are missing altogether.
    """

    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    yaml_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': self.message}
        if self.line is not None:
            entry['line'] = self.line
        if self.column is not None:
            entry['column'] = self.column
        if self.yaml_path is not None:
            entry['yaml_path'] = self.yaml_path
        return entry
