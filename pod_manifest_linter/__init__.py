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

"""Validation of Pod manifests against a fixed schema."""

from .exceptions import ManifestLoadError, PodLinterError
from .linter import LintResult, lint_file, lint_string, validate_pod
from .models.diagnostic import Diagnostic

__all__ = [
    'Diagnostic',
    'LintResult',
    'ManifestLoadError',
    'PodLinterError',
    'lint_file',
    'lint_string',
    'validate_pod',
]
