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

"""Custom exceptions for the pod manifest linter."""


class PodLinterError(Exception):
    """Base exception for pod-linter related errors."""
    pass


class ManifestLoadError(PodLinterError):
    """Exception raised when a manifest cannot be read or parsed.

    These are startup failures, not schema violations: no diagnostics are
    produced for a manifest that never made it into a node tree.
    """
    pass
