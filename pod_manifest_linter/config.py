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

"""Runtime configuration for the linter CLI."""

import argparse
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_stream_logging

OUTPUT_FORMATS = ('plain', 'json', 'github-actions')


@dataclass
class LinterConfig:
    """Options of a single linter run, taken from the command line."""
    output_format: str = "plain"
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'LinterConfig':
        """Create configuration from parsed CLI arguments."""
        return cls(
            output_format=args.format,
            log_level="DEBUG" if args.verbose else "WARNING",
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_stream_logging(level=level, formatter=formatter)

        return logging.getLogger('pod_manifest_linter')
