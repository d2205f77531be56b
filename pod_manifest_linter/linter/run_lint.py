#!/usr/bin/env python3
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

"""CLI entry point for linting Pod manifests."""

import argparse
import json
import logging
import sys
from typing import List

from ..config import OUTPUT_FORMATS, LinterConfig
from ..exceptions import PodLinterError
from ..file_io.source_location import format_diagnostic
from . import LintResult, lint_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pod-lint',
        description='Lint a Pod manifest YAML file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Optional at the argparse level so that a missing path exits with 1
    # like every other startup failure, not with argparse's usage code.
    parser.add_argument(
        'path',
        nargs='?',
        default=None,
        help='Manifest file to lint',
    )
    parser.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default='plain',
        help='Output format (default: plain)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug output to stderr',
    )
    return parser


def render(result: LintResult, output_format: str) -> List[str]:
    """Render diagnostics as output lines, in validation order."""
    if output_format == 'json':
        output = {
            'file': str(result.file_path),
            'errors': [error.to_dict() for error in result.errors],
        }
        return [json.dumps(output, indent=2)]
    if output_format == 'github-actions':
        lines = []
        for error in result.errors:
            location = f"file={result.file_path}"
            if error.line is not None:
                location += f",line={error.line}"
            lines.append(f"::error {location}::{error.message}")
        return lines
    return [format_diagnostic(error, result.file_path) for error in result.errors]


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the linter CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = LinterConfig.from_args(args)
    config.set_logging()

    if args.path is None:
        logger.error("No manifest file given")
        sys.exit(1)

    try:
        result = lint_file(args.path)
    except PodLinterError as e:
        logger.error(str(e))
        sys.exit(1)

    if result.errors or config.output_format == 'json':
        for line in render(result, config.output_format):
            print(line)

    # Exit with error code if any errors found
    if result.errors:
        sys.exit(1)
    sys.exit(0)


if __name__ == '__main__':
    main()
