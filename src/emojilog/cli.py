# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Command-line entry point.

Typical CI usage (the checkout must have full history)::

    emojilog                      # update CHANGELOG.md, commit and push
    emojilog --dry-run            # show what would be added
    emojilog --no-push --json-log # commit locally, machine-readable logs

Exit codes: ``0`` when the changelog was updated *or* there was
nothing to add; ``1`` when the run failed.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from emojilog.config import load_config
from emojilog.errors import EmojilogError
from emojilog.git import GitCli
from emojilog.logging import configure_logging, get_logger
from emojilog.matching import MATCH_STRATEGIES
from emojilog.pipeline import run_release
from emojilog.report import print_plan_table

logger = get_logger(__name__)

__all__ = [
    'build_parser',
    'main',
]


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        msg = f'must be a positive integer, got {value}'
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the ``emojilog`` argument parser."""
    parser = argparse.ArgumentParser(
        prog='emojilog',
        description='Prepend new emoji-tagged commits to the changelog and bump the version.',
    )
    parser.add_argument(
        '--root',
        type=Path,
        default=Path('.'),
        help='Repository root (default: current directory).',
    )
    parser.add_argument('--config', type=Path, default=None, help='Path to an emojilog TOML config file.')
    parser.add_argument('--changelog', default=None, help='Changelog path, relative to the root.')
    parser.add_argument('--manifest', default=None, help='Manifest whose version field is kept in step.')
    parser.add_argument('--max-commits', type=_positive_int, default=None, help='How many recent commits to inspect.')
    parser.add_argument(
        '--match-strategy',
        choices=sorted(MATCH_STRATEGIES),
        default=None,
        help='How to decide that a commit is already in the changelog.',
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the planned entry; write nothing and run no git mutations.',
    )
    parser.add_argument('--no-push', action='store_true', help='Commit locally but do not push.')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Enable debug output.')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only show warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Emit logs as JSON lines.')
    parser.add_argument('--no-redact', action='store_true', help='Do not scrub secret values from logs.')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run emojilog and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        json_log=args.json_log,
        redact_secrets=not args.no_redact,
    )

    root: Path = args.root.resolve()
    try:
        config = load_config(root, args.config)
        overrides = {
            'changelog': args.changelog,
            'manifest': args.manifest,
            'max_commits': args.max_commits,
            'match_strategy': args.match_strategy,
        }
        config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
        if args.no_push:
            config = replace(config, push=False)

        result = run_release(config, root=root, git=GitCli(root), dry_run=args.dry_run)
    except EmojilogError as exc:
        logger.error('run_failed', code=exc.code.value, error=exc.message, hint=exc.hint or None)
        return 1

    if args.dry_run and result.plan is not None:
        print_plan_table(result.plan)
    return 0


if __name__ == '__main__':
    sys.exit(main())
