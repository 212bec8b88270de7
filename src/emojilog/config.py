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

"""Configuration loading for emojilog.

Settings come from, in order of precedence:

1. CLI flags (applied by the caller with :func:`dataclasses.replace`).
2. An explicit ``--config`` file.
3. ``emojilog.toml`` at the repository root.
4. The ``[tool.emojilog]`` table in ``pyproject.toml``.
5. Built-in defaults.

Only one file source is used; they are not merged.

Example ``emojilog.toml``::

    changelog = "docs/CHANGELOG.md"
    manifest = "package.json"
    excluded_markers = ["♻️", "🚦", "🎨", "📦", "🔖", "🚧", "📝"]
    match_strategy = "exact-line"
    bot_name = "release-bot"
    bot_email = "release-bot@example.com"
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from emojilog.changelog import DEFAULT_TIMESTAMP_FORMAT
from emojilog.commit_parsing import BREAKING_MARKER, DEFAULT_EXCLUDED_MARKERS, FEATURE_MARKER
from emojilog.errors import EmojilogError, ErrorCode
from emojilog.logging import get_logger
from emojilog.matching import MATCH_STRATEGIES
from emojilog.version import DEFAULT_SCAN_LINES

logger = get_logger(__name__)

__all__ = [
    'CONFIG_FILENAME',
    'EmojilogConfig',
    'load_config',
]

CONFIG_FILENAME = 'emojilog.toml'

DEFAULT_MAX_COMMITS = 100


@dataclass(frozen=True)
class EmojilogConfig:
    """Resolved settings for one run.

    Attributes:
        changelog: Changelog path, relative to the repository root.
        manifest: Manifest path whose version field mirrors the
            changelog. Skipped when the file does not exist.
        max_commits: How many recent commits to inspect.
        version_scan_lines: How many changelog lines to search for
            the current version.
        breaking_marker: Leading marker that triggers a major bump.
        feature_marker: Leading marker that triggers a minor bump.
        excluded_markers: Leading markers that keep a commit out of the
            changelog.
        match_strategy: Name of the "already recorded" predicate.
        timestamp_format: ``strftime`` format for entry headers.
        bot_name: Committer name for the release commit.
        bot_email: Committer email for the release commit.
        commit_message: Release commit message; ``{version}`` is
            replaced with the new version.
        push: Whether to push after committing.
    """

    changelog: str = 'CHANGELOG.md'
    manifest: str = 'package.json'
    max_commits: int = DEFAULT_MAX_COMMITS
    version_scan_lines: int = DEFAULT_SCAN_LINES
    breaking_marker: str = BREAKING_MARKER
    feature_marker: str = FEATURE_MARKER
    excluded_markers: tuple[str, ...] = DEFAULT_EXCLUDED_MARKERS
    match_strategy: str = 'substring'
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    bot_name: str = 'emojilog-bot'
    bot_email: str = 'emojilog-bot@users.noreply.github.com'
    commit_message: str = 'Version {version}'
    push: bool = True


_STR_KEYS = frozenset({
    'changelog',
    'manifest',
    'breaking_marker',
    'feature_marker',
    'match_strategy',
    'timestamp_format',
    'bot_name',
    'bot_email',
    'commit_message',
})
_POSITIVE_INT_KEYS = frozenset({'max_commits'})
_INT_KEYS = frozenset({'version_scan_lines'})
_BOOL_KEYS = frozenset({'push'})


def _invalid(message: str, *, hint: str = '') -> EmojilogError:
    return EmojilogError(ErrorCode.CONFIG_INVALID, message, hint=hint)


def _parse_config(raw: dict[str, Any]) -> EmojilogConfig:
    """Validate a raw config table and build an :class:`EmojilogConfig`.

    Raises:
        EmojilogError: On unknown keys or values of the wrong type.
    """
    known = {f.name for f in fields(EmojilogConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise _invalid(
            f'Unknown key(s) in emojilog config: {", ".join(unknown)}',
            hint=f'Valid keys: {", ".join(sorted(known))}.',
        )

    values: dict[str, Any] = {}
    for key, value in raw.items():
        if key in _STR_KEYS:
            if not isinstance(value, str):
                raise _invalid(f'{key} must be a string, got {type(value).__name__}')
            if not value and key not in ('breaking_marker', 'feature_marker'):
                raise _invalid(f'{key} must not be empty')
            values[key] = value
        elif key in _BOOL_KEYS:
            if not isinstance(value, bool):
                raise _invalid(f'{key} must be a boolean, got {type(value).__name__}')
            values[key] = value
        elif key in _INT_KEYS or key in _POSITIVE_INT_KEYS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise _invalid(f'{key} must be an integer, got {type(value).__name__}')
            if key in _POSITIVE_INT_KEYS and value <= 0:
                raise _invalid(f'{key} must be a positive integer, got {value}')
            values[key] = value
        elif key == 'excluded_markers':
            if not isinstance(value, list):
                raise _invalid(f'excluded_markers must be a list, got {type(value).__name__}')
            for i, item in enumerate(value):
                if not isinstance(item, str) or not item:
                    raise _invalid(f'excluded_markers[{i}] must be a non-empty string')
            values[key] = tuple(value)

    strategy = values.get('match_strategy')
    if strategy is not None and strategy not in MATCH_STRATEGIES:
        raise _invalid(
            f'Unknown match_strategy {strategy!r}',
            hint=f'Use one of: {", ".join(sorted(MATCH_STRATEGIES))}.',
        )

    return EmojilogConfig(**values)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
    except tomlkit.exceptions.ParseError as exc:
        raise _invalid(f'Cannot parse {path}: {exc}') from exc


def load_config(root: Path, config_path: Path | None = None) -> EmojilogConfig:
    """Load configuration for the repository at *root*.

    Args:
        root: Repository root.
        config_path: Explicit config file. Must exist when given.

    Returns:
        The parsed :class:`EmojilogConfig` (defaults when no file is found).

    Raises:
        EmojilogError: If *config_path* is missing, or a config file
            is malformed.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise EmojilogError(
                ErrorCode.CONFIG_NOT_FOUND,
                f'Config file not found: {config_path}',
                hint='Check the --config path.',
            )
        logger.debug('config_loaded', path=str(config_path))
        return _parse_config(_read_toml(config_path))

    standalone = root / CONFIG_FILENAME
    if standalone.is_file():
        logger.debug('config_loaded', path=str(standalone))
        return _parse_config(_read_toml(standalone))

    pyproject = root / 'pyproject.toml'
    if pyproject.is_file():
        table = _read_toml(pyproject).get('tool', {}).get('emojilog')
        if table is not None:
            if not isinstance(table, dict):
                raise _invalid('[tool.emojilog] must be a table')
            logger.debug('config_loaded', path=str(pyproject), table='tool.emojilog')
            return _parse_config(table)

    logger.debug('config_defaults')
    return EmojilogConfig()
