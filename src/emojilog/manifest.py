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

"""Keep the manifest version in step with the changelog.

Supported manifests:

- ``package.json`` (or any JSON-ish file): the first
  ``"version": "X.Y.Z"`` is replaced in place; the rest of the text is
  left byte-for-byte intact.
- ``pyproject.toml``: ``[project].version``, or
  ``[tool.poetry].version`` when there is no ``[project]`` version,
  rewritten with ``tomlkit`` so comments and layout survive.

A missing manifest, or one without a static version, is skipped.
"""

from __future__ import annotations

import re
from pathlib import Path

import tomlkit
import tomlkit.exceptions

from emojilog._types import Version
from emojilog.errors import EmojilogError, ErrorCode
from emojilog.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    'JSON_VERSION_PATTERN',
    'update_manifest',
]

JSON_VERSION_PATTERN: re.Pattern[str] = re.compile(r'"version"\s*:\s*"\d+\.\d+\.\d+"')


def _replace_json_version(text: str, version: Version) -> str | None:
    if not JSON_VERSION_PATTERN.search(text):
        return None
    return JSON_VERSION_PATTERN.sub(f'"version": "{version}"', text, count=1)


def _replace_toml_version(text: str, version: Version, path: Path) -> str | None:
    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.ParseError as exc:
        raise EmojilogError(
            ErrorCode.IO_FAILED,
            f'Cannot parse {path}: {exc}',
            hint='Fix the TOML syntax or point --manifest at another file.',
        ) from exc

    project = doc.get('project')
    if isinstance(project, dict) and 'version' in project:
        project['version'] = str(version)
        return tomlkit.dumps(doc)

    poetry = doc.get('tool', {}).get('poetry')
    if isinstance(poetry, dict) and 'version' in poetry:
        poetry['version'] = str(version)
        return tomlkit.dumps(doc)

    return None


def update_manifest(path: Path, version: Version) -> bool:
    """Write *version* into the manifest at *path*.

    Args:
        path: Manifest file (``package.json``, ``pyproject.toml``, ...).
        version: The new version.

    Returns:
        ``True`` if the file was rewritten, ``False`` if it was skipped.
    """
    if not path.is_file():
        logger.debug('manifest_not_found', path=str(path))
        return False

    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise EmojilogError(
            ErrorCode.IO_FAILED,
            f'Cannot read {path}: {exc}',
            hint='The manifest must be UTF-8 text.',
        ) from exc

    if path.suffix == '.toml':
        new_text = _replace_toml_version(text, version, path)
    else:
        new_text = _replace_json_version(text, version)

    if new_text is None:
        logger.warning('manifest_version_not_found', path=str(path))
        return False

    try:
        path.write_text(new_text, encoding='utf-8')
    except OSError as exc:
        raise EmojilogError(ErrorCode.IO_FAILED, f'Cannot write {path}: {exc}') from exc
    logger.info('manifest_updated', path=str(path), version=str(version))
    return True
