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

"""Changelog entry rendering and prepending.

An entry looks like this (every line ends in two spaces, the markdown
hard line break)::

    **v2.0.0 2026-03-14 16:05**
    🚨 Drop the v1 endpoints
    ✨ Add CSV export
    🐛 Fix rounding in totals

Breaking lines come first, then features, then patches. Entries are
only ever prepended; existing content is never touched.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from emojilog._types import Version
from emojilog.commit_parsing import CommitBuckets
from emojilog.errors import EmojilogError, ErrorCode

__all__ = [
    'DEFAULT_TIMESTAMP_FORMAT',
    'LINE_BREAK',
    'prepend_entry',
    'read_changelog',
    'render_entry',
    'write_changelog',
]

DEFAULT_TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M'

LINE_BREAK = '  \n'


def render_entry(
    version: Version,
    buckets: CommitBuckets,
    timestamp: datetime,
    *,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> str:
    """Render one changelog entry.

    >>> from emojilog.commit_parsing import ParsedCommit
    >>> b = CommitBuckets(features=[ParsedCommit('', '✨', 'Add', raw='✨ Add')])
    >>> render_entry(Version(1, 1, 0), b, datetime(2026, 1, 2, 3, 4))
    '**v1.1.0 2026-01-02 03:04**  \\n✨ Add  \\n'
    """
    header = f'**{version.tag} {timestamp.strftime(timestamp_format)}**'
    lines = [header, *(commit.raw for commit in buckets.ordered())]
    return ''.join(f'{line}{LINE_BREAK}' for line in lines)


def prepend_entry(changelog_text: str, entry: str) -> str:
    """Put *entry* on top of *changelog_text*, separated by a blank line."""
    return f'{entry}\n{changelog_text}'


def read_changelog(path: Path) -> str:
    """Read the changelog; a missing file is an empty changelog."""
    if not path.exists():
        return ''
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise EmojilogError(
            ErrorCode.IO_FAILED,
            f'Cannot read {path}: {exc}',
            hint='The changelog must be UTF-8 text.',
        ) from exc


def write_changelog(path: Path, text: str) -> None:
    """Rewrite the changelog in one write."""
    try:
        path.write_text(text, encoding='utf-8')
    except OSError as exc:
        raise EmojilogError(ErrorCode.IO_FAILED, f'Cannot write {path}: {exc}') from exc
