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

"""Current-version discovery from the changelog.

The newest entry sits at the top of the changelog and its header
carries the version (``**v1.2.3 2026-01-31 09:15**``), so the first
``vX.Y.Z`` found near the top is the current version.

Discovery is best-effort: no marker in the scanned window yields
``0.0.0`` rather than an error.

Usage::

    from emojilog.version import discover_version

    current = discover_version(Path('CHANGELOG.md').read_text(encoding='utf-8'))
"""

from __future__ import annotations

import re

from emojilog._types import Version

__all__ = [
    'DEFAULT_SCAN_LINES',
    'VERSION_PATTERN',
    'discover_version',
]

VERSION_PATTERN: re.Pattern[str] = re.compile(r'v(\d+)\.(\d+)\.(\d+)')

DEFAULT_SCAN_LINES = 50


def discover_version(changelog_text: str, *, max_lines: int = DEFAULT_SCAN_LINES) -> Version:
    """Return the first ``vX.Y.Z`` in the first *max_lines* lines.

    A commit line above the newest header that happens to contain a
    ``vX.Y.Z``-shaped string is read as the version too; only headers
    are expected to sit above the first entry.

    Args:
        changelog_text: Full changelog contents.
        max_lines: Size of the scanned window. ``0`` or less scans the
            whole document.

    Returns:
        The discovered :class:`Version`, or ``Version(0, 0, 0)``.
    """
    lines = changelog_text.splitlines()
    if max_lines > 0:
        lines = lines[:max_lines]
    for line in lines:
        m = VERSION_PATTERN.search(line)
        if m:
            return Version(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    return Version()
