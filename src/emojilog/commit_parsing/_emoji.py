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

r"""Leading-emoji commit convention parser.

Subjects are classified by the symbol they start with::

    🚨 Drop the v1 endpoints        → MAJOR  (breaking marker)
    ✨ Add CSV export               → MINOR  (feature marker)
    🐛 Fix rounding in totals       → PATCH  (any other qualifying symbol)
    ♻️ Split the reports module     → skipped (excluded marker)
    Fix typo                        → skipped (plain text)

A subject qualifies for the changelog when its first character is
*not* an ASCII letter, digit, or one of ``()?¿!¡*_-``, and it does not
start with an excluded marker.

Marker comparison ignores the emoji variation selector (U+FE0F), so
``♻️`` and ``♻`` are treated as the same marker.

Pure implementation: depends only on ``re`` and :mod:`._types`.
No I/O, no logging, no side effects.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from emojilog._types import BumpType
from emojilog.commit_parsing._types import CommitBuckets, ParsedCommit

BREAKING_MARKER = '🚨'
FEATURE_MARKER = '✨'

# Refactor, CI, style, packaging, release and work-in-progress markers.
DEFAULT_EXCLUDED_MARKERS: tuple[str, ...] = ('♻️', '🚦', '🎨', '📦', '🔖', '🚧')

# Subjects starting with one of these are plain text, not a marker.
ALPHANUM_PUNCT_PATTERN: re.Pattern[str] = re.compile(r'^[a-zA-Z0-9()?¿!¡*_\-]')

# Leading run of symbols (anything that is neither a word character
# nor whitespace), then the description.
_MARKER_PATTERN: re.Pattern[str] = re.compile(r'^(?P<marker>[^\w\s]*)\s*(?P<description>.*)$', re.DOTALL)

_VARIATION_SELECTOR = '\ufe0f'


def _normalize(text: str) -> str:
    return text.replace(_VARIATION_SELECTOR, '')


class EmojiCommitParser:
    """Parser for the leading-emoji commit convention.

    Example::

        parser = EmojiCommitParser()

        pc = parser.parse('✨ Add CSV export')
        assert pc.marker == '✨'
        assert pc.bump == BumpType.MINOR

        assert parser.parse('Fix typo') is None
        assert parser.parse('♻️ Split module') is None

    Args:
        breaking_marker: Marker that triggers a major bump.
        feature_marker: Marker that triggers a minor bump.
        excluded_markers: Markers whose commits never reach the changelog.
    """

    def __init__(
        self,
        *,
        breaking_marker: str = BREAKING_MARKER,
        feature_marker: str = FEATURE_MARKER,
        excluded_markers: Iterable[str] = DEFAULT_EXCLUDED_MARKERS,
    ) -> None:
        """Initialize with the marker set to classify against."""
        self.breaking_marker = breaking_marker
        self.feature_marker = feature_marker
        self.excluded_markers: tuple[str, ...] = tuple(excluded_markers)
        self._breaking = _normalize(breaking_marker)
        self._feature = _normalize(feature_marker)
        self._excluded = tuple(_normalize(m) for m in self.excluded_markers if _normalize(m))

    def is_excluded(self, message: str) -> bool:
        """Whether *message* starts with an excluded marker."""
        return _normalize(message).startswith(self._excluded) if self._excluded else False

    def qualifies(self, message: str) -> bool:
        """Whether *message* belongs in the changelog at all."""
        if not message:
            return False
        if ALPHANUM_PUNCT_PATTERN.match(message):
            return False
        return not self.is_excluded(message)

    def classify(self, message: str) -> BumpType:
        """Return the bump *message* asks for, ignoring qualification.

        Any subject that is neither breaking nor a feature is a patch,
        including plain-text subjects.
        """
        normalized = _normalize(message)
        if self._breaking and normalized.startswith(self._breaking):
            return BumpType.MAJOR
        if self._feature and normalized.startswith(self._feature):
            return BumpType.MINOR
        return BumpType.PATCH

    def parse(self, message: str, sha: str = '') -> ParsedCommit | None:
        """Parse a commit subject.

        Args:
            message: The commit subject line.
            sha: The commit SHA (for reference).

        Returns:
            A :class:`ParsedCommit` if the subject qualifies,
            otherwise ``None``.
        """
        subject = message.split('\n', 1)[0].rstrip()
        if not self.qualifies(subject):
            return None

        m = _MARKER_PATTERN.match(subject)
        marker = m.group('marker') if m else ''
        description = m.group('description') if m else subject

        return ParsedCommit(
            sha=sha,
            marker=marker,
            description=description,
            bump=self.classify(subject),
            raw=subject,
        )


def partition_commits(commits: Iterable[ParsedCommit]) -> CommitBuckets:
    """Split commits into breaking, feature and patch buckets.

    Every commit lands in exactly one bucket; order within each bucket
    follows the input order.
    """
    buckets = CommitBuckets()
    for commit in commits:
        if commit.bump == BumpType.MAJOR:
            buckets.breaking.append(commit)
        elif commit.bump == BumpType.MINOR:
            buckets.features.append(commit)
        else:
            buckets.patches.append(commit)
    return buckets


def resolve_bump(buckets: CommitBuckets) -> BumpType:
    """Pick the single bump for a run: breaking > feature > patch.

    >>> resolve_bump(CommitBuckets())
    <BumpType.NONE: 'none'>
    """
    if buckets.breaking:
        return BumpType.MAJOR
    if buckets.features:
        return BumpType.MINOR
    if buckets.patches:
        return BumpType.PATCH
    return BumpType.NONE
