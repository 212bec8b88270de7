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

"""Collect the commits that are not yet in the changelog.

History is walked newest-first. The walk stops at the first subject
the changelog already records: everything older is assumed to be
recorded too. Subjects before that point are kept when the parser
accepts them.
"""

from __future__ import annotations

from collections.abc import Iterable

from emojilog._types import LogEntry
from emojilog.commit_parsing import CommitParser, EmojiCommitParser, ParsedCommit
from emojilog.logging import get_logger
from emojilog.matching import RecordedMatcher, substring_match

logger = get_logger(__name__)

__all__ = [
    'collect_commits',
]


def collect_commits(
    entries: Iterable[LogEntry | str],
    changelog_text: str,
    *,
    parser: CommitParser | None = None,
    matcher: RecordedMatcher = substring_match,
) -> list[ParsedCommit]:
    """Return unrecorded, qualifying commits in newest-first order.

    Args:
        entries: ``git log`` entries (or bare subjects), newest first.
        changelog_text: Current changelog contents.
        parser: Subject parser; defaults to :class:`EmojiCommitParser`.
        matcher: "Already recorded" predicate.

    Returns:
        The commits to add to the changelog.
    """
    if parser is None:
        parser = EmojiCommitParser()

    collected: list[ParsedCommit] = []
    for entry in entries:
        if isinstance(entry, str):
            entry = LogEntry(sha='', subject=entry)

        if matcher(entry.subject, changelog_text):
            logger.debug('commit_already_recorded', subject=entry.subject, sha=entry.sha)
            break

        parsed = parser.parse(entry.subject, sha=entry.sha)
        if parsed is None:
            logger.debug('commit_skipped', subject=entry.subject)
            continue

        logger.info('commit_added', subject=parsed.raw)
        collected.append(parsed)

    return collected
