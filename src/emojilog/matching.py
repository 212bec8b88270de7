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

"""Strategies for deciding whether a commit is already in the changelog.

Collection walks history newest-first and stops at the first subject
the changelog already records. The test for "already records" is a
pluggable predicate.

Key Concepts::

    ┌─────────────────┬──────────────────────────────────────────────────┐
    │ Strategy        │ Matches when...                                  │
    ├─────────────────┼──────────────────────────────────────────────────┤
    │ substring       │ the subject appears anywhere in the changelog.   │
    │ (default)       │ "✨ Add export" matches an older line            │
    │                 │ "✨ Add export to CSV" and stops collection      │
    │                 │ early.                                           │
    ├─────────────────┼──────────────────────────────────────────────────┤
    │ exact-line      │ a changelog line, minus trailing whitespace,     │
    │                 │ equals the subject.                              │
    ├─────────────────┼──────────────────────────────────────────────────┤
    │ anchored-line   │ a changelog line starts with the subject,        │
    │                 │ followed by whitespace or end of line.           │
    └─────────────────┴──────────────────────────────────────────────────┘
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from emojilog.errors import EmojilogError, ErrorCode

__all__ = [
    'MATCH_STRATEGIES',
    'RecordedMatcher',
    'anchored_line_match',
    'exact_line_match',
    'get_matcher',
    'substring_match',
]


@runtime_checkable
class RecordedMatcher(Protocol):
    """Predicate: is *message* already recorded in *changelog_text*?"""

    def __call__(self, message: str, changelog_text: str) -> bool:
        """Return ``True`` if *message* is already in the changelog."""
        ...


def substring_match(message: str, changelog_text: str) -> bool:
    """Match anywhere in the document, including inside longer lines."""
    return message in changelog_text


def exact_line_match(message: str, changelog_text: str) -> bool:
    """Match a whole line, ignoring the trailing markdown line break."""
    target = message.rstrip()
    return any(line.rstrip() == target for line in changelog_text.splitlines())


def anchored_line_match(message: str, changelog_text: str) -> bool:
    """Match a line prefix that ends on a word boundary."""
    for line in changelog_text.splitlines():
        if line.startswith(message):
            rest = line[len(message) :]
            if not rest or rest[0].isspace():
                return True
    return False


MATCH_STRATEGIES: dict[str, RecordedMatcher] = {
    'substring': substring_match,
    'exact-line': exact_line_match,
    'anchored-line': anchored_line_match,
}


def get_matcher(name: str) -> RecordedMatcher:
    """Look up a matching strategy by name.

    Raises:
        EmojilogError: If *name* is not a known strategy.
    """
    try:
        return MATCH_STRATEGIES[name]
    except KeyError:
        raise EmojilogError(
            ErrorCode.CONFIG_INVALID,
            f'Unknown match strategy {name!r}',
            hint=f'Use one of: {", ".join(sorted(MATCH_STRATEGIES))}.',
        ) from None
