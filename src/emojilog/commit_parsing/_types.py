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

"""Pure types for commit message parsing.

Everything here is a frozen dataclass or protocol: no I/O, no
logging, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from emojilog._types import BumpType


@dataclass(frozen=True)
class ParsedCommit:
    """A commit subject accepted by a :class:`CommitParser`.

    Attributes:
        sha: The full commit SHA (empty when unknown).
        marker: The leading emoji marker, or ``''`` when the subject
            starts with a symbol that is not a known marker.
        description: The subject with the marker and following
            whitespace removed.
        bump: The bump this commit asks for.
        raw: The original subject line, exactly as it will be written
            to the changelog.
    """

    sha: str
    marker: str
    description: str
    bump: BumpType = BumpType.PATCH
    raw: str = ''


@dataclass
class CommitBuckets:
    """Collected commits split by bump kind, each in collection order.

    Attributes:
        breaking: Commits that force a major bump.
        features: Commits that force a minor bump.
        patches: Everything else.
    """

    breaking: list[ParsedCommit] = field(default_factory=list)
    features: list[ParsedCommit] = field(default_factory=list)
    patches: list[ParsedCommit] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.breaking) + len(self.features) + len(self.patches)

    def ordered(self) -> list[ParsedCommit]:
        """All commits in changelog order: breaking, features, patches."""
        return [*self.breaking, *self.features, *self.patches]


@runtime_checkable
class CommitParser(Protocol):
    """Protocol for commit subject parsers.

    A parser receives a raw commit subject line and returns a
    :class:`ParsedCommit` if the subject belongs in the changelog, or
    ``None`` if it should be skipped.
    """

    def parse(self, message: str, sha: str = '') -> ParsedCommit | None:
        """Parse a commit subject.

        Args:
            message: The commit subject line.
            sha: The commit SHA (for reference).

        Returns:
            A :class:`ParsedCommit` if the subject qualifies, else ``None``.
        """
        ...
