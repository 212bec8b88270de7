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

"""Shared leaf-level types used across emojilog.

This module must have **zero** imports from other ``emojilog``
subpackages to avoid circular-import chains.  It is safe to import
from any module in the project.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    'BUMP_PRECEDENCE',
    'BumpType',
    'LogEntry',
    'Version',
    'max_bump',
]

_SEMVER_PATTERN: re.Pattern[str] = re.compile(r'^v?(\d+)\.(\d+)\.(\d+)$')


class BumpType(Enum):
    """Semver bump types, ordered by precedence (highest first).

    Exactly one bump is applied per run: the strongest one found among
    the collected commits.
    """

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    NONE = 'none'


# Bump precedence: lower index = higher precedence.
BUMP_PRECEDENCE: list[BumpType] = [
    BumpType.MAJOR,
    BumpType.MINOR,
    BumpType.PATCH,
    BumpType.NONE,
]


def max_bump(a: BumpType, b: BumpType) -> BumpType:
    """Return the higher-precedence bump type.

    >>> max_bump(BumpType.MINOR, BumpType.PATCH)
    <BumpType.MINOR: 'minor'>
    >>> max_bump(BumpType.NONE, BumpType.MAJOR)
    <BumpType.MAJOR: 'major'>
    """
    a_idx = BUMP_PRECEDENCE.index(a)
    b_idx = BUMP_PRECEDENCE.index(b)
    return BUMP_PRECEDENCE[min(a_idx, b_idx)]


@dataclass(frozen=True, order=True)
class Version:
    """A ``MAJOR.MINOR.PATCH`` semantic version.

    Attributes:
        major: Incremented for breaking changes.
        minor: Incremented for new features.
        patch: Incremented for everything else.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        """Reject negative components."""
        if min(self.major, self.minor, self.patch) < 0:
            msg = f'Version components must be non-negative, got {self.major}.{self.minor}.{self.patch}'
            raise ValueError(msg)

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}.{self.patch}'

    @property
    def tag(self) -> str:
        """The ``vX.Y.Z`` form used in changelog headers."""
        return f'v{self}'

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``"1.2.3"`` or ``"v1.2.3"``.

        Raises:
            ValueError: If *text* is not a plain three-part version.
        """
        m = _SEMVER_PATTERN.match(text.strip())
        if not m:
            msg = f'Not a MAJOR.MINOR.PATCH version: {text!r}'
            raise ValueError(msg)
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    def bump(self, kind: BumpType) -> Version:
        """Return a new version with exactly one bump rule applied.

        >>> Version(1, 2, 3).bump(BumpType.MAJOR)
        Version(major=2, minor=0, patch=0)
        >>> Version(1, 2, 3).bump(BumpType.MINOR)
        Version(major=1, minor=3, patch=0)
        >>> Version(1, 2, 3).bump(BumpType.PATCH)
        Version(major=1, minor=2, patch=4)
        """
        if kind == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if kind == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if kind == BumpType.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        return self


@dataclass(frozen=True)
class LogEntry:
    """One line of ``git log`` output.

    Attributes:
        sha: The full commit SHA (empty when not requested).
        subject: The commit subject line.
    """

    sha: str
    subject: str
