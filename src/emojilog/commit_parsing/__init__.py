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

"""Commit subject parsing.

The :class:`CommitParser` protocol lets a team plug in its own subject
convention while keeping the same collection, bump and changelog
machinery. The built-in :class:`EmojiCommitParser` implements the
leading-emoji convention.

Usage::

    from emojilog.commit_parsing import (
        EmojiCommitParser,
        partition_commits,
        resolve_bump,
    )

    parser = EmojiCommitParser()
    commits = [c for c in map(parser.parse, subjects) if c is not None]
    buckets = partition_commits(commits)
    bump = resolve_bump(buckets)
"""

from emojilog._types import BUMP_PRECEDENCE, BumpType, max_bump
from emojilog.commit_parsing._emoji import (
    ALPHANUM_PUNCT_PATTERN,
    BREAKING_MARKER,
    DEFAULT_EXCLUDED_MARKERS,
    FEATURE_MARKER,
    EmojiCommitParser,
    partition_commits,
    resolve_bump,
)
from emojilog.commit_parsing._types import CommitBuckets, CommitParser, ParsedCommit

__all__ = [
    'ALPHANUM_PUNCT_PATTERN',
    'BREAKING_MARKER',
    'BUMP_PRECEDENCE',
    'BumpType',
    'CommitBuckets',
    'CommitParser',
    'DEFAULT_EXCLUDED_MARKERS',
    'EmojiCommitParser',
    'FEATURE_MARKER',
    'ParsedCommit',
    'max_bump',
    'partition_commits',
    'resolve_bump',
]
