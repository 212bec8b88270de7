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

"""Tests for emojilog.commit_parsing."""

from __future__ import annotations

import pytest
from emojilog.commit_parsing import (
    BumpType,
    CommitBuckets,
    CommitParser,
    EmojiCommitParser,
    ParsedCommit,
    partition_commits,
    resolve_bump,
)


def _pc(raw: str, bump: BumpType) -> ParsedCommit:
    """Build a ParsedCommit without going through the parser."""
    return ParsedCommit(sha='', marker='', description=raw, bump=bump, raw=raw)


class TestProtocol:
    """Tests for CommitParser protocol conformance."""

    def test_emoji_parser_is_commit_parser(self) -> None:
        """Test emoji parser is commit parser."""
        assert isinstance(EmojiCommitParser(), CommitParser)


class TestQualifies:
    """Tests for EmojiCommitParser.qualifies()."""

    @pytest.mark.parametrize(
        'message',
        [
            'Fix typo',
            'fix typo',
            '1st commit',
            '(docs) readme',
            '?? what',
            '¿Qué?',
            '!important',
            '¡Hola!',
            '*wip*',
            '_private',
            '-dash',
        ],
    )
    def test_plain_text_rejected(self, message: str) -> None:
        """Subjects starting with ASCII letters, digits or listed punctuation are skipped."""
        assert EmojiCommitParser().qualifies(message) is False

    @pytest.mark.parametrize('message', ['♻️ Refactor', '🚦 CI', '🎨 Style', '📦 Deps', '🔖 Release', '🚧 WIP'])
    def test_excluded_markers_rejected(self, message: str) -> None:
        """Test excluded markers rejected."""
        assert EmojiCommitParser().qualifies(message) is False

    def test_excluded_without_variation_selector(self) -> None:
        """♻ without U+FE0F is the same marker as ♻️."""
        assert EmojiCommitParser().qualifies('♻ Refactor') is False

    @pytest.mark.parametrize('message', ['🐛 Fix bug', '✨ Add thing', '🚨 Break api', '📝 Docs', '# heading'])
    def test_symbols_accepted(self, message: str) -> None:
        """Test symbols accepted."""
        assert EmojiCommitParser().qualifies(message) is True

    def test_empty_rejected(self) -> None:
        """Test empty rejected."""
        assert EmojiCommitParser().qualifies('') is False

    def test_custom_excluded_markers(self) -> None:
        """Test custom excluded markers."""
        parser = EmojiCommitParser(excluded_markers=['📝'])
        assert parser.qualifies('📝 Docs') is False
        assert parser.qualifies('♻️ Refactor') is True


class TestClassify:
    """Tests for EmojiCommitParser.classify()."""

    def test_breaking(self) -> None:
        """Test breaking."""
        assert EmojiCommitParser().classify('🚨 break api') == BumpType.MAJOR

    def test_feature(self) -> None:
        """Test feature."""
        assert EmojiCommitParser().classify('✨ add thing') == BumpType.MINOR

    def test_feature_with_variation_selector(self) -> None:
        """Test feature with variation selector."""
        assert EmojiCommitParser().classify('✨\ufe0f add thing') == BumpType.MINOR

    def test_other_symbol_is_patch(self) -> None:
        """Test other symbol is patch."""
        assert EmojiCommitParser().classify('🐛 fix bug') == BumpType.PATCH

    def test_plain_text_is_patch(self) -> None:
        """Classification alone does not filter."""
        assert EmojiCommitParser().classify('fix typo') == BumpType.PATCH

    def test_marker_must_lead(self) -> None:
        """A marker in the middle of the subject does not count."""
        assert EmojiCommitParser().classify('🐛 fix 🚨 alarm') == BumpType.PATCH

    def test_custom_markers(self) -> None:
        """Test custom markers."""
        parser = EmojiCommitParser(breaking_marker='💥', feature_marker='🎉')
        assert parser.classify('💥 drop') == BumpType.MAJOR
        assert parser.classify('🎉 add') == BumpType.MINOR
        assert parser.classify('🚨 old marker') == BumpType.PATCH


class TestParse:
    """Tests for EmojiCommitParser.parse()."""

    def test_fields(self) -> None:
        """Test fields."""
        pc = EmojiCommitParser().parse('✨ Add CSV export', sha='abc123')
        assert pc is not None
        assert pc.sha == 'abc123'
        assert pc.marker == '✨'
        assert pc.description == 'Add CSV export'
        assert pc.bump == BumpType.MINOR
        assert pc.raw == '✨ Add CSV export'

    def test_marker_without_space(self) -> None:
        """Test marker without space."""
        pc = EmojiCommitParser().parse('🐛fix')
        assert pc is not None
        assert pc.marker == '🐛'
        assert pc.description == 'fix'

    def test_zwj_sequence_marker(self) -> None:
        """Joined emoji stay one marker."""
        pc = EmojiCommitParser().parse('\U0001f9d1\u200d\U0001f4bb Tooling')
        assert pc is not None
        assert pc.marker == '\U0001f9d1\u200d\U0001f4bb'
        assert pc.description == 'Tooling'

    def test_only_subject_line_used(self) -> None:
        """Test only subject line used."""
        pc = EmojiCommitParser().parse('🐛 Fix\n\nLong body')
        assert pc is not None
        assert pc.raw == '🐛 Fix'

    def test_rejected_returns_none(self) -> None:
        """Test rejected returns none."""
        assert EmojiCommitParser().parse('Merge branch main') is None
        assert EmojiCommitParser().parse('🔖 v1.0.0') is None


class TestPartition:
    """Tests for partition_commits() and resolve_bump()."""

    def test_partition_is_complete(self) -> None:
        """Every commit lands in exactly one bucket."""
        commits = [
            _pc('🐛 a', BumpType.PATCH),
            _pc('🚨 b', BumpType.MAJOR),
            _pc('✨ c', BumpType.MINOR),
            _pc('🐛 d', BumpType.PATCH),
            _pc('🚨 e', BumpType.MAJOR),
        ]
        buckets = partition_commits(commits)
        assert len(buckets) == len(commits)
        assert sorted(c.raw for c in buckets.ordered()) == sorted(c.raw for c in commits)

    def test_order_within_bucket_preserved(self) -> None:
        """Test order within bucket preserved."""
        commits = [_pc('🐛 1', BumpType.PATCH), _pc('✨ 2', BumpType.MINOR), _pc('🐛 3', BumpType.PATCH)]
        buckets = partition_commits(commits)
        assert [c.raw for c in buckets.patches] == ['🐛 1', '🐛 3']
        assert [c.raw for c in buckets.ordered()] == ['✨ 2', '🐛 1', '🐛 3']

    def test_breaking_feature_plain_example(self) -> None:
        """Breaking, feature and plain patch split and order."""
        parser = EmojiCommitParser()
        commits = [_pc(m, parser.classify(m)) for m in ('🚨 break api', '✨ add thing', 'fix typo')]
        buckets = partition_commits(commits)
        assert [c.raw for c in buckets.breaking] == ['🚨 break api']
        assert [c.raw for c in buckets.features] == ['✨ add thing']
        assert [c.raw for c in buckets.patches] == ['fix typo']
        assert resolve_bump(buckets) == BumpType.MAJOR

    def test_resolve_feature_over_patch(self) -> None:
        """Test resolve feature over patch."""
        buckets = partition_commits([_pc('🐛 a', BumpType.PATCH), _pc('✨ b', BumpType.MINOR)])
        assert resolve_bump(buckets) == BumpType.MINOR

    def test_resolve_patch_only(self) -> None:
        """Test resolve patch only."""
        assert resolve_bump(partition_commits([_pc('🐛 a', BumpType.PATCH)])) == BumpType.PATCH

    def test_resolve_empty(self) -> None:
        """Test resolve empty."""
        assert resolve_bump(CommitBuckets()) == BumpType.NONE
