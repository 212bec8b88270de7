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

"""Tests for emojilog._types."""

from __future__ import annotations

import pytest
from emojilog._types import BUMP_PRECEDENCE, BumpType, Version, max_bump


class TestVersion:
    """Tests for the Version value type."""

    def test_default_is_zero(self) -> None:
        """A bare Version is 0.0.0."""
        assert Version() == Version(0, 0, 0)
        assert str(Version()) == '0.0.0'

    def test_tag(self) -> None:
        """Tag form carries a leading v."""
        assert Version(1, 2, 3).tag == 'v1.2.3'

    def test_parse_plain(self) -> None:
        """Test parse plain."""
        assert Version.parse('4.5.6') == Version(4, 5, 6)

    def test_parse_with_prefix_and_whitespace(self) -> None:
        """Test parse with prefix and whitespace."""
        assert Version.parse(' v10.0.1 ') == Version(10, 0, 1)

    @pytest.mark.parametrize('text', ['1.2', '1.2.3.4', 'x1.2.3', '1.2.3-rc1', ''])
    def test_parse_rejects_malformed(self, text: str) -> None:
        """Anything but three dot-separated integers is rejected."""
        with pytest.raises(ValueError, match='MAJOR.MINOR.PATCH'):
            Version.parse(text)

    def test_negative_component_rejected(self) -> None:
        """Test negative component rejected."""
        with pytest.raises(ValueError, match='non-negative'):
            Version(1, -1, 0)

    def test_ordering(self) -> None:
        """Versions compare component-wise."""
        assert Version(1, 9, 9) < Version(2, 0, 0)
        assert Version(1, 2, 3) < Version(1, 2, 4)


class TestBump:
    """Tests for Version.bump()."""

    def test_major_resets_minor_and_patch(self) -> None:
        """Test major resets minor and patch."""
        assert Version(1, 2, 3).bump(BumpType.MAJOR) == Version(2, 0, 0)

    def test_minor_resets_patch(self) -> None:
        """Test minor resets patch."""
        assert Version(1, 2, 3).bump(BumpType.MINOR) == Version(1, 3, 0)

    def test_patch(self) -> None:
        """Test patch."""
        assert Version(1, 2, 3).bump(BumpType.PATCH) == Version(1, 2, 4)

    def test_none_is_identity(self) -> None:
        """Test none is identity."""
        v = Version(1, 2, 3)
        assert v.bump(BumpType.NONE) is v

    def test_from_zero(self) -> None:
        """The first release from an empty changelog."""
        assert Version().bump(BumpType.PATCH) == Version(0, 0, 1)
        assert Version().bump(BumpType.MINOR) == Version(0, 1, 0)
        assert Version().bump(BumpType.MAJOR) == Version(1, 0, 0)


class TestMaxBump:
    """Tests for max_bump()."""

    def test_precedence_order(self) -> None:
        """Test precedence order."""
        assert BUMP_PRECEDENCE == [BumpType.MAJOR, BumpType.MINOR, BumpType.PATCH, BumpType.NONE]

    def test_higher_wins(self) -> None:
        """Test higher wins."""
        assert max_bump(BumpType.MINOR, BumpType.PATCH) == BumpType.MINOR
        assert max_bump(BumpType.NONE, BumpType.MAJOR) == BumpType.MAJOR

    def test_same(self) -> None:
        """Test same."""
        assert max_bump(BumpType.PATCH, BumpType.PATCH) == BumpType.PATCH
