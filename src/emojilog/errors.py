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

"""Error types for emojilog.

Only failures that should stop a run are raised. Best-effort lookups
(missing version marker, missing changelog, missing manifest) fall
back to defaults instead.
"""

from __future__ import annotations

import enum

__all__ = [
    'EmojilogError',
    'ErrorCode',
]


class ErrorCode(str, enum.Enum):
    """Stable identifiers for fatal error categories."""

    CONFIG_INVALID = 'CONFIG_INVALID'
    CONFIG_NOT_FOUND = 'CONFIG_NOT_FOUND'
    GIT_FAILED = 'GIT_FAILED'
    IO_FAILED = 'IO_FAILED'


class EmojilogError(Exception):
    """A fatal error with a stable code and an optional fix hint.

    Attributes:
        code: The :class:`ErrorCode` category.
        message: Human-readable description.
        hint: Actionable suggestion for the user (may be empty).
    """

    def __init__(self, code: ErrorCode, message: str, *, hint: str = '') -> None:
        """Initialize with a code, a message and an optional hint."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        return f'[{self.code.value}] {self.message}'
