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


"""Emoji-driven changelog updates and semantic version bumps.

emojilog reads recent commit subjects, keeps the ones that start with
an emoji marker, bumps the version the changelog last recorded, and
prepends a new entry::

    **v2.0.0 2026-03-14 16:05**
    🚨 Drop the v1 endpoints
    ✨ Add CSV export
    🐛 Fix rounding in totals

It is meant to run in CI on every push to the release branch.
"""

from emojilog._types import BumpType, LogEntry, Version
from emojilog.errors import EmojilogError, ErrorCode

__version__ = '0.1.0'

__all__ = [
    'BumpType',
    'EmojilogError',
    'ErrorCode',
    'LogEntry',
    'Version',
    '__version__',
]
