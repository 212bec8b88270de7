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

"""Commit the release under the bot identity and push it."""

from __future__ import annotations

from emojilog._types import Version
from emojilog.config import EmojilogConfig
from emojilog.git import GitBackend
from emojilog.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    'format_commit_message',
    'publish',
]


def format_commit_message(template: str, version: Version) -> str:
    """Fill ``{version}`` in the commit message template.

    >>> format_commit_message('Version {version}', Version(1, 2, 3))
    'Version 1.2.3'
    """
    return template.replace('{version}', str(version))


def publish(
    git: GitBackend,
    version: Version,
    config: EmojilogConfig,
    *,
    push: bool = True,
) -> str:
    """Stage everything, commit as the bot, and optionally push.

    A failed push leaves the local commit in place.

    Returns:
        The commit message used.
    """
    message = format_commit_message(config.commit_message, version)

    git.configure_identity(config.bot_name, config.bot_email)
    git.add_all()
    git.commit(message)
    logger.info('release_committed', message=message, author=config.bot_name)

    if push:
        git.push()
        logger.info('release_pushed', version=str(version))
    else:
        logger.info('push_skipped', version=str(version))
    return message
