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

"""Git access behind a narrow protocol.

The pipeline only ever talks to a :class:`GitBackend`, so tests can
swap in an in-memory fake and never touch a live repository.

:class:`GitCli` is the real implementation. It shells out to ``git``
and turns any non-zero exit into an :class:`EmojilogError`; there is
no retry and no rollback.
"""

from __future__ import annotations

import subprocess  # noqa: S404 - intentional: drives the git CLI.
from pathlib import Path
from typing import Protocol, runtime_checkable

from emojilog._types import LogEntry
from emojilog.errors import EmojilogError, ErrorCode
from emojilog.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    'DEFAULT_TIMEOUT',
    'GitBackend',
    'GitCli',
]

DEFAULT_TIMEOUT = 120.0

# Unit separator between SHA and subject; never appears in a subject.
_FIELD_SEP = '\x1f'


@runtime_checkable
class GitBackend(Protocol):
    """Operations the changelog pipeline needs from version control."""

    def log_subjects(self, limit: int) -> list[LogEntry]:
        """Return up to *limit* most recent commits on HEAD, newest first."""
        ...

    def is_shallow(self) -> bool:
        """Whether the clone has truncated history."""
        ...

    def configure_identity(self, name: str, email: str) -> None:
        """Set the committer identity for this repository."""
        ...

    def add_all(self) -> None:
        """Stage every working-tree change."""
        ...

    def commit(self, message: str) -> None:
        """Commit the staged changes."""
        ...

    def push(self) -> None:
        """Push the current branch to its upstream."""
        ...


class GitCli:
    """:class:`GitBackend` backed by the ``git`` executable.

    Args:
        root: Repository working directory.
        timeout: Seconds before a single git invocation is abandoned.
    """

    def __init__(self, root: Path, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize with the repository root."""
        self.root = root
        self.timeout = timeout

    def _run(self, *args: str) -> str:
        """Run ``git <args>`` and return stdout.

        Raises:
            EmojilogError: On a non-zero exit, a timeout, or a missing
                ``git`` binary.
        """
        cmd = ['git', *args]
        logger.debug('git_run', cmd=' '.join(cmd))
        try:
            proc = subprocess.run(  # noqa: S603 - arguments are never shell-interpreted
                cmd,
                cwd=self.root,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise EmojilogError(
                ErrorCode.GIT_FAILED,
                'git executable not found',
                hint='Install git and make sure it is on PATH.',
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise EmojilogError(
                ErrorCode.GIT_FAILED,
                f'{" ".join(cmd)} timed out after {self.timeout:g} seconds',
            ) from exc

        if proc.returncode != 0:
            raise EmojilogError(
                ErrorCode.GIT_FAILED,
                f'{" ".join(cmd)} exited with {proc.returncode}: {proc.stderr.strip()}',
            )
        return proc.stdout

    def log_subjects(self, limit: int) -> list[LogEntry]:
        """Return up to *limit* most recent commits on HEAD, newest first."""
        out = self._run('--no-pager', 'log', f'-{limit}', 'HEAD', f'--format=%H{_FIELD_SEP}%s')
        entries: list[LogEntry] = []
        for line in out.splitlines():
            sha, _, subject = line.partition(_FIELD_SEP)
            entries.append(LogEntry(sha=sha, subject=subject))
        return entries

    def is_shallow(self) -> bool:
        """Whether the clone has truncated history."""
        return self._run('rev-parse', '--is-shallow-repository').strip() == 'true'

    def configure_identity(self, name: str, email: str) -> None:
        """Set ``user.name`` and ``user.email`` in the repository config."""
        self._run('config', 'user.name', name)
        self._run('config', 'user.email', email)

    def add_all(self) -> None:
        """Stage every working-tree change."""
        self._run('add', '-A')

    def commit(self, message: str) -> None:
        """Commit the staged changes."""
        self._run('commit', '-m', message)

    def push(self) -> None:
        """Push the current branch to its upstream."""
        self._run('push')
