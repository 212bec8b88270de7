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

"""The changelog update pipeline.

One run walks these states::

    START → VERSION_READ → COMMITS_COLLECTED ─┬→ EXIT_NO_CHANGES
                                              └→ VERSION_BUMPED
          → CHANGELOG_WRITTEN → COMMITTED_AND_PUSHED → END

:func:`plan_release` is the pure core: prior version, changelog text
and commit subjects in; new version and new changelog text out.
:func:`run_release` adds the file writes and the git side effects.

Usage::

    from emojilog.git import GitCli
    from emojilog.pipeline import run_release

    result = run_release(config, root=Path('.'), git=GitCli(Path('.')))
    if result.plan is not None:
        print(result.plan.new_version)
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from emojilog._types import BumpType, LogEntry, Version
from emojilog.changelog import (
    DEFAULT_TIMESTAMP_FORMAT,
    prepend_entry,
    read_changelog,
    render_entry,
    write_changelog,
)
from emojilog.collect import collect_commits
from emojilog.commit_parsing import (
    CommitBuckets,
    CommitParser,
    EmojiCommitParser,
    partition_commits,
    resolve_bump,
)
from emojilog.config import EmojilogConfig
from emojilog.git import GitBackend
from emojilog.logging import get_logger
from emojilog.manifest import update_manifest
from emojilog.matching import RecordedMatcher, get_matcher, substring_match
from emojilog.publish import publish
from emojilog.version import discover_version

logger = get_logger(__name__)

__all__ = [
    'ReleasePlan',
    'RunResult',
    'RunState',
    'parser_from_config',
    'plan_release',
    'run_release',
]


class RunState(str, enum.Enum):
    """Pipeline states; each is logged as a ``state`` event when entered."""

    START = 'start'
    VERSION_READ = 'version_read'
    COMMITS_COLLECTED = 'commits_collected'
    EXIT_NO_CHANGES = 'exit_no_changes'
    VERSION_BUMPED = 'version_bumped'
    CHANGELOG_WRITTEN = 'changelog_written'
    COMMITTED_AND_PUSHED = 'committed_and_pushed'
    END = 'end'


@dataclass(frozen=True)
class ReleasePlan:
    """Everything a run will write, computed without side effects.

    Attributes:
        prior_version: Version found in the changelog.
        new_version: Version after the bump.
        bump: The bump that was applied.
        buckets: Collected commits by kind.
        entry: The rendered entry to prepend.
        changelog_text: The full new changelog document.
        timestamp: Time stamped into the entry header.
    """

    prior_version: Version
    new_version: Version
    bump: BumpType
    buckets: CommitBuckets
    entry: str
    changelog_text: str
    timestamp: datetime


@dataclass(frozen=True)
class RunResult:
    """Outcome of :func:`run_release`.

    Attributes:
        state: Last state reached. ``EXIT_NO_CHANGES`` and ``END`` are
            both successful outcomes.
        plan: The release plan, or ``None`` when there was nothing to add.
        manifest_updated: Whether the manifest version was rewritten.
        dry_run: Whether writes and git side effects were skipped.
    """

    state: RunState
    plan: ReleasePlan | None = None
    manifest_updated: bool = False
    dry_run: bool = False


def parser_from_config(config: EmojilogConfig) -> EmojiCommitParser:
    """Build the emoji parser for the configured marker set."""
    return EmojiCommitParser(
        breaking_marker=config.breaking_marker,
        feature_marker=config.feature_marker,
        excluded_markers=config.excluded_markers,
    )


def plan_release(
    prior_version: Version,
    changelog_text: str,
    commits: Iterable[LogEntry | str],
    *,
    now: datetime,
    parser: CommitParser | None = None,
    matcher: RecordedMatcher = substring_match,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> ReleasePlan | None:
    """Compute the next release from the current changelog and history.

    Args:
        prior_version: Version currently at the top of the changelog.
        changelog_text: Current changelog contents.
        commits: Recent commits, newest first.
        now: Timestamp for the entry header.
        parser: Subject parser; defaults to :class:`EmojiCommitParser`.
        matcher: "Already recorded" predicate.
        timestamp_format: ``strftime`` format for the header.

    Returns:
        A :class:`ReleasePlan`, or ``None`` if no commit qualifies.
    """
    collected = collect_commits(commits, changelog_text, parser=parser, matcher=matcher)
    if not collected:
        return None

    buckets = partition_commits(collected)
    bump = resolve_bump(buckets)
    new_version = prior_version.bump(bump)
    entry = render_entry(new_version, buckets, now, timestamp_format=timestamp_format)

    return ReleasePlan(
        prior_version=prior_version,
        new_version=new_version,
        bump=bump,
        buckets=buckets,
        entry=entry,
        changelog_text=prepend_entry(changelog_text, entry),
        timestamp=now,
    )


def run_release(
    config: EmojilogConfig,
    *,
    root: Path,
    git: GitBackend,
    now: datetime | None = None,
    dry_run: bool = False,
) -> RunResult:
    """Run the full pipeline against the repository at *root*.

    Args:
        config: Resolved settings.
        root: Repository root; config paths are relative to it.
        git: Version-control backend.
        now: Header timestamp; defaults to the current local time.
        dry_run: Plan only; write nothing and run no git mutations.

    Returns:
        A :class:`RunResult`.

    Raises:
        EmojilogError: If a file cannot be read or written, or a git
            command fails. Nothing written before the failure is undone.
    """
    if now is None:
        now = datetime.now()
    log = logger.bind(dry_run=dry_run)

    def enter(state: RunState, **fields: object) -> RunState:
        log.info('state', state=state.value, **fields)
        return state

    enter(RunState.START)

    changelog_path = root / config.changelog
    changelog_text = read_changelog(changelog_path)
    prior = discover_version(changelog_text, max_lines=config.version_scan_lines)
    enter(RunState.VERSION_READ, version=str(prior), path=str(changelog_path))

    if git.is_shallow():
        log.warning(
            'shallow_clone',
            hint='History is truncated; fetch full history (e.g. fetch-depth: 0) so no commits are missed.',
        )

    entries = git.log_subjects(config.max_commits)
    plan = plan_release(
        prior,
        changelog_text,
        entries,
        now=now,
        parser=parser_from_config(config),
        matcher=get_matcher(config.match_strategy),
        timestamp_format=config.timestamp_format,
    )
    enter(RunState.COMMITS_COLLECTED, inspected=len(entries))

    if plan is None:
        return RunResult(state=enter(RunState.EXIT_NO_CHANGES, reason='no_commits_to_add'), dry_run=dry_run)

    state = enter(
        RunState.VERSION_BUMPED,
        prior=str(prior),
        new=str(plan.new_version),
        bump=plan.bump.value,
        breaking=len(plan.buckets.breaking),
        features=len(plan.buckets.features),
        patches=len(plan.buckets.patches),
    )
    if dry_run:
        return RunResult(state=state, plan=plan, dry_run=True)

    write_changelog(changelog_path, plan.changelog_text)
    manifest_updated = update_manifest(root / config.manifest, plan.new_version)
    enter(RunState.CHANGELOG_WRITTEN, path=str(changelog_path), manifest_updated=manifest_updated)

    publish(git, plan.new_version, config, push=config.push)
    enter(RunState.COMMITTED_AND_PUSHED, pushed=config.push)

    return RunResult(state=enter(RunState.END), plan=plan, manifest_updated=manifest_updated)
