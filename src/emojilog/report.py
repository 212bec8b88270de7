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

"""Rich preview of a release plan, printed by ``emojilog --dry-run``."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from emojilog._types import BumpType
from emojilog.pipeline import ReleasePlan

__all__ = [
    'format_plan_table',
    'print_plan_table',
]

_KIND_STYLE: dict[BumpType, tuple[str, str]] = {
    BumpType.MAJOR: ('breaking', 'bold red'),
    BumpType.MINOR: ('feature', 'green'),
    BumpType.PATCH: ('patch', 'cyan'),
}


def print_plan_table(plan: ReleasePlan, console: Console | None = None) -> None:
    """Print the planned entry as a table, followed by the raw entry text.

    Args:
        plan: The plan to show.
        console: Rich :class:`Console` to print to.  When ``None``,
            a default ``Console()`` is created (auto-detects TTY).
    """
    if console is None:
        console = Console()

    console.print(
        f'[bold]{plan.prior_version.tag}[/] [cyan]→[/] [bold green]{plan.new_version.tag}[/] ({plan.bump.value} bump)'
    )

    table = Table(
        show_header=True,
        header_style='bold',
        show_edge=False,
        pad_edge=False,
        expand=True,
    )
    table.add_column('Kind', min_width=9)
    table.add_column('Commit', ratio=3)
    table.add_column('SHA', width=8, style='dim')

    for commit in plan.buckets.ordered():
        label, style = _KIND_STYLE.get(commit.bump, ('?', ''))
        table.add_row(Text(label, style=style), Text(commit.raw), commit.sha[:8])

    console.print(table)
    console.print()
    console.print(Text(plan.entry.rstrip('\n')))


def format_plan_table(plan: ReleasePlan, *, color: bool = False) -> str:
    """Capture :func:`print_plan_table` output as a string."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, width=120)
    print_plan_table(plan, console=console)
    return buf.getvalue().rstrip('\n')
