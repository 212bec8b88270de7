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

"""Structured logging for emojilog.

Configures `structlog <https://www.structlog.org/>`_ on top of the
stdlib root logger, writing to stderr so stdout stays free for the
``--dry-run`` preview:

- **Console** (default): human-readable, colored when stderr is a TTY.
- **JSON** (``--json-log``): one JSON object per line for CI log parsers.

A run pushes with whatever token the CI runner injected, and a failed
push echoes the remote URL in git's stderr. :class:`SecretRedactor`
scrubs both the token values and any ``scheme://user:pass@`` credentials
from every event field before rendering.

Usage::

    from emojilog.logging import configure_logging, get_logger

    configure_logging(verbose=True, json_log=False)
    log = get_logger()
    log.info('version_read', version='1.2.3')
"""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

__all__ = [
    'REDACT_ENV_VAR',
    'SENSITIVE_ENV_VARS',
    'SecretRedactor',
    'configure_logging',
    'get_logger',
]

# Tokens CI runners expose to the step that pushes.
SENSITIVE_ENV_VARS: tuple[str, ...] = (
    'GITHUB_TOKEN',
    'GH_TOKEN',
    'GITLAB_TOKEN',
    'CI_JOB_TOKEN',
    'BITBUCKET_TOKEN',
    'BITBUCKET_APP_PASSWORD',
    'NPM_TOKEN',
    'GIT_PASSWORD',
)

REDACT_ENV_VAR = 'EMOJILOG_REDACT_SECRETS'

REDACTED = '[REDACTED]'

# Shorter values are too likely to collide with ordinary words.
MIN_SECRET_LENGTH = 8

_URL_CREDENTIALS = re.compile(r'(?P<scheme>\b[a-z][a-z0-9+.-]*://)[^/@\s]+@', re.IGNORECASE)


class SecretRedactor:
    """Structlog processor that scrubs secrets from string event fields.

    Args:
        secrets: Literal values to hide. Empty and short values are
            ignored.
    """

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        """Keep the secrets long enough to redact safely."""
        self.secrets = frozenset(s for s in secrets if len(s) >= MIN_SECRET_LENGTH)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> SecretRedactor:
        """Build a redactor from the current values of :data:`SENSITIVE_ENV_VARS`."""
        env = os.environ if environ is None else environ
        return cls(env.get(name, '') for name in SENSITIVE_ENV_VARS)

    def scrub(self, value: object) -> object:
        """Return *value* with credentials replaced; non-strings pass through."""
        if not isinstance(value, str):
            return value
        result = _URL_CREDENTIALS.sub(rf'\g<scheme>{REDACTED}@', value)
        for secret in self.secrets:
            result = result.replace(secret, REDACTED)
        return result

    def __call__(
        self,
        logger: Any,  # noqa: ANN401
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        """Scrub every field of *event_dict*."""
        return {key: self.scrub(value) for key, value in event_dict.items()}


def _level(*, verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def _processors(*, redact_secrets: bool) -> list[structlog.types.Processor]:
    """Processors that run before the event reaches the stdlib formatter."""
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]
    if redact_secrets and os.environ.get(REDACT_ENV_VAR, '1') != '0':
        processors.append(SecretRedactor.from_environ())
    return processors


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    redact_secrets: bool = True,
) -> None:
    """Configure structlog for an emojilog run.

    Call once at startup; calling again replaces the configuration.

    Args:
        verbose: Enable debug-level output.
        quiet: Only show warnings and errors. Wins over *verbose*.
        json_log: Render JSON lines instead of console output.
        redact_secrets: Scrub CI tokens from log output. Also disabled
            by ``EMOJILOG_REDACT_SECRETS=0``.
    """
    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=_level(verbose=verbose, quiet=quiet),
        force=True,
    )

    renderer: structlog.types.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *_processors(redact_secrets=redact_secrets),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'emojilog') -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named *name*."""
    return structlog.get_logger(name)
