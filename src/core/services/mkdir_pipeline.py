"""Orchestration of the read -> mkdir flow.

The CLI delegates the whole flow to `run_mkdir`, which keeps side-effects
(printing, exit codes) out of the core logic and lets tests drive it with an
in-memory stream and a fake `DirectoryCreator`.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from adapters.filesystem import OsDirectoryCreator
from adapters.stdin_reader import read_line
from core.config import AppSettings
from core.domain.models import MkdirOutcome
from core.interfaces.filesystem import DirectoryCreator

logger = logging.getLogger(__name__)


def run_mkdir(
    stream: BinaryIO | None,
    *,
    creator: DirectoryCreator | None = None,
    settings: AppSettings | None = None,
) -> MkdirOutcome:
    """Read one line from `stream` and create a directory named after it.

    `ReadFailure` propagates to the caller. The creation outcome is returned
    for inspection but never raised.
    """

    settings = settings or AppSettings()
    creator = creator or OsDirectoryCreator()

    line = read_line(stream, encoding=settings.encoding)
    if line.has_line_terminator:
        logger.debug("Path %r keeps its trailing line terminator", line.text)

    outcome = creator.create(line.text)
    if not outcome.created:
        logger.debug("Ignoring mkdir failure for %r: %s", outcome.path, outcome.error)
    return outcome
