"""Command-line parsing and executable lookup for the pipeline."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

from pipex.words import split_words

USAGE_MESSAGE = "argc incorrecto"
FALLBACK_DIRECTORY = "/usr/bin/"
ARGUMENT_COUNT = 4


class PipexError(Exception):
    """Base class for errors raised while setting up or running a pipeline."""


class UsageError(PipexError):
    """The command line does not hold exactly four arguments."""

    def __init__(self, message: str = USAGE_MESSAGE) -> None:
        super().__init__(message)


class CommandNotFoundError(PipexError):
    """No executable could be found for a command name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command not found: {name}")
        self.name = name


@dataclass
class PipexConfig:
    """Everything needed to run ``< infile cmd1 | cmd2 > outfile``."""

    infile: str
    cmd1: list[str]
    cmd2: list[str]
    outfile: str
    directories: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)


def find_path(env: Mapping[str, str]) -> Optional[str]:
    """Return the value of PATH in ``env``, or None when it is not set."""
    return env.get("PATH")


def path_directories(path: Optional[str]) -> list[str]:
    """Split a search path on ':' and give each directory a trailing '/'."""
    if path is None:
        return []
    return [directory + "/" for directory in split_words(path, ":")]


def resolve_command(directories: Sequence[str], name: str) -> str:
    """Find the first existing file ``directory + name``.

    The directories are tried in order, then ``/usr/bin/``. Raises
    CommandNotFoundError when nothing exists.
    """
    if not name:
        raise CommandNotFoundError(name)
    candidates = [directory + name for directory in directories]
    candidates.append(FALLBACK_DIRECTORY + name)
    for candidate in candidates:
        if os.path.exists(candidate):
            return candidate
    raise CommandNotFoundError(name)


def parse_args(argv: Sequence[str], env: Mapping[str, str]) -> PipexConfig:
    """Build a configuration from ``infile cmd1 cmd2 outfile`` and an environment."""
    if len(argv) != ARGUMENT_COUNT:
        raise UsageError()
    infile, cmd1, cmd2, outfile = argv
    return PipexConfig(
        infile=infile,
        cmd1=split_words(cmd1, " "),
        cmd2=split_words(cmd2, " "),
        outfile=outfile,
        directories=path_directories(find_path(env)),
        env=dict(env),
    )