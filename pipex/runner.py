"""Running ``< infile cmd1 | cmd2 > outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from typing import IO, Any, Optional

from pipex.config import (
    CommandNotFoundError,
    PipexConfig,
    PipexError,
    UsageError,
    parse_args,
    resolve_command,
)

EXIT_FAILURE = 1
EXIT_COMMAND_NOT_FOUND = 127


def open_infile(path: str) -> IO[bytes]:
    """Open the input file for reading."""
    try:
        return open(path, "rb")
    except OSError as exc:
        raise PipexError(f"cannot open input file {path}: {exc.strerror}") from exc


def open_outfile(path: str) -> IO[bytes]:
    """Create or truncate the output file and open it for writing."""
    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o777)
    except OSError as exc:
        raise PipexError(f"cannot open output file {path}: {exc.strerror}") from exc
    return os.fdopen(fd, "wb")


def _spawn(
    label: str,
    executable: str,
    args: list[str],
    env: dict[str, str],
    stdin: Any,
    stdout: Any,
) -> Optional[subprocess.Popen]:
    try:
        return subprocess.Popen(
            args, executable=executable, env=env, stdin=stdin, stdout=stdout
        )
    except OSError as exc:
        print(f"execve {label}: {exc.strerror}", file=sys.stderr)
        return None


def _command_name(args: list[str]) -> str:
    return args[0] if args else ""


def run_pipeline(config: PipexConfig, infile: IO[bytes], outfile: IO[bytes]) -> list[int]:
    """Run both commands connected by a pipe and return their exit codes.

    Both executables are looked up before anything starts; a missing one
    raises CommandNotFoundError. A command that cannot be started counts
    as having exited with status 1.
    """
    first_path = resolve_command(config.directories, _command_name(config.cmd1))
    second_path = resolve_command(config.directories, _command_name(config.cmd2))
    env = dict(config.env)

    first = _spawn("cmd1", first_path, config.cmd1, env, infile, subprocess.PIPE)
    try:
        second_stdin = first.stdout if first is not None else subprocess.DEVNULL
        second = _spawn("cmd2", second_path, config.cmd2, env, second_stdin, outfile)
    finally:
        if first is not None and first.stdout is not None:
            first.stdout.close()

    first_code = first.wait() if first is not None else EXIT_FAILURE
    second_code = second.wait() if second is not None else EXIT_FAILURE
    return [first_code, second_code]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: ``pipex infile "cmd1" "cmd2" outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args, os.environ)
    except UsageError as exc:
        print(exc)
        return EXIT_FAILURE
    try:
        with open_infile(config.infile) as infile, open_outfile(config.outfile) as outfile:
            run_pipeline(config, infile, outfile)
    except CommandNotFoundError as exc:
        print(exc, file=sys.stderr)
        return EXIT_COMMAND_NOT_FOUND
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    raise SystemExit(main())