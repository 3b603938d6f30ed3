"""Run a list of commands connected by pipes, like ``cmd1 | cmd2 | ...``."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable, Sequence

__all__ = ["picoshell"]


def _spawn(argv: Sequence[str], stdin, stdout) -> subprocess.Popen | None:
    """Start one command, or return None when it cannot be started."""
    if not argv:
        return None
    try:
        return subprocess.Popen(list(argv), stdin=stdin, stdout=stdout)
    except OSError:
        return None


def picoshell(cmds: Iterable[Sequence[str]]) -> int:
    """Run ``cmds`` as a pipeline and return its status.

    Each command's standard output feeds the next command's standard input;
    the first command reads the caller's standard input and the last one
    writes to the caller's standard output.  Every command is waited for.
    The result is 0 when all of them exited normally with status 0, and 1
    when any of them failed, was killed by a signal or could not be started.
    A command that cannot be started behaves as one that exits at once with
    status 1: the next command in the pipeline sees end of input.
    """
    commands = [list(argv) for argv in cmds]
    processes: list[subprocess.Popen] = []
    failed = False
    upstream = None
    upstream_broken = False

    for position, argv in enumerate(commands):
        is_last = position == len(commands) - 1
        if upstream is not None:
            stdin = upstream
        elif upstream_broken:
            stdin = subprocess.DEVNULL
        else:
            stdin = None
        stdout = None if is_last else subprocess.PIPE

        try:
            process = _spawn(argv, stdin, stdout)
        finally:
            if upstream is not None:
                upstream.close()

        if process is None:
            failed = True
            upstream = None
            upstream_broken = True
        else:
            processes.append(process)
            upstream = process.stdout
            upstream_broken = False

    for process in processes:
        if process.wait() != 0:
            failed = True

    return 1 if failed else 0