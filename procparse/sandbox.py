"""Run a function in a child process and judge how it ended."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable

__all__ = ["sandbox"]

_POLL_INTERVAL = 0.01


def _exit_code(exc: SystemExit) -> int:
    code = exc.code
    if code is None:
        return 0
    if isinstance(code, int):
        return code & 0xFF
    print(code, file=sys.stderr)
    return 1


def _run_child(func: Callable[[], object]) -> None:
    """Run ``func`` in the forked child and leave the process."""
    status = 0
    try:
        func()
    except SystemExit as exc:
        status = _exit_code(exc)
    except BaseException:
        status = 1
        try:
            sys.excepthook(*sys.exc_info())
        except BaseException:
            pass
    finally:
        for stream in (sys.stdout, sys.stderr):
            try:
                stream.flush()
            except BaseException:
                pass
        os._exit(status)


def _wait(pid: int, timeout: float) -> int | None:
    """Wait for ``pid``; return its status, or None when time runs out."""
    if timeout == 0:
        return os.waitpid(pid, 0)[1]
    deadline = time.monotonic() + timeout
    while True:
        reaped, status = os.waitpid(pid, os.WNOHANG)
        if reaped == pid:
            return status
        if time.monotonic() >= deadline:
            return None
        time.sleep(_POLL_INTERVAL)


def sandbox(func: Callable[[], object], timeout: int, verbose: bool) -> bool:
    """Call ``func`` in a child process and tell whether it behaved.

    The function is nice when it returns, or exits with status 0, within
    ``timeout`` seconds (0 means no limit).  It is bad when it exits with
    another status, raises, is killed by a signal or runs out of time, in
    which case it is killed.  With ``verbose`` a one-line verdict is printed.
    Raises ValueError for a negative timeout and OSError when the child
    cannot be started or waited for.
    """
    if timeout < 0:
        raise ValueError("timeout must not be negative")

    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid == 0:
        _run_child(func)

    status = _wait(pid, timeout)
    if status is None:
        os.kill(pid, signal.SIGKILL)
        os.waitpid(pid, 0)
        if verbose:
            print(f"Bad function: timed out after {timeout} seconds")
        return False

    if os.WIFEXITED(status):
        code = os.WEXITSTATUS(status)
        if code == 0:
            if verbose:
                print("Nice function!")
            return True
        if verbose:
            print(f"Bad funtion: exited  with code {code}")
        return False

    if os.WIFSIGNALED(status):
        if verbose:
            print(f"bad function: {signal.strsignal(os.WTERMSIG(status))}")
        return False

    raise OSError(f"child {pid} ended in an unknown state")