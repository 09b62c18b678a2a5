"""Run ``cmd1 < infile | cmd2 > outfile`` as two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipex.paths import find_path, get_cmd
from pipex.textutil import split_words

ERR_INFILE = "Infile"
ERR_OUTFILE = "Outfile"
ERR_INPUT = "Invalid number of arguments.\n"
ERR_PIPE = "Pipe"
ERR_FORK = "Fork"
ERR_CMD = "Command not found\n"

_NOT_FOUND_STATUS = 1


class PipexError(Exception):
    """A setup step of the pipeline failed; the message reads ``label: reason``."""

    def __init__(self, label: str, reason: str) -> None:
        super().__init__(f"{label}: {reason}")
        self.label = label
        self.reason = reason


def _report(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()


def _spawn(
    command: str,
    search_dirs: Sequence[str],
    stdin: int,
    stdout: int,
    env: Mapping[str, str],
) -> subprocess.Popen | None:
    """Start ``command`` with the given descriptors, or report why it cannot run."""
    args = split_words(command, " ")
    executable = get_cmd(search_dirs, args[0]) if args else None
    if executable is None:
        _report(ERR_CMD)
        return None
    try:
        return subprocess.Popen(
            args,
            executable=executable,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError as exc:
        _report(f"{args[0]}: {exc.strerror}\n")
        return None


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> tuple[int, int]:
    """Run ``cmd1`` reading ``infile`` piped into ``cmd2`` writing ``outfile``.

    Returns the exit status of each command; a command that cannot be found
    reports on standard error and counts as status 1. Failing to open the
    files, create the pipe or find ``PATH`` raises :class:`PipexError`.
    """
    environment = os.environ if env is None else env
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        raise PipexError(ERR_INFILE, exc.strerror or str(exc)) from exc
    opened = [in_fd]
    try:
        try:
            out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        except OSError as exc:
            raise PipexError(ERR_OUTFILE, exc.strerror or str(exc)) from exc
        opened.append(out_fd)
        try:
            read_end, write_end = os.pipe()
        except OSError as exc:
            raise PipexError(ERR_PIPE, exc.strerror or str(exc)) from exc
        opened.extend((read_end, write_end))
        try:
            search_dirs = split_words(find_path(environment), ":")
        except KeyError as exc:
            raise PipexError("PATH", "variable not set") from exc

        first = _spawn(cmd1, search_dirs, in_fd, write_end, environment)
        second = _spawn(cmd2, search_dirs, read_end, out_fd, environment)
        os.close(read_end)
        os.close(write_end)
        opened.remove(read_end)
        opened.remove(write_end)
        status1 = first.wait() if first is not None else _NOT_FOUND_STATUS
        status2 = second.wait() if second is not None else _NOT_FOUND_STATUS
        return status1, status2
    finally:
        for fd in opened:
            os.close(fd)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _report(ERR_INPUT)
        return 1
    infile, cmd1, cmd2, outfile = args
    try:
        run_pipeline(infile, cmd1, cmd2, outfile)
    except PipexError as exc:
        _report(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())