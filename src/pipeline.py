""" Run two external commands connected by a pipe. """
import contextlib
import os
import sys

from command import Command
from executor import spawn, start_background, wait_for
from jobs import JobTable


@contextlib.contextmanager
def parent_ends(*fds):
    """
    Close the parent's copies of fds when the block exits, however it exits.

    A reader only sees end-of-input once every copy of the write end is
    closed, the parent's included.
    """
    try:
        yield fds
    finally:
        for fd in fds:
            os.close(fd)


def run_pipeline(left: Command, right: Command, background: bool, jobs: JobTable,
                 line: str = None) -> int:
    """ Run `left | right`. In the foreground, returns the right command's status. """
    if line is None:
        line = " ".join(left.argv + ["|"] + right.argv)

    try:
        read_fd, write_fd = os.pipe()
    except OSError as e:
        print(f"pipe: {e.strerror}", file=sys.stderr)
        return 1

    pids = []
    with parent_ends(read_fd, write_fd):
        try:
            # writer: stdout goes into the pipe, never reads from it
            pids.append(spawn(left, stdout_fd=write_fd, close_fds=(read_fd,)))
            # reader: stdin comes from the pipe, never writes to it
            pids.append(spawn(right, stdin_fd=read_fd, close_fds=(write_fd,)))
        except OSError as e:
            print(f"fork: {e.strerror}", file=sys.stderr)
            if pids:
                # the writer keeps running; track it so it gets reaped
                jobs.add(pids, line)
            return 1
        except KeyboardInterrupt:
            if pids:
                jobs.add(pids, line)
            raise

    if background:
        return start_background(pids, line, jobs)

    statuses = [wait_for(pid) for pid in pids]
    return statuses[-1]
