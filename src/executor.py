""" Run a single external command in a child process. """
import os
import signal
import sys

from command import Command
from constants import STDIN_FILENO, STDOUT_FILENO
from exceptions import RedirectionError
from jobs import JobTable
from redirection import apply_redirection


def flush_std_streams():
    # anything still buffered would be written a second time by the child
    for stream in (sys.stdout, sys.stderr):
        stream.flush()


def exec_child(cmd: Command, stdin_fd=None, stdout_fd=None, close_fds=()):
    """
    Turn the current (freshly forked) process into cmd. Never returns.

    stdin_fd/stdout_fd are pipe ends to install as fd 0/1 first; close_fds
    are descriptors this process has no use for. The command's own file
    redirections are applied after that, output before input, and all of it
    happens before exec. Any failure ends the process with a shell-style
    status instead of unwinding back into the interpreter.
    """
    status = 1
    try:
        for fd in close_fds:
            os.close(fd)
        if stdout_fd is not None:
            os.dup2(stdout_fd, STDOUT_FILENO)
            os.close(stdout_fd)
        if stdin_fd is not None:
            os.dup2(stdin_fd, STDIN_FILENO)
            os.close(stdin_fd)

        if cmd.stdout is not None:
            apply_redirection(cmd.stdout, "a" if cmd.append else "w")
        if cmd.stdin is not None:
            apply_redirection(cmd.stdin, "r")

        # python ignores SIGPIPE; the program we exec should not
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
        os.execvp(cmd.name, cmd.argv)
    except RedirectionError as e:
        print(e, file=sys.stderr)
    except FileNotFoundError:
        print(f"{cmd.name}: command not found", file=sys.stderr)
        status = 127
    except PermissionError:
        print(f"{cmd.name}: permission denied", file=sys.stderr)
        status = 126
    except OSError as e:
        print(f"{cmd.name}: {e.strerror}", file=sys.stderr)
        status = 126
    finally:
        sys.stderr.flush()
        os._exit(status)


def spawn(cmd: Command, stdin_fd=None, stdout_fd=None, close_fds=()) -> int:
    """ Fork a child that runs cmd and return its pid. Raises OSError if fork fails. """
    flush_std_streams()
    pid = os.fork()
    if pid == 0:
        exec_child(cmd, stdin_fd, stdout_fd, close_fds)
    return pid


def exit_status(status: int) -> int:
    """ Convert a waitpid() status to a shell exit status. """
    code = os.waitstatus_to_exitcode(status)
    if code < 0:
        # killed by signal -code
        return 128 - code
    return code


def wait_for(pid: int) -> int:
    """ Block until pid terminates and return its exit status. """
    while True:
        try:
            _, status = os.waitpid(pid, 0)
        except KeyboardInterrupt:
            # the child saw the same ^C; it decides whether to stop
            print()
            continue
        return exit_status(status)


def start_background(pids: list[int], line: str, jobs: JobTable) -> int:
    job = jobs.add(pids, line)
    job.poll()
    print(f"[{job.job_id}] {pids[-1]}")
    return 0


def run_command(cmd: Command, background: bool, jobs: JobTable, line: str = None) -> int:
    """ Run one external command, in the foreground unless background is set. """
    try:
        pid = spawn(cmd)
    except OSError as e:
        print(f"fork: {e.strerror}", file=sys.stderr)
        return 1

    if background:
        return start_background([pid], line or " ".join(cmd.argv), jobs)
    return wait_for(pid)
