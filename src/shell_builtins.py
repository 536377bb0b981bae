""" Registry of builtin commands. """
import os
import sys

from exceptions import ShellExit

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("cd")
def builtin_cd(args, state):
    if not args or args[0] == "~":
        target = os.environ.get("HOME", "/")
    else:
        target = args[0]

    try:
        os.chdir(target)
        return 0
    except FileNotFoundError:
        print(f"cd: no such file or directory: {target}", file=sys.stderr)
    except NotADirectoryError:
        print(f"cd: not a directory: {target}", file=sys.stderr)
    except PermissionError:
        print(f"cd: permission denied: {target}", file=sys.stderr)
    except OSError as e:
        print(f"cd: {e.strerror}: {target}", file=sys.stderr)
    # Indicate failure due to error
    return 1


@builtin("exit")
def builtin_exit(args, state):
    try:
        status = int(args[0]) if args else 1
    except ValueError:
        print("exit: numeric argument required", file=sys.stderr)
        status = 2
    raise ShellExit(status)


@builtin("jobs")
def builtin_jobs(args, state):
    for job in state.jobs:
        status = "Done" if job.poll() else "Running"
        pids = " ".join(str(pid) for pid in job.pids)
        print(f"[{job.job_id}] {pids} {status}\t{job.line}")
    return 0
