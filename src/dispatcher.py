""" Route one command line to the right executor. """
from classifier import build_commands, classify
from executor import run_command
from pipeline import run_pipeline
from shell_state import ShellState


def execute(argv: list[str], state: ShellState) -> int:
    """ Run an external command line, operators and all, and return its status. """
    line = " ".join(argv)
    vector, flags = classify(argv)
    left, right = build_commands(vector, flags)

    if flags.is_pipe:
        return run_pipeline(left, right, flags.background, state.jobs, line)
    return run_command(left, flags.background, state.jobs, line)
