""" Implement the core of the shell. """
import os
import sys

from constants import DEFAULT_PROMPT, MAX_ARGS
from dispatcher import execute
from exceptions import ShellError, ShellExit
from lexer import tokenize
from shell_builtins import BUILTINS
from shell_state import ShellState


def read_command(prompt=DEFAULT_PROMPT):
    """ Read one command line. """
    return input(prompt)


def resolve_prompt(prompt=None):
    if prompt is not None:
        return prompt
    return os.environ.get("PS1", DEFAULT_PROMPT)


class Shell:
    def __init__(self, prompt=None, max_args=MAX_ARGS):
        self.state = ShellState()
        self.prompt = resolve_prompt(prompt)
        self.max_args = max_args

    def report_finished_jobs(self):
        for job in self.state.jobs.reap():
            print(f"[{job.job_id}]+ Done\t{job.line}")

    def run_line(self, line: str) -> int:
        tokens = tokenize(line, self.max_args)
        if not tokens:
            return self.state.last_status
        if tokens[0] in BUILTINS:
            return BUILTINS[tokens[0]](tokens[1:], self.state) or 0
        return execute(tokens, self.state)

    def run(self):
        while True:
            try:
                self.report_finished_jobs()
                line = read_command(self.prompt)
                status = self.run_line(line)
                self.state.set_status(status)

            except ShellExit as e:
                return e.status

            except (SyntaxError, ShellError) as e:
                print(e, file=sys.stderr)
                self.state.set_status(2)

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
