""" Current state of the shell. """
from jobs import JobTable


class ShellState:
    def __init__(self):
        self.last_status = 0
        self.jobs = JobTable()

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0
