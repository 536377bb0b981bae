""" Table of commands running in the background. """
import os
from collections import OrderedDict


class Job:
    """ One background command line and the child processes running it. """
    def __init__(self, job_id: int, pids, line: str):
        self.job_id = job_id
        self.pids = list(pids)
        self.line = line
        self.statuses = {}        # pid -> raw wait status, None if reaped elsewhere

    @property
    def pending(self) -> list[int]:
        return [pid for pid in self.pids if pid not in self.statuses]

    @property
    def done(self) -> bool:
        return not self.pending

    def poll(self) -> bool:
        """ Reap whichever of our children have exited, without blocking. """
        for pid in self.pending:
            try:
                wpid, status = os.waitpid(pid, os.WNOHANG)
            except ChildProcessError:
                # not our child any more
                self.statuses[pid] = None
                continue
            if wpid != 0:
                self.statuses[pid] = status
        return self.done


class JobTable:
    def __init__(self):
        self.jobs = OrderedDict()
        self.next_job_id = 1

    def add(self, pids, line: str) -> Job:
        job = Job(self.next_job_id, pids, line)
        self.jobs[job.job_id] = job
        self.next_job_id += 1
        return job

    def get(self, job_id: int):
        return self.jobs.get(job_id)

    def reap(self) -> list[Job]:
        """ Poll every job; remove and return the ones that have finished. """
        finished = [job for job in self.jobs.values() if job.poll()]
        for job in finished:
            del self.jobs[job.job_id]
        if not self.jobs:
            self.next_job_id = 1
        return finished

    def __iter__(self):
        return iter(list(self.jobs.values()))

    def __len__(self):
        return len(self.jobs)
