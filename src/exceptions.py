""" Exceptions raised inside the shell. """


class ShellExit(Exception):
    """ Raised by the exit builtin to leave the read loop. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ Base class for errors reported to the user. """


class RedirectionError(ShellError):
    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
