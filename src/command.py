""" Command to be executed. """
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExecutionFlags:
    """
    What the operators on one line asked for.

    Positions index the classified vector: input_pos and output_pos point at
    the filename word, pipe_pos at the first word of the right-hand command.
    """
    background: bool = False
    input_pos: Optional[int] = None
    output_pos: Optional[int] = None
    append: bool = False
    pipe_pos: Optional[int] = None

    @property
    def input_redirect(self) -> bool:
        return self.input_pos is not None

    @property
    def output_redirect(self) -> bool:
        return self.output_pos is not None and not self.append

    @property
    def append_redirect(self) -> bool:
        return self.output_pos is not None and self.append

    @property
    def is_pipe(self) -> bool:
        return self.pipe_pos is not None


class Command:
    """ One external program plus the files its standard streams go to. """
    def __init__(self, name, args, stdin=None, stdout=None, append=False):
        self.name = name
        self.args = args
        self.stdin = stdin        # filename or None
        self.stdout = stdout      # filename or None
        self.append = append      # True for >>

    @property
    def argv(self) -> list[str]:
        return [self.name] + self.args

    def __repr__(self):
        return (f"Command({self.name!r}, {self.args!r}, stdin={self.stdin!r}, "
                f"stdout={self.stdout!r}, append={self.append!r})")

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return (self.argv, self.stdin, self.stdout, self.append) == \
            (other.argv, other.stdin, other.stdout, other.append)
