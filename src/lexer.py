""" Lexical analysis for shell commands. """
from constants import MAX_ARGS


def tokenize(line: str, max_args: int = MAX_ARGS) -> list[str]:
    # words are separated by whitespace only; no quoting or escapes
    tokens = line.split()
    if len(tokens) > max_args:
        raise SyntaxError(f"too many arguments (limit is {max_args})")
    return tokens
