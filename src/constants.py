DEFAULT_PROMPT = "SeaShell> "

# longest argument vector the front end will hand to the dispatcher
MAX_ARGS = 10

BACKGROUND = "&"
REDIRECT_IN = "<"
REDIRECT_OUT = ">"
REDIRECT_APPEND = ">>"
PIPE = "|"
OPERATORS = {BACKGROUND, REDIRECT_IN, REDIRECT_OUT, REDIRECT_APPEND, PIPE}

# permissions for files created by > and >>, before umask
FILE_MODE = 0o777

STDIN_FILENO = 0
STDOUT_FILENO = 1
