import os

PROMPT = "$ "

# History: one entry per line, append-only
HISTORY_FILE = os.path.expanduser("~/.msh_history")
MAX_HISTORY = 1000  # readline navigation only, the file is never truncated

PIPE = "|"
ARG_SEPARATOR = " "

INTERRUPT_HINT = "\nType 'exit' to leave the shell."
