import sys

import readline

from msh.config import HISTORY_FILE, MAX_HISTORY


def init_readline(entries=()):
    """Configure readline line editing and seed it with past commands"""
    if not sys.stdin.isatty():
        return
    try:
        # Arrow keys walk the history
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right jump between words
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.parse_and_bind("set editing-mode emacs")

        readline.set_history_length(MAX_HISTORY)
        for entry in entries:
            readline.add_history(entry)
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


class History:
    """
    Command history backed by an append-only file.
    Immediate repeats are dropped; the file is never rewritten.
    """

    def __init__(self, path=HISTORY_FILE):
        self.path = path
        self.entries = []
        self._file = None

    def load(self):
        """Open the history file for append and read what is already there"""
        try:
            self._file = open(self.path, "a+", encoding="utf-8", errors="surrogateescape")
            self._file.seek(0)
            self.entries = [line.rstrip("\n") for line in self._file]
        except OSError as e:
            print(f"Warning: Could not load history: {e}", file=sys.stderr)
            self._file = None
        return self

    def append(self, line):
        if self.entries and self.entries[-1] == line:
            return
        self.entries.append(line)
        if self._file is None:
            return
        try:
            self._file.write(line + "\n")
            self._file.flush()
        except OSError as e:
            print(f"Warning: Could not save history: {e}", file=sys.stderr)

    def show(self):
        """Print the history, leaving out the `history` command itself"""
        for entry in self.entries:
            if entry != "history":
                print(f"- {entry}")

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
