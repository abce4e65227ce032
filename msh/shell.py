import signal
import subprocess
import sys

from msh.builtin import build_registry
from msh.config import PROMPT, INTERRUPT_HINT
from msh.executor import execute_pipeline, run_external
from msh.history import History, init_readline
from msh.parser import has_pipe, split_command
from msh.resolver import resolve


def handle_sigint(signum, frame):
    """Ctrl+C only prints a hint, it never ends the shell"""
    print(INTERRUPT_HINT, file=sys.stderr)


def install_signal_handlers():
    signal.signal(signal.SIGINT, handle_sigint)


def configure_stdio(stdin=None, stdout=None):
    """Let undecodable input bytes pass through reading, history and echo"""
    for stream in (stdin or sys.stdin, stdout or sys.stdout):
        stream.reconfigure(errors="surrogateescape")


class Shell:
    """
    One interpreter instance: builtin table, history and process launcher.
    """

    def __init__(self, history=None, launcher=subprocess.Popen, reader=input):
        self.builtins = build_registry()
        self.history = history if history is not None else History()
        self.launcher = launcher
        self.reader = reader

    def dispatch(self, line):
        """Run a line that has no pipe: history, a builtin or one external program"""
        name, args = split_command(line)

        if name == "history":
            self.history.show()
            return

        handler = self.builtins.get(name)
        if handler is not None:
            handler(args)
            return

        run_external(resolve(name), args, line, launcher=self.launcher)

    def eval(self, line):
        if not line.strip():
            return

        self.history.append(line)

        if has_pipe(line):
            execute_pipeline(line.strip(), launcher=self.launcher)
        else:
            self.dispatch(line)

    def run(self):
        """Main shell loop. Only `exit` or end of input leaves it."""
        while True:
            try:
                line = self.reader(PROMPT)
            except KeyboardInterrupt:
                print(INTERRUPT_HINT, file=sys.stderr)
                continue
            except (EOFError, OSError):
                sys.exit(1)

            self.eval(line)


def main():
    configure_stdio()
    history = History().load()
    init_readline(history.entries)
    install_signal_handlers()

    try:
        Shell(history=history).run()
    finally:
        history.close()
