import signal
import subprocess
import sys

from msh.parser import parse_pipeline
from msh.resolver import resolve


def command_not_found(line):
    print(f"{line}: command not found")


def run_external(path, args, line, launcher=subprocess.Popen):
    """
    Run one external program with the terminal's stdin/stdout/stderr.
    A missing program, a launch error and a failed run all report
    the same "command not found" line.
    Returns: exit_code or None if it never started
    """
    if path is None:
        command_not_found(line)
        return None

    sys.stdout.flush()
    try:
        p = launcher([path] + args)
    except (OSError, ValueError):
        command_not_found(line)
        return None

    exit_code = p.wait()
    if exit_code != 0:
        command_not_found(line)
    return exit_code


def start_stage(stage, stdin, stdout, launcher):
    path = resolve(stage.program_name)
    if path is None:
        return None
    try:
        return launcher([path] + stage.arguments, stdin=stdin, stdout=stdout)
    except (OSError, ValueError):
        return None


def stage_failed(stage):
    """Never started, or killed by a signal other than a broken pipe."""
    if stage.process is None:
        return True
    code = stage.process.returncode
    return code < 0 and code != -signal.SIGPIPE


def execute_pipeline(line, launcher=subprocess.Popen):
    """
    Execute a pipeline of external commands, e.g. "ls | grep py | wc -l".
    Every stage is started before any is waited on.
    Returns: list of Stage
    """
    stages = parse_pipeline(line)
    prev_stdout = subprocess.DEVNULL

    sys.stdout.flush()
    for idx, stage in enumerate(stages):
        last = idx == len(stages) - 1
        stage.process = start_stage(
            stage,
            stdin=prev_stdout,
            stdout=None if last else subprocess.PIPE,
            launcher=launcher,
        )

        # The child holds its own copy of the read end now
        if prev_stdout not in (subprocess.DEVNULL, None):
            prev_stdout.close()

        prev_stdout = subprocess.DEVNULL
        if stage.process is not None and not last:
            prev_stdout = stage.process.stdout or subprocess.DEVNULL

    for stage in stages:
        if stage.process is not None:
            stage.process.wait()

    if any(stage_failed(stage) for stage in stages):
        print(f"{line}: Command not found")

    return stages
