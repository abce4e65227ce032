from dataclasses import dataclass, field
from typing import List, Optional

from msh.config import PIPE, ARG_SEPARATOR


@dataclass
class Stage:
    """One external program within a pipeline."""
    program_name: str
    arguments: List[str] = field(default_factory=list)
    process: Optional[object] = None

    @property
    def argv(self):
        return [self.program_name] + self.arguments


def has_pipe(line):
    return PIPE in line


def split_command(segment):
    """
    Split one command on literal spaces.
    Doubled spaces yield empty arguments; there is no quoting.
    Returns: (name, args)
    """
    parts = segment.strip().split(ARG_SEPARATOR)
    return parts[0], parts[1:]


def parse_pipeline(line):
    """
    Parse a command line into pipeline stages.
    Returns: list of Stage
    """
    stages = []
    for segment in line.strip().split(PIPE):
        name, args = split_command(segment)
        stages.append(Stage(name, args))
    return stages
