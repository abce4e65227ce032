import os
import re
import sys
from types import MappingProxyType

from msh.resolver import search_path_dirs


def builtin_echo(args):
    """Print arguments joined by single spaces"""
    print(" ".join(args))


def builtin_pwd(args):
    """Print working directory, or nothing if it is gone"""
    try:
        print(os.getcwd())
    except OSError:
        pass


def builtin_cd(args):
    """Change directory"""
    if len(args) != 1:
        print("Invalid number of Arguments.")
        return

    path = os.path.normpath(args[0])
    if path == "~":
        path = os.getenv("HOME", "")
    if not os.path.isabs(path):
        try:
            cwd = os.getcwd()
        except OSError as e:
            print(f"Error: {e}")
            return
        path = os.path.normpath(os.path.join(cwd, path))

    try:
        os.chdir(path)
    except OSError:
        print(f"{path}: No such file or directory")


def builtin_exit(args):
    """
    Terminate the interpreter.
    No argument exits with status 1; a non-integer argument is ignored.
    """
    if not args:
        sys.exit(1)
    if not re.fullmatch(r"[+-]?[0-9]+", args[0]):
        return
    sys.exit(int(args[0]))


def make_builtin_type(registry):
    """Build the `type` handler bound to the registry it reports on."""

    def builtin_type(args):
        if not args:
            return
        name = args[0]
        if name in registry:
            print(f"{name} is a shell builtin")
            return
        for directory in search_path_dirs():
            candidate = os.path.join(directory, name)
            if os.path.exists(candidate):
                print(candidate)
                return
        print(f"{name}: not found")

    return builtin_type


def build_registry():
    """
    Create the builtin table: name -> handler(args).
    Returns: read-only mapping
    """
    builtins = {
        'echo': builtin_echo,
        'exit': builtin_exit,
        'pwd': builtin_pwd,
        'cd': builtin_cd,
    }
    registry = MappingProxyType(builtins)
    builtins['type'] = make_builtin_type(registry)
    return registry
