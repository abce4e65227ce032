import pytest

from msh.history import History
from msh.shell import Shell


class FakeProcess:
    def __init__(self, returncode=0):
        self.returncode = returncode
        self.stdout = None

    def wait(self):
        return self.returncode


class RecordingLauncher:
    """Stands in for subprocess.Popen and remembers every launch."""

    def __init__(self, returncode=0, error=None):
        self.calls = []
        self.returncode = returncode
        self.error = error

    def __call__(self, argv, **kwargs):
        self.calls.append((argv, kwargs))
        if self.error is not None:
            raise self.error
        return FakeProcess(self.returncode)


@pytest.fixture
def launcher():
    return RecordingLauncher()


@pytest.fixture
def history(tmp_path):
    h = History(str(tmp_path / "history")).load()
    yield h
    h.close()


@pytest.fixture
def shell(history, launcher):
    return Shell(history=history, launcher=launcher)


@pytest.fixture
def bin_dir(tmp_path, monkeypatch):
    """A private $PATH holding one executable named `hello`."""
    d = tmp_path / "bin"
    d.mkdir()
    exe = d / "hello"
    exe.write_text("#!/bin/sh\necho hello\n")
    exe.chmod(0o755)
    monkeypatch.setenv("PATH", str(d))
    return d


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    d = tmp_path / "work"
    d.mkdir()
    monkeypatch.chdir(d)
    return d
