"""Shared fixtures: a fake workspace and a recording command runner."""

import subprocess
from pathlib import Path

import pytest

import workspace


class FakeRunner:
    """Stands in for workspace.run, answering from a table keyed by (dir name, argv)."""

    def __init__(self):
        self.calls = []
        self.responses = {}

    def respond(self, name, args, stdout="", stderr="", returncode=0):
        self.responses[(name, tuple(args))] = (stdout, stderr, returncode)

    def fail_to_start(self, name, args):
        self.responses[(name, tuple(args))] = FileNotFoundError(2, "No such file or directory", args[0])

    def __call__(self, args, cwd):
        name = Path(cwd).name
        self.calls.append((name, list(args)))
        response = self.responses.get((name, tuple(args)), ("", "", 0))
        if isinstance(response, Exception):
            raise response
        stdout, stderr, returncode = response
        return subprocess.CompletedProcess(args, returncode, stdout, stderr)

    def calls_in(self, name):
        return [args for dir_name, args in self.calls if dir_name == name]

    def ran(self, args):
        return [dir_name for dir_name, call in self.calls if call == list(args)]


@pytest.fixture
def runner(monkeypatch):
    fake = FakeRunner()
    monkeypatch.setattr(workspace, "run", fake)
    return fake


@pytest.fixture
def ws(tmp_path):
    """A workspace holding repos A, B and C plus a stray file."""
    root = tmp_path / "ws"
    root.mkdir()
    for name in ("A", "B", "C"):
        (root / name).mkdir()
    (root / "notes.txt").write_text("not a repo")
    return root
