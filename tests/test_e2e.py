"""End-to-end runs against real git repositories."""

import shutil
import subprocess

import pytest

import wsbot

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is required")


def git(cwd, *args):
    return subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True).stdout


def configure(repo):
    git(repo, "config", "user.email", "tests@example.com")
    git(repo, "config", "user.name", "Tests")
    git(repo, "config", "commit.gpgsign", "false")


def commit(repo, filename, message):
    (repo / filename).write_text(message + "\n")
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", message)
    return git(repo, "log", "-1", "--format=%h").strip()


def make_repo(path):
    path.mkdir()
    git(path, "init", "-q", "-b", "main")
    configure(path)
    commit(path, "README", "initial")
    return path


@pytest.fixture
def real_ws(tmp_path, monkeypatch):
    root = tmp_path / "ws"
    root.mkdir()
    monkeypatch.setenv("SPITFIRE_WORKSPACE", str(root))
    return root


def test_heads(real_ws, capsys):
    repo = make_repo(real_ws / "api")
    sha = commit(repo, "app.py", "add app")

    wsbot.main(["heads"])

    assert capsys.readouterr().out == f"api(main)\n{sha} add app\n"


def test_checkout(real_ws, capsys):
    repo = make_repo(real_ws / "api")
    git(repo, "checkout", "-q", "-b", "feature")
    sha = commit(repo, "feature.py", "add feature")
    git(repo, "checkout", "-q", "main")

    wsbot.main(["checkout", "feature"])

    out = capsys.readouterr().out
    assert out.endswith(f"api(feature)\n{sha} add feature\n")


def test_pull_rebases_clean_repos_and_skips_dirty_ones(real_ws, tmp_path, capsys):
    origin = make_repo(tmp_path / "origin")
    commit(origin, "second.txt", "second")

    git(real_ws, "clone", "-q", str(origin), "clean")
    git(real_ws, "clone", "-q", str(origin), "dirty")
    for name in ("clean", "dirty"):
        configure(real_ws / name)
    (real_ws / "dirty" / "README").write_text("local edit\n")

    new_sha = commit(origin, "third.txt", "third")

    wsbot.main(["pull"])

    out = capsys.readouterr().out
    assert f"Rebase...clean\n{new_sha} third\nOK\n" in out
    assert "There are modified files in dirty.\n   M README\n" in out
    assert git(real_ws / "dirty", "log", "-1", "--format=%h").strip() != new_sha
    assert git(real_ws / "clean", "log", "-1", "--format=%h").strip() == new_sha
