"""Shared utilities for workspace scripts."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

WORKSPACE_ENV = "SPITFIRE_WORKSPACE"
LOG_LEVEL_ENV = "WSBOT_LOG_LEVEL"

logger = logging.getLogger(__name__)


# ── Errors ───────────────────────────────────────────────────────────


class WsbotError(Exception):
    """Base exception for wsbot errors."""


class WorkspaceError(WsbotError):
    """The workspace is not configured or cannot be read."""


class CommandError(WsbotError):
    """An external command failed to start or exited non-zero."""

    def __init__(self, args, cwd, returncode=None, stdout="", stderr=""):
        self.args_list = list(args)
        self.cwd = Path(cwd)
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        super().__init__(str(self))

    def __str__(self) -> str:
        status = "could not be started" if self.returncode is None else f"exit status {self.returncode}"
        message = f"`{' '.join(self.args_list)}` failed in {self.cwd.name} ({status})"
        if self.stderr.strip():
            message += f"\n{self.stderr.strip()}"
        return message

    @property
    def output(self) -> str:
        """Everything the command printed, stdout first."""
        return "".join(part for part in (self.stdout, self.stderr) if part)


# ── Rendering helpers ────────────────────────────────────────────────


class Colors:
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    BOLD = "\033[1;37m"
    RESET = "\033[0m"


def supports_color() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def c(color: str, text: str) -> str:
    if supports_color():
        return f"{color}{text}{Colors.RESET}"
    return text


def print_failure(err: object) -> None:
    print(c(Colors.RED, str(err)))


def exit_with_error(err: object) -> None:
    print(c(Colors.RED, f"Error: {err}"))
    sys.exit(1)


def split_head(line: str) -> tuple[str, str]:
    """Split a oneline log entry into (short id, message)."""
    parts = line.strip().split(" ", 1)
    return parts[0], parts[1] if len(parts) > 1 else ""


def print_head(name: str, head: str, branch: str) -> None:
    sha, message = split_head(head)
    print(f"{c(Colors.BOLD, name)}({branch})")
    print(f"{c(Colors.YELLOW, sha)} {c(Colors.CYAN, message)}")


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ── Workspace ────────────────────────────────────────────────────────


def get_workspace() -> Path:
    """Return the workspace root from the environment."""
    value = os.environ.get(WORKSPACE_ENV, "")
    if not value:
        raise WorkspaceError(f"{WORKSPACE_ENV} is not set")
    return Path(value)


def get_dirs(workspace: Path) -> list[str]:
    """Return the names of the directories directly inside the workspace.

    Entries come back in filesystem order. Symlinks are not followed.
    """
    try:
        entries = list(os.scandir(workspace))
    except OSError as e:
        raise WorkspaceError(f"Cannot read workspace {workspace}: {e.strerror or e}") from e

    return [entry.name for entry in entries if entry.is_dir(follow_symlinks=False)]


# ── Command execution ────────────────────────────────────────────────


def run(args, cwd):
    logger.debug("Running %s in %s", " ".join(args), cwd)
    return subprocess.run(args, cwd=cwd, capture_output=True, text=True)


def check(args: list[str], cwd: Path) -> str:
    """Run a command and return its stdout, raising CommandError on failure."""
    try:
        result = run(args, cwd)
    except OSError as e:
        raise CommandError(args, cwd, stderr=str(e)) from e

    if result.returncode != 0:
        raise CommandError(
            args,
            cwd,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result.stdout


# ── Git operations ───────────────────────────────────────────────────


def git_status(path: Path) -> str:
    return check(["git", "status", "-s"], cwd=path)


def git_pull(path: Path) -> str:
    return check(["git", "pull", "--rebase"], cwd=path)


def git_current_head(path: Path) -> str:
    """Return the `<short id> <message>` line of the checked out commit."""
    out = check(["git", "log", "HEAD~1..", "--oneline"], cwd=path)
    return out.split("\n")[0]


def git_current_branch(path: Path) -> str:
    return check(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=path).strip()


def git_commits_since(path: Path, commit: str) -> str:
    return check(["git", "log", f"{commit}..", "--oneline"], cwd=path)


def git_checkout(path: Path, ref: str) -> str:
    return check(["git", "checkout", ref], cwd=path)
