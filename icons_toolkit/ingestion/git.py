"""Thin wrapper around the ``git`` executable for cloning the icons repository."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from icons_toolkit.core.exceptions import GitError
from icons_toolkit.core.logging import get_logger

log = get_logger("ingestion.git")


def parse_output(raw: str) -> List[Dict[str, str]]:
    """Split git stderr into ``{level, message}`` entries."""
    out: List[Dict[str, str]] = []
    for line in raw.splitlines():
        message = line.strip()
        if not message:
            continue
        if message.startswith(("warning:", "fatal:")):
            level, _, text = message.partition(":")
            out.append({"level": level, "message": text.strip()})
        else:
            out.append({"level": "info", "message": message})
    return out


def parse_version(raw: str) -> str:
    return raw.strip().removeprefix("git version ")


class GitClient:
    """Clones branches of a single repository."""

    def __init__(self, repository: str, cmd: str = "git", verbose: bool = False):
        self.repository = repository
        self.cmd = cmd
        self.verbose = verbose
        self.version: Optional[str] = None

    def is_installed(self) -> bool:
        if self.version:
            return True
        try:
            result = subprocess.run(
                [self.cmd, "--version"],
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            if self.verbose:
                log.debug(f"git: {exc}")
            return False
        self.version = parse_version(result.stdout)
        return True

    def clone(self, directory: Path, branch: str, depth: int = 0) -> List[Dict[str, str]]:
        """Clone ``branch`` into ``directory``; returns parsed git messages."""
        if depth < 0:
            raise ValueError("depth cannot be less than 0")
        if not self.is_installed():
            raise GitError("git is not installed.")

        args = [self.cmd, "clone", "--branch", branch]
        if depth > 0:
            args += ["--depth", str(depth)]
        args += [self.repository, str(directory)]

        log.debug(f"Running {' '.join(args)}")
        result = subprocess.run(args, capture_output=True, text=True)
        messages = parse_output(result.stderr or "")
        if result.returncode != 0:
            details = "; ".join(m["message"] for m in messages if m["level"] == "fatal")
            raise GitError(f"Failed to clone '{branch}': {details or f'exit code {result.returncode}'}", messages)
        if self.verbose:
            for m in messages:
                log.debug(f"git {m['level']}: {m['message']}")
        return messages
