"""Clone stage: fresh shallow checkouts of the published icons repository."""

from __future__ import annotations

import shutil
from typing import Dict, List, Literal

from icons_toolkit.core.config import Settings
from icons_toolkit.core.exceptions import GitError
from icons_toolkit.core.logging import get_logger
from icons_toolkit.ingestion.git import GitClient

log = get_logger("clone_service")

CloneTarget = Literal["all", "main", "dev"]
CLONE_TARGETS: List[str] = ["all", "main", "dev"]


class CloneService:
    def __init__(self, settings: Settings, git: GitClient):
        self.settings = settings
        self.git = git

    def clone_branch(self, branch: str) -> List[Dict[str, str]]:
        directory = self.settings.branch_dir(branch)
        log.info(f"√ Selected branch: {branch}")
        if directory.exists():
            shutil.rmtree(directory)
            log.info(f"√ The {branch} directory was successfully removed.")
        directory.parent.mkdir(parents=True, exist_ok=True)

        log.info(f"Cloning '{branch}'...")
        messages = self.git.clone(directory, branch, depth=self.settings.CLONE_DEPTH)
        log.info(f"√ The {branch} branch was successfully cloned.")
        return messages

    def run(self, target: CloneTarget) -> Dict[str, List[Dict[str, str]]]:
        if not self.git.is_installed():
            raise GitError("git is not installed.")
        branches = ["main", "dev"] if target == "all" else [target]
        return {branch: self.clone_branch(branch) for branch in branches}
