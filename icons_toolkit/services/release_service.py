"""Release stage: assemble the distributable directory from generated artifacts."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from icons_toolkit.core.exceptions import MissingDependencyError
from icons_toolkit.core.logging import get_logger
from icons_toolkit.services.manifest import MANIFEST_FILE

log = get_logger("release_service")


def generated_inputs(generated_dir: Path) -> List[Path]:
    """Artifacts the release copies, in copy order."""
    return [
        generated_dir / "crypto",
        generated_dir / "etf",
        generated_dir / "currency",
        generated_dir / MANIFEST_FILE,
        generated_dir / "README.md",
        generated_dir / "PREVIEW.md",
    ]


class ReleaseService:
    """Copies icons and documents into ``release/``.

    ETF icons are published next to the crypto icons, in ``release/crypto``.
    """

    def __init__(self, generated_dir: Path, release_dir: Path):
        self.generated_dir = Path(generated_dir)
        self.release_dir = Path(release_dir)

    def _empty_release_dir(self) -> None:
        if self.release_dir.exists():
            shutil.rmtree(self.release_dir)
        self.release_dir.mkdir(parents=True)

    def run(self) -> Path:
        missing: List[Path] = [path for path in generated_inputs(self.generated_dir) if not path.exists()]
        if missing:
            raise MissingDependencyError(", ".join(str(p) for p in missing), "build all")

        self._empty_release_dir()

        g, r = self.generated_dir, self.release_dir
        shutil.copytree(g / "crypto", r / "crypto", dirs_exist_ok=True)
        shutil.copytree(g / "etf", r / "crypto", dirs_exist_ok=True)
        shutil.copytree(g / "currency", r / "currency", dirs_exist_ok=True)
        for name in ("manifest.json", "README.md", "PREVIEW.md"):
            shutil.copy2(g / name, r / name)

        log.info(f"√ Release done. Can be found here: {self.release_dir}")
        return self.release_dir
