"""SVG icon optimization backed by scour."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from scour import scour

from icons_toolkit.core.exceptions import OptimizationError
from icons_toolkit.core.files import write_atomic
from icons_toolkit.core.logging import get_logger

log = get_logger("optimizer")

# Abbreviation of Binance ICons
DEFAULT_ID_PREFIX = "bic"
ID_DELIMITER = "__"


def scour_arguments(prefix: str) -> List[str]:
    return [
        "--enable-id-stripping",
        "--shorten-ids",
        f"--shorten-ids-prefix={prefix}{ID_DELIMITER}",
        "--enable-comment-stripping",
        "--remove-descriptive-elements",
        "--remove-metadata",
        "--strip-xml-prolog",
        "--indent=none",
        "--no-line-breaks",
    ]


def optimize_markup(markup: str, prefix: Optional[str] = None) -> str:
    """Optimize SVG markup; IDs are shortened and namespaced with ``<prefix>__``."""
    options = scour.parse_args(scour_arguments(prefix or DEFAULT_ID_PREFIX))
    return scour.scourString(markup, options)


def optimize_svg(source: Path, dest: Path, prefix: Optional[str] = None) -> None:
    try:
        markup = Path(source).read_text(encoding="utf-8")
        optimized = optimize_markup(markup, prefix)
    except Exception as exc:  # noqa: BLE001
        raise OptimizationError(str(source), str(exc)) from exc
    write_atomic(dest, optimized)
    log.debug(f"{source} -> {dest}")
