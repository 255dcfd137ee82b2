"""Exception hierarchy for the toolkit.

Every failure the CLI knows how to report derives from ``ToolkitError``;
anything else is a bug and propagates with its traceback.
"""

from __future__ import annotations

from typing import List, Optional


class ToolkitError(Exception):
    """Base class for expected, user-reportable failures."""


class ConfigurationError(ToolkitError):
    """Invalid settings or an unusable configuration store."""


class CredentialsError(ConfigurationError):
    """API key or secret missing or malformed."""


class MissingDependencyError(ToolkitError):
    """An earlier stage (clone, fetch, build) has not produced its output yet."""

    def __init__(self, what: str, hint: str):
        self.what = what
        self.hint = hint
        super().__init__(f"{what} does not exist. Run '{hint}' first.")


class ManifestError(ToolkitError):
    """The published or generated manifest cannot be parsed."""


class BinanceAPIError(ToolkitError):
    """Error payload returned by the exchange API."""

    def __init__(self, code: Optional[int] = None, msg: Optional[str] = None, status_code: Optional[int] = None):
        self.code = code if code is not None else -1
        self.msg = msg or ""
        self.status_code = status_code
        super().__init__(f"Binance API error {self.code}: {self.msg}")


class GitError(ToolkitError):
    """git is missing or a clone failed."""

    def __init__(self, message: str, messages: Optional[List[dict]] = None):
        self.messages = messages or []
        super().__init__(message)


class OptimizationError(ToolkitError):
    """An SVG file could not be optimized."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"Failed to optimize {source}: {reason}")
