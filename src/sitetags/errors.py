"""sitetags exception hierarchy."""

from __future__ import annotations


class SitetagsError(Exception):
    """Base exception for all sitetags errors."""


class SitetagsConfigError(SitetagsError):
    """Raised for invalid configuration."""


class CommandNotFoundError(SitetagsError):
    """Raised when the external renderer executable cannot be started."""

    def __init__(self, command: str, reason: str | None = None) -> None:
        if reason:
            super().__init__(f"cannot run {command}: {reason}")
        else:
            super().__init__(f"command not found: {command}")
        self.command = command


class RenderingFailedError(SitetagsError):
    """Raised when the external renderer exits with a non-zero status."""


class UnknownAlertTypeError(SitetagsError):
    """Raised for an alert block whose type has no icon."""

    def __init__(self, alert_type: str) -> None:
        super().__init__(f"unknown alert type '{alert_type}'")
        self.alert_type = alert_type


class UnknownIconError(SitetagsError):
    """Raised when an octicon name is not in the bundled icon set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown octicon '{name}'")
        self.name = name
