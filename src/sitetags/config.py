"""Centralized configuration for sitetags."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from sitetags.errors import SitetagsConfigError

DEFAULT_GOAT_COMMAND = "goat -sls currentColor -sds currentColor"
GOAT_COMMAND_ENV = "SITETAGS_GOAT_COMMAND"


@dataclass
class SitetagsConfig:
    """Configuration shared by the template extensions."""

    goat_command: str = DEFAULT_GOAT_COMMAND
    wrapper_class: str = "goat-svg"
    # viewBox is written as "0 0 height width" unless disabled
    swap_viewbox_axes: bool = True
    markdown_extensions: list[str] = field(default_factory=lambda: ["extra"])

    def __post_init__(self) -> None:
        if not self.goat_command.strip():
            raise SitetagsConfigError("goat_command must not be empty")

    @classmethod
    def from_env(cls) -> SitetagsConfig:
        """Build a config, taking the goat command from the environment if set."""
        config = cls()
        command = os.getenv(GOAT_COMMAND_ENV)
        if command:
            config.goat_command = command
        return config
