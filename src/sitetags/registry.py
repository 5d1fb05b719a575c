"""Extension registry — attach every sitetags tag and filter to a Jinja2 environment."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment
from jinja2.ext import Extension

from sitetags.config import SitetagsConfig
from sitetags.extensions import AlertExtension, DigestExtension, GoatExtension

EXTENSIONS: dict[str, type[Extension]] = {
    "goat": GoatExtension,
    "alert": AlertExtension,
    "gravatar_hash": DigestExtension,
}


def register(env: Environment, config: SitetagsConfig | None = None) -> Environment:
    """Add all sitetags extensions to ``env`` and return it.

    ``config`` replaces any config already attached to ``env``; it is set
    before the extensions are added so they are built from it.
    """
    env.sitetags_config = config or SitetagsConfig.from_env()
    for ext in EXTENSIONS.values():
        env.add_extension(ext)
    return env


def create_environment(config: SitetagsConfig | None = None, **kwargs: Any) -> Environment:
    """Build a new Jinja2 environment with sitetags registered.

    Keyword arguments are passed to :class:`jinja2.Environment`.
    """
    return register(Environment(**kwargs), config)
