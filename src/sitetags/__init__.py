"""sitetags: Jinja2 tags for goat diagrams and markdown alerts, plus a gravatar filter."""

from sitetags.config import SitetagsConfig
from sitetags.errors import (
    CommandNotFoundError,
    RenderingFailedError,
    SitetagsConfigError,
    SitetagsError,
    UnknownAlertTypeError,
    UnknownIconError,
)
from sitetags.extensions import AlertExtension, DigestExtension, GoatExtension
from sitetags.filters import gravatar_hash
from sitetags.registry import create_environment, register
from sitetags.renderers.goat import GoatRenderer


def render_goat(src: str, config: SitetagsConfig | None = None) -> str:
    """Render goat diagram source to a responsive SVG fragment.

    Args:
        src: Diagram source; one leading and one trailing newline are ignored.
        config: Renderer configuration; defaults to ``SitetagsConfig.from_env()``.

    Returns:
        ``<div class="goat-svg"><svg ...>...</svg></div>``.

    Raises:
        CommandNotFoundError: If the goat executable is not installed.
        RenderingFailedError: If goat rejects the diagram.
    """
    return GoatRenderer(config or SitetagsConfig.from_env()).render(src).unwrap()


__all__ = [
    "AlertExtension",
    "CommandNotFoundError",
    "DigestExtension",
    "GoatExtension",
    "RenderingFailedError",
    "SitetagsConfig",
    "SitetagsConfigError",
    "SitetagsError",
    "UnknownAlertTypeError",
    "UnknownIconError",
    "create_environment",
    "gravatar_hash",
    "register",
    "render_goat",
]
