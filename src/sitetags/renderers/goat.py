"""goat diagram renderer: ASCII art to responsive inline SVG via the goat binary."""

from __future__ import annotations

import logging
import shlex
import subprocess

from sitetags.config import SitetagsConfig
from sitetags.errors import CommandNotFoundError, RenderingFailedError, SitetagsConfigError, SitetagsError
from sitetags.renderers.base import RenderResult
from sitetags.renderers.svg import make_responsive
from sitetags.text import strip_block_newlines

logger = logging.getLogger(__name__)


def run_command(command: str, contents: str) -> str:
    """Run ``command`` with ``contents`` on stdin and return its stdout.

    Raises:
        SitetagsConfigError: If ``command`` is empty.
        CommandNotFoundError: If the executable cannot be found or started.
        RenderingFailedError: If the command exits with a non-zero status or
            its output is not valid UTF-8.
    """
    argv = shlex.split(command)
    if not argv:
        raise SitetagsConfigError("goat command is empty")
    logger.debug("running %s", command)
    try:
        result = subprocess.run(
            argv,
            input=contents,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
    except FileNotFoundError:
        raise CommandNotFoundError(argv[0]) from None
    except OSError as exc:
        raise CommandNotFoundError(argv[0], exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise RenderingFailedError(f"{command}: output is not valid UTF-8 ({exc})") from exc

    if result.returncode != 0:
        detail = result.stderr if result.stderr else result.stdout
        raise RenderingFailedError(f"{command}: {detail}")
    return result.stdout


class GoatRenderer:
    """Render goat diagram source to a ``<div>``-wrapped responsive SVG."""

    def __init__(self, config: SitetagsConfig | None = None) -> None:
        self.config = config or SitetagsConfig()

    def render(self, text: str) -> RenderResult:
        source = strip_block_newlines(text)
        try:
            svg = run_command(self.config.goat_command, source)
        except SitetagsError as exc:
            logger.debug("goat rendering failed: %s", exc)
            return RenderResult.failure(exc)

        markup = f'<div class="{self.config.wrapper_class}">{svg}</div>'
        return RenderResult.success(make_responsive(markup, self.config.swap_viewbox_axes))
