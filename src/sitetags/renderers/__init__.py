"""Block renderers behind the template tags."""

from sitetags.renderers.alert import AlertRenderer, MarkdownConverter, PythonMarkdownConverter
from sitetags.renderers.base import BlockRenderer, RenderResult
from sitetags.renderers.goat import GoatRenderer, run_command
from sitetags.renderers.svg import SvgHeader, make_responsive

__all__ = [
    "AlertRenderer",
    "BlockRenderer",
    "GoatRenderer",
    "MarkdownConverter",
    "PythonMarkdownConverter",
    "RenderResult",
    "SvgHeader",
    "make_responsive",
    "run_command",
]
