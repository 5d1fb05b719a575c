"""Jinja2 extensions exposing the renderers as template tags and filters.

Usage::

    env = jinja2.Environment(extensions=["sitetags.extensions.GoatExtension"])
    env.from_string("{% goat %}\\nA---B\\n{% endgoat %}").render()
"""

from __future__ import annotations

from typing import Callable

from jinja2 import Environment, nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from markupsafe import Markup

from sitetags.config import SitetagsConfig
from sitetags.filters import gravatar_hash
from sitetags.icons import ADMONITION_ICONS
from sitetags.renderers.alert import AlertRenderer, MarkdownConverter, PythonMarkdownConverter
from sitetags.renderers.goat import GoatRenderer


def get_config(environment: Environment) -> SitetagsConfig:
    """Return the environment's sitetags config, or a default one if none is attached."""
    config = getattr(environment, "sitetags_config", None)
    return config if config is not None else SitetagsConfig.from_env()


class SitetagsExtension(Extension):
    """Base for the sitetags extensions; declares the shared config on the environment."""

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        environment.extend(sitetags_config=SitetagsConfig.from_env())


class GoatExtension(SitetagsExtension):
    """``{% goat %}...{% endgoat %}``: render the body with the goat binary."""

    tags = {"goat"}

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno
        body = parser.parse_statements(("name:endgoat",), drop_needle=True)
        return nodes.CallBlock(self.call_method("_render_goat"), [], [], body).set_lineno(lineno)

    def _render_goat(self, caller: Callable[[], str]) -> Markup:
        renderer = GoatRenderer(get_config(self.environment))
        return Markup(renderer.render(str(caller())).unwrap())


class AlertExtension(SitetagsExtension):
    """``{% alert note %}...{% endalert %}``: markdown body in an alert container."""

    tags = {"alert"}

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        self.converter: MarkdownConverter = PythonMarkdownConverter(get_config(environment).markdown_extensions)

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno
        token = parser.stream.current
        if token.type not in ("name", "string"):
            parser.fail("alert tag requires a type, e.g. {% alert note %}", token.lineno)
        next(parser.stream)
        alert_type = AlertRenderer.normalize_type(token.value)
        if alert_type not in ADMONITION_ICONS:
            choices = ", ".join(ADMONITION_ICONS)
            parser.fail(f"unknown alert type '{token.value}' (expected one of: {choices})", token.lineno)
        body = parser.parse_statements(("name:endalert",), drop_needle=True)
        call = self.call_method("_render_alert", [nodes.Const(alert_type)])
        return nodes.CallBlock(call, [], [], body).set_lineno(lineno)

    def _render_alert(self, alert_type: str, caller: Callable[[], str]) -> Markup:
        renderer = AlertRenderer(alert_type, self.converter)
        return Markup(renderer.render(str(caller())).unwrap())


class DigestExtension(SitetagsExtension):
    """Registers the ``gravatar_hash`` filter."""

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        environment.filters["gravatar_hash"] = gravatar_hash
