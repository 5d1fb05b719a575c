"""Alert (admonition) renderer: markdown body inside a titled, iconed container."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Protocol

import markdown

from sitetags.errors import UnknownAlertTypeError
from sitetags.icons import ADMONITION_ICONS, Octicon
from sitetags.renderers.base import RenderResult
from sitetags.text import strip_block_newlines


class MarkdownConverter(Protocol):
    """Anything that turns markdown source into HTML."""

    def convert(self, text: str) -> str: ...


class PythonMarkdownConverter:
    """MarkdownConverter backed by the ``markdown`` package.

    Safe to share between threads: each thread converts with its own
    ``markdown.Markdown`` instance.
    """

    def __init__(self, extensions: list[str] | None = None) -> None:
        self.extensions = list(extensions or [])
        self._local = threading.local()

    def _markdown(self) -> markdown.Markdown:
        md = getattr(self._local, "md", None)
        if md is None:
            md = markdown.Markdown(extensions=self.extensions)
            self._local.md = md
        return md

    def convert(self, text: str) -> str:
        md = self._markdown()
        # Markdown instances keep per-document state (footnotes, abbreviations)
        try:
            return md.convert(text)
        finally:
            md.reset()


class AlertRenderer:
    """Render one alert block of a fixed type.

    Args:
        alert_type: Type as written in the tag, e.g. ``"Note"``; normalised to
            lower case.
        converter: Markdown converter used for the block body.
        icons: Mapping from alert type to octicon name.

    Raises:
        UnknownAlertTypeError: If ``alert_type`` has no entry in ``icons``.
    """

    def __init__(
        self,
        alert_type: str,
        converter: MarkdownConverter,
        icons: Mapping[str, str] = ADMONITION_ICONS,
    ) -> None:
        self.alert_type = self.normalize_type(alert_type)
        if self.alert_type not in icons:
            raise UnknownAlertTypeError(self.alert_type)
        self.icon = Octicon(icons[self.alert_type])
        self.converter = converter

    @staticmethod
    def normalize_type(alert_type: str) -> str:
        """Alert type as used in class names and icon lookup: trimmed, lower case."""
        return alert_type.strip().lower()

    @property
    def title(self) -> str:
        return self.alert_type.capitalize()

    def render(self, text: str) -> RenderResult:
        body = self.converter.convert(strip_block_newlines(text))
        return RenderResult.success(
            f"<div class='markdown-alert markdown-alert-{self.alert_type}'>"
            f"<p class='markdown-alert-title'>{self.icon.to_svg()} {self.title}</p>"
            f"{body}"
            "</div>"
        )
