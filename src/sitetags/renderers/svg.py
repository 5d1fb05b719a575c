"""SVG header rewriting for goat output."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# goat emits: <svg xmlns='...' version='1.1' height='H' width='W' font-family=...>
_HEADER_RE = re.compile(
    r"svg xmlns=(?P<q>['\"])http://www\.w3\.org/2000/svg(?P=q) version=(?P=q)1\.1(?P=q)"
    r" height=(?P=q)(?P<height>\d+)(?P=q) width=(?P=q)(?P<width>\d+)(?P=q)"
)


@dataclass(frozen=True)
class SvgHeader:
    """Fixed pixel dimensions declared on the renderer's opening ``<svg>`` tag."""

    height: int
    width: int
    quote: str = "'"

    @classmethod
    def parse(cls, svg: str) -> SvgHeader | None:
        m = _HEADER_RE.search(svg)
        return None if m is None else cls.from_match(m)

    @classmethod
    def from_match(cls, m: re.Match[str]) -> SvgHeader:
        return cls(height=int(m.group("height")), width=int(m.group("width")), quote=m.group("q"))

    def responsive(self, swap_axes: bool = True) -> str:
        """Header text sized by viewBox instead of fixed pixels."""
        if swap_axes:
            box = f"0 0 {self.height} {self.width}"
        else:
            box = f"0 0 {self.width} {self.height}"
        q = self.quote
        return (
            f"svg xmlns={q}{SVG_NAMESPACE}{q} version={q}1.1{q} width={q}100%{q}"
            f" viewBox={q}{box}{q} preserveAspectRatio={q}xMidYMid{q}"
        )


def make_responsive(svg: str, swap_axes: bool = True) -> str:
    """Rewrite every goat ``<svg>`` header in ``svg`` to a responsive one.

    Markup without a matching header is returned unchanged.
    """

    def _replace(m: re.Match[str]) -> str:
        header = SvgHeader.from_match(m)
        logger.debug("rewriting svg header %dx%d", header.width, header.height)
        return header.responsive(swap_axes)

    result, count = _HEADER_RE.subn(_replace, svg)
    if count == 0:
        logger.warning("svg header not recognised; leaving output unchanged")
    return result
