"""Base renderer protocol and render outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from sitetags.errors import SitetagsError


@dataclass(frozen=True)
class RenderResult:
    """Outcome of rendering one block: markup on success, an error otherwise.

    ``markup`` is empty on failure.
    """

    markup: str = ""
    error: SitetagsError | None = None

    @classmethod
    def success(cls, markup: str) -> RenderResult:
        return cls(markup=markup)

    @classmethod
    def failure(cls, error: SitetagsError) -> RenderResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> str | None:
        """Name of the error class for a failure, ``None`` on success."""
        return None if self.error is None else type(self.error).__name__

    @property
    def message(self) -> str | None:
        return None if self.error is None else str(self.error)

    def unwrap(self) -> str:
        """Return the markup, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.markup


class BlockRenderer(Protocol):
    """Protocol that all block renderers must implement."""

    def render(self, text: str) -> RenderResult:
        """Render a captured block body to markup."""
        ...
