"""Octicon lookup for alert titles."""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from types import MappingProxyType

from sitetags.errors import UnknownIconError
from sitetags.types import AlertType

ADMONITION_ICONS: Mapping[str, str] = MappingProxyType(
    {
        AlertType.IMPORTANT.value: "report",
        AlertType.NOTE.value: "info",
        AlertType.TIP.value: "light-bulb",
        AlertType.WARNING.value: "alert",
        AlertType.CAUTION.value: "stop",
    }
)


@lru_cache(maxsize=1)
def load_octicon_paths() -> Mapping[str, str]:
    """Load the bundled 16px octicon path data, keyed by icon name."""
    with resources.files(__package__).joinpath("data/octicons.json").open("r", encoding="utf-8") as fh:
        return MappingProxyType(json.load(fh))


class Octicon:
    """A single 16px octicon."""

    size = 16

    def __init__(self, name: str) -> None:
        paths = load_octicon_paths()
        if name not in paths:
            raise UnknownIconError(name)
        self.name = name
        self.path = paths[name]

    def to_svg(self) -> str:
        s = self.size
        return (
            f'<svg class="octicon octicon-{self.name}" viewBox="0 0 {s} {s}" version="1.1"'
            f' width="{s}" height="{s}" aria-hidden="true"><path d="{self.path}"></path></svg>'
        )
