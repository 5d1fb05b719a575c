"""Block body normalisation shared by the block tags."""

from __future__ import annotations

_TERMINATORS = ("\r\n", "\n")


def strip_block_newlines(text: str) -> str:
    """Remove one line terminator from each end of a captured block body.

    A block written as ``{% goat %}\\nA---B\\n{% endgoat %}`` captures the
    newlines adjacent to the tag markers. Exactly one terminator is dropped at
    the start and one at the end; blank lines inside the body are kept.
    """
    for term in _TERMINATORS:
        if text.startswith(term):
            text = text[len(term) :]
            break
    for term in _TERMINATORS:
        if text.endswith(term):
            text = text[: -len(term)]
            break
    return text
