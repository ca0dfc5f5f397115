"""Exception types raised by justhtml_filter.

Parser and stream failures are not wrapped: whatever ``justhtml`` or the
source stream raises reaches the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .node import Node


class NoMatchError(LookupError):
    """Raised when a filter chain matched nothing in the parsed document."""

    node: Node | None

    def __init__(self, message: str, node: Node | None = None) -> None:
        super().__init__(message)
        # The empty handle, so callers can keep chaining after catching.
        self.node = node


class MalformedTreeError(ValueError):
    """Raised when a node cannot be rendered as markup.

    This signals a structurally invalid tree and is not recovered from inside
    the library.
    """

    raw: Any

    def __init__(self, message: str, raw: Any = None) -> None:
        super().__init__(message)
        self.raw = raw
