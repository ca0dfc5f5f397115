"""Parse entry point: justhtml tree construction followed by a find."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from justhtml import JustHTML

from .errors import NoMatchError
from .filter import find_node
from .node import Node

if TYPE_CHECKING:
    from collections.abc import Callable

    Predicate = Callable[[Node], bool]

logger = logging.getLogger(__name__)


class Readable(Protocol):
    def read(self) -> str | bytes: ...


def _read_source(source: str | bytes | bytearray | memoryview | Readable) -> str | bytes | bytearray | memoryview:
    if isinstance(source, (str, bytes, bytearray, memoryview)):
        return source
    return source.read()


def parse(
    source: str | bytes | bytearray | memoryview | Readable,
    *predicates: Predicate | None,
    **options: Any,
) -> Node:
    """Parse ``source`` with justhtml and return the first node matching the chain.

    With no predicates this is the document node itself. Errors raised while
    reading ``source`` or by justhtml propagate unchanged.

    Args:
        source: Markup as text or bytes, or a stream with a ``read()`` method
        *predicates: Filter chain applied in find mode from the document root
        **options: Keyword arguments forwarded to ``justhtml.JustHTML``
            (for example ``encoding=`` or ``strict=``). ``sanitize`` defaults
            to False so the tree keeps every attribute, comment and element

    Returns:
        The first matching node, at depth 0 if it is the document itself

    Raises:
        NoMatchError: If nothing in the document satisfies the chain
    """
    html = _read_source(source)
    options.setdefault("sanitize", False)
    logger.debug("Parsing %s input (options: %s)", type(html).__name__, sorted(options) or "none")
    document = JustHTML(html, **options)

    node, ok = find_node(Node(document.root), *predicates)
    if not ok:
        logger.debug("No node matched a chain of %d predicates", len(predicates))
        raise NoMatchError("parse: no node matched the filter chain", node=node)
    return node
