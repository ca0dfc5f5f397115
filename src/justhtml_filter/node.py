"""The `Node` handle: a justhtml node plus traversal metadata.

A handle with ``raw=None`` is the empty handle. Every method accepts it and
returns the intuitive default (another empty handle, ``""``, ``0``,
``False``), which keeps long navigation chains free of ``None`` checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .attrs import Attribute, get_attr, get_attr_val, node_attributes
from .constants import COMMENT, DOCTYPE, DOCUMENT, DOCUMENT_FRAGMENT, TEXT
from .filter import filter_nodes, find_node, get_node
from .serialize import encode_html, encode_text, encode_words
from .tree import child_nodes, parent_node, sibling_node

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    Predicate = Callable[["Node"], bool]


class NodeType:
    """Node kinds, named after the justhtml node names they come from."""

    ERROR: str = ""  # no node, or a node justhtml would never produce
    DOCUMENT: str = DOCUMENT
    DOCUMENT_FRAGMENT: str = DOCUMENT_FRAGMENT
    ELEMENT: str = "element"
    TEXT: str = TEXT
    COMMENT: str = COMMENT
    DOCTYPE: str = DOCTYPE


_NAMED_TYPES: frozenset[str] = frozenset({DOCUMENT, DOCUMENT_FRAGMENT, TEXT, COMMENT, DOCTYPE})


@dataclass(frozen=True, slots=True, repr=False)
class Node:
    """Immutable handle on a justhtml node.

    Attributes:
        raw: The underlying justhtml node, or None for the empty handle
        depth: Depth relative to the root of the call that produced the handle
        match: The last handle a predicate accepted on the way here, if any
    """

    raw: Any = None
    depth: int = 0
    match: Node | None = None

    def __repr__(self) -> str:
        if self.raw is None:
            return "Node()"
        label = self.tag or self.type
        return f"Node({label!r}, depth={self.depth}, offset={self.offset})"

    def __str__(self) -> str:
        return self.outer_html()

    def __bool__(self) -> bool:
        return self.raw is not None

    # -- metadata -----------------------------------------------------------

    @property
    def type(self) -> str:
        """One of the `NodeType` values; `NodeType.ERROR` for the empty handle."""
        if self.raw is None:
            return NodeType.ERROR
        name: str | None = getattr(self.raw, "name", None)
        if not name:
            return NodeType.ERROR
        if name in _NAMED_TYPES:
            return name
        if name.startswith("#"):
            return NodeType.ERROR
        return NodeType.ELEMENT

    @property
    def tag(self) -> str:
        """The tag name of an element, otherwise an empty string."""
        if self.type == NodeType.ELEMENT:
            return str(self.raw.name)
        return ""

    @property
    def offset(self) -> int:
        """How far below its last match this handle sits (0 without a match)."""
        if self.match is None:
            return 0
        return self.depth - self.match.depth

    @property
    def match_depth(self) -> int:
        return self.offset

    # -- attributes ---------------------------------------------------------

    @property
    def attrs(self) -> list[Attribute]:
        return node_attributes(self.raw)

    def get_attr(self, namespace: str, key: str) -> Attribute | None:
        """Return the first attribute with this namespace and key, or None.

        The key is case-insensitive when ``namespace`` is empty.
        """
        return get_attr(namespace, key, self.attrs)

    def get_attr_val(self, namespace: str, key: str) -> str:
        return get_attr_val(namespace, key, self.attrs)

    def classes(self) -> list[str]:
        """The whitespace-separated tokens of the ``class`` attribute."""
        return self.get_attr_val("", "class").split()

    def has_class(self, name: str) -> bool:
        if not name:
            return False
        return name in self.classes()

    # -- encoding -----------------------------------------------------------

    def outer_html(self) -> str:
        """Render this node and its subtree as markup (empty for the empty handle).

        Raises:
            MalformedTreeError: If the subtree cannot be rendered
        """
        return encode_html(self.raw)

    def outer_text(self) -> str:
        """Concatenate every text node of the subtree, this node included."""
        return encode_text(self.raw)

    def outer_words(self) -> str:
        return encode_words(self.raw)

    def inner_html(self, *predicates: Predicate | None) -> str:
        """Concatenate the markup of every child satisfying the chain."""
        return "".join(child.outer_html() for child in self.iter_children(*predicates))

    def inner_text(self, *predicates: Predicate | None) -> str:
        """Concatenate the text of every child satisfying the chain."""
        return "".join(child.outer_text() for child in self.iter_children(*predicates))

    # -- filtering ----------------------------------------------------------

    def filter_nodes(self, *predicates: Predicate | None) -> list[Node]:
        """All nodes of this subtree (receiver included) matching the chain."""
        return filter_nodes(self, *predicates)

    def find_node(self, *predicates: Predicate | None) -> tuple[Node, bool]:
        """The first node `filter_nodes` would return, plus a found flag."""
        return find_node(self, *predicates)

    def get_node(self, *predicates: Predicate | None) -> Node:
        """`find_node` without the flag, for chaining."""
        return get_node(self, *predicates)

    def _satisfies(self, predicates: tuple[Predicate | None, ...]) -> bool:
        return find_node(self, *predicates)[1]

    # -- navigation ---------------------------------------------------------

    def parent(self, *predicates: Predicate | None) -> Node:
        """The closest ancestor satisfying the chain.

        Depth is decremented once per step, including the final step to an
        empty handle when nothing matches.
        """
        node = self
        while True:
            raw = parent_node(node.raw)
            node = Node(raw, node.depth - 1, node.match)
            if raw is None or node._satisfies(predicates):
                return node

    def first_child(self, *predicates: Predicate | None) -> Node:
        """The leftmost child satisfying the chain; depth is incremented."""
        children = child_nodes(self.raw)
        node = Node(children[0] if children else None, self.depth + 1, self.match)
        if node.raw is None or node._satisfies(predicates):
            return node
        return node.next_sibling(*predicates)

    def last_child(self, *predicates: Predicate | None) -> Node:
        """The rightmost child satisfying the chain; depth is incremented."""
        children = child_nodes(self.raw)
        node = Node(children[-1] if children else None, self.depth + 1, self.match)
        if node.raw is None or node._satisfies(predicates):
            return node
        return node.prev_sibling(*predicates)

    def next_sibling(self, *predicates: Predicate | None) -> Node:
        """The closest following sibling satisfying the chain."""
        return self._step(1, predicates)

    def prev_sibling(self, *predicates: Predicate | None) -> Node:
        """The closest preceding sibling satisfying the chain."""
        return self._step(-1, predicates)

    def _step(self, step: int, predicates: tuple[Predicate | None, ...]) -> Node:
        node = self
        while True:
            raw = sibling_node(node.raw, step)
            node = Node(raw, node.depth, node.match)
            if raw is None or node._satisfies(predicates):
                return node

    def iter_children(self, *predicates: Predicate | None) -> Iterator[Node]:
        """Yield the children satisfying the chain, in document order."""
        for raw in child_nodes(self.raw):
            node = Node(raw, self.depth + 1, self.match)
            if node._satisfies(predicates):
                yield node

    def children(self, *predicates: Predicate | None) -> list[Node]:
        return list(self.iter_children(*predicates))

    def range(self, fn: Callable[[int, Node], bool] | None, *predicates: Predicate | None) -> None:
        """Call ``fn(index, child)`` for each child satisfying the chain.

        Iteration stops early once ``fn`` returns False.

        Raises:
            TypeError: If ``fn`` is None
        """
        if fn is None:
            raise TypeError("Node.range requires a callback")
        for index, node in enumerate(self.iter_children(*predicates)):
            if fn(index, node) is False:
                break

    def _siblings(self) -> tuple[list[Any], int]:
        siblings = child_nodes(parent_node(self.raw))
        for index, raw in enumerate(siblings):
            if raw is self.raw:
                return siblings, index
        return [], 0

    def _count(self, raws: list[Any], predicates: tuple[Predicate | None, ...]) -> int:
        return sum(1 for raw in raws if Node(raw, self.depth, self.match)._satisfies(predicates))

    def sibling_index(self, *predicates: Predicate | None) -> int:
        """The number of preceding siblings satisfying the chain."""
        siblings, index = self._siblings()
        return self._count(siblings[:index], predicates)

    def sibling_length(self, *predicates: Predicate | None) -> int:
        """The number of siblings satisfying the chain, plus the receiver itself.

        The receiver is counted whether or not it satisfies the chain, unless it
        is the empty handle, for which this returns 0.
        """
        if self.raw is None:
            return 0
        siblings, index = self._siblings()
        return self._count(siblings[:index], predicates) + 1 + self._count(siblings[index + 1 :], predicates)
