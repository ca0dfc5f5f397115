"""Predicate-chain traversal over node handles.

A filter chain is an ordered sequence of predicates, applied as nested
conditions during one depth-first, pre-order walk:

- each node can consume at most one predicate per path; once a predicate
  accepts a node, the rest of the chain is searched for in that node's
  descendants, and the node becomes their ``match``
- a node whose remaining chain is empty is a result
- every child is also searched with the chain as it stood before the
  current node, so the first predicate can match at any depth
- ``None`` predicates are stripped up front; an empty chain matches the root
- each node appears in the result at most once, in document order
- in find mode the walk stops as soon as one result exists
- the traversal root starts without a ``match`` (so its offset is 0) and is the
  implicit initial match of its descendants; depth is kept as is
- behaviour is undefined for trees with cycles, and recursion depth follows
  tree depth

Predicates are called with handles whose ``raw`` is never ``None``; any
exception they raise propagates to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tree import child_nodes

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Any

    from .node import Node

    Predicate = Callable[[Node], bool]
    # A partially consumed chain, and the handle its last predicate accepted.
    State = tuple[tuple[Predicate, ...], Node | None]


def valid_predicates(predicates: Iterable[Predicate | None]) -> tuple[Predicate, ...]:
    """Return ``predicates`` without the ``None`` entries."""
    return tuple(p for p in predicates if p is not None)


class _Filter:
    """One traversal.

    A node can be reached by several partially consumed chains at once (one
    per way the chain has progressed along its ancestors), so each level is
    visited with the ordered list of those states rather than one chain. The
    order of the list is the order the states were created in, and the first
    state that completes at a node decides the handle that is returned for it.
    """

    __slots__ = ("find", "handle", "result")

    find: bool
    handle: type[Node]
    result: list[Node]

    def __init__(self, handle: type[Node], find: bool) -> None:
        self.handle = handle
        self.find = find
        self.result = []

    def visit(self, raw: Any, depth: int, states: list[State]) -> None:
        if self.find and self.result:
            return

        found: Node | None = None
        descend: list[State] = []
        for predicates, match in states:
            node = self.handle(raw, depth, match)

            if not predicates:
                if found is None:
                    found = node
            else:
                rest = predicates[1:]
                if predicates[0](node):
                    if rest:
                        descend.append((rest, node))
                    elif found is None:
                        found = node
                descend.append((predicates, match if match is not None else node))

            if self.find and found is not None:
                break

        if found is not None:
            self.result.append(found)
            if self.find:
                return

        if not descend:
            return
        for child in child_nodes(raw):
            self.visit(child, depth + 1, descend)


def _run(node: Node, predicates: Iterable[Predicate | None], find: bool) -> list[Node]:
    if node.raw is None:
        return []
    walker = _Filter(type(node), find)
    walker.visit(node.raw, node.depth, [(valid_predicates(predicates), None)])
    return walker.result


def filter_nodes(node: Node, *predicates: Predicate | None) -> list[Node]:
    """Return every node of the subtree rooted at ``node`` that satisfies the chain.

    The search includes ``node`` itself; see the module docstring for the
    matching rules.
    """
    return _run(node, predicates, find=False)


def find_node(node: Node, *predicates: Predicate | None) -> tuple[Node, bool]:
    """Return the first node `filter_nodes` would return, and whether there was one.

    On no match this returns an empty handle and ``False``.
    """
    found = _run(node, predicates, find=True)
    if not found:
        return type(node)(), False
    return found[0], True


def get_node(node: Node, *predicates: Predicate | None) -> Node:
    """`find_node` without the flag; an empty handle means no match."""
    return find_node(node, *predicates)[0]
