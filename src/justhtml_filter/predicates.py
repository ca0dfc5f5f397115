"""Factories for common filter predicates.

These are plain closures over `Node` handles and can be mixed freely with
hand-written lambdas in a filter chain::

    rows = table.filter_nodes(tag("tbody"), all_of(tag("tr"), at_offset(1)))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .node import NodeType

if TYPE_CHECKING:
    from collections.abc import Callable

    from .node import Node

    Predicate = Callable[[Node], bool]


def _match_equal(actual: str, expected: str) -> bool:
    return actual == expected


def _match_contains_word(actual: str, expected: str) -> bool:
    return expected in actual.split()


def _match_dash_prefix(actual: str, expected: str) -> bool:
    return actual == expected or actual.startswith(expected + "-")


def _match_prefix(actual: str, expected: str) -> bool:
    return bool(expected) and actual.startswith(expected)


def _match_suffix(actual: str, expected: str) -> bool:
    return bool(expected) and actual.endswith(expected)


def _match_substring(actual: str, expected: str) -> bool:
    return bool(expected) and expected in actual


_ATTR_OPERATORS: dict[str, Callable[[str, str], bool]] = {
    "=": _match_equal,
    "~=": _match_contains_word,
    "|=": _match_dash_prefix,
    "^=": _match_prefix,
    "$=": _match_suffix,
    "*=": _match_substring,
}


def node_type(*types: str) -> Predicate:
    """Accept nodes whose `Node.type` is one of ``types``."""
    wanted = frozenset(types)
    return lambda node: node.type in wanted


def element() -> Predicate:
    return node_type(NodeType.ELEMENT)


def tag(*names: str) -> Predicate:
    """Accept elements with one of the given tag names (case-insensitive)."""
    wanted = frozenset(name.lower() for name in names)
    return lambda node: node.tag.lower() in wanted


def has_attr(key: str, namespace: str = "") -> Predicate:
    return lambda node: node.get_attr(namespace, key) is not None


def attr(key: str, value: str, op: str = "=", namespace: str = "") -> Predicate:
    """Compare an attribute value the way CSS attribute selectors do.

    Args:
        key: Attribute key, case-insensitive when ``namespace`` is empty
        value: Value to compare against
        op: One of ``=``, ``~=``, ``|=``, ``^=``, ``$=``, ``*=``
        namespace: Attribute namespace (``"xlink"``, ``"xml"``, ``"xmlns"``)

    Raises:
        ValueError: If ``op`` is not a known operator
    """
    compare = _ATTR_OPERATORS.get(op)
    if compare is None:
        raise ValueError(f"Unsupported attribute operator: {op!r}")

    def predicate(node: Node) -> bool:
        found = node.get_attr(namespace, key)
        if found is None:
            return False
        return compare(found.value, value)

    return predicate


def has_class(name: str) -> Predicate:
    return lambda node: node.has_class(name)


def element_id(value: str) -> Predicate:
    return attr("id", value)


def at_offset(offset: int) -> Predicate:
    """Accept nodes exactly ``offset`` levels below their last match."""
    return lambda node: node.offset == offset


def all_of(*predicates: Predicate | None) -> Predicate:
    """Accept nodes every predicate accepts (``None`` entries are ignored)."""
    checks = [p for p in predicates if p is not None]
    return lambda node: all(check(node) for check in checks)


def any_of(*predicates: Predicate | None) -> Predicate:
    checks = [p for p in predicates if p is not None]
    return lambda node: any(check(node) for check in checks)


def negate(predicate: Predicate) -> Predicate:
    return lambda node: not predicate(node)
