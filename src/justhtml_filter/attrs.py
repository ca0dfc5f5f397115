"""Attribute lookup by namespace and key."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from .constants import FOREIGN_ATTRIBUTE_PREFIXES, FOREIGN_NAMESPACES

if TYPE_CHECKING:
    from collections.abc import Iterable


class Attribute(NamedTuple):
    namespace: str
    key: str
    value: str


def node_attributes(raw: Any) -> list[Attribute]:
    """Return the attributes of a justhtml node as namespaced tuples.

    justhtml stores adjusted foreign attributes (``xlink:href`` on an ``<svg>``
    and friends) as ``"prefix:local"`` keys; those are split back into a
    namespace and a local key. Non-elements and ``None`` have no attributes.
    """
    if raw is None:
        return []
    attrs: dict[str, str | None] | None = getattr(raw, "attrs", None)
    if not attrs:
        return []

    foreign = getattr(raw, "namespace", None) in FOREIGN_NAMESPACES
    result: list[Attribute] = []
    for name, value in attrs.items():
        namespace = ""
        key = name
        if foreign and ":" in name:
            prefix, _, local = name.partition(":")
            if prefix in FOREIGN_ATTRIBUTE_PREFIXES and local:
                namespace = prefix
                key = local
        result.append(Attribute(namespace, key, "" if value is None else str(value)))
    return result


def get_attr(namespace: str, key: str, attributes: Iterable[Attribute]) -> Attribute | None:
    """Return the first attribute matching ``namespace`` and ``key``, or None.

    The namespace must match exactly. The key is compared case-insensitively
    only when ``namespace`` is empty.
    """
    case_insensitive = namespace == ""
    if case_insensitive:
        key = key.lower()

    for attr in attributes:
        if attr.namespace != namespace:
            continue
        if case_insensitive:
            if attr.key.lower() != key:
                continue
        elif attr.key != key:
            continue
        return attr

    return None


def get_attr_val(namespace: str, key: str, attributes: Iterable[Attribute]) -> str:
    """Return the value of the attribute found by `get_attr`, or an empty string."""
    attr = get_attr(namespace, key, attributes)
    if attr is None:
        return ""
    return attr.value
