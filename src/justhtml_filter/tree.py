"""Read-only access to the justhtml tree structure.

justhtml nodes link to their parent and keep an ordered ``children`` list;
sibling links are derived from the parent's list by identity.
"""

from __future__ import annotations

from typing import Any


def child_nodes(raw: Any) -> list[Any]:
    """Return the children of ``raw`` (empty for None, text and comment nodes)."""
    if raw is None:
        return []
    return getattr(raw, "children", None) or []


def parent_node(raw: Any) -> Any:
    if raw is None:
        return None
    return getattr(raw, "parent", None)


def sibling_node(raw: Any, step: int) -> Any:
    """Return the sibling ``step`` positions away from ``raw``, or None."""
    siblings = child_nodes(parent_node(raw))
    for index, child in enumerate(siblings):
        if child is raw:
            index += step
            if 0 <= index < len(siblings):
                return siblings[index]
            return None
    # Detached from its parent's child list.
    return None
