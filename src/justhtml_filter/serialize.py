"""Leaf encoders: markup, text and word rendering of justhtml subtrees."""

from __future__ import annotations

from typing import Any

from .constants import KNOWN_NODE_NAMES, TEXT
from .errors import MalformedTreeError


def _check_renderable(node: Any) -> None:
    name: str | None = getattr(node, "name", None)
    if not name:
        raise MalformedTreeError(f"cannot render a node without a name: {node!r}", raw=node)
    if name.startswith("#") and name not in KNOWN_NODE_NAMES:
        raise MalformedTreeError(f"cannot render a {name} node", raw=node)

    for child in getattr(node, "children", None) or []:
        _check_renderable(child)
    template_content = getattr(node, "template_content", None)
    if template_content is not None:
        _check_renderable(template_content)


def encode_html(raw: Any) -> str:
    """Render ``raw`` and its subtree as compact markup with justhtml's serializer.

    Returns an empty string for ``None``.

    Raises:
        MalformedTreeError: If the subtree holds a node that cannot be rendered
    """
    if raw is None:
        return ""
    _check_renderable(raw)
    return raw.to_html(pretty=False)


def _collect_text(node: Any, parts: list[str]) -> None:
    if node.name == TEXT:
        if node.data:
            parts.append(node.data)
        return

    for child in node.children or []:
        _collect_text(child, parts)

    template_content = getattr(node, "template_content", None)
    if template_content is not None:
        _collect_text(template_content, parts)


def encode_text(raw: Any) -> str:
    """Concatenate the data of every text node in the subtree, without separators."""
    if raw is None:
        return ""
    parts: list[str] = []
    _collect_text(raw, parts)
    return "".join(parts)


def encode_words(raw: Any) -> str:
    """Like `encode_text`, but collapse all whitespace to single spaces.

    Every text node is split into words, and the words of the whole subtree are
    joined with one space, so ``<p> a <b>b\\n</b>c</p>`` gives ``"a b c"``.
    """
    if raw is None:
        return ""
    parts: list[str] = []
    _collect_text(raw, parts)
    words: list[str] = []
    for part in parts:
        words.extend(part.split())
    return " ".join(words)
