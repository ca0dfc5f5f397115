"""Shared fixtures for justhtml_filter tests."""

from collections.abc import Callable

import pytest
from justhtml import JustHTML

from justhtml_filter import Node, parse
from justhtml_filter.predicates import element, tag


@pytest.fixture
def document() -> Callable[[str], Node]:
    """Wrap the root of a freshly parsed, unsanitized document."""

    def build(html: str) -> Node:
        return Node(JustHTML(html, sanitize=False).root)

    return build


@pytest.fixture
def parse_element() -> Callable[[str], Node]:
    """Parse markup and return the first element inside ``<body>``."""

    def build(html: str) -> Node:
        return parse(html, tag("body"), element())

    return build
