"""Node names and attribute prefixes shared by the encoders and the node handle."""

from __future__ import annotations

DOCUMENT: str = "#document"
DOCUMENT_FRAGMENT: str = "#document-fragment"
TEXT: str = "#text"
COMMENT: str = "#comment"
DOCTYPE: str = "!doctype"

# The "#" names justhtml builds trees from; any other "#" name is not a node kind.
KNOWN_NODE_NAMES: frozenset[str] = frozenset({DOCUMENT, DOCUMENT_FRAGMENT, TEXT, COMMENT})

FOREIGN_NAMESPACES: frozenset[str] = frozenset({"svg", "math"})

# Prefixes justhtml keeps as "prefix:local" keys after foreign attribute adjustment.
FOREIGN_ATTRIBUTE_PREFIXES: frozenset[str] = frozenset({"xlink", "xml", "xmlns"})
