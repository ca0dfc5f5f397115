"""Predicate-chain traversal and extraction over justhtml document trees."""

import logging

from .attrs import Attribute, get_attr, get_attr_val, node_attributes
from .errors import MalformedTreeError, NoMatchError
from .filter import filter_nodes, find_node, get_node
from .node import Node, NodeType
from .parser import parse
from .serialize import encode_html, encode_text, encode_words

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Attribute",
    "MalformedTreeError",
    "NoMatchError",
    "Node",
    "NodeType",
    "encode_html",
    "encode_text",
    "encode_words",
    "filter_nodes",
    "find_node",
    "get_attr",
    "get_attr_val",
    "get_node",
    "node_attributes",
    "parse",
]
