"""
Type graph module.

Contains the node definitions and the JSON loader.
"""

from __future__ import annotations

from .loader import TypeGraphLoader, TypeGraphLoadError, found_schema, load_type_graph
from .nodes import (
    AliasNode,
    ArrayNode,
    DocTag,
    Documentation,
    EnumNode,
    InterfaceNode,
    LiteralObjectNode,
    MethodNode,
    PrimitiveNode,
    PropertyNode,
    ReferenceNode,
    StringLiteralNode,
    TypeGraph,
    TypeNode,
    UnionNode,
)

__all__ = [
    "AliasNode",
    "ArrayNode",
    "DocTag",
    "Documentation",
    "EnumNode",
    "InterfaceNode",
    "LiteralObjectNode",
    "MethodNode",
    "PrimitiveNode",
    "PropertyNode",
    "ReferenceNode",
    "StringLiteralNode",
    "TypeGraph",
    "TypeNode",
    "UnionNode",
    "TypeGraphLoader",
    "TypeGraphLoadError",
    "found_schema",
    "load_type_graph",
]
