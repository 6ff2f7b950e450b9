"""
Type graph node definitions.

These nodes describe the declared data shapes handed over by the front end.
The graph itself is a plain ``dict`` from symbol name to node; insertion
order is the output order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..analyzer.doc_tags import Annotations


@dataclass
class DocTag:
    """A single documentation tag, e.g. ``@graphql key id``."""

    title: str = ""
    description: str = ""


@dataclass
class Documentation:
    """Documentation block attached to a node."""

    tags: list[DocTag] = field(default_factory=list)


@dataclass(eq=False)
class TypeNode:
    """Base class for all type graph nodes.

    Nodes compare by identity: two structurally equal interfaces declared
    under different names are still different types.
    """

    kind = ""


@dataclass(eq=False)
class DocumentedNode(TypeNode):
    """A node that can carry documentation tags."""

    documentation: Documentation | None = None

    @cached_property
    def annotations(self) -> Annotations:
        """Directive annotations parsed from the ``graphql`` doc tags.

        Parsed on first access and cached on the node, so every emission site
        sees the same resolved values.
        """
        from ..analyzer.doc_tags import Annotations

        return Annotations.from_documentation(self.documentation)


@dataclass(eq=False)
class PrimitiveNode(TypeNode):
    """A primitive leaf: ``string``, ``number``, ``boolean`` or ``any``."""

    KINDS = ("string", "number", "boolean", "any")

    type_name: str = "string"

    @property
    def kind(self) -> str:
        return self.type_name


@dataclass(eq=False)
class StringLiteralNode(TypeNode):
    """A string literal; only meaningful as a union member."""

    kind = "string literal"

    value: str = ""


@dataclass(eq=False)
class ReferenceNode(TypeNode):
    """A reference to another top-level symbol."""

    kind = "reference"

    target: str = ""


@dataclass(eq=False)
class ArrayNode(TypeNode):
    """A list type. More than one element lowers to a union-typed list."""

    kind = "array"

    elements: list[TypeNode] = field(default_factory=list)


@dataclass(eq=False)
class EnumNode(TypeNode):
    """An enum with ordered string values."""

    kind = "enum"

    values: list[str] = field(default_factory=list)


@dataclass(eq=False)
class UnionNode(TypeNode):
    """A union of string literals, enum references or interface references."""

    kind = "union"

    types: list[TypeNode] = field(default_factory=list)


@dataclass(eq=False)
class PropertyNode(DocumentedNode):
    """A named field."""

    kind = "property"

    name: str = ""
    signature: TypeNode | None = None
    optional: bool = False


@dataclass(eq=False)
class MethodNode(DocumentedNode):
    """A field with arguments. At most one parameter can be lowered."""

    kind = "method"

    name: str = ""
    parameters: dict[str, TypeNode] = field(default_factory=dict)
    returns: TypeNode | None = None
    optional: bool = False


@dataclass(eq=False)
class LiteralObjectNode(TypeNode):
    """An anonymous object type."""

    kind = "literal object"

    members: list[PropertyNode] = field(default_factory=list)


@dataclass(eq=False)
class InterfaceNode(DocumentedNode):
    """A named object type with optional single inheritance."""

    kind = "interface"

    members: list[PropertyNode | MethodNode] = field(default_factory=list)
    inherits: list[str] = field(default_factory=list)
    concrete: bool = False


@dataclass(eq=False)
class AliasNode(DocumentedNode):
    """A named alias for another type expression."""

    kind = "alias"

    target: TypeNode | None = None


Member = Union[PropertyNode, MethodNode]

TypeGraph = dict[str, TypeNode]


def is_primitive(node: TypeNode | None) -> bool:
    """Return True for ``string``, ``number``, ``boolean`` and ``any`` nodes."""
    return isinstance(node, PrimitiveNode)
