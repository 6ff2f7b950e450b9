"""
Expression lowering: type graph node -> SDL type expression.
"""

from __future__ import annotations

from ...utils import sanitize_identifier
from ..analyzer.context import EmitContext
from ..analyzer.flattener import InterfaceFlattener
from ..errors import UnsupportedNodeKind
from ..type_graph.nodes import (
    ArrayNode,
    InterfaceNode,
    LiteralObjectNode,
    PrimitiveNode,
    ReferenceNode,
    TypeNode,
)

# Integer vs float and ID vs string can't be told apart from the graph alone;
# only aliases tagged as identifiers become ``ID`` (through the rename table).
PRIMITIVE_SCALARS = {
    "string": "String",
    "number": "Float",
    "boolean": "Boolean",
}


class ExpressionLowerer:
    """Converts nodes into SDL type expressions."""

    def __init__(self, ctx: EmitContext, flattener: InterfaceFlattener):
        self.ctx = ctx
        self.flattener = flattener

    def lower(self, node: TypeNode | None) -> str:
        if node is None:
            return ""
        if isinstance(node, PrimitiveNode) and node.type_name in PRIMITIVE_SCALARS:
            return PRIMITIVE_SCALARS[node.type_name]
        if isinstance(node, ReferenceNode):
            return self.ctx.name(node.target)
        if isinstance(node, ArrayNode):
            return f"[{' | '.join(self.lower(element) for element in node.elements)}]"
        if isinstance(node, (LiteralObjectNode, InterfaceNode)):
            members = self.flattener.collect_members(node) or [self.flattener.placeholder()]
            return ", ".join(f"{sanitize_identifier(m.name)}: {self.lower(m.signature)}" for m in members)
        raise UnsupportedNodeKind(node.kind, "an expression")
