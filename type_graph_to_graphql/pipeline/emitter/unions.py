"""
Union lowering.

SDL unions can only contain object types, so string-literal unions and unions
of enums are collapsed into a single enum instead.
"""

from __future__ import annotations

from ...utils import unique
from ..analyzer.context import EmitContext
from ..errors import InvalidUnionComposition
from ..type_graph.nodes import (
    EnumNode,
    InterfaceNode,
    ReferenceNode,
    StringLiteralNode,
    UnionNode,
)
from .rendering import DeclarationRenderer


class UnionEmitter:
    """Emits the declaration for an alias whose target is a union."""

    def __init__(self, ctx: EmitContext, renderer: DeclarationRenderer):
        self.ctx = ctx
        self.renderer = renderer

    def emit(self, node: UnionNode, name: str) -> str:
        if not node.types:
            raise InvalidUnionComposition(f"Union {name} has no members")

        if all(isinstance(member, StringLiteralNode) for member in node.types):
            return self.emit_enum(name, unique(member.value for member in node.types))

        for member in node.types:
            if not isinstance(member, ReferenceNode):
                raise InvalidUnionComposition(f"GraphQL unions require that all types are references. Got a {member.kind}")

        first = self.ctx.resolve(node.types[0].target)
        if isinstance(first, EnumNode):
            values = []
            for member in node.types:
                resolved = self.ctx.resolve(member.target)
                if not isinstance(resolved, EnumNode):
                    raise InvalidUnionComposition(
                        f"Expected a union of only enums since first child is an enum. Got a {resolved.kind} ({member.target})"
                    )
                values.extend(resolved.values)
            return self.emit_enum(name, unique(values))

        if isinstance(first, InterfaceNode):
            names = []
            for member in node.types:
                resolved = self.ctx.resolve(member.target)
                if not isinstance(resolved, InterfaceNode):
                    raise InvalidUnionComposition(
                        f"Expected a union of only interfaces since first child is an interface. Got a {resolved.kind} ({member.target})"
                    )
                names.append(self.ctx.name(member.target))
            return f"union {self.ctx.name(name)} = {' | '.join(names)}"

        raise InvalidUnionComposition(f"No support for unions of type: {first.kind}")

    def emit_enum(self, name: str, values: list[str]) -> str:
        self.ctx.register_enum(name)
        return self.renderer.declaration("enum", self.ctx.name(name), values)
