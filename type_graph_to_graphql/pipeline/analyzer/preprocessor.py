"""
Preprocessor: the first phase of every emission pass.

Collapses trivial aliases into rename-table entries, drops them from the
graph that gets emitted, and classifies every scalar and enum name before a
single declaration body is produced.
"""

from __future__ import annotations

import logging

from ..config import EmitterConfig
from ..type_graph.nodes import (
    AliasNode,
    EnumNode,
    ReferenceNode,
    StringLiteralNode,
    TypeGraph,
    TypeNode,
    UnionNode,
    is_primitive,
)
from .context import EmitContext
from .doc_tags import DirectiveKind, has_doc_tag

logger = logging.getLogger(__name__)

IDENTIFIER_SCALAR = "ID"


class Preprocessor:
    """Builds the initial ``EmitContext`` for one pass over ``types``."""

    def __init__(self, types: TypeGraph, config: EmitterConfig | None = None):
        self.types = types
        self.config = config or EmitterConfig()

    def run(self) -> EmitContext:
        ctx = EmitContext(types=self.types, config=self.config)

        # First pass: collapse trivial aliases
        for name, node in self.types.items():
            if self._collapse_alias(ctx, node, name):
                logger.debug("Collapsed alias %s -> %s", name, ctx.renames[name])
                continue
            ctx.emitted[name] = node

        # Second pass: classify the names that will be declared as scalars or enums
        for name, node in ctx.emitted.items():
            if isinstance(node, EnumNode) or self._collapses_to_enum(ctx, node):
                ctx.register_enum(name)
            elif isinstance(node, AliasNode) and is_primitive(node.target):
                ctx.register_scalar(name)

        return ctx

    def _collapse_alias(self, ctx: EmitContext, node: TypeNode, name: str) -> bool:
        """Record a rename for ``node`` if it is a trivial alias."""
        if not isinstance(node, AliasNode):
            return False

        if isinstance(node.target, ReferenceNode):
            referenced = ctx.resolve(node.target.target)
            if is_primitive(referenced) or isinstance(referenced, EnumNode):
                ctx.renames[name] = node.target.target
                return True

        if has_doc_tag(node, DirectiveKind.IDENTIFIER_ALIAS):
            ctx.renames[name] = IDENTIFIER_SCALAR
            return True

        return False

    def _collapses_to_enum(self, ctx: EmitContext, node: TypeNode) -> bool:
        """Whether an alias of a union will be emitted as an enum.

        Malformed unions are left alone here; the union emitter reports them.
        """
        if not isinstance(node, AliasNode) or not isinstance(node.target, UnionNode):
            return False

        members = node.target.types
        if not members:
            return False
        if all(isinstance(m, StringLiteralNode) for m in members):
            return True
        if not isinstance(members[0], ReferenceNode):
            return False
        return isinstance(self.types.get(members[0].target), EnumNode)
