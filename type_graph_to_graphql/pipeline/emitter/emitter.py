"""
Top-level schema emission.

``Emitter`` is the entry point: it preprocesses the graph and then emits one
SDL block per remaining top-level symbol, in declaration order. Each call to
``emit_all`` runs a fresh ``EmissionPass`` with its own ``EmitContext``.
"""

from __future__ import annotations

import io
import logging
from typing import Protocol

from ...utils import sanitize_identifier
from ..analyzer.context import EmitContext
from ..analyzer.doc_tags import DirectiveKind, get_doc_tag, has_doc_tag, node_annotations
from ..analyzer.flattener import InterfaceFlattener
from ..analyzer.preprocessor import Preprocessor
from ..config import EmitterConfig
from ..errors import TooManyParameters, UnsupportedNodeKind
from ..type_graph.nodes import (
    AliasNode,
    EnumNode,
    InterfaceNode,
    Member,
    MethodNode,
    PropertyNode,
    ReferenceNode,
    TypeGraph,
    TypeNode,
    UnionNode,
    is_primitive,
)
from .crud import CrudArtifactGenerator
from .expressions import ExpressionLowerer
from .rendering import DeclarationRenderer
from .unions import UnionEmitter

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


class EmissionPass:
    """Emits the top-level declarations of one pass.

    Valid for exactly one pass: the context it holds accumulates the scalar
    and enum names registered while emitting.
    """

    def __init__(self, ctx: EmitContext, renderer: DeclarationRenderer):
        self.ctx = ctx
        self.renderer = renderer
        self.flattener = InterfaceFlattener(ctx)
        self.lowerer = ExpressionLowerer(ctx, self.flattener)
        self.unions = UnionEmitter(ctx, renderer)
        self.crud = CrudArtifactGenerator(ctx, self.flattener, self.lowerer, renderer)

    def emit_top_level_node(self, node: TypeNode, name: str) -> str:
        if isinstance(node, AliasNode):
            return self.emit_alias(node, name)
        if isinstance(node, InterfaceNode):
            return self.emit_interface(node, name)
        if isinstance(node, EnumNode):
            return self.emit_enum(node, name)
        raise UnsupportedNodeKind(node.kind, "a top level node")

    def emit_alias(self, node: AliasNode, name: str) -> str:
        if is_primitive(node.target):
            self.ctx.register_scalar(name)
            return f"scalar {self.ctx.name(name)}"
        if isinstance(node.target, ReferenceNode):
            return f"union {self.ctx.name(name)} = {self.ctx.name(node.target.target)}"
        if isinstance(node.target, UnionNode):
            return self.unions.emit(node.target, name)
        kind = node.target.kind if node.target is not None else "nothing"
        raise UnsupportedNodeKind(kind, "an alias")

    def emit_enum(self, node: EnumNode, name: str) -> str:
        return self.unions.emit_enum(name, list(node.values))

    def emit_interface(self, node: InterfaceNode, name: str) -> str:
        # SDL types can't inherit, so every declaration is denormalized
        members = self.flattener.denormalized_members(node)
        lines = [self._member_line(member) for member in members]
        annotations = node.annotations
        type_name = self.ctx.name(name)

        if has_doc_tag(node, DirectiveKind.SCHEMA_ROOT):
            return self.renderer.block("schema", lines)
        if has_doc_tag(node, DirectiveKind.INPUT_ROLE):
            return self.renderer.declaration("input", type_name, lines)

        if node.concrete:
            decorators = annotations.render_keys() + annotations.render_cost() + annotations.render_directives()
            blocks = [self.renderer.declaration("type", type_name, lines, decorators)]
            if self.ctx.config.emit_crud_artifacts and not self.ctx.config.is_reserved_type_name(name):
                blocks.extend(self.crud.generate(node, type_name))
            return "\n\n".join(blocks)

        blocks = [self.renderer.declaration("interface", type_name, lines)]
        fragment = get_doc_tag(node, DirectiveKind.FRAGMENT)
        if fragment:
            blocks.append(self.renderer.block(fragment, [member.name for member in members]))
        return "\n\n".join(blocks)

    def _member_line(self, member: Member) -> str:
        field = sanitize_identifier(member.name)
        annotations = node_annotations(member)
        decorators = annotations.render_cost() + annotations.render_directives()

        if isinstance(member, MethodNode):
            if len(member.parameters) > 1:
                raise TooManyParameters(member.name, len(member.parameters))
            parameters = ""
            if member.parameters:
                argument = next(iter(member.parameters.values()))
                if isinstance(argument, ReferenceNode):
                    argument = self.ctx.resolve(argument.target)
                parameters = f"({self.lowerer.lower(argument)})"
            return f"{field}{parameters}: {self.lowerer.lower(member.returns)}{decorators}"

        if isinstance(member, PropertyNode):
            mark = "" if member.optional else "!"
            return f"{field}: {self.lowerer.lower(member.signature)}{mark}{decorators}"

        raise UnsupportedNodeKind(member.kind, "a property of an interface")


class Emitter:
    """Lowers a type graph into GraphQL SDL."""

    def __init__(self, types: TypeGraph, config: EmitterConfig | None = None):
        """
        Initialize the emitter.

        Args:
            types: Symbol name -> node, in output order
            config: Emission options
        """
        self.types = types
        self.config = config or EmitterConfig()
        self.renderer = DeclarationRenderer()

    def begin_pass(self) -> EmissionPass:
        """Preprocess the graph and return a pass with fresh state."""
        ctx = Preprocessor(self.types, self.config).run()
        return EmissionPass(ctx, self.renderer)

    def emit_all(self, sink: TextSink) -> None:
        """Write every top-level declaration to ``sink``, one block at a time."""
        emission = self.begin_pass()
        sink.write("\n")
        for name, node in emission.ctx.emitted.items():
            logger.debug("Emitting %s %s", node.kind, name)
            sink.write(f"{emission.emit_top_level_node(node, name)}\n\n")

    def emit(self) -> str:
        """Run a full pass and return the SDL text."""
        buffer = io.StringIO()
        self.emit_all(buffer)
        return buffer.getvalue()
