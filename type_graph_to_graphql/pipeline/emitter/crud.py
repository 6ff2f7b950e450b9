"""
CRUD artifact generation.

Every concrete type ``T`` is followed by the declarations a CRUD-style API
needs around it: inputs to create, update, connect and filter ``T``, an
ordering enum, a batch payload, and ``Query`` / ``Mutation`` extensions.

All artifacts walk the same denormalized member list as the primary ``type``
declaration. Parameterless methods count as fields (typed by their return
value); methods with a parameter are left out.
"""

from __future__ import annotations

from collections.abc import Iterator

from ...utils import lower_first, sanitize_identifier, upper_first
from ..analyzer.context import EmitContext
from ..analyzer.flattener import InterfaceFlattener
from ..analyzer.preprocessor import IDENTIFIER_SCALAR
from ..errors import UnsupportedNodeKind
from ..type_graph.nodes import (
    AliasNode,
    ArrayNode,
    InterfaceNode,
    MethodNode,
    PrimitiveNode,
    PropertyNode,
    ReferenceNode,
    TypeNode,
)
from .expressions import ExpressionLowerer
from .rendering import DeclarationRenderer

ORDERING_SUFFIXES = ("_lt", "_lte", "_gt", "_gte")
SUBSTRING_SUFFIXES = (
    "_contains",
    "_not_contains",
    "_starts_with",
    "_not_starts_with",
    "_ends_with",
    "_not_ends_with",
)
RELATION_QUANTIFIERS = ("_every", "_some", "_none")
COMBINATORS = ("AND", "OR", "NOT")


class CrudArtifactGenerator:
    """Derives the CRUD declarations of one concrete interface."""

    def __init__(
        self,
        ctx: EmitContext,
        flattener: InterfaceFlattener,
        lowerer: ExpressionLowerer,
        renderer: DeclarationRenderer,
    ):
        self.ctx = ctx
        self.flattener = flattener
        self.lowerer = lowerer
        self.renderer = renderer

    def generate(self, node: InterfaceNode, name: str) -> list[str]:
        """All artifacts for ``node``, in output order."""
        return [
            self.batch_payload(name),
            self.create_input(node, name),
            self.create_many_input(name),
            self.create_one_input(name),
            self.order_by_input(node, name),
            self.update_input(node, name),
            self.update_many_input(name),
            self.update_many_mutation_input(node, name),
            self.update_one_input(name),
            self.where_input(node, name),
            self.where_unique_input(name),
            self.query_extension(name),
            self.mutation_extension(name),
        ]

    # ------------------------------------------------------------------
    # Member walking
    # ------------------------------------------------------------------

    def _fields(self, node: InterfaceNode) -> Iterator[tuple[str, TypeNode | None, bool]]:
        """Yield ``(field name, type, optional)`` for every filterable member."""
        for member in self.flattener.denormalized_members(node):
            if isinstance(member, PropertyNode):
                yield sanitize_identifier(member.name), member.signature, member.optional
            elif isinstance(member, MethodNode):
                if not member.parameters:
                    yield sanitize_identifier(member.name), member.returns, member.optional
            else:
                raise UnsupportedNodeKind(member.kind, "a property of an interface")

    def _input_lines(self, lines: list[str | None]) -> list[str]:
        lines = [line for line in lines if line]
        return lines or [f"{self.ctx.config.placeholder_field}: Boolean"]

    def _is_enum_or_scalar(self, expression: str) -> bool:
        return self.ctx.is_enum(expression) or self.ctx.is_scalar(expression)

    # ------------------------------------------------------------------
    # Fixed-shape artifacts
    # ------------------------------------------------------------------

    def batch_payload(self, name: str) -> str:
        return self.renderer.declaration("type", f"{name}BatchPayload", ["count: Long"])

    def create_many_input(self, name: str) -> str:
        return self.renderer.declaration("input", f"{name}CreateManyInput", [f"connect: [{name}WhereUniqueInput!]"])

    def create_one_input(self, name: str) -> str:
        return self.renderer.declaration("input", f"{name}CreateOneInput", [f"connect: {name}WhereUniqueInput"])

    def update_many_input(self, name: str) -> str:
        return self.renderer.declaration("input", f"{name}UpdateManyInput", [f"connect: [{name}WhereUniqueInput!]"])

    def update_one_input(self, name: str) -> str:
        return self.renderer.declaration("input", f"{name}UpdateOneInput", [f"connect: {name}WhereUniqueInput"])

    def where_unique_input(self, name: str) -> str:
        return self.renderer.declaration("input", f"{name}WhereUniqueInput", [f"id: {IDENTIFIER_SCALAR}!"])

    # ------------------------------------------------------------------
    # Create / update inputs
    # ------------------------------------------------------------------

    def create_input(self, node: InterfaceNode, name: str) -> str:
        lines = [self._create_clause(type_node, field, optional) for field, type_node, optional in self._fields(node)]
        return self.renderer.declaration("input", f"{name}CreateInput", self._input_lines(lines))

    def _create_clause(self, node: TypeNode | None, field: str, optional: bool) -> str | None:
        if node is None:
            return None
        if isinstance(node, AliasNode):
            return self._create_clause(node.target, field, optional)

        expression = self.lowerer.lower(node)
        mark = "" if optional else "!"

        if expression == IDENTIFIER_SCALAR:
            # identifiers are always optional on create
            return f"{field}: {expression}"
        if isinstance(node, ArrayNode):
            element = node.elements[0] if node.elements else None
            if isinstance(element, ReferenceNode):
                return f"{field}: {self.ctx.name(element.target)}CreateManyInput{mark}"
            return f"{field}: {expression}{mark}"
        if isinstance(node, ReferenceNode):
            if self._is_enum_or_scalar(expression):
                return f"{field}: {expression}{mark}"
            return f"{field}: {expression}CreateOneInput{mark}"
        return f"{field}: {expression}{mark}"

    def update_input(self, node: InterfaceNode, name: str) -> str:
        lines = [self._update_clause(type_node, field) for field, type_node, _ in self._fields(node)]
        return self.renderer.declaration("input", f"{name}UpdateInput", self._input_lines(lines))

    def _update_clause(self, node: TypeNode | None, field: str) -> str | None:
        if node is None:
            return None
        if isinstance(node, AliasNode):
            return self._update_clause(node.target, field)

        expression = self.lowerer.lower(node)

        if expression == IDENTIFIER_SCALAR:
            return None
        if isinstance(node, ArrayNode):
            element = node.elements[0] if node.elements else None
            if isinstance(element, ReferenceNode):
                return f"{field}: {self.ctx.name(element.target)}UpdateManyInput"
            return f"{field}: {expression}"
        if isinstance(node, ReferenceNode):
            if self._is_enum_or_scalar(expression):
                return f"{field}: {expression}"
            return f"{field}: {expression}UpdateOneInput"
        return f"{field}: {expression}"

    def update_many_mutation_input(self, node: InterfaceNode, name: str) -> str:
        lines = [self._update_many_mutation_clause(type_node, field) for field, type_node, _ in self._fields(node)]
        return self.renderer.declaration("input", f"{name}UpdateManyMutationInput", self._input_lines(lines))

    def _update_many_mutation_clause(self, node: TypeNode | None, field: str) -> str | None:
        if node is None:
            return None
        if isinstance(node, AliasNode):
            return self._update_many_mutation_clause(node.target, field)

        expression = self.lowerer.lower(node)

        if expression == IDENTIFIER_SCALAR:
            return None
        if isinstance(node, ArrayNode):
            # relations and lists can't be set on many objects at once
            return None
        if isinstance(node, ReferenceNode):
            return f"{field}: {expression}" if self._is_enum_or_scalar(expression) else None
        return f"{field}: {expression}"

    # ------------------------------------------------------------------
    # Ordering and filtering
    # ------------------------------------------------------------------

    def order_by_input(self, node: InterfaceNode, name: str) -> str:
        values = []
        for field, _, _ in self._fields(node):
            values.extend([f"{field}_ASC", f"{field}_DESC"])
        if not values:
            placeholder = self.ctx.config.placeholder_field
            values = [f"{placeholder}_ASC", f"{placeholder}_DESC"]
        return self.renderer.declaration("enum", f"{name}OrderByInput", values)

    def where_input(self, node: InterfaceNode, name: str) -> str:
        lines = []
        for field, type_node, _ in self._fields(node):
            lines.extend(self.where_clauses(type_node, field))
        lines.extend(f"{combinator}: [{name}WhereInput!]" for combinator in COMBINATORS)
        return self.renderer.declaration("input", f"{name}WhereInput", lines)

    def where_clauses(self, node: TypeNode | None, field: str) -> list[str]:
        """Filter clauses for one field, selected by the field's underlying kind."""
        if node is None:
            return []
        if isinstance(node, AliasNode):
            return self.where_clauses(node.target, field)

        expression = self.lowerer.lower(node)
        kind = node.type_name if isinstance(node, PrimitiveNode) else None

        if kind == "string" or expression == IDENTIFIER_SCALAR:
            return self._filter_clauses(field, expression, ordering=True, substring=True)
        if kind == "number":
            return self._filter_clauses(field, expression, ordering=True)
        if kind == "boolean":
            return self._filter_clauses(field, expression)
        if expression in self.ctx.config.date_scalar_names:
            return self._filter_clauses(field, expression, ordering=True)
        if isinstance(node, ArrayNode):
            element = node.elements[0] if node.elements else None
            if not isinstance(element, ReferenceNode):
                return []
            element_type = self.lowerer.lower(element)
            return [f"{field}{quantifier}: {element_type}WhereInput" for quantifier in RELATION_QUANTIFIERS]
        if isinstance(node, ReferenceNode):
            if self.ctx.is_enum(expression):
                return self._filter_clauses(field, expression)
            if self.ctx.is_scalar(expression):
                # custom scalars get the string operators
                return self._filter_clauses(field, expression, ordering=True, substring=True)
            return [f"{field}: {expression}WhereInput"]
        return []

    @staticmethod
    def _filter_clauses(field: str, expression: str, ordering: bool = False, substring: bool = False) -> list[str]:
        clauses = [
            f"{field}: {expression}",
            f"{field}_not: {expression}",
            f"{field}_in: [{expression}!]",
            f"{field}_not_in: [{expression}!]",
        ]
        if ordering:
            clauses.extend(f"{field}{suffix}: {expression}" for suffix in ORDERING_SUFFIXES)
        if substring:
            clauses.extend(f"{field}{suffix}: {expression}" for suffix in SUBSTRING_SUFFIXES)
        return clauses

    # ------------------------------------------------------------------
    # Root type extensions
    # ------------------------------------------------------------------

    def query_extension(self, name: str) -> str:
        field = lower_first(name)
        arguments = ", ".join(
            [
                f"where: {name}WhereInput",
                f"orderBy: {name}OrderByInput",
                "skip: Int",
                "after: String",
                "before: String",
                "first: Int",
                "last: Int",
            ]
        )
        lines = [
            f"{field}(id: ID!): {name}",
            f"{field}s({arguments}): [{name}]!",
        ]
        return self.renderer.block("extend type Query", lines)

    def mutation_extension(self, name: str) -> str:
        pascal = upper_first(name)
        lines = [
            f"create{pascal}(data: {name}CreateInput!): {name}!",
            f"delete{pascal}(id: ID!): {name}",
            f"deleteMany{pascal}s(where: {name}WhereInput): {name}BatchPayload!",
            f"update{pascal}(id: ID!, data: {name}UpdateInput!): {name}",
            f"updateMany{pascal}s(data: {name}UpdateManyMutationInput!, where: {name}WhereInput): {name}BatchPayload!",
            f"upsert{pascal}(id: ID!, create: {name}CreateInput!, update: {name}UpdateInput!): {name}!",
        ]
        return self.renderer.block("extend type Mutation", lines)
