"""
Interface flattening.

SDL object types cannot inherit fields, so every interface is denormalized by
walking its single-inheritance chain. There are two traversal rules:

* ``collect_members`` keeps declaration order (child first, then parents).
  It feeds inline expressions.
* ``denormalized_members`` sorts alphabetically and never returns an empty
  list. It feeds every top-level declaration and CRUD artifact.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..errors import (
    CyclicInheritance,
    InvalidSupertype,
    MultipleInheritanceUnsupported,
    UnsupportedNodeKind,
)
from ..type_graph.nodes import (
    InterfaceNode,
    LiteralObjectNode,
    Member,
    PrimitiveNode,
    PropertyNode,
)
from .context import EmitContext


class InterfaceFlattener:
    """Resolves inherited members of interfaces."""

    def __init__(self, ctx: EmitContext):
        self.ctx = ctx

    def _walk_chain(self, node: InterfaceNode) -> Iterator[InterfaceNode]:
        """Yield ``node`` and then each ancestor, failing on malformed chains."""
        visited: list[str] = []
        current: InterfaceNode | None = node
        while current is not None:
            yield current

            if len(current.inherits) > 1:
                raise MultipleInheritanceUnsupported(current.inherits)
            if not current.inherits:
                return

            supertype_name = current.inherits[0]
            if supertype_name in visited:
                raise CyclicInheritance(visited + [supertype_name])
            visited.append(supertype_name)

            supertype = self.ctx.resolve(supertype_name)
            if supertype is node:
                raise CyclicInheritance(visited)
            if not isinstance(supertype, InterfaceNode):
                raise InvalidSupertype(supertype_name, supertype.kind)
            current = supertype

    def transitive_interfaces(self, node: InterfaceNode) -> list[InterfaceNode]:
        """Return ``node`` followed by all of its ancestors, each exactly once."""
        interfaces: list[InterfaceNode] = []
        for interface in self._walk_chain(node):
            if not any(interface is seen for seen in interfaces):
                interfaces.append(interface)
        return interfaces

    def collect_members(self, node: InterfaceNode | LiteralObjectNode) -> list[PropertyNode]:
        """Members usable in an inline expression, in declaration order.

        On name collisions the child's member wins over the parent's.
        """
        if isinstance(node, LiteralObjectNode):
            members: list[Member] = list(node.members)
        else:
            members = []
            seen: set[str] = set()
            for interface in self._walk_chain(node):
                for member in interface.members:
                    if member.name in seen:
                        continue
                    seen.add(member.name)
                    members.append(member)

        for member in members:
            if not isinstance(member, PropertyNode):
                raise UnsupportedNodeKind(member.kind, "an inline object member (expected properties)")
        return members

    def denormalized_members(self, node: InterfaceNode) -> list[Member]:
        """All members of ``node`` and its ancestors, deduplicated and sorted by name.

        SDL can't declare an empty type, so a placeholder boolean property is
        returned when nothing else is left.
        """
        by_name: dict[str, Member] = {}
        for interface in self.transitive_interfaces(node):
            for member in interface.members:
                by_name.setdefault(member.name, member)

        members = sorted(by_name.values(), key=lambda m: m.name)
        if not members:
            members.append(self.placeholder())
        return members

    def placeholder(self) -> PropertyNode:
        return PropertyNode(
            name=self.ctx.config.placeholder_field,
            signature=PrimitiveNode(type_name="boolean"),
        )
