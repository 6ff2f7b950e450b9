"""
Pass-scoped emission state.

An ``EmitContext`` is created by the preprocessor at the start of a pass and
handed explicitly to every component that emits text. It is never shared
between passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...utils import sanitize_identifier
from ..config import EmitterConfig
from ..errors import UnresolvedReference
from ..type_graph.nodes import TypeGraph, TypeNode


@dataclass
class EmitContext:
    """State of one emission pass over one type graph.

    Attributes:
        types: The full input graph, used to resolve references
        emitted: The graph left after trivial aliases were removed
        renames: Symbol name -> name it is emitted as
        enum_names: Normalized names declared as enums
        scalar_names: Normalized names declared as scalars
    """

    types: TypeGraph = field(default_factory=dict)
    emitted: TypeGraph = field(default_factory=dict)
    config: EmitterConfig = field(default_factory=EmitterConfig)
    renames: dict[str, str] = field(default_factory=dict)
    enum_names: list[str] = field(default_factory=list)
    scalar_names: list[str] = field(default_factory=list)

    def name(self, symbol: str) -> str:
        """Output name of ``symbol``: rename table first, then sanitizing."""
        return sanitize_identifier(self.renames.get(symbol, symbol))

    def resolve(self, symbol: str) -> TypeNode:
        """Look up a top-level symbol in the input graph."""
        try:
            return self.types[symbol]
        except KeyError:
            raise UnresolvedReference(symbol) from None

    def register_enum(self, name: str) -> None:
        name = self.name(name)
        if name not in self.enum_names:
            self.enum_names.append(name)

    def register_scalar(self, name: str) -> None:
        name = self.name(name)
        if name not in self.scalar_names:
            self.scalar_names.append(name)

    def is_enum(self, expression: str) -> bool:
        return expression in self.enum_names

    def is_scalar(self, expression: str) -> bool:
        return expression in self.scalar_names
