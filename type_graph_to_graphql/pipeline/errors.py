"""
Errors raised while lowering a type graph.

Every error aborts the current pass; there is no local recovery. Callers that
process several inputs (see ``driver.BatchDriver``) catch ``EmitterError`` per
unit.
"""

from __future__ import annotations


class EmitterError(Exception):
    """Base class for all schema lowering failures."""

    pass


class UnsupportedNodeKind(EmitterError):
    """A node or member kind cannot be lowered in the current context.

    Raised for example when a method shows up where only properties are
    allowed, or when expression lowering is handed an enum or a union.
    """

    def __init__(self, kind: str, context: str):
        self.kind = kind
        self.context = context
        super().__init__(f"Can't serialize {kind} as {context}")


class MultipleInheritanceUnsupported(EmitterError):
    """An interface declares more than one supertype."""

    def __init__(self, inherits: list[str]):
        self.inherits = list(inherits)
        super().__init__(f"No support for multiple inheritance: {self.inherits}")


class InvalidSupertype(EmitterError):
    """A supertype name does not resolve to an interface node."""

    def __init__(self, name: str, kind: str):
        self.name = name
        self.kind = kind
        super().__init__(f"Expected supertype {name!r} to be an interface node, got {kind}")


class CyclicInheritance(EmitterError):
    """An inheritance chain loops back onto itself."""

    def __init__(self, chain: list[str]):
        self.chain = list(chain)
        super().__init__(f"Cyclic inheritance: {' -> '.join(self.chain)}")


class TooManyParameters(EmitterError):
    """A method declares more than one parameter."""

    def __init__(self, method_name: str, count: int):
        self.method_name = method_name
        self.count = count
        super().__init__(f"Methods can have a maximum of 1 argument: {method_name} has {count}")


class InvalidUnionComposition(EmitterError):
    """A union mixes member kinds or starts with a kind that has no SDL form."""

    pass


class UnresolvedReference(EmitterError):
    """A reference names a symbol that is not in the type graph."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Reference to unknown symbol: {target}")
