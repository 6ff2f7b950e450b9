"""
Doc-tag extraction.

Nodes carry free-text documentation tags. Tags titled ``graphql`` select
non-default emission behavior; their description is prefix-matched against
a small vocabulary and turned into structured annotations once per node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..type_graph.nodes import Documentation, TypeNode

DEFAULT_TAG_TITLE = "graphql"


class DirectiveKind(str, Enum):
    """Directive vocabulary. The value is the description prefix."""

    COST = "cost"
    DIRECTIVE = "directive"
    SCHEMA_ROOT = "schema"
    INPUT_ROLE = "input"
    FEDERATION_KEY = "key"
    FRAGMENT = "fragment"
    IDENTIFIER_ALIAS = "ID"

    @classmethod
    def match(cls, description: str) -> DirectiveKind | None:
        """Return the kind whose prefix starts ``description``, if any."""
        for kind in cls:
            if description.startswith(kind.value):
                return kind
        return None

    @classmethod
    def from_prefix(cls, prefix: str) -> DirectiveKind | None:
        """Exact lookup by prefix; None outside the vocabulary."""
        try:
            return cls(prefix)
        except ValueError:
            return None


@dataclass(frozen=True)
class Annotation:
    """A resolved ``graphql`` doc tag.

    ``text`` is the full tag description. ``payload`` is what follows the
    prefix and its separator, e.g. ``id`` for ``key id``.
    """

    kind: DirectiveKind
    text: str

    @property
    def payload(self) -> str:
        return self.text[len(self.kind.value) + 1 :]

    def render(self) -> str:
        """Render as an SDL annotation suffix (with leading space)."""
        match self.kind:
            case DirectiveKind.COST:
                return f" @cost{self.payload}"
            case DirectiveKind.DIRECTIVE:
                return f" @{self.payload}"
            case DirectiveKind.FEDERATION_KEY:
                return f' @key(fields: "{self.payload}")'
            case _:
                return ""


@dataclass(frozen=True)
class Annotations:
    """All annotations of one node, in tag order."""

    items: tuple[Annotation, ...] = field(default_factory=tuple)

    @classmethod
    def from_documentation(cls, documentation: Documentation | None, title: str = DEFAULT_TAG_TITLE) -> Annotations:
        if documentation is None:
            return cls()
        items = []
        for tag in documentation.tags:
            if tag.title != title:
                continue
            kind = DirectiveKind.match(tag.description)
            if kind is not None:
                items.append(Annotation(kind, tag.description))
        return cls(tuple(items))

    def first(self, kind: DirectiveKind) -> Annotation | None:
        for item in self.items:
            if item.kind is kind:
                return item
        return None

    def all(self, kind: DirectiveKind) -> list[Annotation]:
        return [item for item in self.items if item.kind is kind]

    def has(self, kind: DirectiveKind) -> bool:
        return self.first(kind) is not None

    def render_cost(self) -> str:
        cost = self.first(DirectiveKind.COST)
        return cost.render() if cost else ""

    def render_directives(self) -> str:
        return "".join(a.render() for a in self.all(DirectiveKind.DIRECTIVE))

    def render_keys(self) -> str:
        return "".join(a.render() for a in self.all(DirectiveKind.FEDERATION_KEY))


def node_annotations(node: TypeNode | None) -> Annotations:
    """Annotations of ``node``; empty for nodes that cannot be documented."""
    annotations = getattr(node, "annotations", None)
    return annotations if annotations is not None else Annotations()


def get_doc_tag(node: TypeNode | None, prefix: str) -> str | None:
    """First matching tag description for ``prefix``, or None."""
    kind = DirectiveKind.from_prefix(prefix)
    if kind is None:
        return None
    annotation = node_annotations(node).first(kind)
    return annotation.text if annotation else None


def get_doc_tags(node: TypeNode | None, prefix: str) -> list[str]:
    """All matching tag descriptions for ``prefix``."""
    kind = DirectiveKind.from_prefix(prefix)
    if kind is None:
        return []
    return [a.text for a in node_annotations(node).all(kind)]


def has_doc_tag(node: TypeNode | None, prefix: str) -> bool:
    return get_doc_tag(node, prefix) is not None
