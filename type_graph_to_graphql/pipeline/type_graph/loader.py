"""
Type graph loader.

Builds a ``TypeGraph`` from its JSON form, the format front ends dump their
symbol tables in. Every node is an object with a ``type`` discriminator:

    {
      "Post": {
        "type": "interface",
        "concrete": true,
        "inherits": ["Node"],
        "members": [
          {"type": "property", "name": "title", "signature": {"type": "string"}}
        ],
        "documentation": {"tags": [{"title": "graphql", "description": "key id"}]}
      }
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .nodes import (
    AliasNode,
    ArrayNode,
    DocTag,
    Documentation,
    EnumNode,
    InterfaceNode,
    LiteralObjectNode,
    MethodNode,
    PrimitiveNode,
    PropertyNode,
    ReferenceNode,
    StringLiteralNode,
    TypeGraph,
    TypeNode,
    UnionNode,
)

logger = logging.getLogger(__name__)

# Node kinds that can be emitted as top-level declarations
TOP_LEVEL_KINDS = {"alias", "interface", "enum"}


class TypeGraphLoadError(Exception):
    """Raised when a JSON document is not a well-formed type graph."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class TypeGraphLoader:
    """Parses the JSON form of a type graph into nodes."""

    def load(self, document: dict[str, Any]) -> TypeGraph:
        """
        Parse a whole document.

        Args:
            document: Mapping of symbol name to node object

        Returns:
            TypeGraph in document order
        """
        if not isinstance(document, dict):
            raise TypeGraphLoadError(f"Expected an object of symbols, got {type(document).__name__}")

        types: TypeGraph = {}
        for name, data in document.items():
            types[name] = self._parse_node(data, f"#/{name}")
        return types

    def _parse_node(self, data: Any, path: str) -> TypeNode:
        if not isinstance(data, dict):
            raise TypeGraphLoadError(f"Expected a node object, got {type(data).__name__}", path)

        kind = data.get("type")
        match kind:
            case "string" | "number" | "boolean" | "any":
                return PrimitiveNode(type_name=kind)
            case "string literal":
                return StringLiteralNode(value=self._require(data, "value", str, path))
            case "reference":
                return ReferenceNode(target=self._require(data, "target", str, path))
            case "array":
                elements = self._require(data, "elements", list, path)
                return ArrayNode(elements=[self._parse_node(e, f"{path}/elements/{i}") for i, e in enumerate(elements)])
            case "enum":
                values = self._require(data, "values", list, path)
                return EnumNode(values=[str(v) for v in values])
            case "union":
                types = self._require(data, "types", list, path)
                return UnionNode(types=[self._parse_node(t, f"{path}/types/{i}") for i, t in enumerate(types)])
            case "alias":
                return AliasNode(
                    target=self._parse_node(data.get("target"), f"{path}/target"),
                    documentation=self._parse_documentation(data, path),
                )
            case "literal object":
                return LiteralObjectNode(members=self._parse_members(data, path, allow_methods=False))
            case "interface":
                inherits = data.get("inherits", [])
                if not isinstance(inherits, list):
                    raise TypeGraphLoadError("'inherits' must be a list of symbol names", path)
                return InterfaceNode(
                    members=self._parse_members(data, path, allow_methods=True),
                    inherits=[str(i) for i in inherits],
                    concrete=bool(data.get("concrete", False)),
                    documentation=self._parse_documentation(data, path),
                )
            case "property":
                return self._parse_property(data, path)
            case "method":
                return self._parse_method(data, path)
            case _:
                raise TypeGraphLoadError(f"Unknown node type: {kind!r}", path)

    def _parse_members(self, data: dict[str, Any], path: str, allow_methods: bool) -> list:
        items = data.get("members", [])
        if not isinstance(items, list):
            raise TypeGraphLoadError("'members' must be a list of member nodes", path)
        members = []
        for i, member in enumerate(items):
            member_path = f"{path}/members/{i}"
            kind = member.get("type") if isinstance(member, dict) else None
            if kind == "property":
                members.append(self._parse_property(member, member_path))
            elif kind == "method" and allow_methods:
                members.append(self._parse_method(member, member_path))
            else:
                raise TypeGraphLoadError(f"Unexpected member type: {kind!r}", member_path)
        return members

    def _parse_property(self, data: dict[str, Any], path: str) -> PropertyNode:
        signature = data.get("signature")
        return PropertyNode(
            name=self._require(data, "name", str, path),
            signature=self._parse_node(signature, f"{path}/signature") if signature is not None else None,
            optional=bool(data.get("optional", False)),
            documentation=self._parse_documentation(data, path),
        )

    def _parse_method(self, data: dict[str, Any], path: str) -> MethodNode:
        parameters = data.get("parameters", {})
        if not isinstance(parameters, dict):
            raise TypeGraphLoadError("'parameters' must map parameter names to nodes", path)
        returns = data.get("returns")
        return MethodNode(
            name=self._require(data, "name", str, path),
            parameters={k: self._parse_node(v, f"{path}/parameters/{k}") for k, v in parameters.items()},
            returns=self._parse_node(returns, f"{path}/returns") if returns is not None else None,
            optional=bool(data.get("optional", False)),
            documentation=self._parse_documentation(data, path),
        )

    def _parse_documentation(self, data: dict[str, Any], path: str) -> Documentation | None:
        documentation = data.get("documentation")
        if documentation is None:
            return None
        if not isinstance(documentation, dict):
            raise TypeGraphLoadError("'documentation' must be an object", path)
        entries = documentation.get("tags", [])
        if not isinstance(entries, list):
            raise TypeGraphLoadError("'tags' must be a list of tag objects", f"{path}/documentation")
        tags = []
        for i, tag in enumerate(entries):
            if not isinstance(tag, dict):
                raise TypeGraphLoadError(f"Expected a tag object, got {type(tag).__name__}", f"{path}/documentation/tags/{i}")
            tags.append(DocTag(title=str(tag.get("title", "")), description=str(tag.get("description", ""))))
        return Documentation(tags=tags)

    @staticmethod
    def _require(data: dict[str, Any], key: str, expected: type, path: str) -> Any:
        if key not in data:
            raise TypeGraphLoadError(f"Missing required field '{key}'", path)
        value = data[key]
        if not isinstance(value, expected):
            raise TypeGraphLoadError(f"Field '{key}' must be a {expected.__name__}", path)
        return value


def load_type_graph(path: str | Path) -> TypeGraph:
    """Read and parse a JSON type graph file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise TypeGraphLoadError(f"Invalid JSON: {e}", str(path)) from e
    return TypeGraphLoader().load(document)


def found_schema(path: str | Path) -> bool:
    """Whether ``path`` holds a type graph with at least one declarable symbol."""
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("Not a type graph: %s (%s)", path, e)
        return False

    if not isinstance(document, dict):
        return False
    return any(isinstance(node, dict) and node.get("type") in TOP_LEVEL_KINDS for node in document.values())
