"""
SDL block rendering.

Every braced declaration (``type``, ``input``, ``enum``, ``interface``,
``schema``, ``extend type`` and fragments) goes through one Jinja2 template
so indentation and brace placement are identical everywhere.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "graphql"


class DeclarationRenderer:
    """Renders SDL declarations from a header and body lines."""

    def __init__(self):
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.block_template = self.jinja_env.get_template("block.graphql.jinja2")

    def block(self, header: str, lines: list[str]) -> str:
        """Render ``header {`` followed by indented ``lines`` and ``}``."""
        return self.block_template.render(header=header, lines=lines)

    def declaration(self, keyword: str, name: str, lines: list[str], annotations: str = "") -> str:
        """Render e.g. ``type Post @key(fields: "id") {...}``."""
        return self.block(f"{keyword} {name}{annotations}", lines)
