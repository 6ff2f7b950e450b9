"""
Atomic file writer for generated schemas.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written schema behind.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

# Declaration keywords that can start a top-level SDL definition
_DECLARATION_PATTERN = re.compile(r"^(scalar|enum|type|interface|union|input|extend|schema|fragment)\b", re.MULTILINE)


class SchemaWriteError(Exception):
    """Raised when generated SDL fails validation before being written."""

    pass


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_schema: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_schema: Optional validation function for SDL text
        """
        self._validate_schema = validate_schema or self._default_validate_schema

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            SchemaWriteError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_schema(content)

            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Raises:
            FileExistsError: If the file already exists
            SchemaWriteError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, validate)
        return True

    def write_direct(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content in place, without a temporary file."""
        if validate:
            self._validate_schema(content)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def _default_validate_schema(self, content: str) -> None:
        """Structural SDL checks (no full parsing).

        Raises:
            SchemaWriteError: If validation fails
        """
        if not _DECLARATION_PATTERN.search(content):
            raise SchemaWriteError("Generated schema has no type definitions")

        open_braces = content.count("{")
        close_braces = content.count("}")
        if open_braces != close_braces:
            raise SchemaWriteError(f"Generated schema has unbalanced braces: {open_braces} open, {close_braces} close")
