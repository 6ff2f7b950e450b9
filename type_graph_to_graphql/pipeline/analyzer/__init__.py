"""
Analyzer module.

Contains doc-tag extraction, preprocessing and inheritance flattening.
"""

from __future__ import annotations

from .context import EmitContext
from .doc_tags import Annotation, Annotations, DirectiveKind, get_doc_tag, get_doc_tags
from .flattener import InterfaceFlattener
from .preprocessor import IDENTIFIER_SCALAR, Preprocessor

__all__ = [
    "EmitContext",
    "Annotation",
    "Annotations",
    "DirectiveKind",
    "get_doc_tag",
    "get_doc_tags",
    "InterfaceFlattener",
    "IDENTIFIER_SCALAR",
    "Preprocessor",
]
