"""
Emitter module.

Contains expression lowering, the top-level and union emitters, and the
CRUD artifact generator.
"""

from __future__ import annotations

from .crud import CrudArtifactGenerator
from .emitter import EmissionPass, Emitter
from .expressions import ExpressionLowerer
from .rendering import DeclarationRenderer
from .unions import UnionEmitter

__all__ = [
    "Emitter",
    "EmissionPass",
    "CrudArtifactGenerator",
    "ExpressionLowerer",
    "DeclarationRenderer",
    "UnionEmitter",
]
