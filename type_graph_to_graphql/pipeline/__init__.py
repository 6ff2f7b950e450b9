"""
Pipeline - type graph to GraphQL SDL.

1. Phase 1 (Loader): Parse the JSON form of a type graph into nodes
2. Phase 2 (Preprocessor): Collapse trivial aliases, classify scalars and enums
3. Phase 3 (Emitter): Lower every top-level symbol into SDL declarations,
   including the CRUD artifacts of concrete types
4. Phase 4 (Writer): Validate and atomically write one schema per input
"""

from __future__ import annotations

from .config import EmitterConfig, OutputConfig, OutputMode
from .driver import BatchDriver, UnitResult, UnitStatus
from .emitter import Emitter
from .errors import (
    CyclicInheritance,
    EmitterError,
    InvalidSupertype,
    InvalidUnionComposition,
    MultipleInheritanceUnsupported,
    TooManyParameters,
    UnresolvedReference,
    UnsupportedNodeKind,
)
from .writer import AtomicWriter, SchemaWriteError

__all__ = [
    "Emitter",
    "EmitterConfig",
    "OutputConfig",
    "OutputMode",
    "BatchDriver",
    "UnitResult",
    "UnitStatus",
    "AtomicWriter",
    "SchemaWriteError",
    "EmitterError",
    "UnsupportedNodeKind",
    "MultipleInheritanceUnsupported",
    "InvalidSupertype",
    "CyclicInheritance",
    "TooManyParameters",
    "InvalidUnionComposition",
    "UnresolvedReference",
]
