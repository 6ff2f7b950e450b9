"""Type Graph to GraphQL Generator

Lowers a type graph (aliases, interfaces, enums, unions) into a GraphQL
schema, including CRUD inputs, filters and root type extensions derived from
every concrete type.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    BatchDriver,
    Emitter,
    EmitterConfig,
    EmitterError,
    OutputConfig,
    OutputMode,
)

__all__ = [
    "Emitter",
    "EmitterConfig",
    "EmitterError",
    "OutputConfig",
    "OutputMode",
    "BatchDriver",
    "AtomicWriter",
]
