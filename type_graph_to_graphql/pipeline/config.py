"""
Configuration for the schema emitter and the batch driver.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check the SDL structure before writing
        atomic_write: Whether to write through a temporary file
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class EmitterConfig:
    """Configuration options for schema emission."""

    # Append the derived CRUD declarations after every concrete type
    emit_crud_artifacts: bool = True

    # Name of the boolean field injected into otherwise empty declarations
    placeholder_field: str = "_placeholder"

    # Concrete types never extended with CRUD artifacts (case-insensitive)
    reserved_type_names: list[str] = field(default_factory=lambda: ["query", "mutation"])

    # Concrete types starting with this prefix get no CRUD artifacts either
    reserved_prefix: str = "_"

    # Scalars filtered with the ordering operators but not the substring ones
    date_scalar_names: list[str] = field(default_factory=lambda: ["Date", "DateTime"])

    # Add generation comment at top of each output file
    add_generation_comment: bool = True

    # Suffix of the output file written for each input unit
    output_suffix: str = ".graphql"

    output: OutputConfig = field(default_factory=OutputConfig)

    def is_reserved_type_name(self, name: str) -> bool:
        """Whether a concrete type named ``name`` is exempt from CRUD artifacts."""
        if name.lower() in {n.lower() for n in self.reserved_type_names}:
            return True
        return bool(self.reserved_prefix) and name.startswith(self.reserved_prefix)

    @staticmethod
    def from_dict(d: dict) -> EmitterConfig:
        """Create a config from a dictionary."""
        config = EmitterConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "emit_crud_artifacts": self.emit_crud_artifacts,
            "placeholder_field": self.placeholder_field,
            "reserved_type_names": self.reserved_type_names,
            "reserved_prefix": self.reserved_prefix,
            "date_scalar_names": self.date_scalar_names,
            "add_generation_comment": self.add_generation_comment,
            "output_suffix": self.output_suffix,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
