"""
Batch driver: one schema per discovered type graph file.

Each unit runs inside its own failure boundary. A unit that fails to load,
lower or write is reported in its ``UnitResult`` and the remaining units are
still processed.
"""

from __future__ import annotations

import glob
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import EmitterConfig, OutputMode
from .emitter import Emitter
from .errors import EmitterError
from .type_graph.loader import TypeGraphLoadError, found_schema, load_type_graph
from .writer import AtomicWriter, SchemaWriteError

logger = logging.getLogger(__name__)


class UnitStatus(str, Enum):
    GENERATED = "generated"
    SKIPPED = "skipped"  # not a type graph
    FAILED = "failed"


@dataclass
class UnitResult:
    """Outcome of one input file."""

    source: Path
    status: UnitStatus
    output: Path | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status is not UnitStatus.FAILED


class BatchDriver:
    """Discovers type graph files and emits a schema for each of them."""

    def __init__(
        self,
        config: EmitterConfig | None = None,
        writer: AtomicWriter | None = None,
        header: Callable[[], str] | None = None,
    ):
        """
        Initialize the driver.

        Args:
            config: Emission and output options
            writer: Writer used for output files
            header: Produces the generation comment written before each schema
        """
        self.config = config or EmitterConfig()
        self.writer = writer or AtomicWriter()
        self.header = header

    def discover(self, pattern: str) -> list[Path]:
        """Files matching ``pattern`` (``**`` recurses), sorted."""
        return [Path(p) for p in sorted(glob.glob(pattern, recursive=True)) if Path(p).is_file()]

    def output_path(self, source: Path, output_dir: Path) -> Path:
        return output_dir / f"{source.stem}{self.config.output_suffix}"

    def run(self, pattern: str, output_dir: str | Path) -> list[UnitResult]:
        output_dir = Path(output_dir)
        results = [self.run_unit(source, output_dir) for source in self.discover(pattern)]
        failed = sum(1 for r in results if not r.ok)
        logger.info("Processed %d file(s), %d failed", len(results), failed)
        return results

    def run_unit(self, source: Path, output_dir: Path) -> UnitResult:
        logger.info("Reading %s", source)
        if not found_schema(source):
            logger.debug("No type graph in %s", source)
            return UnitResult(source=source, status=UnitStatus.SKIPPED)

        output = self.output_path(source, output_dir)
        try:
            content = self.render(source)
            self._write(output, content)
        except (TypeGraphLoadError, EmitterError, SchemaWriteError, OSError) as e:
            logger.error("Failed to generate %s: %s", source, e)
            return UnitResult(source=source, status=UnitStatus.FAILED, output=output, error=e)

        logger.info("Generated %s", output)
        return UnitResult(source=source, status=UnitStatus.GENERATED, output=output)

    def render(self, source: Path) -> str:
        """Full pass over one file; returns the SDL text."""
        types = load_type_graph(source)
        schema = Emitter(types, self.config).emit()
        if self.config.add_generation_comment and self.header is not None:
            schema = f"{self.header()}\n{schema}"
        return schema

    def _write(self, output: Path, content: str) -> None:
        options = self.config.output
        overwrite = options.mode == OutputMode.FORCE

        if options.atomic_write and overwrite:
            self.writer.write(output, content, validate=options.validate_before_write)
        elif options.atomic_write:
            self.writer.write_if_not_exists(output, content, validate=options.validate_before_write)
        else:
            if not overwrite and output.exists():
                raise FileExistsError(f"Output file already exists: {output}. Use force mode to overwrite.")
            self.writer.write_direct(output, content, validate=options.validate_before_write)
