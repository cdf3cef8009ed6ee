"""Configuration dataclasses for the authoring workflows.

Frozen dataclasses that parameterise puzzle-file generation and frontend
metadata export live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "CreatePuzzlesConfig",
    "MetadataConfig",
]


@dataclass(frozen=True)
class CreatePuzzlesConfig:
    """Settings for writing puzzle and solution files."""

    output_dir: Path = Path(".")
    include_all: bool = False
    write_manifest: bool = True
    verify: bool = True

    def __post_init__(self) -> None:
        if not str(self.output_dir):
            raise ValueError("output_dir must not be empty")
        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ValueError(f"output_dir is not a directory: {self.output_dir}")


@dataclass(frozen=True)
class MetadataConfig:
    """Settings for exporting TypeScript puzzle metadata."""

    output: Path
    blob_map: Path
    include_all: bool = False

    def __post_init__(self) -> None:
        if self.output.suffix not in {".ts", ".tsx"}:
            raise ValueError("output must be a TypeScript file (.ts or .tsx)")
        if self.output.resolve() == self.blob_map.resolve():
            raise ValueError("output must not overwrite blob_map")
