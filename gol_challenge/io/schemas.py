"""Parquet schema definitions for authoring artifacts.

The manifest written next to generated puzzle files is described here so
that writers and readers work against the same column contract.
"""

from __future__ import annotations

import pyarrow as pa

MANIFEST_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("name", pa.string()),
        ("title", pa.string()),
        ("difficulty", pa.string()),
        ("size", pa.int64()),
        ("minimal_steps", pa.int64()),
        ("maximal_steps", pa.int64()),
        ("is_strict", pa.bool_()),
        ("enforce_initial_conditions", pa.bool_()),
        ("puzzle_id", pa.string()),
        ("solution_id", pa.string()),
        ("verified_steps", pa.int64()),
    ]
)

MANIFEST_COLUMNS = [f.name for f in MANIFEST_SCHEMA]
"""Column order of :data:`MANIFEST_SCHEMA`."""
