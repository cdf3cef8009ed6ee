"""Parquet persistence for the puzzle manifest."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from gol_challenge.io.schemas import MANIFEST_COLUMNS, MANIFEST_SCHEMA


def write_manifest(rows: list[dict[str, object]], path: Path) -> Path:
    """Write manifest rows to Parquet, one row per generated puzzle."""
    columns: dict[str, list[object]] = {name: [] for name in MANIFEST_COLUMNS}
    for row in rows:
        missing = set(MANIFEST_COLUMNS) - row.keys()
        if missing:
            raise ValueError(f"manifest row missing columns: {sorted(missing)}")
        for name in MANIFEST_COLUMNS:
            columns[name].append(row[name])
    table = pa.Table.from_pydict(columns, schema=MANIFEST_SCHEMA)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, path)
    return path


def read_manifest(path: Path) -> list[dict[str, object]]:
    """Read a manifest back as a list of row dicts."""
    table = pq.read_table(path)
    return table.to_pylist()
