from __future__ import annotations
import logging
import sqlite3
from pathlib import Path
from typing import Any, Iterator, Mapping, Protocol

import pandas as pd

from . import exceptions

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


class RowSource(Protocol):
    """Anything that can hand back a table's rows, keyed by column name, in storage order."""

    def rows(self, table: str) -> Iterator[Row]: ...


class SQLiteRowSource:
    """Read-only access to a powerlog SQLite database on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        if not self.path.exists():
            raise exceptions.RowSourceError(f"Powerlog database not found at {self.path}")
        try:
            self._conn = sqlite3.connect(f"{self.path.resolve().as_uri()}?mode=ro", uri=True)
        except sqlite3.Error as exc:
            raise exceptions.RowSourceError(f"Cannot open {self.path}: {exc}") from exc
        self._conn.row_factory = sqlite3.Row

    def __enter__(self) -> SQLiteRowSource:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def tables(self) -> list[str]:
        cur = self._conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        return [row[0] for row in cur.fetchall()]

    def rows(self, table: str) -> Iterator[Row]:
        logger.debug("Reading table %s from %s", table, self.path)
        try:
            cur = self._conn.execute(f"SELECT * FROM [{table}]")
            for row in cur:
                yield dict(zip(row.keys(), row))
        except sqlite3.Error as exc:
            raise exceptions.RowSourceError(f"Cannot read table {table!r}: {exc}") from exc


class FrameRowSource:
    """
    Row source over in-memory pandas frames, one per table name.

    Missing values (NaN, NaT, None) come back as None so callers see the
    same nulls a database would give them.
    """

    def __init__(self, tables: Mapping[str, pd.DataFrame]):
        self._tables = dict(tables)

    def rows(self, table: str) -> Iterator[Row]:
        if table not in self._tables:
            raise exceptions.RowSourceError(f"No such table: {table}")
        df = self._tables[table]
        clean = df.astype(object).where(df.notna(), None)
        yield from clean.to_dict(orient="records")
