"""
Search index sink: the SQLite database Dash reads from a docset.

The database lives at Contents/Resources/docSet.dsidx and has a single
table, searchIndex(id, name, type, path).  The same symbol usually appears
in several index pages, so rows are deduplicated on (name, type, path)
before they are written.
"""

import sqlite3
from pathlib import Path
from typing import Iterable, Union

from .exceptions import StorageError
from .logger import get_module_logger
from .schemas import IndexEntry

logger = get_module_logger("storage")


class SearchIndex:
    """Write-once search index for one docset build."""

    def __init__(self, db_path: Union[str, Path]):
        """
        Create a fresh database at db_path, replacing any existing file.

        Raises:
            StorageError: if the database cannot be created
        """
        self.db_path = Path(db_path)
        self._added: set[tuple[str, str, str]] = set()

        try:
            # Stale index from a previous build
            self.db_path.unlink(missing_ok=True)
            self.conn = sqlite3.connect(str(self.db_path))
        except (sqlite3.Error, OSError) as e:
            raise StorageError(
                f"Unable to create sqlite database: {e}",
                db_path=str(self.db_path)
            ) from e

        try:
            self._init_schema()
        except sqlite3.Error as e:
            self.conn.close()
            raise StorageError(
                f"Unable to create table: {e}",
                db_path=str(self.db_path)
            ) from e

        logger.info(f"Search index created at: {self.db_path}")

    def _init_schema(self) -> None:
        self.conn.execute(
            "CREATE TABLE searchIndex(id INTEGER PRIMARY KEY, name TEXT, type TEXT, path TEXT)"
        )
        self.conn.commit()

    # --- Insert ---

    def add(self, entry: IndexEntry) -> bool:
        """
        Insert an entry unless the same (name, type, path) was already added.

        Returns:
            True if a row was written, False for a duplicate
        """
        key = (entry.name, entry.type_label, entry.path)
        if key in self._added:
            return False

        try:
            self.conn.execute(
                "INSERT INTO searchIndex(name, type, path) VALUES (?, ?, ?)",
                key
            )
        except sqlite3.Error as e:
            raise StorageError(
                f"Unable to insert entry: {e}",
                db_path=str(self.db_path),
                details={"name": entry.name, "type": entry.type_label, "path": entry.path}
            ) from e

        self._added.add(key)
        return True

    def add_all(self, entries: Iterable[IndexEntry]) -> tuple[int, int]:
        """
        Insert a stream of entries in one transaction.

        Returns:
            (entries seen, rows written)
        """
        seen = 0
        written = 0
        try:
            for entry in entries:
                seen += 1
                if self.add(entry):
                    written += 1
        except StorageError:
            self.conn.rollback()
            raise

        self.commit()
        logger.info(f"Stored {written} of {seen} entries ({seen - written} duplicates)")
        return seen, written

    def commit(self) -> None:
        try:
            self.conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Unable to commit search index: {e}", db_path=str(self.db_path)) from e

    # --- Queries ---

    def count(self) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM searchIndex").fetchone()[0]

    def entries(self) -> list[tuple[str, str, str]]:
        """All rows as (name, type, path), in insertion order."""
        return self.conn.execute(
            "SELECT name, type, path FROM searchIndex ORDER BY id"
        ).fetchall()

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "SearchIndex":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
