"""
Custom exceptions for the javadoc docset indexer.

Error philosophy:
  - DocsetError        → FAIL HARD: the docset tree cannot be built, run stops.
  - EmptyIndexError    → FAIL HARD: nothing was indexed, reported as a usage error.
  - StorageError       → FAIL HARD: the search index database is unusable.
  - IndexDocumentError → SKIP FILE: one index page is unreadable, logged and skipped.

Classification misses are not exceptions at all; the indexer logs a warning
and drops the anchor.
"""

from typing import Optional


class JavadocsetError(Exception):
    """Base exception for all docset indexer errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- FAIL HARD: stops the run ---

class DocsetError(JavadocsetError):
    """Raised when the docset directory tree cannot be prepared."""
    pass


class EmptyIndexError(DocsetError):
    """
    Raised when no entries were indexed across all index files.

    Treated as a usage error: the folder given was most likely not a
    javadoc API folder.
    """
    pass


class StorageError(JavadocsetError):
    """Raised when the search index database cannot be created or written."""

    def __init__(
        self,
        message: str,
        db_path: Optional[str] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.db_path = db_path


# --- SKIP FILE: the indexer continues with the next index page ---

class IndexDocumentError(JavadocsetError):
    """Raised when an index page cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        file_path: str,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.file_path = file_path
