"""
Javadoc docset indexer

Turns a javadoc API folder into a Dash docset with a searchable symbol index.
- EntryLocator:   finds the anchors of an index page that introduce entries
- TypeClassifier: decides each entry's kind (Class, Method, Field, ...)
- Indexer:        runs both over index pages and yields IndexEntry objects
- SearchIndex:    deduplicates entries into the docset's SQLite index

Public API surface:
  Pipeline classes  — EntryLocator, TypeClassifier, Indexer, SearchIndex, DocsetBuilder
  Data models       — ElementType, Candidate, IndexEntry, BuildResult
  Configuration     — IndexerConfig
  Error types       — DocsetError, EmptyIndexError (fatal), IndexDocumentError (skip file)
"""

# --- Pipeline classes ---
from .locator import EntryLocator
from .classifier import TypeClassifier
from .indexer import Indexer
from .storage import SearchIndex
from .main import DocsetBuilder, build_docset

# --- Data models ---
from .element_type import ElementType
from .schemas import Candidate, IndexEntry, BuildResult

# --- Configuration ---
from .config import IndexerConfig

# --- Exceptions ---
from .exceptions import (
    JavadocsetError,
    DocsetError,
    EmptyIndexError,
    IndexDocumentError,
    StorageError,
)

__version__ = "0.1.0"
__all__ = [
    "EntryLocator",
    "TypeClassifier",
    "Indexer",
    "SearchIndex",
    "DocsetBuilder",
    "build_docset",
    "ElementType",
    "Candidate",
    "IndexEntry",
    "BuildResult",
    "IndexerConfig",
    "JavadocsetError",
    "DocsetError",
    "EmptyIndexError",
    "IndexDocumentError",
    "StorageError",
]
