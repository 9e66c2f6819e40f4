"""
Pydantic schemas defining the contracts between modules.

Candidate:   Contract from the Entry Locator to the Type Classifier
IndexEntry:  Output of the indexer, consumed by the search index sink
DocsetLayout / BuildResult: Docset tree paths and the outcome of a build

Data flow through the pipeline:
  index page → BeautifulSoup → EntryLocator → Candidate
  Candidate → TypeClassifier → IndexEntry → SearchIndex
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .element_type import ElementType


# --- Pipeline contract: Locator → Classifier ---

class Candidate(BaseModel):
    """An anchor that looks like an index entry, before classification."""
    model_config = ConfigDict(frozen=True)

    name: str                  # Visible text of the anchor
    path: str                  # The anchor's href
    context_text: str          # Visible text of the enclosing <dt>
    context_class: str = ""    # class attribute of the <dt>, "" when absent


# --- Pipeline output: Classifier → sink ---

class IndexEntry(BaseModel):
    """One row of the search index."""
    model_config = ConfigDict(frozen=True)

    name: str
    element_type: ElementType
    path: str

    @field_validator("element_type")
    @classmethod
    def _must_be_classified(cls, value: ElementType) -> ElementType:
        if value is ElementType.NOT_FOUND:
            raise ValueError("an index entry needs a classified element type")
        return value

    @property
    def type_label(self) -> str:
        return self.element_type.label


# --- Docset tree ---

class DocsetLayout(BaseModel):
    """Paths inside a <name>.docset bundle."""
    docset_dir: Path

    @property
    def contents_dir(self) -> Path:
        return self.docset_dir / "Contents"

    @property
    def resources_dir(self) -> Path:
        return self.contents_dir / "Resources"

    @property
    def documents_dir(self) -> Path:
        return self.resources_dir / "Documents"

    @property
    def info_plist_path(self) -> Path:
        return self.contents_dir / "Info.plist"

    @property
    def database_path(self) -> Path:
        return self.resources_dir / "docSet.dsidx"


class BuildResult(BaseModel):
    """Outcome of DocsetBuilder.build()."""
    docset_dir: Path
    index_page: Optional[str] = None            # dashIndexFilePath written to Info.plist
    index_files: list[Path] = Field(default_factory=list)
    entries_found: int = 0                      # Classified entries, duplicates included
    entries_stored: int = 0                     # Rows written after dedup
    skipped_files: list[str] = Field(default_factory=list)  # Unreadable index pages
