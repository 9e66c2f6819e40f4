"""
Indexer: composes the EntryLocator and TypeClassifier over index pages.

Pipeline position: between document acquisition and the search index sink.
Input:  parsed index page (or a path to one)
Output: lazy sequence of IndexEntry in document order

The indexer keeps no state across documents, so several pages can be
indexed independently.  Deduplication belongs to the sink.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from bs4 import BeautifulSoup

from .classifier import TypeClassifier
from .document import load_index_document, parse_html
from .element_type import ElementType
from .exceptions import IndexDocumentError
from .locator import EntryLocator
from .logger import get_module_logger
from .schemas import IndexEntry


class Indexer:
    """Turns javadoc index pages into IndexEntry streams."""

    def __init__(
        self,
        locator: Optional[EntryLocator] = None,
        classifier: Optional[TypeClassifier] = None,
        parser: str = 'html5lib',
        logger: Optional[logging.Logger] = None
    ):
        self.locator = locator or EntryLocator()
        self.classifier = classifier or TypeClassifier()
        self.parser = parser
        self.logger = logger or get_module_logger("indexer")

    def index_document(self, soup: BeautifulSoup) -> Iterator[IndexEntry]:
        """
        Classify every entry anchor of one parsed index page.

        Unclassified anchors are logged as warnings and dropped.
        """
        for candidate in self.locator.locate(soup):
            element_type = self.classifier.classify_candidate(candidate)

            if element_type is ElementType.NOT_FOUND:
                self.logger.warning(
                    f"Could not determine type: text={candidate.context_text!r} "
                    f"dt_class={candidate.context_class!r}"
                )
                continue

            self.logger.debug(f"{element_type.label}: {candidate.name} -> {candidate.path}")
            yield IndexEntry(name=candidate.name, element_type=element_type, path=candidate.path)

    def index_file(self, file_path: Union[str, Path]) -> Iterator[IndexEntry]:
        """
        Load one index page and yield its entries.

        Raises:
            IndexDocumentError: if the page cannot be read or parsed
                (raised when iteration starts)
        """
        self.logger.info(f"Indexing from file: {file_path}")
        soup = load_index_document(file_path, self.parser)

        indexed = 0
        for entry in self.index_document(soup):
            indexed += 1
            yield entry

        self.logger.info(f"Indexed {indexed} entries from {Path(file_path).name}")

    def index_files(
        self,
        file_paths: Iterable[Union[str, Path]],
        skipped: Optional[list] = None
    ) -> Iterator[IndexEntry]:
        """
        Yield entries from several index pages in order.

        A page that cannot be loaded is logged and skipped; its path is
        appended to `skipped` when a list is given.
        """
        for file_path in file_paths:
            try:
                yield from self.index_file(file_path)
            except IndexDocumentError as e:
                self.logger.error(f"Skipping {e.file_path}: {e.message}")
                if skipped is not None:
                    skipped.append(e.file_path)


def index_html(html: str, parser: str = 'html5lib') -> list[IndexEntry]:
    """Convenience function to index an HTML string."""
    return list(Indexer(parser=parser).index_document(parse_html(html, parser)))
