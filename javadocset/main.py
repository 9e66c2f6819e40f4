"""
Main orchestrator for the javadoc docset indexer.

Coordinates a full build: docset tree → javadoc copy → index discovery →
Info.plist → search index.  Each index page flows through
Document loader → EntryLocator → TypeClassifier → SearchIndex.
"""

from pathlib import Path
from typing import Optional, Union

from .config import IndexerConfig
from .docset import (
    choose_index_page,
    copy_documents,
    create_layout,
    find_index_files,
    find_javadoc_root,
    write_info_plist,
)
from .exceptions import DocsetError, EmptyIndexError
from .indexer import Indexer
from .logger import get_module_logger, setup_logger
from .schemas import BuildResult
from .storage import SearchIndex

logger = get_module_logger("main")


class DocsetBuilder:
    """
    Builds a Dash docset from a javadoc API folder.

    Stages:
    1. Layout: create <name>.docset/Contents/Resources/Documents
    2. Discovery: find the javadoc root and its index pages
    3. Indexing: classify index entries into docSet.dsidx
    """

    def __init__(
        self,
        config: Optional[IndexerConfig] = None,
        indexer: Optional[Indexer] = None,
        output_dir: Union[str, Path] = "."
    ):
        self.config = config or IndexerConfig()
        self.indexer = indexer or Indexer(parser=self.config.parser)
        self.output_dir = Path(output_dir)

        logger.info("DocsetBuilder initialized")

    def build(self, docset_name: str, javadoc_path: Union[str, Path]) -> BuildResult:
        """
        Build <docset_name>.docset from the javadoc at javadoc_path.

        Returns:
            BuildResult with the docset location and indexing counts

        Raises:
            DocsetError: if the tree cannot be built or has no index pages
            EmptyIndexError: if no entry could be indexed
            StorageError: if the search index cannot be written
        """
        logger.info(f"Running with arguments: docset_name={docset_name} javadoc_path={javadoc_path}")

        # Stage 1: Layout
        layout = create_layout(docset_name, self.output_dir)

        # Stage 2: Discovery
        javadoc_root, summary_found = find_javadoc_root(javadoc_path, self.config.walk_limit)
        index_page = choose_index_page(javadoc_root, summary_found)
        copy_documents(javadoc_root, layout)

        index_files = find_index_files(layout.documents_dir)
        if not index_files:
            raise DocsetError(
                "API folder specified does not contain any index files "
                "(either an 'index-all.html' file or an 'index-files' folder) and is not valid",
                details={"javadoc_path": str(javadoc_path)}
            )

        write_info_plist(layout, docset_name, index_page)

        # Stage 3: Indexing (single pass, single transaction)
        result = BuildResult(
            docset_dir=layout.docset_dir,
            index_page=index_page,
            index_files=index_files,
        )
        with SearchIndex(layout.database_path) as search_index:
            entries = self.indexer.index_files(index_files, skipped=result.skipped_files)
            result.entries_found, result.entries_stored = search_index.add_all(entries)

        if result.entries_stored == 0:
            raise EmptyIndexError(
                "No index entries found in any index file",
                details={"index_files": [str(p) for p in index_files]}
            )

        logger.info(f"Complete: {result.entries_stored} entries in {layout.docset_dir}")
        return result


def build_docset(
    docset_name: str,
    javadoc_path: Union[str, Path],
    config: Optional[IndexerConfig] = None
) -> BuildResult:
    """Convenience function to build a docset in the current directory."""
    config = config or IndexerConfig()
    setup_logger(level=config.log_level, log_file=config.log_file)
    return DocsetBuilder(config=config).build(docset_name, javadoc_path)
