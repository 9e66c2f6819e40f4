"""
Docset tree: prepares <name>.docset around a copy of a javadoc API folder.

    <name>.docset/
        Contents/
            Info.plist
            Resources/
                docSet.dsidx
                Documents/        ← copy of the javadoc root

Javadoc ships either a single index-all.html or an index-files/ folder with
one index-N.html page per letter.  Both layouts are supported.
"""

import os
import plistlib
import shutil
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_WALK_LIMIT, OVERVIEW_SUMMARY
from .exceptions import DocsetError
from .logger import get_module_logger
from .schemas import DocsetLayout

logger = get_module_logger("docset")

INDEX_ALL = "index-all.html"
INDEX_FILES_DIR = "index-files"
FIRST_SPLIT_INDEX = f"{INDEX_FILES_DIR}/index-1.html"


def create_layout(docset_name: str, parent_dir: Union[str, Path] = ".") -> DocsetLayout:
    """
    Create an empty <docset_name>.docset tree, removing any existing one.

    Raises:
        DocsetError: if the old tree cannot be removed or the new one created
    """
    layout = DocsetLayout(docset_dir=Path(parent_dir) / f"{docset_name}.docset")

    if layout.docset_dir.exists():
        logger.info(f"Removing existing docset directory: {layout.docset_dir}")
        try:
            shutil.rmtree(layout.docset_dir)
        except OSError as e:
            raise DocsetError(
                f"Unable to remove existing docset directory: {e}",
                details={"docset_dir": str(layout.docset_dir)}
            ) from e

    logger.info("Creating docset folder structure...")
    try:
        layout.documents_dir.mkdir(parents=True)
    except OSError as e:
        raise DocsetError(
            f"Unable to create docset folder structure: {e}",
            details={"docset_dir": str(layout.docset_dir)}
        ) from e

    return layout


def find_javadoc_root(
    javadoc_path: Union[str, Path],
    walk_limit: int = DEFAULT_WALK_LIMIT
) -> tuple[Path, bool]:
    """
    Locate the directory holding overview-summary.html.

    Users often point at a folder above the actual javadoc root (an unpacked
    archive, a build output dir).  When the summary is not directly inside
    javadoc_path, the tree is walked until it is found or walk_limit
    filesystem entries have been visited.

    Returns:
        (javadoc root, whether overview-summary.html was found).  The root is
        javadoc_path itself when nothing was found.
    """
    javadoc_path = Path(javadoc_path)

    if (javadoc_path / OVERVIEW_SUMMARY).is_file():
        return javadoc_path, True

    visited = 0
    for dirpath, dirnames, filenames in os.walk(javadoc_path):
        # Deterministic walk order
        dirnames.sort()
        for name in [*dirnames, *sorted(filenames)]:
            visited += 1
            if visited > walk_limit:
                logger.warning(f"Hit file enumeration limit ({walk_limit}) looking for {OVERVIEW_SUMMARY}")
                return javadoc_path, False
            if name == OVERVIEW_SUMMARY:
                return Path(dirpath), True

    return javadoc_path, False


def choose_index_page(javadoc_root: Path, summary_found: bool) -> Optional[str]:
    """Pick the page Dash opens first (dashIndexFilePath), relative to Documents."""
    if summary_found:
        return OVERVIEW_SUMMARY
    if (javadoc_root / INDEX_FILES_DIR).is_dir():
        return FIRST_SPLIT_INDEX
    if (javadoc_root / INDEX_ALL).is_file():
        return INDEX_ALL
    return None


def copy_documents(javadoc_root: Path, layout: DocsetLayout) -> None:
    """Copy the javadoc tree into Contents/Resources/Documents."""
    logger.info(f"Copying files... source={javadoc_root} destination={layout.documents_dir}")
    try:
        shutil.copytree(javadoc_root, layout.documents_dir, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        raise DocsetError(
            f"Unable to copy javadoc files: {e}",
            details={"source": str(javadoc_root), "destination": str(layout.documents_dir)}
        ) from e
    logger.info("Done!")


def find_index_files(documents_dir: Path) -> list[Path]:
    """
    List the index pages to scan inside the copied documents.

    A split index (index-files/index-N.html) takes precedence over
    index-all.html.  Split pages are returned in natural letter order
    (index-2 before index-10).
    """
    split_dir = documents_dir / INDEX_FILES_DIR
    if split_dir.is_dir():
        pages = [
            p for p in split_dir.rglob("index-*.html")
            if p.is_file()
        ]
        return sorted(pages, key=_index_sort_key)

    index_all = documents_dir / INDEX_ALL
    if index_all.is_file():
        return [index_all]

    return []


def _index_sort_key(path: Path):
    suffix = path.stem[len("index-"):]
    return (0, int(suffix), "") if suffix.isdigit() else (1, 0, path.name)


def docset_identifier(docset_name: str) -> str:
    """First word of the docset name, lowercased (e.g. 'Java SE 8' → 'java')."""
    return docset_name.split(" ")[0].lower()


def write_info_plist(layout: DocsetLayout, docset_name: str, index_page: Optional[str]) -> None:
    """
    Write Contents/Info.plist describing the docset to Dash.

    Raises:
        DocsetError: if the plist cannot be written
    """
    identifier = docset_identifier(docset_name)
    plist = {
        "CFBundleIdentifier": identifier,
        "CFBundleName": docset_name,
        "DocSetPlatformFamily": identifier,
        "dashIndexFilePath": index_page or "",
        "DashDocSetFamily": "java",
        "isDashDocset": True,
    }

    try:
        with open(layout.info_plist_path, "wb") as f:
            plistlib.dump(plist, f)
    except OSError as e:
        raise DocsetError(
            f"Unable to write to plist file: {e}",
            details={"plist_path": str(layout.info_plist_path)}
        ) from e
