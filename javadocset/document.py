"""
Document acquisition: turns an index page on disk into a BeautifulSoup tree.

Older javadoc pages declare charsets such as iso-8859-1 in a <meta> tag, so
the page is read as bytes, the declared charset is detected, and the bytes
are decoded the way a browser would before parsing.

Input:  path to an index-*.html / index-all.html page
Output: BeautifulSoup document (raises IndexDocumentError when unreadable)
"""

import re
from pathlib import Path
from typing import Union

from bs4 import BeautifulSoup

from .exceptions import IndexDocumentError
from .logger import get_module_logger

logger = get_module_logger("document")

# WHATWG encoding spec: browsers silently remap these charsets.
# https://encoding.spec.whatwg.org/#names-and-labels
WHATWG_CHARSET_MAP = {
    'iso-8859-1': 'windows-1252',
    'iso8859-1': 'windows-1252',
    'iso88591': 'windows-1252',
    'latin-1': 'windows-1252',
    'latin1': 'windows-1252',
    'us-ascii': 'windows-1252',
    'ascii': 'windows-1252',
    'iso-8859-9': 'windows-1254',
    'iso-8859-11': 'windows-874',
}

META_CHARSET_PATTERN = re.compile(r'<meta[^>]+charset=["\']?\s*([^\s"\';>]+)', re.IGNORECASE)
META_CONTENT_TYPE_PATTERN = re.compile(
    r'<meta[^>]+content=["\'][^"\']*charset=([^\s"\';>]+)', re.IGNORECASE
)


def detect_charset_from_bytes(raw_bytes: bytes) -> str:
    """
    Detect charset from raw HTML bytes by scanning the first 2048 bytes
    for <meta charset=...> or <meta http-equiv="Content-Type" content="...; charset=...">.

    Applies WHATWG browser charset mapping (e.g. iso-8859-1 → windows-1252).

    Returns the browser-equivalent charset or 'utf-8' as default.
    """
    head_str = raw_bytes[:2048].decode('ascii', errors='ignore')

    m = META_CHARSET_PATTERN.search(head_str) or META_CONTENT_TYPE_PATTERN.search(head_str)
    if not m:
        return 'utf-8'

    charset = m.group(1).strip().lower()
    return WHATWG_CHARSET_MAP.get(charset, charset)


def decode_html(raw_bytes: bytes) -> str:
    """Decode page bytes with the declared charset, falling back to UTF-8."""
    charset = detect_charset_from_bytes(raw_bytes)
    try:
        return raw_bytes.decode(charset, errors='replace')
    except LookupError:
        # Unknown charset label in the <meta> tag
        logger.warning(f"Unknown charset '{charset}', decoding as utf-8")
        return raw_bytes.decode('utf-8', errors='replace')


def parse_html(html: str, parser: str = 'html5lib') -> BeautifulSoup:
    """Parse an HTML string with the given BeautifulSoup tree builder."""
    return BeautifulSoup(html, parser)


def load_index_document(file_path: Union[str, Path], parser: str = 'html5lib') -> BeautifulSoup:
    """
    Read and parse one index page.

    Args:
        file_path: Path of the index page
        parser: BeautifulSoup tree builder ('html5lib' or 'lxml')

    Returns:
        Parsed document

    Raises:
        IndexDocumentError: if the file cannot be read or parsed
    """
    file_path = Path(file_path)

    try:
        raw_bytes = file_path.read_bytes()
    except OSError as e:
        raise IndexDocumentError(
            f"Unable to open file: {e}",
            file_path=str(file_path),
            details={"error": str(e)}
        ) from e

    try:
        return parse_html(decode_html(raw_bytes), parser)
    except Exception as e:
        # Tree builders raise their own exception types (FeatureNotFound, ...)
        raise IndexDocumentError(
            f"Unable to parse index: {e}",
            file_path=str(file_path),
            details={"parser": parser, "error": str(e)}
        ) from e
