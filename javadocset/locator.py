"""
Entry Locator: finds the anchors of a javadoc index page that introduce an
index entry.

An index page links to the same symbols many times: navigation bars,
"see also" references inside descriptions, the letter bar at the top.  Only
the anchor that opens a definition term counts:

    <dt><a href="com/example/Foo.html">Foo</a> - Class in com.example</dt>
    <dt><span class="memberNameLink"><a href="...">bar()</a></span> - Method in ...</dt>

Pipeline position: runs on each parsed index page, before the TypeClassifier.
Input:  BeautifulSoup document
Output: lazy sequence of Candidate, in document order
"""

from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag

from .schemas import Candidate

# Styling wrappers some javadoc versions put around the entry anchor.
# At most one wrapper level is unwrapped.
WRAPPER_TAGS = ('span', 'code', 'i', 'b')

# The element that introduces one entry of the index definition list
TERM_TAG = 'dt'


def _is_first_child(elem: Tag) -> bool:
    """
    True when elem is the very first child node of its parent.

    Text nodes count: an anchor preceded by text (even whitespace) is not
    the first child, exactly as in the parsed tree.
    """
    parent = elem.parent
    if parent is None or not parent.contents:
        return False
    return parent.contents[0] is elem


def _class_attr(elem: Tag) -> str:
    """Return the class attribute as written (space-joined), or ''."""
    value = elem.get('class')
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return ' '.join(value)


class EntryLocator:
    """Yields Candidates for the entry anchors of an index page."""

    def __init__(self, wrapper_tags=WRAPPER_TAGS, term_tag: str = TERM_TAG):
        self.wrapper_tags = tuple(wrapper_tags)
        self.term_tag = term_tag

    def resolve_term(self, anchor: Tag) -> Optional[Tag]:
        """
        Return the <dt> an anchor introduces, or None if it is not an entry anchor.

        Checks, in order:
        1. The anchor is the first child of its parent.
        2. If the parent is a styling wrapper, the wrapper is itself the
           first child of its parent (one level only).
        3. The element reached is a <dt>.
        """
        if not _is_first_child(anchor):
            return None

        term = anchor.parent
        if term.name in self.wrapper_tags:
            if not _is_first_child(term):
                return None
            term = term.parent

        if term is None or term.name != self.term_tag:
            return None
        return term

    def locate(self, soup: BeautifulSoup) -> Iterator[Candidate]:
        """
        Scan a parsed index page for entry anchors.

        Args:
            soup: Parsed index page

        Yields:
            Candidate for each entry anchor, in document order
        """
        for anchor in soup.find_all('a'):
            term = self.resolve_term(anchor)
            if term is None:
                continue

            yield Candidate(
                name=anchor.get_text(separator=' ', strip=True),
                path=anchor.get('href', ''),
                context_text=term.get_text(separator=' ', strip=True),
                context_class=_class_attr(term),
            )


def locate_candidates(soup: BeautifulSoup) -> Iterator[Candidate]:
    """Convenience function to locate entry anchors with the default rules."""
    return EntryLocator().locate(soup)
