"""Selection of the schedule document among the links of the school's index page."""

import re
from typing import List, Optional, Sequence

from .config import DOCUMENT_LINK_RE
from .utils import NoDocumentLinksError, NotEnoughDocumentLinksError


def extract_document_links(html: str, pattern: Optional[re.Pattern] = None) -> List[str]:
    """
    Extract every schedule document URL from an HTML page.

    Args:
        html: Raw HTML of the index page
        pattern: Regex matching a full document URL

    Returns:
        Matching URLs in document order (duplicates kept)

    Raises:
        NoDocumentLinksError: If no URL matches
    """
    pattern = pattern or DOCUMENT_LINK_RE
    links = [match.group(0) for match in pattern.finditer(html or '')]
    if not links:
        raise NoDocumentLinksError("No schedule document found on the index page")
    return links


def select_current_document(links: Sequence[str], index: int = 1) -> str:
    """
    Pick the current week's document from the extracted links.

    The index page lists the current week's document second, hence the
    default index of 1. This depends on how the page is laid out, not on the
    documents themselves.

    Args:
        links: URLs returned by extract_document_links()
        index: Position of the current document in ``links``

    Returns:
        The selected URL

    Raises:
        NotEnoughDocumentLinksError: If fewer than index + 1 links exist
    """
    if len(links) <= index:
        raise NotEnoughDocumentLinksError(
            f"Expected at least {index + 1} schedule documents, found {len(links)}"
        )
    return links[index]


def find_current_document(html: str, pattern: Optional[re.Pattern] = None, index: int = 1) -> str:
    """Extract the document links from an index page and select the current one."""
    return select_current_document(extract_document_links(html, pattern), index)
