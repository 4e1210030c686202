import pytest

from schedule_engine.links import (
    extract_document_links,
    find_current_document,
    select_current_document,
)
from schedule_engine.utils import (
    LinkDiscoveryError,
    NoDocumentLinksError,
    NotEnoughDocumentLinksError,
)

BASE = "https://isisfacchinetti.edu.it/wp-content/uploads/2023/10/"

INDEX_HTML = f"""
<html><body>
  <a href="{BASE}Orario-CLASSI-ottava-settimana.pdf">Ottava settimana</a>
  <a href="{BASE}Orario-CLASSI-nona-settimana.pdf">Nona settimana</a>
  <a href="{BASE}Orario-DOCENTI-nona-settimana.pdf">Docenti</a>
  <a href="https://example.com/Orario-CLASSI-x.pdf">altro</a>
</body></html>
"""


def test_extract_document_links_in_document_order():
    links = extract_document_links(INDEX_HTML)

    assert links == [
        f"{BASE}Orario-CLASSI-ottava-settimana.pdf",
        f"{BASE}Orario-CLASSI-nona-settimana.pdf",
    ]


def test_extract_document_links_stops_at_attribute_end():
    html = f'<a href="{BASE}Orario-CLASSI-a.pdf">a</a><a href="{BASE}Orario-CLASSI-b.pdf">b</a>'

    assert extract_document_links(html) == [
        f"{BASE}Orario-CLASSI-a.pdf",
        f"{BASE}Orario-CLASSI-b.pdf",
    ]


def test_extract_document_links_none_found():
    with pytest.raises(NoDocumentLinksError):
        extract_document_links("<html></html>")


def test_select_current_document_takes_second_link():
    assert select_current_document(["a.pdf", "b.pdf", "c.pdf"]) == "b.pdf"
    assert select_current_document(["a.pdf"], index=0) == "a.pdf"


def test_select_current_document_with_single_link():
    with pytest.raises(NotEnoughDocumentLinksError):
        select_current_document(["a.pdf"])


def test_find_current_document():
    assert find_current_document(INDEX_HTML) == f"{BASE}Orario-CLASSI-nona-settimana.pdf"


def test_link_errors_share_a_base_class():
    with pytest.raises(LinkDiscoveryError):
        find_current_document(f'<a href="{BASE}Orario-CLASSI-solo.pdf">x</a>')
