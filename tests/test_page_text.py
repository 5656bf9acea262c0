import fitz  # PyMuPDF

from newsletter_extractor.layout import DATE_RECT, DESCRIPTION_RECT, ISSUE_RECT
from newsletter_extractor.models import Rect, TextFragment
from newsletter_extractor.page_text import PageText, get_text_in_rect


def make_page(*fragments):
    return PageText(page_number=1, width=1200, height=1700, fragments=list(fragments))


def test_returns_only_fragment_inside_date_rect():
    page = make_page(
        TextFragment("Unrelated", x=100, y=1000, width=90, height=20),
        TextFragment("March 2024", x=800, y=120, width=100, height=20),
    )
    assert get_text_in_rect(page, DATE_RECT) == "March 2024"


def test_zero_height_fragments_never_contribute():
    page = make_page(
        TextFragment("", x=800, y=120, width=0, height=0),
        TextFragment("marker", x=800, y=130, width=40, height=0),
        TextFragment("March", x=800, y=120, width=50, height=20),
    )
    assert get_text_in_rect(page, DATE_RECT) == "March"


def test_joins_in_native_order_not_position_order():
    page = make_page(
        TextFragment("second", x=1000, y=120, width=50, height=20),
        TextFragment("first", x=800, y=120, width=50, height=20),
    )
    assert get_text_in_rect(page, DATE_RECT) == "second first"


def test_no_match_gives_empty_string():
    page = make_page(TextFragment("elsewhere", x=10, y=10, width=50, height=20))
    assert get_text_in_rect(page, ISSUE_RECT) == ""


def test_fragment_touching_rect_edge_is_excluded():
    rect = Rect(x=100, y=100, width=50, height=50)
    page = make_page(
        TextFragment("right", x=150, y=110, width=20, height=10),
        TextFragment("above", x=110, y=150, width=20, height=10),
        TextFragment("inside", x=120, y=120, width=20, height=10),
    )
    assert get_text_in_rect(page, rect) == "inside"


def test_partial_overlap_counts():
    page = make_page(TextFragment("straddles", x=1100, y=210, width=200, height=20))
    assert get_text_in_rect(page, DATE_RECT) == "straddles"


def test_indexes_fitz_page_spans(newsletter_pdf):
    with fitz.open(str(newsletter_pdf)) as doc:
        page_text = PageText.from_fitz_page(doc[0])

    assert page_text.page_number == 1
    assert (page_text.width, page_text.height) == (1200, 1700)
    texts = [f.text for f in page_text.fragments]
    assert "March 2024" in texts
    date_fragment = page_text.fragments[texts.index("March 2024")]
    assert abs(date_fragment.x - 800) < 0.01
    assert abs(date_fragment.y - 120) < 0.01
    assert date_fragment.height > 0

    assert get_text_in_rect(page_text, DATE_RECT) == "March 2024"
    assert get_text_in_rect(page_text, ISSUE_RECT) == "Issue 42"
    assert get_text_in_rect(page_text, DESCRIPTION_RECT) == "Spring events and club news"
