from datetime import datetime

import pytest

from audit_report.reporting.document import ImageOp
from audit_report.reporting.layout import LayoutEngine
from audit_report.reporting.styles import ERROR_RED, SUB_TITLE_BLUE, TITLE_BLUE, general_style


@pytest.fixture
def layout():
    return LayoutEngine(created_at=datetime(2024, 1, 2, 3, 4, 5))


def content(page):
    """Texts drawn after the header / footer chrome."""
    return page.texts[2:]


# -------------------------------------------------
# Pages
# -------------------------------------------------

def test_document_is_created_lazily(layout):
    assert layout.document.page_count == 0

    layout.write_line("first line")

    assert layout.document.page_count == 1
    assert content(layout.current_page)[0].text == "first line"


def test_add_page_resets_cursor_and_draws_chrome(layout):
    layout.add_page()
    layout.y = 120

    page = layout.add_page()

    assert layout.y == 800
    assert layout.document.page_count == 2
    assert [(op.text, op.x, op.y) for op in page.texts] == [
        ("EasyAudit Report", 20, 20),
        ("Created on : 2024-01-02 03:04:05", 420, 20),
    ]
    assert page.style == general_style()


def test_logo_is_drawn_on_every_page():
    layout = LayoutEngine(logo=object())
    layout.add_page()
    layout.add_page()

    for page in layout.document.pages:
        (image,) = page.images
        assert isinstance(image, ImageOp)
        assert (image.x1, image.y1, image.x2, image.y2) == (500, 800, 550, 820)


def test_ensure_room(layout):
    layout.add_page()
    layout.y = 100

    assert layout.ensure_room(100) is False
    assert layout.ensure_room(101) is True
    assert layout.y == 800


# -------------------------------------------------
# Titles
# -------------------------------------------------

def test_write_title(layout):
    layout.add_page()
    layout.write_title("Helpers", 40)

    (title,) = content(layout.current_page)
    assert (title.text, title.x, title.y) == ("HELPERS", 40, 775)
    assert title.style.color == TITLE_BLUE
    assert title.style.size == 20
    assert layout.y == 745
    assert layout.current_page.style == general_style()


def test_write_title_breaks_page_when_too_low(layout):
    layout.add_page()
    layout.y = 135

    layout.write_title("Helpers")

    assert layout.document.page_count == 2
    (title,) = content(layout.current_page)
    assert (title.x, title.y) == (50, 785)
    assert layout.y == 755


def test_write_section_title(layout):
    layout.add_page()
    layout.write_section_title("aroundPlugins")

    (title,) = content(layout.current_page)
    assert (title.text, title.x, title.y) == ("AROUNDPLUGINS", 43, 785)
    assert title.style.size == 15
    assert layout.y == 765


def test_write_section_title_breaks_after_writing(layout):
    layout.add_page()
    layout.y = 80

    layout.write_section_title("aroundPlugins")

    first, second = layout.document.pages
    assert content(first)[-1].y == 65
    assert content(second) == []
    assert layout.y == 800


# -------------------------------------------------
# Lines
# -------------------------------------------------

def test_write_line_moves_cursor_by_floored_height(layout):
    layout.add_page()
    layout.write_line("nine")
    layout.write_line("eight", 8)

    assert layout.y == 800 - 11 - 10


def test_write_line_breaks_when_below_bottom_margin(layout):
    layout.add_page()
    layout.y = 60

    layout.write_line("last line")

    assert layout.document.page_count == 2
    assert layout.y == 800
    assert content(layout.document.pages[0])[-1].text == "last line"


def test_line_of_130_characters_is_drawn_once(layout):
    layout.write_line("x" * 130)
    assert len(content(layout.current_page)) == 1


def test_long_line_is_wrapped_in_order(layout):
    words = [f"w{i:03d}" for i in range(80)]
    layout.write_line(" ".join(words))

    lines = [op.text for op in content(layout.current_page)]
    assert len(lines) > 1
    assert all(len(line) <= 130 for line in lines)
    assert " ".join(lines).split() == words


def test_wrapped_fragment_never_starts_with_a_space(layout):
    layout.write_line("a" * 130 + " " + "b" * 20)

    assert [op.text for op in content(layout.current_page)] == ["a" * 130, "b" * 20]


def test_wrapped_lines_keep_size_and_colour(layout):
    layout.write_line("caution " * 40, 8, *ERROR_RED)

    styles = {op.style for op in content(layout.current_page)}
    assert styles == {general_style(8, *ERROR_RED)}


def test_translation_happens_before_wrapping():
    layout = LayoutEngine(translate=lambda text: "long " * 40 if text == "short" else text)
    layout.write_line("short")

    assert len(content(layout.current_page)) == 2


# -------------------------------------------------
# Subsection intro
# -------------------------------------------------

def test_write_sub_section_intro(layout):
    layout.add_page()
    layout.write_sub_section_intro({
        "title": "Around plugins",
        "explanation": "Around plugins\n\t are   slow.",
        "caution": "Check\nthem.",
    })

    title, explanation, caution = content(layout.current_page)

    assert (title.text, title.x, title.y) == ("Around plugins", 48, 780)
    assert title.style.color == SUB_TITLE_BLUE
    assert (explanation.text, explanation.y) == ("Around plugins are slow.", 770)
    assert (caution.text, caution.y) == ("Check them.", 759)
    assert caution.style == general_style(8, *ERROR_RED)
    assert layout.y == 749


def test_write_sub_section_intro_parts_are_optional(layout):
    layout.add_page()
    layout.write_sub_section_intro({"files": ["a.php"]})

    assert content(layout.current_page) == []
    assert layout.y == 800


def test_write_sub_section_intro_breaks_when_intro_does_not_fit(layout):
    layout.add_page()
    layout.y = 90
    entry = {"title": "T", "explanation": "E"}  # needs 91

    layout.write_sub_section_intro(entry)

    assert layout.document.page_count == 2
    assert content(layout.document.pages[1])[0].y == 780
