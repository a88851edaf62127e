"""Tests for rendering content blocks onto a recording surface."""

from __future__ import annotations

import pytest

from kdvbundle.config import load_config
from kdvbundle.layout.blocks import AddressColumns, DocumentContent, Heading, Paragraph, RawLine
from kdvbundle.layout.flow import PageCursor
from kdvbundle.layout.render import PageWriter, render_blocks, render_document
from kdvbundle.layout.surface import RecordingSurface
from kdvbundle.layout.wrap import normalize_whitespace
from kdvbundle.utils.errors import FontLoadError

LAYOUT = load_config().layout


def make_writer() -> tuple[RecordingSurface, PageWriter]:
    surface = RecordingSurface()
    return surface, PageWriter(surface, LAYOUT)


def test_heading_draws_at_its_size_without_paragraph_gap() -> None:
    surface, writer = make_writer()
    cursor = render_blocks([Heading("Titel", 16, space_after=0.5)], writer, PageCursor(0, 700))
    (run,) = surface.pages[0]
    assert (run.x, run.y, run.text, run.font_size) == (56, 700, "Titel", 16)
    assert cursor == PageCursor(0, 700 - 16 - 8)


def test_paragraph_gap_between_sub_paragraphs() -> None:
    surface, writer = make_writer()
    cursor = render_blocks([Paragraph("eins\n\nzwei")], writer, PageCursor(0, 700))
    assert [(r.text, r.y) for r in surface.pages[0]] == [("eins", 700), ("zwei", 676)]
    assert all(r.font_size == LAYOUT.body_size for r in surface.pages[0])
    assert cursor.y == 660


def test_empty_paragraph_only_applies_space_after() -> None:
    surface, writer = make_writer()
    cursor = render_blocks([Paragraph("   ", space_after=1.0)], writer, PageCursor(0, 700))
    assert surface.pages == [[]]
    assert cursor.y == 684


def test_raw_line_is_never_wrapped() -> None:
    surface, writer = make_writer()
    text = "Unterschrift: " + "_" * 200
    cursor = render_blocks([RawLine(text)], writer, PageCursor(0, 700))
    assert [r.text for r in surface.pages[0]] == [text]
    assert cursor.y == 684


def test_raw_line_breaks_page_at_bottom_margin() -> None:
    surface, writer = make_writer()
    cursor = render_blocks([RawLine("Unterschrift")], writer, PageCursor(0, 60))
    assert surface.pages[0] == []
    assert surface.pages[1][0].y == pytest.approx(writer.geometry.top)
    assert cursor.page_index == 1


def test_address_columns_share_start_and_place_date_below() -> None:
    surface, writer = make_writer()
    block = AddressColumns(
        left=("Behörde", "Abteilung", "Ort"),
        right=("Max Muster", "Straße 1"),
        date_line="Berlin, 19.10.2026",
    )
    cursor = render_blocks([block], writer, PageCursor(0, 700))
    runs = {r.text: r for r in surface.pages[0]}
    right_x = writer.geometry.width * LAYOUT.right_column_ratio

    assert runs["Behörde"].x == 56 and runs["Behörde"].y == 700
    assert runs["Max Muster"].x == pytest.approx(right_x) and runs["Max Muster"].y == 700
    assert runs["Ort"].y == 668
    assert runs["Straße 1"].y == 684
    date = runs["Berlin, 19.10.2026"]
    assert date.x == pytest.approx(right_x)
    assert date.y == pytest.approx(652 - 0.6 * 16)
    assert cursor.y == pytest.approx(date.y - 1.6 * 16)
    assert right_x > 56 + max(len(t) for t in block.left) * LAYOUT.body_size * 0.5


def test_address_columns_move_to_new_page_together() -> None:
    surface, writer = make_writer()
    block = AddressColumns(left=("a", "b", "c"), right=("d",), date_line="e")
    cursor = render_blocks([block], writer, PageCursor(0, 100))
    assert surface.pages[0] == []
    assert {r.y for r in surface.pages[1] if r.text in ("a", "d")} == {writer.geometry.top}
    assert cursor.page_index == 1


def test_address_columns_taller_than_page_continue_on_next_page() -> None:
    surface, writer = make_writer()
    left = tuple(f"Zeile {i}" for i in range(60))
    right = ("Max", "Weg 1", "Berlin")
    block = AddressColumns(left=left, right=right, date_line="Berlin, 19.10.2026")
    cursor = render_blocks([block], writer, PageCursor(0, writer.geometry.top))

    runs = [run for page in surface.pages for run in page]
    assert len(surface.pages) == 2
    assert cursor.page_index == 1
    assert min(run.y for run in runs) >= writer.geometry.bottom
    assert [r.text for r in runs if r.x == writer.geometry.margin] == list(left)
    first_page = {r.text: r.y for r in surface.pages[0]}
    assert first_page["Max"] == first_page["Zeile 0"]
    assert first_page["Berlin"] == first_page["Zeile 2"]
    assert surface.pages[1][-1].text == "Berlin, 19.10.2026"
    assert surface.pages[1][-1].y < surface.pages[1][-2].y


def test_long_paragraph_spans_pages_in_order() -> None:
    surface, writer = make_writer()
    words = [f"w{i:03d}" for i in range(1000)]
    text = " ".join(words)
    render_blocks([Paragraph(text)], writer, PageCursor(0, writer.geometry.top))

    assert len(surface.pages) > 1
    drawn = " ".join(r.text for page in surface.pages for r in page)
    assert drawn == normalize_whitespace(text)
    floor = writer.geometry.bottom + writer.line_height
    for page in surface.pages:
        assert all(r.y >= floor for r in page)
        ys = [r.y for r in page]
        assert ys == sorted(ys, reverse=True)


def test_writer_records_same_runs_as_surface() -> None:
    surface, writer = make_writer()
    render_blocks([Paragraph("x " * 3000)], writer, PageCursor(0, writer.geometry.top))
    assert [list(p) for p in writer.pages()] == surface.pages


def test_unknown_block_kind_is_rejected() -> None:
    _, writer = make_writer()
    with pytest.raises(AssertionError):
        render_blocks([object()], writer, PageCursor(0, 700))  # type: ignore[list-item]


def test_render_document_draws_header_and_saves() -> None:
    surface = RecordingSurface()
    content = DocumentContent("Titel", "Untertitel", (Paragraph("Text"),))
    doc = render_document("demo", "demo.pdf", content, surface, LAYOUT)

    assert doc.texts() == ["Titel", "Untertitel", "Text"]
    assert doc.page_count == 1
    assert surface.loaded_fonts == [LAYOUT.font_name]
    assert surface.saved
    title, subtitle, body = doc.pages[0]
    assert title.font_size == LAYOUT.heading_size
    assert subtitle.y == pytest.approx(title.y - 1.4 * 16)
    assert body.y == pytest.approx(subtitle.y - 1.2 * 16)
    assert title.color == LAYOUT.heading_color
    assert subtitle.color == LAYOUT.subtitle_color == (0.15, 0.15, 0.15)
    assert body.color == LAYOUT.text_color
    assert [r.color for r in surface.pages[0]] == [title.color, subtitle.color, body.color]


def test_render_document_without_subtitle() -> None:
    doc = render_document(
        "demo", "demo.pdf", DocumentContent("Titel", None, ()), RecordingSurface(), LAYOUT
    )
    assert doc.texts() == ["Titel"]


def test_font_failure_propagates_unchanged() -> None:
    layout = LAYOUT.model_copy(update={"font_name": "NoSuchFont"})
    with pytest.raises(FontLoadError):
        render_document(
            "demo", "demo.pdf", DocumentContent("T", None, ()), RecordingSurface(), layout
        )
