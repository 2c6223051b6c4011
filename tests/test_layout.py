import pytest

from socialcard.design import build_card_markup, html
from socialcard.errors import LayoutError
from socialcard.layout import layout_markup, render_svg
from socialcard.layout import engine
from socialcard.layout.svg import fmt
from socialcard.layout.text import wrap_text


def _heading(root):
    (heading,) = root.children
    return heading


def test_root_fills_canvas(card_config):
    root = layout_markup(build_card_markup("Jane Doe"), card_config)

    assert (root.x, root.y, root.width, root.height) == (0, 0, 1200, 630)
    assert root.style.background == "#1d1f21"


def test_heading_is_centered(card_config):
    root = layout_markup(build_card_markup("Jane Doe"), card_config)
    heading = _heading(root)

    assert heading.x + heading.width / 2 == pytest.approx(600)
    assert heading.y + heading.height / 2 == pytest.approx(315)
    assert heading.height == pytest.approx(60)


def test_heading_text_line(card_config):
    root = layout_markup(build_card_markup("Jane Doe"), card_config)
    heading = _heading(root)
    (text,) = heading.children
    (line,) = text.lines

    assert line.run.text == "Jane Doe"
    assert line.run.font_size == 60
    assert line.font.face.weight == 700
    assert text.style.color == "#ffffff"
    assert heading.y < line.baseline < heading.y + heading.height
    assert line.x == pytest.approx(heading.x)


def test_empty_author_lays_out_background_only(card_config):
    root = layout_markup(build_card_markup(""), card_config)
    heading = _heading(root)

    assert heading.children == []
    assert heading.width == 0
    assert heading.height == 0


def test_long_author_wraps_inside_canvas(card_config):
    author = "Jane Doe " * 12
    root = layout_markup(build_card_markup(author.strip()), card_config)
    (text,) = _heading(root).children

    assert len(text.lines) > 1
    assert all(line.run.width <= 1200 for line in text.lines)
    baselines = [line.baseline for line in text.lines]
    assert baselines == sorted(baselines)


def test_row_layout_with_padding_and_justify(card_config):
    node = html(
        '<div tw="flex w-full h-full p-[20px] justify-between">'
        '<div tw="w-[100px] h-[50px] bg-white"></div>'
        '<div tw="w-[200px] h-[50px] bg-black"></div>'
        "</div>"
    )

    root = layout_markup(node, card_config)
    first, second = root.children

    assert (first.x, first.y, first.width, first.height) == (20, 20, 100, 50)
    assert (second.x, second.y, second.width, second.height) == (980, 20, 200, 50)


def test_column_stretches_children_by_default(card_config):
    node = html('<div tw="flex flex-col w-full h-full"><div tw="h-[10px] bg-white"></div></div>')

    root = layout_markup(node, card_config)
    (child,) = root.children

    assert child.width == 1200
    assert child.height == 10


def test_text_item_shrinks_to_its_content_in_row(card_config):
    node = html('<div tw="flex flex-col w-full h-full text-center"><p tw="m-0">Jane</p></div>')

    root = layout_markup(node, card_config)
    (paragraph,) = root.children
    (text,) = paragraph.children

    # p is a row container, its text item is only as wide as the text
    assert paragraph.width == 1200
    assert text.lines[0].x == pytest.approx(text.x)


def test_nested_text_is_shaped_once_per_width(card_config, monkeypatch):
    calls = []

    def counting_wrap_text(font, text, size, max_width):
        calls.append(max_width)
        return wrap_text(font, text, size, max_width)

    monkeypatch.setattr(engine, "wrap_text", counting_wrap_text)
    node = html('<div tw="flex flex-col w-full h-full">' + "<div>" * 8 + "Jane" + "</div>" * 8 + "</div>")

    layout_markup(node, card_config)

    # one width while measuring the tree, one once the row items shrink to the text
    assert len(calls) <= 2
    assert len(calls) == len(set(calls))


def test_unshapeable_author_raises(card_config):
    with pytest.raises(LayoutError):
        layout_markup(build_card_markup("漢字"), card_config)


def test_svg_document(card_config):
    svg = render_svg(build_card_markup("Jane Doe"), card_config)

    assert svg.startswith('<svg width="1200" height="630" viewBox="0 0 1200 630" xmlns="http://www.w3.org/2000/svg">')
    assert svg.endswith("</svg>")
    assert '<rect x="0" y="0" width="1200" height="630" fill="#1d1f21"/>' in svg
    assert svg.count("<path ") == 1
    assert 'fill="#ffffff" fill-rule="nonzero"' in svg
    # Glyphs are outlines, not text
    assert "<text" not in svg
    assert "Jane" not in svg


def test_svg_is_deterministic(card_config):
    first = render_svg(build_card_markup("Jane Doe"), card_config)
    second = render_svg(build_card_markup("Jane Doe"), card_config)

    assert first == second


def test_svg_for_empty_author_has_no_paths(card_config):
    svg = render_svg(build_card_markup(""), card_config)

    assert "<path" not in svg
    assert "<rect" in svg


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, "0"), (-0.001, "0"), (10.0, "10"), (1.5, "1.5"), (2.346, "2.35"), (-3.1, "-3.1")],
)
def test_fmt(value, expected):
    assert fmt(value) == expected
