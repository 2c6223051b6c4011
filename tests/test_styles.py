import logging

import pytest

from socialcard.layout.styles import Style, inherit, parse_class, resolve_style


def test_card_container_classes():
    classes = ("flex", "flex-col", "w-full", "h-full", "bg-[#1d1f21]", "text-[#c9cacc]", "items-center", "justify-center")

    style = resolve_style("div", classes, Style())

    assert style.flex_direction == "column"
    assert style.width_full and style.height_full
    assert style.background == "#1d1f21"
    assert style.color == "#c9cacc"
    assert style.align_items == "center"
    assert style.justify_content == "center"


def test_heading_preset_and_classes():
    parent = resolve_style("div", ("text-[#c9cacc]",), Style())

    style = resolve_style("h1", ("text-6xl", "font-bold", "text-white"), parent)

    assert style.font_size == 60.0
    assert style.line_height == 1.0
    assert style.line_height_px == 60.0
    assert style.font_weight == 700
    assert style.color == "#ffffff"
    # 0.67em of the final font size, vertical only
    assert style.margin == pytest.approx((40.2, 0.0, 40.2, 0.0))


def test_heading_preset_scales_parent_font_size():
    style = resolve_style("h1", (), Style(font_size=20.0))

    assert style.font_size == 40.0
    assert style.font_weight == 700


def test_margin_class_overrides_preset_margin():
    style = resolve_style("h1", ("m-0",), Style())

    assert style.margin == (0.0, 0.0, 0.0, 0.0)


def test_inherit_keeps_only_inherited_properties():
    parent = Style(
        color="#123456",
        font_size=30.0,
        font_weight=700,
        text_align="center",
        background="#ffffff",
        padding=(4.0, 4.0, 4.0, 4.0),
        flex_direction="column",
    )

    child = inherit(parent)

    assert child.color == "#123456"
    assert child.font_size == 30.0
    assert child.font_weight == 700
    assert child.text_align == "center"
    assert child.background is None
    assert child.padding == (0.0, 0.0, 0.0, 0.0)
    assert child.flex_direction == "row"


@pytest.mark.parametrize(
    "cls, expected",
    [
        ("p-4", {"padding": (16.0, 16.0, 16.0, 16.0)}),
        ("px-2", {"padding": (0.0, 8.0, 0.0, 8.0)}),
        ("py-1.5", {"padding": (6.0, 0.0, 6.0, 0.0)}),
        ("mt-[10px]", {"margin": (10.0, 0.0, 0.0, 0.0)}),
        ("w-[300px]", {"width": 300.0, "width_full": False}),
        ("h-10", {"height": 40.0, "height_full": False}),
        ("text-[24px]", {"font_size": 24.0}),
        ("text-[#ABCDEF]", {"color": "#abcdef"}),
        ("bg-transparent", {"background": None}),
        ("font-[Roboto_Mono]", {"font_family": "Roboto Mono"}),
        ("font-semibold", {"font_weight": 600}),
        ("leading-tight", {"line_height": 1.25}),
        ("text-right", {"text_align": "right"}),
        ("italic", {"font_style": "italic"}),
        ("justify-between", {"justify_content": "space-between"}),
    ],
)
def test_parse_class(cls, expected):
    assert parse_class(cls, Style()) == expected


def test_leading_number_is_relative_to_font_size():
    update = parse_class("leading-6", Style(font_size=16.0))

    assert update == {"line_height": pytest.approx(1.5)}


@pytest.mark.parametrize("cls", ["shadow-lg", "text-transparent", "bg-[red]", "grid"])
def test_unsupported_classes(cls):
    assert parse_class(cls, Style()) is None


def test_unsupported_class_is_logged_and_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="socialcard.layout.styles"):
        style = resolve_style("div", ("shadow-lg", "p-2"), Style())

    assert style.padding == (8.0, 8.0, 8.0, 8.0)
    assert "shadow-lg" in caplog.text
