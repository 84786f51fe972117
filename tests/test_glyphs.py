"""
Tests for the glyph lookup tables.
"""

from __future__ import annotations

import pytest

from models.line import VertexStyle
from utils.glyphs import (
    BlockChar,
    BoxPart,
    BoxStyle,
    CircleSymbol,
    DiagonalLineStyle,
    HorizontalLineStyle,
    ShadeStyle,
    StarSymbol,
    VerticalLineStyle,
    block_char_to_char,
    get_box_glyph,
    get_corner_glyph,
    get_diagonal_line_char,
    get_edge_glyph_set,
    get_horizontal_line_char,
    get_shade_char,
    get_vertical_line_char,
    star_symbol_to_char,
)


def test_every_style_has_a_glyph() -> None:
    for style in HorizontalLineStyle:
        assert len(get_horizontal_line_char(style)) == 1
    for style in VerticalLineStyle:
        assert len(get_vertical_line_char(style)) == 1
    for style in DiagonalLineStyle:
        assert len(get_diagonal_line_char(style)) == 1


def test_line_style_samples() -> None:
    assert get_horizontal_line_char(HorizontalLineStyle.LIGHT) == "─"
    assert get_horizontal_line_char(HorizontalLineStyle.WAVY) == "﹉"
    assert get_vertical_line_char(VerticalLineStyle.HEAVY_QUADRUPLE_DASH) == "┋"
    assert get_diagonal_line_char(DiagonalLineStyle.BACKWARD_SLASH) == "\\"


@pytest.mark.parametrize("part", [BoxPart.TOP_LEFT, "TopLeft", "top_left", "TOP_LEFT"])
def test_box_part_spellings(part) -> None:
    assert get_box_glyph(BoxStyle.DOUBLE, part) == "╔"


def test_box_glyph_junctions() -> None:
    assert get_box_glyph(BoxStyle.SINGLE, "VerticalHorizontal") == "┼"
    assert get_box_glyph(BoxStyle.DOUBLE_ROUNDED, BoxPart.HORIZONTAL_UP) == "╧"


def test_unknown_part_is_none() -> None:
    assert get_box_glyph(BoxStyle.SINGLE, "Diagonal") is None
    assert get_corner_glyph(BoxStyle.SINGLE, "Sideways") is None


def test_corner_lookup_rejects_non_corners() -> None:
    assert get_corner_glyph(BoxStyle.SINGLE_ROUNDED, "BottomRight") == "╯"
    assert get_corner_glyph(BoxStyle.SINGLE, "Horizontal") is None


def test_dotted_and_dashed_share_single_corners() -> None:
    for style in (BoxStyle.DOTTED, BoxStyle.DASHED):
        for corner in ("TopLeft", "TopRight", "BottomLeft", "BottomRight"):
            assert get_corner_glyph(style, corner) == get_corner_glyph(BoxStyle.SINGLE, corner)


def test_shades() -> None:
    assert [get_shade_char(s) for s in ShadeStyle] == ["░", "▒", "▓", "█"]


def test_star_table_keeps_duplicate_codepoint() -> None:
    six = star_symbol_to_char(StarSymbol.SIX_POINTED_WHITE_STAR)
    eight = star_symbol_to_char(StarSymbol.EIGHT_POINTED_BLACK_STAR)
    assert six == eight == "✴"
    assert StarSymbol.SIX_POINTED_WHITE_STAR is not StarSymbol.EIGHT_POINTED_BLACK_STAR


def test_vertex_styles_resolve() -> None:
    assert VertexStyle.circle(CircleSymbol.FILLED_CIRCLE).glyph() == "●"
    assert VertexStyle.star(StarSymbol.BLACK_STAR).glyph() == "★"
    assert VertexStyle.blank().glyph() == " "


def test_dotted_and_dashed_lookups_are_single_line() -> None:
    for style in (BoxStyle.DOTTED, BoxStyle.DASHED):
        assert get_box_glyph(style, "Horizontal") == "─"
        assert get_box_glyph(style, BoxPart.VERTICAL) == "│"


def test_dotted_and_dashed_edge_strokes() -> None:
    dotted = get_edge_glyph_set(BoxStyle.DOTTED)
    dashed = get_edge_glyph_set(BoxStyle.DASHED)
    assert (dotted.horizontal, dotted.vertical) == ("┄", "┆")
    assert (dashed.horizontal, dashed.vertical) == ("┈", "┊")
    assert dotted.corners() == dashed.corners() == ("┌", "┐", "└", "┘")
    assert get_edge_glyph_set(BoxStyle.DOUBLE).horizontal == "═"


def test_block_chars() -> None:
    assert block_char_to_char(BlockChar.UPPER_HALF) == "▀"
    assert block_char_to_char(BlockChar.RIGHT_HALF) == "▐"
    assert block_char_to_char(BlockChar.FULL) == get_shade_char(ShadeStyle.SOLID)
