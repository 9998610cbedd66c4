import pytest
from hypothesis import given
from hypothesis import strategies as st

from trackercore.printer import LINE_HEIGHT, Printer, Rect

FIRST, LAST = 32, 126


def glyph_for(code):
    return Rect((code - FIRST) * 10, 0, 4 + code % 5, 8 + code % 3)


GLYPHS = [glyph_for(code) for code in range(FIRST, LAST + 1)]
printable = st.text(alphabet=st.characters(min_codepoint=FIRST, max_codepoint=LAST), max_size=30)


def make_printer(calls=None):
    def blit(dest, source, clip):
        if calls is not None:
            calls.append((dest, source, clip))

    return Printer(GLYPHS, FIRST, LAST, blit)


@given(printable)
def test_width_equals_offset_past_last_character(text):
    printer = make_printer()
    assert printer.text_width(text) == printer.text_x(text, len(text))


@given(printable, printable)
def test_width_is_additive(first, second):
    printer = make_printer()
    assert printer.text_width(first + second) == printer.text_width(first) + printer.text_width(second)


@given(printable, st.integers(min_value=-5, max_value=400))
def test_text_index_finds_covering_character(text, x):
    printer = make_printer()
    index = printer.text_index(text, x)
    assert 0 <= index <= len(text)
    if index < len(text):
        assert printer.text_x(text, index + 1) >= x
    if index > 0:
        assert printer.text_x(text, index) < x


def test_single_character_measures_match_glyph():
    printer = make_printer()
    glyph = glyph_for(ord("A"))
    assert printer.text_width("A") == glyph.width
    assert printer.text_height("A") == glyph.height


@given(printable)
def test_text_height_bounded_by_max_height(text):
    printer = make_printer()
    assert 0 <= printer.text_height(text) <= printer.max_height()


def test_max_height_is_tallest_glyph():
    glyphs = [Rect(0, 0, 5, 8) for _ in range(FIRST, LAST + 1)]
    glyphs[ord("~") - FIRST] = Rect(0, 0, 5, 30)
    printer = Printer(glyphs, " ", "~", lambda dest, source, clip: None)
    assert printer.max_height() == 30
    assert printer.text_height("a~") == 30


def test_characters_outside_range_take_no_space():
    printer = make_printer()
    assert printer.text_width("é\t") == 0
    assert printer.text_height("é") == 0
    assert printer.text_width("aé") == printer.text_width("a")


def test_nul_ends_the_text():
    printer = make_printer()
    assert printer.text_width("ab\0cd") == printer.text_width("ab")
    assert printer.text_index("ab\0cd", 1000) == 2


def test_empty_text_measures():
    printer = make_printer()
    assert printer.text_width("") == 0
    assert printer.text_height("") == 0
    assert printer.text_index("", 10) == 0


def test_short_glyph_table_is_rejected():
    with pytest.raises(ValueError):
        Printer(GLYPHS[:3], FIRST, LAST, lambda dest, source, clip: None)


def test_draw_text_places_glyphs_and_wraps_lines():
    calls = []
    printer = make_printer(calls)
    clip = Rect(0, 0, 50, 50)
    printer.draw_text("ab\nc", 7, 11, clip)
    assert len(calls) == 3
    (dest_a, source_a, clip_a), (dest_b, _, _), (dest_c, source_c, _) = calls
    assert source_a == glyph_for(ord("a"))
    assert dest_a == Rect(7, 11, source_a.width, source_a.height)
    assert clip_a is clip
    assert dest_b.x == 7 + source_a.width
    assert dest_b.y == 11
    assert (dest_c.x, dest_c.y) == (7, 11 + LINE_HEIGHT)
    assert source_c == glyph_for(ord("c"))


def test_draw_text_skips_unknown_characters():
    calls = []
    printer = make_printer(calls)
    printer.draw_text("xéy", 0, 0)
    assert [source for _, source, _ in calls] == [glyph_for(ord("x")), glyph_for(ord("y"))]
    assert calls[1][0].x == glyph_for(ord("x")).width
    assert calls[0][2] is None


def test_line_height_is_twenty():
    calls = []
    printer = make_printer(calls)
    printer.draw_text("\n\nz", 0, 0)
    assert calls[0][0].y == 40