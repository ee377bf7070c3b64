"""Unit tests for node measurement and drawing."""

import pytest

from mathbox.backends import FixedMetricsBackend, RecordingBackend
from mathbox.nodes import (BigOperator, Fraction, Integral, Row, ScalingFence, Script, Sqrt, Text,
                           measure, draw)
from mathbox.parser import parse

pytestmark = pytest.mark.unit


def measured(markup: str, backend) -> Row:
    root = parse(markup)
    measure(root, backend)
    return root


class TestText:
    """Tests for text boxes."""

    def test_text_box(self, backend: FixedMetricsBackend) -> None:
        """Test width from metrics and ascent at 80% of line height."""
        node = Text("xy", italic=True, font_size=28)
        node.measure(backend)
        assert (node.width, node.height, node.ascent) == (20, 28, 22)
        assert node.descent == 6

    def test_offset_adds_to_width(self, backend: FixedMetricsBackend) -> None:
        """Test that kerning offsets widen or narrow the box."""
        thin = Text("", font_size=28, offset=4)
        neg = Text("", font_size=28, offset=-4)
        thin.measure(backend)
        neg.measure(backend)
        assert thin.width == 4
        assert neg.width == -4

    def test_draw_selects_font_first(self, recorder: RecordingBackend) -> None:
        """Test that drawing sets size and style before drawing text."""
        node = Text("x", italic=True, font_size=19)
        node.measure(recorder)
        recorder.calls.clear()
        node.draw(recorder, 3, 4)
        assert recorder.calls == [("font_size", 19), ("font_style", True), ("text", 3, 4, "x", 19, True)]

    def test_draw_applies_offset(self, recorder: RecordingBackend) -> None:
        """Test that the offset shifts the drawn text."""
        node = Text("a", font_size=28, offset=5)
        node.measure(recorder)
        node.draw(recorder, 0, 0)
        assert recorder.texts == [(5, 0, "a", 28, False)]


class TestRow:
    """Tests for baseline composition in rows."""

    def test_empty_row(self, backend: FixedMetricsBackend) -> None:
        """Test that an empty row has a zero box."""
        row = Row()
        row.measure(backend)
        assert (row.width, row.height, row.ascent) == (0, 0, 0)

    def test_height_is_max_ascent_plus_max_descent(self, backend: FixedMetricsBackend) -> None:
        """Test composition of children with distinct ascents and descents."""
        tall = Text("x", font_size=20)  # ascent 16, descent 4
        frac = Fraction(Row([Text("a", font_size=10)]), Row([Text("b", font_size=10)]))  # ascent 12, descent 12
        row = Row([tall, frac])
        row.measure(backend)
        assert row.ascent == 16
        assert row.height == 16 + 12
        assert row.height != tall.height + frac.height
        assert row.width == 10 + 20

    def test_children_share_baseline(self, recorder: RecordingBackend) -> None:
        """Test that each child is offset by the ascent difference."""
        row = Row([Text("a", font_size=20), Text("b", font_size=10)])
        row.measure(recorder)
        row.draw(recorder, 0, 0)
        assert recorder.texts == [(0, 0, "a", 20, False), (10, 8, "b", 10, False)]

    def test_kerning_shifts_following_children(self, recorder: RecordingBackend) -> None:
        """Test that a thin space moves the next item right."""
        root = measured(r"x\,y", recorder)
        assert root.width == 24
        root.draw(recorder, 0, 0)
        assert [t[0] for t in recorder.texts] == [0, 14]


class TestFraction:
    """Tests for fraction layout."""

    def test_fraction_box(self, backend: FixedMetricsBackend) -> None:
        """Test the fraction formulas against known child boxes."""
        num = Text("ab", font_size=10)  # w=20, h=10, a=8
        den = Text("abc", font_size=12)  # w=30, h=12, a=9
        frac = Fraction(num, den, font_size=28)
        frac.measure(backend)
        assert (num.width, num.height, num.ascent) == (20, 10, 8)
        assert (den.width, den.height, den.ascent) == (30, 12, 9)
        assert frac.width == 40
        assert frac.ascent == 12
        assert frac.height == 26

    def test_fraction_draw(self, recorder: RecordingBackend) -> None:
        """Test centring of numerator and denominator and the bar position."""
        frac = Fraction(Text("ab", font_size=10), Text("abc", font_size=12))
        frac.measure(recorder)
        frac.draw(recorder, 0, 0)
        assert recorder.texts == [(10, 0, "ab", 10, False), (5, 14, "abc", 12, False)]
        assert recorder.lines == [(0, 12, 40, 12)]


class TestScript:
    """Tests for superscripts and subscripts."""

    def test_superscript_box(self, backend: FixedMetricsBackend) -> None:
        """Test that the superscript raises the ascent."""
        node = measured("x^2", backend).children[0]
        # base h=28 a=22; sup h=19
        assert node.width == 20
        assert node.ascent == 19 + 11
        assert node.height == node.ascent + 6

    def test_subscript_box(self, backend: FixedMetricsBackend) -> None:
        """Test that the subscript extends the height below the ascent."""
        node = measured("x_2", backend).children[0]
        assert node.ascent == 22
        assert node.height == 19 + 22
        assert node.width == 20

    def test_script_width_uses_wider_script(self, backend: FixedMetricsBackend) -> None:
        """Test that width adds the wider of the two scripts."""
        node = measured("x^{ab}_c", backend).children[0]
        assert node.width == 10 + 20

    def test_script_without_scripts_degrades_to_base(self, backend: FixedMetricsBackend) -> None:
        """Test a Script with neither super nor sub."""
        node = Script(Text("x", font_size=28))
        node.measure(backend)
        assert (node.width, node.height, node.ascent) == (10, 28, 22)

    def test_script_draw(self, recorder: RecordingBackend) -> None:
        """Test placement of base, superscript and subscript."""
        node = measured("x^2_3", recorder).children[0]
        recorder.calls.clear()
        node.draw(recorder, 0, 0)
        base, sup, sub = recorder.texts
        assert base == (0, 8, "x", 28, True)
        assert sup == (10, 8 - 9, "2", 19, False)
        assert sub == (10, 8 + 6 + 1, "3", 19, False)


class TestBigOperator:
    """Tests for stacked-limit operators."""

    def test_sum_box(self, backend: FixedMetricsBackend) -> None:
        """Test the glyph at 150% size with stacked limits."""
        node = measured(r"\sum_{i}^{n}", backend).children[0]
        assert isinstance(node, BigOperator)
        # glyph: w=10, h=42, 80% = 33; limits h=19
        assert node.width == 14
        assert node.ascent == 19 + 33
        assert node.height == 52 + 9 + 19

    def test_sum_without_limits(self, backend: FixedMetricsBackend) -> None:
        """Test a bare operator."""
        node = measured(r"\sum", backend).children[0]
        assert (node.width, node.height, node.ascent) == (14, 42, 33)

    def test_lim_stays_normal_size(self, backend: FixedMetricsBackend) -> None:
        """Test that text-mode operators are not enlarged."""
        node = measured(r"\lim", backend).children[0]
        assert node.width == 34
        assert node.height == 28

    def test_sum_draw(self, recorder: RecordingBackend) -> None:
        """Test upper limit, glyph and lower limit are stacked and centred."""
        node = measured(r"\sum_{i}^{n}", recorder).children[0]
        node.draw(recorder, 0, 0)
        assert recorder.texts == [
            (2, 0, "n", 19, True),
            (2, 19, "∑", 42, False),
            (2, 61, "i", 19, True),
        ]


class TestIntegral:
    """Tests for integrals with limits beside the glyph."""

    def test_integral_box(self, backend: FixedMetricsBackend) -> None:
        """Test width adds the widest limit and ascent is half the glyph."""
        node = measured(r"\int_0^1", backend).children[0]
        assert isinstance(node, Integral)
        assert node.width == 10 + 10 + 4
        assert node.height == 42
        assert node.ascent == 21

    def test_integral_height_grows_with_tall_limits(self, backend: FixedMetricsBackend) -> None:
        """Test that summed limit heights can exceed the glyph."""
        node = measured(r"\int_{\frac{a}{b}}^{\frac{c}{d}}", backend).children[0]
        # each limit is a fraction of two 19-high rows: 19 + 19 + 4
        assert node.height == 2 * 42

    def test_integral_draw(self, recorder: RecordingBackend) -> None:
        """Test that limits are drawn to the right of the glyph."""
        node = measured(r"\int_0^1", recorder).children[0]
        node.draw(recorder, 0, 0)
        assert recorder.texts == [
            (0, 0, "∫", 42, False),
            (12, 2, "1", 19, False),
            (12, 21, "0", 19, False),
        ]


class TestSqrt:
    """Tests for radicals."""

    def test_sqrt_box(self, backend: FixedMetricsBackend) -> None:
        """Test the radical adds a fixed frame around the radicand."""
        node = measured(r"\sqrt{x}", backend).children[0]
        assert (node.width, node.height, node.ascent) == (25, 33, 27)

    def test_sqrt_draw(self, recorder: RecordingBackend) -> None:
        """Test the three-segment radical stroke."""
        node = measured(r"\sqrt{x}", recorder).children[0]
        node.draw(recorder, 0, 0)
        assert recorder.texts == [(10, 5, "x", 28, True)]
        assert recorder.lines == [(0, 17, 5, 33), (5, 33, 10, 0), (10, 0, 25, 0)]

    def test_sqrt_with_index(self, recorder: RecordingBackend) -> None:
        """Test that the index widens the box and shifts the stroke."""
        node = measured(r"\sqrt[3]{x}", recorder).children[0]
        assert node.width == 30
        assert node.ascent == 27
        node.draw(recorder, 0, 0)
        assert recorder.texts[0] == (0, 0, "3", 16, False)
        assert recorder.lines[0] == (10, 17, 15, 33)

    def test_tall_index_raises_ascent(self, backend: FixedMetricsBackend) -> None:
        """Test that an index taller than the radicand raises the box."""
        radicand = Row([Text("x", font_size=10)])
        index = Row([Text("n", font_size=40)])
        node = Sqrt(radicand, index)
        node.measure(backend)
        assert node.ascent == 45
        assert node.height == 45 + 2


class TestScalingFence:
    """Tests for scaling delimiters."""

    def test_fence_box(self, backend: FixedMetricsBackend) -> None:
        """Test the 7-unit margin on each side."""
        node = measured(r"\left(x\right)", backend).children[0]
        assert (node.width, node.height, node.ascent) == (24, 28, 22)

    def test_parentheses(self, recorder: RecordingBackend) -> None:
        """Test parentheses as two diagonals meeting at mid-height."""
        node = measured(r"\left(x\right)", recorder).children[0]
        node.draw(recorder, 0, 0)
        assert recorder.texts == [(7, 0, "x", 28, True)]
        assert recorder.lines == [(5, 0, 1, 14), (1, 14, 5, 28), (19, 0, 23, 14), (23, 14, 19, 28)]

    def test_brackets(self, recorder: RecordingBackend) -> None:
        """Test brackets as a vertical line with serifs."""
        node = measured(r"\left[x\right]", recorder).children[0]
        node.draw(recorder, 0, 0)
        assert recorder.lines == [
            (5, 0, 5, 28), (5, 0, 10, 0), (5, 28, 10, 28),
            (19, 0, 19, 28), (19, 0, 14, 0), (19, 28, 14, 28),
        ]

    def test_bars(self, recorder: RecordingBackend) -> None:
        """Test vertical bars."""
        node = measured(r"\left|x\right|", recorder).children[0]
        node.draw(recorder, 0, 0)
        assert recorder.lines == [(2, 0, 2, 28), (22, 0, 22, 28)]

    def test_unknown_delimiters_draw_nothing(self, recorder: RecordingBackend) -> None:
        """Test that unrecognised delimiters are a silent no-op."""
        node = measured(r"\left<x\right>", recorder).children[0]
        node.draw(recorder, 0, 0)
        assert recorder.lines == []
        assert node.width == 24

    def test_mismatched_sides_draw_nothing(self, recorder: RecordingBackend) -> None:
        """Test that a closing delimiter on the left is not drawn."""
        node = ScalingFence(Row([Text("x")]), ")", "(")
        node.measure(recorder)
        node.draw(recorder, 0, 0)
        assert recorder.lines == []


class TestMeasureDrawSequencing:
    """Tests that both passes select fonts the same way."""

    def test_font_sequence_matches(self) -> None:
        """Test that measure and draw issue the same font selections."""
        measure_rec = RecordingBackend()
        root = parse(r"x^2+\frac{a}{b}")
        measure(root, measure_rec)
        draw_rec = RecordingBackend()
        draw(root, draw_rec, 0, 0)
        fonts = lambda calls: [c for c in calls if c[0] in ("font_size", "font_style")]
        assert fonts(measure_rec.calls) == fonts(draw_rec.calls)
