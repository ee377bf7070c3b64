"""
Box model for typeset formulas.

Every node carries a width/height/ascent box, valid only after `measure`.
`ascent` runs from the top of the box down to the baseline the node shares
with its siblings in a Row; `height - ascent` is the descent.

Layout is two-phase:

* ``measure(node, backend)`` runs bottom-up and fills in the boxes.
* ``draw(node, backend, x, y)`` runs top-down on a measured tree, with
  (x, y) the top-left corner of the node's box.

Both phases select the font mode immediately before any text metric or text
draw, so a node never relies on the mode a sibling left behind.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .backends import Backend, BASE_FONT_SIZE

# Synthetic cap-height: ascent is this share of the line height.
ASCENT_RATIO = 0.8
BIG_OP_SCALE = 1.5

FRACTION_GUTTER = 10
FRACTION_GAP = 4
FRACTION_BAR_OFFSET = 2

BIG_OP_PADDING = 4
INTEGRAL_LIMIT_GAP = 2

SQRT_EXTRA_WIDTH = 15
SQRT_EXTRA_HEIGHT = 5
SQRT_TICK = 5

FENCE_MARGIN = 7

SUMMATION_SIGN = '∑'
INTEGRAL_SIGN = '∫'


@dataclass
class Node:
    width: int = field(default=0, init=False)
    height: int = field(default=0, init=False)
    ascent: int = field(default=0, init=False)

    @property
    def descent(self) -> int:
        return self.height - self.ascent

    def measure(self, backend: Backend):
        measure(self, backend)

    def draw(self, backend: Backend, x: int, y: int):
        draw(self, backend, x, y)


@dataclass
class Row(Node):
    children: List[Node] = field(default_factory=list)

    def add(self, node: Node):
        self.children.append(node)


@dataclass
class Text(Node):
    text: str = ""
    italic: bool = False
    font_size: int = BASE_FONT_SIZE
    offset: int = 0  # horizontal kerning; non-zero only for spacing commands


@dataclass
class Fraction(Node):
    numerator: Node = field(default_factory=Row)
    denominator: Node = field(default_factory=Row)
    font_size: int = BASE_FONT_SIZE


@dataclass
class Script(Node):
    base: Node = field(default_factory=Row)
    superscript: Optional[Node] = None
    subscript: Optional[Node] = None


@dataclass
class BigOperator(Node):
    symbol: str = SUMMATION_SIGN
    font_size: int = BASE_FONT_SIZE
    text_mode: bool = False  # named operators such as "lim" stay upright at normal size
    lower: Optional[Node] = None
    upper: Optional[Node] = None

    @property
    def glyph_size(self) -> int:
        return self.font_size if self.text_mode else int(self.font_size * BIG_OP_SCALE)


@dataclass
class Integral(BigOperator):
    symbol: str = INTEGRAL_SIGN


@dataclass
class Sqrt(Node):
    radicand: Node = field(default_factory=Row)
    index: Optional[Node] = None


@dataclass
class ScalingFence(Node):
    content: Node = field(default_factory=Row)
    left: str = ""
    right: str = ""


# --- Measure ---

def _measure_row(node: Row, backend: Backend):
    width = max_ascent = max_descent = 0
    for child in node.children:
        measure(child, backend)
        width += child.width
        max_ascent = max(max_ascent, child.ascent)
        max_descent = max(max_descent, child.descent)
    node.width = width
    node.ascent = max_ascent
    node.height = max_ascent + max_descent


def _measure_text(node: Text, backend: Backend):
    backend.set_font_size(node.font_size)
    backend.set_font_style(node.italic)
    node.width = backend.text_width(node.text) + node.offset
    node.height = backend.text_height()
    node.ascent = int(node.height * ASCENT_RATIO)


def _measure_fraction(node: Fraction, backend: Backend):
    num, den = node.numerator, node.denominator
    measure(num, backend)
    measure(den, backend)
    node.width = max(num.width, den.width) + FRACTION_GUTTER
    node.height = num.height + den.height + FRACTION_GAP
    node.ascent = num.height + FRACTION_BAR_OFFSET


def _measure_script(node: Script, backend: Backend):
    base = node.base
    measure(base, backend)
    node.ascent = base.ascent
    script_width = 0

    if node.superscript is not None:
        sup = node.superscript
        measure(sup, backend)
        script_width = max(script_width, sup.width)
        # The superscript straddles the base's half-ascent line.
        node.ascent = max(node.ascent, sup.height + base.ascent // 2)

    # The base sits lower when the superscript raised the ascent.
    node.height = node.ascent + base.descent

    if node.subscript is not None:
        sub = node.subscript
        measure(sub, backend)
        script_width = max(script_width, sub.width)
        node.height = max(node.height, sub.height + node.ascent)

    node.width = base.width + script_width


def _select_glyph_font(node: BigOperator, backend: Backend):
    backend.set_font_size(node.glyph_size)
    backend.set_font_style(False)


def _measure_big_operator(node: BigOperator, backend: Backend):
    _select_glyph_font(node, backend)
    glyph_w = backend.text_width(node.symbol)
    glyph_h = backend.text_height()

    low_w = low_h = up_w = up_h = 0
    if node.lower is not None:
        measure(node.lower, backend)
        low_w, low_h = node.lower.width, node.lower.height
    if node.upper is not None:
        measure(node.upper, backend)
        up_w, up_h = node.upper.width, node.upper.height

    node.width = max(glyph_w, low_w, up_w) + BIG_OP_PADDING
    glyph_ascent = int(glyph_h * ASCENT_RATIO)
    node.ascent = up_h + glyph_ascent
    node.height = node.ascent + (glyph_h - glyph_ascent) + low_h


def _measure_integral(node: Integral, backend: Backend):
    _select_glyph_font(node, backend)
    glyph_w = backend.text_width(node.symbol)
    glyph_h = backend.text_height()

    limits_w = limits_h = 0
    for limit in (node.upper, node.lower):
        if limit is not None:
            measure(limit, backend)
            limits_w = max(limits_w, limit.width)
            limits_h += limit.height

    node.width = glyph_w + limits_w + BIG_OP_PADDING
    node.height = max(glyph_h, limits_h)
    node.ascent = glyph_h // 2


def _measure_sqrt(node: Sqrt, backend: Backend):
    radicand = node.radicand
    measure(radicand, backend)
    node.width = radicand.width + SQRT_EXTRA_WIDTH
    node.height = radicand.height + SQRT_EXTRA_HEIGHT
    node.ascent = radicand.ascent + SQRT_EXTRA_HEIGHT
    if node.index is not None:
        index = node.index
        measure(index, backend)
        node.width += max(0, index.width - SQRT_TICK)
        node.ascent = max(node.ascent, index.height + SQRT_EXTRA_HEIGHT)
        node.height = max(node.height, node.ascent + radicand.descent)


def _measure_fence(node: ScalingFence, backend: Backend):
    measure(node.content, backend)
    node.width = node.content.width + 2 * FENCE_MARGIN
    node.height = node.content.height
    node.ascent = node.content.ascent


# --- Draw ---

def _draw_row(node: Row, backend: Backend, x: int, y: int):
    cur_x = x
    for child in node.children:
        draw(child, backend, cur_x, y + (node.ascent - child.ascent))
        cur_x += child.width


def _draw_text(node: Text, backend: Backend, x: int, y: int):
    backend.set_font_size(node.font_size)
    backend.set_font_style(node.italic)
    if node.text:
        backend.draw_text(x + node.offset, y, node.text)


def _draw_fraction(node: Fraction, backend: Backend, x: int, y: int):
    num, den = node.numerator, node.denominator
    mid_x = x + node.width // 2
    draw(num, backend, mid_x - num.width // 2, y)
    line_y = y + num.height + FRACTION_BAR_OFFSET
    backend.draw_line(x, line_y, x + node.width, line_y)
    draw(den, backend, mid_x - den.width // 2, line_y + FRACTION_BAR_OFFSET)


def _draw_script(node: Script, backend: Backend, x: int, y: int):
    base = node.base
    base_y = y + (node.ascent - base.ascent)
    draw(base, backend, x, base_y)
    script_x = x + base.width
    if node.superscript is not None:
        sup = node.superscript
        draw(sup, backend, script_x, base_y - int(sup.height * 0.5))
    if node.subscript is not None:
        sub = node.subscript
        draw(sub, backend, script_x, base_y + base.descent + int(sub.height * 0.1))


def _draw_big_operator(node: BigOperator, backend: Backend, x: int, y: int):
    mid_x = x + node.width // 2
    if node.upper is not None:
        draw(node.upper, backend, mid_x - node.upper.width // 2, y)

    _select_glyph_font(node, backend)
    glyph_w = backend.text_width(node.symbol)
    glyph_h = backend.text_height()
    glyph_y = y + (node.upper.height if node.upper is not None else 0)
    backend.draw_text(mid_x - glyph_w // 2, glyph_y, node.symbol)

    if node.lower is not None:
        draw(node.lower, backend, mid_x - node.lower.width // 2, glyph_y + glyph_h)


def _draw_integral(node: Integral, backend: Backend, x: int, y: int):
    _select_glyph_font(node, backend)
    glyph_w = backend.text_width(node.symbol)
    glyph_h = backend.text_height()

    glyph_y = y + (node.ascent - glyph_h // 2)
    backend.draw_text(x, glyph_y, node.symbol)

    limit_x = x + glyph_w + INTEGRAL_LIMIT_GAP
    if node.upper is not None:
        draw(node.upper, backend, limit_x, glyph_y + INTEGRAL_LIMIT_GAP)
    if node.lower is not None:
        draw(node.lower, backend, limit_x, glyph_y + glyph_h - node.lower.height - INTEGRAL_LIMIT_GAP)


def _draw_sqrt(node: Sqrt, backend: Backend, x: int, y: int):
    radicand = node.radicand
    start_x = x
    if node.index is not None:
        draw(node.index, backend, x, y)
        start_x += max(SQRT_TICK, node.index.width)

    draw(radicand, backend, start_x + 2 * SQRT_TICK, y + (node.ascent - radicand.ascent))

    bottom_y = y + node.ascent + radicand.descent
    top_y = y + (node.ascent - radicand.ascent - SQRT_EXTRA_HEIGHT)

    backend.draw_line(start_x, bottom_y - (bottom_y - top_y) // 2, start_x + SQRT_TICK, bottom_y)
    backend.draw_line(start_x + SQRT_TICK, bottom_y, start_x + 2 * SQRT_TICK, top_y)
    backend.draw_line(start_x + 2 * SQRT_TICK, top_y, start_x + radicand.width + SQRT_EXTRA_WIDTH, top_y)


def _draw_delimiter(backend: Backend, delim: str, edge: int, inward: int, y: int, h: int):
    # edge is the outer x of the fence; inward is +1 on the left side, -1 on the right
    if delim == "|":
        backend.draw_line(edge + 2 * inward, y, edge + 2 * inward, y + h)
    elif delim in ("(", ")"):
        backend.draw_line(edge + 5 * inward, y, edge + inward, y + h // 2)
        backend.draw_line(edge + inward, y + h // 2, edge + 5 * inward, y + h)
    elif delim in ("[", "]"):
        bar_x = edge + 5 * inward
        backend.draw_line(bar_x, y, bar_x, y + h)
        backend.draw_line(bar_x, y, bar_x + 5 * inward, y)
        backend.draw_line(bar_x, y + h, bar_x + 5 * inward, y + h)


def _draw_fence(node: ScalingFence, backend: Backend, x: int, y: int):
    draw(node.content, backend, x + FENCE_MARGIN, y)
    h = node.height
    # Anything other than the recognised delimiters is silently not drawn.
    if node.left in ("|", "(", "["):
        _draw_delimiter(backend, node.left, x, 1, y, h)
    if node.right in ("|", ")", "]"):
        _draw_delimiter(backend, node.right, x + node.width, -1, y, h)


_MEASURE = {
    Row: _measure_row,
    Text: _measure_text,
    Fraction: _measure_fraction,
    Script: _measure_script,
    BigOperator: _measure_big_operator,
    Integral: _measure_integral,
    Sqrt: _measure_sqrt,
    ScalingFence: _measure_fence,
}

_DRAW = {
    Row: _draw_row,
    Text: _draw_text,
    Fraction: _draw_fraction,
    Script: _draw_script,
    BigOperator: _draw_big_operator,
    Integral: _draw_integral,
    Sqrt: _draw_sqrt,
    ScalingFence: _draw_fence,
}


def measure(node: Node, backend: Backend):
    _MEASURE[type(node)](node, backend)


def draw(node: Node, backend: Backend, x: int, y: int):
    _DRAW[type(node)](node, backend, x, y)
