"""
Drawing backends consumed by the node tree.

A backend carries a selected font mode (size + italic) and answers text
metrics under that mode. Nodes always select the mode immediately before
measuring or drawing text, so no backend may assume state survives between
calls from different nodes.
"""
from abc import ABC, abstractmethod
from typing import List, Tuple, Any

import svgwrite

from .font_metrics import get_text_width

BASE_FONT_SIZE = 28
LINE_HEIGHT_FACTOR = 1.0
# Fraction of the font size from the top of a line box down to the baseline.
BASELINE_FACTOR = 0.8


class Backend(ABC):
    def __init__(self, font_size: int = BASE_FONT_SIZE, italic: bool = False):
        self.font_size = font_size
        self.italic = italic

    def set_font_size(self, size: int):
        self.font_size = size

    def set_font_style(self, italic: bool):
        self.italic = italic

    @abstractmethod
    def draw_line(self, x1: int, y1: int, x2: int, y2: int): ...

    @abstractmethod
    def draw_text(self, x: int, y: int, text: str):
        """Draw text whose line box has its top-left corner at (x, y)."""

    @abstractmethod
    def text_width(self, text: str) -> int: ...

    @abstractmethod
    def text_height(self) -> int: ...


class TableMetricsBackend(Backend):
    """Metrics from the built-in Times New Roman width tables. Draws nothing."""

    def text_width(self, text: str) -> int:
        return int(round(get_text_width(text, self.font_size, self.italic)))

    def text_height(self) -> int:
        # Cell height of the font, the same for every string.
        return int(round(self.font_size * LINE_HEIGHT_FACTOR))

    def draw_line(self, x1, y1, x2, y2):
        pass

    def draw_text(self, x, y, text):
        pass


class SvgBackend(TableMetricsBackend):
    def __init__(self, dwg: svgwrite.Drawing, container=None, font_family: str = "Times New Roman",
                 color: str = "black", stroke_width: float = 1.5, font_size: int = BASE_FONT_SIZE):
        super().__init__(font_size)
        self.dwg = dwg
        self.target = container if container is not None else dwg
        self.font_family = font_family
        self.color = color
        self.stroke_width = stroke_width

    def draw_line(self, x1, y1, x2, y2):
        self.target.add(self.dwg.line(start=(x1, y1), end=(x2, y2), stroke=self.color,
                                      stroke_width=self.stroke_width))

    def draw_text(self, x, y, text):
        if not text:
            return
        baseline_y = y + int(self.font_size * BASELINE_FACTOR)
        style = "italic" if self.italic else "normal"
        self.target.add(self.dwg.text(text, insert=(x, baseline_y), font_size=self.font_size,
                                      font_family=self.font_family, fill=self.color, font_style=style))


class FixedMetricsBackend(Backend):
    """
    Deterministic metrics independent of any font: every glyph is `char_width`
    wide and every line is exactly the current font size tall.
    """

    def __init__(self, char_width: int = 10, font_size: int = BASE_FONT_SIZE):
        super().__init__(font_size)
        self.char_width = char_width

    def text_width(self, text: str) -> int:
        return len(text) * self.char_width

    def text_height(self) -> int:
        return self.font_size

    def draw_line(self, x1, y1, x2, y2):
        pass

    def draw_text(self, x, y, text):
        pass


class RecordingBackend(FixedMetricsBackend):
    """Fixed metrics plus a log of every mode change and drawing call."""

    def __init__(self, char_width: int = 10, font_size: int = BASE_FONT_SIZE):
        super().__init__(char_width, font_size)
        self.calls: List[Tuple[Any, ...]] = []

    def set_font_size(self, size):
        super().set_font_size(size)
        self.calls.append(("font_size", size))

    def set_font_style(self, italic):
        super().set_font_style(italic)
        self.calls.append(("font_style", italic))

    def draw_line(self, x1, y1, x2, y2):
        self.calls.append(("line", x1, y1, x2, y2))

    def draw_text(self, x, y, text):
        self.calls.append(("text", x, y, text, self.font_size, self.italic))

    @property
    def lines(self) -> List[Tuple[int, int, int, int]]:
        return [c[1:] for c in self.calls if c[0] == "line"]

    @property
    def texts(self) -> List[Tuple[Any, ...]]:
        return [c[1:] for c in self.calls if c[0] == "text"]
