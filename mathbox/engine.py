import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

import svgwrite

from .backends import SvgBackend, BASE_FONT_SIZE
from .nodes import Row
from .parser import parse

logger = logging.getLogger(__name__)


@dataclass
class FormulaConfig:
    font_size: int = BASE_FONT_SIZE
    font_family: str = "Times New Roman"
    color: str = "black"
    background: str = "white"
    stroke_width: float = 1.5

    # Framing
    padding: int = 50
    extra_bottom: int = 20


class FormulaEngine:
    """
    Parse -> measure -> draw a formula into an SVG drawing.

    The tree's top-left corner lands at (padding, padding); the canvas is the
    tree's box plus padding on every side and a little extra at the bottom.
    """

    def __init__(self, markup: str, config: FormulaConfig = FormulaConfig()):
        self.cfg = config
        self.markup = markup
        self.root: Row = parse(markup, self.cfg.font_size)

        self.dwg = svgwrite.Drawing()
        self.dwg.add(self.dwg.rect(insert=(0, 0), size=("100%", "100%"), fill=self.cfg.background))
        self.formula_group = self.dwg.g(id="formula")
        self.dwg.add(self.formula_group)
        self.backend = SvgBackend(self.dwg, container=self.formula_group, font_family=self.cfg.font_family,
                                  color=self.cfg.color, stroke_width=self.cfg.stroke_width,
                                  font_size=self.cfg.font_size)

        # Measure and draw share one backend so both passes see the same metrics.
        self.root.measure(self.backend)

        self.width_pixels, self.height_pixels = self.canvas_size()
        logger.debug("Canvas for %r: %dx%d", markup, self.width_pixels, self.height_pixels)
        self.dwg["width"] = self.width_pixels
        self.dwg["height"] = self.height_pixels
        self.dwg.viewbox(0, 0, self.width_pixels, self.height_pixels)

        self.root.draw(self.backend, self.cfg.padding, self.cfg.padding)

    def canvas_size(self) -> Tuple[int, int]:
        pad = self.cfg.padding
        # Negative kerning can make a row narrower than nothing.
        width = max(0, self.root.width) + pad * 2
        height = max(0, self.root.height) + pad * 2 + self.cfg.extra_bottom
        return width, height

    def get_svg_string(self) -> str:
        return self.dwg.tostring()

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.write_text(self.get_svg_string(), encoding="utf-8")
        logger.info("Saved formula SVG to %s", path)
        return path


def render_svg(markup: str, config: FormulaConfig = FormulaConfig()) -> str:
    return FormulaEngine(markup, config).get_svg_string()
