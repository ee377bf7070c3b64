from .backends import (Backend, TableMetricsBackend, SvgBackend, FixedMetricsBackend, RecordingBackend,
                       BASE_FONT_SIZE)
from .engine import FormulaConfig, FormulaEngine, render_svg
from .nodes import (Node, Row, Text, Fraction, Script, BigOperator, Integral, Sqrt, ScalingFence,
                    measure, draw)
from .parser import Parser, parse
from .symbols import SYMBOLS, lookup

__version__ = "1.0.0"
