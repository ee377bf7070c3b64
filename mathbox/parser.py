"""
Recursive-descent parser from LaTeX-like markup to a node tree.

The parser never raises. Unknown commands become a "?" placeholder, a missing
brace falls back to a single character, and an unmatched ``\\left`` runs to
the end of the input. Content nested deeper than ``MAX_NESTING`` is kept as
literal text.

Arguments of commands and scripts are cut out of the source as plain strings
and handed to a fresh ``Parser``, so each parser owns its own cursor.
"""
import logging
from typing import Mapping, Optional

from .backends import BASE_FONT_SIZE
from .nodes import (Node, Row, Text, Fraction, Script, BigOperator, Integral, Sqrt, ScalingFence,
                    SUMMATION_SIGN)
from .symbols import SYMBOLS

logger = logging.getLogger(__name__)

SCRIPT_SCALE = 0.7
SQRT_INDEX_SCALE = 0.6
KERN_SCALE = 0.15

FUNCTIONS = ('sin', 'cos', 'tan', 'csc', 'sec', 'cot', 'log', 'ln', 'lg', 'exp',
             'sinh', 'cosh', 'tanh', 'asin', 'acos', 'atan')

LEFT = "\\left"
RIGHT = "\\right"

# Sub-parsers nested deeper than this keep their source as literal text.
MAX_NESTING = 50


class Parser:
    def __init__(self, source: str, font_size: int = BASE_FONT_SIZE, symbols: Mapping[str, str] = SYMBOLS,
                 depth: int = 0):
        self.source = source
        self.pos = 0
        self.font_size = font_size
        self.symbols = symbols
        self.depth = depth

    def peek(self) -> str:
        return self.source[self.pos] if self.pos < len(self.source) else ""

    def next(self) -> str:
        char = self.peek()
        if char:
            self.pos += 1
        return char

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def at_command(self, name: str) -> bool:
        """True if the command ``name`` (with backslash) starts at the cursor as a whole word."""
        if not self.source.startswith(name, self.pos):
            return False
        following = self.source[self.pos + len(name):self.pos + len(name) + 1]
        return not following.isalpha()

    def parse(self) -> Row:
        """Parse items until the end of input or an unmatched closing '}' / ']'."""
        row = Row()
        if self.depth > MAX_NESTING:
            logger.debug("Nesting deeper than %d, keeping %r as text", MAX_NESTING, self.source)
            if self.source:
                row.add(Text(self.source, italic=False, font_size=self.font_size))
            self.pos = len(self.source)
            return row
        while not self.at_end():
            if self.peek() in ("}", "]"):
                break
            node = self._parse_item()
            if node is not None:
                row.add(self._attach_scripts(node))
        return row

    def _subparse(self, source: str, font_size: int) -> Row:
        return Parser(source, font_size, self.symbols, self.depth + 1).parse()

    def _parse_item(self) -> Optional[Node]:
        if self.at_end():
            return None
        c = self.next()

        if c == "\\":
            return self._parse_command()

        if c == "{":
            # Group: parsed as an invisible nested row at the same size.
            self.pos -= 1
            return self._subparse(self._read_block(), self.font_size)

        if c.isdigit():
            num = c
            while self.peek() and (self.peek().isdigit() or self.peek() == "."):
                num += self.next()
            return Text(num, italic=False, font_size=self.font_size)

        if c.isalpha():
            return Text(c, italic=True, font_size=self.font_size)

        return Text(c, italic=False, font_size=self.font_size)

    def _read_command_name(self) -> str:
        name = ""
        while self.peek() and self.peek().isalpha():
            name += self.next()
        if not name:
            # Control symbol such as \, or \{
            name = self.next()
        return name

    def _parse_command(self) -> Node:
        cmd = self._read_command_name()
        fs = self.font_size

        if cmd == "left":
            return self._parse_fence()

        if cmd == "frac":
            numerator = self._subparse(self._read_block(), fs)
            denominator = self._subparse(self._read_block(), fs)
            return Fraction(numerator, denominator, font_size=fs)

        if cmd == "sqrt":
            index = None
            if self.peek() == "[":
                index = self._subparse(self._read_block(), int(fs * SQRT_INDEX_SCALE))
            radicand = self._subparse(self._read_block(), fs)
            return Sqrt(radicand, index)

        if cmd == "int":
            return Integral(font_size=fs)
        if cmd in ("sum", "prod"):
            # Both share the summation glyph.
            return BigOperator(SUMMATION_SIGN, font_size=fs)
        if cmd == "lim":
            return BigOperator("lim", font_size=fs, text_mode=True)

        if cmd == "mathrm":
            return Text(self._read_block(), italic=False, font_size=fs)

        if cmd == "!":
            return Text("", font_size=fs, offset=int(-fs * KERN_SCALE))
        if cmd == ",":
            return Text("", font_size=fs, offset=int(fs * KERN_SCALE))

        if cmd in FUNCTIONS:
            return Text(cmd, italic=False, font_size=fs)

        symbol = self.symbols.get(cmd)
        if symbol is not None:
            return Text(symbol, italic=False, font_size=fs)

        logger.debug("Unknown command \\%s, rendering placeholder", cmd)
        return Text("?", italic=False, font_size=fs)

    def _read_delimiter(self) -> str:
        delim = self.next()
        if delim == "\\" and self.peek():
            # Escaped delimiter such as \{ or \|
            delim = self.next()
        return delim

    def _parse_fence(self) -> ScalingFence:
        left = self._read_delimiter()

        start = self.pos
        depth = 0
        while not self.at_end():
            if self.at_command(LEFT):
                depth += 1
            elif self.at_command(RIGHT):
                if depth == 0:
                    break
                depth -= 1
            self.pos += 1

        content = self._subparse(self.source[start:self.pos], self.font_size)

        if self.at_command(RIGHT):
            self.pos += len(RIGHT)
        else:
            logger.debug("No matching \\right for \\left%s", left)
        right = self._read_delimiter()

        return ScalingFence(content, left, right)

    def _read_block(self) -> str:
        """
        Read one argument: a brace block (nested braces kept verbatim), a bracket
        block (no nesting), or a single raw character.
        """
        if self.peek() == "{":
            self.next()
            depth = 1
            res = ""
            while not self.at_end():
                c = self.next()
                if c == "{":
                    depth += 1
                elif c == "}":
                    depth -= 1
                    if depth == 0:
                        break
                res += c
            return res

        if self.peek() == "[":
            self.next()
            start = self.pos
            while not self.at_end() and self.peek() != "]":
                self.pos += 1
            res = self.source[start:self.pos]
            self.next()
            return res

        return self.next()

    def _attach_scripts(self, base: Node) -> Node:
        while self.peek() in ("^", "_"):
            kind = self.next()
            content = self._subparse(self._read_block(), int(self.font_size * SCRIPT_SCALE))

            # Last write wins: a second ^ or _ replaces the earlier one.
            if isinstance(base, BigOperator):
                if kind == "^":
                    base.upper = content
                else:
                    base.lower = content
            else:
                if not isinstance(base, Script):
                    base = Script(base)
                if kind == "^":
                    base.superscript = content
                else:
                    base.subscript = content
        return base


def parse(markup: str, base_font_size: int = BASE_FONT_SIZE, symbols: Mapping[str, str] = SYMBOLS) -> Row:
    return Parser(markup, base_font_size, symbols).parse()
