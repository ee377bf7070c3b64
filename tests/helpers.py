"""Tree-walking helpers shared by the tests."""

from typing import Iterator

from mathbox.nodes import Node, Row, Fraction, Script, BigOperator, Sqrt, ScalingFence


def children_of(node: Node) -> list:
    if isinstance(node, Row):
        return list(node.children)
    if isinstance(node, Fraction):
        return [node.numerator, node.denominator]
    if isinstance(node, Script):
        return [n for n in (node.base, node.superscript, node.subscript) if n is not None]
    if isinstance(node, BigOperator):
        return [n for n in (node.upper, node.lower) if n is not None]
    if isinstance(node, Sqrt):
        return [n for n in (node.radicand, node.index) if n is not None]
    if isinstance(node, ScalingFence):
        return [node.content]
    return []


def walk(node: Node) -> Iterator[Node]:
    yield node
    for child in children_of(node):
        yield from walk(child)


def shape(node: Node) -> tuple:
    """Node-type skeleton of a tree, ignoring layout results."""
    return (type(node).__name__, tuple(shape(child) for child in children_of(node)))
