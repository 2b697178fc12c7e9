"""Internal text format: the nested isomorphism code written as lists.

A tree is printed as [n, ...], a component as a list of trees and a
functional digraph as a list of components, e.g. [[[1]], [[2, 1]]].
Meant for debugging and tests, not for exchange with other tools.
"""
from __future__ import annotations

import ast
from typing import Any


def _as_lists(code: Any) -> Any:
    if isinstance(code, int):
        return code
    return [_as_lists(x) for x in code]


def _as_tuples(obj: Any) -> Any:
    if isinstance(obj, int):
        return obj
    if not isinstance(obj, list):
        raise ValueError(f"unexpected item in internal code: {obj!r}")
    return tuple(_as_tuples(x) for x in obj)


def format_internal(code: Any) -> str:
    """Text of a tree, component or functional digraph code."""
    return repr(_as_lists(code))


def parse_internal(text: str) -> Any:
    """Inverse of format_internal; returns nested tuples."""
    try:
        obj = ast.literal_eval(text.strip())
    except (ValueError, SyntaxError) as e:
        raise ValueError(f"not an internal code: {text!r}") from e
    if not isinstance(obj, list):
        raise ValueError(f"not an internal code: {text!r}")
    return _as_tuples(obj)
