"""Run configuration and the generation entry point.

The configuration is resolved once (by the command line or by the
caller) and the variant functions it selects are looked up once per
run, never per generated object.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional

from funkdigen.codes.rotation import RotationTest, least_rotation_finder, rotation_test
from funkdigen.comp.dfs import dfs_components
from funkdigen.comp.successor import generate_components
from funkdigen.func.digraphs import generate_digraphs
from funkdigen.io.digraph6 import to_digraph6
from funkdigen.io.internal import format_internal

MAX_VERTICES = 255

Sink = Callable[[str], Any]


class OutputMode(Enum):
    DIGRAPH6 = "digraph6"
    INTERNAL = "internal"
    SILENT = "silent"


class Strategy(Enum):
    SUCCESSOR = "successor"
    DFS = "dfs"


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Resolved options for one generation run.

    connected: only connected digraphs (single components)
    output:    how each object is rendered for the sink
    loopless:  omit self-loops from digraph6 adjacency matrices
    rotation:  least-rotation test used to certify canonical codes
    strategy:  successor walk or depth-first reverse search
               (the latter only for connected digraphs)
    """

    connected: bool = False
    output: OutputMode = OutputMode.DIGRAPH6
    loopless: bool = False
    rotation: RotationTest = RotationTest.NAIVE
    strategy: Strategy = Strategy.SUCCESSOR

    def validate(self) -> None:
        """Raise ValueError for mutually exclusive options."""
        if self.loopless and self.output is OutputMode.INTERNAL:
            raise ValueError("loopless mode only applies to digraph6 output")
        if self.strategy is Strategy.DFS and not self.connected:
            raise ValueError("the dfs strategy only generates connected digraphs")


def check_size(n: int) -> None:
    if not 0 <= n <= MAX_VERTICES:
        raise ValueError(f"number of vertices must be in 0..{MAX_VERTICES}, got {n}")


def iter_codes(n: int, config: GeneratorConfig) -> Iterator[Any]:
    """Isomorphism codes selected by config, in generation order."""
    check_size(n)
    config.validate()
    if config.connected:
        if config.strategy is Strategy.DFS:
            return dfs_components(n, least_rotation_finder(config.rotation))
        return generate_components(n, rotation_test(config.rotation))
    return generate_digraphs(n, rotation_test(config.rotation))


def renderer(config: GeneratorConfig) -> Optional[Callable[[Any], str]]:
    """Function turning a code into its output line, None in silent mode."""
    if config.output is OutputMode.SILENT:
        return None
    if config.output is OutputMode.INTERNAL:
        return format_internal
    loopless = config.loopless
    if config.connected:
        return lambda c: to_digraph6((c,), loopless=loopless)
    return lambda g: to_digraph6(g, loopless=loopless)


def generate(n: int, config: Optional[GeneratorConfig] = None, sink: Optional[Sink] = None) -> int:
    """Generate the digraphs of n vertices selected by config and count them.

    Each rendered object is passed to sink; nothing is rendered in silent
    mode or when sink is None.
    """
    if config is None:
        config = GeneratorConfig()
    codes = iter_codes(n, config)
    render = renderer(config) if sink is not None else None
    count = 0
    if render is None:
        for _ in codes:
            count += 1
        return count
    for code in codes:
        sink(render(code))
        count += 1
    return count
