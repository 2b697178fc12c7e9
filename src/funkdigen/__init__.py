"""
funkdigen: polynomial-delay generation of functional digraphs up to
isomorphism, after A. E. Porreca and E. Timofeeva (arXiv:2302.13832).
"""

from .codes.trees import cycle_leaf, merge_tree, unmerge_tree, is_valid_tree
from .codes.rotation import RotationTest, is_min_rotation_naive, is_min_rotation_linear
from .comp.successor import cycle, next_comp, generate_components, count_components
from .comp.dfs import parent, dfs_components, count_components_dfs
from .func.partitions import next_part, partitions
from .func.digraphs import loops, next_func, generate_digraphs, count_digraphs
from .io.digraph6 import to_digraph6, d6_to_nx, to_networkx
from .io.internal import format_internal, parse_internal
from .engine import GeneratorConfig, OutputMode, Strategy, generate

__all__ = [
    # Trees
    "cycle_leaf",
    "merge_tree",
    "unmerge_tree",
    "is_valid_tree",
    # Rotation
    "RotationTest",
    "is_min_rotation_naive",
    "is_min_rotation_linear",
    # Components
    "cycle",
    "next_comp",
    "generate_components",
    "count_components",
    "parent",
    "dfs_components",
    "count_components_dfs",
    # Digraphs
    "next_part",
    "partitions",
    "loops",
    "next_func",
    "generate_digraphs",
    "count_digraphs",
    # IO
    "to_digraph6",
    "d6_to_nx",
    "to_networkx",
    "format_internal",
    "parse_internal",
    # Entry point
    "GeneratorConfig",
    "OutputMode",
    "Strategy",
    "generate",
]
