from .digraph6 import (
    strip_digraph6_header,
    component_array,
    functional_array,
    adjacency_matrix,
    matrix_to_d6,
    to_digraph6,
    d6_to_matrix,
    to_networkx,
    d6_to_nx,
)
from .internal import format_internal, parse_internal

__all__ = [
    "strip_digraph6_header",
    "component_array",
    "functional_array",
    "adjacency_matrix",
    "matrix_to_d6",
    "to_digraph6",
    "d6_to_matrix",
    "to_networkx",
    "d6_to_nx",
    "format_internal",
    "parse_internal",
]
