from .successor import (
    Comp,
    MAX_UNMERGES,
    cycle,
    size,
    is_canonical_component,
    has_unmerge,
    unmerge,
    merge,
    next_merge,
    next_comp,
    generate_components,
    count_components,
)
from .dfs import (
    candidate_count,
    candidate,
    candidates,
    parent,
    backtrack,
    is_child,
    dfs_components,
    count_components_dfs,
)

__all__ = [
    "Comp",
    "MAX_UNMERGES",
    "cycle",
    "size",
    "is_canonical_component",
    "has_unmerge",
    "unmerge",
    "merge",
    "next_merge",
    "next_comp",
    "generate_components",
    "count_components",
    "candidate_count",
    "candidate",
    "candidates",
    "parent",
    "backtrack",
    "is_child",
    "dfs_components",
    "count_components_dfs",
]
