from .trees import (
    LEAF,
    Tree,
    cycle_leaf,
    is_leaf,
    children,
    merge_tree,
    unmerge_tree,
    last_child,
    can_merge,
    plant,
    is_valid_tree,
    tree_parents,
)
from .rotation import (
    RotationTest,
    rotate,
    period,
    is_min_rotation_naive,
    is_min_rotation_linear,
    least_rotation_naive,
    least_rotation_booth,
    rotation_test,
    least_rotation_finder,
)

__all__ = [
    "LEAF",
    "Tree",
    "cycle_leaf",
    "is_leaf",
    "children",
    "merge_tree",
    "unmerge_tree",
    "last_child",
    "can_merge",
    "plant",
    "is_valid_tree",
    "tree_parents",
    "RotationTest",
    "rotate",
    "period",
    "is_min_rotation_naive",
    "is_min_rotation_linear",
    "least_rotation_naive",
    "least_rotation_booth",
    "rotation_test",
    "least_rotation_finder",
]
