from .partitions import Part, next_part, partitions
from .digraphs import Func, loops, part, next_func, generate_digraphs, count_digraphs

__all__ = [
    "Part",
    "next_part",
    "partitions",
    "Func",
    "loops",
    "part",
    "next_func",
    "generate_digraphs",
    "count_digraphs",
]
