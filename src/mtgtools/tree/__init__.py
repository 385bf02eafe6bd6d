from .rooted import RootedTree

__all__ = [
    "RootedTree",
]
