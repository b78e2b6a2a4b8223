from .tree import AVLTree, ReversedView
from .node import Node
from .errors import AVLTreeError, InvariantViolation, RotationError

__all__ = [
    "AVLTree",
    "ReversedView",
    "Node",
    "AVLTreeError",
    "InvariantViolation",
    "RotationError",
]
