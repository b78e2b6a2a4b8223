from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional
from avltree import types, errors as err


@dataclass
class Node(Generic[types.T]):
    """tree nodes"""

    value: types.T
    left: Optional[Node[types.T]] = None
    right: Optional[Node[types.T]] = None
    height: int = 1


def height(node: Optional[Node]) -> int:
    """cached subtree height, 0 for an empty subtree"""

    if not node:
        return 0

    return node.height


def balance_factor(node: Optional[Node]) -> int:
    """left height minus right height"""

    if not node:
        return 0

    return height(node.left) - height(node.right)


def update_height(node: Node) -> None:
    """helper"""

    node.height = 1 + max(height(node.left), height(node.right))


def left_rotate(node: Node[types.T]) -> Node[types.T]:
    """
    l rotate. right child becomes the subtree root, its left subtree moves
    under node. in-order sequence is unchanged
    """

    right = node.right

    if not right:
        raise err.RotationError("left rotation needs a right child")

    node.right = right.left
    right.left = node
    update_height(node)
    update_height(right)
    return right


def right_rotate(node: Node[types.T]) -> Node[types.T]:
    """r rotate"""

    left = node.left

    if not left:
        raise err.RotationError("right rotation needs a left child")

    node.left = left.right
    left.right = node
    update_height(node)
    update_height(left)
    return left
