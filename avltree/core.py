"""
recursive avl algorithms. every mutating function takes a subtree root and
returns the (possibly new) subtree root, the caller reassigns its pointer
"""

from typing import Any, Generator, Optional
from avltree import types
from avltree.node import (
    Node,
    balance_factor,
    left_rotate,
    right_rotate,
    update_height,
)


def insert(
    node: Optional[Node[types.T]], value: types.T, key: types.KeyFn
) -> Node[types.T]:
    """bst insert then rebalance if balance factor +/- 2"""

    if not node:
        return Node(value=value)

    value_key = key(value)
    node_key = key(node.value)

    # equal keys fall through both branches, the stored value is kept
    if value_key < node_key:
        node.left = insert(node.left, value, key)
    elif value_key > node_key:
        node.right = insert(node.right, value, key)

    update_height(node)

    return _balance_after_insert(node, value_key, key)


def _balance_after_insert(
    node: Node[types.T], inserted: Any, key: types.KeyFn
) -> Node[types.T]:
    """pick the rotation case from where the new key landed"""

    balance = balance_factor(node)

    if balance > 1 and node.left:
        if inserted < key(node.left.value):
            return right_rotate(node)

        node.left = left_rotate(node.left)
        return right_rotate(node)

    if balance < -1 and node.right:
        if inserted > key(node.right.value):
            return left_rotate(node)

        node.right = right_rotate(node.right)
        return left_rotate(node)

    return node


def remove(
    node: Optional[Node[types.T]], search_key: Any, key: types.KeyFn
) -> Optional[Node[types.T]]:
    """
    bst delete then rebalance. a node with two children takes over the value
    of its in-order successor, which is then deleted from the right subtree
    """

    if not node:
        return None

    node_key = key(node.value)

    if search_key < node_key:
        node.left = remove(node.left, search_key, key)
    elif search_key > node_key:
        node.right = remove(node.right, search_key, key)
    else:
        if not node.left:
            return node.right
        if not node.right:
            return node.left

        successor = min_node(node.right)
        node.value = successor.value
        node.right = remove(node.right, key(successor.value), key)

    update_height(node)

    return _balance_after_remove(node)


def _balance_after_remove(node: Node[types.T]) -> Node[types.T]:
    """rotation case comes from the heavy child's own balance"""

    balance = balance_factor(node)

    if balance > 1 and node.left:
        if balance_factor(node.left) >= 0:
            return right_rotate(node)

        node.left = left_rotate(node.left)
        return right_rotate(node)

    if balance < -1 and node.right:
        if balance_factor(node.right) <= 0:
            return left_rotate(node)

        node.right = right_rotate(node.right)
        return left_rotate(node)

    return node


def min_node(node: Node[types.T]) -> Node[types.T]:
    """leftmost node of a subtree"""

    while node.left:
        node = node.left

    return node


def get(
    node: Optional[Node[types.T]],
    search_key: Any,
    key: types.KeyFn,
    default: Any = None,
) -> Any:
    """bst search. default when the key is not present"""

    if not node:
        return default

    node_key = key(node.value)

    if search_key == node_key:
        return node.value
    if search_key < node_key:
        return get(node.left, search_key, key, default)

    return get(node.right, search_key, key, default)


def traverse(node: Optional[Node[types.T]]) -> Generator[types.T, None, None]:
    """in-order, ascending"""

    if not node:
        return

    yield from traverse(node.left)
    yield node.value
    yield from traverse(node.right)


def traverse_reversed(
    node: Optional[Node[types.T]],
) -> Generator[types.T, None, None]:
    """in-order, descending"""

    if not node:
        return

    yield from traverse_reversed(node.right)
    yield node.value
    yield from traverse_reversed(node.left)
