from typing import Any, Optional, Tuple
from avltree import types, errors as err
from avltree.node import Node, height


def check_invariants(root: Optional[Node], key: types.KeyFn) -> int:
    """
    walk the whole tree and verify bst order, avl balance and the cached
    heights. raises InvariantViolation at the first broken node, returns the
    node count otherwise
    """

    count, _, _ = _check(root, key)
    return count


def _check(node: Optional[Node], key: types.KeyFn) -> Tuple[int, Any, Any]:
    """returns (count, min key, max key) of the subtree"""

    if not node:
        return 0, None, None

    node_key = key(node.value)
    lcount, lmin, lmax = _check(node.left, key)
    rcount, rmin, rmax = _check(node.right, key)

    if lcount and not lmax < node_key:
        raise err.InvariantViolation(f"left subtree of {node_key!r} holds {lmax!r}")
    if rcount and not rmin > node_key:
        raise err.InvariantViolation(f"right subtree of {node_key!r} holds {rmin!r}")

    lheight, rheight = height(node.left), height(node.right)

    if abs(lheight - rheight) > 1:
        raise err.InvariantViolation(
            f"{node_key!r} unbalanced, heights {lheight} and {rheight}"
        )
    if node.height != 1 + max(lheight, rheight):
        raise err.InvariantViolation(
            f"{node_key!r} caches height {node.height}, "
            f"expected {1 + max(lheight, rheight)}"
        )

    return (
        lcount + rcount + 1,
        lmin if lcount else node_key,
        rmax if rcount else node_key,
    )
