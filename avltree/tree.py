from __future__ import annotations
from typing import Any, Generic, Iterable, Iterator, Optional
from structlog import get_logger
from avltree import core, check, types, errors as err
from avltree.node import Node, height

_LOGGER = get_logger()
_MISSING = object()


class ReversedView(Generic[types.T]):
    """descending view. each iteration starts over from the current root"""

    def __init__(self, tree: AVLTree):
        self._tree = tree

    def __iter__(self) -> Iterator[types.T]:
        return core.traverse_reversed(self._tree.root)

    def __repr__(self) -> str:
        return f"ReversedView({list(self)!r})"


class AVLTree(Generic[types.T, types.K]):
    """
    ordered container on top of an avl tree. values are ordered by
    key(value), at most one value is kept per key.

    iterating while the tree is being mutated is undefined: the traversal
    may skip or repeat values
    """

    root: Optional[Node[types.T]] = None

    def __init__(self, key: types.KeyFn = types.identity):
        self.root = None
        self._key = key
        self._size = 0
        self.logger = _LOGGER.bind(tree=hex(id(self)))

    @classmethod
    def keyed(cls, key: types.KeyFn) -> AVLTree:
        """empty tree ordered by key"""

        return cls(key=key)

    @classmethod
    def from_comparables(cls, items: Iterable[types.T]) -> AVLTree:
        """tree of items ordered by the items themselves"""

        return cls.from_iterable(items, key=types.identity)

    @classmethod
    def from_iterable(cls, items: Iterable[types.T], key: types.KeyFn) -> AVLTree:
        """tree of items ordered by key, inserted in iteration order"""

        tree = cls(key=key)

        for item in items:
            tree.insert(item)

        tree.logger.debug("avltree.built", count=len(tree))
        return tree

    @property
    def key(self) -> types.KeyFn:
        """key function"""

        return self._key

    @property
    def height(self) -> int:
        """height of the root, 0 when empty"""

        return height(self.root)

    @property
    def reversed(self) -> ReversedView[types.T]:
        """descending order"""

        return ReversedView(self)

    def insert(self, value: types.T) -> None:
        """
        add value. if its key is already present the stored value is kept
        and nothing changes (first write wins, there is no upsert)
        """

        if self._key(value) in self:
            return

        self.root = core.insert(self.root, value, self._key)
        self._size += 1

    def get(self, key: types.K, default: Any = None) -> Any:
        """value stored under key, default if there is none"""

        return core.get(self.root, key, self._key, default)

    def remove(self, key: types.K) -> None:
        """drop the value stored under key. missing keys are ignored"""

        if key not in self:
            return

        self.root = core.remove(self.root, key, self._key)
        self._size -= 1

    def validate(self) -> None:
        """raise InvariantViolation unless order, balance and heights hold"""

        try:
            count = check.check_invariants(self.root, self._key)
        except err.InvariantViolation as error:
            self.logger.error("avltree.invalid", error=str(error))
            raise

        if count != self._size:
            self.logger.error("avltree.invalid", count=count, size=self._size)
            raise err.InvariantViolation(
                f"{count} nodes reachable but size is {self._size}"
            )

    def __contains__(self, key: Any) -> bool:
        return core.get(self.root, key, self._key, _MISSING) is not _MISSING

    def __iter__(self) -> Iterator[types.T]:
        """ascending order, fresh traversal of the current root"""

        return core.traverse(self.root)

    def __reversed__(self) -> Iterator[types.T]:
        return core.traverse_reversed(self.root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"
