from __future__ import annotations
from typing import Any, Callable, TypeVar, Protocol


class Comparable(Protocol):
    """anything with a total order"""

    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...


T = TypeVar("T")
K = TypeVar("K", bound=Comparable)
KeyFn = Callable[[T], K]


def identity(value: Any) -> Any:
    """default key fn, value compared to itself"""

    return value
