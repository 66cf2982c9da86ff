from __future__ import annotations

"""
Bounded Tag Storage.

Tags are short caller-supplied labels kept in insertion order. Storage is
capped; additions past the cap are dropped without error.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from plainlog.domain.constants import MAX_TAG_LENGTH, MAX_TAGS


@dataclass(frozen=True)
class Tag:
    """A stored label and its insertion position."""
    name: str
    index: int


class TagList:
    """Fixed-capacity, insertion-ordered collection of Tag records."""

    def __init__(self, capacity: int = MAX_TAGS, max_length: int = MAX_TAG_LENGTH) -> None:
        self._capacity = capacity
        self._max_length = max_length
        self._items: List[Tag] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, name: str) -> bool:
        """
        Append a tag, truncating its name to the maximum length.

        Args:
            name: Label to store.

        Returns:
            bool: False when the list is already full and the tag was dropped.
        """
        if len(self._items) >= self._capacity:
            return False
        self._items.append(Tag(name=str(name)[:self._max_length], index=len(self._items)))
        return True

    def snapshot(self) -> Tuple[Tag, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._items)
