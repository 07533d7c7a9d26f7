"""Growable array of floats with explicit capacity management."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence, Union


class Vector:
    """Sequence of floats that tracks its capacity separately from its size.

    Slots past the size keep whatever they last held, so inserting past the
    end can expose zeros or values left behind by earlier operations.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, length: int = 0, default_value: float = 0.0) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self._length = length
        self._data = [float(default_value)] * length + [0.0] * length

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector:
        """Build a vector holding ``values``, with twice their count as capacity."""
        items = [float(v) for v in values]
        vec = cls(len(items))
        vec._data[: len(items)] = items
        return vec

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError("Out of bounds")

    def at(self, index: int) -> float:
        """Element at ``index``; raises IndexError outside the size."""
        self._check_index(index)
        return self._data[index]

    def front(self) -> float:
        return self.at(0)

    def back(self) -> float:
        return self.at(self._length - 1)

    def capacity(self) -> int:
        return len(self._data)

    def reserve(self, num: int) -> None:
        """Grow the capacity to ``num``; new slots hold zero."""
        if num <= self.capacity():
            return
        self._data.extend([0.0] * (num - self.capacity()))

    def shrink_to_fit(self) -> None:
        """Drop spare capacity so that it equals the size."""
        if self._length >= self.capacity():
            return
        del self._data[self._length:]

    def clear(self) -> None:
        """Make the vector empty; the capacity is kept."""
        self._length = 0

    def insert(self, index: int, elem: float) -> None:
        """Place ``elem`` at ``index``, shifting later elements right.

        An index past the end extends the size to ``index + 1``.
        """
        if index < 0:
            raise IndexError("Out of bounds")
        if index > self.capacity():
            self.reserve(index + 5)
        elif self._length + 1 >= self.capacity():
            self.reserve(self.capacity() * 2)
        new_length = index + 1 if index > self._length else self._length + 1
        self.reserve(new_length + 1)
        self._data[index + 1 : new_length + 1] = self._data[index:new_length]
        self._data[index] = float(elem)
        self._length = new_length

    def erase(self, index: int) -> None:
        """Remove the element at ``index``; an index past the size is ignored.

        An index equal to the size removes the last element.
        """
        if index < 0 or index > self._length or self._length == 0:
            return
        tail = self._data[index + 1 : self._length + 1]
        tail += [0.0] * (self._length - index - len(tail))
        self._data[index : self._length] = tail
        self._length -= 1

    def push_back(self, elem: float) -> None:
        self.insert(self._length, elem)

    def pop_back(self) -> float:
        """Remove and return the last element; raises IndexError when empty."""
        value = self.back()
        self._length -= 1
        return value

    def resize(self, size: int, elem: float = 0.0) -> None:
        """Set the size, filling new positions with ``elem``."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > self._length:
            self.reserve(size)
            self._data[self._length : size] = [float(elem)] * (size - self._length)
        self._length = size

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[float]:
        return iter(self._data[: self._length])

    def __getitem__(self, index: Union[int, slice]) -> Union[float, list]:
        if isinstance(index, slice):
            return self._data[: self._length][index]
        if index < 0:
            index += self._length
        return self.at(index)

    def __setitem__(self, index: int, value: float) -> None:
        if index < 0:
            index += self._length
        self._check_index(index)
        self._data[index] = float(value)

    def _compare(self, other: Vector) -> Optional[int]:
        for mine, theirs in zip(self, other):
            if mine != theirs:
                if mine < theirs:
                    return -1
                if mine > theirs:
                    return 1
                return None
        return (len(self) > len(other)) - (len(self) < len(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self._compare(other)
        return result is not None and result < 0

    def __le__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self._compare(other)
        return result is not None and result <= 0

    def __gt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self._compare(other)
        return result is not None and result > 0

    def __ge__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self._compare(other)
        return result is not None and result >= 0

    def __str__(self) -> str:
        return "".join(f"{value:g} " for value in self)

    def __repr__(self) -> str:
        return f"Vector({list(self)!r})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    a = Vector(10, 1)
    a.insert(15, 3)
    a.insert(50, 899)
    a.insert(2, 2)
    a.insert(2, 2)
    a.insert(2, 2)
    a.insert(14, 7)
    a.insert(16, 8)
    a.erase(14)
    a.erase(1)
    print(a)
    print(len(a))
    print(a.capacity())
    print(f"{a.back():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())