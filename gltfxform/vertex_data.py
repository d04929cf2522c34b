"""Typed vertex index and joint streams, with widening conversions."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["IndexType", "JointType", "ReadIndices", "ReadJoints"]

_T = TypeVar("_T")
_R = TypeVar("_R")


class IndexType(enum.Enum):
    """Component type of vertex index data."""

    U8 = 8
    U16 = 16
    U32 = 32

    @property
    def max_value(self) -> int:
        """Largest value a component of this type can hold."""
        return (1 << self.value) - 1


class JointType(enum.Enum):
    """Component type of joint index data."""

    U8 = 8
    U16 = 16

    @property
    def max_value(self) -> int:
        """Largest value a component of this type can hold."""
        return (1 << self.value) - 1


def _check_component(value: int, max_value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    if not 0 <= value <= max_value:
        raise ValueError(f"{what} {value} is outside 0..{max_value}")
    return value


class _CastingIter(Generic[_T, _R]):
    """An iterator over converted items that knows how many remain."""

    def __init__(self, source: _R, items: tuple[_T, ...]) -> None:
        self._source = source
        self._items = items
        self._position = 0

    def __iter__(self) -> _CastingIter[_T, _R]:
        return self

    def __next__(self) -> _T:
        if self._position >= len(self._items):
            raise StopIteration
        item = self._items[self._position]
        self._position += 1
        return item

    def __len__(self) -> int:
        return len(self._items) - self._position

    def unwrap(self) -> _R:
        """Return the stream this iterator converts from."""
        return self._source


@dataclass(frozen=True)
class ReadIndices:
    """Vertex draw-sequence indices of a single component type."""

    kind: IndexType
    values: tuple[int, ...] = ()

    def __init__(self, kind: IndexType, values: Iterable[int] = ()) -> None:
        kind = IndexType(kind)
        checked = tuple(
            _check_component(v, kind.max_value, "index") for v in values
        )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "values", checked)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def into_u32(self) -> _CastingIter[int, ReadIndices]:
        """Reinterpret the indices as u32, which can hold any index."""
        return _CastingIter(self, tuple(int(v) for v in self.values))


@dataclass(frozen=True)
class ReadJoints:
    """Per-vertex joint indices, four components each."""

    kind: JointType
    values: tuple[tuple[int, int, int, int], ...] = ()

    def __init__(
        self, kind: JointType, values: Iterable[Iterable[int]] = ()
    ) -> None:
        kind = JointType(kind)
        checked = []
        for joint in values:
            components = tuple(
                _check_component(v, kind.max_value, "joint") for v in joint
            )
            if len(components) != 4:
                raise ValueError(
                    f"joints need 4 components, got {len(components)}"
                )
            checked.append(components)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "values", tuple(checked))

    def __iter__(self) -> Iterator[tuple[int, int, int, int]]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def into_u16(self) -> _CastingIter[tuple[int, int, int, int], ReadJoints]:
        """Reinterpret the joints as u16, which can hold any joint."""
        return _CastingIter(
            self, tuple(tuple(int(c) for c in joint) for joint in self.values)
        )