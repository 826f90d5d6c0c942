# core/assignment.py

"""
Immutable truth assignment over the literals of one formula.

The values are split into two contiguous regions:
  •  a frozen prefix, fixed for the current search branch;
  •  a thawed suffix, not yet committed, holding the default False.

Committing always moves the first thawed literal into the frozen prefix,
so registry order is the branching order of the search.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class Assignment:
    values: Tuple[bool, ...]
    frozen_count: int = 0

    def __post_init__(self):
        if not 0 <= self.frozen_count <= len(self.values):
            raise ValueError(
                f"frozen_count {self.frozen_count} outside 0..{len(self.values)}"
            )

    @classmethod
    def initial(cls, size: int) -> Assignment:
        """
        All literals thawed, all values False.
        """
        return cls((False,) * size, 0)

    @property
    def thawed_count(self) -> int:
        return len(self.values) - self.frozen_count

    @property
    def is_fully_frozen(self) -> bool:
        return self.frozen_count == len(self.values)

    @property
    def next_index(self) -> int:
        """
        Registry index of the first thawed literal.
        """
        if self.is_fully_frozen:
            raise IndexError("no thawed literal left to commit")
        return self.frozen_count

    def commit(self, value: bool) -> Assignment:
        """
        Return a child assignment with the first thawed literal frozen
        to ``value``. This assignment is left untouched.
        """
        i = self.next_index
        values = self.values[:i] + (bool(value),) + self.values[i + 1:]
        return Assignment(values, self.frozen_count + 1)

    def frozen(self) -> Tuple[bool, ...]:
        return self.values[: self.frozen_count]

    def thawed(self) -> Tuple[bool, ...]:
        return self.values[self.frozen_count:]

    def pairs(self, names: Sequence[str]) -> Tuple[Tuple[str, bool], ...]:
        """
        Pair each literal name (registry order) with its current value.
        """
        if len(names) != len(self.values):
            raise ValueError(
                f"expected {len(self.values)} literal names, got {len(names)}"
            )
        return tuple(zip(names, self.values))

    def __getitem__(self, index: int) -> bool:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.values)

    def __str__(self) -> str:
        bits = "".join("1" if v else "0" for v in self.frozen())
        return f"[{bits}|{'.' * self.thawed_count}]"
