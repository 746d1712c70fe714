"""Four dimensional vectors (x, y, z, w)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from vecmat.vectors import Vector3


@dataclass
class Vector4(Vector3):
    """A mutable 4D vector (x, y, z, w), usually a homogeneous point."""

    w: float = 0.0

    @classmethod
    def from_vector3(cls, v: Vector3, w=1):
        """Extend a 3D vector with a w component (1 by default)."""
        return cls(v.x, v.y, v.z, w)

    @classmethod
    def splat(cls, s):
        return cls(s, s, s, s)

    def __iter__(self) -> Iterator:
        yield from super().__iter__()
        yield self.w

    def __getitem__(self, index):
        if index == 3:
            return self.w
        return super().__getitem__(index)

    def __setitem__(self, index, value):
        if index == 3:
            self.w = value
        else:
            super().__setitem__(index, value)

    def homogenize(self) -> None:
        """Divide x and y by w in place; z and w are left as they are."""
        if self.w == 0:
            raise ZeroDivisionError("cannot homogenize a vector with w == 0")
        inverse = 1.0 / self.w
        self.x *= inverse
        self.y *= inverse