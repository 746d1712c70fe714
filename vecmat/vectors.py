"""Two and three dimensional vectors and the free functions that work on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, TypeVar

V = TypeVar("V", bound="Vector2")


def _same_kind(v: Vector2, u: Vector2) -> None:
    if type(v) is not type(u):
        raise TypeError(
            f"vectors of different kinds: {type(v).__name__} and {type(u).__name__}"
        )


@dataclass
class Vector2:
    """A mutable 2D vector (x, y)."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s)

    def _build(self: V, components) -> V:
        return type(self)(*components)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._build(a + b for a, b in zip(self, other))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._build(a - b for a, b in zip(self, other))

    def __mul__(self, other):
        """Scale by a number, or take the dot product with a vector of the same kind."""
        if isinstance(other, Vector2):
            if type(other) is not type(self):
                return NotImplemented
            return sum(a * b for a, b in zip(self, other))
        if isinstance(other, Real):
            return self._build(c * other for c in self)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._build(c * other for c in self)
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("vector division by zero")
        return self._build(c / scalar for c in self)

    def __neg__(self):
        return self._build(-c for c in self)

    def __getitem__(self, index):
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"vector index out of range: {index!r}")

    def __setitem__(self, index, value):
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError(f"vector index out of range: {index!r}")

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y

    def is_zero(self) -> bool:
        """True when every component is zero."""
        return not any(self)

    def length_squared(self):
        return sum(c * c for c in self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        magnitude = self.length()
        if magnitude == 0:
            raise ValueError("cannot normalize a zero-length vector")
        inverse = 1.0 / magnitude
        for index, component in enumerate(list(self)):
            self[index] = component * inverse

    def is_normalized(self) -> bool:
        return self.length() == 1.0


@dataclass
class Vector3(Vector2):
    """A mutable 3D vector (x, y, z)."""

    z: float = 0.0

    @classmethod
    def from_vector2(cls, v: Vector2, z):
        """Extend a 2D vector with a z component."""
        return cls(v.x, v.y, z)

    @classmethod
    def splat(cls, s):
        return cls(s, s, s)

    def __iter__(self) -> Iterator:
        yield from super().__iter__()
        yield self.z

    def __getitem__(self, index):
        if index == 2:
            return self.z
        return super().__getitem__(index)

    def __setitem__(self, index, value):
        if index == 2:
            self.z = value
        else:
            super().__setitem__(index, value)


def cross_product(v: Vector3, u: Vector3) -> Vector3:
    """Cross product of two 3D vectors (only x, y and z are used)."""
    if not isinstance(v, Vector3) or not isinstance(u, Vector3):
        raise TypeError("cross product needs two 3D vectors")
    return Vector3(
        v.y * u.z - v.z * u.y,
        v.z * u.x - v.x * u.z,
        v.x * u.y - v.y * u.x,
    )


def lerp(v: V, u: V, t) -> V:
    """Linear interpolation from ``v`` (t = 0) to ``u`` (t = 1)."""
    _same_kind(v, u)
    return type(v)(*(a + (b - a) * t for a, b in zip(v, u)))


def clamp(v: V, low, high) -> V:
    """Clamp every component of ``v`` into ``[low, high]``."""
    return type(v)(*(low if c < low else (high if c > high else c) for c in v))


def component_min(v: V, u: V) -> V:
    """Component-wise minimum of two vectors."""
    _same_kind(v, u)
    return type(v)(*(a if a < b else b for a, b in zip(v, u)))


def component_max(v: V, u: V) -> V:
    """Component-wise maximum of two vectors."""
    _same_kind(v, u)
    return type(v)(*(a if a > b else b for a, b in zip(v, u)))


def distance_between(v: V, u: V) -> float:
    _same_kind(v, u)
    return (v - u).length()


def distance_between_squared(v: V, u: V):
    _same_kind(v, u)
    return (v - u).length_squared()