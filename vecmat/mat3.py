"""3x3 matrices for row-vector transforms."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from vecmat.vectors import Vector3

_SIZE = 3


class Mat3:
    """An immutable 3x3 matrix stored row by row.

    Vectors are treated as rows, so a transform is applied as ``v * m``.
    """

    __slots__ = ("_rows",)

    def __init__(self, *args):
        if not args:
            values = (0.0,) * (_SIZE * _SIZE)
        elif len(args) == _SIZE * _SIZE:
            values = args
        else:
            raise TypeError(
                f"Mat3 takes 0 or {_SIZE * _SIZE} values, got {len(args)}"
            )
        self._rows = tuple(
            tuple(values[r * _SIZE:(r + 1) * _SIZE]) for r in range(_SIZE)
        )

    @classmethod
    def _from_rows(cls, rows) -> Mat3:
        return cls(*(value for row in rows for value in row))

    def _columns(self):
        return tuple(zip(*self._rows))

    def _scaled(self, scalar) -> Mat3:
        return self._from_rows(tuple(e * scalar for e in row) for row in self._rows)

    def __mul__(self, other):
        """Scale by a number or multiply by another matrix."""
        if isinstance(other, Mat3):
            columns = other._columns()
            return self._from_rows(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self._rows
            )
        if isinstance(other, Real):
            return self._scaled(other)
        return NotImplemented

    def __rmul__(self, other):
        """Transform a row vector (``v * m``) or scale by a number."""
        if type(other) is Vector3:
            return Vector3(
                *(
                    sum(c * e for c, e in zip(other, col))
                    for col in self._columns()
                )
            )
        if isinstance(other, Real):
            return self._scaled(other)
        return NotImplemented

    def __invert__(self) -> Mat3:
        """The transpose, written ``~m``."""
        return self.transposed()

    def transposed(self) -> Mat3:
        return self._from_rows(self._columns())

    def __eq__(self, other):
        if not isinstance(other, Mat3):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __iter__(self) -> Iterator[tuple]:
        return iter(self._rows)

    def __getitem__(self, index):
        """``m[row]`` gives a row tuple, ``m[row, col]`` a single element."""
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return self._rows[index]

    def __repr__(self) -> str:
        return f"Mat3{self._rows!r}"

    @classmethod
    def identity(cls) -> Mat3:
        return cls(
            1.0, 0.0, 0.0,
            0.0, 1.0, 0.0,
            0.0, 0.0, 1.0,
        )

    @classmethod
    def scaling(cls, factor) -> Mat3:
        return cls(
            factor, 0.0, 0.0,
            0.0, factor, 0.0,
            0.0, 0.0, factor,
        )

    @classmethod
    def rotation_z(cls, theta) -> Mat3:
        """Rotation about the Z axis by ``theta`` radians."""
        s, c = math.sin(theta), math.cos(theta)
        return cls(
            c, s, 0.0,
            -s, c, 0.0,
            0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_y(cls, theta) -> Mat3:
        """Rotation about the Y axis by ``theta`` radians."""
        s, c = math.sin(theta), math.cos(theta)
        return cls(
            c, 0.0, -s,
            0.0, 1.0, 0.0,
            s, 0.0, c,
        )

    @classmethod
    def rotation_x(cls, theta) -> Mat3:
        """Rotation about the X axis by ``theta`` radians."""
        s, c = math.sin(theta), math.cos(theta)
        return cls(
            1.0, 0.0, 0.0,
            0.0, c, s,
            0.0, -s, c,
        )