"""4x4 matrices for homogeneous row-vector transforms."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from vecmat.mat3 import Mat3
from vecmat.vector4 import Vector4

_SIZE = 4


class Mat4:
    """An immutable 4x4 matrix stored row by row.

    Vectors are treated as rows, so a transform is applied as ``v * m``;
    translations therefore live in the last row.
    """

    __slots__ = ("_rows",)

    def __init__(self, *args):
        if not args:
            values = (0.0,) * (_SIZE * _SIZE)
        elif len(args) == _SIZE * _SIZE:
            values = args
        else:
            raise TypeError(
                f"Mat4 takes 0 or {_SIZE * _SIZE} values, got {len(args)}"
            )
        self._rows = tuple(
            tuple(values[r * _SIZE:(r + 1) * _SIZE]) for r in range(_SIZE)
        )

    @classmethod
    def _from_rows(cls, rows) -> Mat4:
        return cls(*(value for row in rows for value in row))

    @classmethod
    def filled(cls, s) -> Mat4:
        """A matrix whose sixteen elements all equal ``s``."""
        return cls(*((s,) * (_SIZE * _SIZE)))

    @classmethod
    def from_mat3(cls, m: Mat3) -> Mat4:
        """Embed a 3x3 matrix in the upper-left corner, with 1 at [3, 3]."""
        rows = [tuple(row) + (0.0,) for row in m]
        rows.append((0.0, 0.0, 0.0, 1.0))
        return cls._from_rows(rows)

    def _columns(self):
        return tuple(zip(*self._rows))

    def _scaled(self, scalar) -> Mat4:
        return self._from_rows(tuple(e * scalar for e in row) for row in self._rows)

    def __mul__(self, other):
        """Scale by a number or multiply by another matrix."""
        if isinstance(other, Mat4):
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
        if type(other) is Vector4:
            return Vector4(
                *(
                    sum(c * e for c, e in zip(other, col))
                    for col in self._columns()
                )
            )
        if isinstance(other, Real):
            return self._scaled(other)
        return NotImplemented

    def __invert__(self) -> Mat4:
        """The transpose, written ``~m``."""
        return self.transposed()

    def transposed(self) -> Mat4:
        return self._from_rows(self._columns())

    def __eq__(self, other):
        if not isinstance(other, Mat4):
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
        return f"Mat4{self._rows!r}"

    @classmethod
    def identity(cls) -> Mat4:
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def scaling(cls, x, y=None, z=None) -> Mat4:
        """Scaling matrix; with one factor all three axes are scaled alike."""
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("scaling takes one factor or three")
        return cls(
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_z(cls, theta) -> Mat4:
        """Rotation about the Z axis by ``theta`` radians."""
        s, c = math.sin(theta), math.cos(theta)
        return cls(
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_y(cls, theta) -> Mat4:
        """Rotation about the Y axis by ``theta`` radians."""
        s, c = math.sin(theta), math.cos(theta)
        return cls(
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_x(cls, theta) -> Mat4:
        """Rotation about the X axis by ``theta`` radians."""
        s, c = math.sin(theta), math.cos(theta)
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def translation(cls, x, y=None, z=None) -> Mat4:
        """Translation matrix from three offsets or from a vector's x, y and z."""
        if y is None and z is None:
            x, y, z = x.x, x.y, x.z
        elif y is None or z is None:
            raise TypeError("translation takes a vector or three offsets")
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            x, y, z, 1.0,
        )

    @classmethod
    def projection(cls, w, h, n) -> Mat4:
        """Perspective projection for a ``w`` x ``h`` screen, near plane at ``n``."""
        return cls(
            2.0 * n / w, 0.0, 0.0, 0.0,
            0.0, 2.0 * n / h, 0.0, 0.0,
            0.0, 0.0, 1.0, 1.0,
            0.0, 0.0, 0.0, 0.0,
        )