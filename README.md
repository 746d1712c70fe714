# vecmat

Small vector and matrix types for 2D/3D graphics work: transforming points
with row vectors, building rotation, scaling and translation matrices, and
projecting to screen space. Pure Python, no dependencies.

## Installation

    pip install vecmat

## Vectors

`Vector2` and `Vector3` live in `vecmat.vectors`; `Vector4` lives in
`vecmat.vector4`. All three are mutable dataclasses whose components default
to `0.0`.

They support:

- `+` and `-` between two vectors of the same kind,
- `*` and `/` by a number (division by zero raises `ZeroDivisionError`),
- `*` between two vectors of the same kind, which gives the dot product,
- unary `-`, iteration, and indexing with `v[i]` / `v[i] = value`
  (an index out of range raises `IndexError`),
- `is_zero()`, `length_squared()`, `length()`, `normalize()` (in place;
  raises `ValueError` for a zero-length vector) and `is_normalized()`
  (exact comparison of the length with `1.0`).

`splat(s)` builds a vector with every component set to `s`,
`Vector3.from_vector2(v, z)` extends a 2D vector with a `z` value, and
`Vector4.from_vector3(v, w=1)` turns a point into homogeneous coordinates.
`Vector4.homogenize()` divides `x` and `y` by `w` in place, leaving `z` and
`w` unchanged; it raises `ZeroDivisionError` when `w` is zero.

```python
from vecmat.vectors import Vector3, cross_product, lerp, distance_between

a = Vector3(1.0, 0.0, 0.0)
b = Vector3(0.0, 1.0, 0.0)

cross_product(a, b)        # Vector3(x=0.0, y=0.0, z=1.0)
a * b                      # 0.0 (dot product)
lerp(a, b, 0.5)            # Vector3(x=0.5, y=0.5, z=0.0)
distance_between(a, b)     # about 1.414

v = Vector3(0.0, 0.0, 2.0)
v.length()                 # 2.0
v.normalize()              # v is now Vector3(x=0.0, y=0.0, z=1.0)
v.is_normalized()          # True
```

Free functions in `vecmat.vectors`:

- `cross_product(v, u)` – cross product of two `Vector3`s,
- `lerp(v, u, t)` – linear interpolation,
- `clamp(v, low, high)` – clamp every component,
- `component_min(v, u)`, `component_max(v, u)` – component-wise min / max,
- `distance_between(v, u)`, `distance_between_squared(v, u)`.

These work on any vector kind; functions that take two vectors raise
`TypeError` when they are of different kinds.

## Matrices

`Mat3` (in `vecmat.mat3`) and `Mat4` (in `vecmat.mat4`) are immutable,
hashable and stored row by row. `Mat3()` / `Mat4()` with no arguments is the
zero matrix; otherwise pass all 9 or 16 values in row order (any other count
raises `TypeError`). `m[row]` gives a row tuple, `m[row, col]` one element,
and iterating yields the rows.

Vectors are row vectors and multiply from the left, so transforms chain left
to right: `v * first * second`. A `Vector3` multiplies a `Mat3`, a `Vector4`
multiplies a `Mat4`.

```python
import math
from vecmat.mat4 import Mat4
from vecmat.vector4 import Vector4

model = (
    Mat4.scaling(2.0)
    * Mat4.rotation_z(math.pi / 2)
    * Mat4.translation(0.0, 0.0, 5.0)
)
point = Vector4(1.0, 0.0, 0.0, 1.0) * model

projected = point * Mat4.projection(320.0, 240.0, 1.0)
projected.homogenize()
```

Constructors on both matrix types: `identity()`, `scaling(...)`,
`rotation_x(theta)`, `rotation_y(theta)`, `rotation_z(theta)` (angles in
radians). `Mat3.scaling(factor)` scales all axes alike; `Mat4.scaling`
takes either one factor or three (`x, y, z`).

`Mat4` also has:

- `translation(x, y, z)` or `translation(v)` for any object with `x`, `y`
  and `z` attributes; the offsets go in the last row,
- `projection(w, h, n)` for a `w` x `h` screen with the near plane at
  distance `n`,
- `from_mat3(m)` – embed a `Mat3` in the upper-left corner, with `1.0` at
  `[3, 3]` and zeros elsewhere,
- `filled(s)` – every entry set to `s`.

Matrices multiply with matrices of the same size and with numbers on either
side. `~m` and `m.transposed()` return the transpose.

## What is not included

There is no matrix inverse or determinant, no in-place matrix updates
(every operation returns a new matrix), and no cross product for `Vector2`.

## Running the tests

    pip install -e ".[test]"
    pytest