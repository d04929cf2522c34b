"""Node transforms: a 4x4 matrix or decomposed translation/rotation/scale."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from gltfxform.math import Matrix3, Matrix4, Quaternion, Vector3

__all__ = ["Transform", "MatrixTransform", "DecomposedTransform"]

MatrixArray = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]
Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


def _fixed(values: Sequence[float], length: int, what: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != length:
        raise ValueError(f"{what} needs {length} components, got {len(result)}")
    return result


def _signum(value: float) -> float:
    if math.isnan(value):
        return math.nan
    return math.copysign(1.0, value)


def _reciprocal(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


class Transform(ABC):
    """The transform of a node, in either of its two representations."""

    @abstractmethod
    def matrix(self) -> MatrixArray:
        """Return the column-major 4x4 matrix form of this transform."""

    @abstractmethod
    def decomposed(self) -> tuple[Vec3, Vec4, Vec3]:
        """Return ``(translation, rotation, scale)``; rotation is ``[x, y, z, w]``."""


@dataclass(frozen=True)
class MatrixTransform(Transform):
    """A transform given as a column-major 4x4 matrix."""

    values: MatrixArray

    def __post_init__(self) -> None:
        columns = tuple(self.values)
        if len(columns) != 4:
            raise ValueError(f"matrix needs 4 columns, got {len(columns)}")
        object.__setattr__(
            self, "values", tuple(_fixed(c, 4, "matrix column") for c in columns)
        )

    def matrix(self) -> MatrixArray:
        return self.values

    def decomposed(self) -> tuple[Vec3, Vec4, Vec3]:
        m = self.values
        translation = (m[3][0], m[3][1], m[3][2])
        cx = Vector3(m[0][0], m[0][1], m[0][2])
        cy = Vector3(m[1][0], m[1][1], m[1][2])
        cz = Vector3(m[2][0], m[2][1], m[2][2])
        sx = cx.magnitude()
        sy = cy.magnitude()
        sz = _signum(Matrix3(cx, cy, cz).determinant()) * cz.magnitude()
        rotation_matrix = Matrix3(
            cx * _reciprocal(sx), cy * _reciprocal(sy), cz * _reciprocal(sz)
        )
        r = Quaternion.from_matrix(rotation_matrix)
        rotation = (r.v.x, r.v.y, r.v.z, r.s)
        return translation, rotation, (sx, sy, sz)


@dataclass(frozen=True)
class DecomposedTransform(Transform):
    """A transform given as translation, rotation quaternion and scale."""

    translation: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec4 = (0.0, 0.0, 0.0, 1.0)
    scale: Vec3 = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "translation", _fixed(self.translation, 3, "translation")
        )
        object.__setattr__(self, "rotation", _fixed(self.rotation, 4, "rotation"))
        object.__setattr__(self, "scale", _fixed(self.scale, 3, "scale"))

    def matrix(self) -> MatrixArray:
        """Return ``translation @ rotation @ scale`` as a column-major matrix."""
        t, r, s = self.translation, self.rotation, self.scale
        tm = Matrix4.from_translation(Vector3(*t))
        rm = Matrix4.from_quaternion(Quaternion(r[3], Vector3(r[0], r[1], r[2])))
        sm = Matrix4.from_nonuniform_scale(*s)
        return (tm @ rm @ sm).as_array()

    def decomposed(self) -> tuple[Vec3, Vec4, Vec3]:
        return self.translation, self.rotation, self.scale