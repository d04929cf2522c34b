# gltfxform

Small, dependency-free helpers for working with glTF scene data:

- `gltfxform.math`: `Vector3`, `Vector4`, `Matrix3`, `Matrix4` and
  `Quaternion`, immutable column-major types of the kind glTF uses for node
  transforms.
- `gltfxform.transform`: a node's transform, held either as a 4x4 matrix
  (`MatrixTransform`) or as translation, rotation and scale
  (`DecomposedTransform`), each able to give the other form.
- `gltfxform.vertex_data`: value-checked streams of primitive indices and
  skin joints (`ReadIndices`, `ReadJoints`) that can widen their values to a
  common type.

## Installation

```
pip install gltfxform
```

## Transforms

```python
from gltfxform.transform import DecomposedTransform, MatrixTransform

t = DecomposedTransform(
    translation=(1.0, 2.0, 3.0),
    rotation=(0.0, 0.0, 0.0, 1.0),   # x, y, z, w quaternion
    scale=(2.0, 2.0, 2.0),
)
matrix = t.matrix()                  # tuple of 4 columns of 4 floats
translation, rotation, scale = MatrixTransform(matrix).decomposed()
```

`DecomposedTransform` defaults to the identity: no translation, the rotation
`(0, 0, 0, 1)` and a scale of 1 on each axis. Its `matrix()` is
`translation @ rotation @ scale`. `MatrixTransform.decomposed()` reads the
translation from the last column, takes each scale from the length of a
column, and gives the z scale a negative sign when the matrix flips
handedness (a negative determinant). Both classes raise `ValueError` when a
translation, rotation, scale or matrix column has the wrong number of
components.

## Math types

```python
import math
from gltfxform.math import Matrix4, Quaternion, Vector3

q = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), math.pi / 2)
m = Matrix4.from_translation(Vector3(1.0, 0.0, 0.0)) @ Matrix4.from_quaternion(q)
print(m.as_array())
```

Vectors support scaling with `*` and `Vector4` supports `+`; matrices are
multiplied with `@`. `Matrix4.from_array` and `Vector4.from_array` build
values from nested sequences, and `Quaternion.from_matrix` converts a
rotation `Matrix3` back to a quaternion.

## Indices and joints

```python
from gltfxform.vertex_data import IndexType, JointType, ReadIndices, ReadJoints

indices = ReadIndices(IndexType.U16, [0, 1, 2])
print(len(indices), list(indices.into_u32()))

joints = ReadJoints(JointType.U8, [(0, 1, 2, 3)])
print(list(joints.into_u16()))
```

Values are checked on construction: a non-integer raises `TypeError`, a value
outside the range of the component type raises `ValueError`, and a joint
without exactly four components raises `ValueError`. The iterators returned
by `into_u32()` and `into_u16()` report how many items remain through `len()`
and give back the original stream through `unwrap()`.

## What this package does not do

It does not load or write `.gltf` or `.glb` files, read buffer or image data,
or walk a document's scenes, nodes, meshes or skins. The caller supplies the
transform values, indices and joints it works on.

## Running the tests

```
pip install -e ".[test]"
pytest
```