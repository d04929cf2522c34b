import pytest

from gltfxform.vertex_data import IndexType, JointType, ReadIndices, ReadJoints


@pytest.mark.parametrize(
    "kind,limit",
    [(IndexType.U8, 255), (IndexType.U16, 65535), (IndexType.U32, 2**32 - 1)],
)
def test_index_type_limits(kind, limit):
    assert list(ReadIndices(kind, [limit]).into_u32()) == [limit]
    with pytest.raises(ValueError):
        ReadIndices(kind, [limit + 1])


@pytest.mark.parametrize(
    "kind,limit",
    [(JointType.U8, 255), (JointType.U16, 65535)],
)
def test_joint_type_limits(kind, limit):
    reader = ReadJoints(kind, [(limit, 0, 0, 0)])
    assert list(reader.into_u16()) == [(limit, 0, 0, 0)]
    with pytest.raises(ValueError):
        ReadJoints(kind, [(limit + 1, 0, 0, 0)])


@pytest.mark.parametrize("kind", list(IndexType))
def test_indices_iterate_in_order(kind):
    data = [0, 1, 2, 2, 1, 0]
    reader = ReadIndices(kind, data)
    assert list(reader) == data
    assert len(reader) == len(data)


@pytest.mark.parametrize("kind", list(IndexType))
def test_into_u32_preserves_values(kind):
    data = [3, 0, kind.max_value]
    reader = ReadIndices(kind, data)
    assert list(reader.into_u32()) == data


def test_into_u32_length_shrinks_as_consumed():
    reader = ReadIndices(IndexType.U16, [5, 6, 7])
    casting = reader.into_u32()
    assert len(casting) == 3
    assert next(casting) == 5
    assert len(casting) == 2
    assert list(casting) == [6, 7]
    assert len(casting) == 0


def test_into_u32_unwrap_returns_source():
    reader = ReadIndices(IndexType.U8, [1, 2])
    assert reader.into_u32().unwrap() is reader


def test_indices_can_be_iterated_twice():
    reader = ReadIndices(IndexType.U32, [9, 8])
    first = list(reader)
    second = list(reader)
    assert first == [9, 8]
    assert second == [9, 8]


@pytest.mark.parametrize(
    "kind,value",
    [(IndexType.U8, 256), (IndexType.U16, 65536), (IndexType.U32, -1)],
)
def test_index_out_of_range_rejected(kind, value):
    with pytest.raises(ValueError):
        ReadIndices(kind, [value])


def test_index_must_be_integer():
    with pytest.raises(TypeError):
        ReadIndices(IndexType.U8, [1.5])


@pytest.mark.parametrize("kind", list(JointType))
def test_joints_iterate_and_widen(kind):
    data = [(0, 1, 2, 3), (kind.max_value, 0, 0, 1)]
    reader = ReadJoints(kind, data)
    assert list(reader) == data
    assert len(reader) == 2
    assert list(reader.into_u16()) == data


def test_into_u16_unwrap_and_length():
    reader = ReadJoints(JointType.U8, [[1, 2, 3, 4]])
    casting = reader.into_u16()
    assert len(casting) == 1
    assert casting.unwrap() is reader
    assert next(casting) == (1, 2, 3, 4)
    with pytest.raises(StopIteration):
        next(casting)


def test_joint_wrong_arity_rejected():
    with pytest.raises(ValueError):
        ReadJoints(JointType.U16, [(1, 2, 3)])


def test_joint_out_of_range_rejected():
    with pytest.raises(ValueError):
        ReadJoints(JointType.U8, [(0, 0, 0, 256)])


def test_empty_streams():
    assert len(ReadIndices(IndexType.U8)) == 0
    assert list(ReadJoints(JointType.U16).into_u16()) == []