import copy

import numpy as np
import pytest

from elemat.linalg import (
    BelowRangeError,
    DimensionError,
    Matrix,
    MatrixError,
    Multiply,
    OutOfRangeError,
    Sum,
    Swap,
)


@pytest.mark.parametrize("rows, cols", [(1, 1), (2, 3), (3, 2), (4, 4)])
def test_create_length(rows, cols):
    n = rows * cols
    assert Matrix(rows, cols, range(n)).snapshot() == [float(x) for x in range(n)]

    for length in (n - 1, n + 1):
        with pytest.raises(DimensionError):
            Matrix(rows, cols, [0.0] * length)


def test_create_too_few():
    with pytest.raises(DimensionError) as excinfo:
        Matrix(2, 2, [1, 2, 3])

    assert excinfo.value.length == 3
    assert (excinfo.value.rows, excinfo.value.cols) == (2, 2)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("rows, cols", [(0, 2), (2, 0), (-1, 1)])
def test_create_nonpositive(rows, cols):
    with pytest.raises(DimensionError):
        Matrix(rows, cols, [])


def test_create_nested():
    with pytest.raises(DimensionError):
        Matrix(2, 2, [[1, 2], [3, 4]])


def test_create_copies_input():
    data = np.array([1.0, 2.0, 3.0, 4.0])
    a = Matrix(2, 2, data)
    data[0] = 100.0
    assert a.entry(1, 1) == 1.0


def test_entry_row_major():
    a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert a.entry(1, 1) == 1.0
    assert a.entry(1, 3) == 3.0
    assert a.entry(2, 1) == 4.0
    assert a.entry(2, 3) == 6.0
    assert a[2, 2] == 5.0
    assert a.shape == (2, 3)
    assert a.size == 6


def test_entry_out_of_bounds():
    a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])

    with pytest.raises(BelowRangeError):
        a.entry(0, 1)

    with pytest.raises(BelowRangeError):
        a.entry(1, 0)

    with pytest.raises(OutOfRangeError, match="row 3 exceeds maximum 2"):
        a.entry(3, 1)

    # column 4 would still be inside the flat storage
    with pytest.raises(OutOfRangeError, match="column 4 exceeds maximum 3"):
        a.entry(1, 4)


def test_update():
    a = Matrix.zeros(2, 2)
    a.update(2, 1, 7.5)
    a[1, 2] = -1
    assert a.snapshot() == [0.0, -1.0, 7.5, 0.0]

    with pytest.raises(OutOfRangeError):
        a.update(2, 3, 1.0)

    with pytest.raises(TypeError):
        a.update(1, 1, "1.0")

    assert a.snapshot() == [0.0, -1.0, 7.5, 0.0]


def test_snapshot_is_copy():
    a = Matrix(2, 2, [1, 2, 3, 4])
    before = a.snapshot()
    a.update(1, 1, 9.0)
    before.append(5.0)
    assert before == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert a.snapshot() == [9.0, 2.0, 3.0, 4.0]


def test_row_col():
    a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert a.row(2) == [4.0, 5.0, 6.0]
    assert a.col(3) == [3.0, 6.0]

    with pytest.raises(OutOfRangeError):
        a.col(4)


def test_filled():
    assert Matrix.filled(2, 3, 1.5).snapshot() == [1.5] * 6
    assert Matrix.zeros(1, 2).snapshot() == [0.0, 0.0]


@pytest.mark.parametrize("size", [1, 2, 3, 5])
def test_identity(size):
    a = Matrix.identity(size)

    for i in range(1, size + 1):
        for j in range(1, size + 1):
            assert a.entry(i, j) == (1.0 if i == j else 0.0)


def test_elementary():
    assert Matrix.elementary(2, Swap(1, 2)).snapshot() == [0.0, 1.0, 1.0, 0.0]
    assert Matrix.elementary(2, Sum(2, 1)).snapshot() == [1.0, 0.0, 1.0, 1.0]
    assert Matrix.elementary(2, Multiply(1, 4.0)).snapshot() == [4.0, 0.0, 0.0, 1.0]

    with pytest.raises(MatrixError):
        Matrix.elementary(2, Swap(1, 3))


@pytest.mark.parametrize("op", [Swap(1, 3), Sum(1, 2), Sum(3, 3), Multiply(2, -2.5)])
def test_elementary_product(op):
    a = Matrix(3, 2, [1, 2, 3, 4, 5, 6])
    assert Matrix.elementary(3, op) @ a == a.copy().apply(op)


def test_matmul():
    a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    b = Matrix(3, 1, [1, 0, -1])
    c = a @ b
    assert c.shape == (2, 1)
    assert c.snapshot() == [-2.0, -2.0]

    with pytest.raises(DimensionError):
        b @ a


def test_copy():
    a = Matrix(2, 2, [1, 2, 3, 4])

    for b in (a.copy(), copy.copy(a)):
        assert b == a
        b.apply(Multiply(1, 0.0))
        assert b != a
        assert a.snapshot() == [1.0, 2.0, 3.0, 4.0]


def test_eq():
    assert Matrix(2, 2, [1, 2, 3, 4]) == Matrix(2, 2, [1, 2, 3, 4])
    assert Matrix(1, 4, [1, 2, 3, 4]) != Matrix(2, 2, [1, 2, 3, 4])
    assert Matrix(1, 1, [1]) != [1.0]


def test_array_roundtrip():
    a = Matrix.fromarray([[1, 2, 3], [4, 5, 6]])
    assert a.shape == (2, 3)
    assert np.array_equal(a.toarray(), np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))

    array = a.toarray()
    array[0, 0] = 10.0
    assert a.entry(1, 1) == 1.0

    with pytest.raises(DimensionError):
        Matrix.fromarray([1, 2, 3])


@pytest.mark.parametrize("entries", [[None], ["1"], [1 + 0j], np.array(["1"])])
def test_create_non_real(entries):
    with pytest.raises(TypeError):
        Matrix(1, 1, entries)


def test_filled_non_real():
    with pytest.raises(TypeError):
        Matrix.filled(1, 1, None)


def test_create_integer_array():
    a = Matrix(1, 2, np.array([1, 2]))
    assert a.snapshot() == [1.0, 2.0]
