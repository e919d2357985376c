import numpy as np
import pytest

from shallownet import Matrix, ShapeError
from shallownet.core.matrix import as_matrix


def test_row_major_construction():
    matrix = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert matrix.shape == (2, 3)
    assert matrix.at(1, 0) == 4.0
    assert matrix.row(0) == [1.0, 2.0, 3.0]


def test_construction_rejects_wrong_value_count():
    with pytest.raises(ShapeError):
        Matrix(2, 2, [1.0, 2.0, 3.0])


def test_default_construction_is_zero_filled():
    assert Matrix(2, 2).to_list() == [[0.0, 0.0], [0.0, 0.0]]


def test_from_array_rejects_vectors():
    with pytest.raises(ShapeError):
        Matrix.from_array([1.0, 2.0])


def test_matmul_and_transpose():
    a = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    b = Matrix.from_rows([[1.0, 0.0, 2.0], [0.0, 1.0, 1.0]])
    product = a.matmul(b)
    assert product.shape == (3, 3)
    assert product.to_list() == [[1.0, 2.0, 4.0], [3.0, 4.0, 10.0], [5.0, 6.0, 16.0]]
    assert a.transpose().to_list() == [[1.0, 3.0, 5.0], [2.0, 4.0, 6.0]]


def test_matmul_shape_mismatch():
    with pytest.raises(ShapeError):
        Matrix(2, 3).matmul(Matrix(2, 3))


def test_combine_requires_equal_shapes():
    with pytest.raises(ShapeError):
        Matrix(3, 2).combine(Matrix(1, 2), np.add)


def test_apply_and_combine_return_new_matrices():
    a = Matrix.from_rows([[1.0, -2.0]])
    doubled = a.apply(lambda v: 2.0 * v)
    summed = a.combine(doubled, np.add)
    assert a.to_list() == [[1.0, -2.0]]
    assert doubled.to_list() == [[2.0, -4.0]]
    assert summed.to_list() == [[3.0, -6.0]]


def test_apply_rejects_shape_changes():
    with pytest.raises(ShapeError):
        Matrix(2, 2).apply(lambda v: v.sum(axis=0))


def test_in_place_variants_mutate():
    a = Matrix.from_rows([[1.0, 2.0]])
    a.apply_(lambda v: v + 1.0)
    a.combine_(Matrix.from_rows([[10.0, 20.0]]), np.multiply)
    assert a.to_list() == [[20.0, 60.0]]


def test_uniform_is_reproducible():
    first = Matrix.uniform(3, 4, np.random.default_rng(5))
    second = Matrix.uniform(3, 4, np.random.default_rng(5))
    np.testing.assert_array_equal(first.to_numpy(), second.to_numpy())


def test_exported_arrays_do_not_alias_storage():
    source = np.ones((2, 2))
    matrix = Matrix.from_array(source)
    source[0, 0] = 5.0
    exported = matrix.to_numpy()
    exported[1, 1] = 7.0
    viewed = np.asarray(matrix)
    viewed[0, 1] = 9.0
    assert matrix.to_list() == [[1.0, 1.0], [1.0, 1.0]]


def test_as_matrix_copies_matrices():
    original = Matrix.from_rows([[1.0]])
    converted = as_matrix(original)
    converted.apply_(lambda v: v * 3.0)
    assert original.at(0, 0) == 1.0
