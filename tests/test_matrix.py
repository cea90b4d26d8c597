import numpy as np
import pytest

from weibull_quantile.matrix import Matrix, matrix
from weibull_quantile.transformers.base import InvalidOptionError, LengthMismatchError, MatrixShapeError
from weibull_quantile.transformers.matrix import quantile


@pytest.fixture
def data():
    return np.linspace(0.0, 1.0, 25)


# ---------------------------------------------------
# Matrix collaborator
# ---------------------------------------------------
def test_zero_filled_from_shape():
    mat = matrix((2, 3))
    assert mat.shape == (2, 3)
    assert mat.dtype == "float64"
    assert mat.length == 6
    assert len(mat) == 6
    assert mat.data.tolist() == [0.0] * 6


def test_shape_and_dtype():
    mat = matrix([2, 2], "float32")
    assert mat.data.dtype == np.float32
    assert mat.dtype == "float32"


def test_from_data_shares_matching_buffer():
    buf = np.arange(4, dtype=np.float64)
    mat = matrix(buf, (2, 2))
    assert np.shares_memory(mat.data, buf)


def test_from_data_casts_to_dtype():
    mat = matrix([0.5, 300.0, -1.0, 2.9], (2, 2), "uint8")
    assert mat.data.tolist() == [0, 44, 255, 2]


def test_data_must_match_shape():
    with pytest.raises(MatrixShapeError):
        matrix([1.0, 2.0, 3.0], (2, 2))
    with pytest.raises(MatrixShapeError):
        matrix((-1, 2))


def test_unknown_dtype():
    with pytest.raises(InvalidOptionError):
        matrix((2, 2), "beep")
    with pytest.raises(InvalidOptionError):
        matrix((2, 2), "generic")


def test_get_set_and_str():
    mat = matrix([1.0, 2.0, 3.0, 4.0], (2, 2))
    assert mat.get(1, 0) == 3.0
    mat.set(1, 0, 5.0)
    assert mat.get(1, 0) == 5.0
    assert str(mat) == "1.0,2.0;5.0,4.0"
    assert mat.to_numpy().shape == (2, 2)
    with pytest.raises(IndexError):
        mat.get(2, 0)


def test_equality():
    assert matrix([1.0, 2.0], (1, 2)) == Matrix([1.0, 2.0], (1, 2), "float64")
    assert matrix([1.0, 2.0], (1, 2)) != matrix([1.0, 2.0], (2, 1))
    assert matrix([np.nan], (1, 1)) == matrix([np.nan], (1, 1))


# ---------------------------------------------------
# Matrix quantile
# ---------------------------------------------------
def test_evaluates_each_element(data, reference, params):
    mat = matrix(data, (5, 5), "float64")
    out = matrix((5, 5), "float64")

    actual = quantile(out, mat, *params)

    assert actual is out
    assert mat.data.tolist() == data.tolist()
    np.testing.assert_allclose(actual.data, reference(data), rtol=1e-12)


def test_in_place(data, reference, params):
    mat = matrix(data.copy(), (5, 5))
    assert quantile(mat, mat, *params) is mat
    np.testing.assert_allclose(mat.data, reference(data), rtol=1e-12)


def test_length_mismatch(data, params):
    mat = matrix(data, (5, 5))
    with pytest.raises(LengthMismatchError):
        quantile(matrix((10, 10)), mat, *params)


def test_only_length_has_to_match(data, reference, params):
    out = matrix((1, 25))
    quantile(out, matrix(data, (5, 5)), *params)
    assert out.shape == (1, 25)
    np.testing.assert_allclose(out.data, reference(data), rtol=1e-12)


def test_empty_matrices(params):
    out = matrix((0, 0))
    for shape in [(0, 10), (10, 0), (0, 0)]:
        assert quantile(out, matrix(shape), *params).data.size == 0
    assert out.shape == (0, 0)


def test_output_dtype_narrows(data, reference, params):
    out = matrix((5, 5), "float32")
    quantile(out, matrix(data, (5, 5)), *params)
    assert out.data.dtype == np.float32
    np.testing.assert_allclose(out.data, reference(data).astype(np.float32), rtol=1e-6)
