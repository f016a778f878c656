# -*- coding: utf-8 -*-
"""
tests/unit/test_matrix.py

Matrix algebra: determinant, transpose, inverse, products.
"""
import logging

import numpy as np
import pytest

from linalg3 import Matrix, Vector


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def random_matrices():
    """Random float matrices (almost surely invertible)."""
    np.random.seed(42)
    return [Matrix.from_array(np.random.randn(3, 3)) for _ in range(10)]


@pytest.fixture
def counting():
    """1..9 row by row."""
    return Matrix(1, 2, 3,
                  4, 5, 6,
                  7, 8, 9)


@pytest.fixture
def invertible():
    """det = 9."""
    return Matrix(4.0, 7.0, 2.0,
                  3.0, 6.0, 1.0,
                  2.0, 5.0, 3.0)


# ============================================================
# CONSTRUCTION
# ============================================================

class TestConstruction:

    def test_scalar_and_default(self):
        assert Matrix.scalar(2) == Matrix(2, 2, 2, 2, 2, 2, 2, 2, 2)
        assert Matrix.default() == Matrix.scalar(0.0)
        assert Matrix.default(int).dtype is int

    def test_unity(self):
        assert Matrix.unity() == Matrix(1.0, 0.0, 0.0,
                                        0.0, 1.0, 0.0,
                                        0.0, 0.0, 1.0)
        np.testing.assert_array_equal(Matrix.unity(np.float32).to_array(), np.eye(3))

    def test_rows_and_columns(self, counting):
        assert counting.row(1) == Vector(4, 5, 6)
        assert counting.column(2) == Vector(3, 6, 9)
        assert Matrix.from_rows(*counting.rows()) == counting

    def test_array_interop(self, counting):
        np.testing.assert_array_equal(counting.to_array(), np.arange(1, 10).reshape(3, 3))
        assert Matrix.from_array(counting.to_array()) == counting

    def test_array_wrong_shape(self):
        with pytest.raises(ValueError):
            Matrix.from_array(np.zeros((3, 4)))

    def test_copy_is_independent(self, counting):
        m = counting.copy()
        m.m22 = 0
        assert counting.m22 == 5


# ============================================================
# STRUCTURE
# ============================================================

class TestTranspose:

    def test_swaps_off_diagonal(self, counting):
        assert counting.transpose() == Matrix(1, 4, 7,
                                              2, 5, 8,
                                              3, 6, 9)

    def test_involutive(self, random_matrices):
        for m in random_matrices:
            assert m.transpose().transpose() == m


class TestDeterminant:

    def test_diagonal(self):
        det = Matrix(2, 0, 0, 0, 3, 0, 0, 0, 4).determinant()
        assert det == 24
        assert type(det) is int

    def test_matches_numpy(self, random_matrices):
        for m in random_matrices:
            assert m.determinant() == pytest.approx(np.linalg.det(m.to_array()))

    def test_identical_rows(self):
        m = Matrix(1.0, 2.0, 3.0,
                   1.0, 2.0, 3.0,
                   4.0, 5.0, 6.0)
        assert m.determinant() == 0.0
        assert not m.is_invertible
        assert m.inverse() is None

    def test_singular_int(self, counting):
        assert counting.determinant() == 0
        assert counting.inverse() is None


class TestInverse:

    def test_matches_numpy(self, invertible):
        np.testing.assert_allclose(invertible.inverse().to_array(),
                                   np.linalg.inv(invertible.to_array()), atol=1e-12)

    def test_product_is_unity(self, random_matrices):
        for m in random_matrices:
            assert m.is_invertible
            assert (m @ m.inverse()).allclose(Matrix.unity(), atol=1e-9)
            assert (m.inverse() @ m).allclose(Matrix.unity(), atol=1e-9)

    def test_unit_determinant_int(self):
        """1/det survives the int round trip only for det = ±1."""
        m = Matrix(1, 2, 0,
                   0, 1, 0,
                   0, 0, 1)
        assert m.inverse() == Matrix(1, -2, 0,
                                     0, 1, 0,
                                     0, 0, 1)

    def test_singular_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="linalg3")
        assert Matrix.default().inverse() is None
        assert "Singular matrix" in caplog.text


# ============================================================
# PRODUCTS
# ============================================================

class TestMatrixProduct:

    def test_matches_numpy(self):
        a = Matrix(1, 2, 0, 0, 1, 0, 0, 0, 1)
        b = Matrix(1, 0, 0, 3, 1, 0, 0, 0, 1)
        np.testing.assert_array_equal((a @ b).to_array(), a.to_array() @ b.to_array())

    def test_not_commutative(self):
        a = Matrix(1, 2, 0, 0, 1, 0, 0, 0, 1)
        b = Matrix(1, 0, 0, 3, 1, 0, 0, 0, 1)
        assert a @ b == Matrix(7, 2, 0, 3, 1, 0, 0, 0, 1)
        assert b @ a == Matrix(1, 2, 0, 3, 7, 0, 0, 0, 1)
        assert a @ b != b @ a

    def test_associative(self, random_matrices):
        a, b, c = random_matrices[:3]
        assert ((a @ b) @ c).allclose(a @ (b @ c), atol=1e-9)

    def test_star_is_matmul(self, random_matrices):
        a, b = random_matrices[:2]
        assert a * b == a @ b

    def test_unity_is_identity(self, random_matrices):
        for m in random_matrices:
            assert (Matrix.unity() @ m).allclose(m)
            assert (m @ Matrix.unity()).allclose(m)

    def test_in_place(self):
        a = Matrix(1, 2, 0, 0, 1, 0, 0, 0, 1)
        b = Matrix(1, 0, 0, 3, 1, 0, 0, 0, 1)
        alias = a
        a @= b
        assert a is alias
        assert alias == Matrix(7, 2, 0, 3, 1, 0, 0, 0, 1)
        a *= Matrix.unity(int)
        assert alias == Matrix(7, 2, 0, 3, 1, 0, 0, 0, 1)

    def test_in_place_with_vector_is_rejected(self, counting):
        alias = counting
        with pytest.raises(TypeError):
            counting *= Vector(1, 0, 0)
        with pytest.raises(TypeError):
            counting @= Vector(1, 0, 0)
        assert isinstance(counting, Matrix)
        assert counting is alias
        assert counting == Matrix(1, 2, 3, 4, 5, 6, 7, 8, 9)


class TestMatrixVectorProduct:

    def test_row_times_vector(self, counting):
        assert counting @ Vector(1, 0, 0) == Vector(1, 4, 7)
        assert counting @ Vector(0, 1, 0) == Vector(2, 5, 8)
        assert counting * Vector(1, 1, 1) == Vector(6, 15, 24)

    def test_non_symmetric_matches_numpy(self, random_matrices):
        v = Vector(0.5, -1.0, 2.0)
        for m in random_matrices:
            np.testing.assert_allclose((m @ v).to_array(), m.to_array() @ v.to_array(), atol=1e-12)

    def test_vector_on_left_is_unsupported(self, counting):
        with pytest.raises(TypeError):
            Vector(1, 0, 0) @ counting
        with pytest.raises(TypeError):
            Vector(1, 0, 0) * counting


# ============================================================
# COMPONENTWISE
# ============================================================

class TestComponentwise:

    def test_add_sub(self, counting):
        assert counting + Matrix.scalar(1) == Matrix(2, 3, 4, 5, 6, 7, 8, 9, 10)
        assert counting - counting == Matrix.default(int)

    def test_in_place_add_sub(self, counting):
        alias = counting
        counting += Matrix.scalar(1)
        counting -= Matrix.scalar(2)
        assert counting is alias
        assert alias == Matrix(0, 1, 2, 3, 4, 5, 6, 7, 8)

    def test_scalar_mul_div(self, counting):
        assert counting * 2 == Matrix(2, 4, 6, 8, 10, 12, 14, 16, 18)
        assert 2 * counting == counting * 2
        assert counting / 2 == Matrix(0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5)

    def test_in_place_scalar(self, counting):
        alias = counting
        counting *= 3
        counting /= 3
        assert counting is alias
        assert alias == Matrix(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)

    def test_division_by_zero(self, invertible):
        with pytest.raises(ZeroDivisionError):
            invertible / 0.0

    def test_unsupported_operands(self, counting):
        with pytest.raises(TypeError):
            counting + 1
        with pytest.raises(TypeError):
            counting + Vector(1, 2, 3)


class TestEquality:

    def test_exact(self, invertible):
        assert invertible == invertible.copy()
        nudged = invertible.copy()
        nudged.m33 += 1e-12
        assert invertible != nudged
        assert invertible.allclose(nudged)

    def test_not_equal_to_vector(self):
        assert Matrix.default() != Vector.default()
