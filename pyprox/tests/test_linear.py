""" Test the linear module.
"""
import unittest
import numpy as np
import scipy.sparse as sp
from scipy.sparse.linalg import aslinearoperator
from pyprox.linear import (Identity, Matrix, Shift, as_operator,
                           as_scipy_operator)
from pyprox.utils import random_generator


class TestMatrix(unittest.TestCase):
    def test_matrix_op_adj(self):
        """ Test the dense and sparse matrix operator and its adjoint.
        """
        rng = random_generator(0)
        M = rng.randn(4, 3)
        x, z = rng.randn(3), rng.randn(4)
        for M_ in [M, sp.csr_matrix(M)]:
            L = Matrix(M_)
            self.assertEqual(L.shape, (4, 3))
            np.testing.assert_allclose(L.op(x), M.dot(x))
            np.testing.assert_allclose(L.adj(z), M.T.dot(z))
            np.testing.assert_almost_equal(np.dot(L.op(x), z),
                                           np.dot(x, L.adj(z)))

    def test_wrong_dim(self):
        """ Test a non 2d matrix is rejected.
        """
        with self.assertRaises(ValueError):
            Matrix(np.ones(3))


class TestShift(unittest.TestCase):
    def test_scalar_shift(self):
        """ Test the scalar shift against its dense counterpart.
        """
        rng = random_generator(0)
        M = rng.randn(5, 5)
        x = rng.randn(5)
        L = Shift(Matrix(M), 2.0)
        np.testing.assert_allclose(L.op(x), (M + 2.0 * np.eye(5)).dot(x))
        np.testing.assert_allclose(L.adj(x), (M.T + 2.0 * np.eye(5)).dot(x))

    def test_diagonal_shift(self):
        """ Test the diagonal shift against its dense counterpart.
        """
        rng = random_generator(1)
        M = rng.randn(5, 5)
        c = rng.uniform(0.5, 1.5, size=5)
        x = rng.randn(5)
        L = Shift(Matrix(M), c)
        np.testing.assert_allclose(L.op(x), (M + np.diag(c)).dot(x))

    def test_identity_shift(self):
        """ Test the shifted identity.
        """
        x = np.arange(3.0)
        np.testing.assert_allclose(Shift(Identity(3), 1.0).op(x), 2.0 * x)

    def test_wrong_shift(self):
        """ Test non-square operators and mismatched shifts are rejected.
        """
        with self.assertRaises(ValueError):
            Shift(Matrix(np.ones((2, 3))), 1.0)
        with self.assertRaises(ValueError):
            Shift(Identity(3), np.ones(2))


class TestConversions(unittest.TestCase):
    def test_as_operator(self):
        """ Test every representation gives the same op.
        """
        rng = random_generator(0)
        M = rng.randn(3, 3)
        x = rng.randn(3)
        L = Matrix(M)
        assert(as_operator(L) is L)
        for M_ in [M, sp.csr_matrix(M), aslinearoperator(M)]:
            np.testing.assert_allclose(as_operator(M_).op(x), M.dot(x))
            np.testing.assert_allclose(as_operator(M_).adj(x), M.T.dot(x))

    def test_as_scipy_operator(self):
        """ Test every representation gives the same scipy matvec.
        """
        rng = random_generator(0)
        M = rng.randn(3, 3)
        x = rng.randn(3)
        for M_ in [M, sp.csr_matrix(M), aslinearoperator(M), Matrix(M),
                   as_operator(aslinearoperator(M)), Shift(Matrix(M), 0.0)]:
            A = as_scipy_operator(M_)
            self.assertEqual(A.shape, (3, 3))
            np.testing.assert_allclose(A.matvec(x), M.dot(x))
            np.testing.assert_allclose(A.rmatvec(x), M.T.dot(x))


if __name__ == '__main__':
    unittest.main()
