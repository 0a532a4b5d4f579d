# coding: utf-8
""" This module gathers the linear operators used by the quadratic functions.
"""
import numpy as np
import scipy.sparse as sp
from scipy.sparse.linalg import LinearOperator, aslinearoperator


class Identity:
    """ Identity operator.
    """
    def __init__(self, n):
        self.shape = (n, n)

    def op(self, x):
        """ Return x.
        """
        return x

    def adj(self, x):
        """ Return x.
        """
        return x


class Matrix:
    """ Dense or sparse matrix operator.
    """
    def __init__(self, M):
        """ Matrix linear operator class.

        Parameters:
        -----------
        M : 2d np.ndarray or scipy.sparse matrix,
            the matrix.
        """
        if not sp.issparse(M):
            M = np.asarray(M)
        if M.ndim != 2:
            raise ValueError("M should be a 2d array, got "
                             "{0} dimensions".format(M.ndim))
        self.M = M
        self.shape = M.shape

    def op(self, x):
        """ Return M.dot(x).

        Parameters:
        -----------
        x : 1d np.ndarray,
            signal.

        Results:
        --------
        img_x : np.ndarray,
            the resulting 1d vector.
        """
        return self.M.dot(x)

    def adj(self, x):
        """ Return M.T.conj().dot(x).

        Parameters:
        -----------
        x : 1d np.ndarray,
            signal.

        Results:
        --------
        img_x : np.ndarray,
            the resulting 1d vector.
        """
        return self.M.T.conj().dot(x)


class Shift:
    """ Linear operator shifted by a (diagonal) multiple of the identity:
    x -> L.op(x) + c * x.
    """
    def __init__(self, L, c):
        """ Shift linear operator class.

        Parameters:
        -----------
        L : object with op, adj and shape,
            the square operator to shift.

        c : float or 1d np.ndarray,
            the shift, an array is taken as the diagonal of the shift.
        """
        if L.shape[0] != L.shape[1]:
            raise ValueError("only a square operator can be shifted, "
                             "got shape {0}".format(L.shape))
        if np.ndim(c) > 0 and np.shape(c) != (L.shape[0],):
            raise ValueError("c should be a scalar or a vector of length "
                             "{0}, got shape {1}".format(L.shape[0],
                                                         np.shape(c)))
        self.L = L
        self.c = c
        self.shape = L.shape

    def op(self, x):
        """ Return L.op(x) + c * x.
        """
        return self.L.op(x) + self.c * x

    def adj(self, x):
        """ Return L.adj(x) + conj(c) * x.
        """
        return self.L.adj(x) + np.conj(self.c) * x


def as_operator(L):
    """ Return L as an object with op, adj and shape.

    L can be a np.ndarray, a scipy.sparse matrix, a
    scipy.sparse.linalg.LinearOperator, or already an op/adj object.
    """
    if hasattr(L, 'op') and hasattr(L, 'shape'):
        return L
    if isinstance(L, LinearOperator):
        return _SciPyOperator(L)
    return Matrix(L)


class _SciPyOperator:
    """ Private wrapper of a scipy LinearOperator in the op/adj convention.
    """
    def __init__(self, A):
        self.A = A
        self.shape = A.shape

    def op(self, x):
        return self.A.matvec(x)

    def adj(self, x):
        return self.A.rmatvec(x)


def as_scipy_operator(L, dtype=None):
    """ Return L as a scipy.sparse.linalg.LinearOperator.

    Parameters:
    -----------
    L : np.ndarray, scipy.sparse matrix, LinearOperator or op/adj object,
        the linear operator.

    dtype : np.dtype (default None),
        dtype of the operator, only used for op/adj objects.

    Results:
    --------
    A : LinearOperator,
        the operator, usable by the scipy iterative solvers.
    """
    if isinstance(L, LinearOperator) or sp.issparse(L) or \
            isinstance(L, np.ndarray):
        return aslinearoperator(L)
    if isinstance(L, Matrix):
        return aslinearoperator(L.M)
    if isinstance(L, _SciPyOperator):
        return L.A
    if hasattr(L, 'op') and hasattr(L, 'shape'):
        dtype = np.dtype(float) if dtype is None else dtype
        return LinearOperator(L.shape, matvec=L.op,
                              rmatvec=getattr(L, 'adj', None), dtype=dtype)
    return aslinearoperator(np.asarray(L))
