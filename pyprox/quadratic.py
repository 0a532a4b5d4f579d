# coding: utf-8
""" This module gathers the quadratic function with an iterative prox.
"""
import numpy as np
from scipy.sparse.linalg import cg, LinearOperator
from .base import ProximableFunction
from .linear import Shift, as_operator, as_scipy_operator
from .utils import is_scalar, check_step, spectral_radius_est


class QuadraticIterative(ProximableFunction):
    """ Quadratic function with a prox computed by conjugate gradient.

    f(x) = 1/2 * x^T Q x + q^T x

    Q should be symmetric positive semidefinite, this is not checked. The
    instance owns a scratch vector rewritten at each call: it is not
    thread-safe.
    """
    def __init__(self, Q, q, tol=1.0e-10, maxiter=None, verbose=0):
        """ QuadraticIterative class.

        Parameters:
        -----------
        Q : 2d np.ndarray, scipy.sparse matrix, LinearOperator or op object,
            the square matrix of the quadratic form.

        q : 1d np.ndarray,
            the linear term.

        tol : float (default=1.0e-10),
            relative tolerance of the conjugate gradient.

        maxiter : int (default None),
            maximum number of conjugate gradient iterations, if None it is
            left to scipy (10 * dim).

        verbose : int (default=0),
            verbosity level.
        """
        q = np.asarray(q)
        shape = Q.shape if hasattr(Q, 'shape') else np.shape(Q)
        if len(shape) != 2 or shape[0] != shape[1]:
            raise ValueError("Q must be square, got shape {0}".format(shape))
        if q.ndim != 1 or len(q) != shape[1]:
            raise ValueError("q must be a vector of length {0}, got shape "
                             "{1}".format(shape[1], q.shape))
        self.Q = as_operator(Q)
        self.q = q
        self.temp = np.empty_like(q, dtype=np.result_type(q, float))
        self.tol = tol
        self.maxiter = maxiter
        self.verbose = verbose
        self._lipschitz_constant = None

    @property
    def lipschitz_constant(self):
        """ Lipschitz constant of the gradient (estimated once).
        """
        if self._lipschitz_constant is None:
            self._lipschitz_constant = spectral_radius_est(
                self.Q, self.q.shape, nb_iter=100, random_state=0,
                verbose=self.verbose)
        return self._lipschitz_constant

    def _cost_from_temp(self, x):
        """ Return f(x) given that temp holds Q x.
        """
        return 0.5 * np.dot(x, self.temp) + np.dot(x, self.q)

    def cost(self, x):
        """ Return 1/2 * x^T Q x + q^T x.
        """
        self.temp[:] = self.Q.op(x)
        return self._cost_from_temp(x)

    def gradient(self, x, out=None):
        """ Return Q x + q and f(x).
        """
        self.temp[:] = self.Q.op(x)
        fx = self._cost_from_temp(x)
        if out is None:
            out = np.empty_like(self.temp)
        np.add(self.temp, self.q, out=out)
        return out, fx

    def prox(self, x, gamma=1.0, out=None):
        """ Return y solving (Q + I / gamma) y = x / gamma - q, and f(y).

        gamma can be an array, the shift is then diag(1 / gamma).
        """
        gamma = check_step(gamma, x)
        np.subtract(x / gamma, self.q, out=self.temp)
        A = as_scipy_operator(Shift(self.Q, 1.0 / gamma),
                              dtype=self.temp.dtype)
        callback = None
        if self.verbose > 2:
            nb_iter = [0]

            def callback(xk):
                nb_iter[0] += 1
                res = np.linalg.norm(A.matvec(xk) - self.temp)
                print("CG iteration {0}, residual = {1:.3e}".format(
                    nb_iter[0], res))
        y, info = cg(A, self.temp, x0=np.array(x, dtype=self.temp.dtype),
                     rtol=self.tol, atol=0.0, maxiter=self.maxiter,
                     callback=callback)
        if info > 0 and self.verbose > 0:
            print("Conjugate gradient did not converge in {0} "
                  "iterations".format(info))
        if out is None:
            out = y
        else:
            np.copyto(out, y, casting='same_kind')
        return out, self.cost(out)

    def prox_naive(self, x, gamma=1.0):
        """ Reference implementation of prox: solve (gamma Q + I) y =
        x - gamma q.
        """
        if not is_scalar(gamma):
            raise ValueError("prox_naive only handles a scalar gamma")
        Q = as_scipy_operator(self.Q)
        n = len(self.q)
        A = LinearOperator((n, n), matvec=lambda v: gamma * Q.matvec(v) + v,
                           dtype=float)
        y, _ = cg(A, x - gamma * self.q, rtol=self.tol, atol=0.0,
                  maxiter=self.maxiter)
        fy = 0.5 * np.dot(y, Q.matvec(y)) + np.dot(y, self.q)
        return y, fy

    def is_convex(self):
        return True

    def is_smooth(self):
        return True

    def is_quadratic(self):
        return True

    def is_prox_accurate(self):
        return False

    def fun_name(self):
        return "quadratic function"

    def fun_dom(self):
        return "np.ndarray of float"

    def fun_expr(self):
        return "x -> (1/2)x^T Q x + q^T x"

    def fun_params(self):
        return "Q = {0} of shape {1}, q = np.ndarray of shape {2}".format(
            type(self.Q).__name__, self.Q.shape, self.q.shape)
