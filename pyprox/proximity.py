# coding: utf-8
""" This module gathers the proximable functions with a closed-form prox.
"""
import numpy as np
from .base import ProximableFunction
from .utils import is_scalar, check_shape, check_step, sq_norm


class SqrNormL2(ProximableFunction):
    """ Squared Euclidean norm (weighted).

    With a nonnegative scalar lambda_:
        f(x) = lambda_ / 2 * || x ||_2^2
    with a nonnegative array lambda_:
        f(x) = 1/2 * sum_i lambda_i * |x_i|^2
    """
    def __init__(self, lambda_=1.0):
        """ SqrNormL2 class.

        Parameters:
        -----------
        lambda_ : float or np.ndarray (default=1.0),
            nonnegative weight(s), an array is matched elementwise with x.
        """
        if np.iscomplexobj(lambda_):
            raise ValueError("lambda should be real, got "
                             "{0}".format(lambda_))
        if np.any(np.asarray(lambda_) < 0):
            raise ValueError("coefficients in lambda must be nonnegative, "
                             "got {0}".format(lambda_))
        if is_scalar(lambda_):
            self.lambda_ = float(lambda_)
        else:
            self.lambda_ = np.array(lambda_, dtype=float)

    @property
    def lipschitz_constant(self):
        """ Lipschitz constant of the gradient.
        """
        return float(np.max(self.lambda_))

    def _weights(self, x):
        """ Return (scale, w) such that f(x) = scale * sq_norm(x, w).
        """
        if is_scalar(self.lambda_):
            return 0.5 * self.lambda_, None
        check_shape(self.lambda_, x, "lambda")
        return 0.5, self.lambda_

    def cost(self, x):
        """ Return f(x).
        """
        scale, w = self._weights(x)
        return scale * sq_norm(x, w)

    def gradient(self, x, out=None):
        """ Return lambda * x and f(x).
        """
        scale, w = self._weights(x)
        fx = scale * sq_norm(x, w)
        out = np.multiply(self.lambda_, x, out=out)
        return out, fx

    def prox(self, x, gamma=1.0, out=None):
        """ Return x / (1 + gamma * lambda) and f at this point.
        """
        scale, w = self._weights(x)
        gamma = check_step(gamma, x)
        out = np.divide(x, 1.0 + gamma * self.lambda_, out=out)
        return out, scale * sq_norm(out, w)

    def prox_naive(self, x, gamma=1.0):
        """ Reference implementation of prox.
        """
        y = x / (1.0 + self.lambda_ * np.asarray(gamma))
        return y, 0.5 * np.real(np.vdot(self.lambda_ * y, y))

    def is_convex(self):
        return True

    def is_smooth(self):
        return True

    def is_separable(self):
        return True

    def is_quadratic(self):
        return True

    def is_strongly_convex(self):
        return bool(np.all(self.lambda_ > 0))

    def fun_name(self):
        return "weighted squared Euclidean norm"

    def fun_dom(self):
        return "np.ndarray of float, np.ndarray of complex"

    def fun_expr(self):
        if is_scalar(self.lambda_):
            return "x -> (lambda/2)||x||^2"
        return "x -> (1/2)sum( lambda_i (x_i)^2 )"

    def fun_params(self):
        if is_scalar(self.lambda_):
            return "lambda = {0}".format(self.lambda_)
        return "lambda = np.ndarray of shape {0}".format(self.lambda_.shape)


class IndBox(ProximableFunction):
    """ Indicator of a box.

    f(x) = 0 if all(lb <= x <= ub), +inf otherwise.

    lb and ub can be scalars or arrays, they may take the values -inf and
    +inf to indicate unbounded coordinates.
    """
    def __init__(self, lb, ub):
        """ IndBox class.

        Parameters:
        -----------
        lb : float or np.ndarray,
            lower bound(s).

        ub : float or np.ndarray,
            upper bound(s), should satisfy lb <= ub.
        """
        self.lb = self._sanitize_bound(lb, "lb")
        self.ub = self._sanitize_bound(ub, "ub")
        if not is_scalar(self.lb) and not is_scalar(self.ub) and \
                self.lb.shape != self.ub.shape:
            raise ValueError("bounds must have the same dimensions, or at "
                             "least one of them be scalar, got {0} and "
                             "{1}".format(self.lb.shape, self.ub.shape))
        if np.any(self.lb > self.ub):
            raise ValueError("lb and ub must satisfy lb <= ub")

    @staticmethod
    def _sanitize_bound(bound, name):
        """ Return bound as a float or a float array.
        """
        arr = np.asarray(bound)
        if np.iscomplexobj(arr) or not np.issubdtype(arr.dtype, np.number):
            raise ValueError("{0} must be real, got {1}".format(name, bound))
        if arr.ndim == 0:
            return float(arr)
        return arr.astype(float)

    def _check_bounds(self, x):
        check_shape(self.lb, x, "lb")
        check_shape(self.ub, x, "ub")

    def cost(self, x):
        """ Return 0 if x is in the box, +inf otherwise.
        """
        self._check_bounds(x)
        if np.any(x < self.lb) or np.any(x > self.ub):
            return np.inf
        return 0.0

    def prox(self, x, gamma=1.0, out=None):
        """ Return the projection of x onto the box, gamma is ignored.
        """
        self._check_bounds(x)
        out = np.clip(x, self.lb, self.ub, out=out)
        return out, 0.0

    def prox_naive(self, x, gamma=1.0):
        """ Reference implementation of prox.
        """
        y = np.minimum(self.ub, np.maximum(self.lb, x))
        return y, 0.0

    def is_convex(self):
        return True

    def is_separable(self):
        return True

    def is_set(self):
        return True

    def is_cone(self):
        return bool(np.all((self.lb == -np.inf) | (self.ub == np.inf)))

    def fun_name(self):
        return "indicator of a box"

    def fun_dom(self):
        return "np.ndarray of float"

    def fun_expr(self):
        return "x -> 0 if all(lb <= x <= ub), +inf otherwise"

    def fun_params(self):
        def _describe(bound):
            if is_scalar(bound):
                return str(bound)
            return "np.ndarray of shape {0}".format(bound.shape)
        return "lb = {0}, ub = {1}".format(_describe(self.lb),
                                           _describe(self.ub))


def IndBallLinf(r=1.0):
    """ Indicator of a L-inf norm ball.

    f(x) = 0 if max(|x_i|) <= r, +inf otherwise.

    Parameters:
    -----------
    r : float (default=1.0),
        positive radius of the ball.

    Results:
    --------
    f : IndBox,
        the box [-r, r].
    """
    if np.iscomplexobj(r) or np.any(np.asarray(r) <= 0):
        raise ValueError("r should be positive, got {0}".format(r))
    return IndBox(-np.asarray(r), r)
