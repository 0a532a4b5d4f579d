# coding: utf-8
""" This module gathers usefull functions shared by the proximable functions.
"""
import numbers
import numpy as np
from numpy.linalg import norm as norm_2


def is_scalar(a):
    """ Return True if a is a Python or numpy scalar (not an array).
    """
    return isinstance(a, numbers.Number) or np.ndim(a) == 0


def check_shape(a, x, name):
    """ Raise a ValueError if the array parameter a can not be matched
    elementwise with x. Scalars are always accepted.
    """
    if not is_scalar(a) and np.shape(a) != np.shape(x):
        raise ValueError("{0} should be a scalar or have the same shape as x "
                         "{1}, got {2}".format(name, np.shape(x),
                                               np.shape(a)))


def check_step(gamma, x):
    """ Check the step size gamma w.r.t. x and return it as a float or a
    float array.

    Parameters:
    -----------
    gamma : float or np.ndarray,
        positive step size, scalar or elementwise.

    x : np.ndarray,
        the point on which the prox is evaluated.

    Results:
    --------
    gamma : float or np.ndarray,
        the sanitized step size.
    """
    check_shape(gamma, x, "gamma")
    if np.iscomplexobj(gamma):
        raise ValueError("gamma should be real, got {0}".format(gamma))
    if is_scalar(gamma):
        gamma = float(gamma)
    else:
        gamma = np.asarray(gamma, dtype=float)
    if np.any(gamma <= 0):
        raise ValueError("gamma should be positive, got {0}".format(gamma))
    return gamma


def sq_norm(x, w=None):
    """ Return sum(w * |x|**2), (w=1 if None), real or complex x.
    """
    abs2_x = np.square(np.abs(x))
    if w is None:
        return float(np.sum(abs2_x))
    return float(np.sum(w * abs2_x))


def random_generator(random_state):
    """ Return a random instance with a fix seed if random_state is a int.
    """
    if isinstance(random_state, int):
        return np.random.RandomState(random_state)
    elif random_state is None:
        return np.random  # tweak to call directly the np.random module
    else:
        raise ValueError("random_state could only be seed-int or None, "
                         "got {0}".format(type(random_state)))


def spectral_radius_est(L, x_shape, nb_iter=30, tol=1.0e-6,
                        random_state=None, verbose=0):
    """ Estimation of the spectral radius of the symmetric operator L by
    power iterations.

    Parameters:
    -----------
    L : object with op method,
        the linear operator.

    x_shape : tuple,
        shape of the input of L.

    nb_iter : int (default=30),
        maximum number of power iterations.

    tol : float (default=1.0e-6),
        tolerance on the variation of the estimated norm.

    random_state : int or None (default=None),
        seed of the initial random vector.

    verbose : int (default=0),
        verbosity level.

    Results:
    --------
    rho : float,
        the estimated spectral radius.
    """
    rng = random_generator(random_state)
    x_old = rng.randn(*x_shape)
    x_old /= norm_2(x_old)

    stopped = False
    rho_old = 0.0
    for i in range(nb_iter):
        x_new = L.op(x_old)
        rho = norm_2(x_new)
        if rho == 0.0:  # L vanishes on x_old
            stopped = True
            break
        x_old = x_new / rho
        if np.abs(rho - rho_old) < tol:
            stopped = True
            break
        rho_old = rho
    if not stopped and verbose > 0:
        print("Spectral radius estimation did not converge")

    return float(rho)
