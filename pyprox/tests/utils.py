# coding: utf-8
""" This module gathers usefull functions for testing.
"""
import itertools
import numpy as np
from ..utils import random_generator


class YieldData():
    def yield_vectors(self, complex_=False):
        """ Yield reproducible test vectors with their positive array steps.
        """
        random_state_s = [0, 1]
        shape_s = [(1,), (10,), (4, 5)]
        listparams = [random_state_s, shape_s]
        for params in itertools.product(*listparams):
            random_state, shape = params
            rng = random_generator(random_state)
            x = rng.randn(*shape)
            if complex_:
                x = x + 1j * rng.randn(*shape)
            gamma = rng.uniform(0.1, 2.0, size=shape)
            yield x, gamma

    def yield_weights(self, shape, random_state=0):
        """ Yield nonnegative weights matched with shape, scalars and arrays.
        """
        rng = random_generator(random_state)
        yield 0.0
        yield 2.5
        yield rng.uniform(0.0, 3.0, size=shape)
        w = rng.uniform(0.0, 3.0, size=shape)
        w.flat[0] = 0.0
        yield w

    def yield_spd_problems(self, random_state=0):
        """ Yield small symmetric positive-definite quadratic problems.
        """
        rng = random_generator(random_state)
        for n in [1, 5, 20]:
            A = rng.randn(n, n)
            Q = A.dot(A.T) + 0.1 * np.eye(n)
            q = rng.randn(n)
            x = rng.randn(n)
            yield Q, q, x
