# coding: utf-8
""" This module gathers the base class of the proximable functions.
"""


class ProximableFunction:
    """ Base class of the proximable functions.

    Sub-classes provide `cost`, `prox` and `prox_naive`, and `gradient` if
    smooth. The capability predicates default to the conservative answer and
    are overridden by each function.
    """

    def __call__(self, x):
        return self.cost(x)

    def cost(self, x):
        """ Return f(x).
        """
        raise NotImplementedError

    def gradient(self, x, out=None):
        """ Return the gradient of f at x and f(x).
        """
        raise NotImplementedError("{0} is not smooth, it has no "
                                  "gradient".format(self.fun_name()))

    def prox(self, x, gamma=1.0, out=None):
        """ Return the prox of gamma * f at x and f(prox).
        """
        raise NotImplementedError

    def prox_naive(self, x, gamma=1.0):
        """ Reference implementation of prox.
        """
        raise NotImplementedError

    # capabilities

    def is_convex(self):
        return False

    def is_smooth(self):
        return False

    def is_separable(self):
        return False

    def is_quadratic(self):
        return False

    def is_strongly_convex(self):
        return False

    def is_set(self):
        return False

    def is_cone(self):
        return False

    def is_prox_accurate(self):
        return True

    # description

    def fun_name(self):
        return "proximable function"

    def fun_dom(self):
        return "n/a"

    def fun_expr(self):
        return "n/a"

    def fun_params(self):
        return "n/a"

    def __repr__(self):
        return ("description : {0}\n"
                "domain      : {1}\n"
                "expression  : {2}\n"
                "parameters  : {3}".format(self.fun_name(), self.fun_dom(),
                                           self.fun_expr(),
                                           self.fun_params()))
