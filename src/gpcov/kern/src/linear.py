# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)


import numpy as np
from .kern import Atomic


class CovLinearARD(Atomic):
    """
    Linear kernel with one scale per input dimension:

    .. math::

       k(x, x') = \\sum_{q=1}^Q \\frac{x_q x'_q}{\\ell_q^2}

    Log-hyperparameters: [log(\\ell_1), ..., log(\\ell_Q)].
    """
    name = 'CovLinearARD'

    def _num_params(self, input_dim):
        return input_dim

    def parameters_changed(self):
        self.inv_lengthscale2 = np.exp(-2. * self._loghyper)

    def _get(self, x1, x2):
        return float(np.sum(x1 * x2 * self.inv_lengthscale2))

    def _grad(self, x1, x2):
        return -2. * x1 * x2 * self.inv_lengthscale2


class CovLinearOne(Atomic):
    """
    Linear kernel with a bias and one shared scale:

    .. math::

       k(x, x') = \\frac{1 + x^\\top x'}{t^2}

    Log-hyperparameters: [log(t)].
    """
    name = 'CovLinearOne'

    def _num_params(self, input_dim):
        return 1

    def parameters_changed(self):
        self.inv_t2 = np.exp(-2. * self._loghyper[0])

    def _get(self, x1, x2):
        return self.inv_t2 * (1. + float(np.dot(x1, x2)))

    def _grad(self, x1, x2):
        return np.array([-2. * self._get(x1, x2)])
