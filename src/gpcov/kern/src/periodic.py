# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)


import numpy as np
from .kern import Atomic


class CovPeriodic(Atomic):
    """
    Periodic kernel on one-dimensional inputs:

    .. math::

       k(x, x') = \\sigma_f^2 \\exp \\bigg( -\\frac{2 \\sin^2(\\pi |x - x'| / p)}{\\ell^2} \\bigg)

    where p is the period. Only input_dim == 1 is accepted.

    Log-hyperparameters: [log(\\ell), log(p), log(\\sigma_f)].
    """
    name = 'CovPeriodic'

    def _accepts_input_dim(self, input_dim):
        return input_dim == 1

    def _num_params(self, input_dim):
        return 3

    def parameters_changed(self):
        self.lengthscale2 = np.exp(2. * self._loghyper[0])
        self.period = np.exp(self._loghyper[1])
        self.variance = np.exp(2. * self._loghyper[2])

    def _get(self, x1, x2):
        r = np.abs(x1[0] - x2[0])
        return self.variance * np.exp(-2. * np.square(np.sin(np.pi * r / self.period)) / self.lengthscale2)

    def _grad(self, x1, x2):
        r = np.abs(x1[0] - x2[0])
        k = self._get(x1, x2)
        sin2 = np.square(np.sin(np.pi * r / self.period))
        return np.array([4. * k * sin2 / self.lengthscale2,
                         2. * np.pi * k * r * np.sin(2. * np.pi * r / self.period) / (self.period * self.lengthscale2),
                         2. * k])
