# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)


import numpy as np
from .kern import Atomic


class CovNoise(Atomic):
    """
    Independent noise (white) kernel:

    .. math::

       k(x, x') = s^2 \\delta(x, x')

    where the delta is one when the two input vectors are equal element by
    element. Log-hyperparameters: [log(s)].
    """
    name = 'CovNoise'

    def _num_params(self, input_dim):
        return 1

    def parameters_changed(self):
        self.variance = np.exp(2. * self._loghyper[0])

    def _get(self, x1, x2):
        if np.array_equal(x1, x2):
            return self.variance
        return 0.

    def _grad(self, x1, x2):
        return np.array([2. * self._get(x1, x2)])
