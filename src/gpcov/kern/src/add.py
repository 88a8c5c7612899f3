# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from .kern import BinaryCombination


class CovSum(BinaryCombination):
    """
    Sum of two covariance functions on the same input space.

    .. math::
        k(x, x') = k_1(x, x') + k_2(x, x')

    The log-hyperparameters are those of the first part followed by those of
    the second part, and gradients are propagated through unchanged.
    """
    name = 'CovSum'

    def _get(self, x1, x2):
        return self.first._get(x1, x2) + self.second._get(x1, x2)

    def _grad(self, x1, x2):
        return np.hstack((self.first._grad(x1, x2), self.second._grad(x1, x2)))
