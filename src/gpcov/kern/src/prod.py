# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from .kern import BinaryCombination


class CovProd(BinaryCombination):
    """
    Product of two covariance functions on the same input space.

    .. math::
        k(x, x') = k_1(x, x') k_2(x, x')

    By the product rule, the gradient with respect to the parameters of one
    part is that part's gradient scaled by the covariance of the other.
    """
    name = 'CovProd'

    def _get(self, x1, x2):
        return self.first._get(x1, x2) * self.second._get(x1, x2)

    def _grad(self, x1, x2):
        k1 = self.first._get(x1, x2)
        k2 = self.second._get(x1, x2)
        return np.hstack((self.first._grad(x1, x2) * k2, self.second._grad(x1, x2) * k1))
