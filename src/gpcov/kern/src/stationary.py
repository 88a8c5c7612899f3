# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)


import numpy as np
from .kern import Atomic


class Stationary(Atomic):
    """
    Stationary kernels (covariance functions).

    Stationary covariance functions depend only on r, where r is defined as

    .. math::
        r(x, x') = \\sqrt{ \\sum_{q=1}^Q \\frac{(x_q - x'_q)^2}{\\ell_q^2} }

    By default there is only one lengthscale \\ell; separate lengthscales for
    each dimension are used by the ARD variants.

    The log-hyperparameters are

        [log(\\ell) (1 or input_dim of them), log(\\sigma_f), extra...]

    and the covariance function is written k(r) = \\sigma_f^2 f(r). To
    implement a stationary covariance function using this class, one need
    only define the covariance function k(r) and its derivative:

    ```
    def K_of_r(self, r):
        return foo
    def dK_dr(self, r):
        return bar
    ```

    Kernels with parameters beyond lengthscale and signal variance also set
    ``num_extra`` and implement ``_extra_grads``.
    """
    ARD = False
    num_extra = 0

    def _num_params(self, input_dim):
        return self._num_lengthscales(input_dim) + 1 + self.num_extra

    def _num_lengthscales(self, input_dim):
        return input_dim if self.ARD else 1

    def parameters_changed(self):
        n = self._num_lengthscales(self.input_dim)
        self.lengthscale = np.exp(self._loghyper[:n])
        self.variance = np.exp(2. * self._loghyper[n])

    def K_of_r(self, r):
        raise NotImplementedError("implement the covariance function as a fn of r to use this class")

    def dK_dr(self, r):
        raise NotImplementedError("implement derivative of the covariance function wrt r to use this class")

    def _extra_grads(self, r):
        return np.zeros(0)

    def _scaled_dist(self, x1, x2):
        return np.sqrt(np.sum(np.square((x1 - x2) / self.lengthscale)))

    def _get(self, x1, x2):
        return self.K_of_r(self._scaled_dist(x1, x2))

    def _grad(self, x1, x2):
        n = self.lengthscale.size
        r = self._scaled_dist(x1, x2)
        dK_dr = self.dK_dr(r)
        grad = np.empty(self.param_dim)
        if self.ARD:
            # dr/dlog(l_q) = -((x_q - x'_q)/l_q)^2 / r, and all terms vanish at r == 0
            invdist = 1. / r if r > 0. else 0.
            grad[:n] = -dK_dr * invdist * np.square((x1 - x2) / self.lengthscale)
        else:
            grad[0] = -dK_dr * r
        grad[n] = 2. * self.K_of_r(r)
        grad[n + 1:] = self._extra_grads(r)
        return grad


class CovSEiso(Stationary):
    """
    Isotropic squared exponential (RBF) kernel:

    .. math::

       k(r) = \\sigma_f^2 \\exp \\bigg(- \\frac{1}{2} r^2 \\bigg)

    Log-hyperparameters: [log(\\ell), log(\\sigma_f)].
    """
    name = 'CovSEiso'

    def K_of_r(self, r):
        return self.variance * np.exp(-0.5 * r**2)

    def dK_dr(self, r):
        return -r * self.K_of_r(r)


class CovSEard(CovSEiso):
    """
    Squared exponential kernel with automatic relevance determination, one
    lengthscale per input dimension.

    Log-hyperparameters: [log(\\ell_1), ..., log(\\ell_D), log(\\sigma_f)].
    """
    name = 'CovSEard'
    ARD = True


class CovMatern3iso(Stationary):
    """
    Isotropic Matern 3/2 kernel:

    .. math::

       k(r) = \\sigma_f^2 (1 + \\sqrt{3} r) \\exp(- \\sqrt{3} r)

    Log-hyperparameters: [log(\\ell), log(\\sigma_f)].
    """
    name = 'CovMatern3iso'

    def K_of_r(self, r):
        return self.variance * (1. + np.sqrt(3.) * r) * np.exp(-np.sqrt(3.) * r)

    def dK_dr(self, r):
        return -3. * self.variance * r * np.exp(-np.sqrt(3.) * r)


class CovMatern5iso(Stationary):
    """
    Isotropic Matern 5/2 kernel:

    .. math::

       k(r) = \\sigma_f^2 (1 + \\sqrt{5} r + \\frac{5}{3}r^2) \\exp(- \\sqrt{5} r)

    Log-hyperparameters: [log(\\ell), log(\\sigma_f)].
    """
    name = 'CovMatern5iso'

    def K_of_r(self, r):
        return self.variance * (1 + np.sqrt(5.) * r + 5. / 3 * r**2) * np.exp(-np.sqrt(5.) * r)

    def dK_dr(self, r):
        return self.variance * (10. / 3 * r - 5. * r - 5. * np.sqrt(5.) / 3 * r**2) * np.exp(-np.sqrt(5.) * r)


class CovRQiso(Stationary):
    """
    Isotropic rational quadratic kernel:

    .. math::

       k(r) = \\sigma_f^2 \\bigg( 1 + \\frac{r^2}{2 \\alpha} \\bigg)^{- \\alpha}

    Log-hyperparameters: [log(\\ell), log(\\sigma_f), log(\\alpha)].
    """
    name = 'CovRQiso'
    num_extra = 1

    def parameters_changed(self):
        super(CovRQiso, self).parameters_changed()
        self.power = np.exp(self._loghyper[2])

    def K_of_r(self, r):
        return self.variance * np.power(1. + r**2 / (2. * self.power), -self.power)

    def dK_dr(self, r):
        return -self.variance * r * np.power(1. + r**2 / (2. * self.power), -self.power - 1.)

    def _extra_grads(self, r):
        base = 1. + r**2 / (2. * self.power)
        return np.array([self.K_of_r(r) * (r**2 / (2. * base) - self.power * np.log(base))])
