# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import logging
import numpy as np
from paramz import Model, Param

logger = logging.getLogger("gradient checker")


class LoghyperGradientChecker(Model):
    """
    This is a dummy model class for checking that the gradients of a given
    kernel with respect to its log-hyperparameters are implemented
    correctly. It enables checkgrad() to be called on a kernel.

    The objective is sum(dL_dK * K(X, X2)) for a fixed random weighting
    dL_dK, so that every entry of the kernel matrix contributes.

    :param kern: the (initialized) kernel to check
    :param X: inputs (N x input_dim)
    :param X2: (optional) second inputs (M x input_dim)
    :param dL_dK: (optional) weights of the kernel matrix entries (N x M)

    Examples:
    ---------
        from gpcov import kern
        k = kern.se_ard(3) + kern.noise(3)
        LoghyperGradientChecker(k, np.random.randn(10, 3)).checkgrad(verbose=1)
    """
    def __init__(self, kern, X, X2=None, dL_dK=None, name='loghyper_gradient_checker'):
        super(LoghyperGradientChecker, self).__init__(name)
        self.kern = kern
        self.X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        self.X2 = None if X2 is None else np.atleast_2d(np.asarray(X2, dtype=np.float64))
        if dL_dK is None:
            M = self.X.shape[0] if self.X2 is None else self.X2.shape[0]
            dL_dK = np.random.rand(self.X.shape[0], M)
        self.dL_dK = dL_dK
        self.loghyper = Param('loghyper', kern.get_loghyper())
        self.link_parameter(self.loghyper)

    def parameters_changed(self):
        self.kern.set_loghyper(np.array(self.loghyper, dtype=np.float64))
        self.loghyper.gradient = np.einsum('ij,ijk->k', self.dL_dK, self.kern.dK_dtheta(self.X, self.X2))

    def log_likelihood(self):
        return float(np.sum(self.dL_dK * self.kern.K(self.X, self.X2)))

    def objective_function(self):
        return -self.log_likelihood()

    def objective_function_gradients(self):
        return -self.gradient


def check_kernel_gradient(kern, X=None, X2=None, verbose=False):
    """
    This function runs on kernels to check the correctness of their
    gradients with respect to the log-hyperparameters, for K(X, X) and for
    K(X, X2). The hyperparameters of kern are left at the values they had
    on entry.

    :param kern: the kernel to be tested.
    :type kern: gpcov.kern.CovarianceFunction
    :param X: X input values to test the covariance function.
    :type X: ndarray
    :param X2: X2 input values to test the covariance function.
    :type X2: ndarray
    :returns: True if both checks pass
    """
    if kern.param_dim == 0:
        return True
    if X is None:
        X = np.random.randn(10, kern.input_dim)
    if X2 is None:
        X2 = np.random.randn(20, kern.input_dim)
    loghyper = kern.get_loghyper()
    try:
        for name, other in (("K(X, X)", None), ("K(X, X2)", X2)):
            if verbose:
                print("Checking gradients of {} wrt loghyper.".format(name))
            result = LoghyperGradientChecker(kern, X, other).checkgrad(verbose=verbose)
            if not result:
                logger.warning("Gradient of {} wrt loghyper failed for {} covariance function.".format(name, kern.to_string()))
                return False
    finally:
        kern.set_loghyper(loghyper)
    return True
