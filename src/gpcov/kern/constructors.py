# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

from .src.add import CovSum
from .src.prod import CovProd
from .src.input_dim_filter import InputDimFilter
from .src.stationary import CovSEiso, CovSEard, CovMatern3iso, CovMatern5iso, CovRQiso
from .src.static import CovNoise
from .src.linear import CovLinearARD, CovLinearOne
from .src.periodic import CovPeriodic


def _finish(kern, success, loghyper):
    if not success:
        raise ValueError("could not initialize {}, see the 'cov' logger for details".format(kern.name))
    if loghyper is not None:
        kern.set_loghyper(loghyper)
    return kern


def _atomic(cls, input_dim, loghyper):
    kern = cls()
    return _finish(kern, kern.init_atomic(input_dim), loghyper)


def se_iso(input_dim, loghyper=None):
    """
    Construct an isotropic squared exponential kernel

    :param input_dim: dimensionality of the kernel, obligatory
    :type input_dim: int
    :param loghyper: [log(lengthscale), log(sigma_f)], zeros by default
    :type loghyper: array-like

    """
    return _atomic(CovSEiso, input_dim, loghyper)


def se_ard(input_dim, loghyper=None):
    """
    Construct a squared exponential kernel with one lengthscale per dimension

    :param input_dim: dimensionality of the kernel, obligatory
    :type input_dim: int
    :param loghyper: [log(lengthscale_1), ..., log(lengthscale_D), log(sigma_f)]
    :type loghyper: array-like

    """
    return _atomic(CovSEard, input_dim, loghyper)


def matern3_iso(input_dim, loghyper=None):
    """
    Construct an isotropic Matern 3/2 kernel

    :param loghyper: [log(lengthscale), log(sigma_f)]
    """
    return _atomic(CovMatern3iso, input_dim, loghyper)


def matern5_iso(input_dim, loghyper=None):
    """
    Construct an isotropic Matern 5/2 kernel

    :param loghyper: [log(lengthscale), log(sigma_f)]
    """
    return _atomic(CovMatern5iso, input_dim, loghyper)


def rq_iso(input_dim, loghyper=None):
    """
    Construct an isotropic rational quadratic kernel

    :param loghyper: [log(lengthscale), log(sigma_f), log(alpha)]
    """
    return _atomic(CovRQiso, input_dim, loghyper)


def periodic(input_dim=1, loghyper=None):
    """
    Construct a periodic kernel on one-dimensional inputs

    :param loghyper: [log(lengthscale), log(period), log(sigma_f)]
    """
    return _atomic(CovPeriodic, input_dim, loghyper)


def noise(input_dim, loghyper=None):
    """
    Construct an independent noise kernel

    :param loghyper: [log(s)]
    """
    return _atomic(CovNoise, input_dim, loghyper)


def linear_ard(input_dim, loghyper=None):
    """
    Construct a linear kernel with one scale per dimension

    :param loghyper: [log(lengthscale_1), ..., log(lengthscale_D)]
    """
    return _atomic(CovLinearARD, input_dim, loghyper)


def linear_one(input_dim, loghyper=None):
    """
    Construct a linear kernel with bias and one shared scale

    :param loghyper: [log(t)]
    """
    return _atomic(CovLinearOne, input_dim, loghyper)


def cov_sum(first, second, loghyper=None):
    """
    Construct the sum of two kernels with the same input_dim. The kernels
    are copied into the sum.

    :param first: the first kernel
    :param second: the second kernel
    :param loghyper: hyperparameters of the sum, first's followed by second's
    """
    kern = CovSum()
    return _finish(kern, kern.init_compound(getattr(first, 'input_dim', None), first, second), loghyper)


def cov_prod(first, second, loghyper=None):
    """
    Construct the product of two kernels with the same input_dim. The
    kernels are copied into the product.

    :param first: the first kernel
    :param second: the second kernel
    :param loghyper: hyperparameters of the product, first's followed by second's
    """
    kern = CovProd()
    return _finish(kern, kern.init_compound(getattr(first, 'input_dim', None), first, second), loghyper)


def input_dim_filter(input_dim, filter, child, loghyper=None):
    """
    Construct a kernel on input_dim dimensions which applies child to the
    dimensions selected by filter. The child is copied.

    :param int input_dim: dimensionality of the kernel
    :param filter: an index, a list of indices, or a boolean mask
    :param child: kernel with input_dim equal to the number of selected dimensions
    :param loghyper: hyperparameters of the child
    """
    kern = InputDimFilter()
    return _finish(kern, kern.init_filtered(input_dim, filter, child), loghyper)
