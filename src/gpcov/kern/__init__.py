"""

In terms of Gaussian Processes, a kernel is a function that specifies the degree of similarity between variables given their relative positions in input space. If known variables *x* and *x'* are close together then observed variables *y* and *y'* may also be similar, depending on the kernel function and its hyperparameters.

:py:class:`gpcov.kern.src.kern.CovarianceFunction` is the generic kernel object inherited by every kernel. It provides :py:meth:`~gpcov.kern.src.kern.CovarianceFunction.get` to compute the covariance of two inputs, :py:meth:`~gpcov.kern.src.kern.CovarianceFunction.grad` for its gradient with respect to the log-hyperparameters, and :py:meth:`~gpcov.kern.src.kern.CovarianceFunction.draw_random_sample` to draw from the corresponding Gaussian process. Kernels combine through :py:class:`CovSum`, :py:class:`CovProd` and :py:class:`InputDimFilter`.

The functions in :py:mod:`gpcov.kern.constructors` create initialized kernels.

"""

from .src.kern import CovarianceFunction, Atomic, CombinationKernel
from .src.add import CovSum
from .src.prod import CovProd
from .src.input_dim_filter import InputDimFilter
from .src.stationary import Stationary, CovSEiso, CovSEard, CovMatern3iso, CovMatern5iso, CovRQiso
from .src.static import CovNoise
from .src.linear import CovLinearARD, CovLinearOne
from .src.periodic import CovPeriodic

from .constructors import se_iso, se_ard, matern3_iso, matern5_iso, rq_iso, periodic, noise, linear_ard, linear_one
from .constructors import cov_sum, cov_prod, input_dim_filter
