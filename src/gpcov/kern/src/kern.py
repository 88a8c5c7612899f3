# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)
import copy
import logging
import numbers
import numpy as np
from ...util.linalg import jitchol

logger = logging.getLogger("cov")


def _is_valid_dim(input_dim):
    return (isinstance(input_dim, numbers.Integral)
            and not isinstance(input_dim, bool)
            and input_dim > 0)


class CovarianceFunction(object):
    """
    The base class for a covariance function (kernel): a symmetric, positive
    semi-definite function of two input vectors.

    A covariance function is created uninitialized and initialized exactly
    once, through the one of the three initialization modes its variant
    implements:

        init_atomic(input_dim)
        init_compound(input_dim, first, second)
        init_filtered(input_dim, filter, child)

    The other two modes return False. All of them return False instead of
    raising when the arguments are not acceptable, in which case the kernel
    stays uninitialized and must not be evaluated.

    The hyperparameters are held in log space, in a vector of length
    param_dim. They may only be replaced through :py:meth:`set_loghyper`,
    which raises the ``loghyper_changed`` flag. The flag is never cleared
    by the kernel: a model caching e.g. a factorization of the kernel matrix
    resets it after recomputing.

    Do not instantiate.
    """
    name = 'CovarianceFunction'

    def __init__(self):
        self._input_dim = 0
        self._param_dim = 0
        self._loghyper = np.zeros(0)
        self._initialized = False
        self._owner = None
        self.loghyper_changed = False

    @property
    def input_dim(self):
        """Dimensionality of the input vectors."""
        return self._input_dim

    @property
    def param_dim(self):
        """Number of log-hyperparameters."""
        return self._param_dim

    @property
    def loghyper(self):
        """A copy of the log-hyperparameters, see :py:meth:`set_loghyper`."""
        return self._loghyper.copy()

    @property
    def initialized(self):
        return self._initialized

    #===========================================================================
    # Initialization modes
    #===========================================================================
    def init_atomic(self, input_dim):
        """
        Initialization of atomic covariance functions.

        :param int input_dim: dimensionality of the input vectors
        :returns: True on success
        """
        return False

    def init_compound(self, input_dim, first, second):
        """
        Initialization of binary compound covariance functions.

        :param int input_dim: dimensionality of the input vectors
        :param first: first covariance function of the compound
        :param second: second covariance function of the compound
        :returns: True on success
        """
        return False

    def init_filtered(self, input_dim, filter, child):
        """
        Initialization of filtered compound covariance functions.

        :param int input_dim: dimensionality of the input vectors
        :param filter: index, or indices, of the dimensions handed to child
        :param child: covariance function applied to the selected dimensions
        :returns: True on success
        """
        return False

    def _reject(self, reason, *args):
        logger.debug("{}: initialization failed, ".format(self.name) + reason.format(*args))
        return False

    def _init_params(self, input_dim, param_dim, loghyper=None):
        self._input_dim = int(input_dim)
        self._param_dim = int(param_dim)
        self._initialized = True
        if loghyper is None:
            loghyper = np.zeros(self._param_dim)
        self.set_loghyper(loghyper)

    def _check_initialized(self):
        if not self._initialized:
            raise RuntimeError("{} has not been initialized".format(self.name))

    def _check_input_dim(self, X):
        assert X.ndim == 2 and X.shape[1] == self.input_dim, "X has wrong shape: X.shape={!s}, whereas input_dim={}".format(X.shape, self.input_dim)

    #===========================================================================
    # Hyperparameters
    #===========================================================================
    def set_loghyper(self, p):
        """
        Replace the log-hyperparameters.

        If this kernel is a part of a compound, the compound (and every
        compound above it) takes up the new values and raises its
        ``loghyper_changed`` flag as well.

        :param p: new parameter vector of length param_dim
        :raises ValueError: if p does not have exactly param_dim entries
        """
        self._check_initialized()
        p = np.array(p, dtype=np.float64)
        if p.ndim != 1 or p.size != self._param_dim:
            raise ValueError("{} expects {} log-hyperparameters, got an array of shape {!s}".format(self.name, self._param_dim, p.shape))
        self._update_loghyper(p)
        if self._owner is not None:
            self._owner._part_changed()

    def _update_loghyper(self, p):
        self._loghyper = p
        self.loghyper_changed = True
        self.parameters_changed()

    def parameters_changed(self):
        """
        Called after every :py:meth:`set_loghyper`. Overwrite this to update
        whatever depends on the hyperparameters.
        """
        pass

    def get_loghyper(self):
        return self._loghyper.copy()

    def get_param_dim(self):
        return self._param_dim

    def get_input_dim(self):
        return self._input_dim

    #===========================================================================
    # Covariance and gradient
    #===========================================================================
    def get(self, x1, x2):
        """
        Covariance of two input vectors.

        :param x1: first input vector (input_dim,)
        :param x2: second input vector (input_dim,)
        :rtype: float
        """
        self._check_initialized()
        return self._get(np.asarray(x1, dtype=np.float64), np.asarray(x2, dtype=np.float64))

    def grad(self, x1, x2):
        """
        Gradient of the covariance of two input vectors with respect to the
        log-hyperparameters, in the order of :py:attr:`loghyper`.

        :param x1: first input vector (input_dim,)
        :param x2: second input vector (input_dim,)
        :rtype: np.ndarray (param_dim,)
        """
        self._check_initialized()
        return self._grad(np.asarray(x1, dtype=np.float64), np.asarray(x2, dtype=np.float64))

    def _get(self, x1, x2):
        raise NotImplementedError

    def _grad(self, x1, x2):
        raise NotImplementedError

    def K(self, X, X2=None):
        """
        Compute the kernel matrix.

        .. math::
            K_{ij} = k(X_i, X2_j)

        :param X: the first set of inputs (N x input_dim)
        :param X2: (optional) the second set of inputs (M x input_dim). If X2
                   is None, X2 == X and only one triangle is evaluated.
        """
        self._check_initialized()
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        self._check_input_dim(X)
        if X2 is None:
            n = X.shape[0]
            target = np.empty((n, n))
            for i in range(n):
                for j in range(i, n):
                    target[i, j] = target[j, i] = self._get(X[i], X[j])
            return target
        X2 = np.atleast_2d(np.asarray(X2, dtype=np.float64))
        self._check_input_dim(X2)
        target = np.empty((X.shape[0], X2.shape[0]))
        for i in range(X.shape[0]):
            for j in range(X2.shape[0]):
                target[i, j] = self._get(X[i], X2[j])
        return target

    def Kdiag(self, X):
        """The diagonal of the kernel matrix K(X, X)."""
        self._check_initialized()
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        self._check_input_dim(X)
        return np.array([self._get(x, x) for x in X], dtype=np.float64)

    def dK_dtheta(self, X, X2=None):
        """
        Gradient of the kernel matrix with respect to the log-hyperparameters.

        :returns: np.ndarray (N x M x param_dim), M = N if X2 is None
        """
        self._check_initialized()
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        self._check_input_dim(X)
        if X2 is None:
            n = X.shape[0]
            target = np.empty((n, n, self._param_dim))
            for i in range(n):
                for j in range(i, n):
                    target[i, j] = target[j, i] = self._grad(X[i], X[j])
            return target
        X2 = np.atleast_2d(np.asarray(X2, dtype=np.float64))
        self._check_input_dim(X2)
        target = np.empty((X.shape[0], X2.shape[0], self._param_dim))
        for i in range(X.shape[0]):
            for j in range(X2.shape[0]):
                target[i, j] = self._grad(X[i], X2[j])
        return target

    #===========================================================================
    # Sampling
    #===========================================================================
    def draw_random_sample(self, X, rng=None):
        """
        Draw function values at the inputs X from a zero mean Gaussian
        process with this covariance function.

        The kernel matrix of X is factorized by :py:func:`~gpcov.util.linalg.jitchol`,
        which adds jitter to the diagonal if the matrix is not numerically
        positive definite.

        :param X: inputs (N x input_dim)
        :param rng: a numpy.random.Generator, a seed, or None for a fresh
                    unseeded generator
        :rtype: np.ndarray (N,)
        :raises LinAlgError: if the kernel matrix cannot be factorized
        """
        self._check_initialized()
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        self._check_input_dim(X)
        rng = np.random.default_rng(rng)
        if X.shape[0] == 0:
            return np.zeros(0)
        L = jitchol(self.K(X))
        z = rng.standard_normal(X.shape[0])
        return L.dot(z)

    #===========================================================================
    # Description and composition
    #===========================================================================
    def to_string(self):
        """
        Human readable description of this covariance function, for
        diagnostics only.
        """
        return self.name

    def __str__(self):
        return self.to_string()

    def copy(self):
        """A deep copy, detached from any compound owning this kernel."""
        owner, self._owner = self._owner, None
        try:
            return copy.deepcopy(self)
        finally:
            self._owner = owner

    def __add__(self, other):
        """ Overloading of the '+' operator. for more control, see self.add """
        return self.add(other)

    def add(self, other):
        """
        Add another kernel to this one. Both kernels are copied into the new
        :py:class:`~gpcov.kern.CovSum`.

        :param other: the other kernel to be added
        :type other: CovarianceFunction
        """
        assert isinstance(other, CovarianceFunction), "only kernels can be added to kernels..."
        from ..constructors import cov_sum
        return cov_sum(self, other)

    def __mul__(self, other):
        """ Here we overload the '*' operator. See self.prod for more information"""
        return self.prod(other)

    def prod(self, other):
        """
        Multiply two kernels defined on the same input space. Both kernels
        are copied into the new :py:class:`~gpcov.kern.CovProd`.

        :param other: the other kernel to be multiplied
        :type other: CovarianceFunction
        """
        assert isinstance(other, CovarianceFunction), "only kernels can be multiplied to kernels..."
        from ..constructors import cov_prod
        return cov_prod(self, other)


class Atomic(CovarianceFunction):
    """
    Base class for leaf covariance functions. Subclasses give the number of
    hyperparameters for an input dimensionality, and may restrict the
    dimensionalities they accept.
    """
    def init_atomic(self, input_dim):
        if self._initialized:
            return self._reject("already initialized")
        if not _is_valid_dim(input_dim):
            return self._reject("input_dim must be a positive integer, got {!r}", input_dim)
        if not self._accepts_input_dim(int(input_dim)):
            return self._reject("input_dim={} not supported", input_dim)
        self._init_params(input_dim, self._num_params(int(input_dim)))
        return True

    def _accepts_input_dim(self, input_dim):
        return True

    def _num_params(self, input_dim):
        raise NotImplementedError


class CombinationKernel(CovarianceFunction):
    """
    Abstract super class for compound covariance functions, which own a
    list of covariance functions (their parts) and delegate to them.

    The parts are copies of the kernels handed in at initialization, so a
    part belongs to exactly one compound and compositions always form a
    tree. The log-hyperparameters of a compound are the concatenation of
    those of its parts. Setting the log-hyperparameters of a part directly
    is reported to every compound above it, which re-reads its vector and
    raises its own ``loghyper_changed`` flag.
    """
    def __init__(self):
        super(CombinationKernel, self).__init__()
        self.parts = []
        self._param_slices = []

    def _link_parts(self, input_dim, parts):
        self.parts = [p.copy() for p in parts]
        for p in self.parts:
            p._owner = self
        self._param_slices = []
        start = 0
        for p in self.parts:
            self._param_slices.append(slice(start, start + p.param_dim))
            start += p.param_dim
        self._init_params(input_dim, start, np.hstack([np.zeros(0)] + [p.get_loghyper() for p in self.parts]))

    def _check_part(self, part, input_dim, which):
        if not isinstance(part, CovarianceFunction):
            return self._reject("{} is not a covariance function", which)
        if not part.initialized:
            return self._reject("{} is not initialized", which)
        if part.input_dim != input_dim:
            return self._reject("{} has input_dim={}, expected {}", which, part.input_dim, input_dim)
        return True

    def parameters_changed(self):
        for p, s in zip(self.parts, self._param_slices):
            p._update_loghyper(self._loghyper[s].copy())

    def _part_changed(self):
        # a part was set directly, re-read the parts and tell our own owner
        self._loghyper = np.hstack([np.zeros(0)] + [p._loghyper for p in self.parts])
        self.loghyper_changed = True
        if self._owner is not None:
            self._owner._part_changed()


class BinaryCombination(CombinationKernel):
    """Base for the sum and product of two covariance functions."""
    def init_compound(self, input_dim, first, second):
        if self._initialized:
            return self._reject("already initialized")
        if not _is_valid_dim(input_dim):
            return self._reject("input_dim must be a positive integer, got {!r}", input_dim)
        if not (self._check_part(first, input_dim, "first") and self._check_part(second, input_dim, "second")):
            return False
        self._link_parts(input_dim, [first, second])
        return True

    @property
    def first(self):
        return self.parts[0]

    @property
    def second(self):
        return self.parts[1]

    def to_string(self):
        return "{}({}, {})".format(self.name, self.first.to_string(), self.second.to_string())
