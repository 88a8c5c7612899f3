# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import logging
import numpy as np
from scipy import linalg
from scipy.linalg import lapack
from .config import config

logger = logging.getLogger("jitchol")


def jitchol(A, maxtries=None, factor=None, multiplier=None):
    """
    Lower Cholesky factor of the symmetric matrix A.

    If A is not numerically positive definite, jitter is added to its
    diagonal and the factorization retried. The first jitter is ``factor``
    times the mean of the diagonal of A and grows by ``multiplier`` on every
    failed attempt, for at most ``maxtries`` attempts. Defaults come from the
    ``[jitter]`` section of the configuration.

    :param A: symmetric matrix (N x N)
    :param int maxtries: number of jittered attempts
    :param float factor: initial jitter relative to the mean diagonal
    :param float multiplier: growth of the jitter between attempts
    :returns: L, lower triangular with L.dot(L.T) == A + jitter * I
    :raises LinAlgError: if A has a negative diagonal element, or is not
        positive definite even after the last attempt
    """
    if maxtries is None:
        maxtries = config.getint('jitter', 'maxtries')
    if factor is None:
        factor = config.getfloat('jitter', 'factor')
    if multiplier is None:
        multiplier = config.getfloat('jitter', 'multiplier')

    A = np.ascontiguousarray(A, dtype=np.float64)
    L, info = lapack.dpotrf(A, lower=1)
    if info == 0:
        return L

    diagA = np.diag(A)
    if np.any(diagA < 0.):
        raise linalg.LinAlgError("not pd: negative diagonal elements")
    jitter = diagA.mean() * factor
    if jitter <= 0.:
        # all-zero diagonal, fall back to an absolute jitter
        jitter = factor

    num_tries = 1
    while num_tries <= maxtries and np.isfinite(jitter):
        try:
            L = linalg.cholesky(A + np.eye(A.shape[0]) * jitter, lower=True)
        except linalg.LinAlgError:
            jitter *= multiplier
            num_tries += 1
        else:
            logger.warning('Added jitter of {:.10e}'.format(jitter))
            return L
    raise linalg.LinAlgError("not positive definite, even with jitter.")
