# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numbers
import numpy as np
from .kern import CombinationKernel, _is_valid_dim


class InputDimFilter(CombinationKernel):
    """
    Restricts a covariance function to a subset of the input dimensions.

    The kernel accepts input vectors of length input_dim and hands only the
    dimensions named by the filter, in the order given, to its single part:

    .. math::
        k(x, x') = k_c(x_{[f]}, x'_{[f]})

    The filter is either one index, a sequence of distinct indices, or a
    boolean mask of length input_dim. The number of selected dimensions must
    equal the input_dim of the part.
    """
    name = 'InputDimFilter'

    def __init__(self):
        super(InputDimFilter, self).__init__()
        self.active_dims = np.zeros(0, dtype=int)

    def init_filtered(self, input_dim, filter, child):
        if self._initialized:
            return self._reject("already initialized")
        if not _is_valid_dim(input_dim):
            return self._reject("input_dim must be a positive integer, got {!r}", input_dim)
        active_dims = self._parse_filter(filter, input_dim)
        if active_dims is None:
            return self._reject("invalid filter {!r} for input_dim={}", filter, input_dim)
        if not self._check_part(child, active_dims.size, "child"):
            return False
        self.active_dims = active_dims
        self._link_parts(input_dim, [child])
        return True

    @staticmethod
    def _parse_filter(filter, input_dim):
        if isinstance(filter, numbers.Integral) and not isinstance(filter, bool):
            dims = np.array([filter])
        else:
            dims = np.asarray(filter)
            if dims.ndim != 1 or dims.size == 0:
                return None
            if dims.dtype == bool:
                if dims.size != input_dim:
                    return None
                dims = np.flatnonzero(dims)
            elif not np.issubdtype(dims.dtype, np.integer):
                return None
        if np.any(dims < 0) or np.any(dims >= input_dim):
            return None
        if np.unique(dims).size != dims.size:
            return None
        return dims.astype(int)

    @property
    def child(self):
        return self.parts[0]

    def _get(self, x1, x2):
        return self.child._get(x1[self.active_dims], x2[self.active_dims])

    def _grad(self, x1, x2):
        return self.child._grad(x1[self.active_dims], x2[self.active_dims])

    def to_string(self):
        if self.active_dims.size == 1:
            dims = str(self.active_dims[0])
        else:
            dims = str(self.active_dims.tolist())
        return "{}({}/{})".format(self.name, dims, self.child.to_string())
