# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

from . import util
from . import kern

# Direct imports for convenience:
from .kern import CovarianceFunction
from .util.linalg import jitchol

from .__version__ import __version__
