# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import unittest
import numpy as np
from gpcov.util.config import config
from gpcov.util.linalg import jitchol


class ConfigTests(unittest.TestCase):
    def test_jitter_section(self):
        self.assertTrue(config.has_section('jitter'))
        self.assertGreater(config.getfloat('jitter', 'factor'), 0.)
        self.assertGreater(config.getfloat('jitter', 'multiplier'), 1.)
        self.assertGreaterEqual(config.getint('jitter', 'maxtries'), 1)

    def test_jitchol_reads_config(self):
        old = config.get('jitter', 'maxtries')
        try:
            config.set('jitter', 'maxtries', '0')
            self.assertRaises(np.linalg.LinAlgError, jitchol, np.zeros((2, 2)))
        finally:
            config.set('jitter', 'maxtries', old)
        jitchol(np.zeros((2, 2)))


if __name__ == "__main__":
    unittest.main()
