# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import unittest
import numpy as np
from scipy import linalg
from gpcov.util.linalg import jitchol


class LinalgTests(unittest.TestCase):
    def setUp(self):
        np.random.seed(10)
        # Create PD matrix
        A = np.random.randn(20, 100)
        self.A = A.dot(A.T)
        # compute Eigdecomp
        vals, vectors = np.linalg.eigh(self.A)
        # Set smallest eigenval to be negative with 5 rounds worth of jitter
        vals[vals.argmin()] = 0
        default_jitter = 1e-6 * np.mean(vals)
        vals[vals.argmin()] = -default_jitter * (10**3.5)
        self.A_corrupt = (vectors * vals).dot(vectors.T)

    def test_jitchol_pd(self):
        L = jitchol(self.A)
        np.testing.assert_array_equal(L, np.tril(L))
        np.testing.assert_allclose(L.dot(L.T), self.A, atol=1e-8)

    def test_jitchol_success(self):
        """
        Expect 5 rounds of jitter to be added and for the recovered matrix to be
        identical to the corrupted matrix apart from the jitter added to the diagonal
        """
        with self.assertLogs('jitchol', level='WARNING'):
            L = jitchol(self.A_corrupt, maxtries=5)
        A_new = L.dot(L.T)
        diff = A_new - self.A_corrupt
        np.testing.assert_allclose(diff, np.eye(A_new.shape[0]) * np.diag(diff).mean(), atol=1e-8)

    def test_jitchol_failure(self):
        """
        Expecting an exception to be thrown as we expect it to require
        5 rounds of jitter to be added to enforce PDness
        """
        self.assertRaises(linalg.LinAlgError, jitchol, self.A_corrupt, maxtries=4)

    def test_jitchol_arguments_override_config(self):
        # a single, large enough jitter
        L = jitchol(self.A_corrupt, maxtries=1, factor=1e-1)
        self.assertTrue(np.all(np.isfinite(L)))
        self.assertRaises(linalg.LinAlgError, jitchol, self.A_corrupt, maxtries=2, factor=1e-8, multiplier=2.)

    def test_negative_diagonal(self):
        A = np.eye(3)
        A[1, 1] = -1.
        self.assertRaises(linalg.LinAlgError, jitchol, A)

    def test_zero_matrix(self):
        L = jitchol(np.zeros((3, 3)))
        np.testing.assert_allclose(L.dot(L.T), 1e-6 * np.eye(3))


if __name__ == "__main__":
    unittest.main()
