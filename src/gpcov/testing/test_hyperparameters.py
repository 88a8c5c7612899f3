# Copyright (c) 2026, gpcov authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import unittest
import numpy as np
import gpcov
from gpcov.kern import CovSEard


class LoghyperTests(unittest.TestCase):
    def setUp(self):
        np.random.seed(6)
        self.k = gpcov.kern.se_ard(3)

    def test_wrong_length(self):
        self.assertRaises(ValueError, self.k.set_loghyper, np.zeros(3))
        self.assertRaises(ValueError, self.k.set_loghyper, np.zeros(5))
        self.assertRaises(ValueError, self.k.set_loghyper, np.zeros((1, 4)))
        self.assertRaises(ValueError, self.k.set_loghyper, 0.)
        self.assertRaises(ValueError, gpcov.kern.se_iso, 2, [1.])
        np.testing.assert_array_equal(self.k.get_loghyper(), np.zeros(4))

    def test_round_trip(self):
        p = np.random.randn(4)
        self.k.set_loghyper(p)
        np.testing.assert_array_equal(self.k.get_loghyper(), p)
        self.k.set_loghyper(list(p))
        np.testing.assert_array_equal(self.k.loghyper, p)

    def test_values_are_copied(self):
        p = np.random.randn(4)
        self.k.set_loghyper(p)
        p[0] = 10.
        self.assertNotEqual(self.k.get_loghyper()[0], 10.)
        out = self.k.get_loghyper()
        out[1] = 10.
        self.assertNotEqual(self.k.get_loghyper()[1], 10.)
        self.k.loghyper[2] = 10.
        self.assertNotEqual(self.k.get_loghyper()[2], 10.)

    def test_read_only_property(self):
        with self.assertRaises(AttributeError):
            self.k.loghyper = np.zeros(4)
        with self.assertRaises(AttributeError):
            self.k.param_dim = 2

    def test_changed_flag(self):
        self.assertTrue(self.k.loghyper_changed)
        self.k.loghyper_changed = False
        x = np.random.randn(3)
        self.k.get(x, x)
        self.k.grad(x, x)
        self.k.K(np.random.randn(4, 3))
        self.assertFalse(self.k.loghyper_changed)
        self.k.set_loghyper(self.k.get_loghyper())
        self.assertTrue(self.k.loghyper_changed)
        self.k.set_loghyper(np.ones(4))
        self.assertTrue(self.k.loghyper_changed)

    def test_failed_set_keeps_flag(self):
        self.k.loghyper_changed = False
        self.assertRaises(ValueError, self.k.set_loghyper, np.zeros(2))
        self.assertFalse(self.k.loghyper_changed)

    def test_compound_slices(self):
        k = gpcov.kern.input_dim_filter(3, [1, 2], gpcov.kern.rq_iso(2)) * self.k
        p = np.arange(7.)
        k.set_loghyper(p)
        np.testing.assert_array_equal(k.first.child.get_loghyper(), p[:3])
        np.testing.assert_array_equal(k.second.get_loghyper(), p[3:])
        self.assertTrue(k.first.child.loghyper_changed)

    def test_setting_a_part_updates_owner(self):
        S = gpcov.kern.se_iso(2) + gpcov.kern.noise(2)
        S.loghyper_changed = False
        x = np.zeros(2)
        S.first.set_loghyper([0., 1.])
        np.testing.assert_array_equal(S.get_loghyper(), [0., 1., 0.])
        self.assertTrue(S.loghyper_changed)
        self.assertAlmostEqual(S.get(x, x), np.exp(2.) + 1.)
        S.set_loghyper(np.zeros(3))
        np.testing.assert_array_equal(S.first.get_loghyper(), [0., 0.])

    def test_setting_a_nested_part_updates_root(self):
        k = gpcov.kern.input_dim_filter(3, [1, 2], gpcov.kern.rq_iso(2)) * self.k + gpcov.kern.noise(3)
        k.loghyper_changed = False
        k.first.loghyper_changed = False
        k.first.first.child.set_loghyper([1., 2., 3.])
        np.testing.assert_array_equal(k.get_loghyper(), [1., 2., 3., 0., 0., 0., 0., 0.])
        np.testing.assert_array_equal(k.first.get_loghyper(), [1., 2., 3., 0., 0., 0., 0.])
        self.assertTrue(k.loghyper_changed)
        self.assertTrue(k.first.loghyper_changed)

    def test_copied_part_is_detached(self):
        S = gpcov.kern.se_iso(2) + gpcov.kern.noise(2)
        S.loghyper_changed = False
        c = S.first.copy()
        c.set_loghyper([1., 1.])
        np.testing.assert_array_equal(S.get_loghyper(), np.zeros(3))
        self.assertFalse(S.loghyper_changed)
        S2 = S.copy()
        S2.first.set_loghyper([2., 2.])
        np.testing.assert_array_equal(S2.get_loghyper(), [2., 2., 0.])
        np.testing.assert_array_equal(S.get_loghyper(), np.zeros(3))

    def test_effect_on_value(self):
        x1, x2 = np.random.randn(3), np.random.randn(3)
        self.k.set_loghyper([0., 0., 0., np.log(3.)])
        self.assertAlmostEqual(self.k.get(x1, x1), 9.)
        lower = self.k.get(x1, x2)
        self.k.set_loghyper([1., 1., 1., np.log(3.)])
        self.assertGreater(self.k.get(x1, x2), lower)

    def test_uninitialized(self):
        k = CovSEard()
        self.assertRaises(RuntimeError, k.set_loghyper, np.zeros(4))
        self.assertRaises(RuntimeError, k.get, np.zeros(3), np.zeros(3))
        self.assertRaises(RuntimeError, k.grad, np.zeros(3), np.zeros(3))
        self.assertEqual(k.get_param_dim(), 0)
        self.assertEqual(k.get_input_dim(), 0)


if __name__ == "__main__":
    unittest.main()
