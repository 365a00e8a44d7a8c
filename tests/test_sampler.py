# ==============================================================================
# file: tests/test_sampler.py
# Poisson sampler: invariants, scenarios and configuration errors.
# ==============================================================================
import math
import unittest

import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from scatter_engine import ConfigurationError, PoissonSampler, generate_points
from scatter_engine.core.constants import STATE_DONE, STATE_RUNNING
from scatter_engine.core.utils.metrics import compute_metrics
from tests.helpers import ScriptedRNG, assert_min_separation


def _scripted_run(offset=(0.0, 0.0)):
    """A full 20x20 run with every draw fixed; ends after five steps."""
    rng = ScriptedRNG(
        ints=[0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0],
        floats=[0.0, 0.0, 0.0, 0.0, 0.5, 0.0, 0.0, 0.0, 0.5, 0.0],
    )
    sampler = PoissonSampler([10.0], (20.0, 20.0), offset, rejection_budget=1, rng=rng)
    return sampler, rng


class TestScriptedSampler(unittest.TestCase):

    def test_exact_sequence(self):
        sampler, rng = _scripted_run()
        points = sampler.generate()

        self.assertEqual(len(points), 3)
        self.assertEqual((points[0].x, points[0].y), (10.0, 10.0))
        self.assertEqual((points[1].x, points[1].y), (10.0, 20.0))
        self.assertAlmostEqual(points[2].x, 10.0)
        self.assertEqual(points[2].y, 0.0)
        self.assertTrue(all(p.radius == 5.0 for p in points))

        self.assertEqual(rng.ints, [])
        self.assertEqual(rng.floats, [])
        # seed radius, then (frontier slot, diameter) per step
        self.assertEqual(
            rng.int_calls,
            [(0, 0), (0, 0), (0, 0), (0, 1), (0, 0), (0, 0), (0, 0),
             (0, 1), (0, 0), (0, 0), (0, 0)],
        )
        self.assertEqual(sampler.stats.steps, 5)
        self.assertEqual(sampler.stats.accepted, 2)
        self.assertEqual(sampler.stats.exhausted, 3)

    def test_offset_applied_once_to_output(self):
        sampler, _ = _scripted_run(offset=(1000.0, -5.0))
        points = sampler.generate()
        local = sampler.local_points
        self.assertEqual(len(points), len(local))
        for p, q in zip(points, local):
            self.assertEqual(p.x, q.x + 1000.0)
            self.assertEqual(p.y, q.y - 5.0)
            self.assertEqual(p.radius, q.radius)


class TestSamplerScenarios(unittest.TestCase):

    def test_single_diameter_region(self):
        sampler = PoissonSampler([10.0], (100.0, 100.0), rejection_budget=30, seed=42)
        points = sampler.generate()

        self.assertEqual((points[0].x, points[0].y), (50.0, 50.0))
        self.assertGreaterEqual(len(points), 20)
        self.assertLessEqual(len(points), 150)
        for p in points:
            self.assertEqual(p.radius, 5.0)
            self.assertTrue(0.0 <= p.x <= 100.0 and 0.0 <= p.y <= 100.0)
        assert_min_separation(self, points)

    def test_diameter_larger_than_region(self):
        sampler = PoissonSampler([25.0], (20.0, 20.0), rejection_budget=30, seed=3)
        points = sampler.generate()
        self.assertEqual(len(points), 1)
        self.assertEqual(points[0].as_tuple(), (10.0, 10.0, 12.5))
        self.assertEqual(sampler.stats.steps, 1)
        self.assertEqual(sampler.stats.exhausted, 1)
        self.assertEqual(sampler.state, STATE_DONE)

    def test_offset_exact(self):
        base = PoissonSampler([4.0, 6.0], (60.0, 40.0), (0.0, 0.0), 20, seed=11).generate()
        moved = PoissonSampler([4.0, 6.0], (60.0, 40.0), (1000.0, 1000.0), 20, seed=11).generate()
        self.assertEqual(len(base), len(moved))
        for p, q in zip(base, moved):
            self.assertEqual(q.x, p.x + 1000.0)
            self.assertEqual(q.y, p.y + 1000.0)
            self.assertEqual(q.radius, p.radius)

    def test_bounds_with_offset(self):
        dx, dy = -30.0, 12.5
        points = PoissonSampler([2.0, 3.0, 5.0], (40.0, 25.0), (dx, dy), 30, seed="bounds").generate()
        for p in points:
            self.assertTrue(0.0 <= p.x - dx <= 40.0)
            self.assertTrue(0.0 <= p.y - dy <= 25.0)

    def test_mixed_diameters_separation(self):
        diameters = [2.0, 3.0, 5.0]
        points = PoissonSampler(diameters, (50.0, 50.0), rejection_budget=30, seed=8).generate()
        assert_min_separation(self, points)
        self.assertTrue({p.diameter for p in points} <= set(diameters))
        self.assertGreater(len({p.radius for p in points}), 1)

    def test_wide_diameter_range_boundary(self):
        # Cell size follows the smallest diameter, search depth the largest.
        # Radii are d / 2, so the largest radius sum is max_d, which stays
        # inside the 2 * max_d window: no pair can be missed, even here.
        sampler = PoissonSampler([4.0, 100.0], (160.0, 24.0), rejection_budget=30, seed=21)
        points = sampler.generate()
        self.assertEqual(sampler.search_depth, math.ceil(200.0 / sampler.cell_size))
        assert_min_separation(self, points)
        self.assertEqual(compute_metrics(points, sampler.region)["overlap_pairs"], 0)

    def test_one_to_hundred_diameters_small_region(self):
        sampler = PoissonSampler([1.0, 100.0], (30.0, 30.0), rejection_budget=30, seed=5)
        points = sampler.generate()
        self.assertEqual(sampler.search_depth, math.ceil(200.0 / sampler.cell_size))
        assert_min_separation(self, points)
        self.assertEqual(compute_metrics(points, sampler.region)["overlap_pairs"], 0)
        if points[0].radius == 50.0:
            # a big seed blocks the whole 30x30 region
            self.assertEqual(len(points), 1)
        else:
            # a big disc needs 50.5 from the small seed, farther than any corner
            self.assertTrue(all(p.radius == 0.5 for p in points))
        for p in points:
            self.assertTrue(0.0 <= p.x <= 30.0 and 0.0 <= p.y <= 30.0)


class TestSamplerProperties(unittest.TestCase):

    def test_numpy_inputs_accepted(self):
        diameters = np.array([2.0, 4.0], dtype=np.float32)
        region = np.array([20.0, 20.0], dtype=np.float32)
        sampler = PoissonSampler(diameters, region, (np.int64(5), np.float64(-2.5)),
                                 rejection_budget=np.int64(30), seed=np.int64(9))
        self.assertEqual(sampler.diameters, (2.0, 4.0))
        self.assertEqual(sampler.rejection_budget, 30)
        self.assertIs(type(sampler.rejection_budget), int)
        points = sampler.generate()
        assert_min_separation(self, points)

        plain = PoissonSampler([2.0, 4.0], (20.0, 20.0), (5.0, -2.5), 30, seed=9).generate()
        self.assertEqual(points, plain)

    def test_determinism(self):
        args = ([3.0, 5.0], (80.0, 60.0), (5.0, 7.0), 30, 123)
        a = PoissonSampler(*args).generate()
        b = PoissonSampler(*args).generate()
        self.assertEqual(a, b)
        self.assertEqual(generate_points(*args), [p.as_tuple() for p in a])

    def test_seed_sensitivity(self):
        a = PoissonSampler([3.0, 5.0], (80.0, 60.0), seed=1).generate()
        b = PoissonSampler([3.0, 5.0], (80.0, 60.0), seed=2).generate()
        self.assertNotEqual(a, b)

    def test_termination_bookkeeping(self):
        sampler = PoissonSampler([3.0, 4.0], (60.0, 60.0), rejection_budget=10, seed=99)
        self.assertEqual(sampler.state, STATE_RUNNING)
        points = sampler.generate()

        self.assertEqual(sampler.state, STATE_DONE)
        self.assertEqual(len(sampler.frontier), 0)
        # every point entered the frontier once and left it once
        self.assertEqual(sampler.stats.accepted, len(points) - 1)
        self.assertEqual(sampler.stats.exhausted, len(points))
        self.assertEqual(sampler.stats.steps, sampler.stats.accepted + sampler.stats.exhausted)
        # one cell per accepted point
        self.assertEqual(sampler.grid.occupied_count(), len(points))
        self.assertFalse(sampler.step())

    def test_generate_twice_returns_same_result(self):
        sampler = PoissonSampler([5.0], (40.0, 40.0), (100.0, 100.0), seed=4)
        first = sampler.generate()
        second = sampler.generate()
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_derived_sizes(self):
        sampler = PoissonSampler([2.0, 8.0], (30.0, 20.0))
        self.assertAlmostEqual(sampler.cell_size, 2.0 / math.sqrt(2))
        self.assertEqual(sampler.search_depth, math.ceil(16.0 / sampler.cell_size))
        self.assertEqual(sampler.grid.shape, (math.ceil(30.0 / sampler.cell_size),
                                              math.ceil(20.0 / sampler.cell_size)))


class TestSamplerConfiguration(unittest.TestCase):

    def _assert_invalid(self, **kwargs):
        args = dict(diameters=[2.0], region_size=(10.0, 10.0), region_offset=(0.0, 0.0),
                    rejection_budget=30, seed=0)
        args.update(kwargs)
        with self.assertRaises(ConfigurationError):
            PoissonSampler(**args)

    def test_invalid_diameters(self):
        self._assert_invalid(diameters=[])
        self._assert_invalid(diameters=[2.0, 0.0])
        self._assert_invalid(diameters=[-1.0])
        self._assert_invalid(diameters=[float("nan")])
        self._assert_invalid(diameters=["3"])

    def test_invalid_region(self):
        self._assert_invalid(region_size=(0.0, 10.0))
        self._assert_invalid(region_size=(10.0, -1.0))
        self._assert_invalid(region_size=(10.0,))
        self._assert_invalid(region_size=(float("inf"), 10.0))
        self._assert_invalid(region_offset=(float("nan"), 0.0))

    def test_invalid_rejection_budget(self):
        self._assert_invalid(rejection_budget=0)
        self._assert_invalid(rejection_budget=-3)
        self._assert_invalid(rejection_budget=2.5)
        self._assert_invalid(rejection_budget=True)

    def test_non_sequence_input(self):
        self._assert_invalid(region_size=None)
        self._assert_invalid(region_offset=3.0)
        self._assert_invalid(diameters=10.0)
        self._assert_invalid(region_size=np.float64(10.0))

    def test_configuration_error_is_value_error(self):
        with self.assertRaises(ValueError):
            PoissonSampler([], (10.0, 10.0))

    def test_rng_untouched_on_invalid_config(self):
        rng = ScriptedRNG()
        with self.assertRaises(ConfigurationError):
            PoissonSampler([1.0], (0.0, 1.0), rng=rng)
        self.assertEqual(rng.int_calls, [])


if __name__ == '__main__':
    unittest.main()
