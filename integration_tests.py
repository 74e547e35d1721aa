import unittest
from unittest import TestCase, main
import numpy as np
import scipy.stats

import rwddm
from rwddm import parameters as param
import paranoid
paranoid.settings.Settings.set(enabled=True)

def _simulate_many(b, a, v, t_eps, n, seed):
    """Run `n` independent trials from a single seeded generator."""
    rng = np.random.default_rng(seed)
    trials = [rwddm.simulate_trajectory(b, a, v, t_eps, rng=rng) for _ in range(n)]
    choices = np.asarray([c for c,t in trials])
    times = np.asarray([t for c,t in trials])
    return choices, times

def _modeltest_walk_vs_analytical(b, a, v, t_eps, n=4000, seed=0, prob_diff=.04, mean_diff=.03):
    choices, times = _simulate_many(b, a, v, t_eps, n, seed)
    p_upper = rwddm.choice_probability(b, a, v, choice=1)
    mean_t = rwddm.mean_decision_time(b, a, v)
    print(np.mean(choices), p_upper, np.mean(times), mean_t)
    assert abs(np.mean(choices) - p_upper) < prob_diff, "Probability of the upper barrier was too different"
    assert abs(np.mean(times) - mean_t) < mean_diff, "Mean decision time was too different"
    assert np.all(times >= t_eps), "A trial finished without taking a step"

class TestSimulation(TestCase):
    """Simulated trials should be close to the analytical solution"""
    def setUp(self):
        # Contract checks on every trial are too slow for thousands of trials
        paranoid.settings.Settings.set(enabled=False)
        self.warnings = param.walk_warnings
        param.walk_warnings = False
    def tearDown(self):
        paranoid.settings.Settings.set(enabled=True)
        param.walk_warnings = self.warnings
    def test_symmetry(self):
        """With no drift from the midpoint, both barriers are equally likely"""
        # delta = sqrt(.001) is not a divisor of .5, so the upper barrier is crossed, not hit
        choices, times = _simulate_many(.5, 1., 0., 1e-3, n=4000, seed=1)
        res = scipy.stats.binomtest(int(np.sum(choices)), len(choices), .5)
        assert res.pvalue > .001, "Choices were not symmetric"
    def test_zero_drift(self):
        _modeltest_walk_vs_analytical(.5, 1., 0., 1e-3, seed=2)
    def test_positive_drift(self):
        _modeltest_walk_vs_analytical(.5, 1., 1., 1e-3, seed=3)
    def test_negative_drift_biased_start(self):
        # Barriers just inside the lattice of delta = 1/32
        _modeltest_walk_vs_analytical(.7, 1.24, -.8, 1/1024, seed=4)
    def test_mean_time_across_step_sizes(self):
        """The mean decision time matches the analytic mean for any step size"""
        # On a dyadic lattice the walk is exact, so the expected time is
        # the same for every t_eps
        for t_eps in [1/64, 1/256, 1/1024]:
            choices, times = _simulate_many(.5, 1., 0., t_eps, n=2000, seed=5)
            assert abs(np.mean(times) - .25) < .02, "Mean time for t_eps=%s was %s" % (t_eps, np.mean(times))
    def test_independent_streams(self):
        """Generators spawned from one seed give different trials"""
        streams = [np.random.default_rng(s) for s in np.random.SeedSequence(0).spawn(2)]
        paths = [rwddm.simulate_path(.5, 1., 0., 1e-3, rng=r) for r in streams]
        assert len(paths[0]) != len(paths[1]) or np.any(paths[0] != paths[1])

if __name__ == '__main__':
    main()
