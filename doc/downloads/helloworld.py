import numpy as np
import rwddm
rng = np.random.default_rng(0)
choice, time = rwddm.simulate_trajectory(b=.5, a=1., v=.5, t_eps=1e-4, rng=rng)
print("Hit the %s barrier after %.4f s" % ("upper" if choice == 1 else "lower", time))
print("Analytic P(upper) = %.3f, mean time = %.3f" % (rwddm.choice_probability(.5, 1., .5), rwddm.mean_decision_time(.5, 1., .5)))
