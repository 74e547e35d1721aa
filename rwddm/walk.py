# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
#
# This file is part of RWDDM, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["simulate_trajectory", "simulate_path", "classify", "check_parameters", "resolve_rng"]

import math
import types
import numpy as np

from . import parameters as param
from .exceptions import InvalidTimeStep, InvalidBarrier, InvalidStartingPoint, \
    InvalidProbability, NonTerminatingConfiguration, StepLimitExceeded
from .paranoid_types import Choice, Probability
from .logger import logger as _logger

from paranoid.types import Numeric, Number, Positive, Natural1, Maybe, Unchecked, Tuple, NDArray
from paranoid.decorators import accepts, returns, ensures

# The walk lives on the interval [0, a].  Each step moves the particle
# by delta = sqrt(t_eps), upward with probability
# p = (1 + v*delta)/2, which gives a drift of v and unit variance per
# unit of time.  As t_eps -> 0 this converges to a Wiener process with
# drift v and absorbing barriers at 0 and a.  See Tuerlinckx et
# al. (2001), "A comparison of four methods for simulating the
# diffusion process".

def resolve_rng(rng):
    """Find the uniform random source to draw steps from.

    `rng` may be None, in which case a fresh numpy Generator is
    seeded from the operating system; an integer, which is used as a
    seed for a new numpy Generator; or any object with a `random()`
    method returning floats in [0, 1), such as a numpy Generator, a
    numpy RandomState, or a `random.Random` instance.  Modules such as
    `random` or `numpy.random` are rejected, so global random state
    is never used.
    """
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(rng)
    if isinstance(rng, types.ModuleType):
        raise TypeError("rng must be a generator instance, not the module %s, which would draw from global state" % rng.__name__)
    if callable(getattr(rng, "random", None)):
        return rng
    raise TypeError("rng must be None, an integer seed, or an object with a random() method, not %s" % type(rng).__name__)

@accepts(Numeric, Numeric, Numeric, Numeric)
@returns(Tuple(Positive, Probability))
def check_parameters(b, a, v, t_eps):
    """Validate the parameters of a walk before it starts.

    Returns the step size `delta` and the probability `p` of stepping
    upward.  Raises a subclass of InvalidParameter if the walk is not
    well defined.  Parameters which are valid but unusual produce a
    warning instead.
    """
    if not (math.isfinite(t_eps) and t_eps > 0):
        raise InvalidTimeStep("Time step t_eps must be a finite positive number, not %s" % t_eps)
    if not a > 0:
        raise InvalidBarrier("Upper barrier a must be positive, not %s" % a)
    if math.isinf(a):
        raise NonTerminatingConfiguration("Upper barrier a is infinite, so the walk can never be absorbed there")
    if not math.isfinite(b):
        raise InvalidStartingPoint("Starting point b must be finite, not %s" % b)
    delta = math.sqrt(t_eps)
    p = 0.5 * (1 + v * delta)
    if not 0 <= p <= 1:
        raise InvalidProbability("Probability of an upward step is %s, outside [0, 1].  Decrease t_eps or the magnitude of the drift v (|v| must be at most %s)." % (p, 1/delta))
    if param.walk_warnings:
        if t_eps > param.large_t_eps:
            _logger.warning("t_eps is large.  The walk is a coarse approximation of the diffusion.  Decrease t_eps to %s or less." % param.large_t_eps)
        if not 0 <= b <= 1:
            _logger.warning("Starting point b=%s is outside [0, 1], so the walk starts beyond a barrier." % b)
        if p == 0 or p == 1:
            _logger.warning("Probability of an upward step is exactly %s, so the walk is deterministic." % p)
    return delta, p

@accepts(Number, Number)
@returns(Choice)
def classify(x, a):
    """The barrier hit by a walk which stopped at position `x`.

    Returns 1 for the upper barrier and 0 for the lower.  Note that
    the comparison is strict, so a walk stopping exactly on `a` is
    classified as 0.
    """
    return 1 if x > a else 0

def _walk(x, a, delta, p, draw, max_steps=None, path=None):
    """Step from `x` until leaving (0, a).  Returns the final position and the number of steps.

    At least one step is always taken.  If `path` is a list, each new
    position is appended to it.
    """
    tic = 0
    while True:
        if draw() < p:
            x = x + delta
        else:
            x = x - delta
        tic += 1
        if path is not None:
            path.append(x)
        if not (0 < x < a):
            return x, tic
        if max_steps is not None and tic >= max_steps:
            raise StepLimitExceeded("No barrier was hit within %i steps (position %s)" % (max_steps, x))

@accepts(Numeric, Numeric, Numeric, Numeric, Unchecked, Maybe(Natural1))
@returns(Tuple(Choice, Positive))
@ensures('return[1] >= t_eps')
def simulate_trajectory(b, a, v, t_eps=param.t_eps, rng=None, max_steps=param.max_steps):
    """Simulate a single trial of the drift-diffusion model by a random walk.

    The walk starts at `a*b`, i.e. `b` is the starting point as a
    proportion of the distance between the lower barrier (at 0) and
    the upper barrier `a`.  `v` is the drift rate and `t_eps` is the
    duration of a single step.  Smaller values of `t_eps` give a more
    accurate approximation of the diffusion at the cost of more steps.

    Random numbers are drawn from `rng` (see `resolve_rng`).  To get
    reproducible trials, pass a seeded generator, and to simulate in
    parallel, give each worker its own generator.

    If `max_steps` is given, StepLimitExceeded is raised when the walk
    has not hit a barrier after that many steps.

    Returns a tuple `(choice, time)`, where `choice` is 1 if the upper
    barrier was crossed and 0 otherwise, and `time` is the number of
    steps multiplied by `t_eps`.
    """
    delta, p = check_parameters(b, a, v, t_eps)
    draw = resolve_rng(rng).random
    _logger.debug("Random walk from x0=%s to barriers 0 and %s, delta=%s, p=%s" % (a*b, a, delta, p))
    x, tic = _walk(a*b, a, delta, p, draw, max_steps=max_steps)
    _logger.debug("Walk stopped at x=%s after %i steps" % (x, tic))
    return classify(x, a), float(tic * t_eps)

@accepts(Numeric, Numeric, Numeric, Numeric, Unchecked, Maybe(Natural1))
@returns(NDArray(d=1, t=Number))
@ensures('len(return) >= 2')
@ensures('not (0 < return[-1] < a)')
@ensures('np.all((return[1:-1] > 0) & (return[1:-1] < a))')
def simulate_path(b, a, v, t_eps=param.t_eps, rng=None, max_steps=param.max_steps):
    """Simulate a single trial and return the position of the walk at each step.

    The arguments are the same as for `simulate_trajectory`, and given
    the same random numbers the walk is identical.  The returned
    array starts with the starting position `a*b` and ends with the
    first position outside (0, a).  The choice of this trial is
    `classify(path[-1], a)` and its time is `(len(path)-1)*t_eps`.
    """
    delta, p = check_parameters(b, a, v, t_eps)
    draw = resolve_rng(rng).random
    path = [a*b]
    _walk(a*b, a, delta, p, draw, max_steps=max_steps, path=path)
    _logger.debug("Walk stopped at x=%s after %i steps" % (path[-1], len(path)-1))
    return np.asarray(path, dtype=float)
