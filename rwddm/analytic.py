# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
#
# This file is part of RWDDM, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["choice_probability", "mean_decision_time"]

import numpy as np

from .exceptions import InvalidBarrier
from .paranoid_types import Choice, Probability

from paranoid.types import Number, Positive0
from paranoid.decorators import accepts, returns, requires

# Closed-form results for the diffusion which the random walk
# approximates: a Wiener process with drift v and unit noise,
# starting at z = a*b, with absorbing barriers at 0 and a.  These are
# useful as reference values for simulated trials.

@accepts(Number, Number, Number, Choice)
@returns(Probability)
@requires('0 <= b <= 1')
def choice_probability(b, a, v, choice=1):
    '''
    Probability that the diffusion is absorbed at a given barrier.

    Parameters
    -------------------------------------------------------------------
    b      : Relative starting point, between 0 and 1
    a      : Upper barrier (the lower barrier is 0)
    v      : Drift rate
    choice : 1 for the upper barrier, 0 for the lower barrier

    Return the probability of crossing the barrier `choice` first.

    Reference:
    Tuerlinckx, F., Maris, E., Ratcliff, R., & De Boeck, P. (2001). A
    comparison of four methods for simulating the diffusion
    process. Behavior Research Methods, Instruments, & Computers,
    33(4), 443-456.  (Equation 3)
    '''
    if choice not in (0, 1):
        raise ValueError("choice must be 0 or 1, not %s" % choice)
    if not a > 0:
        raise InvalidBarrier("Upper barrier a must be positive, not %s" % a)
    # The lower barrier is the upper barrier of the mirrored process
    if choice == 0:
        b = 1 - b
        v = -v
    if v == 0:
        return float(b)
    # expm1 keeps precision for small drifts.  For negative drift the
    # exponents are made non-positive by scaling by exp(2av).
    if v > 0:
        return float(np.expm1(-2*a*b*v)/np.expm1(-2*a*v))
    return float(np.exp(2*a*v*(1-b)) * np.expm1(2*a*b*v)/np.expm1(2*a*v))

@accepts(Number, Number, Number)
@returns(Positive0)
@requires('0 <= b <= 1')
def mean_decision_time(b, a, v):
    '''
    Expected time at which the diffusion hits either barrier.

    Parameters
    -------------------------------------------------------------------
    b : Relative starting point, between 0 and 1
    a : Upper barrier (the lower barrier is 0)
    v : Drift rate

    For zero drift this is z*(a-z) where z = a*b is the starting
    position.  Otherwise it is (a*P(upper) - z)/v.
    '''
    if not a > 0:
        raise InvalidBarrier("Upper barrier a must be positive, not %s" % a)
    z = a*b
    if v == 0:
        return float(z*(a-z))
    return float((a*choice_probability(b, a, v, choice=1) - z)/v)
