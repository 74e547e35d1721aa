# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of RWDDM, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["RandomWalkError", "InvalidParameter", "InvalidTimeStep",
           "InvalidBarrier", "InvalidStartingPoint", "InvalidProbability",
           "NonTerminatingConfiguration", "StepLimitExceeded"]

class RandomWalkError(Exception):
    """Base class for all errors raised by rwddm."""
    pass

class InvalidParameter(RandomWalkError, ValueError):
    """A parameter of the walk fails its precondition.

    These are always raised before the first step is taken, so no
    random numbers are consumed from the generator.
    """
    pass

class InvalidTimeStep(InvalidParameter):
    """The time step `t_eps` is not a finite positive number."""
    pass

class InvalidBarrier(InvalidParameter):
    """The upper barrier `a` is not positive."""
    pass

class InvalidStartingPoint(InvalidParameter):
    """The relative starting point `b` is not finite."""
    pass

class InvalidProbability(InvalidParameter):
    """The up-step probability 0.5*(1 + v*sqrt(t_eps)) is outside [0, 1].

    Decrease `t_eps` or the magnitude of the drift `v`.
    """
    pass

class NonTerminatingConfiguration(InvalidParameter):
    """The walk could never be absorbed, e.g. an infinite barrier."""
    pass

class StepLimitExceeded(RandomWalkError, RuntimeError):
    """The walk took `max_steps` steps without hitting a barrier."""
    pass
