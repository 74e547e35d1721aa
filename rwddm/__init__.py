# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of RWDDM, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["simulate_trajectory", "simulate_path", "classify", "check_parameters",
           "resolve_rng", "choice_probability", "mean_decision_time", "set_log_level"]

from .exceptions import *
from .walk import simulate_trajectory, simulate_path, classify, check_parameters, resolve_rng
from .analytic import choice_probability, mean_decision_time
from .logger import set_log_level
from .exceptions import __all__ as _exceptions_all
__all__ += _exceptions_all

from ._version import __version__

# Some default functions for paranoid scientist
import paranoid
import math
import numpy as np
paranoid.settings.Settings.get("namespace").update({"math": math, "np": np})
# Disable paranoid for users
paranoid.settings.Settings.set(enabled=False)
