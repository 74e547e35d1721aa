# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of RWDDM, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

# Default simulation parameters.  These can be overridden by user
# code on a per-call basis.

t_eps = 1e-4 # [s] Time-step of the random walk
large_t_eps = .01 # [s] Time-steps above this give a coarse approximation
max_steps = None # Maximum number of steps before giving up, None for no limit

# Display warnings
walk_warnings = True
