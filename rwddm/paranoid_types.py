# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of RWDDM, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

from paranoid import Type, Set
from paranoid.types import Range

class Choice(Type):
    """The barrier which absorbed the walk: 0 (lower) or 1 (upper)"""
    def test(self, v):
        assert v in Set([0, 1])
    def generate(self):
        yield 0
        yield 1

class Probability(Range):
    """A number in [0, 1]"""
    def __init__(self):
        super().__init__(0, 1)
