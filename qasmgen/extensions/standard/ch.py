# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
controlled-H gate.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def ch(self, ctl, tgt):
    """Apply CH from ctl to tgt."""
    return self._append(GateKind.CH, [ctl, tgt])


QuantumCircuit.ch = ch
