# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
T=sqrt(S) phase gate or its inverse.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def t(self, q):
    """Apply T to q."""
    return self._apply_single(GateKind.T, q)


def tdg(self, q):
    """Apply Tdg to q."""
    return self._apply_single(GateKind.TDG, q)


QuantumCircuit.t = t
QuantumCircuit.tdg = tdg
