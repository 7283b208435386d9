# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
S=diag(1,i) Clifford phase gate or its inverse.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def s(self, q):
    """Apply S to q."""
    return self._apply_single(GateKind.S, q)


def sdg(self, q):
    """Apply Sdg to q."""
    return self._apply_single(GateKind.SDG, q)


QuantumCircuit.s = s
QuantumCircuit.sdg = sdg
