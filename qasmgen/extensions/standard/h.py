# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Hadamard gate.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def h(self, q):
    """Apply H to q."""
    return self._apply_single(GateKind.H, q)


QuantumCircuit.h = h
