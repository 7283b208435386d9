# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Pauli Y (bit and phase flip) gate.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def y(self, q):
    """Apply Y to q."""
    return self._apply_single(GateKind.Y, q)


QuantumCircuit.y = y
