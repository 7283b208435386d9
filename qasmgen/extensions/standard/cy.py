# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
controlled-Y gate.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def cy(self, ctl, tgt):
    """Apply CY from ctl to tgt."""
    return self._append(GateKind.CY, [ctl, tgt])


QuantumCircuit.cy = cy
