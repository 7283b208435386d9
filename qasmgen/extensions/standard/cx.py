# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
controlled-NOT gate.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def cx(self, ctl, tgt):
    """Apply CX from ctl to tgt.

    The control is validated before the target.
    """
    return self._append(GateKind.CX, [ctl, tgt])


QuantumCircuit.cx = cx
