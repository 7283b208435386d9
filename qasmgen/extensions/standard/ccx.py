# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Toffoli gate. Controlled-Controlled-X.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def ccx(self, ctl1, ctl2, tgt):
    """Apply Toffoli from ctl1 and ctl2 to tgt.

    The operands are validated in order, so a bad first control is reported
    even when the target is also invalid.

    Args:
        ctl1 (tuple(QuantumRegister, int)): first control qubit.
        ctl2 (tuple(QuantumRegister, int)): second control qubit.
        tgt (tuple(QuantumRegister, int)): target qubit.

    Returns:
        GateRecord: the attached record.
    """
    return self._append(GateKind.CCX, [ctl1, ctl2, tgt])


QuantumCircuit.ccx = ccx
