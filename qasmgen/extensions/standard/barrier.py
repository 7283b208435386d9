# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Barrier instruction.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind
from qasmgen._gaterecord import GateRecord
from qasmgen._qasmgenerror import RegisterSetEmptyError


def barrier(self):
    """Apply barrier to every quantum register of the circuit.

    The barrier lists the registers in the order the circuit stores them.

    Raises:
        RegisterSetEmptyError: if the circuit has no quantum registers.
    """
    qregs = self.qregs
    if not qregs:
        raise RegisterSetEmptyError(
            None, "circuit '%s' has no quantum registers" % self.name)
    return self._attach(GateRecord(GateKind.BARRIER, qregs))


QuantumCircuit.barrier = barrier
