# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
controlled-Phase gate.
"""
from qasmgen import QuantumCircuit
from qasmgen._gatekind import GateKind


def cz(self, ctl, tgt):
    """Apply CZ from ctl to tgt."""
    return self._append(GateKind.CZ, [ctl, tgt])


QuantumCircuit.cz = cz
