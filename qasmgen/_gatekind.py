# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""This module defines an enumerated type for the supported instructions."""

import enum


class GateKind(enum.Enum):
    """Class for the closed set of instructions a circuit can hold.

    Each member carries the human readable label, the OPENQASM mnemonic and
    the number of qubit and classical bit operands of the instruction.
    Barrier operands are whole registers, so it declares none.
    """

    H = ("Hadamard", "h", 1, 0)
    X = ("Pauli-X", "x", 1, 0)
    Y = ("Pauli-Y", "y", 1, 0)
    Z = ("Pauli-Z", "z", 1, 0)
    ID = ("Identity", "i", 1, 0)
    S = ("S", "s", 1, 0)
    SDG = ("S-dagger", "sdg", 1, 0)
    T = ("T", "t", 1, 0)
    TDG = ("T-dagger", "tdg", 1, 0)
    CX = ("CNOT", "cx", 2, 0)
    CY = ("Controlled-Y", "cy", 2, 0)
    CZ = ("Controlled-Z", "cz", 2, 0)
    CH = ("Controlled-H", "ch", 2, 0)
    CCX = ("Toffoli", "ccx", 3, 0)
    MEASURE = ("Measure", "measure", 1, 1)
    BARRIER = ("Barrier", "barrier", 0, 0)

    def __init__(self, label, mnemonic, num_qubits, num_clbits):
        self.label = label
        self.mnemonic = mnemonic
        self.num_qubits = num_qubits
        self.num_clbits = num_clbits


SINGLE_QUBIT_KINDS = (GateKind.H, GateKind.X, GateKind.Y, GateKind.Z,
                      GateKind.ID, GateKind.S, GateKind.SDG, GateKind.T,
                      GateKind.TDG)
CONTROLLED_KINDS = (GateKind.CX, GateKind.CY, GateKind.CZ, GateKind.CH)
