# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
OPENQASM code generation.
"""


def generate(circuit):
    """Return the OPENQASM 2.0 program of a circuit.

    The program is the header, one ``qreg`` line per quantum register, one
    ``creg`` line per classical register and one line per gate record, in
    program order. Every line is newline terminated.

    Generation reads the circuit without modifying it, so repeated calls on
    an unmodified circuit return the same text, and appending a gate only
    appends a line to the previous output.

    Args:
        circuit (QuantumCircuit): the circuit to lower.

    Returns:
        str: the program text.
    """
    string_temp = circuit.header + "\n"
    string_temp += "include \"%s\";\n" % circuit.include
    for register in circuit.qregs:
        string_temp += register.qasm() + "\n"
    for register in circuit.cregs:
        string_temp += register.qasm() + "\n"
    for instruction in circuit.gate_log:
        string_temp += instruction.rendered
    return string_temp
