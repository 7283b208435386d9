# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Utilities for File Input/Output."""

import logging

from .._qasmgenerator import generate

logger = logging.getLogger(__name__)


def save_qasm(circuit, filename):
    """Write the OPENQASM program of a circuit to a file.

    The file is created, or overwritten if it already exists.

    Args:
        circuit (QuantumCircuit): the circuit to write.
        filename (str): path of the output file.

    Returns:
        str: filename
    """
    with open(filename, 'w', encoding='utf-8') as qasm_file:
        qasm_file.write(generate(circuit))
    logger.info("circuit '%s' written to %s", circuit.name, filename)
    return filename
