# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

# pylint: disable=wrong-import-position

"""Build quantum circuits and lower them to OPENQASM 2.0."""

from ._qasmgenerror import (QasmGenError, CircuitOperandError,
                            IndexOutOfRangeError, UnknownRegisterError,
                            RegisterSetEmptyError, QasmGenUserConfigError)
from ._classicalregister import ClassicalRegister
from ._quantumregister import QuantumRegister
from ._gatekind import GateKind
from ._gaterecord import GateRecord
from ._instructionset import InstructionSet
from ._quantumcircuit import QuantumCircuit
from ._qasmgenerator import generate
from ._logging import set_qasmgen_logger, unset_qasmgen_logger

# The qasmgen.extensions.standard import needs to be placed *after* the
# QuantumCircuit import, as it attaches the gate methods to it.
import qasmgen.extensions.standard

__version__ = '0.1.0'
