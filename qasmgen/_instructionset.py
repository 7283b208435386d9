# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Instruction collection.
"""
from ._gaterecord import GateRecord
from ._qasmgenerror import QasmGenError


class InstructionSet(object):
    """Ordered collection of the records appended by one broadcast call."""

    def __init__(self):
        """New collection of instructions."""
        self.instructions = []

    def add(self, gate):
        """Add instruction to set."""
        if not isinstance(gate, GateRecord):
            raise QasmGenError("attempt to add non-GateRecord" +
                               " to InstructionSet")
        self.instructions.append(gate)

    def __len__(self):
        return len(self.instructions)

    def __getitem__(self, item):
        return self.instructions[item]

    def __iter__(self):
        return iter(self.instructions)
