# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Quantum circuit object.
"""
import logging

from . import user_config
from ._qasmgenerror import (QasmGenError, CircuitOperandError,
                            UnknownRegisterError, RegisterSetEmptyError)
from ._register import Register
from ._quantumregister import QuantumRegister
from ._classicalregister import ClassicalRegister
from ._gatekind import GateKind
from ._gaterecord import GateRecord
from ._instructionset import InstructionSet
from ._qasmgenerator import generate
from .tools.file_io import save_qasm

logger = logging.getLogger(__name__)


class QuantumCircuit(object):
    """Quantum circuit.

    A circuit owns the registers it was created with and an append-only log
    of gate records, kept in the order the gates were applied. Gate methods
    (``h``, ``cx``, ``ccx``, ...) are attached by the modules in
    ``qasmgen.extensions.standard``.
    """
    instances = 0
    prefix = 'circuit'

    # Class variables for the OPENQASM header
    header = "OPENQASM 2.0;"
    include = "qelib1.inc"

    def __init__(self, *regs, name=None, ccx_legacy_spacing=None):
        """Create a new circuit.

        Args:
            *regs (Registers): registers to include in the circuit.
            name (str or None): the name of the quantum circuit. If
                None, an automatically generated identifier will be
                assigned.
            ccx_legacy_spacing (bool or None): render Toffoli gates with the
                legacy ``' ,'`` separator. If None, the
                ``ccx_legacy_spacing`` user setting is used.

        Raises:
            QasmGenError: if the circuit name, if given, is not valid; if an
                argument is not a register or two registers share a name;
                if ccx_legacy_spacing is neither a bool nor None.
        """
        self._increment_instances()
        if name is None:
            name = self.cls_prefix() + str(self.cls_instances())

        if not isinstance(name, str):
            raise QasmGenError("The circuit name should be a string "
                               "(or None for autogenerate a name).")

        self.name = name
        self._qregs = []
        self._cregs = []
        # Gate records in the order they were applied.
        self._data = []

        names = set()
        for register in regs:
            if not isinstance(register, (QuantumRegister, ClassicalRegister)):
                raise QasmGenError("expected a register")
            if register.name in names:
                raise QasmGenError("register name \"%s\" already exists"
                                   % register.name)
            names.add(register.name)
            if isinstance(register, QuantumRegister):
                self._qregs.append(register)
            else:
                self._cregs.append(register)

        if ccx_legacy_spacing is not None and \
           not isinstance(ccx_legacy_spacing, bool):
            raise QasmGenError("ccx_legacy_spacing should be a bool or None, "
                               "not %r" % (ccx_legacy_spacing,))
        self._ccx_legacy_spacing = ccx_legacy_spacing

    @classmethod
    def _increment_instances(cls):
        cls.instances += 1

    @classmethod
    def cls_instances(cls):
        """Return the current number of instances of this class,
        useful for auto naming."""
        return cls.instances

    @classmethod
    def cls_prefix(cls):
        """Return the prefix to use for auto naming."""
        return cls.prefix

    @property
    def ccx_legacy_spacing(self):
        """Return True if Toffoli gates use the legacy ``' ,'`` separator.

        When the circuit was created without an explicit value, the
        ``ccx_legacy_spacing`` user setting is read on each access.
        """
        if self._ccx_legacy_spacing is None:
            return user_config.get_config().get('ccx_legacy_spacing', False)
        return self._ccx_legacy_spacing

    @property
    def qregs(self):
        """Return the quantum registers, in storage order."""
        return tuple(self._qregs)

    @property
    def cregs(self):
        """Return the classical registers, in storage order."""
        return tuple(self._cregs)

    @property
    def gate_log(self):
        """Return the gate records, in program order."""
        return tuple(self._data)

    def __len__(self):
        """Return number of operations in circuit."""
        return len(self._data)

    def __getitem__(self, item):
        """Return indexed operation."""
        return self._data[item]

    def has_register(self, register):
        """
        Test if this circuit has the register r.

        Registers are compared by kind, name and size, so an equal register
        created elsewhere is also a member.

        Return True or False.
        """
        if isinstance(register, QuantumRegister):
            return register in self._qregs
        if isinstance(register, ClassicalRegister):
            return register in self._cregs
        return False

    def _check_bit(self, bit, register_class):
        """Raise exception if bit is out of range, not in this circuit or
        has a bad format.

        The range of the index is checked before the register membership.
        """
        if not isinstance(bit, tuple) or len(bit) != 2:
            raise QasmGenError("%s is not a (register, index) tuple." % str(bit))
        register, index = bit
        if not isinstance(register, Register):
            raise QasmGenError("The first element of %s should be a register."
                               % str(bit))
        if isinstance(index, bool) or not isinstance(index, int):
            raise QasmGenError("The second element of a tuple defining a bit "
                               "should be an int: %s was found instead"
                               % type(index).__name__)
        register.check_range(index)

        if register_class is QuantumRegister:
            registers, kind = self._qregs, 'quantum'
        else:
            registers, kind = self._cregs, 'classical'
        if not registers:
            raise RegisterSetEmptyError(
                bit, "circuit '%s' has no %s registers" % (self.name, kind))
        if not isinstance(register, register_class):
            raise UnknownRegisterError(
                bit, "expected %s register, '%s' is a %s"
                % (kind, register.name, register.type))
        if register not in registers:
            raise UnknownRegisterError(
                bit, "register '%s' not in this circuit" % register.name)

    def _check_qubit(self, qubit):
        """Raise exception if qubit is not a valid qubit of this circuit."""
        self._check_bit(qubit, QuantumRegister)

    def _check_clbit(self, clbit):
        """Raise exception if clbit is not a valid bit of this circuit."""
        self._check_bit(clbit, ClassicalRegister)

    def _attach(self, gate):
        """Attach a gate."""
        self._data.append(gate)
        logger.debug("circuit '%s': appended %s", self.name, gate.qasm())
        return gate

    def _append(self, kind, qargs, cargs=()):
        """Validate the operands left to right, then render and attach.

        Returns:
            GateRecord: the attached record.

        Raises:
            CircuitOperandError: the first operand that fails validation.
            QasmGenError: if an operand is malformed.
        """
        try:
            for qubit in qargs:
                self._check_qubit(qubit)
            for clbit in cargs:
                self._check_clbit(clbit)
        except CircuitOperandError as error:
            logger.debug("circuit '%s': %s rejected: %s", self.name,
                         kind.label, error.reason)
            raise
        legacy = kind is GateKind.CCX and self.ccx_legacy_spacing
        return self._attach(GateRecord(kind, qargs, cargs, legacy))

    def _apply_single(self, kind, qubit):
        """Apply a single qubit gate to qubit, or to every qubit of a
        quantum register."""
        if isinstance(qubit, QuantumRegister):
            instructions = InstructionSet()
            for j in range(qubit.size):
                instructions.add(self._apply_single(kind, (qubit, j)))
            return instructions
        return self._append(kind, [qubit])

    def qasm(self):
        """Return OPENQASM string."""
        return generate(self)

    def save_qasm(self, filename):
        """Write the OPENQASM string of this circuit to filename."""
        return save_qasm(self, filename)

    def measure(self, qubit, cbit):
        """Measure quantum bit into classical bit (tuples).

        Returns:
            GateRecord: the attached measure record.

        Raises:
            QasmGenError: if qubit is not in this circuit or bad format;
                if cbit is not in this circuit or not creg.
        """
        if isinstance(qubit, QuantumRegister) and \
           isinstance(cbit, ClassicalRegister):
            if len(qubit) != len(cbit):
                raise QasmGenError("register sizes do not match: %s and %s"
                                   % (repr(qubit), repr(cbit)))
            instructions = InstructionSet()
            for i in range(qubit.size):
                instructions.add(self.measure((qubit, i), (cbit, i)))
            return instructions

        return self._append(GateKind.MEASURE, [qubit], [cbit])
