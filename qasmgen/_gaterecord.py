# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
A rendered circuit instruction.

Gate records are identified by the following fields:

    kind: the GateKind of the instruction.

    label: human readable name of the operation (e.g. "Hadamard", "CNOT").

    rendered: the exact OPENQASM line of the instruction, terminated by ';'
              and a newline.

    qargs: tuple of qubits (QuantumRegister, index) the instruction acts on,
           or of whole quantum registers for a barrier.

    cargs: tuple of clbits (ClassicalRegister, index) the instruction writes.

Records are created by QuantumCircuit once every operand has been validated,
and are never modified afterwards. The rendered line is always built from the
kind and the operands, so the two cannot disagree.
"""
from ._gatekind import GateKind, SINGLE_QUBIT_KINDS, CONTROLLED_KINDS
from ._qasmgenerror import QasmGenError


def _bit(arg):
    return "%s[%d]" % (arg[0].name, arg[1])


def render_instruction(kind, qargs, cargs, ccx_legacy_spacing=False):
    """Return the OPENQASM line for an instruction.

    Args:
        kind (GateKind): instruction to render.
        qargs (list): quantum operands; whole registers for a barrier.
        cargs (list[(ClassicalRegister, int)]): classical operands.
        ccx_legacy_spacing (bool): render the Toffoli with the ``' ,'``
            separator before its target.

    Returns:
        str: the newline terminated instruction.
    """
    if kind in SINGLE_QUBIT_KINDS:
        line = "%s %s;" % (kind.mnemonic, _bit(qargs[0]))
    elif kind in CONTROLLED_KINDS:
        line = "%s %s, %s;" % (kind.mnemonic, _bit(qargs[0]), _bit(qargs[1]))
    elif kind is GateKind.CCX:
        separator = " ," if ccx_legacy_spacing else ", "
        line = "%s %s, %s%s%s;" % (kind.mnemonic, _bit(qargs[0]),
                                   _bit(qargs[1]), separator, _bit(qargs[2]))
    elif kind is GateKind.MEASURE:
        line = "%s %s -> %s;" % (kind.mnemonic, _bit(qargs[0]), _bit(cargs[0]))
    else:
        line = "%s %s;" % (kind.mnemonic,
                           ",".join(register.name for register in qargs))
    return line + "\n"


class GateRecord(object):
    """Immutable unit of program text."""

    __slots__ = ('_kind', '_qargs', '_cargs', '_rendered')

    def __init__(self, kind, qargs, cargs=(), ccx_legacy_spacing=False):
        """Create a new gate record, rendering its OPENQASM line.

        Args:
            kind (GateKind): instruction kind
            qargs (list): quantum operands; whole registers for a barrier
            cargs (list[(ClassicalRegister, int)]): classical operands
            ccx_legacy_spacing (bool): render a Toffoli with the ``' ,'``
                separator before its target.

        Raises:
            QasmGenError: if kind is not a GateKind or the number of
                operands does not match it.
        """
        if not isinstance(kind, GateKind):
            raise QasmGenError("%r is not a GateKind" % (kind,))
        qargs = tuple(qargs)
        cargs = tuple(cargs)
        if kind is GateKind.BARRIER:
            if not qargs or cargs:
                raise QasmGenError("barrier expects one or more quantum "
                                   "registers and no classical bits")
        elif len(qargs) != kind.num_qubits or len(cargs) != kind.num_clbits:
            raise QasmGenError("%s expects %d qubit(s) and %d clbit(s)"
                               % (kind.label, kind.num_qubits, kind.num_clbits))
        self._kind = kind
        self._qargs = qargs
        self._cargs = cargs
        self._rendered = render_instruction(kind, qargs, cargs,
                                            ccx_legacy_spacing)

    @property
    def kind(self):
        """Return the GateKind of the record."""
        return self._kind

    @property
    def name(self):
        """Return the OPENQASM mnemonic of the record."""
        return self._kind.mnemonic

    @property
    def label(self):
        """Return the human readable operation name."""
        return self._kind.label

    @property
    def qargs(self):
        return self._qargs

    @property
    def cargs(self):
        return self._cargs

    @property
    def rendered(self):
        """Return the newline terminated OPENQASM line."""
        return self._rendered

    def qasm(self):
        """Return the OPENQASM line without its trailing newline."""
        return self._rendered.rstrip("\n")

    def __eq__(self, other):
        if not isinstance(other, GateRecord):
            return NotImplemented
        return (self._kind is other._kind and self._qargs == other._qargs and
                self._cargs == other._cargs and
                self._rendered == other._rendered)

    def __hash__(self):
        return hash((self._kind, self._qargs, self._cargs, self._rendered))

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__qualname__, self.label,
                               self._rendered)
