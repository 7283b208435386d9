# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

# pylint: disable=missing-docstring

from ddt import ddt, data, unpack

from qasmgen import (ClassicalRegister, QuantumCircuit, QuantumRegister,
                     GateKind, GateRecord, InstructionSet, QasmGenError,
                     IndexOutOfRangeError, UnknownRegisterError,
                     RegisterSetEmptyError)

from .common import QasmGenTestCase


@ddt
class TestStandard1Q(QasmGenTestCase):
    """Standard Extension Test. Gates with a single Qubit"""

    def setUp(self):
        super().setUp()
        self.qr = QuantumRegister(3, "q")
        self.qr2 = QuantumRegister(3, "r")
        self.cr = ClassicalRegister(3, "c")
        self.circuit = QuantumCircuit(self.qr, self.qr2, self.cr)

    @data(('h', GateKind.H, 'Hadamard', 'h q[1];\n'),
          ('x', GateKind.X, 'Pauli-X', 'x q[1];\n'),
          ('y', GateKind.Y, 'Pauli-Y', 'y q[1];\n'),
          ('z', GateKind.Z, 'Pauli-Z', 'z q[1];\n'),
          ('iden', GateKind.ID, 'Identity', 'i q[1];\n'),
          ('s', GateKind.S, 'S', 's q[1];\n'),
          ('sdg', GateKind.SDG, 'S-dagger', 'sdg q[1];\n'),
          ('t', GateKind.T, 'T', 't q[1];\n'),
          ('tdg', GateKind.TDG, 'T-dagger', 'tdg q[1];\n'))
    @unpack
    def test_single_qubit(self, method, kind, label, rendered):
        record = getattr(self.circuit, method)(self.qr[1])
        self.assertIsInstance(record, GateRecord)
        self.assertIs(record.kind, kind)
        self.assertEqual(record.label, label)
        self.assertEqual(record.rendered, rendered)
        self.assertEqual(record.qargs, (self.qr[1],))
        self.assertEqual(record.cargs, ())
        self.assertEqual(self.circuit.gate_log, (record,))

    @data('h', 'x', 'y', 'z', 'iden', 's', 'sdg', 't', 'tdg')
    def test_single_qubit_invalid(self, method):
        gate = getattr(self.circuit, method)
        self.assertRaises(IndexOutOfRangeError, gate, (self.qr, 3))
        self.assertRaises(IndexOutOfRangeError, gate, (self.qr, -1))
        self.assertRaises(UnknownRegisterError, gate, self.cr[0])
        self.assertRaises(UnknownRegisterError, gate,
                          QuantumRegister(3, 'other')[0])
        self.assertEqual(len(self.circuit), 0)

    def test_single_qubit_reg(self):
        instructions = self.circuit.h(self.qr)
        self.assertIsInstance(instructions, InstructionSet)
        self.assertEqual(len(instructions), 3)
        self.assertEqual([gate.qasm() for gate in self.circuit],
                         ['h q[0];', 'h q[1];', 'h q[2];'])

    def test_single_qubit_reg_unknown(self):
        self.assertRaises(UnknownRegisterError, self.circuit.x,
                          QuantumRegister(2, 'other'))
        self.assertEqual(len(self.circuit), 0)

    def test_barrier(self):
        record = self.circuit.barrier()
        self.assertIs(record.kind, GateKind.BARRIER)
        self.assertEqual(record.label, 'Barrier')
        self.assertEqual(record.rendered, 'barrier q,r;\n')
        self.assertEqual(record.qargs, (self.qr, self.qr2))

    def test_barrier_storage_order(self):
        qc = QuantumCircuit(self.qr2, self.cr, self.qr)
        self.assertEqual(qc.barrier().rendered, 'barrier r,q;\n')

    def test_barrier_no_qregs(self):
        qc = QuantumCircuit(self.cr)
        self.assertRaises(RegisterSetEmptyError, qc.barrier)
        self.assertEqual(len(qc), 0)


@ddt
class TestStandard2Q(QasmGenTestCase):
    """Standard Extension Test. Gates with two and three Qubits"""

    def setUp(self):
        super().setUp()
        self.qr = QuantumRegister(3, "q")
        self.qr2 = QuantumRegister(3, "r")
        self.cr = ClassicalRegister(3, "c")
        self.circuit = QuantumCircuit(self.qr, self.qr2, self.cr)

    @data(('cx', GateKind.CX, 'CNOT'),
          ('cy', GateKind.CY, 'Controlled-Y'),
          ('cz', GateKind.CZ, 'Controlled-Z'),
          ('ch', GateKind.CH, 'Controlled-H'))
    @unpack
    def test_controlled(self, method, kind, label):
        record = getattr(self.circuit, method)(self.qr[0], self.qr2[2])
        self.assertIs(record.kind, kind)
        self.assertEqual(record.label, label)
        self.assertEqual(record.rendered, '%s q[0], r[2];\n' % method)
        self.assertEqual(record.qargs, (self.qr[0], self.qr2[2]))

    @data('cx', 'cy', 'cz', 'ch')
    def test_controlled_invalid(self, method):
        gate = getattr(self.circuit, method)
        self.assertRaises(IndexOutOfRangeError, gate, (self.qr, 3), self.qr[1])
        self.assertRaises(IndexOutOfRangeError, gate, self.qr[1], (self.qr, 3))
        self.assertRaises(UnknownRegisterError, gate, self.cr[0], self.qr[1])
        self.assertRaises(UnknownRegisterError, gate, self.qr[0], self.cr[1])
        self.assertEqual(len(self.circuit), 0)

    def test_ccx(self):
        record = self.circuit.ccx(self.qr[0], self.qr[1], self.qr2[2])
        self.assertIs(record.kind, GateKind.CCX)
        self.assertEqual(record.label, 'Toffoli')
        self.assertEqual(record.rendered, 'ccx q[0], q[1], r[2];\n')
        self.assertEqual(record.qargs, (self.qr[0], self.qr[1], self.qr2[2]))

    def test_ccx_legacy_spacing(self):
        qc = QuantumCircuit(self.qr, ccx_legacy_spacing=True)
        record = qc.ccx(self.qr[0], self.qr[1], self.qr[2])
        self.assertEqual(record.rendered, 'ccx q[0], q[1] ,q[2];\n')

    def test_ccx_invalid(self):
        qc = self.circuit
        self.assertRaises(UnknownRegisterError, qc.ccx,
                          self.cr[0], self.cr[1], self.cr[2])
        self.assertRaises(IndexOutOfRangeError, qc.ccx,
                          (self.qr, 3), self.qr[1], self.qr[2])
        self.assertRaises(IndexOutOfRangeError, qc.ccx,
                          self.qr[0], self.qr[1], (self.qr2, 7))
        self.assertEqual(len(qc), 0)

    def test_measure(self):
        record = self.circuit.measure(self.qr[2], self.cr[1])
        self.assertIs(record.kind, GateKind.MEASURE)
        self.assertEqual(record.label, 'Measure')
        self.assertEqual(record.rendered, 'measure q[2] -> c[1];\n')
        self.assertEqual(record.qargs, (self.qr[2],))
        self.assertEqual(record.cargs, (self.cr[1],))

    def test_measure_reg(self):
        instructions = self.circuit.measure(self.qr2, self.cr)
        self.assertEqual(len(instructions), 3)
        self.assertEqual([gate.qasm() for gate in instructions],
                         ['measure r[0] -> c[0];', 'measure r[1] -> c[1];',
                          'measure r[2] -> c[2];'])

    def test_measure_reg_size_mismatch(self):
        cr = ClassicalRegister(2, 'd')
        qc = QuantumCircuit(self.qr, cr)
        self.assertRaises(QasmGenError, qc.measure, self.qr, cr)
        self.assertEqual(len(qc), 0)

    def test_measure_invalid(self):
        qc = self.circuit
        self.assertRaises(IndexOutOfRangeError, qc.measure,
                          (self.qr, 3), self.cr[0])
        self.assertRaises(IndexOutOfRangeError, qc.measure,
                          self.qr[0], (self.cr, 3))
        self.assertRaises(UnknownRegisterError, qc.measure,
                          self.qr[0], ClassicalRegister(3, 'd')[0])
        self.assertEqual(len(qc), 0)
