# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Exceptions for errors raised by qasmgen.
"""


class QasmGenError(Exception):
    """Base class for errors raised by qasmgen."""

    def __init__(self, *message):
        """Set the error message."""
        super().__init__(' '.join(message))
        self.message = ' '.join(message)

    def __str__(self):
        """Return the message."""
        return repr(self.message)


class CircuitOperandError(QasmGenError):
    """Raised when a gate operand is rejected by the circuit.

    Attributes:
        operand: the offending operand, usually a ``(Register, int)`` tuple
            or a bare register.
        reason (str): human readable description of the failure.
    """

    def __init__(self, operand, reason):
        super().__init__(reason)
        self.operand = operand
        self.reason = reason


class IndexOutOfRangeError(CircuitOperandError, IndexError):
    """Raised when an operand position is not within ``[0, size)``."""
    pass


class UnknownRegisterError(CircuitOperandError):
    """Raised when an operand register is not part of the circuit."""
    pass


class RegisterSetEmptyError(UnknownRegisterError):
    """Raised when the circuit owns no register of the required kind."""
    pass


class QasmGenUserConfigError(QasmGenError):
    """Raised when an error is encountered reading a user config file."""
    pass
