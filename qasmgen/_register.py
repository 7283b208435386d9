# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""
Base register reference object.
"""
import re
import itertools

from ._qasmgenerror import QasmGenError, IndexOutOfRangeError

# OPENQASM identifiers: lowercase first letter, then letters, digits or '_'.
_NAME_FORMAT = re.compile('[a-z][a-zA-Z0-9_]*$')


class Register(object):
    """Implement a generic register."""

    # Counter for the number of instances in this class.
    instances_counter = itertools.count()
    # Prefix to use for auto naming.
    prefix = 'reg'
    # OPENQASM declaration keyword.
    type = None

    def __init__(self, size, name=None):
        """Create a new generic register.

        Args:
            size (int): number of bits/qubits held by the register.
            name (str or None): OPENQASM identifier of the register. If
                None, an automatically generated name is assigned.

        Raises:
            QasmGenError: if the name or the size are not valid.
        """
        if name is None:
            name = '%s%i' % (self.prefix, next(self.instances_counter))

        if not isinstance(name, str):
            raise QasmGenError("The register name should be a string "
                               "(or None to autogenerate a name).")

        if _NAME_FORMAT.match(name) is None:
            raise QasmGenError("%s is an invalid OPENQASM register name." % name)

        if isinstance(size, bool) or not isinstance(size, int):
            raise QasmGenError("register size must be an integer")
        if size <= 0:
            raise QasmGenError("register size must be positive")

        self._name = name
        self._size = size

    @property
    def name(self):
        """Return the register name."""
        return self._name

    @property
    def size(self):
        """Return the register size."""
        return self._size

    def __repr__(self):
        """Return the official string representing the register."""
        return "%s(%d, '%s')" % (self.__class__.__qualname__,
                                 self.size, self.name)

    def __len__(self):
        """Return register size"""
        return self.size

    def __eq__(self, other):
        """Two registers are equal if they have the same kind, name and size.

        Args:
            other (Register): other Register

        Returns:
            bool: are self and other equal.
        """
        if not isinstance(other, Register):
            return NotImplemented
        return (self.type == other.type and
                self.name == other.name and
                self.size == other.size)

    def __hash__(self):
        """Make object is hashable, based on the name and size to hash."""
        return hash((self.type, self.name, self.size))

    def check_range(self, j):
        """Check that j is a valid index into self.

        Raises:
            IndexOutOfRangeError: if j is outside ``[0, size)``.
        """
        if j < 0 or j >= self.size:
            raise IndexOutOfRangeError(
                (self, j),
                "index %d out of range for register '%s' of size %d"
                % (j, self.name, self.size))

    def __getitem__(self, key):
        """
        Arg:
            key (int): index of the bit/qubit to be retrieved.

        Returns:
            tuple[Register, int]: a tuple in the form `(self, key)`.

        Raises:
            QasmGenError: if the `key` is not an integer.
            IndexOutOfRangeError: if the `key` is not in the range
                `(0, self.size)`.
        """
        if isinstance(key, bool) or not isinstance(key, int):
            raise QasmGenError("expected integer index into register")
        self.check_range(key)
        return self, key

    def __iter__(self):
        """
        Returns:
            iterator: an iterator over the bits/qubits of the register, in the
                form `tuple (Register, int)`.
        """
        return zip([self]*self.size, range(self.size))

    def qasm(self):
        """Return OPENQASM string for this register."""
        return "%s %s[%d];" % (self.type, self.name, self.size)
