# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Standard gates."""
from . import barrier
from . import ccx
from . import ch
from . import cx
from . import cy
from . import cz
from . import h
from . import iden
from . import s
from . import t
from . import x
from . import y
from . import z
