"""Timezone independent calendar days and their compact radix 36 codes.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .codec import *      # pylint: disable=wildcard-import
from .datatype import *   # pylint: disable=wildcard-import
from .isodate import *    # pylint: disable=wildcard-import
from .clock import *      # pylint: disable=wildcard-import
from .civildate import *  # pylint: disable=wildcard-import
from .exception import *  # pylint: disable=wildcard-import
