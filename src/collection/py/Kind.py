#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import math
import struct
from .Obj import Obj


class Kind(Obj):
    """
    Kind tags the element type of a List (or the value type of a Dict).

    Python containers carry no generic parameter, so operations that only
    make sense for some element types (sort, sum, min, ...) resolve the
    Kind once at the start of the call and fail fast when it does not fit.
    A Kind is either declared on the container with ``of=`` or inferred
    from the current elements.
    """

    # (category, bits, signed)
    _TYPES = {
        'int8':    ('int', 8, True),
        'int16':   ('int', 16, True),
        'int32':   ('int', 32, True),
        'int64':   ('int', 64, True),
        'int':     ('int', None, True),
        'uint8':   ('int', 8, False),
        'uint16':  ('int', 16, False),
        'uint32':  ('int', 32, False),
        'uint64':  ('int', 64, False),
        'uint':    ('int', 64, False),
        'float32': ('float', 32, True),
        'float64': ('float', 64, True),
        'str':     ('str', None, False),
        'bool':    ('bool', None, False),
        'list':    ('list', None, False),
        'dict':    ('dict', None, False),
        'obj':     ('obj', None, False),
        'none':    ('none', None, False),
    }

    _kinds = {}

    def __init__(self, name):
        super().__init__()
        category, bits, signed = Kind._TYPES[name]
        self._name = name
        self._category = category
        self._bits = bits
        self._signed = signed

    #################################################################
    # Lookup
    #################################################################

    @staticmethod
    def find(name, checked=True):
        """Find a kind by name like "int8" or "float32" """
        kind = Kind._kinds.get(name)
        if kind is None and checked:
            from .Err import ParseErr
            raise ParseErr(f"Unknown kind: {name}")
        return kind

    @staticmethod
    def fromType(t):
        """Resolve a declared element type to a Kind.

        Accepts a Kind, a kind name, or a Python type.  Python types
        without a dedicated kind resolve to obj.
        """
        if t is None:
            return None
        if isinstance(t, Kind):
            return t
        if isinstance(t, str):
            return Kind.find(t)
        if t is bool:
            return Kind._kinds['bool']
        if t is int:
            return Kind._kinds['int']
        if t is float:
            return Kind._kinds['float64']
        if t is str:
            return Kind._kinds['str']
        from .List import List
        from .Dict import Dict
        if isinstance(t, type) and issubclass(t, List):
            return Kind._kinds['list']
        if isinstance(t, type) and issubclass(t, Dict):
            return Kind._kinds['dict']
        return Kind._kinds['obj']

    @staticmethod
    def ofVal(val):
        """Get the kind of a single value"""
        # bool is an int subclass, check it first
        if isinstance(val, bool):
            return Kind._kinds['bool']
        if isinstance(val, int):
            return Kind._kinds['int']
        if isinstance(val, float):
            return Kind._kinds['float64']
        if isinstance(val, str):
            return Kind._kinds['str']
        from .List import List
        from .Dict import Dict
        if isinstance(val, List):
            return Kind._kinds['list']
        if isinstance(val, Dict):
            return Kind._kinds['dict']
        return Kind._kinds['obj']

    @staticmethod
    def infer(values):
        """Infer the common kind of values.

        Ints mixed with floats widen to float64, any other mix is obj and
        no values at all is none.
        """
        result = None
        for val in values:
            kind = Kind.ofVal(val)
            if result is None or result is kind:
                result = kind
            elif result.isNumeric() and kind.isNumeric():
                result = Kind._kinds['float64']
            else:
                return Kind._kinds['obj']
        if result is None:
            return Kind._kinds['none']
        return result

    #################################################################
    # Identity
    #################################################################

    def name(self):
        return self._name

    def bits(self):
        """Width in bits, or None when unbounded or not numeric"""
        return self._bits

    def isInt(self):
        return self._category == 'int'

    def isFloat(self):
        return self._category == 'float'

    def isNone(self):
        return self._category == 'none'

    def isNumeric(self):
        """Numeric kinds plus none (an empty list has nothing to reject)"""
        return self._category in ('int', 'float', 'none')

    def isSortable(self):
        return self.isNumeric() or self._category == 'str'

    def toStr(self):
        return self._name

    #################################################################
    # Values
    #################################################################

    def accepts(self, val):
        """Return true if val is a value of this kind.

        Fixed width integers must also be in range; float kinds take ints.
        """
        if self._category == 'obj':
            return True
        if self._category == 'none':
            return val is None
        if isinstance(val, bool):
            return self._category == 'bool'
        if self.isInt():
            if not isinstance(val, int):
                return False
            if self._bits is None:
                return True
            if self._signed:
                half = 1 << (self._bits - 1)
                return -half <= val < half
            return 0 <= val < (1 << self._bits)
        if self.isFloat():
            return isinstance(val, (int, float))
        return Kind.ofVal(val) is self

    def zero(self):
        """Zero of this kind, used for empty aggregates"""
        if self.isFloat():
            return 0.0
        return 0

    def coerce(self, val):
        """Fit a numeric result into this kind's width.

        Fixed width integers wrap around like two's complement, float32
        rounds through single precision.  Other kinds pass through.
        """
        if val is None:
            return None
        if self.isInt():
            val = int(val)
            if self._bits is None:
                return val
            mask = (1 << self._bits) - 1
            val = val & mask
            if self._signed and val >= (1 << (self._bits - 1)):
                val -= (1 << self._bits)
            return val
        if self.isFloat():
            val = float(val)
            if self._bits == 32 and math.isfinite(val):
                try:
                    return struct.unpack('f', struct.pack('f', val))[0]
                except OverflowError:
                    return math.copysign(math.inf, val)
            return val
        return val


for _name in Kind._TYPES:
    Kind._kinds[_name] = Kind(_name)
del _name
