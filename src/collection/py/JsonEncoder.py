#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
JsonEncoder serializes Lists, Dicts and primitives to compact JSON text.
"""

import io
import math
import struct
from decimal import Decimal


class JsonEncoder:
    """Serializes objects to JSON compatible text."""

    def __init__(self, out, options=None):
        """Create encoder that writes to a text stream.

        Args:
            out: text stream with a write(str) method
            options: Optional dict with encoding options:
                - escapeUnicode: write non-ASCII chars as \\uXXXX (default
                  from the str.escapeUnicode config key)
        """
        self.out = out
        self.escapeUnicode = JsonEncoder._configEscapeUnicode()

        if options is not None:
            self._initOptions(options)

    @staticmethod
    def encode(obj, kind=None, options=None):
        """Encode object to string.

        Args:
            obj: Object to serialize
            kind: Optional Kind of obj, used for float32 precision
            options: Optional dict of encoding options

        Returns:
            Serialized string representation
        """
        buf = io.StringIO()
        JsonEncoder(buf, options).writeObj(obj, kind)
        return buf.getvalue()

    def writeObj(self, obj, kind=None):
        """Write object to output stream.

        Args:
            obj: Object to serialize
            kind: Optional Kind of obj
        """
        if obj is None:
            self.w("null")
            return

        # bool before int, bool is an int subclass
        if isinstance(obj, bool):
            self.w("true" if obj else "false")
            return

        if isinstance(obj, int):
            self.w(str(obj))
            return

        if isinstance(obj, str):
            self.wStrLiteral(obj)
            return

        if isinstance(obj, float):
            self._writeFloat(obj, kind)
            return

        from .List import List
        if isinstance(obj, List):
            self.writeList(obj)
            return

        from .Dict import Dict
        if isinstance(obj, Dict):
            self.writeDict(obj)
            return

        # No JSON form, write whatever text the object gives us
        from .Log import Log
        from .ObjUtil import ObjUtil
        Log.get("collection").debug(f"No JSON form for {type(obj).__name__}, writing text")
        self.w(ObjUtil.toStr(obj))

    def _writeFloat(self, val, kind=None):
        """Write float as the shortest positional decimal that reads back."""
        if kind is not None and kind.isFloat() and kind.bits() == 32:
            val = kind.coerce(val)
            if math.isfinite(val):
                self.w(JsonEncoder._positional(JsonEncoder._shortest32(val)))
                return
        if math.isnan(val):
            self.w("NaN")
        elif math.isinf(val):
            self.w("+Inf" if val > 0 else "-Inf")
        else:
            self.w(JsonEncoder._positional(repr(val)))

    @staticmethod
    def _shortest32(val):
        """Shortest digits that round trip through single precision"""
        for prec in range(1, 10):
            s = f"{val:.{prec}g}"
            if struct.unpack('f', struct.pack('f', float(s)))[0] == val:
                return s
        return repr(val)

    @staticmethod
    def _positional(s):
        # Never exponent notation, no trailing zero fraction
        return format(Decimal(s).normalize(), 'f')

    def writeList(self, lst):
        """Write List as [e1,e2,...]

        Args:
            lst: List to write
        """
        kind = lst.of()
        self.w('[')
        first = True
        for item in lst.toList():
            if first:
                first = False
            else:
                self.w(',')
            self.writeObj(item, kind)
        self.w(']')

    def writeDict(self, d):
        """Write Dict as {k1:v1,k2:v2,...}

        Keys go through writeObj too, so only str keys give valid JSON.

        Args:
            d: Dict to write
        """
        kind = d.of()
        self.w('{')
        first = True
        for key, val in d.toDict().items():
            if first:
                first = False
            else:
                self.w(',')
            self.writeObj(key)
            self.w(':')
            self.writeObj(val, kind)
        self.w('}')

    def wStrLiteral(self, s):
        """Write escaped, double quoted string literal.

        Args:
            s: String to write

        Returns:
            self for chaining
        """
        self.w('"')
        for c in s:
            code = ord(c)
            if c == '"':
                self.w('\\"')
            elif c == '\\':
                self.w('\\\\')
            elif c == '\n':
                self.w('\\n')
            elif c == '\r':
                self.w('\\r')
            elif c == '\t':
                self.w('\\t')
            elif c == '\f':
                self.w('\\f')
            elif c == '\b':
                self.w('\\b')
            elif code < 0x20:
                self.w(f'\\u{code:04x}')
            elif self.escapeUnicode and code > 0x7f:
                if code > 0xffff:
                    code -= 0x10000
                    self.w(f'\\u{0xd800 + (code >> 10):04x}')
                    self.w(f'\\u{0xdc00 + (code & 0x3ff):04x}')
                else:
                    self.w(f'\\u{code:04x}')
            else:
                self.w(c)
        self.w('"')
        return self

    def w(self, s):
        """Write string to output.

        Args:
            s: String to write

        Returns:
            self for chaining
        """
        self.out.write(s)
        return self

    def _initOptions(self, options):
        """Initialize from options dict."""
        escapeUnicode = options.get("escapeUnicode")
        if escapeUnicode is not None:
            self.escapeUnicode = bool(escapeUnicode)

    @staticmethod
    def _configEscapeUnicode():
        from .Env import Env
        val = Env.cur().config("str.escapeUnicode", "false")
        return str(val).strip().lower() == "true"
