#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class ObjUtil:
    """Utility methods for object operations"""

    @staticmethod
    def isContainer(obj):
        """Return true if obj is a List or Dict"""
        from .List import List
        from .Dict import Dict
        return isinstance(obj, (List, Dict))

    @staticmethod
    def equals(a, b):
        """Element equality used by List and Dict.

        Nested containers compare by reference, never structurally, and
        bools are never equal to numbers.
        """
        if a is None:
            return b is None
        if b is None:
            return False
        if ObjUtil.isContainer(a) or ObjUtil.isContainer(b):
            return a is b
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        return a == b

    @staticmethod
    def toStr(obj):
        """Best effort text for values the encoder has no JSON form for"""
        if obj is None:
            return "null"
        if isinstance(obj, bool):
            return "true" if obj else "false"
        if isinstance(obj, str):
            return obj
        if hasattr(obj, "toStr") and callable(obj.toStr):
            return obj.toStr()
        return str(obj)
