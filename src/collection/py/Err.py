#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Err(Exception, Obj):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        Obj.__init__(self)
        self._msg = msg
        self._cause = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        # Empty string when no message provided, not null
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def toStr(self):
        qname = f"collection::{type(self).__name__}"
        if self._msg:
            return f"{qname}: {self._msg}"
        return qname

    def __str__(self):
        return self.toStr()


class UninitErr(Err, RuntimeError):
    """Operation on a container whose backing store was never established"""
    pass


class IndexErr(Err, IndexError):
    """Index out of bounds error"""
    pass


class EmptyErr(Err, IndexError):
    """Removal from an empty container"""
    pass


class UnknownKeyErr(Err, KeyError):
    """Key lookup on a missing key"""
    pass


class UnknownValErr(Err, ValueError):
    """Reverse lookup of a value no field holds"""
    pass


class TypeErr(Err, TypeError):
    """Element kind does not support the operation"""
    pass


class ParseErr(Err, ValueError):
    """Malformed name or value, like an unknown kind or log level"""
    pass
