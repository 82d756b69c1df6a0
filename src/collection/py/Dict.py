#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Dict(Obj):
    """Unordered key/value fields over a Python dict.

    Keys hash like Python dict keys, so 1, 1.0 and True name the same
    field even though ObjUtil.equals keeps bools apart from numbers as
    values:

        Dict.make().set(1, "a").set(True, "b").count()   # 1

    The optional ``of`` declares the value Kind.
    """

    def __init__(self, val=None, of=None):
        super().__init__()
        from .Kind import Kind
        self._val = val
        self._of = Kind.fromType(of)  # value kind

    #################################################################
    # Constructors
    #################################################################

    @staticmethod
    def make(of=None):
        """Create an empty dict"""
        return Dict({}, of)

    @staticmethod
    def fromDict(d, of=None):
        """Wrap a Python dict, the dict itself becomes the backing store.

        Other mappings are copied; None gives an uninitialized dict.
        """
        if d is None or isinstance(d, dict):
            return Dict(d, of)
        return Dict(dict(d), of)

    #################################################################
    # Checks
    #################################################################

    def _assert(self):
        """Raise UninitErr if there is no backing dict"""
        if self._val is None:
            from .Err import UninitErr
            raise UninitErr("dictionary is not initialized")

    def _checkKey(self, key):
        if not self.keyExists(key):
            from .Err import UnknownKeyErr
            from .JsonEncoder import JsonEncoder
            raise UnknownKeyErr(f"key {JsonEncoder.encode(key)} does not exist")

    #################################################################
    # Modification
    #################################################################

    def set(self, key, val):
        """Set the value under key, overwriting any existing one"""
        self._assert()
        self._val[key] = val
        return self

    def unset(self, *keys):
        """Remove the fields with the given keys, in order.

        An absent key raises UnknownKeyErr, keys removed before it stay
        removed.
        """
        self._assert()
        for key in keys:
            self._checkKey(key)
            del self._val[key]
        return self

    def clear(self):
        self._assert()
        self._val = {}
        return self

    #################################################################
    # Access
    #################################################################

    def get(self, key):
        """Get value by key, raise UnknownKeyErr if not found"""
        self._assert()
        self._checkKey(key)
        return self._val[key]

    def keyExists(self, key):
        self._assert()
        return key in self._val

    def count(self):
        self._assert()
        return len(self._val)

    def isEmpty(self):
        return self.count() == 0

    def of(self):
        """Declared value Kind or None"""
        return self._of

    def toDict(self):
        """The backing Python dict"""
        self._assert()
        return self._val

    def toStr(self):
        """Serialize as JSON, see JsonEncoder"""
        self._assert()
        from .JsonEncoder import JsonEncoder
        return JsonEncoder.encode(self)

    def keys(self):
        """Return keys as a new List"""
        self._assert()
        from .List import List
        return List(list(self._val.keys()))

    def vals(self):
        """Return values as a new List"""
        self._assert()
        from .List import List
        return List(list(self._val.values()), self._of)

    #################################################################
    # Comparison
    #################################################################

    def equals(self, that):
        """Same count and every key of this dict maps to an equal value in that.

        Only this dict's keys are looked up; a key missing from that reads
        as None there.
        """
        self._assert()
        if not isinstance(that, Dict):
            return False
        if self.count() != that.count():
            return False
        from .ObjUtil import ObjUtil
        for k, v in self._val.items():
            if not ObjUtil.equals(v, that._val.get(k)):
                return False
        return True

    def contains(self, val):
        """Return true if any field holds val"""
        self._assert()
        from .ObjUtil import ObjUtil
        for item in self._val.values():
            if ObjUtil.equals(item, val):
                return True
        return False

    def keyOf(self, val):
        """Return a key whose value equals val, any one if several do"""
        self._assert()
        from .ObjUtil import ObjUtil
        for k, item in self._val.items():
            if ObjUtil.equals(item, val):
                return k
        from .Err import UnknownValErr
        from .JsonEncoder import JsonEncoder
        raise UnknownValErr(f"value {JsonEncoder.encode(val)} not found")

    #################################################################
    # Copies
    #################################################################

    def clone(self):
        """Shallow copy, nested containers are shared"""
        self._assert()
        return Dict(dict(self._val), self._of)

    def merge(self, that):
        """New dict of these fields overwritten by that's"""
        self._assert()
        result = self.clone()
        that.forEach(lambda k, v: result.set(k, v))
        return result

    def pluck(self, *keys):
        """New dict holding only the given keys"""
        self._assert()
        result = Dict({}, self._of)
        for key in keys:
            result.set(key, self.get(key))
        return result

    #################################################################
    # Functional
    #################################################################

    def forEach(self, f):
        """Call f(key, val) for each field"""
        self._assert()
        for k, v in self._val.items():
            f(k, v)
        return self

    def map(self, f):
        """New dict with the same keys and values f(key, val)"""
        self._assert()
        return Dict({k: f(k, v) for k, v in self._val.items()}, self._of)

    #################################################################
    # Python protocols
    #################################################################

    def __len__(self):
        return self.count()

    def __iter__(self):
        """Iterate keys like dict"""
        self._assert()
        return iter(self._val)

    def __contains__(self, key):
        return self.keyExists(key)

    def __getitem__(self, key):
        return self.get(key)
