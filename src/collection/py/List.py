#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class List(Obj):
    """Mutable ordered sequence with fluent mutation.

    The elements live in a plain Python list.  A List built with List()
    or List.fromList(None) has no backing list and every operation on it
    raises UninitErr.  Mutators return the list itself so calls chain:

        List.make(1, 2, 3).add(4).delete(0).reverse()

    The optional ``of`` declares the element Kind (a Python type, a kind
    name like "int8", or a Kind); without it the kind is inferred from the
    elements when an operation needs one.
    """

    def __init__(self, val=None, of=None):
        super().__init__()
        from .Kind import Kind
        self._val = val
        self._of = Kind.fromType(of)

    #################################################################
    # Constructors
    #################################################################

    @staticmethod
    def make(*values, of=None):
        """Create a list holding the given values"""
        return List(list(values), of)

    @staticmethod
    def repeat(value, count, of=None):
        """Create a list holding value count times"""
        if count < 0:
            from .Err import IndexErr
            raise IndexErr(f"Negative count: {count}")
        return List([value] * count, of)

    @staticmethod
    def fromList(values, of=None):
        """Wrap a Python list, the list itself becomes the backing store.

        Other iterables are copied; None gives an uninitialized list.
        """
        if values is None or isinstance(values, list):
            return List(values, of)
        return List(list(values), of)

    #################################################################
    # Checks
    #################################################################

    def _assert(self):
        """Raise UninitErr if there is no backing list"""
        if self._val is None:
            from .Err import UninitErr
            raise UninitErr("list is not initialized")

    def _checkIndex(self, index, size=None):
        """Raise IndexErr unless 0 <= index < size"""
        if size is None:
            size = len(self._val)
        if not isinstance(index, int) or isinstance(index, bool) or index < 0 or index >= size:
            from .Err import IndexErr
            raise IndexErr(f"index {index} out of bounds [0, {size})")

    def _kind(self):
        """Declared kind, or the kind of the current elements"""
        if self._of is not None:
            return self._of
        from .Kind import Kind
        return Kind.infer(self._val)

    def _checkElems(self, kind, op):
        """Raise TypeErr on the first element the declared kind rejects"""
        if self._of is None:
            return
        for i, item in enumerate(self._val):
            if not kind.accepts(item):
                from .Err import TypeErr
                from .JsonEncoder import JsonEncoder
                raise TypeErr(f"{op}: element {i} ({JsonEncoder.encode(item)}) is not {kind.name()}")

    def _numericKind(self, op):
        """Resolve the kind once and require it to be numeric"""
        kind = self._kind()
        if not kind.isNumeric():
            from .Err import TypeErr
            raise TypeErr(f"{op} requires numeric elements, not {kind.name()}")
        self._checkElems(kind, op)
        return kind

    #################################################################
    # Modification
    #################################################################

    def add(self, *values):
        """Append values to the end"""
        self._assert()
        self._val.extend(values)
        return self

    def insert(self, index, value):
        """Insert value before index, index may equal count()"""
        self._assert()
        self._checkIndex(index, len(self._val) + 1)
        self._val.insert(index, value)
        return self

    def replace(self, index, value):
        """Overwrite the element at index"""
        self._assert()
        self._checkIndex(index)
        self._val[index] = value
        return self

    def delete(self, *indices):
        """Remove the elements at the given indices.

        Indices are removed highest first so that one removal never shifts
        another, each one checked right before its own removal.  A bad
        index raises IndexErr and the removals done so far stay done.
        """
        self._assert()
        for index in sorted(indices, reverse=True):
            self._checkIndex(index)
            del self._val[index]
        return self

    def pop(self):
        """Remove and return the last element"""
        self._assert()
        if len(self._val) == 0:
            from .Err import EmptyErr
            raise EmptyErr("cannot pop from an empty list")
        return self._val.pop()

    def clear(self):
        """Remove all elements"""
        self._assert()
        self._val = []
        return self

    def sort(self):
        """Sort ascending in place, numbers by value and strs lexicographically"""
        self._assert()
        kind = self._kind()
        if not kind.isSortable():
            from .Err import TypeErr
            raise TypeErr(f"cannot sort a list of {kind.name()}")
        self._checkElems(kind, "sort")
        self._val.sort()
        return self

    def reverse(self):
        """Reverse the order in place"""
        self._assert()
        self._val.reverse()
        return self

    #################################################################
    # Access
    #################################################################

    def get(self, index):
        """Element at index, no negative indexing"""
        self._assert()
        self._checkIndex(index)
        return self._val[index]

    def count(self):
        self._assert()
        return len(self._val)

    def isEmpty(self):
        return self.count() == 0

    def of(self):
        """Declared element Kind or None"""
        return self._of

    def toList(self):
        """The backing Python list"""
        self._assert()
        return self._val

    def toStr(self):
        """Serialize as JSON, see JsonEncoder"""
        self._assert()
        from .JsonEncoder import JsonEncoder
        return JsonEncoder.encode(self)

    #################################################################
    # Comparison
    #################################################################

    def equals(self, that):
        """Same length and pairwise equal, nested containers by reference"""
        self._assert()
        if not isinstance(that, List):
            return False
        if self.count() != that.count():
            return False
        from .ObjUtil import ObjUtil
        for a, b in zip(self._val, that._val):
            if not ObjUtil.equals(a, b):
                return False
        return True

    def contains(self, value):
        return self.indexOf(value) != -1

    def indexOf(self, value):
        """Index of the first element equal to value, or -1"""
        self._assert()
        from .ObjUtil import ObjUtil
        for i, item in enumerate(self._val):
            if ObjUtil.equals(item, value):
                return i
        return -1

    #################################################################
    # Copies
    #################################################################

    def clone(self):
        """Shallow copy, nested containers are shared"""
        self._assert()
        return List(list(self._val), self._of)

    def concat(self, that):
        """New list of these elements followed by that's"""
        self._assert()
        that._assert()
        return List(self._val + that._val, self._of)

    def subList(self, start, end):
        """New list of elements [start, end).

        A negative end counts back from count(); (0, 0) copies the whole
        list.
        """
        self._assert()
        size = len(self._val)
        if start == 0 and end == 0:
            return self.clone()
        if end < 0:
            end = size + end
        from .Err import IndexErr
        if start < 0 or start > size or end < 0 or end > size:
            raise IndexErr(f"range [{start}, {end}) out of bounds [0, {size}]")
        if start > end:
            raise IndexErr(f"start {start} is past end {end}")
        return List(self._val[start:end], self._of)

    #################################################################
    # Functional
    #################################################################

    def forEach(self, f):
        """Call f(value) for each element in order"""
        self._assert()
        for item in self._val:
            f(item)
        return self

    def map(self, f):
        """New list of f(value) for each element, same kind"""
        self._assert()
        return List([f(item) for item in self._val], self._of)

    def reduce(self, init, f):
        """Left fold, acc = f(acc, value) starting from init"""
        self._assert()
        acc = init
        for item in self._val:
            acc = f(acc, item)
        return acc

    def filter(self, f):
        """New list of the elements f accepts, order kept"""
        self._assert()
        return List([item for item in self._val if f(item)], self._of)

    #################################################################
    # Numeric
    #################################################################

    def sum(self):
        """Sum of the elements, 0 when empty"""
        self._assert()
        kind = self._numericKind("sum")
        if len(self._val) == 0:
            return kind.zero()
        total = self._val[0]
        for item in self._val[1:]:
            total = total + item
        return kind.coerce(total)

    def prod(self):
        """Product of the elements, 0 when empty"""
        self._assert()
        kind = self._numericKind("prod")
        if len(self._val) == 0:
            return kind.zero()
        total = self._val[0]
        for item in self._val[1:]:
            total = total * item
        return kind.coerce(total)

    def avg(self):
        """Arithmetic mean as a float, 0 when empty"""
        self._assert()
        kind = self._numericKind("avg")
        if len(self._val) == 0:
            return 0.0
        # ints sum exactly, only the quotient goes to float
        total = 0 if kind.isInt() else 0.0
        for item in self._val:
            total += item
        result = total / len(self._val)
        if kind.isFloat():
            return kind.coerce(result)
        return result

    def min(self):
        """Smallest element, 0 when empty"""
        self._assert()
        kind = self._numericKind("min")
        if len(self._val) == 0:
            return kind.zero()
        result = self._val[0]
        for item in self._val[1:]:
            if item < result:
                result = item
        return result

    def max(self):
        """Largest element, 0 when empty"""
        self._assert()
        kind = self._numericKind("max")
        if len(self._val) == 0:
            return kind.zero()
        result = self._val[0]
        for item in self._val[1:]:
            if item > result:
                result = item
        return result

    #################################################################
    # Python protocols
    #################################################################

    def __len__(self):
        return self.count()

    def __iter__(self):
        self._assert()
        return iter(self._val)

    def __contains__(self, value):
        return self.contains(value)

    def __getitem__(self, index):
        return self.get(index)
