#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# List.map and Dict.map keep the source's kind; these build a container
# whose elements may be of any other kind.


def mapList(lst, f, of=None):
    """New List of f(value) for each element of lst, lst unchanged"""
    from .List import List
    result = List([], of)
    lst.forEach(lambda value: result.add(f(value)))
    return result


def mapDict(d, f, of=None):
    """New Dict with the keys of d and values f(key, val), d unchanged"""
    from .Dict import Dict
    result = Dict({}, of)
    d.forEach(lambda key, val: result.set(key, f(key, val)))
    return result
