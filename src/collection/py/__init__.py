#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# collection - generic List and Dict containers

# Base types
from .Obj import Obj
from .ObjUtil import ObjUtil
from .Kind import Kind

# Collections
from .List import List
from .Dict import Dict
from .Tools import mapList, mapDict

# Serialization
from .JsonEncoder import JsonEncoder

# Environment
from .Env import Env
from .Log import Log, LogLevel

# Errors
from .Err import Err, UninitErr, IndexErr, EmptyErr, UnknownKeyErr, UnknownValErr, TypeErr, ParseErr
