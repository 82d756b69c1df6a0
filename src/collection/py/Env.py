#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os
from .Obj import Obj


class Env(Obj):
    """Env resolves configuration for the collection package"""

    _instance = None

    # Prefix of environment variables that override config.props
    VAR_PREFIX = "COLLECTION_"

    def __init__(self, workDir=None):
        super().__init__()
        self._workDir = workDir
        self._propsCache = None

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    @staticmethod
    def reset(env=None):
        """Replace the current Env, or drop it so the next cur() reloads"""
        Env._instance = env

    def workDir(self):
        """Get working directory path, etc/ is resolved against it."""
        if self._workDir is not None:
            return self._workDir
        return os.getcwd()

    def configFile(self):
        """Path of etc/collection/config.props"""
        return os.path.join(self.workDir(), "etc", "collection", "config.props")

    def props(self):
        """Load config.props, cached for the life of this Env.

        Returns:
            dict of str to str, empty when the file does not exist
        """
        if self._propsCache is None:
            props = {}
            warnings = []
            path = self.configFile()
            if os.path.isfile(path):
                with open(path, encoding="utf-8") as f:
                    props = Env.readProps(f.read(), path, warnings)
            self._propsCache = props
            # log.level may come from this file, warn once it is in place
            if warnings:
                from .Log import Log
                log = Log.get("collection")
                for msg in warnings:
                    log.warn(msg)
        return self._propsCache

    def config(self, key, defVal=None):
        """Get configuration value.

        Looks up COLLECTION_<KEY> in the environment (dots become
        underscores), then etc/collection/config.props, then defVal.

        Args:
            key: Config key like "log.level"
            defVal: Default value if not found

        Returns:
            Config value or default
        """
        var = Env.VAR_PREFIX + key.upper().replace(".", "_")
        val = os.environ.get(var)
        if val is not None:
            return val

        val = self.props().get(key)
        if val is not None:
            return val

        return defVal

    @staticmethod
    def readProps(content, source="props", warnings=None):
        """Parse name=value lines into a dict.

        Blank lines and lines starting with # or // are skipped.  A line
        without '=' is skipped with a warning, appended to the warnings
        list when one is given and logged right away otherwise.
        """
        result = {}
        for num, line in enumerate(content.splitlines(), 1):
            line = line.strip()
            if not line or line.startswith("#") or line.startswith("//"):
                continue
            if "=" not in line:
                msg = f"{source} [Line {num}]: invalid name/value pair"
                if warnings is not None:
                    warnings.append(msg)
                else:
                    from .Log import Log
                    Log.get("collection").warn(msg)
                continue
            name, _, val = line.partition("=")
            result[name.strip()] = val.strip()
        return result
