#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import logging
from .Obj import Obj


class LogLevel(Obj):
    """Severity of a log message: debug < info < warn < err < silent"""

    _levels = {}

    def __init__(self, name, ordinal, pyLevel):
        self._name = name
        self._ordinal = ordinal
        self._pyLevel = pyLevel
        LogLevel._levels[name] = self

    @staticmethod
    def fromStr(name, checked=True):
        """Parse a level name like "warn", case insensitive"""
        level = LogLevel._levels.get(str(name).strip().lower())
        if level is None and checked:
            from .Err import ParseErr
            raise ParseErr(f"Unknown log level: {name}")
        return level

    @staticmethod
    def debug():
        return LogLevel._debug

    @staticmethod
    def info():
        return LogLevel._info

    @staticmethod
    def warn():
        return LogLevel._warn

    @staticmethod
    def err():
        return LogLevel._err

    @staticmethod
    def silent():
        return LogLevel._silent

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def pyLevel(self):
        """Matching level of the logging module"""
        return self._pyLevel

    def toStr(self):
        return self._name


LogLevel._debug = LogLevel("debug", 0, logging.DEBUG)
LogLevel._info = LogLevel("info", 1, logging.INFO)
LogLevel._warn = LogLevel("warn", 2, logging.WARNING)
LogLevel._err = LogLevel("err", 3, logging.ERROR)
LogLevel._silent = LogLevel("silent", 4, logging.CRITICAL + 1)


class Log(Obj):
    """
    Log is a named logger on top of the logging module.

    Until a level is set explicitly the level comes from the log.level
    config key, looked up again on every check so a reloaded Env takes
    effect.  An unknown level name falls back to info with one warning.
    """

    _logs = {}
    _badLevels = set()

    def __init__(self, name):
        self._name = name
        self._level = None
        self._pyLogger = logging.getLogger(name)

    @staticmethod
    def get(name):
        """Get or create the log with the given name"""
        log = Log._logs.get(name)
        if log is None:
            log = Log(name)
            Log._logs[name] = log
        return log

    def name(self):
        return self._name

    def level(self, value=None):
        """Get the level, or set it with log.level(LogLevel.debug())"""
        if value is not None:
            self._level = value
            return None
        if self._level is not None:
            return self._level
        return self._configLevel()

    def _configLevel(self):
        from .Env import Env
        name = Env.cur().config("log.level", "info")
        level = LogLevel.fromStr(name, False)
        if level is None:
            if name not in Log._badLevels:
                Log._badLevels.add(name)
                self._pyLogger.warning("Unknown log.level %r, using info", name)
            level = LogLevel.info()
        return level

    def isEnabled(self, level):
        return level.ordinal() >= self.level().ordinal()

    def debug(self, msg, err=None):
        self._log(LogLevel._debug, msg, err)

    def info(self, msg, err=None):
        self._log(LogLevel._info, msg, err)

    def warn(self, msg, err=None):
        self._log(LogLevel._warn, msg, err)

    def err(self, msg, err=None):
        self._log(LogLevel._err, msg, err)

    def _log(self, level, msg, err):
        if self.isEnabled(level):
            self._pyLogger.log(level.pyLevel(), msg, exc_info=err)

    def toStr(self):
        return self._name
