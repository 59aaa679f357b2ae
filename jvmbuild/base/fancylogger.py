# #
# Copyright 2009-2025 Ghent University
#
# This file is part of EasyBuild,
# originally created by the HPC team of Ghent University (http://ugent.be/hpc/en),
# with support of Ghent University (http://ugent.be/hpc),
# the Flemish Supercomputer Centre (VSC) (https://www.vscentrum.be),
# Flemish Research Foundation (FWO) (http://www.fwo.be/en)
# and the Department of Economy, Science and Innovation (EWI) (http://www.ewi-vlaanderen.be/en).
#
# https://github.com/easybuilders/easybuild
#
# EasyBuild is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation v2.
#
# EasyBuild is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with EasyBuild.  If not, see <http://www.gnu.org/licenses/>.
# #
"""
Logging on top of the Python logging module, shared by all jvmbuild modules.

All loggers live below the 'fancyroot' logger, which logs to screen (stderr) by default.
Log messages can be sent to a rotating log file as well, and screen output can be colorized (via coloredlogs).

usage:

>>> from jvmbuild.base import fancylogger
>>> _log = fancylogger.getLogger('installation', fname=False)
>>> fancylogger.logToFile('/tmp/jvmbuild.log')
>>> fancylogger.setLogLevelDebug()
"""
import inspect
import logging
import logging.handlers
import os
import sys
from collections import namedtuple

import coloredlogs
import humanfriendly.terminal


ROOT_LOGGER_NAME = 'fancyroot'

DEFAULT_LOGGING_FORMAT = '%(asctime)-15s %(levelname)-10s %(name)-15s %(message)s'

MAX_BYTES = 100 * 1024 * 1024  # max bytes in a file with rotating file handler
BACKUPCOUNT = 10  # number of rotating log files to save

# poor man's enum
Colorize = namedtuple('Colorize', 'AUTO ALWAYS NEVER')('auto', 'always', 'never')

# format used for handlers that are enabled from now on
_log_format = DEFAULT_LOGGING_FORMAT

# handlers enabled via logToScreen/logToFile, indexed by (logger name, target)
_handlers = {}


def getLogger(name=None, fname=False):
    """
    Return logger below the root fancylogger.
    If fname is True, the name of the calling function is included in the logger name.
    """
    nameparts = [ROOT_LOGGER_NAME]
    if name:
        nameparts.append(name)
    if fname:
        nameparts.append(inspect.stack()[1][3])

    return logging.getLogger('.'.join(nameparts))


def _formatter_class(colorize, stream):
    """Determine which formatter class to use for logging to the specified stream."""
    if colorize == Colorize.ALWAYS:
        return coloredlogs.ColoredFormatter
    elif colorize == Colorize.AUTO:
        if humanfriendly.terminal.terminal_supports_colors(stream):
            return coloredlogs.ColoredFormatter
        return logging.Formatter
    elif colorize == Colorize.NEVER:
        return logging.Formatter
    else:
        raise ValueError("Unknown value for colorize: '%s' (should be one of: %s)" % (colorize, ', '.join(Colorize)))


def _toggle_handler(target, enable, name, create_handler):
    """
    Enable (or disable) handler logging to specified target, for logger with specified name.
    Enabling twice yields the same handler; returns handler (None if there was nothing to disable).
    """
    logger = getLogger(name)
    key = (logger.name, target)
    handler = _handlers.get(key)

    if enable:
        if handler is None:
            handler = create_handler()
            logger.addHandler(handler)
            _handlers[key] = handler
    elif handler is not None:
        logger.removeHandler(handler)
        handler.close()
        del _handlers[key]

    return handler


def logToScreen(enable=True, name=None, stdout=False, colorize=Colorize.NEVER):
    """
    Enable (or disable) logging to screen, i.e. to stderr (or stdout, if 'stdout' is True).
    With 'colorize', log messages are colorized using ANSI terminal escape sequences.
    """
    stream = sys.stdout if stdout else sys.stderr
    formatter_class = _formatter_class(colorize, stream)

    def create_handler():
        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter_class(_log_format))
        return handler

    return _toggle_handler('screen_%s' % ('stdout' if stdout else 'stderr'), enable, name, create_handler)


def logToFile(filename, enable=True, name=None, max_bytes=MAX_BYTES, backup_count=BACKUPCOUNT):
    """
    Enable (or disable) logging to file with given name.
    The log file is rotated when it reaches max_bytes, keeping the last backup_count files
    (max_bytes=0 implies no rotation).
    """
    def create_handler():
        # log file is created by the handler, but the directory it lives in is not
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(filename, maxBytes=max_bytes, backupCount=backup_count,
                                                       encoding='utf-8')
        handler.setFormatter(logging.Formatter(_log_format))
        return handler

    return _toggle_handler('file_%s' % filename, enable, name, create_handler)


def setLogLevel(level):
    """Set log level for all loggers, by name (e.g. 'DEBUG') or value."""
    if isinstance(level, str):
        level_value = logging.getLevelName(level.upper())
        if not isinstance(level_value, int):
            raise ValueError("Unknown log level: %s" % level)
        level = level_value

    getLogger().setLevel(level)


def setLogLevelDebug():
    """Shorthand for setting log level to DEBUG"""
    setLogLevel('DEBUG')


def setLogLevelError():
    """Shorthand for setting log level to ERROR"""
    setLogLevel('ERROR')


def setLogFormat(f_format):
    """Set the log format (only affects handlers that are enabled afterwards)."""
    global _log_format
    _log_format = f_format


def disableDefaultHandlers():
    """Stop logging to screen via the default handler of the root fancylogger"""
    logToScreen(enable=False)


# log to screen by default
logToScreen(enable=True)
