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
Module providing custom exceptions.
"""
import inspect
import os

from jvmbuild.base import fancylogger


def _raising_frame(exc):
    """Return frame of the code that created the specified exception, skipping the exception constructors."""
    frame = inspect.currentframe().f_back
    while frame.f_back is not None and frame.f_locals.get('self') is exc:
        frame = frame.f_back
    return frame


def _location(frame, top_pkg_names):
    """
    Return location info for specified frame, e.g. "jvmbuild/tools/config.py:123 in resolve";
    the file path is shortened to start with the (innermost) top-level package it is located in.
    """
    path = frame.f_code.co_filename
    path_parts = path.split(os.path.sep)
    top_indices = [idx for idx, part in enumerate(path_parts) if part in top_pkg_names]
    if top_indices:
        path = os.path.join(*path_parts[max(top_indices):])

    return "%s:%s in %s" % (path, frame.f_lineno, frame.f_code.co_name)


class LoggedException(Exception):
    """Exception that logs its message, including where it was raised from, when it is created."""

    # name of logging method to use, must accept a message string
    LOGGING_METHOD_NAME = 'error'
    # top-level package names used to shorten location info; None implies not to include location info
    LOC_INFO_TOP_PKG_NAMES = []

    def __init__(self, msg, *args, logger=None):
        """
        Constructor.
        :param msg: exception message
        :param args: list of formatting arguments for exception message
        :param logger: logger to use (default: logger named after the module the exception is raised from)
        """
        if args:
            msg = msg % args

        frame = _raising_frame(self)
        try:
            if self.LOC_INFO_TOP_PKG_NAMES is not None:
                msg = "%s (at %s)" % (msg, _location(frame, self.LOC_INFO_TOP_PKG_NAMES))
            if logger is None:
                logger = fancylogger.getLogger(frame.f_globals.get('__name__'), fname=False)
        finally:
            # avoid reference cycles via frame objects
            del frame

        getattr(logger, self.LOGGING_METHOD_NAME)(msg)

        super(LoggedException, self).__init__(msg)
