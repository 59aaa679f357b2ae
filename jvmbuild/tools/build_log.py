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
jvmbuild error handling: exit codes, the JvmBuildError class and its derivatives.

Errors are logged when they are created (see LoggedException), using the jvmbuild log format.
"""
from enum import IntEnum

from jvmbuild.base import fancylogger
from jvmbuild.base.exceptions import LoggedException

# jvmbuild message prefix
JVMBUILD_MSG_PREFIX = "=="

LOGGING_FORMAT = JVMBUILD_MSG_PREFIX + ' %(asctime)s %(filename)s:%(lineno)s %(levelname)s %(message)s'
fancylogger.setLogFormat(LOGGING_FORMAT)


class JvmBuildExit(IntEnum):
    """
    Table of exit codes
    """
    ERROR = 1
    # configuration errors
    OPTION_ERROR = 2
    VALUE_ERROR = 3
    # toolchain errors
    TOOLCHAIN_NOT_FOUND = 10


class JvmBuildError(LoggedException):
    """
    JvmBuildError is raised when jvmbuild runs into something it can not deal with.
    """
    LOC_INFO_TOP_PKG_NAMES = ['jvmbuild']

    def __init__(self, msg, *args, exit_code=JvmBuildExit.ERROR, **kwargs):
        """Constructor: initialise JvmBuildError instance."""
        if args:
            msg = msg % args
        LoggedException.__init__(self, msg, **kwargs)
        self.msg = msg
        self.exit_code = exit_code

    def __str__(self):
        """Return error message, without location info."""
        return self.msg


class ToolchainNotFoundError(JvmBuildError):
    """
    Raised when none of the known Java installations can compile for a requested target version.
    """

    def __init__(self, requested_version, installations, **kwargs):
        """
        :param requested_version: target version that could not be satisfied
        :param installations: list of all known installations
        """
        self.requested_version = requested_version
        self.installations = list(installations)
        known = ', '.join(inst.display_name for inst in self.installations) or '(none)'
        msg = "No Java installation found which supports Java version %s; available installations: %s"
        JvmBuildError.__init__(self, msg, requested_version, known,
                               exit_code=JvmBuildExit.TOOLCHAIN_NOT_FOUND, **kwargs)
