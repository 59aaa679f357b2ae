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
Java language versions, as used for target compatibility and installation versions.

'1.N' and 'N' denote the same version (e.g. '1.8' and '8'),
full version strings as reported by a JDK (e.g. '1.8.0_292', '11.0.2') are accepted too.
"""
import re
from functools import total_ordering

from jvmbuild.tools.build_log import JvmBuildError, JvmBuildExit


# versions up to this one are rendered using the legacy '1.N' scheme
LAST_LEGACY_VERSION = 8

# leading dot-separated numbers of a version string (e.g. 1.8.0 in 1.8.0_292), followed by an optional suffix
VERSION_REGEX = re.compile(r'^(?P<numbers>[0-9]+(\.[0-9]+)*)(?P<suffix>.*)$')


@total_ordering
class JavaVersion(object):
    """A Java language version, identified by its major version number."""

    def __init__(self, value):
        if isinstance(value, JavaVersion):
            self.major = value.major
        elif isinstance(value, int) and not isinstance(value, bool):
            if value < 1:
                raise JvmBuildError("Invalid Java version: %s", value, exit_code=JvmBuildExit.VALUE_ERROR)
            self.major = value
        elif isinstance(value, str):
            self.major = self._parse(value)
        else:
            raise JvmBuildError("Can't interpret %s (type: %s) as a Java version", value, type(value).__name__,
                                exit_code=JvmBuildExit.VALUE_ERROR)

    @staticmethod
    def _parse(vstring):
        """Determine major version number from a version string"""
        vstring = vstring.strip()
        res = VERSION_REGEX.match(vstring)
        # a suffix like '_292' or '+8' is fine, but not a dangling or non-numeric version component
        if res is None or res.group('suffix').startswith('.'):
            raise JvmBuildError("Invalid Java version: '%s'", vstring, exit_code=JvmBuildExit.VALUE_ERROR)

        numbers = [int(x) for x in res.group('numbers').split('.')]
        if numbers[0] == 1 and len(numbers) > 1:
            # legacy scheme: 1.8, 1.8.0_292 => 8
            major = numbers[1]
        elif numbers == [1] and res.group('suffix'):
            major = None
        else:
            major = numbers[0]

        if not major:
            raise JvmBuildError("Invalid Java version: '%s'", vstring, exit_code=JvmBuildExit.VALUE_ERROR)

        return major

    def __eq__(self, other):
        if not isinstance(other, JavaVersion):
            return NotImplemented
        return self.major == other.major

    def __lt__(self, other):
        if not isinstance(other, JavaVersion):
            return NotImplemented
        return self.major < other.major

    def __hash__(self):
        return hash(self.major)

    def __str__(self):
        if self.major <= LAST_LEGACY_VERSION:
            return '1.%d' % self.major
        return str(self.major)

    def __repr__(self):
        return "JavaVersion('%s')" % self


VERSION_1_7 = JavaVersion(7)

# oldest version that is still supported as compilation target
MINIMUM_TARGET_VERSION = VERSION_1_7


def effective_target_version(target_compatibility, floor=MINIMUM_TARGET_VERSION):
    """
    Return version to compile for, given the declared target compatibility of a project;
    never older than the floor version.
    """
    return max(JavaVersion(target_compatibility), JavaVersion(floor))
