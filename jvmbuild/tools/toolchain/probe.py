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
Contract for probing Java installations.

How a Java home is verified and its version determined is up to the host build tool;
it provides a JavaInstallationProbe subclass that implements _probe.
"""
import os
from collections import namedtuple

from jvmbuild.base import fancylogger
from jvmbuild.tools.toolchain.javaversion import JavaVersion


_log = fancylogger.getLogger('probe', fname=False)


class ProbedInstallation(namedtuple('ProbedInstallation', 'java_home java_version display_name')):
    """Verified description of a Java installation, as returned by a probe."""
    __slots__ = ()

    def __new__(cls, java_home, java_version, display_name):
        return super(ProbedInstallation, cls).__new__(cls, java_home, JavaVersion(java_version), display_name)


def normalize_java_home(java_home):
    """Return normalized path for specified Java home, which identifies an installation"""
    return os.path.normpath(os.path.abspath(os.path.expanduser(java_home)))


class JavaInstallationProbe(object):
    """
    Base class for probing Java installations; results are memoized per (normalized) Java home.
    Failures are not cached, and propagate unchanged.
    """

    def __init__(self):
        self._cache = {}

    def probe(self, java_home):
        """
        Probe Java installation at specified location.

        :param java_home: path to Java home directory
        :return: ProbedInstallation instance
        """
        java_home = normalize_java_home(java_home)
        if java_home in self._cache:
            _log.debug("Using cached probe result for %s", java_home)
        else:
            res = self._probe(java_home)
            _log.debug("Probed Java installation at %s: %s", java_home, res)
            self._cache[java_home] = res

        return self._cache[java_home]

    def _probe(self, java_home):
        """Probe Java installation at specified (normalized) location, should return a ProbedInstallation"""
        raise NotImplementedError
