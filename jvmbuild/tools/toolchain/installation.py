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
Registry of Java installations available to compile (and test) with.

The installation running the build is always known, and is the only one flagged as 'current';
all other installations are overrides that are only used via an explicit Java home.
"""
from collections import namedtuple

from jvmbuild.base import fancylogger
from jvmbuild.tools.build_log import ToolchainNotFoundError
from jvmbuild.tools.toolchain.javaversion import JavaVersion
from jvmbuild.tools.toolchain.probe import normalize_java_home


_log = fancylogger.getLogger('installation', fname=False)


class JavaInstallation(namedtuple('JavaInstallation', 'current java_home java_version display_name')):
    """A located, version-identified Java installation."""
    __slots__ = ()

    def supports(self, java_version):
        """Check whether this installation can compile for the specified Java version"""
        return self.java_version >= JavaVersion(java_version)

    def __str__(self):
        return "%s (%s)" % (self.display_name, self.java_home)


class AvailableJavaInstallations(object):
    """
    Java installations known for this build, and policy to pick one to compile with.
    Read-only after construction.
    """

    def __init__(self, java_homes_for_compilation, java_home_for_test, probe, current_java_home):
        """
        :param java_homes_for_compilation: Java homes to consider next to the current one, in order of preference
                                           (unset entries are ignored)
        :param java_home_for_test: Java home to run tests with (None implies current installation)
        :param probe: JavaInstallationProbe instance used to verify Java homes
        :param current_java_home: Java home of the installation running the build
        """
        self._current = self._detect(probe, current_java_home, current=True)

        overrides = []
        known_homes = set([self._current.java_home])
        for java_home in java_homes_for_compilation or []:
            if not java_home:
                continue
            installation = self._detect(probe, java_home)
            if installation.java_home in known_homes:
                _log.debug("Java installation at %s is already known, not registering it again", java_home)
            else:
                known_homes.add(installation.java_home)
                overrides.append(installation)
        self._overrides = tuple(overrides)

        if java_home_for_test and normalize_java_home(java_home_for_test) != self._current.java_home:
            self._for_test = self._detect(probe, java_home_for_test)
        else:
            self._for_test = self._current

        _log.info("Available Java installations: %s", ', '.join(str(inst) for inst in self.installations))

    @staticmethod
    def _detect(probe, java_home, current=False):
        """Probe specified Java home and return corresponding JavaInstallation instance"""
        res = probe.probe(java_home)
        return JavaInstallation(current, normalize_java_home(res.java_home), res.java_version, res.display_name)

    @property
    def installations(self):
        """All known Java installations: the current one first, followed by the overrides"""
        return [self._current] + list(self._overrides)

    @property
    def current_java_installation(self):
        """Java installation running the build"""
        return self._current

    @property
    def java_installation_for_test(self):
        """Java installation to run tests with"""
        return self._for_test

    def jdk_for_compilation(self, java_version):
        """
        Return Java installation to use to compile for specified Java version.

        The current installation is preferred when it supports the requested version, to avoid forking
        a different JDK; otherwise the first override (in registration order) that supports it is used.
        """
        java_version = JavaVersion(java_version)

        if self._current.supports(java_version):
            res = self._current
        else:
            candidates = [inst for inst in self._overrides if inst.supports(java_version)]
            if not candidates:
                raise ToolchainNotFoundError(java_version, self.installations)
            res = candidates[0]

        _log.info("Using Java installation %s to compile for Java %s", res, java_version)
        return res
