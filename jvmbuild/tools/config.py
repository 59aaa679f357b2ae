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
jvmbuild configuration: Java home directories to consider for compilation and test execution.

Overrides are resolved once at startup from build properties and the environment,
into a JavaHomesConfig instance that is passed around explicitly.
"""
import os
from collections import namedtuple

import yaml

from jvmbuild.base import fancylogger
from jvmbuild.tools.build_log import JvmBuildError, JvmBuildExit


_log = fancylogger.getLogger('config', fname=False)

CONFIG_ENV_VAR_PREFIX = 'JVMBUILD'

# names of build properties that specify Java home overrides
JAVA7_HOME_PROPERTY = 'java7Home'
TEST_JAVA_HOME_PROPERTY = 'testJavaHome'

JAVA_HOME_ENV_VAR = 'JAVA_HOME'


def env_var_name(property_name):
    """Return name of environment variable that corresponds to specified build property (e.g. JVMBUILD_JAVA7HOME)"""
    return '%s_%s' % (CONFIG_ENV_VAR_PREFIX, property_name.upper())


def _validate_java_home(name, value):
    """
    Validate value for a Java home directory setting.
    Unset/blank values are returned as None (no override).
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise JvmBuildError("Value for %s should be a string, found %s (type: %s)", name, value, type(value).__name__,
                            exit_code=JvmBuildExit.VALUE_ERROR)
    value = value.strip()
    if not value:
        return None
    return os.path.expanduser(value)


def resolve_java_home_path(property_name, properties=None, environ=None):
    """
    Resolve Java home path for specified build property.
    Build properties take precedence over the environment; None is returned if neither specifies a value.

    :param property_name: name of build property (e.g. 'java7Home')
    :param properties: build properties (dict-like)
    :param environ: environment to consider (defaults to os.environ)
    """
    if properties is None:
        properties = {}
    if environ is None:
        environ = os.environ

    if property_name in properties:
        value = _validate_java_home(property_name, properties[property_name])
        source = "build property"
    else:
        var_name = env_var_name(property_name)
        value = _validate_java_home(var_name, environ.get(var_name))
        source = "$%s" % var_name

    if value is None:
        _log.debug("No value found for %s", property_name)
    else:
        _log.info("Using %s for %s (via %s)", value, property_name, source)

    return value


class JavaHomesConfig(namedtuple('JavaHomesConfig', 'java7_home test_java_home current_java_home')):
    """
    Resolved Java home directories:
      * java7_home: Java home for compiling against an older Java version (or None)
      * test_java_home: Java home for running tests (or None)
      * current_java_home: Java home of the installation running the build
    """
    __slots__ = ()

    @property
    def java_homes_for_compilation(self):
        """Override Java homes to consider for compilation, in order of preference"""
        return [home for home in [self.java7_home] if home is not None]

    @classmethod
    def resolve(cls, properties=None, environ=None, current_java_home=None):
        """
        Resolve Java home configuration from build properties and environment.

        :param properties: build properties (dict-like)
        :param environ: environment to consider (defaults to os.environ)
        :param current_java_home: Java home of running installation (defaults to $JAVA_HOME)
        """
        if environ is None:
            environ = os.environ

        if current_java_home is None:
            current_java_home = _validate_java_home(JAVA_HOME_ENV_VAR, environ.get(JAVA_HOME_ENV_VAR))
        else:
            current_java_home = _validate_java_home('current Java home', current_java_home)

        if current_java_home is None:
            raise JvmBuildError("Java home of current installation could not be determined, $%s is not set",
                                JAVA_HOME_ENV_VAR, exit_code=JvmBuildExit.OPTION_ERROR)

        return cls(
            java7_home=resolve_java_home_path(JAVA7_HOME_PROPERTY, properties=properties, environ=environ),
            test_java_home=resolve_java_home_path(TEST_JAVA_HOME_PROPERTY, properties=properties, environ=environ),
            current_java_home=current_java_home,
        )


def read_properties_file(path):
    """
    Read build properties from specified YAML file, which should contain a mapping.
    """
    try:
        with open(path, 'r') as fh:
            properties = yaml.safe_load(fh)
    except (IOError, OSError, yaml.YAMLError) as err:
        raise JvmBuildError("Failed to read properties file %s: %s", path, err, exit_code=JvmBuildExit.OPTION_ERROR)

    # an empty file yields None
    if properties is None:
        properties = {}
    elif not isinstance(properties, dict):
        raise JvmBuildError("Properties file %s should contain a mapping, found %s", path, type(properties).__name__,
                            exit_code=JvmBuildExit.OPTION_ERROR)

    _log.debug("Properties read from %s: %s", path, properties)
    return properties
