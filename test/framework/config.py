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
Unit tests for jvmbuild configuration.
"""
import os
import sys
from unittest import TextTestRunner

from test.framework.utilities import EnhancedTestCase, TestLoaderFiltered

from jvmbuild.tools.build_log import JvmBuildError
from jvmbuild.tools.config import JavaHomesConfig, env_var_name, read_properties_file, resolve_java_home_path


def write_file(path, txt):
    """Write specified text to file."""
    with open(path, 'w') as fh:
        fh.write(txt)


class ConfigTest(EnhancedTestCase):
    """Tests for jvmbuild configuration."""

    def test_env_var_name(self):
        """Test env_var_name function."""
        self.assertEqual(env_var_name('java7Home'), 'JVMBUILD_JAVA7HOME')
        self.assertEqual(env_var_name('testJavaHome'), 'JVMBUILD_TESTJAVAHOME')

    def test_resolve_java_home_path(self):
        """Test resolve_java_home_path function."""
        environ = {}
        self.assertEqual(resolve_java_home_path('java7Home', environ=environ), None)
        self.assertEqual(resolve_java_home_path('java7Home', properties={}, environ=environ), None)

        # environment is considered if there's no build property
        environ['JVMBUILD_JAVA7HOME'] = '/opt/jdk7'
        self.assertEqual(resolve_java_home_path('java7Home', environ=environ), '/opt/jdk7')

        # build property wins over environment
        props = {'java7Home': '/usr/lib/jvm/java-7'}
        self.assertEqual(resolve_java_home_path('java7Home', properties=props, environ=environ), '/usr/lib/jvm/java-7')

        # blank values are the same as no value
        for value in ['', '   ', None]:
            props = {'java7Home': value}
            self.assertEqual(resolve_java_home_path('java7Home', properties=props, environ={}), None)
            self.assertEqual(resolve_java_home_path('java7Home', environ={'JVMBUILD_JAVA7HOME': value or ''}), None)

        # surrounding whitespace is stripped, ~ is expanded
        props = {'testJavaHome': '  ~/jdks/11  '}
        expected = os.path.join(os.path.expanduser('~'), 'jdks', '11')
        self.assertEqual(resolve_java_home_path('testJavaHome', properties=props), expected)

        # os.environ is used by default
        os.environ['JVMBUILD_TESTJAVAHOME'] = '/opt/jdk11'
        self.assertEqual(resolve_java_home_path('testJavaHome'), '/opt/jdk11')

        error_pattern = "Value for java7Home should be a string, found 7"
        self.assertErrorRegex(JvmBuildError, error_pattern, resolve_java_home_path, 'java7Home',
                              properties={'java7Home': 7})

    def test_java_homes_config(self):
        """Test JavaHomesConfig.resolve."""
        environ = {
            'JAVA_HOME': '/opt/jdk8',
            'JVMBUILD_TESTJAVAHOME': '/opt/jdk9',
        }
        config = JavaHomesConfig.resolve(properties={'java7Home': '/opt/jdk7'}, environ=environ)
        self.assertEqual(config.java7_home, '/opt/jdk7')
        self.assertEqual(config.test_java_home, '/opt/jdk9')
        self.assertEqual(config.current_java_home, '/opt/jdk8')
        self.assertEqual(config.java_homes_for_compilation, ['/opt/jdk7'])

        # unset overrides never show up as Java homes to compile with
        config = JavaHomesConfig.resolve(environ={'JAVA_HOME': '/opt/jdk8', 'JVMBUILD_JAVA7HOME': ''})
        self.assertEqual(config.java7_home, None)
        self.assertEqual(config.test_java_home, None)
        self.assertEqual(config.java_homes_for_compilation, [])

        # explicitly specified current Java home wins over $JAVA_HOME
        config = JavaHomesConfig.resolve(environ={'JAVA_HOME': '/opt/jdk8'}, current_java_home='/opt/jdk10')
        self.assertEqual(config.current_java_home, '/opt/jdk10')

        os.environ['JAVA_HOME'] = '/usr/lib/jvm/default'
        self.assertEqual(JavaHomesConfig.resolve().current_java_home, '/usr/lib/jvm/default')

        error_pattern = r"Java home of current installation could not be determined, \$JAVA_HOME is not set"
        self.assertErrorRegex(JvmBuildError, error_pattern, JavaHomesConfig.resolve, environ={})
        self.assertErrorRegex(JvmBuildError, error_pattern, JavaHomesConfig.resolve, environ={'JAVA_HOME': ' '})

    def test_read_properties_file(self):
        """Test read_properties_file function."""
        props_file = os.path.join(self.test_prefix, 'build.yml')
        write_file(props_file, "java7Home: /opt/jdk7\ntestJavaHome: /opt/jdk11\n")
        props = read_properties_file(props_file)
        self.assertEqual(props, {'java7Home': '/opt/jdk7', 'testJavaHome': '/opt/jdk11'})

        config = JavaHomesConfig.resolve(properties=props, environ={'JAVA_HOME': '/opt/jdk8'})
        self.assertEqual(config.java_homes_for_compilation, ['/opt/jdk7'])
        self.assertEqual(config.test_java_home, '/opt/jdk11')

        write_file(props_file, '')
        self.assertEqual(read_properties_file(props_file), {})

        write_file(props_file, "- /opt/jdk7\n- /opt/jdk8\n")
        error_pattern = "Properties file .*/build.yml should contain a mapping, found list"
        self.assertErrorRegex(JvmBuildError, error_pattern, read_properties_file, props_file)

        write_file(props_file, "java7Home: [/opt/jdk7\n")
        self.assertErrorRegex(JvmBuildError, "Failed to read properties file", read_properties_file, props_file)

        no_such_file = os.path.join(self.test_prefix, 'nosuchfile.yml')
        self.assertErrorRegex(JvmBuildError, "Failed to read properties file", read_properties_file, no_such_file)


def suite():
    """ returns all the testcases in this module """
    return TestLoaderFiltered().loadTestsFromTestCase(ConfigTest, sys.argv[1:])


if __name__ == '__main__':
    res = TextTestRunner(verbosity=1).run(suite())
    sys.exit(len(res.failures))
