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
Unit tests for the compile plugin.
"""
import os
import sys
from unittest import TextTestRunner

from test.framework.utilities import EnhancedTestCase, FakeProbe, TestLoaderFiltered

from jvmbuild.framework.compiletask import RESOURCE_COMPILE, SOURCE_COMPILE, TEST_COMPILE
from jvmbuild.framework.plugin import CompilePlugin, Project
from jvmbuild.tools.build_log import JvmBuildError, ToolchainNotFoundError
from jvmbuild.tools.toolchain.installation import AvailableJavaInstallations
from jvmbuild.tools.toolchain.javaversion import JavaVersion


JDKS = {
    '/opt/jdk7': ('1.7.0_80', 'OpenJDK 7'),
    '/opt/jdk8': ('1.8.0_292', 'OpenJDK 8'),
    '/opt/jdk11': ('11.0.2', 'OpenJDK 11'),
}


class PluginTest(EnhancedTestCase):
    """Tests for compile plugin."""

    def setUp(self):
        """Set up test."""
        super(PluginTest, self).setUp()
        self.probe = FakeProbe(JDKS)

    def test_project(self):
        """Test Project class."""
        root = Project('root', properties={'java7Home': '/opt/jdk7'})
        self.assertEqual(root.target_compatibility, JavaVersion('1.7'))
        self.assertTrue(root.root_project is root)

        sub = Project('sub', target_compatibility='1.8', parent=root)
        self.assertEqual(sub.target_compatibility, JavaVersion(8))
        self.assertTrue(sub.root_project is root)
        self.assertTrue(Project('subsub', parent=sub).root_project is root)

        calls = []
        sub.after_evaluate(calls.append)
        self.assertEqual(calls, [])
        sub.evaluate()
        self.assertEqual(calls, [sub])

        self.assertErrorRegex(JvmBuildError, "Project sub is already evaluated", sub.evaluate)
        self.assertErrorRegex(JvmBuildError, "Project sub is already evaluated, too late", sub.after_evaluate,
                              calls.append)

    def test_apply_root_project(self):
        """Test applying plugin to root project, with Java homes from project properties & environment."""
        environ = {'JVMBUILD_TESTJAVAHOME': '/opt/jdk11'}
        root = Project('root', target_compatibility='1.6', properties={'java7Home': '/opt/jdk7'})
        compile_java = root.compile_task('compileJava', SOURCE_COMPILE)
        compile_groovy = root.compile_task('compileGroovy', RESOURCE_COMPILE)
        compile_test = root.compile_task('compileTestJava', TEST_COMPILE)
        test = root.test_task('test')

        plugin = CompilePlugin(probe=self.probe, environ=environ, current_java_home='/opt/jdk8')
        plugin.apply(root)

        registry = plugin.registry
        self.assertEqual([inst.java_home for inst in registry.installations], ['/opt/jdk8', '/opt/jdk7'])
        self.assertEqual(registry.java_installation_for_test.java_home, '/opt/jdk11')

        # nothing is configured until project is evaluated
        self.assertFalse(compile_java.options.fork)
        root.evaluate()

        for task in [compile_java, compile_groovy, compile_test]:
            self.assertTrue(task.options.fork)
            self.assertEqual(task.options.encoding, 'utf-8')
            self.assertEqual(task.options.compiler_args, ['-Xlint:-options', '-Xlint:-path'])
            self.assertEqual(task.options.fork_options.java_home, None)
            self.assertEqual(task.inputs, {'javaInstallation': 'OpenJDK 8'})

        self.assertTrue(compile_java.options.incremental)
        self.assertTrue(compile_test.options.incremental)
        self.assertFalse(compile_groovy.options.incremental)
        self.assertEqual(compile_groovy.groovy_options.encoding, 'utf-8')

        self.assertEqual(test.executable, '/opt/jdk11/bin/java')
        self.assertEqual(test.inputs, {'javaInstallation': 'OpenJDK 11'})

    def test_apply_subprojects(self):
        """Test applying plugin with an explicit registry to several projects."""
        registry = AvailableJavaInstallations(['/opt/jdk11'], None, self.probe, '/opt/jdk8')
        plugin = CompilePlugin(registry=registry)

        root = Project('root')
        legacy = Project('legacy', target_compatibility='1.6', parent=root)
        modern = Project('modern', target_compatibility='11', parent=root)
        tasks = {}
        for project in [legacy, modern]:
            tasks[project.name] = project.compile_task('compileJava', SOURCE_COMPILE)
            plugin.apply(project)
            project.evaluate()

        self.assertEqual(tasks['legacy'].options.fork_options.java_home, None)
        self.assertEqual(tasks['legacy'].inputs, {'javaInstallation': 'OpenJDK 8'})
        self.assertEqual(tasks['modern'].options.fork_options.java_home, '/opt/jdk11')
        self.assertEqual(tasks['modern'].inputs, {'javaInstallation': 'OpenJDK 11'})

    def test_apply_properties_file(self):
        """Test applying plugin with project properties read from file."""
        props_file = os.path.join(self.test_prefix, 'build.yml')
        with open(props_file, 'w') as fh:
            fh.write("java7Home: /opt/jdk7\n")

        os.environ['JAVA_HOME'] = '/opt/jdk8'
        root = Project('root')
        plugin = CompilePlugin(probe=self.probe, properties_file=props_file)
        plugin.apply(root)
        self.assertEqual([inst.display_name for inst in plugin.registry.installations], ['OpenJDK 8', 'OpenJDK 7'])
        self.assertTrue(plugin.registry.java_installation_for_test.current)

        # properties of root project win over those in properties file
        with open(props_file, 'w') as fh:
            fh.write("java7Home: /opt/jdk7\ntestJavaHome: /opt/jdk7\n")
        root = Project('root', properties={'testJavaHome': '/opt/jdk11'})
        plugin = CompilePlugin(probe=self.probe, properties_file=props_file)
        plugin.apply(root)
        self.assertEqual(plugin.registry.java_installation_for_test.display_name, 'OpenJDK 11')

        plugin = CompilePlugin(probe=self.probe, properties_file=os.path.join(self.test_prefix, 'nosuchfile.yml'))
        self.assertErrorRegex(JvmBuildError, "Failed to read properties file", plugin.apply, Project('root'))

    def test_apply_errors(self):
        """Test error handling when applying plugin."""
        root = Project('root')
        sub = Project('sub', parent=root)

        plugin = CompilePlugin(probe=self.probe, environ={}, current_java_home='/opt/jdk8')
        error_pattern = "Plugin must be applied to root project root before project sub"
        self.assertErrorRegex(JvmBuildError, error_pattern, plugin.apply, sub)

        plugin = CompilePlugin(environ={}, current_java_home='/opt/jdk8')
        error_pattern = "No probe available to detect Java installations for project root"
        self.assertErrorRegex(JvmBuildError, error_pattern, plugin.apply, root)

        plugin = CompilePlugin(probe=self.probe, environ={})
        error_pattern = r"\$JAVA_HOME is not set"
        self.assertErrorRegex(JvmBuildError, error_pattern, plugin.apply, root)

        # missing JDK for target version surfaces when project is evaluated
        plugin = CompilePlugin(probe=self.probe, environ={}, current_java_home='/opt/jdk8')
        project = Project('modern', target_compatibility='11')
        task = project.compile_task('compileJava', SOURCE_COMPILE)
        plugin.apply(project)
        error_pattern = "No Java installation found which supports Java version 11; available installations: OpenJDK 8"
        self.assertErrorRegex(ToolchainNotFoundError, error_pattern, project.evaluate)
        self.assertFalse(task.options.fork)


def suite():
    """ returns all the testcases in this module """
    return TestLoaderFiltered().loadTestsFromTestCase(PluginTest, sys.argv[1:])


if __name__ == '__main__':
    res = TextTestRunner(verbosity=1).run(suite())
    sys.exit(len(res.failures))
