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
Compile (and test) tasks of the host build tool, and the configuration applied to them.

Every compile task gets the same deterministic settings: a forked compiler,
UTF-8 encoding, and lint suppression for warnings unrelated to code correctness.
The JDK to compile with is picked from the available Java installations,
based on the target compatibility of the project the task belongs to.
"""
import os

from jvmbuild.base import fancylogger
from jvmbuild.tools.build_log import JvmBuildError
from jvmbuild.tools.toolchain.javaversion import effective_target_version


_log = fancylogger.getLogger('compiletask', fname=False)

# task kinds
SOURCE_COMPILE = 'source-compile'
RESOURCE_COMPILE = 'resource-compile'
TEST_COMPILE = 'test-compile'
COMPILE_TASK_KINDS = [SOURCE_COMPILE, RESOURCE_COMPILE, TEST_COMPILE]

ENCODING = 'utf-8'
# suppress warnings on use of deprecated options & nonexistent classpath entries
COMPILER_ARGS = ['-Xlint:-options', '-Xlint:-path']

# name of input property that records which Java installation a task uses
JAVA_INSTALLATION_INPUT = 'javaInstallation'


class ForkOptions(object):
    """Options for a forked compiler process."""

    def __init__(self):
        self.java_home = None


class CompileOptions(object):
    """Options for invoking the Java compiler."""

    def __init__(self):
        self.fork = False
        self.encoding = None
        self.compiler_args = []
        self.incremental = False
        self.fork_options = ForkOptions()


class GroovyCompileOptions(object):
    """Additional options for joint compilation of Groovy sources."""

    def __init__(self):
        self.encoding = None


class CompileTask(object):
    """
    A compile task of the host build tool.
    Only resource compile tasks carry Groovy compile options.
    """

    def __init__(self, name, kind, project):
        if kind not in COMPILE_TASK_KINDS:
            raise JvmBuildError("Unknown compile task kind '%s' for task %s, should be one of: %s",
                                kind, name, ', '.join(COMPILE_TASK_KINDS))
        self.name = name
        self.kind = kind
        self.project = project
        self.options = CompileOptions()
        self.inputs = {}
        if kind == RESOURCE_COMPILE:
            self.groovy_options = GroovyCompileOptions()
        else:
            self.groovy_options = None

    def __repr__(self):
        return "CompileTask(%s, %s)" % (self.name, self.kind)


class TestTask(object):
    """A test execution task of the host build tool."""

    def __init__(self, name, project):
        self.name = name
        self.project = project
        self.executable = None
        self.inputs = {}

    def __repr__(self):
        return "TestTask(%s)" % self.name


def apply_task_kind_options(task):
    """Apply options that are specific to the kind of compile task."""
    if task.kind in [SOURCE_COMPILE, TEST_COMPILE]:
        task.options.incremental = True
    elif task.kind == RESOURCE_COMPILE:
        task.groovy_options.encoding = ENCODING


def installation_for_fingerprint(task, jdk_for_compilation, registry):
    """
    Return Java installation to record as input of specified compile task.
    Resource compilation runs partly in the build process, so it depends on the current installation.
    """
    if task.kind == RESOURCE_COMPILE:
        return registry.current_java_installation
    return jdk_for_compilation


def configure_compile_task(task, options, registry):
    """
    Configure compiler invocation for specified compile task.

    :param task: CompileTask instance
    :param options: CompileOptions instance to update (typically task.options)
    :param registry: AvailableJavaInstallations instance to pick the JDK from
    """
    target_version = effective_target_version(task.project.target_compatibility)
    # resolve first, so a task is left untouched if no suitable JDK is available
    jdk = registry.jdk_for_compilation(target_version)

    options.fork = True
    options.encoding = ENCODING
    options.compiler_args = list(COMPILER_ARGS)

    # when compiling with the current JDK, any Java home set elsewhere is left as is
    if not jdk.current:
        options.fork_options.java_home = jdk.java_home

    fingerprint = installation_for_fingerprint(task, jdk, registry)
    task.inputs[JAVA_INSTALLATION_INPUT] = fingerprint.display_name

    _log.debug("Configured %s of project %s: target Java %s, compiling with %s", task, task.project.name,
               target_version, jdk)


def configure_test_task(task, registry):
    """
    Configure specified test task to run with the Java installation for tests.
    """
    jdk = registry.java_installation_for_test
    if not jdk.current:
        task.executable = os.path.join(jdk.java_home, 'bin', 'java')
    task.inputs[JAVA_INSTALLATION_INPUT] = jdk.display_name

    _log.debug("Configured %s of project %s: running tests with %s", task, task.project.name, jdk)
