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
Plugin that configures compile and test tasks of a project, once the project is evaluated.

The host build tool owns the task graph; Project is the small part of it this plugin relies on.
"""
from jvmbuild.base import fancylogger
from jvmbuild.framework.compiletask import CompileTask, TestTask, apply_task_kind_options
from jvmbuild.framework.compiletask import configure_compile_task, configure_test_task
from jvmbuild.tools.build_log import JvmBuildError
from jvmbuild.tools.config import JavaHomesConfig, read_properties_file
from jvmbuild.tools.toolchain.installation import AvailableJavaInstallations
from jvmbuild.tools.toolchain.javaversion import MINIMUM_TARGET_VERSION, JavaVersion


_log = fancylogger.getLogger('plugin', fname=False)


class Project(object):
    """A (sub)project of the build, as exposed by the host build tool."""

    def __init__(self, name, target_compatibility=MINIMUM_TARGET_VERSION, properties=None, parent=None):
        self.name = name
        self.target_compatibility = JavaVersion(target_compatibility)
        self.properties = dict(properties or {})
        self.parent = parent
        self.tasks = []
        self._after_evaluate = []
        self.evaluated = False

    @property
    def root_project(self):
        """Root project of the project tree this project belongs to"""
        project = self
        while project.parent is not None:
            project = project.parent
        return project

    def add_task(self, task):
        """Register a task with this project, and return it"""
        self.tasks.append(task)
        return task

    def compile_task(self, name, kind):
        """Create and register a compile task of the specified kind"""
        return self.add_task(CompileTask(name, kind, self))

    def test_task(self, name):
        """Create and register a test task"""
        return self.add_task(TestTask(name, self))

    def after_evaluate(self, callback):
        """Register callback to run once project configuration has been finalized"""
        if self.evaluated:
            raise JvmBuildError("Project %s is already evaluated, too late to register %s", self.name, callback)
        self._after_evaluate.append(callback)

    def evaluate(self):
        """Finalize configuration of this project, and run the registered callbacks"""
        if self.evaluated:
            raise JvmBuildError("Project %s is already evaluated", self.name)
        self.evaluated = True
        for callback in self._after_evaluate:
            callback(self)


class CompilePlugin(object):
    """
    Configures compile and test tasks of the projects it is applied to.

    Java installations are either passed in explicitly, or determined when the plugin is
    applied to the root project, based on the root project properties (optionally complemented
    with properties from a YAML file) and the environment.
    """

    def __init__(self, registry=None, probe=None, environ=None, current_java_home=None, properties_file=None):
        """
        :param registry: AvailableJavaInstallations instance (determined when applied to root project if None)
        :param probe: JavaInstallationProbe instance, required if no registry is specified
        :param environ: environment to resolve Java home overrides from (defaults to os.environ)
        :param current_java_home: Java home of the installation running the build (defaults to $JAVA_HOME)
        :param properties_file: YAML file with properties that apply unless the root project specifies them
        """
        self.registry = registry
        self.probe = probe
        self.environ = environ
        self.current_java_home = current_java_home
        self.properties_file = properties_file

    def _create_registry(self, project):
        """Create registry of available Java installations for specified (root) project"""
        if self.probe is None:
            raise JvmBuildError("No probe available to detect Java installations for project %s", project.name)

        properties = {}
        if self.properties_file is not None:
            properties.update(read_properties_file(self.properties_file))
        properties.update(project.properties)

        config = JavaHomesConfig.resolve(properties=properties, environ=self.environ,
                                         current_java_home=self.current_java_home)
        return AvailableJavaInstallations(config.java_homes_for_compilation, config.test_java_home, self.probe,
                                          config.current_java_home)

    def apply(self, project):
        """Apply plugin to specified project."""
        if self.registry is None:
            if project.root_project is not project:
                raise JvmBuildError("Plugin must be applied to root project %s before project %s",
                                    project.root_project.name, project.name)
            self.registry = self._create_registry(project)

        _log.debug("Applying compile plugin to project %s", project.name)
        project.after_evaluate(self.configure_tasks)

    def configure_tasks(self, project):
        """Configure all compile and test tasks of specified project."""
        for task in project.tasks:
            if isinstance(task, CompileTask):
                configure_compile_task(task, task.options, self.registry)
                apply_task_kind_options(task)
            elif isinstance(task, TestTask):
                configure_test_task(task, self.registry)
