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
This script can be used to install jvmbuild, e.g. using:
  pip install --user .
or
  pip install -e .
"""
import os

from setuptools import setup

from jvmbuild.tools.version import VERSION


def read(fname):
    """Read contents of given file."""
    with open(os.path.join(os.path.dirname(__file__), fname)) as fh:
        return fh.read()


jvmbuild_packages = [
    "jvmbuild", "jvmbuild.base", "jvmbuild.framework", "jvmbuild.tools", "jvmbuild.tools.toolchain",
]

setup(
    name="jvmbuild",
    version=str(VERSION),
    description="""jvmbuild selects which installed JDK compiles each compile task of a JVM build, \
and configures forked, deterministic compiler invocations.""",
    long_description=read("README.rst"),
    license="GPLv2",
    keywords="software build building compilation java jdk toolchain",
    packages=jvmbuild_packages,
    install_requires=[
        "coloredlogs",
        "humanfriendly",
        "PyYAML",
    ],
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Build Tools",
    ],
    python_requires=">=3.6",
    test_suite="test.framework.suite",
    zip_safe=False,
)
