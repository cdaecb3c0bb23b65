# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Setup script for sinogeom.

Installation command::

    pip install [--user] [-e] .
"""

import os

from setuptools import setup, find_packages


root_path = os.path.dirname(__file__)


def read_requirements(fname):
    with open(os.path.join(root_path, fname)) as req_file:
        return [line.strip() for line in req_file if line.strip()]


requires = read_requirements('requirements.txt')
test_requires = read_requirements('test_requirements.txt')

with open(os.path.join(root_path, 'sinogeom', 'VERSION')) as version_file:
    version = version_file.read().strip()

long_description = """
sinogeom describes the sampling geometry of 2D tomographic sinograms for
parallel beam, fan beam and mojette systems.

A geometry stores the primary acquisition parameters (number and spacing of
radial samples, number of views, orbit, source and detector distances).
Derived quantities like sample positions, view angles, fan angles, the
radial field of view or detector element positions are computed from these
parameters on access, so that reconstruction and projection code can rely
on a single source of truth.
"""

setup(
    name='sinogeom',

    version=version,

    description='Sinogram geometries for 2D tomography',
    long_description=long_description,

    author='sinogeom contributors',

    license='MPL-2.0',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Scientific/Engineering :: Medical Science Apps.',

        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',

        'Programming Language :: Python :: 3',

        'Operating System :: OS Independent'
    ],

    keywords='tomography sinogram geometry fan-beam parallel-beam imaging',

    packages=find_packages(exclude=['*test*']),
    package_dir={'sinogeom': 'sinogeom'},
    package_data={'sinogeom': ['VERSION']},
    include_package_data=True,

    python_requires='>=3.6',
    install_requires=requires,
    extras_require={
        'testing': test_requires,
    },
)
