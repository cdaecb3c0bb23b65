# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""sinogeom: sampling geometries of 2D tomographic sinograms.

Describes parallel beam, fan beam and mojette sinograms, and computes
derived quantities like sample positions, view angles, fan angles and
detector coordinates from the primary acquisition parameters.
"""

from os import path

__all__ = ('geometry', 'util')

# Set package version
curdir = path.abspath(path.dirname(__file__))

with open(path.join(curdir, 'VERSION')) as version_file:
    __version__ = version_file.read().strip()

from . import util
from .geometry import *
from .util.exceptions import *

# Add `test` function to global namespace so users can run `sinogeom.test()`
from .util.testutils import test

__all__ += geometry.__all__
__all__ += util.exceptions.__all__
__all__ += ('test',)
