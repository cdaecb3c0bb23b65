# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test configuration file."""

from os import path

import numpy as np
import pytest

import sinogeom


# --- Add numpy and sinogeom to all doctests ---


@pytest.fixture(autouse=True)
def _add_doctest_np_sinogeom(doctest_namespace):
    doctest_namespace['np'] = np
    doctest_namespace['sinogeom'] = sinogeom


# --- Ignored files ---


this_dir = path.dirname(__file__)
sinogeom_root = path.abspath(path.join(this_dir, '..', '..'))
collect_ignore = [path.join(sinogeom_root, 'setup.py')]

