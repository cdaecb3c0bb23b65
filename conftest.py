# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test configuration file."""

from sinogeom.util.pytest_config import collect_ignore

pytest_plugins = ['sinogeom.util.pytest_config']
