# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Sinogram geometries and their derived properties."""

__all__ = ()


from .beam import *
__all__ += beam.__all__

from .record import *
__all__ += record.__all__

from .formulas import *
__all__ += formulas.__all__

from .properties import *
__all__ += properties.__all__

from .constructors import *
__all__ += constructors.__all__
