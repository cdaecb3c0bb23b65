# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Exceptions raised by sinogram geometries."""


__all__ = ('SinoGeometryError', 'UnknownVariantError', 'InvalidOrbitError',
           'InvalidUnitsError', 'InvalidDetectorModelError',
           'UnsupportedBeamError', 'UnknownPropertyError',
           'ShapeMismatchError', 'PropertyCollisionError')


class SinoGeometryError(Exception):
    """Base class for all sinogram geometry errors."""


class UnknownVariantError(SinoGeometryError, ValueError):
    """Exception for unrecognized geometry construction tags.

    Raised by `sino_geom` when ``how`` names neither a beam type nor
    one of the scanner presets.
    """


class InvalidOrbitError(SinoGeometryError, ValueError):
    """Exception for orbits that cannot be turned into a degree value.

    The symbolic ``'short'`` orbit is only meaningful for fan beam
    geometries, and it must be resolved before a record is built.
    """


class InvalidUnitsError(SinoGeometryError, ValueError):
    """Exception for unit tags without a known scale factor."""


class InvalidDetectorModelError(SinoGeometryError, ValueError):
    """Exception for focal spot distances other than ``0`` or ``inf``.

    ``dfs = 0`` selects an equiangular arc detector, ``dfs = inf`` a flat
    detector. Nothing in between is modelled.
    """


class UnsupportedBeamError(SinoGeometryError, ValueError):
    """Exception for formulas that are undefined for a beam type.

    For example, the fan angle ``gamma`` has no meaning for parallel
    beam geometries.
    """


class UnknownPropertyError(SinoGeometryError, AttributeError):
    """Exception for names that are neither derived nor primary fields.

    This is an `AttributeError`, so that ``hasattr`` and ``getattr`` with
    a default work as usual on `SinoGeometry` instances.
    """


class ShapeMismatchError(SinoGeometryError, ValueError):
    """Exception for point coordinate arrays of different shapes."""


class PropertyCollisionError(SinoGeometryError, ValueError):
    """Exception for derived property names that are already taken.

    Raised when a derived property is registered under the name of a
    primary field or of another derived property.
    """
