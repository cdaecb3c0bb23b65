# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Immutable record of the primary parameters of a sinogram geometry."""

import logging

import numpy as np

from sinogeom.geometry.beam import Beam
from sinogeom.util.exceptions import (
    InvalidDetectorModelError, InvalidOrbitError, UnknownPropertyError)
from sinogeom.util.utility import (
    indent, is_string, safe_int_conv, signature_string)


__all__ = ('SinoGeometry', 'PRIMARY_FIELDS', 'downsample')

log = logging.getLogger(__name__)


PRIMARY_FIELDS = ('beam', 'units', 'nb', 'na', 'd', 'orbit', 'orbit_start',
                  'offset', 'strip_width', 'source_offset', 'dsd', 'dod',
                  'dfs')

FAN_ONLY_FIELDS = ('source_offset', 'dsd', 'dod', 'dfs')


class SinoGeometry(object):

    """Sampling geometry of a 2D sinogram.

    A sinogram geometry stores the primary acquisition parameters of a
    parallel beam, fan beam or mojette system: the number of radial
    samples ``nb`` per view, the number of views ``na``, the radial
    sample spacing ``d``, the angular coverage and, for fan beam, the
    source and detector distances.

    All other quantities, e.g. the radial sample positions ``r`` or the
    view angles ``ar``, are derived from these parameters on every
    access. They are available as attributes and through `get`::

        sg = sino_geom('fan', nb=888)
        sg.gamma_max == sg.get('gamma_max')

    Instances are immutable. Use `replace` or `downsample` to obtain a
    modified copy.
    """

    def __init__(self, beam, nb, na, d=1.0, orbit=180.0, orbit_start=0.0,
                 offset=0.0, strip_width=None, source_offset=0.0, dsd=0.0,
                 dod=0.0, dfs=0.0, units=None):
        """Initialize a new instance.

        Parameters
        ----------
        beam : `Beam` or str
            Beam type of the geometry, e.g. ``'par'`` or ``Beam.FAN``.
        nb : positive int
            Number of radial samples per view.
        na : positive int
            Number of views.
        d : positive float, optional
            Radial sample spacing. For mojette this is the pixel size
            of the image grid.
        orbit : float, optional
            Angular coverage in degrees. Symbolic values like ``'short'``
            must be resolved by the caller, see `sino_geom_fan`.
        orbit_start : float, optional
            Angle of the first view in degrees.
        offset : float, optional
            Detector centering offset in units of ``d``, relative to the
            centerline between the two central channels.
        strip_width : positive float, optional
            Detector element width. Default: ``d``
        source_offset : float, optional
            Lateral offset of the source, fan beam only.
        dsd : positive float, optional
            Source to detector distance, fan beam only.
        dod : float, optional
            Isocenter to detector distance, fan beam only.
        dfs : {0, inf}, optional
            Focal spot to source distance, fan beam only. ``0`` means an
            equiangular arc detector, ``inf`` a flat detector.
        units : str, optional
            Descriptive unit tag like ``'mm'``. Values are never converted.

        Examples
        --------
        >>> sg = SinoGeometry('par', nb=4, na=3)
        >>> sg.dim
        (4, 3)
        >>> sg.r
        array([-1.5, -0.5,  0.5,  1.5])
        """
        self.__beam = Beam.from_name(beam)

        self.__nb, nb_in = safe_int_conv(nb), nb
        if self.nb < 1:
            raise ValueError('`nb` must be positive, got {}'.format(nb_in))
        self.__na, na_in = safe_int_conv(na), na
        if self.na < 1:
            raise ValueError('`na` must be positive, got {}'.format(na_in))

        self.__d, d_in = float(d), d
        if not self.d > 0:
            raise ValueError('`d` must be positive, got {}'.format(d_in))

        if is_string(orbit):
            raise InvalidOrbitError(
                'symbolic `orbit` {!r} must be resolved to degrees before '
                'constructing a geometry'.format(orbit))
        self.__orbit = float(orbit)
        self.__orbit_start = float(orbit_start)
        self.__offset = float(offset)

        if strip_width is None:
            strip_width = self.d
        self.__strip_width, strip_width_in = float(strip_width), strip_width
        if self.strip_width < 0:
            raise ValueError('`strip_width` must be nonnegative, got {}'
                             ''.format(strip_width_in))

        self.__source_offset = float(source_offset)
        self.__dsd = float(dsd)
        self.__dod = float(dod)
        self.__dfs = float(dfs)

        if self.beam.is_parallel:
            for name in FAN_ONLY_FIELDS:
                if getattr(self, name) != 0:
                    raise ValueError(
                        '`{}` is only defined for fan beam geometries, got '
                        '{} for beam {!r}'.format(name, getattr(self, name),
                                                  self.beam.value))
        elif self.beam == Beam.FAN:
            if self.dfs not in (0, float('inf')):
                raise InvalidDetectorModelError(
                    '`dfs` must be 0 (arc) or inf (flat), got {}'
                    ''.format(dfs))
            if not self.dsd > 0:
                raise ValueError('`dsd` must be positive, got {}'
                                 ''.format(dsd))
        else:
            raise NotImplementedError('beam {!r} not handled'
                                      ''.format(self.beam))

        if units is not None and not is_string(units):
            raise TypeError('`units` must be a string or None, got {!r}'
                            ''.format(units))
        self.__units = units

    @property
    def beam(self):
        """Beam type of this geometry, a `Beam` member."""
        return self.__beam

    @property
    def units(self):
        """Descriptive unit tag, or ``None``."""
        return self.__units

    @property
    def nb(self):
        """Number of radial samples per view."""
        return self.__nb

    @property
    def na(self):
        """Number of views."""
        return self.__na

    @property
    def d(self):
        """Radial sample spacing."""
        return self.__d

    @property
    def orbit(self):
        """Angular coverage in degrees."""
        return self.__orbit

    @property
    def orbit_start(self):
        """Angle of the first view in degrees."""
        return self.__orbit_start

    @property
    def offset(self):
        """Detector centering offset in units of ``d``."""
        return self.__offset

    @property
    def strip_width(self):
        """Width of a detector element."""
        return self.__strip_width

    @property
    def source_offset(self):
        """Lateral source offset (fan beam)."""
        return self.__source_offset

    @property
    def dsd(self):
        """Source to detector distance (fan beam)."""
        return self.__dsd

    @property
    def dod(self):
        """Isocenter to detector distance (fan beam)."""
        return self.__dod

    @property
    def dfs(self):
        """Focal spot to source distance, ``0`` (arc) or ``inf`` (flat)."""
        return self.__dfs

    def get(self, name):
        """Return the derived quantity or primary field called ``name``.

        See Also
        --------
        sinogeom.geometry.properties.sino_geom_get
        """
        from sinogeom.geometry.properties import sino_geom_get
        return sino_geom_get(self, name)

    def replace(self, **changes):
        """Return a copy of this geometry with some primary fields replaced.

        Examples
        --------
        >>> sg = SinoGeometry('par', nb=4, na=3)
        >>> sg.replace(nb=8).dim
        (8, 3)
        >>> sg.dim
        (4, 3)
        """
        params = {name: getattr(self, name) for name in PRIMARY_FIELDS}
        for name in changes:
            if name not in params:
                raise TypeError('got an unexpected keyword argument {!r}'
                                ''.format(name))
        params.update(changes)
        return type(self)(**params)

    def __getattr__(self, name):
        """Return the derived quantity ``name``.

        Only called when regular attribute lookup fails, i.e., for names
        that are not primary fields or methods.
        """
        if name.startswith('__'):
            raise AttributeError(name)

        from sinogeom.geometry.properties import DERIVED_PROPERTIES
        try:
            func = DERIVED_PROPERTIES[name]
        except KeyError:
            raise UnknownPropertyError(
                '{!r} has no primary field or derived property {!r}'
                ''.format(type(self).__name__, name))
        return func(self)

    def __dir__(self):
        """Return primary fields, methods and derived property names."""
        from sinogeom.geometry.properties import DERIVED_PROPERTIES
        return sorted(set(super().__dir__()) | set(DERIVED_PROPERTIES))

    def __eq__(self, other):
        """Return ``self == other``."""
        if other is self:
            return True
        elif not isinstance(other, SinoGeometry):
            return False
        return all(getattr(self, name) == getattr(other, name)
                   for name in PRIMARY_FIELDS)

    def __ne__(self, other):
        """Return ``self != other``."""
        return not self.__eq__(other)

    def __hash__(self):
        """Return ``hash(self)``."""
        return hash(tuple(getattr(self, name) for name in PRIMARY_FIELDS))

    def __repr__(self):
        """Return ``repr(self)``."""
        posargs = [self.beam.value, self.nb, self.na]
        optargs = [('d', self.d, 1.0),
                   ('orbit', self.orbit, 180.0),
                   ('orbit_start', self.orbit_start, 0.0),
                   ('offset', self.offset, 0.0),
                   ('strip_width', self.strip_width, self.d),
                   ('source_offset', self.source_offset, 0.0),
                   ('dsd', self.dsd, 0.0),
                   ('dod', self.dod, 0.0),
                   ('dfs', self.dfs, 0.0),
                   ('units', self.units, None)]
        sig_str = signature_string(posargs, optargs, sep=',\n')
        return '{}(\n{}\n)'.format(self.__class__.__name__, indent(sig_str))

    __str__ = __repr__


def downsample(sg, down):
    """Return a geometry with radial and angular sampling reduced.

    The number of radial samples stays even, the spacing ``d`` and the
    detector ``strip_width`` grow by the factor ``down``. All other
    primary fields are copied.

    Parameters
    ----------
    sg : `SinoGeometry`
        Geometry to be downsampled.
    down : positive int
        Downsampling factor. For ``down == 1``, ``sg`` itself is returned.

    Returns
    -------
    sg_down : `SinoGeometry`

    Examples
    --------
    >>> sg = SinoGeometry('par', nb=128, na=200)
    >>> sg_down = downsample(sg, 3)
    >>> sg_down.dim
    (42, 67)
    >>> sg_down.d
    3.0
    >>> downsample(sg, 1) is sg
    True
    """
    down, down_in = safe_int_conv(down), down
    if down < 1:
        raise ValueError('`down` must be a positive integer, got {}'
                         ''.format(down_in))
    if down == 1:
        return sg

    nb = 2 * round(sg.nb / down / 2)  # keep it even
    na = round(sg.na / down)
    log.debug('downsampling %s geometry by %d: (%d, %d) -> (%d, %d)',
              sg.beam.value, down, sg.nb, sg.na, nb, na)
    return sg.replace(nb=nb, na=na, d=sg.d * down,
                      strip_width=sg.strip_width * down)


if __name__ == '__main__':
    from sinogeom.util.testutils import run_doctests
    run_doctests()
