# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Derived properties of sinogram geometries.

Derived properties are registered by name in `DERIVED_PROPERTIES`. Each
entry is a pure function of a `SinoGeometry`, evaluated anew on every
access; nothing is cached.
"""

from collections import OrderedDict
from functools import partial
from operator import attrgetter

import numpy as np

from sinogeom.geometry.beam import Beam
from sinogeom.geometry.formulas import (
    sino_geom_gamma, sino_geom_orbit_short, sino_geom_rfov, sino_geom_shape,
    sino_geom_taufun, sino_geom_unitv, sino_geom_xds, sino_geom_yds)
from sinogeom.geometry.record import PRIMARY_FIELDS, SinoGeometry, downsample
from sinogeom.util.exceptions import (
    PropertyCollisionError, UnknownPropertyError)
from sinogeom.util.utility import is_string


__all__ = ('PropertyRegistry', 'DERIVED_PROPERTIES', 'sino_geom_get',
           'sino_geom_help')


class PropertyRegistry(object):

    """Mapping from derived property names to functions of a geometry.

    Names are checked when they are registered: a name may be used only
    once and must not shadow a reserved name, e.g. a primary field.
    """

    def __init__(self, reserved=()):
        """Initialize a new instance.

        Parameters
        ----------
        reserved : sequence of str, optional
            Names that cannot be registered.
        """
        self.__reserved = frozenset(reserved)
        self.__funcs = OrderedDict()

    @property
    def reserved(self):
        """Names that cannot be registered."""
        return self.__reserved

    def add(self, name, func):
        """Register ``func`` as the derived property ``name``.

        Examples
        --------
        >>> registry = PropertyRegistry(reserved=['nb'])
        >>> registry.add('nb2', lambda sg: 2 * sg.nb)
        >>> 'nb2' in registry
        True
        """
        if not is_string(name) or not name.isidentifier():
            raise ValueError('`name` must be a valid identifier, got {!r}'
                             ''.format(name))
        if name in self.reserved:
            raise PropertyCollisionError(
                'derived property {!r} collides with a reserved name'
                ''.format(name))
        if name in self.__funcs:
            raise PropertyCollisionError(
                'derived property {!r} is already registered'.format(name))
        if not callable(func):
            raise TypeError('`func` must be callable, got {!r}'.format(func))
        self.__funcs[name] = func

    def register(self, *names):
        """Decorator registering a function under one or more names."""
        def decorator(func):
            for name in names:
                self.add(name, func)
            return func
        return decorator

    def __getitem__(self, name):
        """Return ``self[name]``."""
        return self.__funcs[name]

    def __contains__(self, name):
        """Return ``name in self``."""
        return name in self.__funcs

    def __iter__(self):
        """Return ``iter(self)``."""
        return iter(self.__funcs)

    def __len__(self):
        """Return ``len(self)``."""
        return len(self.__funcs)

    def __repr__(self):
        """Return ``repr(self)``."""
        return '{}({})'.format(self.__class__.__name__, list(self.__funcs))


_PRIMARY_GETTERS = OrderedDict(
    (name, attrgetter(name)) for name in PRIMARY_FIELDS)

RESERVED_NAMES = (set(PRIMARY_FIELDS) |
                  {name for name in dir(SinoGeometry)
                   if not name.startswith('_')})

DERIVED_PROPERTIES = PropertyRegistry(reserved=RESERVED_NAMES)
register = DERIVED_PROPERTIES.register


@register('dim')
def _dim(sg):
    """dimensions ``(nb, na)``"""
    return (sg.nb, sg.na)


@register('w')
def _w(sg):
    """'middle' sample position ``(nb - 1) / 2 + offset``"""
    return (sg.nb - 1) / 2 + sg.offset


@register('ones')
def _ones(sg):
    """array of ones with shape ``(nb, na)``"""
    return np.ones(sg.dim)


@register('zeros')
def _zeros(sg):
    """array of zeros with shape ``(nb, na)``"""
    return np.zeros(sg.dim)


@register('dr', 'ds')
def _dr(sg):
    """radial sample spacing, alias for ``d``"""
    return sg.d


@register('r', 's')
def _r(sg):
    """[nb] radial sample locations"""
    return sg.d * (np.arange(sg.nb) - sg.w)


@register('ad')
def _ad(sg):
    """[na] view angles in degrees"""
    return np.arange(sg.na) / sg.na * sg.orbit + sg.orbit_start


@register('ar')
def _ar(sg):
    """[na] view angles in radians"""
    return np.deg2rad(sg.ad)


@register('dso')
def _dso(sg):
    """source to isocenter distance ``dsd - dod``, inf for parallel beam"""
    if sg.beam == Beam.FAN:
        return sg.dsd - sg.dod
    elif sg.beam in (Beam.PAR, Beam.MOJ):
        return float('inf')
    else:
        raise NotImplementedError('beam {!r} not handled'.format(sg.beam))


register('gamma')(sino_geom_gamma)


@register('gamma_max')
def _gamma_max(sg):
    """half of the fan angle in radians"""
    return np.max(np.abs(sg.gamma))


register('orbit_short')(sino_geom_orbit_short)
register('rfov')(sino_geom_rfov)
register('xds')(sino_geom_xds)
register('yds')(sino_geom_yds)


@register('d_ang')
def _d_ang(sg):
    """[na] angle dependent radial spacing of mojette geometries"""
    return sg.d * np.maximum(np.abs(np.cos(sg.ar)), np.abs(np.sin(sg.ar)))


@register('shape')
def _shape(sg):
    """function reshaping sinograms into arrays ``(nb, na, -1)``"""
    return partial(sino_geom_shape, sg)


@register('taufun')
def _taufun(sg):
    """function ``(x, y)`` -> projected ``s / ds``, shape ``(x.size, na)``"""
    return partial(sino_geom_taufun, sg)


@register('unitv')
def _unitv(sg):
    """function ``(ib, ia)`` -> sinogram with a single nonzero ray"""
    return partial(sino_geom_unitv, sg)


@register('down')
def _down(sg):
    """function ``(down)`` -> geometry with sampling reduced by ``down``"""
    return partial(downsample, sg)


def sino_geom_get(sg, name):
    """Return the derived quantity or primary field ``name`` of ``sg``.

    Derived properties are computed from the primary fields on every
    call.

    Parameters
    ----------
    sg : `SinoGeometry`
    name : str
        Name of a derived property or primary field.

    Raises
    ------
    UnknownPropertyError
        If ``name`` is neither.

    Examples
    --------
    >>> sg = sinogeom.sino_geom('par', nb=128)
    >>> sino_geom_get(sg, 'dim')
    (128, 200)
    >>> sino_geom_get(sg, 'nb')
    128
    """
    if name in DERIVED_PROPERTIES:
        return DERIVED_PROPERTIES[name](sg)
    getter = _PRIMARY_GETTERS.get(name)
    if getter is None:
        raise UnknownPropertyError(
            'unknown property {!r}, expected one of {}'
            ''.format(name, sorted(set(PRIMARY_FIELDS) |
                                   set(DERIVED_PROPERTIES))))
    return getter(sg)


def sino_geom_help():
    """Return a description of all primary fields and derived properties."""
    def first_line(func):
        doc = (func.__doc__ or '').strip()
        return doc.splitlines()[0] if doc else ''

    lines = ['primary fields:', '']
    lines.extend('    {}'.format(name) for name in PRIMARY_FIELDS)
    lines.extend(['', 'derived properties:', ''])
    for name in DERIVED_PROPERTIES:
        doc = first_line(DERIVED_PROPERTIES[name])
        lines.append('    {:<12} {}'.format(name, doc))
    return '\n'.join(lines)


if __name__ == '__main__':
    from sinogeom.util.testutils import run_doctests
    run_doctests()
