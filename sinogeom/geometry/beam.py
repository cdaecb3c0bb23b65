# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Beam types of 2D sinogram geometries."""

from enum import Enum

from sinogeom.util.exceptions import UnknownVariantError


__all__ = ('Beam',)


class Beam(Enum):

    """Closed set of beam geometries a sinogram can be acquired with.

    Scanner presets like ``'ge1'`` are not beam types, they construct
    `FAN` geometries.
    """

    PAR = 'par'
    FAN = 'fan'
    MOJ = 'moj'

    @property
    def is_parallel(self):
        """``True`` for beams whose rays within a view are parallel."""
        return self in (Beam.PAR, Beam.MOJ)

    @classmethod
    def from_name(cls, name):
        """Return the beam type for ``name``.

        Parameters
        ----------
        name : `Beam` or str
            Short tag (``'par'``, ``'fan'``, ``'moj'``) or long name
            (``'parallel'``, ``'mojette'``), case-insensitive.

        Examples
        --------
        >>> Beam.from_name('parallel')
        <Beam.PAR: 'par'>
        >>> Beam.from_name(Beam.FAN)
        <Beam.FAN: 'fan'>
        """
        if isinstance(name, cls):
            return name
        try:
            key = str(name).lower()
        except TypeError:
            raise UnknownVariantError('unknown beam type {!r}'.format(name))
        beam = _ALIASES.get(key)
        if beam is None:
            raise UnknownVariantError('unknown beam type {!r}'.format(name))
        return beam


_ALIASES = {
    'par': Beam.PAR,
    'parallel': Beam.PAR,
    'fan': Beam.FAN,
    'moj': Beam.MOJ,
    'mojette': Beam.MOJ,
}
