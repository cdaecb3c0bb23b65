# Copyright 2019-2020 The sinogeom contributors
#
# This file is part of sinogeom.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Geometric formulas evaluated on sinogram geometries.

All functions here are pure functions of the primary fields of a
`SinoGeometry`. They are exposed as derived properties, see
`sinogeom.geometry.properties`.
"""

import numpy as np

from sinogeom.geometry.beam import Beam
from sinogeom.util.exceptions import (
    InvalidDetectorModelError, ShapeMismatchError, UnsupportedBeamError)


__all__ = ('sino_geom_gamma', 'sino_geom_orbit_short', 'sino_geom_rfov',
           'sino_geom_xds', 'sino_geom_yds', 'sino_geom_taufun',
           'sino_geom_unitv', 'sino_geom_shape')


def _is_arc(sg):
    """Return ``True`` for an arc detector, ``False`` for a flat one."""
    if sg.dfs == 0:
        return True
    elif sg.dfs == float('inf'):
        return False
    else:
        raise InvalidDetectorModelError('bad `dfs` {}'.format(sg.dfs))


def _unsupported(sg, what):
    return UnsupportedBeamError('{} is not defined for beam {!r}'
                                ''.format(what, sg.beam.value))


def sino_geom_gamma(sg):
    """Return the fan angles ``gamma`` of the radial samples in radians.

    For an arc detector (``dfs == 0``) the samples are equiangular,
    ``gamma = s / dsd``. For a flat detector (``dfs == inf``),
    ``gamma = arctan(s / dsd)``.

    Examples
    --------
    >>> sg = sinogeom.sino_geom('fan', nb=4, na=2, dsd=2, dod=1)
    >>> sg.gamma
    array([-0.75, -0.25,  0.25,  0.75])
    """
    if sg.beam != Beam.FAN:
        raise _unsupported(sg, '`gamma`')
    if _is_arc(sg):
        return sg.s / sg.dsd
    else:
        return np.arctan(sg.s / sg.dsd)


def sino_geom_orbit_short(sg):
    """Return the short scan orbit ``180 + fan angle`` in degrees."""
    return 180 + 2 * np.rad2deg(sg.gamma_max)


def sino_geom_rfov(sg):
    """Return the radius of the fully sampled field of view."""
    if sg.beam in (Beam.PAR, Beam.MOJ):
        return np.max(np.abs(sg.r))
    elif sg.beam == Beam.FAN:
        return sg.dso * np.sin(sg.gamma_max)
    else:
        raise _unsupported(sg, '`rfov`')


def sino_geom_xds(sg):
    """Return the x coordinates of the detector element centers.

    Coordinates are given for view angle 0 and include the
    ``source_offset``.
    """
    if sg.beam in (Beam.PAR, Beam.MOJ):
        xds = sg.s
    elif sg.beam == Beam.FAN:
        if _is_arc(sg):
            xds = sg.dsd * np.sin(sg.gamma)
        else:
            xds = sg.s
    else:
        raise _unsupported(sg, '`xds`')
    return xds + sg.source_offset


def sino_geom_yds(sg):
    """Return the y coordinates of the detector element centers.

    Coordinates are given for view angle 0.
    """
    if sg.beam in (Beam.PAR, Beam.MOJ):
        return np.zeros(sg.nb)
    elif sg.beam == Beam.FAN:
        if _is_arc(sg):
            return sg.dso - sg.dsd * np.cos(sg.gamma)
        else:
            return np.full(sg.nb, -sg.dod)
    else:
        raise _unsupported(sg, '`yds`')


def sino_geom_taufun(sg, x, y):
    """Return projected detector coordinates ``s / ds`` of points.

    This locates the center of the footprint of each point ``(x, y)``
    on the detector, for each view.

    Parameters
    ----------
    sg : `SinoGeometry`
    x, y : `array-like`
        Coordinates of the object points, arrays of equal shape.

    Returns
    -------
    tau : `numpy.ndarray`, shape ``(x.size, na)``

    Examples
    --------
    >>> sg = sinogeom.sino_geom('par', nb=8, na=2, orbit=180)
    >>> sg.taufun([1.0], [2.0])
    array([[1., 2.]])
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise ShapeMismatchError('`x` and `y` must have the same shape, '
                                 'got {} and {}'.format(x.shape, y.shape))
    x = x.reshape(-1, 1)
    y = y.reshape(-1, 1)
    ar = sg.ar[None, :]

    if sg.beam == Beam.PAR:
        return (x * np.cos(ar) + y * np.sin(ar)) / sg.dr
    elif sg.beam == Beam.MOJ:
        return (x * np.cos(ar) + y * np.sin(ar)) / sg.d_ang[None, :]
    elif sg.beam == Beam.FAN:
        xb = x * np.cos(ar) + y * np.sin(ar)
        yb = -x * np.sin(ar) + y * np.cos(ar)
        tangam = (xb - sg.source_offset) / (sg.dso - yb)
        if _is_arc(sg):
            return sg.dsd / sg.ds * np.arctan(tangam)
        else:
            return sg.dsd / sg.ds * tangam
    else:
        raise _unsupported(sg, '`taufun`')


def sino_geom_unitv(sg, ib=None, ia=None):
    """Return a sinogram with a single ray set to one.

    Parameters
    ----------
    sg : `SinoGeometry`
    ib, ia : int, optional
        Radial and view index of the ray. Default: one past the middle,
        ``round(nb / 2 + 1) - 1`` and ``round(na / 2 + 1) - 1``.

    Examples
    --------
    >>> sg = sinogeom.sino_geom('par', nb=4, na=2)
    >>> sg.unitv()
    array([[0., 0.],
           [0., 0.],
           [0., 1.],
           [0., 0.]])
    """
    if ib is None:
        ib = round(sg.nb / 2 + 1) - 1
    if ia is None:
        ia = round(sg.na / 2 + 1) - 1
    out = sg.zeros
    out[ib, ia] = 1
    return out


def sino_geom_shape(sg, sino):
    """Reshape ``sino`` into an array of shape ``(nb, na, -1)``."""
    return np.reshape(np.asarray(sino), (sg.nb, sg.na, -1))


if __name__ == '__main__':
    from sinogeom.util.testutils import run_doctests
    run_doctests()
